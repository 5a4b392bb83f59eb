"""REST API for RehabROM."""

from rehab_rom.api.app import create_app

__all__ = ["create_app"]
