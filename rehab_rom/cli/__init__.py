"""Command-line interface for RehabROM."""
