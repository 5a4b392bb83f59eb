"""RehabROM - anatomical ROM constraints and postoperative phase engine."""

__version__ = "0.1.0"
