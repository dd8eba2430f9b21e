"""InkJournal Cloud — HTTP API for handwritten notes."""

__version__ = "0.1.0"
