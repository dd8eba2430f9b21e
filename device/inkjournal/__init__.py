"""InkJournal — handwritten notes with smoothing, recognition and PDF export."""

__version__ = "0.1.0"
