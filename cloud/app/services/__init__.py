"""Business logic services for InkJournal Cloud."""

from .journal import JournalService, get_text_recognizer

__all__ = ["JournalService", "get_text_recognizer"]
