"""Exception types shared across InkJournal."""


class JournalError(Exception):
    """Base class for InkJournal errors."""


class RecordUnreadable(JournalError):
    """A stored note record could not be parsed."""

    def __init__(self, message: str, source: str = ""):
        super().__init__(message)
        self.source = source


class NoteNotFound(JournalError):
    """No stored record exists for the requested note id."""

    def __init__(self, note_id: str):
        super().__init__(f"Note {note_id} not found")
        self.note_id = note_id


class RecognitionUnavailable(JournalError):
    """The handwriting recognition engine is not ready or failed."""


class NothingToExport(JournalError):
    """The note has no drawable points."""
