"""Notes library: listing and searching saved notes."""

from typing import List

from .models import Note
from .storage import NoteStorage


class NotesLibrary:
    def __init__(self, storage: NoteStorage):
        self.storage = storage

    def load(self) -> List[Note]:
        """All readable notes, newest first."""
        notes = self.storage.load_notes()
        notes.sort(key=lambda n: n.timestamp, reverse=True)
        return notes

    def search(self, query: str) -> List[Note]:
        """Notes whose recognized text contains ``query``, ignoring case."""
        needle = query.casefold()
        return [n for n in self.load() if needle in n.recognized_text.casefold()]

    def get(self, note_id: str) -> Note:
        return self.storage.load_note(note_id)
