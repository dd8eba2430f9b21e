"""Journal service — per-user note storage, recognition and export.

MVP: Local filesystem storage, one directory per user
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Iterable, List, Optional

from inkjournal.config import SmoothingConfig
from inkjournal.export import PdfExporter
from inkjournal.library import NotesLibrary
from inkjournal.models import Note, Point
from inkjournal.recognition import TextRecognizer, build_recognizer
from inkjournal.session import EditingSession
from inkjournal.smoothing import process_stroke
from inkjournal.storage import NoteStorage, validate_note_id

from ..config import settings

logger = logging.getLogger("inkjournal.journal")


@lru_cache(maxsize=1)
def get_text_recognizer() -> TextRecognizer:
    """Shared recognizer built from settings on first use."""
    return TextRecognizer(build_recognizer(settings.recognition_config()))


def close_text_recognizer():
    """Release the shared recognizer's HTTP client, if one was built."""
    if not get_text_recognizer.cache_info().currsize:
        return
    engine = get_text_recognizer().recognizer
    close = getattr(engine, "close", None)
    if close is not None:
        close()
        logger.info("Closed recognition engine client")
    get_text_recognizer.cache_clear()


def count_journals(base_dir: Path) -> int:
    """Number of per-user note directories under ``base_dir``."""
    if not base_dir.is_dir():
        return 0
    return sum(1 for p in base_dir.iterdir() if p.is_dir())


class JournalService:
    """Note operations scoped to a single user."""

    def __init__(self, user_id: str, text_recognizer: TextRecognizer,
                 base_dir: Optional[Path] = None):
        self.user_id = user_id
        self.text_recognizer = text_recognizer
        self.base_dir = base_dir or settings.storage_dir
        self.storage = NoteStorage(self.base_dir / user_id)
        self.library = NotesLibrary(self.storage)

    def _smoothing(self, smooth: bool) -> SmoothingConfig:
        config = settings.smoothing_config()
        config.enabled = config.enabled and smooth
        return config

    def save_strokes(self, raw_strokes: Iterable[List[Point]], note_id: Optional[str] = None,
                     smooth: bool = True) -> Note:
        """Smooth, recognize and save captured strokes as a note.

        With ``note_id`` the existing record is fully replaced; otherwise a
        new note id is generated.
        """
        session = EditingSession(self.text_recognizer, self.storage, self._smoothing(smooth))
        if note_id is not None:
            session.note_id = validate_note_id(note_id)

        for points in raw_strokes:
            session.add_stroke(points)

        note = session.save()
        logger.info(f"Saved note {note.id} for user {self.user_id}")
        return note

    def recognize(self, raw_strokes: Iterable[List[Point]], smooth: bool = True) -> List[str]:
        config = self._smoothing(smooth)
        strokes = [process_stroke(points, config) for points in raw_strokes]
        return self.text_recognizer.candidates(strokes)

    def list_notes(self, query: str = "", limit: int = 100) -> List[Note]:
        notes = self.library.search(query) if query else self.library.load()
        return notes[:limit]

    def get_note(self, note_id: str) -> Note:
        return self.library.get(validate_note_id(note_id))

    def export_pdf(self, note_id: str) -> tuple[Note, bytes]:
        note = self.get_note(note_id)
        exporter = PdfExporter(smoothing_window=settings.smoothing_window)
        return note, exporter.render(note)
