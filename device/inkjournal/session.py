"""Editing session, the in-memory working state behind the drawing canvas."""

import logging
from typing import Iterable, List, Optional, Tuple

from .config import SmoothingConfig
from .models import Note, Point, Stroke, new_note_id, now_ms
from .recognition import TextRecognizer
from .smoothing import process_stroke
from .storage import NoteStorage

logger = logging.getLogger("inkjournal.session")


class EditingSession:
    """Strokes being drawn, with undo/redo and save.

    Owned by a single editing context; nothing here is thread-safe.
    """

    def __init__(self, text_recognizer: TextRecognizer, storage: NoteStorage,
                 smoothing: Optional[SmoothingConfig] = None):
        self.text_recognizer = text_recognizer
        self.storage = storage
        self.smoothing = smoothing or SmoothingConfig()
        self.note_id = new_note_id()
        self.recognized_text: Optional[str] = None
        self._undo: List[Stroke] = []
        self._redo: List[Stroke] = []

    @property
    def strokes(self) -> Tuple[Stroke, ...]:
        return tuple(self._undo)

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    def add_stroke(self, points: Iterable[Point]) -> Stroke:
        """Smooth a captured gesture and append it."""
        stroke = process_stroke(list(points), self.smoothing)
        self._undo.append(stroke)
        self._redo.clear()
        return stroke

    def undo(self) -> Optional[Stroke]:
        if not self._undo:
            return None
        stroke = self._undo.pop()
        self._redo.append(stroke)
        return stroke

    def redo(self) -> Optional[Stroke]:
        if not self._redo:
            return None
        stroke = self._redo.pop()
        self._undo.append(stroke)
        return stroke

    def open_note(self, note: Note):
        """Continue editing an existing note; later saves overwrite it."""
        self._undo = list(note.strokes)
        self._redo.clear()
        self.note_id = note.id
        self.recognized_text = None

    def clear(self):
        """Drop all strokes and start a new note."""
        self._undo.clear()
        self._redo.clear()
        self.recognized_text = None
        self.note_id = new_note_id()

    def recognize_current_text(self) -> str:
        """Recognize the current strokes without saving."""
        self.recognized_text = self.text_recognizer.recognize(self._undo)
        return self.recognized_text

    def save(self, clear_after_save: bool = True) -> Note:
        """Recognize and persist the current strokes.

        The stroke buffer is only cleared once the record has been written;
        if writing fails the strokes stay in place and the error propagates.
        """
        strokes = self.strokes
        text = self.text_recognizer.recognize(strokes)
        note = Note(id=self.note_id, strokes=strokes, recognized_text=text, timestamp=now_ms())

        self.storage.save_note(note)
        logger.info("Saved note %s (%d strokes)", note.id, len(strokes))

        if clear_after_save:
            self.clear()
        return note
