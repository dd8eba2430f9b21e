"""File storage for notes. One JSON record per note, keyed by note id."""

import logging
import os
from pathlib import Path
from typing import List, Union

from .errors import NoteNotFound, RecordUnreadable
from .models import Note, deserialize, serialize

logger = logging.getLogger("inkjournal.storage")

RECORD_SUFFIX = ".json"
TMP_SUFFIX = ".tmp"


def validate_note_id(note_id: str) -> str:
    """Reject ids that cannot be used as a plain file name."""
    if (not note_id or note_id in (".", "..")
            or "/" in note_id or "\\" in note_id or "\x00" in note_id):
        raise ValueError(f"Invalid note id: {note_id!r}")
    return note_id


class NoteStorage:
    """Stores notes as individual JSON files in a directory."""

    def __init__(self, notes_dir: Union[str, Path]):
        self.notes_dir = Path(notes_dir)
        self.notes_dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, note_id: str) -> Path:
        return self.notes_dir / f"{validate_note_id(note_id)}{RECORD_SUFFIX}"

    def save_note(self, note: Note) -> Path:
        """Write a note, fully replacing any previous record with the same id.

        The record is written to a temp file and renamed into place, so either
        the whole new record lands or the previous one is left untouched.
        """
        path = self.path_for(note.id)
        tmp_path = path.with_name(path.name + TMP_SUFFIX)

        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                f.write(serialize(note))
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, path)
        except Exception:
            if tmp_path.exists():
                tmp_path.unlink()
            raise

        logger.debug("Saved note to: %s", path)
        return path

    def load_note(self, note_id: str) -> Note:
        """Load a single note.

        Raises NoteNotFound if there is no record and RecordUnreadable if the
        record cannot be parsed.
        """
        path = self.path_for(note_id)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise NoteNotFound(note_id) from None
        return deserialize(text, source=str(path))

    def load_notes(self) -> List[Note]:
        """Load every readable note.

        Records that cannot be read or parsed are skipped so one corrupt file
        never hides the rest of the collection.
        """
        notes = []
        for path in sorted(self.notes_dir.glob(f"*{RECORD_SUFFIX}")):
            try:
                notes.append(deserialize(path.read_text(encoding="utf-8"), source=str(path)))
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("Skipping unreadable note file %s: %s", path, e)
            except RecordUnreadable as e:
                logger.warning("Skipping unreadable note record %s: %s", path, e)
        return notes

