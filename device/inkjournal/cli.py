"""InkJournal command line — entry point for working with saved notes."""

import argparse
import json
import logging
import logging.handlers
import os
import sys
from typing import List, Optional

from . import __version__
from .config import InkJournalConfig
from .errors import JournalError, NothingToExport
from .export import PdfExporter, format_timestamp
from .library import NotesLibrary
from .models import Note, Point, now_ms, serialize
from .recognition import TextRecognizer, build_recognizer
from .session import EditingSession
from .storage import NoteStorage

logger = logging.getLogger("inkjournal.cli")


def setup_logging(config: InkJournalConfig):
    """Configure logging with file rotation."""
    root_logger = logging.getLogger("inkjournal")
    root_logger.setLevel(getattr(logging, config.logging.level.upper(), logging.INFO))
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if config.logging.file:
        log_dir = os.path.dirname(config.logging.file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            config.logging.file,
            maxBytes=config.logging.max_size_mb * 1024 * 1024,
            backupCount=config.logging.backup_count,
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # Console goes to stderr so command output on stdout stays clean
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(logging.WARNING)
    root_logger.addHandler(console_handler)


def load_raw_strokes(path: str) -> List[List[Point]]:
    """Read captured strokes from a JSON file.

    The file holds a list of strokes; each stroke is either a list of
    ``[x, y, timestamp]`` triples or an object with a ``points`` list of
    ``{"x", "y", "timestamp"}`` objects.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    strokes = []
    for raw in data:
        if isinstance(raw, dict):
            strokes.append([Point.from_dict(p) for p in raw["points"]])
        else:
            strokes.append([Point.from_list(p) for p in raw])
    return strokes


def _print_note_line(note: Note):
    text = note.recognized_text.replace("\n", " ") or "(No recognized text)"
    print(f"{note.id}  {format_timestamp(note.timestamp)}  {text}")


def cmd_list(args, config: InkJournalConfig, storage: NoteStorage) -> int:
    library = NotesLibrary(storage)
    notes = library.search(args.query) if args.query else library.load()
    for note in notes:
        _print_note_line(note)
    return 0


def cmd_show(args, config: InkJournalConfig, storage: NoteStorage) -> int:
    print(serialize(storage.load_note(args.note_id)))
    return 0


def cmd_import(args, config: InkJournalConfig, storage: NoteStorage) -> int:
    try:
        raw_strokes = load_raw_strokes(args.file)
    except (OSError, ValueError, KeyError, TypeError, IndexError) as e:
        print(f"Could not read strokes from {args.file}: {e}", file=sys.stderr)
        return 1

    recognizer = TextRecognizer(build_recognizer(config.recognition))
    session = EditingSession(recognizer, storage, config.smoothing)
    if args.note_id:
        session.note_id = args.note_id
    for points in raw_strokes:
        session.add_stroke(points)

    note = session.save()
    _print_note_line(note)
    return 0


def cmd_recognize(args, config: InkJournalConfig, storage: NoteStorage) -> int:
    note = storage.load_note(args.note_id)
    recognizer = TextRecognizer(build_recognizer(config.recognition))
    text = recognizer.recognize(note.strokes)

    updated = Note(id=note.id, strokes=note.strokes, recognized_text=text, timestamp=now_ms())
    storage.save_note(updated)
    print(text or "(No recognized text)")
    return 0


def cmd_export(args, config: InkJournalConfig, storage: NoteStorage) -> int:
    note = storage.load_note(args.note_id)
    exporter = PdfExporter(config.export, smoothing_window=config.smoothing.window_size)
    try:
        path = exporter.export(note, args.output_dir)
    except NothingToExport as e:
        print(str(e), file=sys.stderr)
        return 1
    print(f"PDF saved to {path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="inkjournal",
        description="InkJournal - handwritten notes with recognition and PDF export",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-c", "--config",
        help="Path to config file",
        default=None,
    )
    parser.add_argument(
        "--notes-dir",
        help="Override notes directory",
        default=None,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("list", help="List saved notes, newest first")
    p.add_argument("-q", "--query", help="Only notes whose text contains QUERY", default="")
    p.set_defaults(func=cmd_list)

    p = sub.add_parser("show", help="Print a note record")
    p.add_argument("note_id")
    p.set_defaults(func=cmd_show)

    p = sub.add_parser("import", help="Create a note from a JSON file of captured strokes")
    p.add_argument("file")
    p.add_argument("--id", dest="note_id", help="Save under this note id", default=None)
    p.set_defaults(func=cmd_import)

    p = sub.add_parser("recognize", help="Re-run recognition on a saved note")
    p.add_argument("note_id")
    p.set_defaults(func=cmd_recognize)

    p = sub.add_parser("export", help="Export a note as PDF")
    p.add_argument("note_id")
    p.add_argument("-o", "--output-dir", help="Directory for the PDF", default=None)
    p.set_defaults(func=cmd_export)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    config = InkJournalConfig.load(args.config)
    if args.notes_dir:
        config.storage.notes_dir = args.notes_dir

    setup_logging(config)
    logger.debug("InkJournal v%s, notes_dir=%s", __version__, config.storage.notes_dir)

    storage = NoteStorage(config.storage.notes_dir)
    try:
        return args.func(args, config, storage)
    except (JournalError, ValueError) as e:
        print(str(e), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
