"""Notes endpoints - save, list, fetch and export notes."""

import asyncio
import logging
from functools import partial

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response

from inkjournal.errors import JournalError
from inkjournal.export import pdf_file_name

from ..models import NoteCreateRequest, NoteRecord, NoteSummary, NotesListResponse
from ..services.journal import JournalService
from .deps import check_stroke_count, get_journal, to_http_error

logger = logging.getLogger("inkjournal.routes.notes")

router = APIRouter()


@router.post("/notes", response_model=NoteRecord, status_code=status.HTTP_201_CREATED)
async def save_note(
    request: NoteCreateRequest,
    journal: JournalService = Depends(get_journal),
):
    """Save captured strokes as a note.

    Strokes are smoothed, sent for recognition and written as one record.
    Pass ``id`` to overwrite an existing note; otherwise a new id is assigned.
    Recognition problems never block the save, the note is stored with
    empty text instead.
    """
    check_stroke_count(len(request.strokes))
    raw_strokes = [s.to_points() for s in request.strokes]

    # Recognition and file I/O are blocking; keep them off the event loop
    loop = asyncio.get_event_loop()
    try:
        note = await loop.run_in_executor(
            None, partial(journal.save_strokes, raw_strokes, note_id=request.id, smooth=request.smooth)
        )
    except (JournalError, ValueError) as e:
        raise to_http_error(e)

    return NoteRecord.from_note(note)


@router.get("/notes", response_model=NotesListResponse)
async def list_notes(
    query: str = Query(default="", description="Case-insensitive search in recognized text"),
    limit: int = Query(default=100, ge=1, le=1000, description="Maximum number of results"),
    journal: JournalService = Depends(get_journal),
):
    """List notes for the authenticated user, newest first."""
    loop = asyncio.get_event_loop()
    notes = await loop.run_in_executor(None, partial(journal.list_notes, query, limit))

    return NotesListResponse(
        notes=[NoteSummary.from_note(n) for n in notes],
        total=len(notes),
    )


@router.get("/notes/{note_id}", response_model=NoteRecord)
async def get_note(
    note_id: str,
    journal: JournalService = Depends(get_journal),
):
    """Fetch a complete note record."""
    loop = asyncio.get_event_loop()
    try:
        note = await loop.run_in_executor(None, journal.get_note, note_id)
    except (JournalError, ValueError) as e:
        raise to_http_error(e)
    return NoteRecord.from_note(note)


@router.get("/notes/{note_id}/export.pdf")
async def export_note(
    note_id: str,
    journal: JournalService = Depends(get_journal),
):
    """Download a note rendered as PDF.

    Notes without any drawn points cannot be exported (422).
    """
    loop = asyncio.get_event_loop()
    try:
        note, content = await loop.run_in_executor(None, journal.export_pdf, note_id)
    except (JournalError, ValueError) as e:
        raise to_http_error(e)

    logger.info(f"Exported note {note_id} for user {journal.user_id} ({len(content)} bytes)")
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{pdf_file_name(note)}"'},
    )
