"""Shared route dependencies and error mapping."""

from fastapi import Depends, HTTPException, status

from inkjournal.errors import NoteNotFound, NothingToExport, RecordUnreadable
from inkjournal.recognition import TextRecognizer

from ..auth import get_current_user
from ..config import settings
from ..services.journal import JournalService, get_text_recognizer


def get_journal(
    user_id: str = Depends(get_current_user),
    text_recognizer: TextRecognizer = Depends(get_text_recognizer),
) -> JournalService:
    return JournalService(user_id, text_recognizer)


def check_stroke_count(count: int):
    if count > settings.max_strokes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Too many strokes ({count}), limit is {settings.max_strokes}",
        )


def to_http_error(error: Exception) -> HTTPException:
    """Map journal errors onto HTTP responses."""
    if isinstance(error, NoteNotFound):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, RecordUnreadable):
        return HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Note record is unreadable",
        )
    if isinstance(error, NothingToExport):
        return HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(error))
    if isinstance(error, ValueError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error))
