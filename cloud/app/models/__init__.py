"""Data models for InkJournal Cloud API."""

from .notes import (
    NoteCreateRequest,
    NoteRecord,
    NoteSummary,
    NotesListResponse,
    PointModel,
    RecognizeRequest,
    RecognizeResponse,
    StrokeModel,
)

__all__ = [
    "PointModel",
    "StrokeModel",
    "NoteCreateRequest",
    "NoteRecord",
    "NoteSummary",
    "NotesListResponse",
    "RecognizeRequest",
    "RecognizeResponse",
]
