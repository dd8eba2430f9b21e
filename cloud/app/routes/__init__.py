"""API route handlers for InkJournal Cloud."""

from fastapi import APIRouter

from .notes import router as notes_router
from .recognize import router as recognize_router

# Combine all routers
api_router = APIRouter()
api_router.include_router(notes_router, tags=["notes"])
api_router.include_router(recognize_router, tags=["recognize"])

__all__ = ["api_router"]
