"""Recognize endpoint - preview recognition without saving."""

import asyncio
import logging
from functools import partial

from fastapi import APIRouter, Depends

from ..models import RecognizeRequest, RecognizeResponse
from ..services.journal import JournalService
from .deps import check_stroke_count, get_journal

logger = logging.getLogger("inkjournal.routes.recognize")

router = APIRouter()


@router.post("/recognize", response_model=RecognizeResponse)
async def recognize_strokes(
    request: RecognizeRequest,
    journal: JournalService = Depends(get_journal),
):
    """Recognize handwriting in the given strokes.

    Returns the ranked candidates and the preferred text. When the
    recognition engine is unavailable both are empty.
    """
    check_stroke_count(len(request.strokes))
    raw_strokes = [s.to_points() for s in request.strokes]

    loop = asyncio.get_event_loop()
    candidates = await loop.run_in_executor(
        None, partial(journal.recognize, raw_strokes, smooth=request.smooth)
    )

    return RecognizeResponse(text=candidates[0] if candidates else "", candidates=candidates)
