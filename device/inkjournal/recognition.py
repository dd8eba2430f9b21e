"""Handwriting recognition for InkJournal.

The recognition engine is an external collaborator behind the small
``Recognizer`` interface. ``TextRecognizer`` is what the rest of the app
calls: it never raises, and any engine problem turns into empty text so that
saving strokes is never blocked by recognition.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Protocol

import httpx

from .config import RecognitionConfig
from .errors import RecognitionUnavailable
from .ink import Ink, to_recognition_input
from .models import Stroke

logger = logging.getLogger("inkjournal.recognition")


class Recognizer(Protocol):
    def is_ready(self) -> bool: ...

    def ensure_ready(self) -> bool: ...

    def recognize(self, ink: Ink) -> List[str]: ...


class DisabledRecognizer:
    """Recognizer used when recognition is switched off."""

    def is_ready(self) -> bool:
        return False

    def ensure_ready(self) -> bool:
        return False

    def recognize(self, ink: Ink) -> List[str]:
        raise RecognitionUnavailable("Recognition is disabled")


class InputToolsRecognizer:
    """Remote recognizer speaking the Input Tools handwriting protocol.

    Each stroke is sent as three parallel arrays ``[[xs], [ys], [ts]]``.
    A successful response looks like
    ``["SUCCESS", [["<request id>", ["best", "second", ...], ...]]]``.
    """

    def __init__(self, config: RecognitionConfig, client: Optional[httpx.Client] = None):
        self.config = config
        self._client = client or httpx.Client(timeout=config.timeout)
        self._ready = False

    def is_ready(self) -> bool:
        return self._ready

    def ensure_ready(self) -> bool:
        """Probe the endpoint once; later calls return the cached result."""
        if self._ready:
            return True

        try:
            self._post(self._build_request(Ink(strokes=())))
        except RecognitionUnavailable as e:
            logger.warning("Recognition endpoint not ready: %s", e)
            return False

        self._ready = True
        logger.info("Recognition endpoint ready at %s", self.config.url)
        return True

    def recognize(self, ink: Ink) -> List[str]:
        data = self._post(self._build_request(ink))
        try:
            candidates = data[1][0][1]
        except (IndexError, KeyError, TypeError) as e:
            raise RecognitionUnavailable(f"Malformed recognition response: {e}") from e
        if not isinstance(candidates, list):
            raise RecognitionUnavailable("Malformed recognition response: candidates is not a list")
        return [str(c) for c in candidates][:self.config.max_candidates]

    def close(self):
        self._client.close()

    def _build_request(self, ink: Ink) -> Dict[str, Any]:
        return {
            "options": "enable_pre_space",
            "requests": [{
                "writing_guide": {
                    "writing_area_width": self.config.writing_area_width,
                    "writing_area_height": self.config.writing_area_height,
                },
                "ink": [
                    [[p.x for p in s.points], [p.y for p in s.points], [p.t for p in s.points]]
                    for s in ink.strokes
                ],
                "language": self.config.language,
            }],
        }

    def _post(self, payload: Dict[str, Any]) -> Any:
        try:
            response = self._client.post(self.config.url, json=payload)
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise RecognitionUnavailable(f"Recognition request failed: {e}") from e

        if not isinstance(data, list) or not data or data[0] != "SUCCESS":
            raise RecognitionUnavailable(f"Recognition engine returned {data!r:.200}")
        return data


def build_recognizer(config: RecognitionConfig) -> Recognizer:
    if not config.enabled:
        return DisabledRecognizer()
    return InputToolsRecognizer(config)


class TextRecognizer:
    """Turns strokes into text, reporting failures as empty results."""

    def __init__(self, recognizer: Recognizer):
        self.recognizer = recognizer

    def candidates(self, strokes: Iterable[Stroke]) -> List[str]:
        """Ranked candidate transcriptions, or [] if recognition is unavailable."""
        ink = to_recognition_input(strokes)
        if ink.is_empty:
            return []

        try:
            if not self.recognizer.ensure_ready():
                logger.warning("Recognizer not ready. Skipping recognition.")
                return []
            return list(self.recognizer.recognize(ink))
        except RecognitionUnavailable as e:
            logger.error("Recognition failed: %s", e)
            return []

    def recognize(self, strokes: Iterable[Stroke]) -> str:
        """Best candidate, or an empty string."""
        candidates = self.candidates(strokes)
        return candidates[0] if candidates else ""
