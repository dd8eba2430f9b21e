"""Recognizer-native ink structures and the conversion from note strokes."""

from dataclasses import dataclass
from typing import Iterable, Tuple

from .models import Stroke


@dataclass(frozen=True)
class InkPoint:
    x: float
    y: float
    t: int


@dataclass(frozen=True)
class InkStroke:
    points: Tuple[InkPoint, ...]


@dataclass(frozen=True)
class Ink:
    strokes: Tuple[InkStroke, ...]

    @property
    def is_empty(self) -> bool:
        return not any(s.points for s in self.strokes)


def to_recognition_input(strokes: Iterable[Stroke]) -> Ink:
    """Convert note strokes into recognizer input, preserving order and values."""
    return Ink(strokes=tuple(
        InkStroke(points=tuple(InkPoint(p.x, p.y, p.timestamp) for p in stroke.points))
        for stroke in strokes
    ))
