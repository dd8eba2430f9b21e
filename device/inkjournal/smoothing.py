"""Stroke smoothing for InkJournal.

Operates on sequences of Point objects (x, y, timestamp).
Smoothed strokes are new objects; inputs are never modified.
"""

from typing import List, Sequence

from .config import SmoothingConfig
from .models import Point, Stroke


def smooth(points: Sequence[Point], window_size: int = 4) -> Sequence[Point]:
    """Apply a centered moving average to a stroke's points.

    The window for index ``i`` is ``[max(0, i - w//2), min(n - 1, i + w//2)]``,
    so it shrinks near both ends of the stroke instead of padding. Strokes
    shorter than ``window_size`` (taps, dots) are returned as-is, the same
    object that was passed in.

    Averaged timestamps are truncated toward zero.
    """
    if window_size <= 0:
        raise ValueError(f"window_size must be positive, got {window_size}")

    n = len(points)
    if n < window_size:
        return points

    half = window_size // 2
    result: List[Point] = []

    for i in range(n):
        start = max(0, i - half)
        end = min(n - 1, i + half)
        window = points[start:end + 1]
        count = len(window)

        result.append(Point(
            x=sum(p.x for p in window) / count,
            y=sum(p.y for p in window) / count,
            timestamp=int(sum(p.timestamp for p in window) / count),
        ))

    return result


def smooth_stroke(stroke: Stroke, window_size: int = 4) -> Stroke:
    """Smooth a Stroke, returning the same Stroke when it is too short."""
    points = smooth(stroke.points, window_size)
    if points is stroke.points:
        return stroke
    return Stroke(points=tuple(points))


def process_stroke(points: Sequence[Point], config: SmoothingConfig) -> Stroke:
    """Apply the configured smoothing to raw captured points."""
    if config.enabled:
        points = smooth(points, config.window_size)
    return Stroke(points=tuple(points))
