"""Note data model and its JSON record format.

A note record looks like::

    {
      "id": "4f0c...",
      "strokes": [{"points": [{"x": 1.0, "y": 2.0, "timestamp": 1700000000000}]}],
      "recognizedText": "hello",
      "timestamp": 1700000000000
    }

Records are written as UTF-8 JSON; non-ASCII text is kept verbatim.
"""

import json
import time
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Tuple

from .errors import RecordUnreadable


def new_note_id() -> str:
    """Generate a fresh globally unique note id."""
    return str(uuid.uuid4())


def now_ms() -> int:
    """Current wall-clock time in milliseconds since the epoch."""
    return int(time.time() * 1000)


@dataclass(frozen=True)
class Point:
    x: float
    y: float
    timestamp: int

    def to_dict(self) -> Dict[str, Any]:
        return {"x": self.x, "y": self.y, "timestamp": self.timestamp}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Point":
        return cls(
            x=_number(data["x"], "x"),
            y=_number(data["y"], "y"),
            timestamp=_integer(data["timestamp"], "timestamp"),
        )

    @classmethod
    def from_list(cls, data: list) -> "Point":
        """Build a point from an ``[x, y, timestamp]`` triple."""
        return cls(x=_number(data[0], "x"), y=_number(data[1], "y"),
                   timestamp=_integer(data[2], "timestamp"))


@dataclass(frozen=True)
class Stroke:
    """One pointer-down to pointer-up gesture."""

    points: Tuple[Point, ...] = ()

    def __post_init__(self):
        if not isinstance(self.points, tuple):
            object.__setattr__(self, "points", tuple(self.points))

    def __len__(self) -> int:
        return len(self.points)

    def to_dict(self) -> Dict[str, Any]:
        return {"points": [p.to_dict() for p in self.points]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Stroke":
        points = data["points"]
        if not isinstance(points, list):
            raise TypeError("points must be a list")
        return cls(points=tuple(Point.from_dict(p) for p in points))


@dataclass(frozen=True)
class Note:
    """An immutable handwritten note.

    Editing state lives with the caller (see ``EditingSession``); a note is
    rebuilt and written as a whole on every save.
    """

    id: str = field(default_factory=new_note_id)
    strokes: Tuple[Stroke, ...] = ()
    recognized_text: str = ""
    timestamp: int = field(default_factory=now_ms)

    def __post_init__(self):
        if not isinstance(self.strokes, tuple):
            object.__setattr__(self, "strokes", tuple(self.strokes))

    @property
    def point_count(self) -> int:
        return sum(len(s.points) for s in self.strokes)

    def iter_points(self) -> Iterable[Point]:
        for stroke in self.strokes:
            yield from stroke.points

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "strokes": [s.to_dict() for s in self.strokes],
            "recognizedText": self.recognized_text,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Note":
        if not isinstance(data, dict):
            raise TypeError("note record must be an object")
        strokes = data["strokes"]
        if not isinstance(strokes, list):
            raise TypeError("strokes must be a list")
        return cls(
            id=_string(data["id"], "id"),
            strokes=tuple(Stroke.from_dict(s) for s in strokes),
            recognized_text=_string(data["recognizedText"], "recognizedText"),
            timestamp=_integer(data["timestamp"], "timestamp"),
        )


def serialize(note: Note) -> str:
    """Encode a note as its JSON record."""
    return json.dumps(note.to_dict(), ensure_ascii=False)


def deserialize(text: str, source: str = "") -> Note:
    """Decode a JSON record into a Note.

    Raises RecordUnreadable when the text is not a valid note record.
    """
    try:
        return Note.from_dict(json.loads(text))
    except (ValueError, KeyError, TypeError, RecursionError) as e:
        raise RecordUnreadable(f"Unreadable note record: {e}", source=source) from e


def _number(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be a number")
    return float(value)


def _integer(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise TypeError(f"{name} must be an integer")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{name} must be an integer")
        return int(value)
    if not isinstance(value, int):
        raise TypeError(f"{name} must be an integer")
    return value


def _string(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string")
    return value
