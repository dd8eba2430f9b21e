"""Note request/response models.

Field names follow the persisted note record (``recognizedText``), so a
``NoteRecord`` response is byte-compatible with what is stored on disk.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, StrictInt

from inkjournal.models import Note, Point, Stroke


class PointModel(BaseModel):
    x: float
    y: float
    timestamp: StrictInt

    def to_point(self) -> Point:
        return Point(x=self.x, y=self.y, timestamp=self.timestamp)


class StrokeModel(BaseModel):
    points: List[PointModel] = Field(default_factory=list)

    def to_points(self) -> List[Point]:
        return [p.to_point() for p in self.points]

    @classmethod
    def from_stroke(cls, stroke: Stroke) -> "StrokeModel":
        return cls(points=[PointModel(x=p.x, y=p.y, timestamp=p.timestamp) for p in stroke.points])


class NoteCreateRequest(BaseModel):
    """Raw captured strokes for a new note, or a replacement for an existing one."""
    id: Optional[str] = Field(default=None, description="Existing note id to overwrite")
    strokes: List[StrokeModel] = Field(default_factory=list)
    smooth: bool = Field(default=True, description="Apply stroke smoothing before saving")

    class Config:
        json_schema_extra = {
            "example": {
                "strokes": [
                    {"points": [
                        {"x": 10.0, "y": 20.0, "timestamp": 1760000000000},
                        {"x": 12.5, "y": 21.0, "timestamp": 1760000000016},
                    ]}
                ],
            }
        }


class NoteRecord(BaseModel):
    """A complete note in its persisted form."""
    id: str
    strokes: List[StrokeModel]
    recognized_text: str = Field(alias="recognizedText")
    timestamp: int

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "strokes": [{"points": [{"x": 10.0, "y": 20.0, "timestamp": 1760000000000}]}],
                "recognizedText": "hello",
                "timestamp": 1760000000500,
            }
        }

    @classmethod
    def from_note(cls, note: Note) -> "NoteRecord":
        return cls(
            id=note.id,
            strokes=[StrokeModel.from_stroke(s) for s in note.strokes],
            recognized_text=note.recognized_text,
            timestamp=note.timestamp,
        )


class NoteSummary(BaseModel):
    """Single item in the notes list."""
    id: str
    recognized_text: str = Field(alias="recognizedText")
    timestamp: int
    stroke_count: int
    point_count: int

    class Config:
        populate_by_name = True

    @classmethod
    def from_note(cls, note: Note) -> "NoteSummary":
        return cls(
            id=note.id,
            recognized_text=note.recognized_text,
            timestamp=note.timestamp,
            stroke_count=len(note.strokes),
            point_count=note.point_count,
        )


class NotesListResponse(BaseModel):
    notes: List[NoteSummary]
    total: int


class RecognizeRequest(BaseModel):
    strokes: List[StrokeModel]
    smooth: bool = True


class RecognizeResponse(BaseModel):
    text: str
    candidates: List[str]
