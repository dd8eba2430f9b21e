"""Tests for the note model and its JSON record format."""

import json

import pytest

from inkjournal.errors import RecordUnreadable
from inkjournal.models import Note, Point, Stroke, deserialize, serialize


def test_record_field_names(sample_note):
    data = json.loads(serialize(sample_note))

    assert set(data) == {"id", "strokes", "recognizedText", "timestamp"}
    assert data["strokes"][0] == {
        "points": [
            {"x": 1.5, "y": 2.25, "timestamp": 1000},
            {"x": 3.0, "y": 4.0, "timestamp": 1016},
        ]
    }
    assert data["timestamp"] == 1760000000000


def test_non_ascii_text_written_verbatim(sample_note):
    assert "grüße, 世界" in serialize(sample_note)


@pytest.mark.parametrize("note", [
    Note(id="empty", strokes=(), recognized_text="", timestamp=0),
    Note(id="tap", strokes=(Stroke(points=(Point(0.1, 0.2, 5),)),), recognized_text=".", timestamp=7),
    Note(
        id="multi",
        strokes=(
            Stroke(points=(Point(0.1, 0.7, 1), Point(1 / 3, 2 / 3, 2))),
            Stroke(),
            Stroke(points=(Point(-5.5, 1e-9, 3),)),
        ),
        recognized_text="Привет 👋",
        timestamp=1760000000123,
    ),
], ids=["empty-strokes", "single-point", "multi-stroke"])
def test_round_trip(note):
    assert deserialize(serialize(note)) == note


def test_note_gets_unique_id_and_timestamp():
    a = Note()
    b = Note()
    assert a.id and b.id and a.id != b.id
    assert a.timestamp > 0


def test_sequences_frozen_as_tuples():
    note = Note(strokes=[Stroke(points=[Point(1.0, 2.0, 3)])])
    assert isinstance(note.strokes, tuple)
    assert isinstance(note.strokes[0].points, tuple)
    assert note.point_count == 1


def test_integer_coordinates_accepted():
    text = '{"id": "a", "strokes": [{"points": [{"x": 1, "y": 2, "timestamp": 3}]}], ' \
           '"recognizedText": "", "timestamp": 4}'
    note = deserialize(text)
    assert note.strokes[0].points[0] == Point(1.0, 2.0, 3)


def test_unknown_keys_ignored():
    text = '{"id": "a", "strokes": [], "recognizedText": "", "timestamp": 4, "color": "red"}'
    assert deserialize(text) == Note(id="a", strokes=(), recognized_text="", timestamp=4)


@pytest.mark.parametrize("text", [
    "",
    "not json",
    "[]",
    '{"id": "a", "strokes": [], "timestamp": 1}',
    '{"id": 5, "strokes": [], "recognizedText": "", "timestamp": 1}',
    '{"id": "a", "strokes": {}, "recognizedText": "", "timestamp": 1}',
    '{"id": "a", "strokes": [], "recognizedText": "", "timestamp": 1.5}',
    '{"id": "a", "strokes": [], "recognizedText": "", "timestamp": true}',
    '{"id": "a", "strokes": [{"points": [{"x": "1", "y": 2, "timestamp": 3}]}], '
    '"recognizedText": "", "timestamp": 1}',
    '{"id": "a", "strokes": [{"points": [{"x": 1, "y": 2}]}], "recognizedText": "", "timestamp": 1}',
])
def test_malformed_records_unreadable(text):
    with pytest.raises(RecordUnreadable):
        deserialize(text)


def test_point_from_list():
    assert Point.from_list([1, 2.5, 30]) == Point(1.0, 2.5, 30)
