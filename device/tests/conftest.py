"""Pytest configuration and fixtures for the journal core."""

import pytest

from inkjournal.models import Note, Point, Stroke
from inkjournal.recognition import TextRecognizer
from inkjournal.storage import NoteStorage

from fakes import FakeRecognizer


@pytest.fixture
def fake_recognizer():
    return FakeRecognizer(candidates=["hello", "hallo"])


@pytest.fixture
def text_recognizer(fake_recognizer):
    return TextRecognizer(fake_recognizer)


@pytest.fixture
def storage(tmp_path):
    return NoteStorage(tmp_path / "notes")


@pytest.fixture
def line_points():
    """Five points along the x axis, 10ms apart."""
    return [Point(x=float(i * 10), y=0.0, timestamp=i * 10) for i in range(5)]


@pytest.fixture
def sample_note():
    return Note(
        id="note-1",
        strokes=(
            Stroke(points=(Point(1.5, 2.25, 1000), Point(3.0, 4.0, 1016))),
            Stroke(points=(Point(10.0, 10.0, 2000),)),
        ),
        recognized_text="grüße, 世界",
        timestamp=1760000000000,
    )
