"""Pytest configuration and fixtures."""

import tempfile
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.config import settings
from app.main import app
from app.services.journal import get_text_recognizer
from inkjournal.errors import RecognitionUnavailable
from inkjournal.recognition import TextRecognizer


class StubRecognizer:
    """Recognition engine stand-in with canned candidates."""

    def __init__(self):
        self.candidates = ["hello world", "hello word"]
        self.ready = True
        self.fail = False

    def is_ready(self):
        return self.ready

    def ensure_ready(self):
        return self.ready

    def recognize(self, ink):
        if self.fail:
            raise RecognitionUnavailable("engine crashed")
        return list(self.candidates)


@pytest.fixture
def temp_storage_dir():
    """Create a temporary directory for note storage during tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_settings(temp_storage_dir):
    """Override settings for testing."""
    original_storage_dir = settings.storage_dir
    original_api_keys = settings.api_keys
    original_max_strokes = settings.max_strokes

    # Set test configuration
    settings.storage_dir = temp_storage_dir
    settings.api_keys = "test_key_123,test_key_456"

    yield settings

    # Restore original settings
    settings.storage_dir = original_storage_dir
    settings.api_keys = original_api_keys
    settings.max_strokes = original_max_strokes


@pytest.fixture
def recognizer():
    return StubRecognizer()


@pytest.fixture
def client(test_settings, recognizer):
    """Create a test client with the recognition engine stubbed out."""
    app.dependency_overrides[get_text_recognizer] = lambda: TextRecognizer(recognizer)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def api_key():
    """Valid API key for testing."""
    return "test_key_123"


@pytest.fixture
def headers(api_key):
    """Request headers with valid API key."""
    return {"X-API-Key": api_key}


@pytest.fixture
def stroke_payload():
    """Two captured strokes: a five-point line and a tap."""
    return [
        {"points": [{"x": float(i * 10), "y": 0.0, "timestamp": 1000 + i * 10} for i in range(5)]},
        {"points": [{"x": 60.0, "y": 5.0, "timestamp": 1100}]},
    ]
