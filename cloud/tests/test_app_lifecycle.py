"""Tests for application startup and shutdown."""

from fastapi import status
from fastapi.testclient import TestClient

from app.main import app
from app.services.journal import close_text_recognizer, count_journals, get_text_recognizer
from inkjournal.recognition import InputToolsRecognizer


def test_startup_creates_storage_dir(test_settings):
    test_settings.storage_dir = test_settings.storage_dir / "fresh"

    with TestClient(app):
        assert test_settings.storage_dir.is_dir()


def test_shutdown_closes_recognition_client(test_settings, monkeypatch):
    monkeypatch.setattr(test_settings, "recognition_enabled", True)
    get_text_recognizer.cache_clear()
    engine = get_text_recognizer().recognizer
    assert isinstance(engine, InputToolsRecognizer)

    with TestClient(app):
        pass

    assert engine._client.is_closed
    assert get_text_recognizer.cache_info().currsize == 0


def test_close_without_recognizer_is_noop():
    get_text_recognizer.cache_clear()
    close_text_recognizer()
    assert get_text_recognizer.cache_info().currsize == 0


def test_count_journals(tmp_path):
    assert count_journals(tmp_path / "missing") == 0

    (tmp_path / "user_a").mkdir()
    (tmp_path / "user_b").mkdir()
    (tmp_path / "stray.json").write_text("{}")

    assert count_journals(tmp_path) == 2


def test_health_reports_recognition(client, test_settings):
    response = client.get("/health")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["recognition"] == "disabled"
