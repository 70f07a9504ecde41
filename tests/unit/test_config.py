import pytest

from src.config import Settings


def test_log_level_is_normalized() -> None:
    settings = Settings(LOG_LEVEL="debug")  # type: ignore

    assert settings.LOG_LEVEL == "DEBUG"


def test_cors_origins_from_comma_separated_env(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:5173, http://example.com")

    settings = Settings()

    assert settings.CORS_ORIGINS == ["http://localhost:5173", "http://example.com"]


def test_tasks_file_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASKS_FILE", "/data/tasks.json")

    assert Settings().TASKS_FILE == "/data/tasks.json"
