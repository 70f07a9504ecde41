from pathlib import Path
from typing import Generator
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pytest_mock import MockerFixture

from src.config import Settings
from src.main import app as main_app


@pytest.fixture
def tasks_file(tmp_path: Path) -> Path:
    return tmp_path / "tasks.json"


@pytest.fixture
def test_settings(tasks_file: Path) -> Settings:
    return Settings(
        TASKS_FILE=str(tasks_file),
        OTEL_ENABLED=False,
        CORS_ENABLED=False,
    )


@pytest.fixture(autouse=True)
def patch_settings(test_settings: Settings, mocker: MockerFixture) -> None:
    mocker.patch("src.main.settings", test_settings)


@pytest.fixture
def test_app() -> FastAPI:
    return main_app


@pytest.fixture
def test_client(test_app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(test_app) as client:
        yield client
