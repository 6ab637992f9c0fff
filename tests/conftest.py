from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from resume_studio.api.main import create_app
from resume_studio.data.db import Database
from resume_studio.services.llm import LLMProvider
from resume_studio.services.storage import SqlPersistenceGateway


class MockProvider(LLMProvider):
    """LLM provider that records the last prompt and returns a canned reply."""

    def __init__(self) -> None:
        self.last_prompt: str | None = None
        self.last_options: dict | None = None
        self.response = "Mock LLM response"

    def send_prompt(self, prompt: str, options: dict) -> str:
        self.last_prompt = prompt
        self.last_options = options
        return self.response


class StubEnhancer:
    """Enhancement backend returning canned text and recording its calls."""

    def __init__(self, improved: str = "Improved text", generated: str = "Generated bullet"):
        self.improved = improved
        self.generated = generated
        self.calls: list[tuple[str, ...]] = []

    def improve(self, text: str, context: str) -> str:
        self.calls.append(("improve", text, context))
        return self.improved

    def generate(self, topic: str) -> str:
        self.calls.append(("generate", topic))
        return self.generated


class FailingEnhancer:
    """Enhancement backend whose every call raises."""

    def improve(self, text: str, context: str) -> str:
        raise RuntimeError("backend unavailable")

    def generate(self, topic: str) -> str:
        raise RuntimeError("backend unavailable")


@pytest.fixture
def database(tmp_path: Path) -> Iterator[Database]:
    """Temporary SQLite database, opened for the duration of the test."""
    db = Database(f"sqlite:///{(tmp_path / 'test.db').as_posix()}").open()
    yield db
    db.close()


@pytest.fixture
def gateway(database: Database) -> SqlPersistenceGateway:
    return SqlPersistenceGateway(database)


@pytest.fixture
def stub_enhancer() -> StubEnhancer:
    return StubEnhancer()


@pytest.fixture
def failing_enhancer() -> FailingEnhancer:
    return FailingEnhancer()


@pytest.fixture
def mock_provider() -> MockProvider:
    return MockProvider()


@pytest.fixture
def client(tmp_path: Path, stub_enhancer: StubEnhancer) -> Iterator[TestClient]:
    """API client over a temporary database and a stub enhancer."""
    db = Database(f"sqlite:///{(tmp_path / 'api.db').as_posix()}")
    app = create_app(database=db, enhancer=stub_enhancer)
    with TestClient(app) as test_client:
        yield test_client
