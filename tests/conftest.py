"""pytest configuration: path management and shared fixtures."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure the project root is available on sys.path so tests can import the package.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from fastapi.testclient import TestClient  # noqa: E402

from storefront_api.app.core.seed import seed_store  # noqa: E402
from storefront_api.app.core.store import Store  # noqa: E402
from storefront_api.app.main import create_app  # noqa: E402


class FakeCompletion:
    """Stands in for the OpenAI backed client; records every call."""

    def __init__(self, reply: str = "Happy to help!", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[dict] = []

    async def complete(self, system, turns, max_tokens=250):
        self.calls.append({"system": system, "turns": list(turns), "max_tokens": max_tokens})
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def store():
    return Store()


@pytest.fixture
def seeded_store(store):
    seed_store(store)
    return store


@pytest.fixture
def completion():
    return FakeCompletion()


@pytest.fixture
def app(seeded_store, completion):
    return create_app(store=seeded_store, completion=completion)


@pytest.fixture
def client(app):
    return TestClient(app)
