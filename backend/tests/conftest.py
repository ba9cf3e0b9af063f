"""Shared fixtures for the dashboard API tests.

Uses FastAPI TestClient (in-memory, no network). Calls to the chat-completion
API are replaced per test, so no OPENAI_API_KEY is needed.
"""

from __future__ import annotations

import os
import sys

import pytest

# Ensure project root is on sys.path
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


@pytest.fixture(autouse=True)
def _isolate_state(monkeypatch):
    """Live API mode and an empty quiz store for every test."""
    from backend.dashboard.routers import literary_terms
    from backend.dashboard.settings import settings

    monkeypatch.setattr(settings, "use_mock_data", False)
    literary_terms._sessions.clear()
    yield
    literary_terms._sessions.clear()


@pytest.fixture()
def client():
    """FastAPI TestClient; no network, no server startup needed."""
    from fastapi.testclient import TestClient

    from backend.dashboard.main import app

    return TestClient(app)


@pytest.fixture()
def mock_mode(monkeypatch):
    from backend.dashboard.settings import settings

    monkeypatch.setattr(settings, "use_mock_data", True)


@pytest.fixture()
def upstream(monkeypatch):
    """Replace one LLM proxy function and record how it was called.

    Usage: ``calls = upstream("check_grammar", result)``; pass an exception
    instance as the result to make the fake raise it.
    """
    from backend.dashboard import llm

    def install(name, result):
        calls = []

        async def fake(*args, **kwargs):
            calls.append((args, kwargs))
            if isinstance(result, BaseException):
                raise result
            return result

        monkeypatch.setattr(llm, name, fake)
        return calls

    return install
