"""
Shared fixtures for the chat relay tests.

The Gemini chat model is replaced by the recording fake in tests/fakes.py.
"""

from __future__ import annotations

import sys
import threading

import pytest
from fastapi.testclient import TestClient

from agent.relay import ChatRelay
from app.main import create_app
from config.settings import Settings
from tests.fakes import RecordingChatModel


@pytest.fixture
def settings() -> Settings:
    return Settings(gemini_api_key="AIzaTestKey1234567890", port=3100)


@pytest.fixture
def fake_llm() -> RecordingChatModel:
    return RecordingChatModel()


@pytest.fixture
def relay(settings: Settings, fake_llm: RecordingChatModel) -> ChatRelay:
    return ChatRelay(settings, llm=fake_llm)


@pytest.fixture
def restore_hooks(monkeypatch):
    """Undo the process-wide hooks installed during app startup."""
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    monkeypatch.setattr(threading, "excepthook", threading.excepthook)


@pytest.fixture
def client(settings: Settings, relay: ChatRelay, restore_hooks):
    app = create_app(settings=settings, relay=relay)
    with TestClient(app) as test_client:
        yield test_client
