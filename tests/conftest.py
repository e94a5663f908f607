"""
Test configuration and fixtures for the Push Relay API.

Firebase is never initialised during tests; ``firebase_admin.messaging.send``
is replaced by an in-process fake that records every message it receives.
"""

import os
import threading
from typing import Generator

os.environ["FIREBASE_ENABLED"] = "false"

import pytest
from fastapi.testclient import TestClient
from firebase_admin import messaging

from app.models.notification_outcome import notification_outcome_model


class FakeFCM:
    """Stands in for the delivery platform's ``send`` call."""

    def __init__(self):
        self.messages: list[messaging.Message] = []
        self.dry_runs: list[bool] = []
        self.receipt = "msg-id-1"
        self.error: Exception | None = None
        # Cleared by a test to hold sends in flight until it is set again
        self.release = threading.Event()
        self.release.set()

    def send(self, message, dry_run=False, app=None):
        self.messages.append(message)
        self.dry_runs.append(dry_run)
        self.release.wait(timeout=10)
        if self.error is not None:
            raise self.error
        return self.receipt


@pytest.fixture
def fake_fcm(monkeypatch) -> Generator[FakeFCM, None, None]:
    fake = FakeFCM()
    monkeypatch.setattr(messaging, "send", fake.send)
    yield fake
    fake.release.set()


@pytest.fixture(autouse=True)
def clear_outcomes():
    notification_outcome_model.outcomes.clear()
    yield
    notification_outcome_model.outcomes.clear()


@pytest.fixture(scope="session")
def test_app():
    """Create FastAPI test application."""
    from app.main import app

    return app


@pytest.fixture
def client(test_app, fake_fcm) -> Generator[TestClient, None, None]:
    """
    Test client with the lifespan running, so the scheduler is started on the
    client's event loop and stopped (dropping armed timers) after each test.
    """
    with TestClient(test_app) as test_client:
        yield test_client
