"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from howto_bot.app import app
from howto_bot.config import get_settings
from howto_bot.slack.client import reset_client

TEST_SIGNING_SECRET = "test_signing_secret_1234"
TEST_BOT_TOKEN = "xoxb-test"


@pytest.fixture(autouse=True)
def _settings_env(monkeypatch: pytest.MonkeyPatch):
    """Provide a known token/secret and clear the settings cache around each test."""
    for name in ("TOKEN", "SECRET", "PORT", "WIKIHOW_API_URL", "WIKIHOW_BASE_URL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("SLACK_SIGNING_SECRET", TEST_SIGNING_SECRET)
    monkeypatch.setenv("SLACK_BOT_TOKEN", TEST_BOT_TOKEN)
    get_settings.cache_clear()
    reset_client()
    yield
    get_settings.cache_clear()
    reset_client()


@pytest.fixture
def client():
    """TestClient with the app lifespan running."""
    with TestClient(app) as test_client:
        yield test_client
