"""
Shared test fixtures for the Watson launcher test suite.

Provides a real settings TOML file, an in-memory clipboard backend and
small application snapshots (no real clipboard or desktop needed).
"""

import pytest
import toml

from watson.config import Settings
from watson.search.router import AppEntry
from watson.services.clipboard import ClipboardError, ClipboardService


class FakeClipboardBackend:
    """In-memory stand-in for the system clipboard."""

    def __init__(self, text="", available=True):
        self.text = text
        self.available = available
        self.writes = []

    def get_text(self):
        if not self.available:
            raise ClipboardError("no clipboard")
        return self.text

    def set_text(self, text):
        if not self.available:
            raise ClipboardError("no clipboard")
        self.text = text
        self.writes.append(text)


@pytest.fixture
def fake_backend():
    return FakeClipboardBackend()


@pytest.fixture
def clipboard(fake_backend):
    """ClipboardService driven through poll_once() (no thread started)."""
    return ClipboardService(max_entries=50, poll_interval_ms=10, backend=fake_backend)


@pytest.fixture
def user_copies(clipboard, fake_backend):
    """Simulate the user copying each text in turn, one poll per copy."""
    def _copy(*texts):
        for text in texts:
            fake_backend.text = text
            clipboard.poll_once()
    return _copy


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def apps():
    return (
        AppEntry("chrome", "Chrome", "/usr/bin/google-chrome", "chrome.png"),
        AppEntry("chromium", "Chromium", "/usr/bin/chromium"),
        AppEntry("firefox", "Firefox", "/usr/bin/firefox"),
    )


@pytest.fixture
def tmp_settings(tmp_path):
    """Create a real settings TOML file with all sections."""
    settings_path = tmp_path / "config.toml"
    data = {
        "search": {"max_results": 5, "fuzzy_threshold": 0.4},
        "clipboard": {"max_entries": 20, "poll_interval_ms": 250},
        "web_searches": [
            {"name": "Example", "keyword": "x", "url": "https://x/?q={query}"},
            {
                "name": "Jira",
                "keyword": "jira",
                "url": "https://{instance}.atlassian.net/browse/{query}",
                "requires_setup": True,
            },
        ],
    }
    settings_path.write_text(toml.dumps(data))
    return settings_path
