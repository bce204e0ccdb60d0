"""
Watson Launcher - Application state and wiring.

Holds the current settings, the application snapshot and the clipboard
service, and exposes the calls a UI layer makes: search on every
keystroke, execute on activation, clipboard history management.

Settings and the app list are immutable snapshots. reindex() and
update_settings() replace them wholesale, so a search running on another
thread keeps using the snapshot it started with.

Usage:
    app = WatsonApp.from_config()
    app.start()
    app.reindex(indexer_results)
    results = app.search("chr")
    app.execute(results[0].action)
"""

from pathlib import Path
from typing import Iterable, Optional

from loguru import logger

from watson.config import Settings
from watson.search.engine import search
from watson.search.router import AppEntry, SearchResult
from watson.services.clipboard import ClipboardEntry, ClipboardService
from watson.utils.helpers import execute_action, load_settings


class WatsonApp:
    """Launcher state shared by the UI and the search engine."""

    def __init__(self, settings: Optional[Settings] = None,
                 clipboard: Optional[ClipboardService] = None):
        self._settings = settings or Settings()
        self._apps: tuple[AppEntry, ...] = ()
        self.clipboard = clipboard or ClipboardService(
            max_entries=self._settings.clipboard.max_entries,
            poll_interval_ms=self._settings.clipboard.poll_interval_ms,
        )

    @classmethod
    def from_config(cls, path: Optional[Path] = None) -> "WatsonApp":
        """Create the app from the settings file."""
        return cls(settings=Settings.from_dict(load_settings(path)))

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def apps(self) -> tuple[AppEntry, ...]:
        return self._apps

    def start(self) -> None:
        """Begin clipboard monitoring."""
        self.clipboard.start_monitoring()
        logger.info("Watson launcher initialized")

    def update_settings(self, settings: Settings) -> None:
        self._settings = settings

    def reindex(self, apps: Iterable[AppEntry]) -> int:
        """
        Replace the application snapshot.

        Returns:
            Number of indexed applications
        """
        self._apps = tuple(apps)
        logger.debug(f"Indexed {len(self._apps)} applications")
        return len(self._apps)

    def search(self, query: str) -> list[SearchResult]:
        return search(query, self._settings, self._apps, self.clipboard)

    def execute(self, action) -> None:
        execute_action(action, self.clipboard)

    def get_clipboard_history(self) -> list[ClipboardEntry]:
        return self.clipboard.get_history()

    def search_clipboard(self, query: str) -> list[ClipboardEntry]:
        return self.clipboard.search_history(query)

    def clear_clipboard_history(self) -> None:
        self.clipboard.clear_history()

    def copy_to_clipboard(self, content: str) -> None:
        self.clipboard.copy_to_clipboard(content)
