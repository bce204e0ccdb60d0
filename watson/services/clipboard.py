"""
Clipboard Service - Bounded, deduplicated clipboard history.

A background thread polls the system clipboard (every 500ms by default)
and records new text at the front of the history:

  - identical content is never stored twice; re-copying moves it to the top
  - the list is capped at max_entries, oldest dropped first
  - text written by copy_to_clipboard() is never recaptured

Two locks are used. _sentinel_lock covers clipboard I/O together with
the last-seen text, so a poll and a programmatic copy can never
interleave. _history_lock covers the entry list only, so readers are not
held up by a slow clipboard read. Lock order is sentinel then history.
"""

import threading
import time
from dataclasses import dataclass
from datetime import datetime, timezone

import pyperclip
from loguru import logger

PREVIEW_LENGTH = 100
DEFAULT_MAX_ENTRIES = 50
DEFAULT_POLL_INTERVAL_MS = 500


class ClipboardError(Exception):
    """The system clipboard could not be read or written."""


@dataclass(frozen=True)
class ClipboardEntry:
    id: str
    content: str
    preview: str
    timestamp: datetime


def make_preview(text: str) -> str:
    """First 100 characters on one line."""
    return text[:PREVIEW_LENGTH].replace("\n", " ").replace("\r", "")


class PyperclipBackend:
    """System clipboard access through pyperclip."""

    def get_text(self) -> str:
        try:
            return pyperclip.paste() or ""
        except (pyperclip.PyperclipException, UnicodeDecodeError, OSError) as e:
            raise ClipboardError(str(e)) from e

    def set_text(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except (pyperclip.PyperclipException, OSError) as e:
            raise ClipboardError(str(e)) from e


class ClipboardService:
    """
    Service holding clipboard history and the capture loop.

    Methods:
        start_monitoring(): Spawn the polling thread
        get_history(): Snapshot, most recent first
        search_history(query): Case-insensitive substring filter
        clear_history(): Drop every entry
        copy_to_clipboard(content): Write to the clipboard without recapturing
    """

    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES,
                 poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS,
                 backend=None):
        self.max_entries = max_entries
        self.poll_interval = poll_interval_ms / 1000
        self._backend = backend or PyperclipBackend()

        self._entries: list[ClipboardEntry] = []
        self._last_content = ""
        self._last_id_ms = 0

        self._history_lock = threading.Lock()
        self._sentinel_lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def start_monitoring(self) -> None:
        """Start the capture thread. Calling again while it runs does nothing."""
        if self._thread is not None and self._thread.is_alive():
            return

        self._stop = threading.Event()
        self._thread = threading.Thread(
            target=self._monitor,
            args=(self._stop,),
            name="clipboard-monitor",
            daemon=True,
        )
        self._thread.start()

    def stop(self, timeout: float | None = None) -> None:
        """Stop the capture thread and wait for it to exit."""
        self._stop.set()
        thread, self._thread = self._thread, None
        if thread is not None and thread is not threading.current_thread():
            thread.join(self.poll_interval + 1.0 if timeout is None else timeout)

    def _monitor(self, stop: threading.Event) -> None:
        try:
            self._backend.get_text()
        except ClipboardError:
            logger.exception("Clipboard unavailable, history monitoring disabled")
            return

        logger.debug(f"Clipboard monitoring started ({self.poll_interval:.2f}s interval)")
        while not stop.is_set():
            try:
                self.poll_once()
            except Exception:
                logger.exception("Clipboard capture tick failed, skipping")
            stop.wait(self.poll_interval)

    def poll_once(self) -> ClipboardEntry | None:
        """
        Run a single capture tick.

        Returns:
            The new entry, or None if nothing new was on the clipboard
        """
        with self._sentinel_lock:
            try:
                text = self._backend.get_text()
            except ClipboardError as e:
                logger.debug(f"Clipboard read failed: {e}")
                return None

            if not text or text == self._last_content:
                return None
            self._last_content = text

            entry = ClipboardEntry(
                id=self._next_id(),
                content=text,
                preview=make_preview(text),
                timestamp=datetime.now(timezone.utc),
            )
            self._record(entry)

        logger.debug(f"Captured clipboard entry {entry.id}: {entry.preview[:30]!r}")
        return entry

    def _next_id(self) -> str:
        now_ms = time.time_ns() // 1_000_000
        self._last_id_ms = max(now_ms, self._last_id_ms + 1)
        return f"clip:{self._last_id_ms}"

    def _record(self, entry: ClipboardEntry) -> None:
        """Insert at the front, replacing any entry with the same content."""
        with self._history_lock:
            self._entries = [e for e in self._entries if e.content != entry.content]
            self._entries.insert(0, entry)
            del self._entries[self.max_entries:]

    def get_history(self) -> list[ClipboardEntry]:
        with self._history_lock:
            return list(self._entries)

    def search_history(self, query: str) -> list[ClipboardEntry]:
        needle = query.lower()
        with self._history_lock:
            return [e for e in self._entries if needle in e.content.lower()]

    def clear_history(self) -> None:
        with self._history_lock:
            self._entries.clear()

    def copy_to_clipboard(self, content: str) -> None:
        """
        Put content on the system clipboard.

        The capture loop treats content as already seen, so it does not
        come back as a new history entry.

        Raises:
            ClipboardError: The clipboard backend rejected the write
        """
        with self._sentinel_lock:
            self._backend.set_text(content)
            self._last_content = content

