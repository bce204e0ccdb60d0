"""
Query Router - Decides which sources answer a query.

Handlers declare a priority (lower = checked first) and whether they are
exclusive. The first matching exclusive handler owns the query outright
(clipboard modes). Otherwise every matching non-exclusive handler
contributes candidates in priority order and the combined list is handed
to the fuzzy ranker by the engine.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Protocol

from loguru import logger

from watson.config import Settings
from watson.search.actions import (
    Action,
    CopyClipboard,
    LaunchApp,
    OpenFile,
    OpenNote,
    OpenUrl,
    RunCommand,
)
from watson.services.system_commands import SYSTEM_COMMANDS, SystemCommandDescriptor


class ResultType(str, Enum):
    APPLICATION = "application"
    WEB_SEARCH = "web_search"
    SYSTEM_COMMAND = "system_command"
    CLIPBOARD = "clipboard"
    NOTE = "note"
    FILE = "file"


_ACTION_FOR_TYPE = {
    ResultType.APPLICATION: LaunchApp,
    ResultType.WEB_SEARCH: OpenUrl,
    ResultType.SYSTEM_COMMAND: RunCommand,
    ResultType.CLIPBOARD: CopyClipboard,
    ResultType.NOTE: OpenNote,
    ResultType.FILE: OpenFile,
}


@dataclass
class SearchResult:
    """A single search result from any handler."""
    id: str
    name: str
    description: str
    result_type: ResultType
    action: Action
    icon: Optional[str] = None
    score: int = 0

    def __post_init__(self):
        expected = _ACTION_FOR_TYPE[self.result_type]
        if not isinstance(self.action, expected):
            raise ValueError(
                f"{self.result_type.value} result needs a {expected.__name__} action, "
                f"got {type(self.action).__name__}"
            )


@dataclass(frozen=True)
class AppEntry:
    """An installed application as reported by the external indexer."""
    id: str
    name: str
    path: str
    icon: Optional[str] = None


class HistorySource(Protocol):
    """Anything that can serve clipboard history (normally ClipboardService)."""

    def get_history(self) -> list: ...

    def search_history(self, query: str) -> list: ...


@dataclass(frozen=True)
class SearchContext:
    """Read-only snapshot a single query is answered against."""
    settings: Settings
    apps: tuple[AppEntry, ...] = ()
    clipboard: Optional[HistorySource] = None
    commands: tuple[SystemCommandDescriptor, ...] = SYSTEM_COMMANDS


@dataclass
class Route:
    """
    Outcome of routing a query.

    rank_query is the string the fuzzy ranker should score against, or
    None when the results are already final (clipboard modes).
    """
    mode: str
    results: list[SearchResult] = field(default_factory=list)
    rank_query: Optional[str] = None


class SearchHandler(ABC):
    """Base class for all search handlers."""

    exclusive: bool = False

    @property
    @abstractmethod
    def name(self) -> str:
        """Handler identifier."""
        ...

    @property
    @abstractmethod
    def priority(self) -> int:
        """Lower number = checked first. App search should be ~1000."""
        ...

    @abstractmethod
    def matches(self, query: str, collected: list[SearchResult]) -> bool:
        """
        Return True if this handler should process the query.

        collected holds the candidates contributed so far by higher
        priority handlers; exclusive handlers always see an empty list.
        """
        ...

    @abstractmethod
    def get_results(self, query: str, context: SearchContext) -> list[SearchResult]:
        """Return candidates for the query."""
        ...

    def rank_query(self, query: str) -> Optional[str]:
        """Override to change the string mixed-mode results are ranked by."""
        return None


class QueryRouter:
    """Routes queries to the appropriate handlers based on priority."""

    def __init__(self):
        self._handlers: list[SearchHandler] = []

    def register(self, handler: SearchHandler) -> None:
        """Register a handler and re-sort by priority."""
        self._handlers.append(handler)
        self._handlers.sort(key=lambda h: h.priority)

    def route(self, query: str, context: SearchContext) -> Route:
        """
        Classify the query and gather its candidates.

        Args:
            query: Raw, non-empty query string
            context: Snapshot of apps, settings, commands and clipboard

        Returns:
            Route with the chosen mode, the candidates, and the string the
            candidates must be ranked by (None for exclusive modes).
        """
        for handler in self._handlers:
            if handler.exclusive and handler.matches(query, []):
                logger.debug(f"Query {query!r} routed to {handler.name}")
                return Route(mode=handler.name, results=handler.get_results(query, context))

        rank_query = query
        items: list[SearchResult] = []
        for handler in self._handlers:
            if handler.exclusive:
                continue
            override = handler.rank_query(query)
            if override is not None:
                rank_query = override
            if handler.matches(query, items):
                items.extend(handler.get_results(query, context))

        logger.debug(f"Query {query!r} gathered {len(items)} mixed candidates")
        return Route(mode="mixed", results=items, rank_query=rank_query)
