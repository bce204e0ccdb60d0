"""
Search Engine - Per-keystroke entry point.

Routes the query, runs the fuzzy ranker over mixed-mode candidates and
truncates to the configured result count.
"""

from typing import Iterable, Optional

from loguru import logger

from watson.config import Settings
from watson.search.handlers import (
    AppSearchHandler,
    ClipboardHandler,
    SystemCommandsHandler,
    WebSearchHandler,
)
from watson.search.ranker import FuzzyRanker
from watson.search.router import AppEntry, HistorySource, QueryRouter, SearchContext, SearchResult
from watson.services.system_commands import SYSTEM_COMMANDS, SystemCommandDescriptor


def build_router() -> QueryRouter:
    """Router with the standard handler set registered."""
    router = QueryRouter()
    router.register(ClipboardHandler())
    router.register(WebSearchHandler())
    router.register(SystemCommandsHandler())
    router.register(AppSearchHandler())
    return router


_default_router = build_router()
_default_ranker = FuzzyRanker()


def search(
    query: str,
    settings: Settings,
    apps: Iterable[AppEntry] = (),
    clipboard: Optional[HistorySource] = None,
    commands: Iterable[SystemCommandDescriptor] = SYSTEM_COMMANDS,
    router: Optional[QueryRouter] = None,
    ranker: Optional[FuzzyRanker] = None,
) -> list[SearchResult]:
    """
    Produce the ordered result list for a query.

    Args:
        query: Raw text from the search box
        settings: Settings snapshot (web searches, max_results)
        apps: Application snapshot from the indexer
        clipboard: History source for the cb/clip modes
        commands: System command table

    Returns:
        At most settings.search.max_results results, best first.
        An empty query yields an empty list.
    """
    if not query:
        return []

    context = SearchContext(
        settings=settings,
        apps=tuple(apps),
        clipboard=clipboard,
        commands=tuple(commands),
    )
    route = (router or _default_router).route(query, context)

    results = route.results
    if route.rank_query is not None:
        # Fixed scores from web search and '>' commands are overwritten here too
        results = (ranker or _default_ranker).search(route.rank_query, results)

    logger.debug(f"Query {query!r} ({route.mode}): {len(results)} results")
    return results[:max(settings.search.max_results, 0)]
