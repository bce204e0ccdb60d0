"""
Search package - Query routing, fuzzy ranking and result assembly.

Queries are dispatched to priority-ordered handlers (clipboard, web
search, system commands, apps); mixed-mode candidates are ranked by the
fuzzy ranker and truncated by the engine.
"""

from .engine import build_router, search
from .ranker import FuzzyRanker
from .router import QueryRouter, ResultType, SearchContext, SearchHandler, SearchResult

__all__ = [
    "FuzzyRanker",
    "QueryRouter",
    "ResultType",
    "SearchContext",
    "SearchHandler",
    "SearchResult",
    "build_router",
    "search",
]
