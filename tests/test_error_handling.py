"""
Tests for error handling across services and handlers.

Verifies graceful degradation when things go wrong:
- Odd or malformed queries
- Clipboard backend failures
- Unknown actions
"""

import pytest

from watson.config import Settings
from watson.search.engine import search
from watson.search.ranker import FuzzyRanker
from watson.services.clipboard import ClipboardError


class TestQueryRobustness:
    """No query string should make search() raise."""

    @pytest.mark.parametrize("query", [
        " ", ">", "> ", "cb ", "clip  ", "{query}", "%", "g ", "\n", "İstanbul", "a" * 500,
    ])
    def test_odd_queries_do_not_raise(self, query, apps, clipboard):
        results = search(query, Settings(), apps, clipboard)
        assert isinstance(results, list)

    def test_whitespace_query_gets_fallback(self, apps):
        # Every name contains no space, so nothing matches a lone space
        assert search(" ", Settings(), apps) == []

    def test_ranker_handles_unicode_lowering(self):
        assert FuzzyRanker().score("i", "İstanbul") is not None


class TestClipboardFailures:
    """Clipboard problems degrade rather than crash."""

    def test_empty_history_when_backend_down(self, clipboard, fake_backend):
        fake_backend.available = False
        clipboard.poll_once()
        assert clipboard.get_history() == []
        assert clipboard.search_history("x") == []
        assert search("cb", Settings(), clipboard=clipboard) == []

    def test_copy_surfaces_error(self, clipboard, fake_backend):
        fake_backend.available = False
        with pytest.raises(ClipboardError):
            clipboard.copy_to_clipboard("x")
