"""
Search handlers - Pluggable candidate sources.

Each handler checks if it applies to a query and returns typed results.
"""

from .app_search import AppSearchHandler
from .clipboard import ClipboardHandler
from .commands import SystemCommandsHandler
from .web_search import WebSearchHandler

__all__ = [
    "AppSearchHandler",
    "ClipboardHandler",
    "SystemCommandsHandler",
    "WebSearchHandler",
]
