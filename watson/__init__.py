# Watson Launcher Package
"""
Keyboard launcher core for Watson.

Components:
  - Search: query routing, fuzzy ranking and result assembly
  - Clipboard: background-captured, deduplicated history
  - App: settings/app snapshots and action execution
"""

__version__ = "0.1.0-dev"
