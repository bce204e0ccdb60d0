# Watson Utilities Package
"""
Shared utility functions and helpers for the Watson launcher.
"""

from .helpers import execute_action, load_settings, save_settings

__all__ = ["execute_action", "load_settings", "save_settings"]
