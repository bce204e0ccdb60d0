"""
Backend services for the Watson launcher.

Services hold long-lived state and talk to the system: clipboard history
and the system command registry.
"""

from .clipboard import ClipboardEntry, ClipboardError, ClipboardService
from .system_commands import SYSTEM_COMMANDS, ActionError, SystemCommandDescriptor, execute_command

__all__ = [
    "ActionError",
    "ClipboardEntry",
    "ClipboardError",
    "ClipboardService",
    "SYSTEM_COMMANDS",
    "SystemCommandDescriptor",
    "execute_command",
]
