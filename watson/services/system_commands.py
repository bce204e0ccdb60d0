"""
System Commands - Static registry of power/session commands.

Commands are matched by alias in search and executed by id. Execution
shells out to the usual Linux session tools; nothing here waits on the
spawned process.
"""

import subprocess
from dataclasses import dataclass

from loguru import logger


class ActionError(Exception):
    """An activated result could not be carried out."""


@dataclass(frozen=True)
class SystemCommandDescriptor:
    id: str
    name: str
    aliases: tuple[str, ...]
    description: str
    requires_confirmation: bool = False


SYSTEM_COMMANDS: tuple[SystemCommandDescriptor, ...] = (
    SystemCommandDescriptor("cmd:lock", "Lock", ("lock", "lockscreen"), "Lock the screen"),
    SystemCommandDescriptor("cmd:sleep", "Sleep", ("sleep",), "Put computer to sleep"),
    SystemCommandDescriptor(
        "cmd:restart", "Restart", ("restart", "reboot"), "Restart the computer",
        requires_confirmation=True,
    ),
    SystemCommandDescriptor(
        "cmd:shutdown", "Shutdown", ("shutdown", "poweroff"), "Shut down the computer",
        requires_confirmation=True,
    ),
    SystemCommandDescriptor(
        "cmd:logout", "Log Out", ("logout", "signout"), "Log out current user",
        requires_confirmation=True,
    ),
    SystemCommandDescriptor(
        "cmd:emptytrash", "Empty Trash", ("emptytrash", "trash"), "Empty the trash/recycle bin",
        requires_confirmation=True,
    ),
    SystemCommandDescriptor("cmd:mute", "Mute", ("mute",), "Mute system audio"),
    SystemCommandDescriptor("cmd:unmute", "Unmute", ("unmute",), "Unmute system audio"),
)

_COMMAND_LINES = {
    "cmd:lock": ["loginctl", "lock-session"],
    "cmd:sleep": ["systemctl", "suspend"],
    "cmd:restart": ["systemctl", "reboot"],
    "cmd:shutdown": ["systemctl", "poweroff"],
    "cmd:logout": ["loginctl", "terminate-session", "self"],
    "cmd:emptytrash": ["gio", "trash", "--empty"],
    "cmd:mute": ["pactl", "set-sink-mute", "@DEFAULT_SINK@", "1"],
    "cmd:unmute": ["pactl", "set-sink-mute", "@DEFAULT_SINK@", "0"],
}


def get_command(command_id: str) -> SystemCommandDescriptor | None:
    """Look up a descriptor by id."""
    for cmd in SYSTEM_COMMANDS:
        if cmd.id == command_id:
            return cmd
    return None


def execute_command(command_id: str) -> None:
    """
    Spawn the process behind a system command.

    Args:
        command_id: Descriptor id, e.g. "cmd:lock"

    Raises:
        ActionError: Unknown id, or the tool could not be started
    """
    argv = _COMMAND_LINES.get(command_id)
    if argv is None:
        raise ActionError(f"Unknown command: {command_id}")

    try:
        subprocess.Popen(
            argv,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError as e:
        logger.exception(f"Failed to execute command: {command_id}")
        raise ActionError(f"Could not run {argv[0]}: {e}") from e

    logger.debug(f"Executed {command_id} via {argv[0]}")
