"""Exception types for Easypaste."""

import sys


class EasypasteError(Exception):
    """Base class for errors reported to the user before exiting."""


class LoadError(EasypasteError):
    """The input file could not be read or split."""


class ConfigError(EasypasteError):
    """Invalid configuration file, CLI flag, or hotkey definition."""


class HotkeyError(EasypasteError):
    """The global hotkey could not be registered."""


class ClipboardError(EasypasteError):
    """The system clipboard could not be written or pasted."""


def hotkey_permission_hint() -> str:
    """Platform-specific advice shown when the keyboard hook is refused."""
    if sys.platform == "darwin":
        return (
            "Grant your terminal access under System Settings > Privacy & Security > "
            "Accessibility and Input Monitoring, then restart it."
        )
    if sys.platform.startswith("linux"):
        return "A running X session is required (DISPLAY must be set)."
    return "Check that no other program blocks global keyboard hooks."
