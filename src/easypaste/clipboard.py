"""Clipboard and auto-paste module for Easypaste.

Copies text to the system clipboard and simulates Ctrl+V (Cmd+V on macOS)
to paste into the currently focused window.
"""

import sys
import time

import pyperclip

from easypaste.errors import ClipboardError


def default_paste_delay_ms() -> int:
    """Delay between clipboard write and paste keystroke for this platform."""
    # Windows clipboard listeners need noticeably longer to pick up the change
    if sys.platform == "win32":
        return 2000
    return 100


def copy_text(text: str) -> None:
    """Copy text to the system clipboard."""
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as exc:
        raise ClipboardError(f"Failed to set clipboard: {exc}") from exc


def paste_clipboard(delay_ms: int) -> None:
    """Wait ``delay_ms`` then simulate the platform paste shortcut."""
    try:
        from pynput.keyboard import Controller, Key
    except ImportError as exc:
        raise ClipboardError(f"Failed to paste clipboard contents: {exc}") from exc

    keyboard = Controller()
    time.sleep(delay_ms / 1000)

    modifier = Key.cmd if sys.platform == "darwin" else Key.ctrl
    try:
        keyboard.press(modifier)
        keyboard.press("v")
        keyboard.release("v")
        keyboard.release(modifier)
    except (Controller.InvalidKeyException, Controller.InvalidCharacterException) as exc:
        raise ClipboardError(f"Failed to paste clipboard contents: {exc!r}") from exc
