"""Global hotkey listener module for Easypaste.

Listens for the configured key combination (Ctrl+Shift+B by default).
Dispatches events to the main thread via a queue.Queue.
"""

import logging
import queue
import sys

from pynput.keyboard import Key, KeyCode, Listener

from easypaste.errors import ConfigError, HotkeyError, hotkey_permission_hint

logger = logging.getLogger(__name__)

# Event type sent to the main thread
EVENT_HOTKEY = "hotkey"

_MODIFIERS = {
    "CMD": Key.cmd,
    "WIN": Key.cmd,
    "META": Key.cmd,
    "SUPER": Key.cmd,
    "CTRL": Key.ctrl,
    "CONTROL": Key.ctrl,
    "ALT": Key.alt,
    "OPTION": Key.alt,
    "SHIFT": Key.shift,
}

_NAMED_KEYS = {
    "SPACE": Key.space,
    "ENTER": Key.enter,
    "RETURN": Key.enter,
    "TAB": Key.tab,
    **{f"F{n}": getattr(Key, f"f{n}") for n in range(1, 13)},
}

_MODIFIER_VARIANTS = {
    Key.shift_l: Key.shift,
    Key.shift_r: Key.shift,
    Key.ctrl_l: Key.ctrl,
    Key.ctrl_r: Key.ctrl,
    Key.alt_l: Key.alt,
    Key.alt_r: Key.alt,
    Key.alt_gr: Key.alt,
    Key.cmd_l: Key.cmd,
    Key.cmd_r: Key.cmd,
}

_SHIFTED_DIGITS = dict(zip("!@#$%^&*()", "1234567890"))

_MODIFIER_NAMES = {Key.cmd: "Cmd", Key.ctrl: "Ctrl", Key.alt: "Alt", Key.shift: "Shift"}


def parse_hotkey(modifiers: list[str], key: str) -> frozenset:
    """Build the set of pynput keys that must be held to fire the hotkey."""
    combo = set()
    for name in modifiers:
        modifier = _MODIFIERS.get(name.upper())
        if modifier is None:
            logger.warning("Unknown modifier: %s", name)
            continue
        combo.add(modifier)

    name = key.upper()
    if name in _NAMED_KEYS:
        combo.add(_NAMED_KEYS[name])
    elif len(name) == 1 and name.isascii() and name.isalnum():
        combo.add(KeyCode.from_char(name.lower()))
    else:
        raise ConfigError(f"Unsupported key: {key}")
    return frozenset(combo)


def format_hotkey(hotkey: frozenset) -> str:
    """Render a hotkey as e.g. 'Ctrl+Shift+B'."""
    parts = [label for k, label in _MODIFIER_NAMES.items() if k in hotkey]
    for k in hotkey:
        if k in _MODIFIER_NAMES:
            continue
        if isinstance(k, KeyCode) and k.char is not None:
            parts.append(k.char.upper())
        else:
            parts.append(k.name.upper())
    return "+".join(parts)


class HotkeyListener:
    """Listens for the hotkey and puts EVENT_HOTKEY on the queue once per press.

    Defenses:
    - Ignores injected (synthetic) key events so our own paste keystroke
      cannot retrigger the hotkey
    - Holding the combination down fires only once until a member is released
    """

    def __init__(self, hotkey: frozenset, event_queue: queue.Queue) -> None:
        self._hotkey = hotkey
        self._queue = event_queue
        self._pressed_keys: set = set()
        self._hotkey_handled = False
        self._listener: Listener | None = None

    def _on_press(self, key: Key | KeyCode, injected: bool) -> None:
        if injected:
            return

        normalized = self._normalize(key)
        self._pressed_keys.add(normalized)

        if not self._hotkey.issubset(self._pressed_keys):
            return

        # Prevent repeated firing while keys are held down
        if self._hotkey_handled:
            return
        self._hotkey_handled = True

        logger.info("Hotkey triggered: %s", format_hotkey(self._hotkey))
        self._queue.put(EVENT_HOTKEY)

    def _on_release(self, key: Key | KeyCode, injected: bool) -> None:
        if injected:
            return

        normalized = self._normalize(key)
        self._pressed_keys.discard(normalized)

        if normalized in self._hotkey:
            self._hotkey_handled = False

    @staticmethod
    def _normalize(key: Key | KeyCode) -> Key | KeyCode:
        """Normalize left/right modifier variants and character case."""
        if key in _MODIFIER_VARIANTS:
            return _MODIFIER_VARIANTS[key]
        if not isinstance(key, KeyCode):
            return key

        # Windows virtual key codes for 0-9 and A-Z equal their ASCII codes
        # and do not change with Shift held
        vk = key.vk
        if sys.platform == "win32" and vk is not None and (0x30 <= vk <= 0x39 or 0x41 <= vk <= 0x5A):
            return KeyCode.from_char(chr(vk).lower())

        char = key.char
        if char is None or len(char) != 1:
            return key
        # With Ctrl held some platforms report control characters (Ctrl+B -> '\x02')
        if 1 <= ord(char) <= 26:
            return KeyCode.from_char(chr(ord(char) + 96))
        # Elsewhere Shift+digit arrives as the shifted symbol (US layout)
        char = _SHIFTED_DIGITS.get(char, char)
        return KeyCode.from_char(char.lower())

    def start(self) -> None:
        """Start the global keyboard listener (runs in a daemon thread)."""
        self._listener = Listener(
            on_press=self._on_press,
            on_release=self._on_release,
        )
        self._listener.daemon = True
        self._listener.start()
        # A backend that cannot hook the keyboard ends the thread right away
        self._listener.join(timeout=0.2)

        if getattr(self._listener, "IS_TRUSTED", True) is False or not self._listener.is_alive():
            self.stop()
            raise HotkeyError(
                f"Failed to register hotkey {format_hotkey(self._hotkey)}. {hotkey_permission_hint()}"
            )
        logger.info("Registered hotkey: %s", format_hotkey(self._hotkey))

    def stop(self) -> None:
        """Stop the global keyboard listener and clean up the hook."""
        if self._listener is not None:
            self._listener.stop()
            self._listener.join(timeout=0.5)
            self._listener = None

