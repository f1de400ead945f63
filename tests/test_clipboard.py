"""Tests for the clipboard and paste helpers."""

import sys
from unittest.mock import Mock

import pyperclip
import pytest

from easypaste import clipboard
from easypaste.errors import ClipboardError


def test_copy_text_writes_clipboard(monkeypatch):
    copy = Mock()
    monkeypatch.setattr(pyperclip, "copy", copy)

    clipboard.copy_text("segment")

    copy.assert_called_once_with("segment")


def test_copy_text_wraps_pyperclip_errors(monkeypatch):
    monkeypatch.setattr(pyperclip, "copy", Mock(side_effect=pyperclip.PyperclipException("no xclip")))

    with pytest.raises(ClipboardError, match="no xclip"):
        clipboard.copy_text("segment")


@pytest.mark.parametrize("platform, expected", [("win32", 2000), ("darwin", 100), ("linux", 100)])
def test_default_paste_delay(monkeypatch, platform, expected):
    monkeypatch.setattr(clipboard.sys, "platform", platform)

    assert clipboard.default_paste_delay_ms() == expected


@pytest.mark.parametrize("platform", ["darwin", "linux"])
def test_paste_clipboard_taps_platform_shortcut(monkeypatch, platform):
    keyboard = pytest.importorskip("pynput.keyboard", exc_type=ImportError)
    controller = Mock()
    sleep = Mock()
    monkeypatch.setattr(keyboard, "Controller", Mock(return_value=controller))
    monkeypatch.setattr(clipboard.time, "sleep", sleep)
    monkeypatch.setattr(clipboard.sys, "platform", platform)

    clipboard.paste_clipboard(250)

    modifier = keyboard.Key.cmd if platform == "darwin" else keyboard.Key.ctrl
    sleep.assert_called_once_with(0.25)
    assert [c.args for c in controller.press.call_args_list] == [(modifier,), ("v",)]
    assert [c.args for c in controller.release.call_args_list] == [("v",), (modifier,)]


def test_paste_clipboard_invalid_key_raises_clipboard_error(monkeypatch):
    keyboard = pytest.importorskip("pynput.keyboard", exc_type=ImportError)
    controller = Mock()
    controller.press.side_effect = keyboard.Controller.InvalidKeyException("v")
    factory = Mock(return_value=controller)
    factory.InvalidKeyException = keyboard.Controller.InvalidKeyException
    factory.InvalidCharacterException = keyboard.Controller.InvalidCharacterException
    monkeypatch.setattr(keyboard, "Controller", factory)
    monkeypatch.setattr(clipboard.time, "sleep", Mock())

    with pytest.raises(ClipboardError, match="paste"):
        clipboard.paste_clipboard(0)


def test_paste_clipboard_without_keyboard_backend(monkeypatch):
    monkeypatch.setitem(sys.modules, "pynput.keyboard", None)

    with pytest.raises(ClipboardError, match="Failed to paste"):
        clipboard.paste_clipboard(0)
