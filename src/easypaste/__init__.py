"""Easypaste: paste a pre-loaded file segment by segment with a global hotkey."""

__version__ = "1.0.0"
