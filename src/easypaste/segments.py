"""Segment loading module for Easypaste.

Splits the input file into pastable segments on a delimiter. Text following
a delimiter on the same line is an inline note: it is shown in the console
preview but never pasted.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from easypaste.errors import LoadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Segment:
    text: str
    note: str | None = None


def _read_note(text: str, start: int) -> tuple[str | None, int]:
    """Return the note starting at ``start`` and the offset just past its line."""
    newline = text.find("\n", start)
    if newline == -1:
        return text[start:].strip() or None, len(text)
    return text[start:newline].strip() or None, newline + 1


def split_segments(text: str, delimiter: str) -> tuple[Segment, ...]:
    """Split ``text`` on every literal occurrence of ``delimiter``.

    The result always holds at least one segment: text without any delimiter
    (including empty text) becomes a single segment.
    """
    if not delimiter:
        raise LoadError("Delimiter must not be empty")

    segments: list[Segment] = []
    pos = 0
    while pos < len(text):
        found = text.find(delimiter, pos)
        if found == -1:
            segments.append(Segment(text[pos:]))
            break
        body = text[pos:found]
        note, pos = _read_note(text, found + len(delimiter))
        segments.append(Segment(body, note))

    if not segments:
        segments.append(Segment(text))
    return tuple(segments)


def load_segments(path: Path, delimiter: str, encoding: str = "utf-8") -> tuple[Segment, ...]:
    """Read ``path`` and split it into segments."""
    if not delimiter:
        raise LoadError("Delimiter must not be empty")
    try:
        text = Path(path).read_text(encoding=encoding)
    except FileNotFoundError as exc:
        raise LoadError(f"Input file does not exist: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadError(f"Failed to read file: {path} ({exc})") from exc

    segments = split_segments(text, delimiter)
    logger.info("Loaded %d segment(s) from %s", len(segments), path)
    return segments
