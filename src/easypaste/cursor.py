"""Playback cursor module for Easypaste.

Tracks progress through the loaded segments.

State machine: loaded(0) -> loaded(1) -> ... -> done
- advance() hands out the segment at the current position and moves on
- after the last segment the cursor is done and advance() is a no-op
"""

import enum
from typing import NamedTuple, Sequence

from easypaste.segments import Segment


class CursorState(enum.Enum):
    LOADED = "loaded"
    DONE = "done"


class Advance(NamedTuple):
    """Result of one advance: the segment to dispatch and whether playback is over."""

    segment: Segment | None
    done: bool

    @property
    def already_done(self) -> bool:
        return self.segment is None


class PlaybackCursor:
    """Forward-only position over an ordered segment sequence."""

    def __init__(self, segments: Sequence[Segment]) -> None:
        if not segments:
            raise ValueError("PlaybackCursor needs at least one segment")
        self._segments = tuple(segments)
        self._position = 0

    def __len__(self) -> int:
        return len(self._segments)

    @property
    def position(self) -> int:
        return self._position

    @property
    def remaining(self) -> int:
        return len(self._segments) - self._position

    @property
    def done(self) -> bool:
        return self._position >= len(self._segments)

    @property
    def state(self) -> CursorState:
        return CursorState.DONE if self.done else CursorState.LOADED

    def peek(self) -> Segment | None:
        """Return the segment the next advance() will hand out, or None when done."""
        if self.done:
            return None
        return self._segments[self._position]

    def advance(self) -> Advance:
        if self.done:
            return Advance(None, True)
        segment = self._segments[self._position]
        self._position += 1
        return Advance(segment, self.done)
