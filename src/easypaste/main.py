"""Easypaste main entry point.

Event-driven loop: hotkey -> next segment -> clipboard -> paste -> preview.
"""

import logging
import queue
from typing import Callable

from easypaste.config import Config
from easypaste.cursor import Advance, PlaybackCursor
from easypaste.errors import ClipboardError, HotkeyError, hotkey_permission_hint
from easypaste.segments import Segment, load_segments

logger = logging.getLogger(__name__)


def print_preview(segment: Segment | None) -> None:
    """Show the segment the next hotkey press will paste."""
    if segment is None or not segment.text:
        return
    print("Next segment preview:")
    print(segment.text)
    if segment.note is not None:
        print(f"[Note: {segment.note}]")
    print("---")


def dispatch(
    cursor: PlaybackCursor,
    *,
    paste: bool,
    copy_text: Callable[[str], None],
    paste_clipboard: Callable[[], None],
) -> Advance:
    """Advance the cursor once and hand the segment text to the clipboard."""
    result = cursor.advance()
    if result.already_done:
        logger.info("Playback already finished, ignoring hotkey")
        return result

    text = result.segment.text
    if not text:
        logger.info("Skipping empty segment %d/%d", cursor.position, len(cursor))
        return result

    try:
        copy_text(text)
    except ClipboardError as exc:
        logger.error("%s", exc)
        return result
    logger.info("Set clipboard to: %.50s...", text)

    if paste:
        try:
            paste_clipboard()
        except ClipboardError as exc:
            logger.error("%s", exc)
        else:
            logger.info("Pasted clipboard contents")
    return result


def run(config: Config) -> None:
    """Load the file, register the hotkey and play segments until done."""
    cursor = PlaybackCursor(load_segments(config.file_path, config.delimiter))

    # Imported here so loading and parsing work without a keyboard backend
    from easypaste.clipboard import copy_text, default_paste_delay_ms, paste_clipboard

    try:
        from easypaste.hotkey import EVENT_HOTKEY, HotkeyListener, format_hotkey, parse_hotkey
    except ImportError as exc:
        raise HotkeyError(
            f"Failed to load the keyboard backend: {exc}. {hotkey_permission_hint()}"
        ) from exc

    hotkey = parse_hotkey(config.hotkey_modifiers, config.hotkey_key)
    delay_ms = config.paste_delay_ms
    if delay_ms is None:
        delay_ms = default_paste_delay_ms()

    event_queue: queue.Queue[str] = queue.Queue()
    listener = HotkeyListener(hotkey, event_queue)
    listener.start()

    try:
        print(f"Registered hotkey: {format_hotkey(hotkey)}")
        print("Easypaste is running. Press the configured hotkey to paste next segment.")
        print(f"File: {config.file_path}")
        print(f"Delimiter: '{config.delimiter}'")
        print(f"Segments: {len(cursor)}")
        print(f"Auto-paste: {str(config.paste).lower()}")
        print("Press Ctrl+C to exit\n")

        print_preview(cursor.peek())

        while True:
            try:
                event = event_queue.get(timeout=0.5)
            except queue.Empty:
                continue

            if event != EVENT_HOTKEY:
                continue

            result = dispatch(
                cursor,
                paste=config.paste,
                copy_text=copy_text,
                paste_clipboard=lambda: paste_clipboard(delay_ms),
            )
            if result.done:
                logger.info("All segments processed. Exiting...")
                print("All segments processed.")
                break
            print_preview(cursor.peek())
    finally:
        listener.stop()
        logger.info("Unregistered hotkey")
