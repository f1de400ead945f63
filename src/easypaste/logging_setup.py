"""Logging setup module for Easypaste.

Console-only logging; user-facing output (banner, previews) stays on print.
"""

import logging
import sys


def setup_logging(verbose: bool = False) -> None:
    """Configure console logging: WARNING by default, INFO with --verbose."""
    level = logging.INFO if verbose else logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("[%(asctime)s] [%(levelname)s] %(message)s"))
    root_logger.addHandler(console_handler)

    logging.info("Logging initialized: level=%s", logging.getLevelName(level))
