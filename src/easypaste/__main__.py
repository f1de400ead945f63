import argparse
import sys
from pathlib import Path

from easypaste.config import resolve_config
from easypaste.errors import EasypasteError
from easypaste.logging_setup import setup_logging
from easypaste.main import run


def cli():
    """CLI entry point with argument parsing."""
    parser = argparse.ArgumentParser(
        prog="easypaste",
        description="Paste a text file segment by segment with a global hotkey",
    )
    parser.add_argument(
        "-f",
        "--file",
        type=Path,
        default=None,
        help="text file containing delimited segments (default: file_path from config, else input.txt)",
    )
    parser.add_argument(
        "-d",
        "--delimiter",
        default=None,
        help="segment delimiter (default: %%%%%%)",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="TOML configuration file",
    )
    parser.add_argument(
        "--no-paste",
        action="store_true",
        help="only copy each segment to the clipboard, do not paste it",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="enable verbose logging (info level)",
    )
    args = parser.parse_args()
    setup_logging(verbose=args.verbose)

    try:
        config = resolve_config(
            config_path=args.config,
            file_path=args.file,
            delimiter=args.delimiter,
            no_paste=args.no_paste,
        )
        run(config)
    except EasypasteError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


def main():
    try:
        cli()
    except KeyboardInterrupt:
        print("\nBye!")


if __name__ == "__main__":
    main()
