"""Configuration module for Easypaste.

Settings come from built-in defaults, optionally overridden by a TOML config
file, then by command-line flags.

Example config.toml:

    delimiter = "%%%"
    file_path = "input.txt"
    hotkey_modifiers = ["CTRL", "SHIFT"]
    hotkey_key = "B"
    paste = true
    paste_delay_ms = 100
"""

import tomllib
from dataclasses import dataclass, field, fields, replace
from pathlib import Path

from easypaste.errors import ConfigError

DEFAULT_DELIMITER = "%%%"


@dataclass
class Config:
    delimiter: str = DEFAULT_DELIMITER
    file_path: Path = Path("input.txt")
    hotkey_modifiers: list[str] = field(default_factory=lambda: ["CTRL", "SHIFT"])
    hotkey_key: str = "B"
    paste: bool = True
    paste_delay_ms: int | None = None  # None: platform default


def _check_type(name: str, value, expected) -> None:
    # bool is an int subclass; do not let `paste_delay_ms = true` through
    if isinstance(value, bool) and expected is not bool:
        raise ConfigError(f"Config key '{name}' must be {expected.__name__}, got bool")
    if not isinstance(value, expected):
        raise ConfigError(
            f"Config key '{name}' must be {expected.__name__}, got {type(value).__name__}"
        )


def load_config(path: Path) -> Config:
    """Parse a TOML config file into a Config."""
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except OSError as exc:
        raise ConfigError(f"Failed to read config file: {path} ({exc})") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Failed to parse config file: {path} ({exc})") from exc

    known = {f.name for f in fields(Config)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown config key(s) in {path}: {', '.join(unknown)}")

    values = {}
    for name in ("delimiter", "hotkey_key"):
        if name in data:
            _check_type(name, data[name], str)
            values[name] = data[name]
    if "file_path" in data:
        _check_type("file_path", data["file_path"], str)
        values["file_path"] = Path(data["file_path"])
    if "hotkey_modifiers" in data:
        modifiers = data["hotkey_modifiers"]
        _check_type("hotkey_modifiers", modifiers, list)
        for item in modifiers:
            _check_type("hotkey_modifiers", item, str)
        values["hotkey_modifiers"] = list(modifiers)
    if "paste" in data:
        _check_type("paste", data["paste"], bool)
        values["paste"] = data["paste"]
    if "paste_delay_ms" in data:
        _check_type("paste_delay_ms", data["paste_delay_ms"], int)
        if data["paste_delay_ms"] < 0:
            raise ConfigError("Config key 'paste_delay_ms' must not be negative")
        values["paste_delay_ms"] = data["paste_delay_ms"]

    return Config(**values)


def resolve_config(
    config_path: Path | None = None,
    file_path: Path | None = None,
    delimiter: str | None = None,
    no_paste: bool = False,
) -> Config:
    """Merge defaults, the optional config file and CLI overrides."""
    config = load_config(config_path) if config_path is not None else Config()

    overrides = {}
    if file_path is not None:
        overrides["file_path"] = Path(file_path)
    if delimiter is not None:
        overrides["delimiter"] = delimiter
    if no_paste:
        overrides["paste"] = False
    config = replace(config, **overrides)

    if not config.delimiter:
        raise ConfigError("Delimiter must not be empty")
    return config
