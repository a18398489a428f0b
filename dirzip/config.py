"""Persistent JSON config helpers.

Stores default compression settings and the include-dir preference used by
the command line. All access is defensive: malformed or missing config falls
back safely. Library functions never consult this file.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .compression import CompressionOptions

APP_NAME = "dirzip"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are ignored so a read-only config directory never
    breaks archiving.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def load_compression_options() -> CompressionOptions:
    """Return persisted compression defaults, or stored when unset/invalid.

    An out-of-range ``compression_level`` is dropped while the method is kept.
    """
    config = load_config()
    method = config.get("compression")
    level = config.get("compression_level")
    if not isinstance(method, str):
        return CompressionOptions.stored()
    if isinstance(level, bool) or not isinstance(level, int):
        level = None
    try:
        return CompressionOptions.parse(method, level)
    except ValueError:
        pass
    try:
        return CompressionOptions.parse(method)
    except ValueError:
        return CompressionOptions.stored()


def save_compression_options(options: CompressionOptions) -> None:
    config = load_config()
    config["compression"] = options.method.value
    if options.level is None:
        config.pop("compression_level", None)
    else:
        config["compression_level"] = int(options.level)
    save_config(config)


def load_include_dir_in_path() -> bool:
    """Return the persisted include-dir preference.

    Only explicit boolean values are accepted; anything else is ``False``.
    """
    value = load_config().get("include_dir_in_path")
    return bool(value) if isinstance(value, bool) else False


def save_include_dir_in_path(include_dir_in_path: bool) -> None:
    config = load_config()
    config["include_dir_in_path"] = bool(include_dir_in_path)
    save_config(config)
