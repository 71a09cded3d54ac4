from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict
import tomllib

from lintcheck.config import ConfigurationError


def load_ruleset(config_path: Path, linter: str) -> Dict[str, Any]:
    """Read the analyzer configuration that the report body embeds.

    ``pyproject.toml`` contributes only its ``[tool.<linter>]`` table; any
    other ``.toml`` or ``.json`` file is returned whole.
    """
    try:
        raw = config_path.read_bytes()
    except OSError as exc:
        raise ConfigurationError(f"Unable to read configuration file {config_path}: {exc}") from exc

    suffix = config_path.suffix.lower()
    try:
        if suffix == ".toml":
            data = tomllib.loads(raw.decode("utf-8"))
        elif suffix == ".json":
            data = json.loads(raw.decode("utf-8"))
        else:
            raise ConfigurationError(f"Unsupported configuration format: {config_path.name}")
    except (UnicodeDecodeError, tomllib.TOMLDecodeError, json.JSONDecodeError) as exc:
        raise ConfigurationError(f"Invalid configuration file {config_path}: {exc}") from exc

    if config_path.name == "pyproject.toml":
        return data.get("tool", {}).get(linter, {})
    return data
