from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml


class ConfigError(ValueError):
    pass


def load_config(path: Path) -> Mapping[str, Any]:
    if not path.exists():
        msg = f"Configuration file not found: {path}"
        raise ConfigError(msg)

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        msg = "Configuration file must contain a mapping at top level."
        raise ConfigError(msg)
    if "input" not in data and "game" not in data:
        msg = "Configuration must define either an 'input' or a 'game' section."
        raise ConfigError(msg)
    return data
