from __future__ import annotations

import logging
import logging.config
from pathlib import Path
from typing import Any

import yaml

DEFAULT_FORMAT = "[%(asctime)s] %(levelname)s %(name)s - %(message)s"


def configure_logging(config_path: Path | None = None, level: str = "INFO") -> None:
    """Apply a YAML ``dictConfig`` file, or fall back to ``basicConfig``."""
    if config_path is None or not config_path.exists():
        if not isinstance(logging.getLevelName(level.upper()), int):
            msg = f"Unknown log level: {level}"
            raise ValueError(msg)
        logging.basicConfig(level=level.upper(), format=DEFAULT_FORMAT)
        return

    with config_path.open("r", encoding="utf-8") as f:
        config: Any = yaml.safe_load(f)
    if not isinstance(config, dict):
        msg = f"Logging configuration in {config_path} must be a mapping."
        raise ValueError(msg)
    config.setdefault("version", 1)
    logging.config.dictConfig(config)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
