from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

import yaml

from .aggregation.run_manager import run_from_config
from .errors import ShapleyError
from .utils.logging_utils import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shapley-values",
        description="Compute exact Shapley values for a coalition game.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        help="Subcommand (optional, currently only 'compute').",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        required=True,
        help="Path to YAML configuration file.",
    )
    parser.add_argument(
        "--log-config",
        type=Path,
        default=None,
        help="Optional YAML logging configuration (logging.config.dictConfig).",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Log level used when no logging configuration is given.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.command not in (None, "compute"):
        parser.error(f"Unknown command: {args.command}")

    try:
        configure_logging(args.log_config, level=args.log_level)
        run_from_config(args.config)
    except (ShapleyError, ValueError, OSError, yaml.YAMLError) as exc:
        parser.exit(1, f"shapley-values: error: {exc}\n")


if __name__ == "__main__":
    main()
