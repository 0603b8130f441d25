from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Mapping

import pandas as pd

from ..config_loader import ConfigError, load_config
from ..indices.shapley import calculate_shapley_values
from ..io.readers import read_coalition_table
from ..io.validators import validate_coalition_table
from ..io.writers import write_table
from ..model.game import TableGame
from ..model.transforms import build_game_from_table, results_to_frame
from ..utils.logging_utils import get_logger
from .axioms import check_efficiency
from .reporting import print_summary

logger = get_logger(__name__)


def run_from_config(config_path: Path) -> pd.DataFrame:
    cfg = load_config(config_path)
    base_dir = config_path.parent
    output_cfg = _section(cfg, "output")
    efficiency_cfg = _section(_section(cfg, "checks"), "efficiency")

    game = load_game(cfg, base_dir)
    logger.info("Computing Shapley values for %d players", len(game.players))

    results = calculate_shapley_values(game.players, game)

    if efficiency_cfg.get("enabled", True):
        check = check_efficiency(
            results, game, tolerance=float(efficiency_cfg.get("tolerance", 1e-9))
        )
        if not check.satisfied:
            logger.warning(
                "Efficiency check failed: sum=%.9g, v(N) - v({})=%.9g",
                check.total,
                check.expected,
            )

    result_df = results_to_frame(results)

    out_path = output_cfg.get("path")
    if out_path:
        dest = _resolve(out_path, base_dir)
        write_table(result_df, dest, fmt=output_cfg.get("format"))
        logger.info("Wrote Shapley table to %s", dest)
    else:
        print_summary(result_df, sys.stdout)

    return result_df


def load_game(cfg: Mapping[str, Any], base_dir: Path) -> TableGame:
    """Build the game from either the ``input`` table or the inline ``game`` section."""
    if "input" in cfg and "game" in cfg:
        msg = "Configuration must define only one of 'input' and 'game'."
        raise ConfigError(msg)

    if "game" in cfg:
        game_cfg = _section(cfg, "game")
        if not isinstance(game_cfg.get("players"), list):
            msg = "The 'game' section requires a 'players' list."
            raise ConfigError(msg)
        values = _section(game_cfg, "values")
        return TableGame.from_mapping(
            game_cfg["players"],
            values,
            strict=bool(game_cfg.get("strict", False)),
        )

    input_cfg = _section(cfg, "input")
    if "path" not in input_cfg:
        msg = "The 'input' section requires a 'path'."
        raise ConfigError(msg)

    value_column = input_cfg.get("value_column", "value")
    src = _resolve(input_cfg["path"], base_dir)
    df = read_coalition_table(
        src,
        fmt=input_cfg.get("format"),
        coalition_column=input_cfg.get("coalition_column", "coalition"),
    )
    validate_coalition_table(df, value_column=value_column)
    logger.info("Read %d coalitions from %s", len(df), src)

    return build_game_from_table(
        df,
        value_column=value_column,
        players=input_cfg.get("players"),
        strict=bool(input_cfg.get("strict", False)),
    )


def _section(cfg: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    section = cfg.get(name) or {}
    if not isinstance(section, dict):
        msg = f"The '{name}' section must be a mapping."
        raise ConfigError(msg)
    return section


def _resolve(path: str | Path, base_dir: Path) -> Path:
    p = Path(path)
    return p if p.is_absolute() else base_dir / p
