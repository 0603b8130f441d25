from __future__ import annotations

from typing import Iterable, Optional, Sequence

import pandas as pd

from .game import TableCoalition, TableGame
from .types import Player, ShapleyResult


def build_game_from_table(
    df: pd.DataFrame,
    value_column: str = "value",
    players: Optional[Sequence[Player]] = None,
    strict: bool = False,
) -> TableGame:
    """Build a table-backed game from a validated coalition table.

    Without ``players`` the player list is the sorted union of all coalitions;
    with it, the given order is kept and every coalition must use only those
    players.
    """
    coalitions: list[TableCoalition] = list(df["coalition"])
    inferred = _infer_players_from_coalitions(coalitions)

    if players is None:
        player_list = sorted(inferred)
    else:
        player_list = [str(p) for p in players]
        unknown = inferred - set(player_list)
        if unknown:
            msg = f"Coalitions reference unknown players: {sorted(unknown)}"
            raise ValueError(msg)

    values = {
        c: float(v) for c, v in zip(df["coalition"], df[value_column])
    }
    return TableGame(players=player_list, values=values, strict=strict)


def results_to_frame(results: Sequence[ShapleyResult]) -> pd.DataFrame:
    """One row per player with its Shapley value and dense rank (1 = largest)."""
    values = {r.player: r.value for r in results}
    ranks = _rank_values(values)
    rows = [
        {"player": r.player, "shapley": r.value, "shapley_rank": ranks[r.player]}
        for r in results
    ]
    return pd.DataFrame(rows, columns=["player", "shapley", "shapley_rank"])


def _infer_players_from_coalitions(coalitions: Iterable[TableCoalition]) -> set[str]:
    players: set[str] = set()
    for c in coalitions:
        players.update(c)
    return players


def _rank_values(values: dict) -> dict:
    if not values:
        return {}
    unique_vals = sorted(set(values.values()), reverse=True)
    val_to_rank = {v: idx + 1 for idx, v in enumerate(unique_vals)}
    return {pid: val_to_rank[v] for pid, v in values.items()}
