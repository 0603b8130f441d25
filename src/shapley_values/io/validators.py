from __future__ import annotations

import pandas as pd

from ..utils.coalition_encoding import format_coalition


def validate_coalition_table(df: pd.DataFrame, value_column: str = "value") -> None:
    """Check that a normalized coalition table can back a characteristic function."""
    required = {"coalition", value_column}
    missing = required - set(df.columns)
    if missing:
        msg = f"Missing required columns: {sorted(missing)}"
        raise ValueError(msg)

    values = pd.to_numeric(df[value_column], errors="coerce")
    bad = df.loc[values.isna(), "coalition"]
    if not bad.empty:
        names = [format_coalition(c) for c in bad]
        msg = f"Non-numeric or missing values for coalitions: {names}"
        raise ValueError(msg)

    repeated = df.loc[df["coalition"].duplicated(), "coalition"]
    if not repeated.empty:
        names = sorted({format_coalition(c) for c in repeated})
        msg = f"Coalitions defined more than once: {names}"
        raise ValueError(msg)
