from __future__ import annotations

from pathlib import Path

import pandas as pd

from ..utils.coalition_encoding import normalize_coalition


def read_coalition_table(
    path: str | Path,
    fmt: str | None = None,
    coalition_column: str = "coalition",
) -> pd.DataFrame:
    p = Path(path)
    if fmt is None:
        fmt = p.suffix.lstrip(".").lower()

    if fmt == "csv":
        # Keep coalition cells as text so "1" stays a player name, not a number.
        df = pd.read_csv(p, dtype={coalition_column: str})
    elif fmt in {"parquet", "pq"}:
        df = pd.read_parquet(p)
    else:
        msg = f"Unsupported format: {fmt}"
        raise ValueError(msg)

    if coalition_column not in df.columns:
        msg = f"Input table must contain '{coalition_column}' column."
        raise ValueError(msg)

    df = df.copy()
    if coalition_column != "coalition":
        df = df.rename(columns={coalition_column: "coalition"})
    df["coalition"] = df["coalition"].map(normalize_coalition)
    return df
