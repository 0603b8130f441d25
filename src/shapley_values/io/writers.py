from __future__ import annotations

from pathlib import Path

import pandas as pd


def write_table(
    df: pd.DataFrame, path: str | Path, fmt: str | None = None
) -> None:
    p = Path(path)
    if fmt is None:
        fmt = p.suffix.lstrip(".").lower()

    p.parent.mkdir(parents=True, exist_ok=True)
    if fmt == "csv":
        df.to_csv(p, index=False)
    elif fmt in {"parquet", "pq"}:
        df.to_parquet(p, index=False)
    elif fmt == "json":
        df.to_json(p, orient="records", indent=2)
    else:
        msg = f"Unsupported output format: {fmt}"
        raise ValueError(msg)
