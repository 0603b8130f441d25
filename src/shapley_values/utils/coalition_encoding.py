from __future__ import annotations

import json
import math
from collections.abc import Iterable, Mapping
from typing import Any, FrozenSet

EMPTY_MARKERS = {"", "{}", "()", "[]", "-"}


def normalize_coalition(value: Any) -> FrozenSet[str]:
    """Turn a coalition cell or key into a frozenset of player names.

    Accepts collections, ``"{A,B}"``, ``"(A, B)"``, ``"A,B"``, JSON lists and
    single scalars. ``None``, NaN and the empty markers mean the empty
    coalition.
    """
    if value is None:
        return frozenset()
    if isinstance(value, float) and math.isnan(value):
        return frozenset()
    if isinstance(value, str):
        return _from_string(value)
    if isinstance(value, Iterable) and not isinstance(value, (bytes, Mapping)):
        # Sets, lists, tuples and the numpy arrays Parquet list columns load as.
        return frozenset(str(x) for x in value)
    if isinstance(value, bool):
        msg = f"Cannot interpret coalition: {value!r}"
        raise ValueError(msg)
    if isinstance(value, int):
        return frozenset({str(value)})
    msg = f"Cannot interpret coalition: {value!r}"
    raise ValueError(msg)


def format_coalition(coalition: FrozenSet[str]) -> str:
    return "{" + ",".join(sorted(coalition)) + "}"


def _from_string(value: str) -> FrozenSet[str]:
    s = value.strip()
    if s in EMPTY_MARKERS:
        return frozenset()
    if s.startswith("[") and s.endswith("]"):
        parsed = json.loads(s)
        if not isinstance(parsed, list):
            msg = f"Cannot interpret coalition: {value!r}"
            raise ValueError(msg)
        return frozenset(str(x) for x in parsed)
    if (s.startswith("{") and s.endswith("}")) or (
        s.startswith("(") and s.endswith(")")
    ):
        s = s[1:-1]

    names = []
    for part in s.split(","):
        part = part.strip().strip("'").strip('"').strip()
        if part:
            names.append(part)
    return frozenset(names)
