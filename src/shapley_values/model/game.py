from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Sequence

from ..utils.coalition_encoding import format_coalition, normalize_coalition

TableCoalition = FrozenSet[str]


@dataclass
class TableGame:
    """Characteristic function given by an explicit coalition -> value table.

    Coalitions are looked up as sets, so the order of the prefix passed by the
    engine does not matter. Missing coalitions are worth ``0.0`` unless
    ``strict`` is set, in which case the lookup raises ``KeyError``.
    """

    players: list[str]
    values: Dict[TableCoalition, float] = field(default_factory=dict)
    strict: bool = False

    def value(self, coalition: Iterable[str]) -> float:
        key: TableCoalition = frozenset(coalition)
        if self.strict and key not in self.values:
            raise KeyError(format_coalition(key))
        return self.values.get(key, 0.0)

    def __call__(self, coalition: Sequence[str]) -> float:
        return self.value(coalition)

    @classmethod
    def from_mapping(
        cls,
        players: Iterable[Any],
        values: Mapping[Any, float],
        strict: bool = False,
    ) -> "TableGame":
        table: dict[TableCoalition, float] = {}
        for raw, v in values.items():
            key = normalize_coalition(raw)
            if key in table:
                msg = f"Coalition {format_coalition(key)} is defined more than once."
                raise ValueError(msg)
            table[key] = float(v)
        return cls(players=[str(p) for p in players], values=table, strict=strict)
