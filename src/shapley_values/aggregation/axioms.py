from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..indices.shapley import evaluate_coalition
from ..model.types import CharacteristicFunction, ShapleyResult


@dataclass
class EfficiencyCheck:
    total: float
    expected: float
    tolerance: float

    @property
    def difference(self) -> float:
        return self.total - self.expected

    @property
    def satisfied(self) -> bool:
        return abs(self.difference) <= self.tolerance


def check_efficiency(
    results: Sequence[ShapleyResult],
    characteristic_function: CharacteristicFunction,
    tolerance: float = 1e-9,
) -> EfficiencyCheck:
    """Compare the sum of Shapley values with v(N) - v(empty)."""
    grand = tuple(r.player for r in results)
    expected = evaluate_coalition(characteristic_function, grand) - evaluate_coalition(
        characteristic_function, ()
    )
    total = sum(r.value for r in results)
    return EfficiencyCheck(total=total, expected=expected, tolerance=tolerance)
