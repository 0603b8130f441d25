from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Hashable, Sequence, Tuple

Player = Hashable

# Ordered prefix of a permutation, as handed to the characteristic function.
Coalition = Tuple[Player, ...]

CharacteristicFunction = Callable[[Sequence[Player]], float]


@dataclass(frozen=True)
class ShapleyResult:
    player: Player
    value: float
