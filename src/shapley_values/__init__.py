from __future__ import annotations

from .errors import (
    CharacteristicFunctionError,
    DuplicatePlayersError,
    EmptyPlayersError,
    ShapleyError,
)
from .indices.shapley import calculate_shapley_values
from .model.game import TableGame
from .model.types import CharacteristicFunction, ShapleyResult

__all__ = [
    "calculate_shapley_values",
    "CharacteristicFunction",
    "ShapleyResult",
    "TableGame",
    "ShapleyError",
    "EmptyPlayersError",
    "DuplicatePlayersError",
    "CharacteristicFunctionError",
]

__version__ = "1.0.0"
