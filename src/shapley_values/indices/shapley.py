from __future__ import annotations

import math
import numbers
from typing import Dict, Iterable, List, Sequence

from ..errors import (
    CharacteristicFunctionError,
    DuplicatePlayersError,
    EmptyPlayersError,
)
from ..model.types import CharacteristicFunction, Coalition, Player, ShapleyResult
from ..utils.logging_utils import get_logger
from ..utils.permutations import generate_permutations

logger = get_logger(__name__)


def calculate_shapley_values(
    players: Iterable[Player],
    characteristic_function: CharacteristicFunction,
) -> List[ShapleyResult]:
    """Compute exact Shapley values by averaging over every player ordering.

    For each of the ``n!`` permutations, every player is credited with
    ``v(prefix + player) - v(prefix)``; the totals are then divided by ``n!``.
    The characteristic function is called ``2 * n * n!`` times, once for each
    prefix of each permutation, without memoization.

    Raises:
        EmptyPlayersError: ``players`` is empty.
        DuplicatePlayersError: a player appears more than once.
        CharacteristicFunctionError: the characteristic function raised, or
            returned a non-numeric or non-finite value.
    """
    players = list(players)
    _validate_players(players)

    n = len(players)
    logger.debug(
        "Computing exact Shapley values for %d players (%d permutations)",
        n,
        math.factorial(n),
    )

    contributions: Dict[Player, float] = {p: 0.0 for p in players}
    permutation_count = 0

    for permutation in generate_permutations(players):
        permutation_count += 1
        for i, player in enumerate(permutation):
            without = tuple(permutation[:i])
            with_player = tuple(permutation[: i + 1])
            value_without = evaluate_coalition(characteristic_function, without)
            value_with = evaluate_coalition(characteristic_function, with_player)
            contributions[player] += value_with - value_without

    results = [
        ShapleyResult(player=p, value=contributions[p] / permutation_count)
        for p in players
    ]
    logger.debug("Finished Shapley computation over %d permutations", permutation_count)
    return results


def evaluate_coalition(
    characteristic_function: CharacteristicFunction,
    coalition: Coalition,
) -> float:
    """Call the characteristic function and reject failures and non-finite values."""
    try:
        value = characteristic_function(coalition)
    except Exception as exc:
        logger.debug("Characteristic function raised for %r: %s", coalition, exc)
        raise CharacteristicFunctionError(coalition) from exc

    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise CharacteristicFunctionError(coalition, value=value)
    try:
        number = float(value)
    except (OverflowError, TypeError, ValueError) as exc:
        raise CharacteristicFunctionError(coalition, value=value) from exc
    if not math.isfinite(number):
        raise CharacteristicFunctionError(coalition, value=value)
    return number


def _validate_players(players: Sequence[Player]) -> None:
    if len(players) == 0:
        raise EmptyPlayersError()

    seen: set = set()
    duplicates: list = []
    for p in players:
        if p in seen and p not in duplicates:
            duplicates.append(p)
        seen.add(p)
    if duplicates:
        raise DuplicatePlayersError(duplicates)
