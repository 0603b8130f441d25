from __future__ import annotations

import pytest

from shapley_values import CharacteristicFunctionError, TableGame, calculate_shapley_values
from shapley_values.aggregation.axioms import check_efficiency
from shapley_values.utils.coalition_encoding import format_coalition, normalize_coalition


def make_worked_game(strict: bool = False) -> TableGame:
    return TableGame.from_mapping(
        ["A", "B", "C"],
        {
            "{}": 0,
            "A": 10,
            "B": 20,
            "C": 30,
            "A,B": 40,
            "{A,C}": 50,
            ("B", "C"): 60,
            '["A","B","C"]': 100,
        },
        strict=strict,
    )


def test_table_game_looks_up_coalitions_as_sets() -> None:
    game = make_worked_game()

    assert game(("B", "A")) == 40.0
    assert game(("A", "B")) == 40.0
    assert game(()) == 0.0
    assert game.value(["C", "B", "A"]) == 100.0


def test_table_game_missing_coalition_defaults_to_zero() -> None:
    game = TableGame.from_mapping(["A", "B"], {"A": 1.0})

    assert game(("B",)) == 0.0


def test_strict_table_game_raises_key_error() -> None:
    game = TableGame.from_mapping(["A", "B"], {"A": 1.0}, strict=True)

    with pytest.raises(KeyError):
        game(("B",))


def test_strict_missing_coalition_surfaces_as_characteristic_function_error() -> None:
    game = TableGame.from_mapping(["A", "B"], {"{}": 0, "A": 1.0, "B": 2.0}, strict=True)

    with pytest.raises(CharacteristicFunctionError) as exc_info:
        calculate_shapley_values(game.players, game)

    assert isinstance(exc_info.value.__cause__, KeyError)


def test_table_game_plugs_into_engine() -> None:
    game = make_worked_game(strict=True)

    phi = {r.player: r.value for r in calculate_shapley_values(game.players, game)}

    assert phi == pytest.approx({"A": 140 / 6, "B": 200 / 6, "C": 260 / 6})


def test_from_mapping_rejects_repeated_coalitions() -> None:
    with pytest.raises(ValueError, match="more than once"):
        TableGame.from_mapping(["A", "B"], {"A,B": 1.0, "{B,A}": 2.0})


def test_check_efficiency_passes_for_exact_values() -> None:
    game = make_worked_game()
    results = calculate_shapley_values(game.players, game)

    check = check_efficiency(results, game)

    assert check.satisfied
    assert check.expected == pytest.approx(100.0)
    assert check.difference == pytest.approx(0.0, abs=1e-9)


def test_check_efficiency_detects_mismatch() -> None:
    game = make_worked_game()
    results = calculate_shapley_values(game.players, game)

    check = check_efficiency(results[:2], game, tolerance=1e-6)

    assert not check.satisfied


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("{A,B}", {"A", "B"}),
        ("(A, B)", {"A", "B"}),
        ("('A','B')", {"A", "B"}),
        ("A,B", {"A", "B"}),
        ('["A", "B"]', {"A", "B"}),
        ("A", {"A"}),
        (7, {"7"}),
        (["x", 1], {"x", "1"}),
        ("", set()),
        ("{}", set()),
        (None, set()),
        (float("nan"), set()),
    ],
)
def test_normalize_coalition(raw: object, expected: set[str]) -> None:
    assert normalize_coalition(raw) == frozenset(expected)


def test_normalize_coalition_accepts_numpy_arrays() -> None:
    np = pytest.importorskip("numpy")

    assert normalize_coalition(np.array(["A", "B"], dtype=object)) == frozenset({"A", "B"})
    assert normalize_coalition(np.array([], dtype=object)) == frozenset()


@pytest.mark.parametrize("raw", [True, 1.5, {"A": 1}, b"A,B"])
def test_normalize_coalition_rejects_unknown_types(raw: object) -> None:
    with pytest.raises(ValueError):
        normalize_coalition(raw)


def test_format_coalition_is_sorted() -> None:
    assert format_coalition(frozenset({"b", "a"})) == "{a,b}"
    assert format_coalition(frozenset()) == "{}"
