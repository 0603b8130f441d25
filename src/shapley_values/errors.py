from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence


class ShapleyError(Exception):
    """Base class for every error raised by the Shapley value computation."""


class EmptyPlayersError(ShapleyError):
    def __init__(self) -> None:
        super().__init__("Players must not be empty.")


class DuplicatePlayersError(ShapleyError):
    def __init__(self, duplicates: Iterable[Any] = ()) -> None:
        self.duplicates = list(duplicates)
        msg = "Players must not contain duplicates"
        if self.duplicates:
            msg = f"{msg}: {self.duplicates!r}"
        super().__init__(msg + ".")


# Distinguishes "returned None" from "raised" in the message.
_NO_VALUE = object()


class CharacteristicFunctionError(ShapleyError):
    """The characteristic function raised or returned an unusable value.

    The original exception, if any, is available as ``__cause__``.
    """

    def __init__(
        self,
        coalition: Optional[Sequence[Any]] = None,
        value: Any = _NO_VALUE,
    ) -> None:
        self.coalition = tuple(coalition) if coalition is not None else None
        self.returned_value = value is not _NO_VALUE
        self.value = value if self.returned_value else None
        msg = "Characteristic function failed"
        if self.coalition is not None:
            msg = f"{msg} for coalition {list(self.coalition)!r}"
        if self.returned_value:
            msg = f"{msg} (returned {value!r})"
        super().__init__(msg + ".")
