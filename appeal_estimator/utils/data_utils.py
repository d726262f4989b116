"""Data processing utilities."""

import math
from typing import Any, Callable, Iterable, Optional


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity.

    Python's ``round`` rounds halves to even; figures shown to users were
    always rounded half-up, so 2.5 -> 3 and -2.5 -> -2.
    """

    floor_value = math.floor(value)
    return floor_value + 1 if value - floor_value >= 0.5 else floor_value


def round_one_decimal(value: float) -> float:
    """Round to one decimal place with :func:`round_half_up` semantics."""
    return round_half_up(value * 10) / 10


def is_present(value: Any) -> bool:
    """Whether a provider value counts as populated.

    None, empty strings, zero, negative numbers, NaN and infinities all
    mean "not provided".
    """

    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return math.isfinite(value) and value > 0
    if isinstance(value, str):
        return value != ""
    return True


def first_present(getters: Iterable[Callable[[Any], Any]], record: Any) -> Optional[Any]:
    """Return the first present value produced by ``getters`` for ``record``."""

    for getter in getters:
        value = getter(record)
        if is_present(value):
            return value
    return None
