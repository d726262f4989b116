"""
Tests for rounding and presence helpers.
"""

import math

import pytest

from appeal_estimator.utils.data_utils import (
    first_present,
    is_present,
    round_half_up,
    round_one_decimal,
)


@pytest.mark.parametrize("value,expected", [
    (2.5, 3),
    (3.5, 4),
    (2.4999, 2),
    (-2.5, -2),
    (-2.6, -3),
    (0.0, 0),
    (450000.0, 450000),
])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_round_one_decimal():
    assert round_one_decimal(12.25) == 12.3
    assert round_one_decimal(8.0) == 8.0
    assert round_one_decimal(-0.04) == 0.0


@pytest.mark.parametrize("value", [None, "", 0, 0.0, -5, -0.5, math.nan, math.inf, -math.inf, False])
def test_absent_values(value):
    assert not is_present(value)


@pytest.mark.parametrize("value", ["x", 1, 0.5, 1e12, True, [0]])
def test_present_values(value):
    assert is_present(value)


def test_first_present_skips_missing():
    getters = [lambda r: r.get("a"), lambda r: r.get("b"), lambda r: r.get("c")]

    assert first_present(getters, {"a": 0, "b": None, "c": 7}) == 7
    assert first_present(getters, {"a": 3, "c": 7}) == 3
    assert first_present(getters, {}) is None
