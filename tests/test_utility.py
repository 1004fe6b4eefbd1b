import math

import pytest

from scatterkit.utility import (
    almost_equal,
    generate_linspace,
    generate_linspace_with_step,
    generate_number_array,
    generate_zero_array,
    radians,
)


def test_radians_half_turn_is_pi():
    assert radians(180.0) == pytest.approx(math.pi)


def test_radians_zero_and_sign():
    assert radians(0.0) == 0.0
    assert radians(-45.0) == pytest.approx(-radians(45.0))


def test_almost_equal_identical_values():
    assert almost_equal(1.0, 1.0)
    assert almost_equal(0.0, 0.0)


def test_almost_equal_rejects_distinct_values_with_small_ulp():
    assert not almost_equal(1.0, 1.1)
    assert not almost_equal(30.0, 30.001)


def test_almost_equal_with_parser_tolerance():
    assert almost_equal(30.0, 30.001, 10e11)
    assert not almost_equal(10.0, 30.0, 10e11)


def test_almost_equal_is_symmetric():
    assert almost_equal(2.5, 2.5000001, 1e12) == almost_equal(2.5000001, 2.5, 1e12)


def test_linspace_pinned_values():
    assert generate_linspace(0, 10, 5) == [0.0, 2.0, 4.0, 6.0, 8.0]


def test_linspace_invariants():
    values = generate_linspace(1.0, 3.0, 8)
    assert len(values) == 8
    assert values[0] == 1.0
    assert values[-1] < 3.0
    steps = [b - a for a, b in zip(values, values[1:])]
    assert all(s == pytest.approx((3.0 - 1.0) / 8) for s in steps)


def test_linspace_zero_intervals_holds_start():
    assert generate_linspace(7.0, 9.0, 0) == [7.0]


def test_linspace_negative_count_raises():
    with pytest.raises(ValueError):
        generate_linspace(0.0, 1.0, -1)


def test_linspace_with_step_matches_interval_count():
    assert generate_linspace_with_step(0.0, 10.0, 2.5) == generate_linspace(0.0, 10.0, 4)


def test_linspace_with_step_errors():
    with pytest.raises(ValueError):
        generate_linspace_with_step(0.0, 10.0, 0.0)
    with pytest.raises(ValueError):
        generate_linspace_with_step(0.0, 10.0, -1.0)


def test_zero_array():
    assert generate_zero_array(4) == [0.0, 0.0, 0.0, 0.0]
    assert generate_zero_array(0) == []


def test_number_array():
    values = generate_number_array(3, 2.5)
    assert values == [2.5, 2.5, 2.5]


def test_number_array_negative_count_raises():
    with pytest.raises(ValueError):
        generate_number_array(-2, 1.0)