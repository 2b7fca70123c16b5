import pytest

from cubed.color import (
    HORIZON,
    SCREEN_HEIGHT,
    background_color,
    convert_color,
    int_pow,
)


def test_int_pow_zero_base():
    assert int_pow(0, 5) == 0
    assert int_pow(0, 0) == 0


@pytest.mark.parametrize("power", [0, -1, -3])
def test_int_pow_non_positive_power(power):
    assert int_pow(16, power) == 1


@pytest.mark.parametrize(("num", "power"), [(16, 1), (16, 5), (3, 4), (-2, 3)])
def test_int_pow_matches_builtin(num, power):
    assert int_pow(num, power) == num**power


def test_convert_black():
    assert convert_color(["0", "0", "0"]) == 0


def test_convert_white():
    assert convert_color(["255", "255", "255"]) == 0xFFFFFF


def test_convert_uses_low_digit_only():
    assert convert_color(["16", "32", "48"]) == convert_color(["0", "0", "0"])
    assert convert_color(["17", "33", "49"]) == convert_color(["1", "1", "1"])


@pytest.mark.parametrize("components", [["1", "2", "3"], ["200", "100", "50"], ["15", "0", "255"]])
def test_convert_fits_in_24_bits(components):
    value = convert_color(components)
    assert 0 <= value < 2**24


def test_convert_components_are_independent():
    red = convert_color(["5", "0", "0"])
    green = convert_color(["0", "5", "0"])
    blue = convert_color(["0", "0", "5"])
    assert convert_color(["5", "5", "5"]) == red + green + blue
    assert red > green > blue > 0


def test_convert_ignores_extra_components():
    assert convert_color(["1", "2", "3", "4"]) == convert_color(["1", "2", "3"])


def test_convert_requires_three_components():
    with pytest.raises(ValueError):
        convert_color(["1", "2"])


@pytest.mark.parametrize("row", [0, 1, HORIZON - 1])
def test_background_above_horizon_is_ceiling(row):
    assert background_color(row, floor=111, ceiling=222) == 222


@pytest.mark.parametrize("row", [HORIZON, HORIZON + 1, SCREEN_HEIGHT - 1])
def test_background_below_horizon_is_floor(row):
    assert background_color(row, floor=111, ceiling=222) == 111