"""Floor and ceiling colour handling for the background image."""

from __future__ import annotations

from collections.abc import Sequence

from .textutil import atoi

SCREEN_WIDTH = 1920
SCREEN_HEIGHT = 1080
HORIZON = 540


def int_pow(num: int, power: int) -> int:
    """Raise ``num`` to a non-negative ``power``; zero to any power is zero."""
    if num == 0:
        return 0
    result = 1
    for _ in range(max(power, 0)):
        result *= num
    return result


def _truncated_mod(value: int, modulus: int) -> int:
    remainder = abs(value) % modulus
    return -remainder if value < 0 else remainder


def convert_color(code: Sequence[str]) -> int:
    """Turn three colour component strings into a packed 0xRRGGBB value.

    Each component contributes only its low hexadecimal digit, which is
    repeated to fill its byte.
    """
    if len(code) < 3:
        raise ValueError("a colour needs three components")
    result = 0
    pow_times = 5
    for component in code[:3]:
        digit = _truncated_mod(atoi(component), 16)
        result += digit * int_pow(16, pow_times) + digit * int_pow(16, pow_times - 1)
        pow_times -= 2
    return result


def background_color(row: int, floor: int, ceiling: int) -> int:
    """Return the colour of a background pixel row: ceiling above the horizon."""
    return ceiling if row < HORIZON else floor