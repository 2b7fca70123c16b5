"""Small text helpers used by the scene-file parser."""

from __future__ import annotations

from collections.abc import Iterator
from os import PathLike

_WHITESPACE = " \t\n\v\f\r"
_SIGNS = "+-"


def atoi(text: str) -> int:
    """Parse a leading integer the lenient way the scene format expects.

    Leading whitespace is skipped and a single sign is accepted. Two
    consecutive signs make the value 0. Parsing stops at the first
    non-digit, and text without digits gives 0.
    """
    stripped = text.lstrip(_WHITESPACE)
    if len(stripped) >= 2 and stripped[0] in _SIGNS and stripped[1] in _SIGNS:
        return 0
    negative = False
    if stripped[:1] in ("+", "-") and stripped:
        negative = stripped[0] == "-"
        stripped = stripped[1:]
    digits = []
    for char in stripped:
        if not ("0" <= char <= "9"):
            break
        digits.append(char)
    if not digits:
        return 0
    value = int("".join(digits))
    return -value if negative else value


def split_fields(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep`` and drop empty fields."""
    return [field for field in text.split(sep) if field]


def iter_lines(path: str | PathLike[str]) -> Iterator[str]:
    """Yield the lines of a file, each keeping its trailing newline.

    Only ``\\n`` ends a line; a final line without a newline is yielded
    as it is. An empty file yields nothing.
    """
    with open(path, "rb") as handle:
        for raw in handle:
            yield raw.decode("utf-8", errors="replace")