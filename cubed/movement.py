"""Moving the player around the grid in response to keys."""

from __future__ import annotations

from enum import Enum

from .minimap import find_player

XK_ESCAPE = 65307
XK_LEFT = 65361
XK_UP = 65362
XK_RIGHT = 65363
XK_DOWN = 65364


class Direction(Enum):
    """A step on the grid as ``(dx, dy)``."""

    RIGHT = (1, 0)
    LEFT = (-1, 0)
    UP = (0, -1)
    DOWN = (0, 1)


_KEYS = {
    ord("d"): Direction.RIGHT,
    XK_RIGHT: Direction.RIGHT,
    ord("a"): Direction.LEFT,
    XK_LEFT: Direction.LEFT,
    ord("w"): Direction.UP,
    XK_UP: Direction.UP,
    ord("s"): Direction.DOWN,
    XK_DOWN: Direction.DOWN,
}


def key_direction(keysym: int) -> Direction | None:
    """Return the direction bound to a key symbol, or None."""
    return _KEYS.get(keysym)


def _put(grid: list[str], x: int, y: int, char: str) -> None:
    row = grid[y]
    grid[y] = row[:x] + char + row[x + 1:]


def move_player(grid: list[str], direction: Direction) -> tuple[int, int]:
    """Step the player one cell unless a wall is in the way.

    The grid is changed in place; the player's new ``(x, y)`` is returned.
    """
    x, y = find_player(grid)
    dx, dy = direction.value
    nx, ny = x + dx, y + dy
    if not (0 <= ny < len(grid) and 0 <= nx < len(grid[ny])):
        return x, y
    if grid[ny][nx] == "1":
        return x, y
    _put(grid, nx, ny, "P")
    _put(grid, x, y, "0")
    return nx, ny