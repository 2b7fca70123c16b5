"""Reading, padding and validating the map part of a scene file."""

from __future__ import annotations

from contextlib import closing
from os import PathLike

from .scene import SceneError
from .textutil import iter_lines

_MAP_CHARS = frozenset("10 NSWE")
_PLAYER_CHARS = frozenset("NSWE")
_CLOSED = (" ", "1")


def _is_blank(line: str) -> bool:
    return line.lstrip(" \t")[:1] in ("", "\n")


def read_map_lines(path: str | PathLike[str], start_map: int) -> list[str]:
    """Return the raw map lines of a scene file.

    The first ``start_map`` lines and the line after them (the last header
    entry) are skipped, then any blank lines; everything from the first
    non-blank line on is returned with its newlines.
    """
    with closing(iter_lines(path)) as lines:
        for _ in range(start_map):
            next(lines, None)
        next(lines, None)
        for line in lines:
            if not _is_blank(line):
                return [line, *lines]
    return []


def build_grid(lines: list[str]) -> list[str]:
    """Pad map lines into a rectangle framed by spaces.

    Every row is one wider than the longest raw line (newline included);
    each map row gets a leading space and trailing spaces, and a row of
    spaces is added above and below.
    """
    if not lines:
        raise SceneError("Inexistent map")
    width = max(len(line) for line in lines) + 1
    border = " " * width
    rows = [border]
    rows.extend((" " + line.split("\n", 1)[0]).ljust(width) for line in lines)
    rows.append(border)
    return rows


def validate_chars(grid: list[str]) -> str:
    """Check the map characters and that there is exactly one player.

    Returns the player's orientation letter.
    """
    for row in grid:
        if any(char not in _MAP_CHARS for char in row):
            raise SceneError("Invalid map chars")
    players = [char for row in grid for char in row if char in _PLAYER_CHARS]
    if len(players) != 1:
        raise SceneError("Invalid number of players")
    return players[0]


def _cell(grid: list[str], i: int, j: int) -> str | None:
    row = grid[i]
    return row[j] if j < len(row) else None


def _touches_open(grid: list[str], i: int, j: int) -> bool:
    neighbours = [_cell(grid, i, j + 1)]
    if i + 1 < len(grid):
        neighbours.append(_cell(grid, i + 1, j))
    if i - 1 > 0:
        neighbours.append(_cell(grid, i - 1, j))
    if j - 1 > 0:
        neighbours.append(_cell(grid, i, j - 1))
    return any(cell is not None and cell not in _CLOSED for cell in neighbours)


def validate_walls(grid: list[str]) -> None:
    """Raise if any space borders a cell that is neither a space nor a wall."""
    for i, row in enumerate(grid):
        for j, char in enumerate(row):
            if char == " " and _touches_open(grid, i, j):
                raise SceneError("Open Walls or Invalid Map")


def mark_player(grid: list[str]) -> str | None:
    """Replace the first player letter with ``P`` and return the letter."""
    for i, row in enumerate(grid):
        for j, char in enumerate(row):
            if char in _PLAYER_CHARS:
                grid[i] = row[:j] + "P" + row[j + 1:]
                return char
    return None


def format_grid(grid: list[str]) -> str:
    """Render the grid for debugging, one ``i: |row|`` line per row."""
    return "".join(f"i: |{row}|\n" for row in grid)