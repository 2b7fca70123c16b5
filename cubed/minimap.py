"""Working out which tiles the minimap shows around the player."""

from __future__ import annotations

from typing import NamedTuple

TILE_SIZE = 16
BLANK_ROWS = 13
BLANK_COLUMNS = 19
_DRAWN = frozenset("01P ")


class Tile(NamedTuple):
    """One minimap tile: its position in tiles and the map character shown."""

    row: int
    col: int
    kind: str

    @property
    def x(self) -> int:
        return self.col * TILE_SIZE

    @property
    def y(self) -> int:
        return self.row * TILE_SIZE


def find_player(grid: list[str]) -> tuple[int, int]:
    """Return the ``(x, y)`` of the first ``P`` in the grid, or ``(0, 0)``."""
    for y, row in enumerate(grid):
        x = row.find("P")
        if x != -1:
            return x, y
    return 0, 0


def blank_tiles() -> list[Tile]:
    """Return the empty tiles that clear the minimap area."""
    return [Tile(i, j, " ") for i in range(BLANK_ROWS) for j in range(BLANK_COLUMNS)]


def _cell(grid: list[str], y: int, x: int) -> str:
    if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
        return grid[y][x]
    return " "


def minimap_tiles(grid: list[str], row: int, max_len: int) -> list[Tile]:
    """Return the tiles of the view centred on the player.

    The view spans rows -6..6 and columns -9..9 around the player. Rows
    outside ``0..row`` are left out; columns outside ``1..max_len-1``
    show as empty tiles.
    """
    x, y = find_player(grid)
    tiles: list[Tile] = []
    i = 0
    k = -6
    while k < 7:
        while (y + k < 0 or y + k > row) and k < 7:
            k += 1
            i += 1
        if k < 7:
            z = -9
            j = 0
            while z < 10:
                if x + z < 0:
                    z += 1
                    j += 1
                kind = _cell(grid, y + k, x + z) if 0 < x + z < max_len else " "
                if kind in _DRAWN:
                    tiles.append(Tile(i, j, kind))
                z += 1
                j += 1
        i += 1
        k += 1
    return tiles