"""Reading a whole scene file into a :class:`Scene`."""

from __future__ import annotations

import os
from os import PathLike

from .grid import build_grid, mark_player, read_map_lines, validate_chars, validate_walls
from .info import check_colors, check_textures, read_header
from .scene import Scene, SceneError

SCENE_EXTENSION = ".cub"


def check_extension(path: str | PathLike[str]) -> None:
    """Raise :class:`SceneError` unless ``path`` ends with ``.cub``."""
    if not os.fspath(path).endswith(SCENE_EXTENSION):
        raise SceneError("Wrong extension file")


def _check_exists(path: str | PathLike[str]) -> None:
    try:
        fd = os.open(path, os.O_RDONLY)
    except OSError:
        raise SceneError("File doesn't exist") from None
    os.close(fd)


def parse_scene(path: str | PathLike[str], texture_dir: str | PathLike[str] = "texture") -> Scene:
    """Read, validate and return the scene stored at ``path``.

    Wall textures are looked up in ``texture_dir``. The player's start
    letter is replaced by ``P`` in the returned grid and kept as the
    scene's orientation.
    """
    check_extension(path)
    _check_exists(path)
    info = read_header(path)
    check_textures(info, texture_dir)
    check_colors(info)
    lines = read_map_lines(path, info.start_map)
    grid = build_grid(lines)
    validate_chars(grid)
    validate_walls(grid)
    orientation = mark_player(grid)
    return Scene(
        map_name=os.fspath(path),
        grid=grid,
        max_len=len(grid[0]) - 1,
        start_map=info.start_map,
        row=len(lines),
        north=info.north,
        south=info.south,
        west=info.west,
        east=info.east,
        floor=info.floor,
        ceiling=info.ceiling,
        floor_code=info.floor_code,
        ceiling_code=info.ceiling_code,
        orientation=orientation,
    )