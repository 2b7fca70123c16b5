"""Reading and checking the header of a scene file: textures and colours."""

from __future__ import annotations

import os
from contextlib import closing
from dataclasses import dataclass, field
from os import PathLike

from .scene import SceneError
from .textutil import atoi, iter_lines, split_fields

_BLANKS = " \t"
_HEADER_ENTRIES = 6
_TEXTURE_IDS = ("NO", "SO", "WE", "EA")
_COLOR_IDS = ("F", "C")
_COMPONENTS = 3
_COMPONENT_MAX = 255


@dataclass
class HeaderInfo:
    """Identifiers read from the top of a scene file."""

    north: str | None = None
    south: str | None = None
    west: str | None = None
    east: str | None = None
    floor: str | None = None
    ceiling: str | None = None
    floor_code: list[str] = field(default_factory=list)
    ceiling_code: list[str] = field(default_factory=list)
    start_map: int = 0


def _set_texture(info: HeaderInfo, ident: str, value: str) -> None:
    if ident == "NO":
        info.north = value
    elif ident == "SO":
        info.south = value
    elif ident == "WE":
        info.west = value
    else:
        info.east = value


def parse_line(info: HeaderInfo, line: str) -> bool:
    """Record one header line into ``info``.

    Returns False for a blank line and True for any other line, which
    counts as a header entry even if its identifier is unknown. A texture
    path that does not start with ``./`` raises :class:`SceneError`.
    The last character of a value (normally the newline) is dropped.
    """
    body = line.lstrip(_BLANKS)
    if body[:1] in ("", "\n"):
        return False
    for ident in _TEXTURE_IDS:
        if body.startswith(ident):
            value = body[len(ident):].lstrip(_BLANKS)
            if not value.startswith("./"):
                raise SceneError("Invalid Characters")
            _set_texture(info, ident, value[2:-1])
            return True
    for ident in _COLOR_IDS:
        if body.startswith(ident):
            value = body[len(ident):].lstrip(_BLANKS)[:-1]
            if ident == "F":
                info.floor = value
            else:
                info.ceiling = value
            return True
    return True


def read_header(path: str | PathLike[str]) -> HeaderInfo:
    """Read header entries from ``path`` until six have been found.

    ``start_map`` is set to the number of lines that come before the
    sixth entry.
    """
    info = HeaderInfo()
    counted = 0
    with closing(iter_lines(path)) as lines:
        for line in lines:
            if parse_line(info, line):
                counted += 1
            if counted == _HEADER_ENTRIES:
                break
            info.start_map += 1
    return info


def check_textures(info: HeaderInfo, texture_dir: str | PathLike[str] = "texture") -> None:
    """Check that every wall texture is set and can be opened in ``texture_dir``."""
    entries = (
        ("NO", info.north),
        ("SO", info.south),
        ("WE", info.west),
        ("EA", info.east),
    )
    for ident, name in entries:
        if name is None:
            raise SceneError(f"{ident}: no Texture")
        path = os.path.join(os.fspath(texture_dir), name)
        try:
            fd = os.open(path, os.O_RDONLY)
        except OSError:
            raise SceneError(f"{path}: file doesn't exist") from None
        os.close(fd)


def _color_text(ident: str, text: str | None) -> str:
    if text is None or any(not ("0" <= char <= "9" or char == ",") for char in text):
        raise SceneError(f"{ident}: Invalid color code")
    return text


def check_colors(info: HeaderInfo) -> tuple[list[str], list[str]]:
    """Validate the floor and ceiling colours and store their components.

    Each colour may hold only digits and commas, must split into three
    components, and each component must lie in 0..255.
    """
    floor = _color_text("F", info.floor)
    ceiling = _color_text("C", info.ceiling)
    floor_code = split_fields(floor, ",")
    ceiling_code = split_fields(ceiling, ",")
    if len(floor_code) != _COMPONENTS or len(ceiling_code) != _COMPONENTS:
        raise SceneError("Invalid Color code")
    if any(not 0 <= atoi(value) <= _COMPONENT_MAX for value in floor_code + ceiling_code):
        raise SceneError("Invalid color numbers")
    info.floor_code = floor_code
    info.ceiling_code = ceiling_code
    return floor_code, ceiling_code