"""The parsed contents of a scene description file."""

from __future__ import annotations

from dataclasses import dataclass, field


class SceneError(Exception):
    """Raised when a scene file is missing, malformed or invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


@dataclass
class Scene:
    """Everything read from a scene file: textures, colours and the map."""

    map_name: str
    grid: list[str] = field(default_factory=list)
    max_len: int = 0
    start_map: int = 0
    row: int = 0
    north: str | None = None
    south: str | None = None
    west: str | None = None
    east: str | None = None
    floor: str | None = None
    ceiling: str | None = None
    floor_code: list[str] = field(default_factory=list)
    ceiling_code: list[str] = field(default_factory=list)
    orientation: str | None = None

    def texture_paths(self) -> dict[str, str | None]:
        """Return the wall textures keyed by identifier, in NO, SO, WE, EA order."""
        return {
            "NO": self.north,
            "SO": self.south,
            "WE": self.west,
            "EA": self.east,
        }