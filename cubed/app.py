"""The game window, its event loop and the command-line entry point."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from os import PathLike
from pathlib import Path

from .color import HORIZON, background_color, convert_color
from .grid import format_grid
from .minimap import TILE_SIZE, blank_tiles, minimap_tiles
from .movement import XK_DOWN, XK_ESCAPE, XK_LEFT, XK_RIGHT, XK_UP, key_direction, move_player
from .parser import parse_scene
from .scene import Scene, SceneError

WINDOW_WIDTH = 720
WINDOW_HEIGHT = 320
WINDOW_TITLE = "Cubed"
EXIT_ERROR = 4
EXIT_CLOSED = 1

_TILE_FILES = {
    "1": ("wall.xpm", (120, 120, 120)),
    "0": ("floor.xpm", (200, 200, 200)),
    "P": ("player.xpm", (220, 40, 40)),
    " ": ("empty.xpm", (0, 0, 0)),
}


def _rgb(color: int) -> tuple[int, int, int]:
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


class Game:
    """A running scene: the map, its colours and the player's moves."""

    def __init__(self, scene: Scene, texture_dir: str | PathLike[str] = "texture") -> None:
        self.scene = scene
        self.texture_dir = Path(texture_dir)
        self.floor_color = convert_color(scene.floor_code)
        self.ceiling_color = convert_color(scene.ceiling_code)
        self.running = True

    def handle_key(self, keysym: int) -> bool:
        """React to a key symbol; return False once the game should stop."""
        if keysym == XK_ESCAPE:
            self.running = False
            return False
        direction = key_direction(keysym)
        if direction is not None:
            move_player(self.scene.grid, direction)
        return self.running

    def _load_tiles(self) -> dict:
        import pygame

        tiles = {}
        for kind, (name, fallback) in _TILE_FILES.items():
            try:
                image = pygame.image.load(str(self.texture_dir / name)).convert()
            except (pygame.error, OSError):
                image = pygame.Surface((TILE_SIZE, TILE_SIZE))
                image.fill(fallback)
            tiles[kind] = image
        return tiles

    def _draw_background(self, screen) -> None:
        import pygame

        width, height = screen.get_size()
        ceiling = _rgb(background_color(0, self.floor_color, self.ceiling_color))
        floor = _rgb(background_color(HORIZON, self.floor_color, self.ceiling_color))
        screen.fill(ceiling, pygame.Rect(0, 0, width, min(HORIZON, height)))
        if height > HORIZON:
            screen.fill(floor, pygame.Rect(0, HORIZON, width, height - HORIZON))

    def run(self) -> int:
        """Open the window and run until it is closed; return the exit status."""
        import pygame

        keysyms = {
            pygame.K_ESCAPE: XK_ESCAPE,
            pygame.K_LEFT: XK_LEFT,
            pygame.K_UP: XK_UP,
            pygame.K_RIGHT: XK_RIGHT,
            pygame.K_DOWN: XK_DOWN,
        }
        pygame.init()
        try:
            screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
            pygame.display.set_caption(WINDOW_TITLE)
            tiles = self._load_tiles()
            self._draw_background(screen)
            for tile in blank_tiles():
                screen.blit(tiles[tile.kind], (tile.x, tile.y))
            clock = pygame.time.Clock()
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == pygame.KEYDOWN:
                        self.handle_key(keysyms.get(event.key, event.key))
                for tile in minimap_tiles(self.scene.grid, self.scene.row, self.scene.max_len):
                    screen.blit(tiles[tile.kind], (tile.x, tile.y))
                pygame.display.flip()
                clock.tick(60)
        finally:
            pygame.quit()
        return EXIT_CLOSED


def main(argv: Sequence[str] | None = None) -> int:
    """Load the scene named on the command line and play it."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        sys.stderr.write("Error\nWrong number of arguments\n")
        return EXIT_ERROR
    try:
        scene = parse_scene(args[0])
    except SceneError as error:
        sys.stderr.write(f"Error\n{error}\n")
        return EXIT_ERROR
    sys.stdout.write(format_grid(scene.grid))
    return Game(scene).run()


if __name__ == "__main__":
    sys.exit(main())