import pytest

from cubed.movement import XK_ESCAPE, XK_RIGHT, Direction, key_direction, move_player


def make_grid():
    return ["11111", "1P001", "10001", "11111"]


@pytest.mark.parametrize(
    "keysym, expected",
    [
        (100, Direction.RIGHT),
        (65363, Direction.RIGHT),
        (97, Direction.LEFT),
        (65361, Direction.LEFT),
        (119, Direction.UP),
        (65362, Direction.UP),
        (115, Direction.DOWN),
        (65364, Direction.DOWN),
    ],
)
def test_key_direction(keysym, expected):
    assert key_direction(keysym) is expected


def test_unbound_keys():
    assert key_direction(XK_ESCAPE) is None
    assert key_direction(ord("q")) is None


def test_arrow_constant_matches_letter():
    assert key_direction(XK_RIGHT) is key_direction(ord("d"))


def test_move_right():
    grid = make_grid()
    assert move_player(grid, Direction.RIGHT) == (2, 1)
    assert grid[1] == "10P01"


def test_move_down():
    grid = make_grid()
    assert move_player(grid, Direction.DOWN) == (1, 2)
    assert grid[1] == "10001"
    assert grid[2] == "1P001"


@pytest.mark.parametrize("direction", [Direction.LEFT, Direction.UP])
def test_wall_blocks(direction):
    grid = make_grid()
    assert move_player(grid, direction) == (1, 1)
    assert grid == make_grid()


def test_single_player_kept():
    grid = make_grid()
    for direction in (Direction.RIGHT, Direction.RIGHT, Direction.DOWN, Direction.LEFT):
        move_player(grid, direction)
    assert sum(row.count("P") for row in grid) == 1