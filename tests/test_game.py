import random

import pygame
import pytest

from blockfall.game import Game, Key
from blockfall.shape import COLORS, make_shape


def _game(level=1, seed=1):
    return Game(level, rng=random.Random(seed))


def _cells(game):
    return game.current_shape.cell_positions()


@pytest.mark.parametrize(
    "level,lines,expected",
    [(1, 1, 50), (1, 2, 150), (1, 3, 250), (2, 1, 30), (2, 2, 80), (2, 3, 170)],
)
def test_update_score_line_points(level, lines, expected):
    game = _game(level)
    game.update_score(lines, 7)
    assert game.score == expected


def test_update_score_without_lines_adds_move_down_points():
    game = _game()
    game.update_score(0, 7)
    game.update_score(4, 3)
    assert game.score == 10


def test_invalid_level_raises():
    with pytest.raises(ValueError):
        Game(3, rng=random.Random(0))


@pytest.mark.parametrize("level,ids", [(1, set(range(1, 8))), (2, set(range(1, 9)))])
def test_random_shape_uses_each_piece_once_per_bag(level, ids):
    game = _game(level, seed=5)
    first = [game.current_shape.id, game.next_shape.id]
    first += [game.random_shape().id for _ in range(len(ids) - 2)]
    assert sorted(first) == sorted(ids)
    second = [game.random_shape().id for _ in range(len(ids))]
    assert sorted(second) == sorted(ids)


def test_left_stops_at_wall():
    game = _game()
    for _ in range(15):
        game.handle_key(Key.LEFT)
    assert min(c.column for c in _cells(game)) == 0


def test_right_stops_at_wall():
    game = _game()
    for _ in range(15):
        game.handle_key(Key.RIGHT)
    assert max(c.column for c in _cells(game)) == game.grid.columns - 1


def test_up_rotates_piece():
    game = _game()
    game.current_shape = make_shape(3)
    game.handle_key(Key.UP)
    assert game.current_shape.rotation_state == 1


def test_no_key_changes_nothing():
    game = _game()
    before = _cells(game)
    game.handle_key(None)
    assert _cells(game) == before
    assert game.score == 0


@pytest.mark.parametrize("level", [1, 2])
def test_fall_block_moves_by_drop_rows(level):
    game = _game(level)
    game.current_shape = make_shape(3)
    before = game.current_shape.row_offset
    game.fall_block()
    assert game.current_shape.row_offset == before + level


def test_space_only_in_level_two():
    game1 = _game(1)
    game1.current_shape = make_shape(3)
    game1.handle_key(Key.SPACE)
    assert game1.current_shape.row_offset == 0

    game2 = _game(2)
    game2.current_shape = make_shape(3)
    game2.handle_key(Key.SPACE)
    assert game2.current_shape.row_offset == 6


def test_falling_piece_eventually_locks():
    game = _game()
    game.current_shape = make_shape(2)
    upcoming = game.next_shape
    for _ in range(25):
        game.fall_block()
    assert game.current_shape is upcoming
    assert sum(value == 2 for row in game.grid.cells for value in row) == 4
    assert all(value == 2 for value in game.grid.cells[-1][4:6])


def test_down_at_bottom_locks_and_scores():
    game = _game()
    game.current_shape = make_shape(2)
    game.current_shape.move(18, 0)
    game.handle_key(Key.DOWN)
    assert game.score == 2
    assert game.grid[19, 4] == 2
    assert game.grid[18, 5] == 2


def test_lock_clears_full_row_and_scores():
    game = _game()
    for column in range(4, 10):
        game.grid[19, column] = 5
    game.grid[18, 9] = 5
    shape = make_shape(1)
    shape.move(19, -3)
    game.current_shape = shape
    game.lock_shape()
    assert game.score == 50
    assert game.grid[19, 9] == 5
    assert sum(v != 0 for row in game.grid.cells for v in row) == 1


def test_game_over_and_reset_on_key():
    game = _game()
    for row in range(4):
        game.grid.cells[row] = [7] * game.grid.columns
    game.score = 99
    game.fall_block()
    assert game.game_over is True
    game.handle_key(Key.LEFT)
    assert game.game_over is False
    assert game.score == 0
    assert all(v == 0 for row in game.grid.cells for v in row)


def test_block_fits_false_on_occupied_cell():
    game = _game()
    cell = _cells(game)[0]
    assert game.block_fits() is True
    game.grid[cell.row, cell.column] = 3
    assert game.block_fits() is False


def test_is_shape_outside_after_moving_off_grid():
    game = _game()
    assert game.is_shape_outside() is False
    game.current_shape.move(0, -20)
    assert game.is_shape_outside() is True


def test_rotate_shape_wraps_after_four():
    game = _game()
    for _ in range(4):
        game.rotate_shape()
    assert game.current_shape.rotation_state == 0


def test_draw_paints_empty_cell():
    surface = pygame.Surface((500, 700))
    game = _game()
    game.draw(surface)
    assert tuple(surface.get_at((21, 617)))[:3] == COLORS[0]


def test_reset_restores_fresh_state():
    game = _game()
    game.score = 40
    game.grid[10, 3] = 1
    game.reset()
    assert game.score == 0
    assert game.grid[10, 3] == 0
    assert game.current_shape.rotation_state == 0