"""Game state: the falling piece, the queue, scoring and key handling."""

from __future__ import annotations

import random
from enum import Enum, auto
from pathlib import Path

import pygame

from blockfall.grid import Grid
from blockfall.shape import Shape, make_shape

# Piece ids drawn from in each level; level 2 adds the U piece.
_BAGS = {
    1: (1, 6, 7, 2, 4, 3, 5),
    2: (1, 6, 7, 2, 4, 3, 5, 8),
}
_DROP_ROWS = {1: 1, 2: 2}
_HARD_DROP_ROWS = 6
_LINE_POINTS = {
    1: {1: 50, 2: 150, 3: 250},
    2: {1: 30, 2: 80, 3: 170},
}
# Where the upcoming piece is drawn, by piece id; others use the default.
_PREVIEW_OFFSETS = {1: (346, 404), 2: (346, 396), 4: (356, 387)}
_DEFAULT_PREVIEW_OFFSET = (360, 395)


class Key(Enum):
    """Keys the game responds to."""

    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    SPACE = auto()


class Game:
    """One game of falling blocks at level 1 or level 2."""

    def __init__(
        self,
        level: int = 1,
        rng: random.Random | None = None,
        sound_dir: str | Path | None = None,
    ) -> None:
        if level not in _BAGS:
            raise ValueError(f"unsupported level: {level!r}")
        self.level = level
        self.grid = Grid()
        self.rng = rng if rng is not None else random.Random()
        self.score = 0
        self.game_over = False
        self._used: set[int] = set()
        self._sounds: dict[str, pygame.mixer.Sound] = {}
        self.current_shape: Shape = self.random_shape()
        self.next_shape: Shape = self.random_shape()
        if sound_dir is not None:
            self._load_audio(Path(sound_dir))

    def _load_audio(self, directory: Path) -> None:
        pygame.mixer.init()
        pygame.mixer.music.load(str(directory / "music.mp3"))
        pygame.mixer.music.play(-1)
        self._sounds = {
            "rotate": pygame.mixer.Sound(str(directory / "rotate.mp3")),
            "clear": pygame.mixer.Sound(str(directory / "clear.mp3")),
        }

    def _play(self, name: str) -> None:
        sound = self._sounds.get(name)
        if sound is not None:
            sound.play()

    def close(self) -> None:
        """Stop and release any audio that was loaded."""
        if self._sounds:
            pygame.mixer.music.stop()
            self._sounds.clear()
            pygame.mixer.quit()

    @property
    def drop_rows(self) -> int:
        """How many rows a single step down moves the piece."""
        return _DROP_ROWS[self.level]

    def update_score(self, lines: int, move_down_points: int) -> None:
        """Add points for cleared lines, or the move-down points otherwise."""
        points = _LINE_POINTS[self.level].get(lines)
        self.score += points if points is not None else move_down_points

    def random_shape(self) -> Shape:
        """Draw a new piece; each piece appears once before any repeats."""
        bag = _BAGS[self.level]
        if len(self._used) >= len(bag):
            self._used.clear()
        shape_id = self.rng.choice([i for i in bag if i not in self._used])
        self._used.add(shape_id)
        return make_shape(shape_id)

    def _blocked(self) -> bool:
        return self.is_shape_outside() or not self.block_fits()

    def _try_move(self, rows: int, columns: int) -> bool:
        self.current_shape.move(rows, columns)
        if self._blocked():
            self.current_shape.move(-rows, -columns)
            return False
        return True

    def _step_down(self, rows: int) -> None:
        if not self._try_move(rows, 0):
            self.update_score(0, 1)
            self.score += 1
            self.lock_shape()

    def handle_key(self, key: Key | None) -> None:
        """React to a key press; None means no key was pressed."""
        if self.game_over and key is not None:
            self.reset()
        if self.game_over or key is None:
            return
        if key is Key.RIGHT:
            self._try_move(0, 1)
        elif key is Key.LEFT:
            self._try_move(0, -1)
        elif key is Key.UP:
            self.current_shape.rotate()
            if self._blocked():
                self.current_shape.reverse_rotation()
            else:
                self._play("rotate")
        elif key is Key.DOWN:
            self._step_down(self.drop_rows)
        elif key is Key.SPACE and self.level == 2:
            self._step_down(_HARD_DROP_ROWS)

    def is_shape_outside(self) -> bool:
        """True when any cell of the current piece lies off the grid."""
        return any(
            self.grid.is_outside(cell.row, cell.column)
            for cell in self.current_shape.cell_positions()
        )

    def rotate_shape(self) -> None:
        """Turn the current piece without any checks."""
        self.current_shape.rotate()

    def fall_block(self) -> None:
        """Move the piece down one step, locking it when it cannot move."""
        if not self.block_fits():
            self.game_over = True
            return
        if not self._try_move(self.drop_rows, 0):
            self.lock_shape()

    def lock_shape(self) -> None:
        """Settle the current piece into the grid and bring in the next one."""
        shape = self.current_shape
        for cell in shape.cell_positions():
            self.grid[cell.row, cell.column] = shape.id
        self.current_shape = self.next_shape
        if not self.block_fits():
            self.game_over = True
        self.next_shape = self.random_shape()
        cleared = self.grid.clear_full_rows()
        if cleared > 0:
            self._play("clear")
        self.update_score(cleared, 0)

    def block_fits(self) -> bool:
        """True when every cell of the current piece is on an empty grid cell."""
        return all(
            not self.grid.is_outside(cell.row, cell.column)
            and self.grid.is_vacant(cell.row, cell.column)
            for cell in self.current_shape.cell_positions()
        )

    def reset(self) -> None:
        """Start over with an empty grid, fresh pieces and zero score."""
        self.grid.reset()
        self._used.clear()
        self.current_shape = self.random_shape()
        self.next_shape = self.random_shape()
        self.game_over = False
        self.score = 0

    def draw(self, surface: pygame.Surface) -> None:
        """Paint the grid, the current piece and the upcoming piece."""
        self.grid.draw(surface)
        self.current_shape.draw(surface, 0, 0)
        offset_x, offset_y = _PREVIEW_OFFSETS.get(self.next_shape.id, _DEFAULT_PREVIEW_OFFSET)
        self.next_shape.draw(surface, offset_x, offset_y)