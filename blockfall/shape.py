"""Falling pieces: their cell layouts, rotation and movement."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

CELL_SIZE = 32
BOARD_OFFSET_X = 20
BOARD_OFFSET_Y = 8

DARKGRAY = (80, 80, 80)
SKYBLUE = (102, 191, 255)
YELLOW = (253, 249, 0)
PURPLE = (200, 122, 255)
LIME = (0, 158, 47)
RED = (230, 41, 55)
BLUE = (0, 121, 241)
ORANGE = (255, 161, 0)
WHITE = (255, 255, 255)

# Index 0 is an empty cell; 1..8 are the piece ids.
COLORS = (DARKGRAY, SKYBLUE, YELLOW, PURPLE, LIME, RED, BLUE, ORANGE, WHITE)


@dataclass(frozen=True)
class Position:
    """A cell on the board, given by row and column."""

    row: int = 0
    column: int = 0


def _layout(*cells: tuple[int, int]) -> tuple[Position, ...]:
    return tuple(Position(row, column) for row, column in cells)


_O_LAYOUT = _layout((0, 0), (0, 1), (1, 0), (1, 1))
_S_LAYOUT = _layout((0, 0), (1, 0), (1, 1), (2, 1))

# id -> (layouts for rotation states 0..3, spawn offset as (rows, columns))
_PIECES: dict[int, tuple[tuple[tuple[Position, ...], ...], tuple[int, int]]] = {
    1: (
        (
            _layout((1, 0), (1, 1), (1, 2), (1, 3)),
            _layout((0, 2), (1, 2), (2, 2), (3, 2)),
            _layout((2, 0), (2, 1), (2, 2), (2, 3)),
            _layout((0, 1), (1, 1), (2, 1), (3, 1)),
        ),
        (-1, 3),
    ),
    2: ((_O_LAYOUT,) * 4, (0, 4)),
    3: (
        (
            _layout((0, 1), (1, 0), (1, 1), (1, 2)),
            _layout((0, 1), (1, 1), (1, 2), (2, 1)),
            _layout((1, 0), (1, 1), (1, 2), (2, 1)),
            _layout((0, 1), (1, 0), (1, 1), (2, 1)),
        ),
        (0, 3),
    ),
    4: ((_S_LAYOUT,) * 4, (0, 3)),
    5: (
        (
            _layout((0, 0), (0, 1), (1, 1), (1, 2)),
            _layout((0, 2), (1, 1), (1, 2), (2, 1)),
            _layout((1, 0), (1, 1), (2, 1), (2, 2)),
            _layout((0, 1), (1, 0), (1, 1), (2, 0)),
        ),
        (0, 3),
    ),
    6: (
        (
            _layout((0, 0), (1, 0), (1, 1), (1, 2)),
            _layout((0, 1), (0, 2), (1, 1), (2, 1)),
            _layout((1, 0), (1, 1), (1, 2), (2, 2)),
            _layout((0, 1), (1, 1), (2, 0), (2, 1)),
        ),
        (0, 3),
    ),
    7: (
        (
            _layout((0, 2), (1, 0), (1, 1), (1, 2)),
            _layout((0, 1), (1, 1), (2, 1), (2, 2)),
            _layout((1, 0), (1, 1), (1, 2), (2, 0)),
            _layout((0, 0), (0, 1), (1, 1), (2, 1)),
        ),
        (0, 3),
    ),
    8: (
        (
            _layout((0, 0), (1, 0), (0, 1), (0, 2)),
            _layout((0, 0), (1, 0), (2, 0), (2, 1)),
            _layout((1, 2), (1, 1), (0, 2), (1, 0)),
            _layout((0, 1), (0, 2), (1, 2), (2, 2)),
        ),
        (0, 4),
    ),
}

SHAPE_IDS = tuple(sorted(_PIECES))


@dataclass
class Shape:
    """A piece with four rotation layouts and an offset on the board."""

    id: int
    rotations: tuple[tuple[Position, ...], ...]
    rotation_state: int = 0
    row_offset: int = 0
    col_offset: int = 0
    cell_size: int = CELL_SIZE

    def move(self, rows: int, columns: int) -> None:
        """Shift the piece by the given number of rows and columns."""
        self.row_offset += rows
        self.col_offset += columns

    def rotate(self) -> None:
        """Turn to the next rotation state."""
        self.rotation_state = (self.rotation_state + 1) % 4

    def reverse_rotation(self) -> None:
        """Turn back to the previous rotation state."""
        self.rotation_state = (self.rotation_state + 3) % 4

    def cell_positions(self) -> list[Position]:
        """The board cells the piece covers in its current state."""
        return [
            Position(cell.row + self.row_offset, cell.column + self.col_offset)
            for cell in self.rotations[self.rotation_state]
        ]

    def draw(self, surface: pygame.Surface, offset_x: int = 0, offset_y: int = 0) -> None:
        """Paint the piece's cells onto the surface."""
        color = COLORS[self.id]
        size = self.cell_size
        for cell in self.cell_positions():
            x = BOARD_OFFSET_X + cell.column * size
            y = BOARD_OFFSET_Y + cell.row * size
            pygame.draw.rect(
                surface, color, pygame.Rect(x + 1 + offset_x, y + 1 + offset_y, size - 1, size - 1)
            )


def make_shape(shape_id: int) -> Shape:
    """Build a fresh piece of the given id at its spawn position."""
    try:
        rotations, (rows, columns) = _PIECES[shape_id]
    except KeyError:
        raise ValueError(f"unknown shape id: {shape_id!r}") from None
    shape = Shape(id=shape_id, rotations=rotations)
    shape.move(rows, columns)
    return shape