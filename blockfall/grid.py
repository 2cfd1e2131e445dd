"""The playing field: a grid of settled cells."""

from __future__ import annotations

from dataclasses import dataclass, field

import pygame

from blockfall.shape import BOARD_OFFSET_X, BOARD_OFFSET_Y, CELL_SIZE, COLORS


@dataclass
class Grid:
    """Rows of cells, each holding 0 for empty or a piece id."""

    rows: int = 20
    columns: int = 10
    cell_size: int = CELL_SIZE
    offset_x: int = BOARD_OFFSET_X
    offset_y: int = BOARD_OFFSET_Y
    cells: list[list[int]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.reset()

    def _check(self, row: int, column: int) -> None:
        if self.is_outside(row, column):
            raise IndexError(f"cell ({row}, {column}) is outside the grid")

    def __getitem__(self, key: tuple[int, int]) -> int:
        row, column = key
        self._check(row, column)
        return self.cells[row][column]

    def __setitem__(self, key: tuple[int, int], value: int) -> None:
        row, column = key
        self._check(row, column)
        self.cells[row][column] = value

    def is_outside(self, row: int, column: int) -> bool:
        """True when the cell lies beyond the grid's edges."""
        return not (0 <= row < self.rows and 0 <= column < self.columns)

    def is_vacant(self, row: int, column: int) -> bool:
        """True when the cell holds no settled block."""
        return self[row, column] == 0

    def is_row_full(self, row: int) -> bool:
        """True when every cell in the row is filled."""
        return all(self.cells[row])

    def move_row_down(self, row: int, num_rows: int) -> None:
        """Copy a row num_rows further down and empty the original."""
        self.cells[row + num_rows] = self.cells[row]
        self.cells[row] = [0] * self.columns

    def clear_row(self, row: int) -> None:
        """Empty every cell in the row."""
        self.cells[row] = [0] * self.columns

    def clear_full_rows(self) -> int:
        """Remove full rows, drop the rows above, and return how many were removed."""
        completed = 0
        for row in reversed(range(self.rows)):
            if self.is_row_full(row):
                self.clear_row(row)
                completed += 1
            elif completed:
                self.move_row_down(row, completed)
        return completed

    def reset(self) -> None:
        """Empty the whole grid."""
        self.cells = [[0] * self.columns for _ in range(self.rows)]

    def draw(self, surface: pygame.Surface) -> None:
        """Paint every cell in the colour of what it holds."""
        size = self.cell_size
        for i, row in enumerate(self.cells):
            for j, value in enumerate(row):
                rect = pygame.Rect(
                    self.offset_x + j * size + 1, self.offset_y + i * size + 1, size - 1, size - 1
                )
                pygame.draw.rect(surface, COLORS[value], rect)