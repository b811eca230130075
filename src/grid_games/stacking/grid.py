from __future__ import annotations

from typing import Iterable, Tuple

import numpy as np

from grid_games.errors import BoardShapeError


Coordinate = Tuple[int, int]


class StackingGrid:
    """Fixed-size grid of locked cells.

    The grid uses 0 for empty cells and the ``PieceKind`` value of the piece
    that locked there otherwise. Row 0 is the top of the board.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"grid dimensions must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(0)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def collides(self, cells: Iterable[Coordinate]) -> bool:
        # Cells above the top edge only collide with the side walls.
        for x, y in cells:
            if x < 0 or x >= self.width or y >= self.height:
                return True
            if y >= 0 and self.grid[y, x] != 0:
                return True
        return False

    def merge(self, cells: Iterable[Coordinate], value: int) -> int:
        """Write `value` into every visible cell and return how many were written."""
        merged = 0
        for x, y in cells:
            if y < 0:
                continue
            self.grid[y, x] = value
            merged += 1
        return merged

    def clear_full_rows(self) -> int:
        full_rows = np.where(np.all(self.grid != 0, axis=1))[0]
        if full_rows.size == 0:
            return 0
        num = int(full_rows.size)
        # Remove full rows and add empty rows at the top
        kept = np.delete(self.grid, full_rows, axis=0)
        new_rows = np.zeros((num, self.width), dtype=np.int8)
        self.grid = np.vstack((new_rows, kept))
        self.check_shape()
        return num

    def check_shape(self) -> None:
        if self.grid.shape != (self.height, self.width):
            raise BoardShapeError((self.height, self.width), self.grid.shape)

    def get_max_height(self) -> int:
        non_empty_rows = np.where(np.any(self.grid != 0, axis=1))[0]
        if non_empty_rows.size == 0:
            return 0
        return self.height - int(non_empty_rows[0])

    def count_holes(self) -> int:
        holes = 0
        for x in range(self.width):
            seen_block = False
            for cell in self.grid[:, x]:
                if cell != 0:
                    seen_block = True
                elif seen_block:
                    holes += 1
        return holes

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
