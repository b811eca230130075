from __future__ import annotations

from enum import IntEnum
from typing import List, Optional, Tuple

import numpy as np

from grid_games.errors import BoardShapeError


Position = Tuple[int, int]  # (row, col)

# Horizontal, vertical, diagonal down-right, diagonal down-left.
DIRECTIONS: Tuple[Position, ...] = ((0, 1), (1, 0), (1, 1), (1, -1))


class Player(IntEnum):
    ONE = 1
    TWO = 2

    @property
    def other(self) -> "Player":
        return Player.TWO if self is Player.ONE else Player.ONE


class ConnectionBoard:
    """Grid of dropped tokens; 0 is empty, otherwise the ``Player`` value.

    Row 0 is the top row, tokens settle towards row ``rows - 1``.
    """

    def __init__(self, rows: int, cols: int) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError(f"board dimensions must be positive, got {rows}x{cols}")
        self.rows = int(rows)
        self.cols = int(cols)
        self.grid = np.zeros((self.rows, self.cols), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(0)

    def is_inside(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def drop_row(self, col: int) -> Optional[int]:
        """Lowest empty row in `col`, or None when the column is full or out of range."""
        if not 0 <= col < self.cols:
            return None
        for row in range(self.rows - 1, -1, -1):
            if self.grid[row, col] == 0:
                return row
        return None

    def place(self, row: int, col: int, player: Player) -> None:
        self.grid[row, col] = int(player)
        self.check_shape()

    def is_full(self) -> bool:
        return bool(np.all(self.grid != 0))

    def valid_columns(self) -> List[int]:
        return [c for c in range(self.cols) if self.grid[0, c] == 0]

    def check_shape(self) -> None:
        if self.grid.shape != (self.rows, self.cols):
            raise BoardShapeError((self.rows, self.cols), self.grid.shape)

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()


def find_winning_line(board: ConnectionBoard, row: int, col: int, win_count: int = 4) -> List[Position]:
    """Return the first run of `win_count` or more cells through (row, col).

    Directions are tried in ``DIRECTIONS`` order. Each run is maximal and is
    listed end to end, from the far cell along the direction back through
    (row, col) to the far cell against it. An empty list means no win.
    """
    player = int(board.grid[row, col])
    if player == 0:
        return []

    for dr, dc in DIRECTIONS:
        forward: List[Position] = []
        r, c = row + dr, col + dc
        while board.is_inside(r, c) and board.grid[r, c] == player:
            forward.append((r, c))
            r, c = r + dr, c + dc

        backward: List[Position] = []
        r, c = row - dr, col - dc
        while board.is_inside(r, c) and board.grid[r, c] == player:
            backward.append((r, c))
            r, c = r - dr, c - dc

        if 1 + len(forward) + len(backward) >= win_count:
            return list(reversed(forward)) + [(row, col)] + backward
    return []
