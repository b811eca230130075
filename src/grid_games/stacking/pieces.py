from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Tuple

import numpy as np


class PieceKind(IntEnum):
    I = 1
    O = 2
    T = 3
    S = 4
    Z = 5
    J = 6
    L = 7


Shape = np.ndarray


BASE_SHAPES = {
    PieceKind.I: np.array([[1, 1, 1, 1]], dtype=np.int8),
    PieceKind.O: np.array([[1, 1], [1, 1]], dtype=np.int8),
    PieceKind.T: np.array([[0, 1, 0], [1, 1, 1]], dtype=np.int8),
    PieceKind.S: np.array([[0, 1, 1], [1, 1, 0]], dtype=np.int8),
    PieceKind.Z: np.array([[1, 1, 0], [0, 1, 1]], dtype=np.int8),
    PieceKind.J: np.array([[1, 0, 0], [1, 1, 1]], dtype=np.int8),
    PieceKind.L: np.array([[0, 0, 1], [1, 1, 1]], dtype=np.int8),
}


def canonical_shape(kind: PieceKind) -> Shape:
    return BASE_SHAPES[kind].copy()


def rotate_shape(shape: Shape) -> Shape:
    """Rotate a shape 90 degrees clockwise.

    Row ``i`` of the result is column ``i`` of the input read bottom-up.
    """
    return np.ascontiguousarray(np.rot90(shape, 1, axes=(1, 0)))


@dataclass
class Piece:
    kind: PieceKind
    shape: Shape
    x: int
    y: int  # top-left anchor, negative while partly above the board

    def cells_at(self, origin_x: int, origin_y: int) -> List[Tuple[int, int]]:
        cells: List[Tuple[int, int]] = []
        h, w = self.shape.shape
        for dy in range(h):
            for dx in range(w):
                if self.shape[dy, dx]:
                    cells.append((origin_x + dx, origin_y + dy))
        return cells

    def cells(self) -> List[Tuple[int, int]]:
        return self.cells_at(self.x, self.y)

    def rotated(self) -> "Piece":
        return Piece(self.kind, rotate_shape(self.shape), self.x, self.y)
