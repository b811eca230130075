from __future__ import annotations

import numpy as np
import pytest

from grid_games.stacking import BASE_SHAPES, Piece, PieceKind, canonical_shape, rotate_shape


@pytest.mark.parametrize("kind", list(PieceKind))
def test_four_rotations_return_original_shape(kind: PieceKind) -> None:
    shape = canonical_shape(kind)
    rotated = shape
    for _ in range(4):
        rotated = rotate_shape(rotated)
    assert np.array_equal(rotated, shape)


def test_rotation_is_clockwise() -> None:
    t = canonical_shape(PieceKind.T)
    assert rotate_shape(t).tolist() == [[1, 0], [1, 1], [1, 0]]

    i = canonical_shape(PieceKind.I)
    assert rotate_shape(i).tolist() == [[1], [1], [1], [1]]


def test_rotated_row_is_reversed_column() -> None:
    shape = canonical_shape(PieceKind.J)
    rotated = rotate_shape(shape)
    for i in range(shape.shape[1]):
        assert rotated[i].tolist() == list(reversed(shape[:, i].tolist()))


def test_canonical_shape_is_a_copy() -> None:
    shape = canonical_shape(PieceKind.O)
    shape[0, 0] = 0
    assert BASE_SHAPES[PieceKind.O][0, 0] == 1


def test_piece_cells_follow_anchor() -> None:
    piece = Piece(PieceKind.S, canonical_shape(PieceKind.S), x=2, y=-1)
    assert sorted(piece.cells()) == sorted([(3, -1), (4, -1), (2, 0), (3, 0)])


def test_rotated_piece_keeps_position() -> None:
    piece = Piece(PieceKind.L, canonical_shape(PieceKind.L), x=5, y=7)
    rotated = piece.rotated()
    assert (rotated.kind, rotated.x, rotated.y) == (PieceKind.L, 5, 7)
    assert rotated.shape.shape == (3, 2)
    # The original piece is untouched
    assert piece.shape.shape == (2, 3)
