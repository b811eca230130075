"""Stacking game engine.

Exports the falling-block engine and supporting classes:
- StackingGrid: Locked-cell grid, collision and line clearing
- Piece: Active tetromino with its current rotation
- PieceKind: Enum of available piece kinds
- ScoringRules: Points per cleared line
- StackingGame: Session state and transitions
"""

from .grid import StackingGrid
from .pieces import BASE_SHAPES, Piece, PieceKind, canonical_shape, rotate_shape
from .rules import ScoringRules
from .core import StackingConfig, StackingGame

__all__ = [
    "BASE_SHAPES",
    "StackingGrid",
    "Piece",
    "PieceKind",
    "canonical_shape",
    "rotate_shape",
    "ScoringRules",
    "StackingConfig",
    "StackingGame",
]
