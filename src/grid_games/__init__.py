"""Rule engines for a falling-block stacking game and a four-in-a-row game."""

from grid_games.connection import ConnectFourConfig, ConnectFourGame, Player
from grid_games.stacking import PieceKind, StackingConfig, StackingGame

__all__ = [
    "ConnectFourConfig",
    "ConnectFourGame",
    "Player",
    "PieceKind",
    "StackingConfig",
    "StackingGame",
]

__version__ = "0.1.0"
