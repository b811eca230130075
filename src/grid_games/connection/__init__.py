"""Connection game (four in a row) engine."""

from .board import DIRECTIONS, ConnectionBoard, Player, find_winning_line
from .core import ConnectFourConfig, ConnectFourGame

__all__ = [
    "DIRECTIONS",
    "ConnectionBoard",
    "Player",
    "find_winning_line",
    "ConnectFourConfig",
    "ConnectFourGame",
]
