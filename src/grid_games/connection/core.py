from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .board import ConnectionBoard, Player, Position, find_winning_line


logger = logging.getLogger(__name__)


@dataclass
class ConnectFourConfig:
    rows: int = 6
    cols: int = 7
    win_count: int = 4


class ConnectFourGame:
    def __init__(self, config: Optional[ConnectFourConfig] = None) -> None:
        self.config = config or ConnectFourConfig()
        if self.config.win_count < 2:
            raise ValueError(f"win_count must be at least 2, got {self.config.win_count}")
        self.board = ConnectionBoard(self.config.rows, self.config.cols)
        self.current_player = Player.ONE
        self.winner: Optional[Player] = None
        self.winning_line: List[Position] = []
        self.is_draw = False
        self.move_history: List[Position] = []

    def reset(self) -> None:
        self.board.reset()
        self.current_player = Player.ONE
        self.winner = None
        self.winning_line = []
        self.is_draw = False
        self.move_history = []

    @property
    def is_terminal(self) -> bool:
        return self.winner is not None or self.is_draw

    def drop_row(self, col: int) -> Optional[int]:
        return self.board.drop_row(col)

    def valid_columns(self) -> List[int]:
        if self.is_terminal:
            return []
        return self.board.valid_columns()

    def drop_token(self, col: int) -> bool:
        """Drop the current player's token into `col`.

        Returns False, leaving the session untouched, when the game is over,
        the column is out of range or the column is full.
        """
        if self.is_terminal:
            return False
        row = self.board.drop_row(col)
        if row is None:
            return False

        player = self.current_player
        self.board.place(row, col, player)
        self.move_history.append((row, col))
        logger.debug("player %d dropped into column %d, landed on row %d", int(player), col, row)

        if self.evaluate_win(row, col):
            self.winner = player
            logger.info("player %d wins with %s", int(player), self.winning_line)
        elif self.board.is_full():
            self.is_draw = True
            logger.info("connection game drawn after %d moves", len(self.move_history))
        else:
            self.current_player = player.other
        return True

    def evaluate_win(self, row: int, col: int) -> bool:
        line = find_winning_line(self.board, row, col, self.config.win_count)
        if not line:
            return False
        self.winning_line = line
        return True

    def is_clickable(self, row: int, col: int) -> bool:
        if self.is_terminal:
            return False
        return self.drop_row(col) == row

    def click_cell(self, row: int, col: int) -> bool:
        # Only the highlighted landing cell accepts a click.
        if not self.is_clickable(row, col):
            return False
        return self.drop_token(col)

    def is_winning_cell(self, row: int, col: int) -> bool:
        return (row, col) in self.winning_line

    def get_state(self) -> Dict[str, Any]:
        return {
            "board": self.board.clone_state(),
            "current_player": self.current_player,
            "winner": self.winner,
            "winning_line": list(self.winning_line),
            "is_draw": self.is_draw,
            "moves": len(self.move_history),
        }
