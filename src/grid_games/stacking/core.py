from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Sequence

import numpy as np

from .grid import StackingGrid
from .pieces import BASE_SHAPES, Piece, PieceKind, canonical_shape
from .rules import ScoringRules


logger = logging.getLogger(__name__)

PieceChooser = Callable[[Sequence[PieceKind]], PieceKind]

# Every rotation of every piece must fit across and down the board.
MIN_BOARD_SIDE = max(max(shape.shape) for shape in BASE_SHAPES.values())


@dataclass
class StackingConfig:
    width: int = 10
    height: int = 20
    random_seed: Optional[int] = None
    spawn_y: int = 0


class StackingGame:
    """Falling-block session: locked grid, active piece, score and gates.

    All transitions are synchronous. The host is expected to call
    ``move_piece(0, 1)`` on a fixed cadence while the game is neither paused
    nor over; a blocked downward move is what locks the piece.
    """

    def __init__(
        self,
        config: Optional[StackingConfig] = None,
        rules: Optional[ScoringRules] = None,
        chooser: Optional[PieceChooser] = None,
    ) -> None:
        self.config = config or StackingConfig()
        if self.config.width < MIN_BOARD_SIDE or self.config.height < MIN_BOARD_SIDE:
            raise ValueError(
                f"board must be at least {MIN_BOARD_SIDE}x{MIN_BOARD_SIDE}, "
                f"got {self.config.width}x{self.config.height}"
            )
        self.rules = rules or ScoringRules()
        self.rng = random.Random(self.config.random_seed)
        self.chooser: PieceChooser = chooser or self.rng.choice
        self.grid = StackingGrid(self.config.width, self.config.height)
        self.active: Optional[Piece] = None
        self.score = 0
        self.lines_cleared_total = 0
        self.pieces_locked = 0
        self.game_over = False
        self.paused = False
        self.reset()

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    def reset(self) -> None:
        self.grid.reset()
        self.score = 0
        self.lines_cleared_total = 0
        self.pieces_locked = 0
        self.game_over = False
        self.paused = False
        self.active = None
        self._install_next_piece()

    def spawn_piece(self) -> Piece:
        kind = PieceKind(self.chooser(list(PieceKind)))
        return Piece(
            kind=kind,
            shape=canonical_shape(kind),
            x=self.grid.width // 2 - 1,
            y=self.config.spawn_y,
        )

    def check_collision(self, piece: Optional[Piece], new_x: int, new_y: int) -> bool:
        if piece is None:
            return True
        return self.grid.collides(piece.cells_at(new_x, new_y))

    def _accepts_input(self) -> bool:
        return self.active is not None and not self.game_over and not self.paused

    def move_piece(self, dx: int, dy: int) -> None:
        if not self._accepts_input():
            return
        assert self.active is not None
        new_x = self.active.x + dx
        new_y = self.active.y + dy
        if not self.check_collision(self.active, new_x, new_y):
            self.active.x = new_x
            self.active.y = new_y
        elif dy > 0:
            self._lock_and_advance()

    def rotate_piece(self) -> None:
        if not self._accepts_input():
            return
        assert self.active is not None
        rotated = self.active.rotated()
        if not self.check_collision(rotated, rotated.x, rotated.y):
            self.active = rotated

    def hard_drop(self) -> None:
        if not self._accepts_input():
            return
        piece = self.active
        # Each step either moves the piece down or locks it and spawns the next.
        while self.active is piece and not self.game_over:
            self.move_piece(0, 1)

    def toggle_pause(self) -> None:
        if self.game_over:
            return
        self.paused = not self.paused
        logger.debug("stacking game %s", "paused" if self.paused else "resumed")

    def _lock_and_advance(self) -> int:
        assert self.active is not None
        piece = self.active
        self.grid.merge(piece.cells(), int(piece.kind))
        lines = self.grid.clear_full_rows()
        self.pieces_locked += 1
        self.lines_cleared_total += lines
        self.score += self.rules.score_for_lines(lines)
        logger.debug("locked %s at (%d, %d), cleared %d line(s)", piece.kind.name, piece.x, piece.y, lines)

        self._install_next_piece()
        return lines

    def _install_next_piece(self) -> None:
        next_piece = self.spawn_piece()
        if self.check_collision(next_piece, next_piece.x, next_piece.y):
            self.active = None
            self.game_over = True
            logger.info("stacking game over: score=%d lines=%d", self.score, self.lines_cleared_total)
        else:
            self.active = next_piece

    def render_grid(self) -> np.ndarray:
        """Locked cells with the active piece overlaid where it is visible."""
        state = self.grid.clone_state()
        if self.active is not None:
            for x, y in self.active.cells():
                if self.grid.is_inside(x, y):
                    state[y, x] = int(self.active.kind)
        return state

    def get_state(self) -> Dict[str, Any]:
        active = self.active
        return {
            "grid": self.grid.clone_state(),
            "render_grid": self.render_grid(),
            "active_kind": active.kind if active is not None else None,
            "active_x": active.x if active is not None else None,
            "active_y": active.y if active is not None else None,
            "score": self.score,
            "lines_cleared_total": self.lines_cleared_total,
            "pieces_locked": self.pieces_locked,
            "game_over": self.game_over,
            "paused": self.paused,
        }
