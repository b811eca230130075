from __future__ import annotations

from enum import IntEnum
from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from grid_games.palettes import STACKING_PALETTE
from grid_games.stacking import PieceKind, StackingConfig, StackingGame


class Action(IntEnum):
    LEFT = 0
    RIGHT = 1
    DOWN = 2
    ROTATE = 3
    NONE = 4


_PALETTE = np.array([STACKING_PALETTE[v] for v in range(len(STACKING_PALETTE))], dtype=np.uint8)


class StackingEnv(gym.Env):
    """Gymnasium wrapper driving a `StackingGame` one input per step.

    The observation is the locked grid with the falling piece overlaid as
    negative kind values. DOWN doubles as the gravity tick: a blocked DOWN
    locks the piece.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 2}

    def __init__(
        self,
        config: Optional[StackingConfig] = None,
        render_mode: Optional[str] = None,
        step_penalty: float = 0.0,
        terminal_penalty: float = 0.0,
        max_episode_steps: int = 10000,
    ) -> None:
        super().__init__()
        self.game = StackingGame(config)
        self.render_mode = render_mode
        self.step_penalty = float(step_penalty)
        self.terminal_penalty = float(terminal_penalty)
        self.max_episode_steps = int(max_episode_steps)
        self._steps = 0

        h, w = self.game.height, self.game.width
        n_kinds = len(PieceKind)
        self.observation_space = spaces.Box(low=-n_kinds, high=n_kinds, shape=(h, w), dtype=np.int8)
        self.action_space = spaces.Discrete(len(Action))

    def _get_obs(self) -> np.ndarray:
        state = self.game.grid.clone_state()
        piece = self.game.active
        if piece is not None:
            for x, y in piece.cells():
                if self.game.grid.is_inside(x, y):
                    state[y, x] = -int(piece.kind)
        return state

    def _action_mask(self) -> np.ndarray:
        game = self.game
        mask = np.zeros((len(Action),), dtype=np.bool_)
        mask[Action.NONE] = True
        piece = game.active
        if piece is None or game.game_over:
            return mask
        mask[Action.LEFT] = not game.check_collision(piece, piece.x - 1, piece.y)
        mask[Action.RIGHT] = not game.check_collision(piece, piece.x + 1, piece.y)
        mask[Action.DOWN] = True  # always legal: either moves or locks
        rotated = piece.rotated()
        mask[Action.ROTATE] = not game.check_collision(rotated, rotated.x, rotated.y)
        return mask

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "lines_cleared_total": self.game.lines_cleared_total,
            "max_height": self.game.grid.get_max_height(),
            "holes": self.game.grid.count_holes(),
            "action_mask": self._action_mask(),
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is not None:
            self.game.rng.seed(seed)
        self.game.reset()
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        action = Action(int(action))
        score_before = self.game.score

        if action == Action.LEFT:
            self.game.move_piece(-1, 0)
        elif action == Action.RIGHT:
            self.game.move_piece(1, 0)
        elif action == Action.DOWN:
            self.game.move_piece(0, 1)
        elif action == Action.ROTATE:
            self.game.rotate_piece()

        self._steps += 1
        terminated = bool(self.game.game_over)
        truncated = self._steps >= self.max_episode_steps

        reward = float(self.game.score - score_before) + self.step_penalty
        if terminated:
            reward += self.terminal_penalty

        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode != "rgb_array":
            return None
        cell = 12
        values = np.abs(self._get_obs()).astype(np.intp)
        img = _PALETTE[values]
        return np.repeat(np.repeat(img, cell, axis=0), cell, axis=1)

    def close(self) -> None:
        pass
