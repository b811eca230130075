from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from grid_games.connection import ConnectFourConfig, ConnectFourGame
from grid_games.palettes import CONNECTION_PALETTE, WINNING_RING


def _compute_action_mask(game: ConnectFourGame) -> np.ndarray:
    mask = np.zeros((game.board.cols,), dtype=np.bool_)
    for col in game.valid_columns():
        mask[col] = True
    return mask


class ConnectFourEnv(gym.Env):
    """Two-seat Connect Four: each step plays a column for the player to move.

    The reward is credited to whoever moved: +1 for the winning drop, 0
    otherwise. Dropping into a full column leaves the board unchanged and
    costs `invalid_action_penalty`.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[ConnectFourConfig] = None,
        render_mode: Optional[str] = None,
        win_reward: float = 1.0,
        invalid_action_penalty: float = -0.1,
    ) -> None:
        super().__init__()
        self.game = ConnectFourGame(config)
        self.render_mode = render_mode
        self.win_reward = float(win_reward)
        self.invalid_action_penalty = float(invalid_action_penalty)

        rows, cols = self.game.board.rows, self.game.board.cols
        self.observation_space = spaces.Box(low=0, high=2, shape=(rows, cols), dtype=np.int8)
        self.action_space = spaces.Discrete(cols)

    def _get_obs(self) -> np.ndarray:
        return self.game.board.clone_state()

    def _get_info(self) -> Dict[str, Any]:
        return {
            "action_mask": _compute_action_mask(self.game),
            "current_player": int(self.game.current_player),
            "winner": int(self.game.winner) if self.game.winner is not None else 0,
            "winning_line": list(self.game.winning_line),
            "is_draw": self.game.is_draw,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        self.game.reset()
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        col = int(action)
        mover = self.game.current_player
        placed = self.game.drop_token(col)

        if not placed:
            reward = self.invalid_action_penalty
        elif self.game.winner is mover:
            reward = self.win_reward
        else:
            reward = 0.0

        terminated = self.game.is_terminal
        info = self._get_info()
        info["placed"] = placed
        return self._get_obs(), float(reward), terminated, False, info

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode != "rgb_array":
            return None
        cell = 24
        rows, cols = self.game.board.rows, self.game.board.cols
        img = np.zeros((rows * cell, cols * cell, 3), dtype=np.uint8)
        img[:, :, 2] = 200  # board blue
        grid = self.game.board.grid
        for r in range(rows):
            for c in range(cols):
                color = CONNECTION_PALETTE[int(grid[r, c])]
                if self.game.is_winning_cell(r, c):
                    color = WINNING_RING
                img[r * cell + 2 : (r + 1) * cell - 2, c * cell + 2 : (c + 1) * cell - 2, :] = color
        return img

    def close(self) -> None:
        pass
