"""Gymnasium environments for the grid games."""

from __future__ import annotations

from gymnasium.envs.registration import register

register(
    id="Stacking-10x20-v0",
    entry_point="grid_games.env.stacking_env:StackingEnv",
)

register(
    id="ConnectFour-6x7-v0",
    entry_point="grid_games.env.connection_env:ConnectFourEnv",
)
