from __future__ import annotations

from typing import Callable, Dict, Optional, Tuple

import numpy as np
import pygame

from grid_games.palettes import Color


class Renderer:
    def __init__(self, palette: Dict[int, Color], cell_size: int = 30, margin: int = 20) -> None:
        self.palette = palette
        self.cell_size = cell_size
        self.margin = margin

    def color_for_value(self, v: int) -> Color:
        return self.palette.get(abs(v), (200, 200, 200))

    def window_size(self, rows: int, cols: int, extra_height: int = 0) -> Tuple[int, int]:
        return (cols * self.cell_size + self.margin * 2, rows * self.cell_size + self.margin * 2 + extra_height)

    def grid_surface(
        self,
        state: np.ndarray,
        outline: Optional[Callable[[int, int], Optional[Color]]] = None,
    ) -> pygame.Surface:
        h, w = state.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill((30, 30, 36))
        for y in range(h):
            for x in range(w):
                rect = pygame.Rect(x * self.cell_size, y * self.cell_size, self.cell_size - 1, self.cell_size - 1)
                pygame.draw.rect(surf, self.color_for_value(int(state[y, x])), rect)
                ring = outline(y, x) if outline is not None else None
                if ring is not None:
                    pygame.draw.rect(surf, ring, rect, 3)
        return surf

    def cell_at(self, px: int, py: int, rows: int, cols: int) -> Optional[Tuple[int, int]]:
        """Map a window pixel to (row, col), or None outside the board."""
        col = (px - self.margin) // self.cell_size
        row = (py - self.margin) // self.cell_size
        if 0 <= row < rows and 0 <= col < cols:
            return int(row), int(col)
        return None

    def draw(
        self,
        screen: pygame.Surface,
        state: np.ndarray,
        outline: Optional[Callable[[int, int], Optional[Color]]] = None,
    ) -> None:
        screen.fill((10, 10, 14))
        screen.blit(self.grid_surface(state, outline), (self.margin, self.margin))
