from __future__ import annotations

from typing import Optional

import pygame

from grid_games.connection import ConnectFourGame
from grid_games.palettes import CONNECTION_PALETTE, LANDING_RING, WINNING_RING, Color
from .renderer import Renderer


def status_text(game: ConnectFourGame) -> str:
    if game.winner is not None:
        return f"Player {int(game.winner)} wins! - R for a new game"
    if game.is_draw:
        return "Draw! - R for a new game"
    return f"Player {int(game.current_player)} to move"


def run() -> None:  # pragma: no cover
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = ConnectFourGame()
        rows, cols = game.board.rows, game.board.cols
        renderer = Renderer(CONNECTION_PALETTE, cell_size=64)
        screen = pygame.display.set_mode(renderer.window_size(rows, cols, extra_height=30))
        pygame.display.set_caption("Connect Four")
        font = pygame.font.SysFont(None, 28)

        def outline(row: int, col: int) -> Optional[Color]:
            if game.is_winning_cell(row, col):
                return WINNING_RING
            if game.is_clickable(row, col):
                return LANDING_RING
            return None

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_r:
                        game.reset()
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    cell = renderer.cell_at(*event.pos, rows, cols)
                    if cell is not None:
                        game.click_cell(*cell)

            renderer.draw(screen, game.board.grid, outline)
            text = font.render(status_text(game), True, (230, 230, 230))
            screen.blit(text, (renderer.margin, screen.get_height() - 32))
            pygame.display.flip()
            clock.tick(30)
    finally:
        pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    run()
