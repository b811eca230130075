from __future__ import annotations

from typing import Callable, Dict, Optional

import pygame

from grid_games.palettes import STACKING_PALETTE
from grid_games.stacking import StackingConfig, StackingGame
from .renderer import Renderer


AUTO_DROP_MS = 500


def key_bindings(game: StackingGame) -> Dict[int, Callable[[], None]]:
    return {
        pygame.K_LEFT: lambda: game.move_piece(-1, 0),
        pygame.K_RIGHT: lambda: game.move_piece(1, 0),
        pygame.K_DOWN: lambda: game.move_piece(0, 1),
        pygame.K_UP: game.rotate_piece,
        pygame.K_SPACE: game.toggle_pause,
        pygame.K_RETURN: game.hard_drop,
        pygame.K_r: game.reset,
    }


def run(seed: Optional[int] = None) -> None:  # pragma: no cover
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = StackingGame(StackingConfig(random_seed=seed))
        renderer = Renderer(STACKING_PALETTE, cell_size=28)
        screen = pygame.display.set_mode(renderer.window_size(game.height, game.width, extra_height=30))
        pygame.display.set_caption("Stacking")
        font = pygame.font.SysFont(None, 28)
        bindings = key_bindings(game)

        last_fall = pygame.time.get_ticks()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key in bindings:
                        bindings[event.key]()

            # Automatic drop only runs while the game accepts input
            now = pygame.time.get_ticks()
            if game.paused or game.game_over:
                last_fall = now
            elif now - last_fall >= AUTO_DROP_MS:
                game.move_piece(0, 1)
                last_fall = now

            renderer.draw(screen, game.render_grid())
            status = f"Score: {game.score}"
            if game.game_over:
                status += "  Game Over - R to restart"
            elif game.paused:
                status += "  Paused"
            text = font.render(status, True, (230, 230, 230))
            screen.blit(text, (renderer.margin, screen.get_height() - 32))
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    run()
