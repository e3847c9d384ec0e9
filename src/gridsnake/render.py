from __future__ import annotations

import pygame

from . import config
from .state import OVER, PAUSED, READY, State


def _cell_rect(x: int, y: int) -> pygame.Rect:
    return pygame.Rect(x * config.BLOCK, config.HUD_HEIGHT + y * config.BLOCK, config.BLOCK, config.BLOCK)


def draw_grid(screen: pygame.Surface) -> None:
    top = config.HUD_HEIGHT
    for i in range(config.GRID_SIZE + 1):
        p = i * config.BLOCK
        pygame.draw.line(screen, config.GRID_LINE, (p, top), (p, config.HEIGHT))
        pygame.draw.line(screen, config.GRID_LINE, (0, top + p), (config.WIDTH, top + p))


def draw_hud(screen: pygame.Surface, font: pygame.font.Font, state: State) -> None:
    text = font.render(f"Score: {state.score}   High Score: {state.high_score}", True, config.WHITE)
    screen.blit(text, (8, (config.HUD_HEIGHT - text.get_height()) // 2))


def draw_overlay(screen: pygame.Surface, font: pygame.font.Font, lines: list[str]) -> None:
    shade = pygame.Surface((config.WIDTH, config.HEIGHT), pygame.SRCALPHA)
    shade.fill(config.OVERLAY)
    screen.blit(shade, (0, 0))

    y = config.HEIGHT // 2 - len(lines) * font.get_linesize() // 2
    for line in lines:
        text = font.render(line, True, config.WHITE)
        screen.blit(text, ((config.WIDTH - text.get_width()) // 2, y))
        y += font.get_linesize()


def draw_state(screen: pygame.Surface, font: pygame.font.Font, state: State) -> None:
    screen.fill(config.BLACK)
    draw_grid(screen)

    if state.food is not None:
        pygame.draw.rect(screen, config.RED, _cell_rect(*state.food))

    for i, (x, y) in enumerate(state.snake):
        pygame.draw.rect(screen, config.HEAD_GREEN if i == 0 else config.GREEN, _cell_rect(x, y))

    draw_hud(screen, font, state)

    if state.phase == READY:
        draw_overlay(screen, font, ["Snake", "Arrows to steer, Space/Esc to pause, R to reset", "Press Enter or Space to start"])
    elif state.phase == PAUSED:
        draw_overlay(screen, font, ["Paused", "Space/Esc to resume"])
    elif state.phase == OVER:
        draw_overlay(
            screen,
            font,
            ["Game Over!", f"Your score: {state.score}", f"High score: {state.high_score}", "Press Enter to play again"],
        )

    pygame.display.flip()
