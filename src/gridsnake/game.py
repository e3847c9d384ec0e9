from __future__ import annotations

import logging
import random

import pygame

from . import config
from .controls import QUIT, apply_signal, signals
from .highscore import HighScoreStore
from .logic import new_game, tick
from .render import draw_state
from .state import RUNNING, State
from .timer import TickTimer

log = logging.getLogger(__name__)


def schedule(timer: TickTimer, before: State, after: State) -> None:
    """Keep the tick timer in step with the phase.

    Any phase change drops the pending tick; entering (or staying in) RUNNING
    re-arms with a fresh generation.
    """
    if before.phase != after.phase:
        timer.cancel()
    if after.phase == RUNNING and not timer.armed:
        timer.arm()


def step(state: State, events, timer: TickTimer, store: HighScoreStore, rng=random) -> tuple[State, bool]:
    """Run one frame of input and ticking. Returns (state, keep_running)."""
    for event in events:
        before = state
        if timer.accept(event):
            state = tick(state, rng)
            store.save(state.high_score)
        else:
            for signal in signals([event]):
                if signal == QUIT:
                    return state, False
                state = apply_signal(state, signal, rng)
        schedule(timer, before, state)

    return state, True


def run(tick_ms: int = config.TICK_MS, store: HighScoreStore | None = None, seed: int | None = None) -> int:
    store = store or HighScoreStore()
    rng = random.Random(seed)
    state = new_game(store.load(), rng)
    log.info("loaded high score %d from %s", state.high_score, store.path)

    pygame.init()
    screen = pygame.display.set_mode((config.WIDTH, config.HEIGHT))
    pygame.display.set_caption("Snake")
    font = pygame.font.Font(None, 24)
    clock = pygame.time.Clock()
    timer = TickTimer(tick_ms)

    running = True
    while running:
        state, running = step(state, pygame.event.get(), timer, store, rng)
        draw_state(screen, font, state)
        clock.tick(config.FPS)

    timer.cancel()
    pygame.quit()
    print("Game Over! Score:", state.score, "High score:", state.high_score)
    return 0
