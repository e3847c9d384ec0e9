from __future__ import annotations

import random

import pygame

from . import logic
from .state import DOWN, LEFT, RIGHT, UP, State

PAUSE = "pause"
START = "start"
RESET = "reset"
QUIT = "quit"

KEY_MAP = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_SPACE: PAUSE,
    pygame.K_ESCAPE: PAUSE,
    pygame.K_RETURN: START,
    pygame.K_KP_ENTER: START,
    pygame.K_r: RESET,
    pygame.K_q: QUIT,
}


def signals(events):
    """Translate pygame events into directions and PAUSE/START/RESET/QUIT signals."""
    for event in events:
        if event.type == pygame.QUIT:
            yield QUIT
        elif event.type == pygame.KEYDOWN:
            signal = KEY_MAP.get(event.key)
            if signal is not None:
                yield signal


def apply_signal(state: State, signal, rng=random) -> State:
    if signal == PAUSE:
        return logic.toggle_pause(state)
    if signal == START:
        return logic.restart(state, rng)
    if signal == RESET:
        return logic.reset(state, rng)
    if signal == QUIT:
        return state
    return logic.set_direction(state, signal)
