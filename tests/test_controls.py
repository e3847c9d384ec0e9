"""
Tests for mapping keyboard events onto game signals.
"""

import random

import pygame

from gridsnake.controls import PAUSE, QUIT, RESET, START, apply_signal, signals
from gridsnake.logic import new_game, start
from gridsnake.state import DOWN, LEFT, OVER, PAUSED, READY, RIGHT, RUNNING, UP


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


class TestSignals:
    def test_arrow_keys(self):
        events = [key(pygame.K_UP), key(pygame.K_DOWN), key(pygame.K_LEFT), key(pygame.K_RIGHT)]
        assert list(signals(events)) == [UP, DOWN, LEFT, RIGHT]

    def test_pause_start_and_quit(self):
        events = [
            key(pygame.K_SPACE),
            key(pygame.K_ESCAPE),
            key(pygame.K_RETURN),
            key(pygame.K_KP_ENTER),
            key(pygame.K_r),
            key(pygame.K_q),
            pygame.event.Event(pygame.QUIT),
        ]
        assert list(signals(events)) == [PAUSE, PAUSE, START, START, RESET, QUIT, QUIT]

    def test_unmapped_keys_and_key_up_ignored(self):
        events = [key(pygame.K_a), pygame.event.Event(pygame.KEYUP, key=pygame.K_UP)]
        assert list(signals(events)) == []


class TestApplySignal:
    def test_start_then_pause(self):
        rng = random.Random(0)
        state = apply_signal(new_game(rng=rng), START, rng)
        assert state.phase == RUNNING
        assert apply_signal(state, PAUSE).phase == PAUSED

    def test_direction_only_changes_pending(self):
        state = start(new_game(rng=random.Random(0)))
        turned = apply_signal(state, LEFT)
        assert turned.pending == LEFT
        assert turned.snake == state.snake
        assert turned.food == state.food

    def test_start_restarts_finished_game(self):
        over = new_game(high_score=30, rng=random.Random(0))._replace(alive=False, phase=OVER, score=30)
        state = apply_signal(over, START, random.Random(1))
        assert state.phase == RUNNING
        assert state.score == 0
        assert state.high_score == 30

    def test_quit_leaves_state_alone(self):
        state = new_game(rng=random.Random(0))
        assert apply_signal(state, QUIT) is state

    def test_pause_key_starts_from_ready(self):
        state = apply_signal(new_game(rng=random.Random(0)), PAUSE)
        assert state.phase == RUNNING

    def test_reset_mid_game(self):
        running = start(new_game(high_score=40, rng=random.Random(0)))._replace(
            snake=((4, 4), (4, 5)), score=20
        )
        state = apply_signal(running, RESET, random.Random(1))
        assert state.phase == READY
        assert state.snake == ((10, 10),)
        assert state.score == 0
        assert state.high_score == 40
