from __future__ import annotations

import logging
import random

from . import config
from .state import (
    DIRECTIONS,
    OVER,
    PAUSED,
    READY,
    RUNNING,
    Cell,
    Functor,
    State,
    add_vectors,
    opposite,
)

log = logging.getLogger(__name__)


class InvalidState(Exception):
    """Raised by a strict tick() on a game that is not running."""


def in_bounds(cell: Cell) -> bool:
    x, y = cell
    return 0 <= x < config.GRID_SIZE and 0 <= y < config.GRID_SIZE


def place_food(snake, rng=random, retries: int | None = None) -> Cell | None:
    """Pick a free cell for the food, or None if the snake fills the board.

    Draws uniformly at random first; after ``retries`` misses it scans the
    board for free cells and chooses among them.
    """
    if retries is None:
        retries = config.FOOD_RETRIES
    occupied = set(snake)
    for _ in range(retries):
        cell = (rng.randrange(config.GRID_SIZE), rng.randrange(config.GRID_SIZE))
        if cell not in occupied:
            return cell

    free = [
        (x, y)
        for y in range(config.GRID_SIZE)
        for x in range(config.GRID_SIZE)
        if (x, y) not in occupied
    ]
    if not free:
        return None
    return rng.choice(free)


def new_game(high_score: int = 0, rng=random) -> State:
    snake = (config.START_CELL,)
    return State(
        snake=snake,
        direction=config.START_DIRECTION,
        pending=config.START_DIRECTION,
        food=place_food(snake, rng),
        score=0,
        high_score=high_score,
        alive=True,
        phase=READY,
        death=None,
    )


def reset(state: State, rng=random) -> State:
    return new_game(state.high_score, rng)


def set_direction(state: State, requested) -> State:
    requested = tuple(requested)
    if not state.alive or requested not in DIRECTIONS:
        return state
    # Reversal is judged against the last applied direction, not pending.
    if opposite(state.direction, requested):
        return state
    return state._replace(pending=requested)


def start(state: State) -> State:
    if state.phase != READY:
        return state
    log.debug("game started")
    return state._replace(phase=RUNNING)


def toggle_pause(state: State) -> State:
    if state.phase == READY:
        return start(state)
    if state.phase == RUNNING:
        log.debug("paused at score %d", state.score)
        return state._replace(phase=PAUSED)
    if state.phase == PAUSED:
        log.debug("resumed")
        return state._replace(phase=RUNNING)
    return state


def restart(state: State, rng=random) -> State:
    if state.phase == OVER:
        return start(reset(state, rng))
    return start(state)


def collision(snake, new_head: Cell) -> str | None:
    if not in_bounds(new_head):
        return "wall"
    # The tail still occupies its cell when the head arrives.
    if new_head in snake:
        return "self"
    return None


def move_snake(state: State, new_head: Cell) -> State:
    if new_head == state.food:
        new_snake = (new_head,) + state.snake
    else:
        new_snake = (new_head,) + state.snake[:-1]
    return state._replace(snake=new_snake)


def update_food_and_score(state: State, rng=random) -> State:
    if state.snake[0] != state.food:
        return state
    score = state.score + config.FOOD_REWARD
    return state._replace(
        food=place_food(state.snake, rng),
        score=score,
        high_score=max(state.high_score, score),
    )


def end_game(state: State, reason: str) -> State:
    log.info("game over (%s) with score %d", reason, state.score)
    return state._replace(alive=False, phase=OVER, death=reason)


def tick(state: State, rng=random, strict: bool = False) -> State:
    if state.phase != RUNNING:
        if strict:
            raise InvalidState(f"cannot tick a game in phase {state.phase!r}")
        return state

    new_head = add_vectors(state.snake[0], state.pending)
    reason = collision(state.snake, new_head)
    if reason is not None:
        return end_game(state, reason)

    return (
        Functor(state)
        .map(lambda s: s._replace(direction=s.pending))
        .map(lambda s: move_snake(s, new_head))
        .map(lambda s: update_food_and_score(s, rng))
        .get()
    )
