from __future__ import annotations

from collections import namedtuple

Cell = tuple[int, int]

UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

READY = "ready"
RUNNING = "running"
PAUSED = "paused"
OVER = "over"

State = namedtuple(
    "State",
    ["snake", "direction", "pending", "food", "score", "high_score", "alive", "phase", "death"],
)
# snake: tuple[(x, y)], head is first element.
# direction: (dx, dy) applied by the last tick.
# pending: (dx, dy) the next tick will apply.
# food: (x, y), or None once the snake covers the board.
# death: None, "wall" or "self".


def add_vectors(a: Cell, b: Cell) -> Cell:
    return (a[0] + b[0], a[1] + b[1])


def opposite(a: Cell, b: Cell) -> bool:
    return add_vectors(a, b) == (0, 0)


class Functor:
    """Tiny helper for chaining state transforms."""

    def __init__(self, value):
        self.value = value

    def map(self, func):
        return Functor(func(self.value))

    def get(self):
        return self.value
