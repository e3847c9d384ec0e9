from .logic import InvalidState, new_game, place_food, reset, restart, set_direction, start, tick, toggle_pause
from .state import DOWN, LEFT, RIGHT, UP, State

__all__ = [
    "InvalidState",
    "State",
    "UP",
    "DOWN",
    "LEFT",
    "RIGHT",
    "new_game",
    "place_food",
    "reset",
    "restart",
    "set_direction",
    "start",
    "tick",
    "toggle_pause",
]
