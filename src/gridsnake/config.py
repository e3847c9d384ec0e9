from __future__ import annotations

import os
from pathlib import Path

from .state import UP

GRID_SIZE = 20
BLOCK = 20
HUD_HEIGHT = 32
WIDTH = GRID_SIZE * BLOCK
HEIGHT = GRID_SIZE * BLOCK + HUD_HEIGHT

TICK_MS = 150
FPS = 60

FOOD_REWARD = 10
# Random draws before place_food falls back to scanning the free cells.
FOOD_RETRIES = 64

START_CELL = (10, 10)
START_DIRECTION = UP

HIGH_SCORE_KEY = "snakeHighScore"
HIGH_SCORE_FILE = Path(
    os.environ.get("GRIDSNAKE_HIGH_SCORE_FILE", Path.home() / ".gridsnake" / "scores.json")
)

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GRID_LINE = (28, 28, 28)
GREEN = (0, 200, 0)
HEAD_GREEN = (0, 255, 0)
RED = (255, 0, 0)
GREY = (160, 160, 160)
OVERLAY = (0, 0, 0, 160)
