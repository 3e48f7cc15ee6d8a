from __future__ import annotations

import os
from pathlib import Path

BOARD_SIZE = 20
TILE_SIZE = 20
# Squares are drawn this much smaller than a tile so the grid shows through.
TILE_GAP = 2
START_CELL = (10, 10)

INITIAL_SPEED = 200  # ms per tick
SPEED_INCREMENT = 5  # ms faster per food eaten
MIN_SPEED = 50

HUD_HEIGHT = 40
BOARD_PX = BOARD_SIZE * TILE_SIZE
WIDTH, HEIGHT = BOARD_PX, BOARD_PX + HUD_HEIGHT
FPS = 60

BACKGROUND = (0x1A, 0x1A, 0x1A)
SNAKE_COLOR = (0x4C, 0xAF, 0x50)
FOOD_COLOR = (0xF4, 0x43, 0x36)
WINDOW_COLOR = (0x10, 0x10, 0x10)
TEXT_COLOR = (0xEE, 0xEE, 0xEE)
BUTTON_COLOR = (0x4C, 0xAF, 0x50)
BUTTON_TEXT_COLOR = (0x10, 0x10, 0x10)

HIGH_SCORE_KEY = "snakeHighScore"
HIGH_SCORE_PATH = Path(
    os.environ.get("GRIDSNAKE_HIGH_SCORE", Path.home() / ".gridsnake" / "highscore.json")
)
