from __future__ import annotations

from dataclasses import dataclass, field

from . import config

UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)
NONE = (0, 0)

IDLE = "idle"
RUNNING = "running"
GAME_OVER = "game_over"


@dataclass
class GameState:
    snake: list[tuple[int, int]] = field(default_factory=lambda: [config.START_CELL])
    direction: tuple[int, int] = NONE
    pending_direction: tuple[int, int] = NONE
    food: tuple[int, int] = (0, 0)
    score: int = 0
    tick_interval_ms: int = config.INITIAL_SPEED
    is_over: bool = False
    # snake: list[(x, y)], head is first element.
    # direction / pending_direction: (dx, dy), NONE until the first move.


def add_vectors(a: tuple[int, int], b: tuple[int, int]) -> tuple[int, int]:
    return (a[0] + b[0], a[1] + b[1])


def opposite(d: tuple[int, int]) -> tuple[int, int]:
    return (-d[0], -d[1])
