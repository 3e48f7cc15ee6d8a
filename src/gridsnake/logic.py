from __future__ import annotations

import random

from . import config
from .state import DOWN, LEFT, NONE, RIGHT, UP, GameState, add_vectors, opposite

KEY_DIRECTIONS = {
    "up": UP,
    "down": DOWN,
    "left": LEFT,
    "right": RIGHT,
}


def accept_direction(current: tuple[int, int], key: str) -> tuple[int, int] | None:
    """Direction for `key` if it turns the snake onto the other axis, else None."""
    candidate = KEY_DIRECTIONS.get(key)
    if candidate is None:
        return None
    if candidate[0] != 0 and current[0] == 0:
        return candidate
    if candidate[1] != 0 and current[1] == 0:
        return candidate
    return None


def commit_direction(state: GameState) -> None:
    pending = state.pending_direction
    if pending == NONE:
        return
    # A lone head has no neck to run into, so it may reverse.
    if len(state.snake) == 1 or pending != opposite(state.direction):
        state.direction = pending


def out_of_bounds(cell: tuple[int, int]) -> bool:
    x, y = cell
    return x < 0 or x >= config.BOARD_SIZE or y < 0 or y >= config.BOARD_SIZE


def hits_self(snake: list[tuple[int, int]]) -> bool:
    head, *body = snake
    return head in body


def advance_head(state: GameState) -> tuple[int, int]:
    new_head = add_vectors(state.snake[0], state.direction)
    state.snake.insert(0, new_head)
    return new_head


def next_interval(interval_ms: int) -> int:
    return max(config.MIN_SPEED, interval_ms - config.SPEED_INCREMENT)


def random_free_cell(snake: list[tuple[int, int]], rng: random.Random) -> tuple[int, int]:
    # Rejection sampling; never terminates on a full board.
    while True:
        pos = (
            rng.randint(0, config.BOARD_SIZE - 1),
            rng.randint(0, config.BOARD_SIZE - 1),
        )
        if pos not in snake:
            return pos
