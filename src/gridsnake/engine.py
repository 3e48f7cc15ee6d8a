from __future__ import annotations

import logging
import random

from . import config, logic, render
from .state import GAME_OVER, IDLE, NONE, RUNNING, GameState

log = logging.getLogger(__name__)


class GameEngine:
    """Owns one game of snake and the high score that outlives it.

    The engine never touches pygame directly. It is driven by a clock
    (`start(interval_ms, callback)` / `stop()`) and by direction keys, and it
    reports through a display (`clear`, `fill_square`, `set_visible`,
    `set_text`) and a score store (`get`, `set`).
    """

    def __init__(self, clock, display, store, rng: random.Random | None = None):
        self.clock = clock
        self.display = display
        self.store = store
        self.rng = rng or random.Random()
        self.state: GameState | None = None
        self.phase = IDLE
        self.high_score = store.get()

    def init(self) -> None:
        self.state = GameState(snake=[config.START_CELL])
        self.phase = RUNNING
        self.place_food()

        self.display.set_text(render.SCORE, "0")
        self.display.set_text(render.HIGH_SCORE, str(self.high_score))
        self.display.set_visible(render.GAME_OVER_PANEL, False)
        self.display.set_visible(render.START_BUTTON, False)
        self.display.set_visible(render.BOARD, True)

        self.clock.start(self.state.tick_interval_ms, self.tick)
        self.render()
        log.info("game started")

    def handle_direction_input(self, key: str) -> None:
        if self.state is None or self.state.is_over:
            return
        new_dir = logic.accept_direction(self.state.direction, key)
        if new_dir is not None:
            self.state.pending_direction = new_dir

    def tick(self) -> None:
        state = self.state
        if state is None or state.is_over:
            return

        logic.commit_direction(state)
        if state.direction == NONE:
            self.render()
            return

        new_head = logic.advance_head(state)
        if logic.out_of_bounds(new_head) or logic.hits_self(state.snake):
            self.game_over()
            return

        if new_head == state.food:
            state.score += 1
            self.display.set_text(render.SCORE, str(state.score))
            self.place_food()
            state.tick_interval_ms = logic.next_interval(state.tick_interval_ms)
            self.clock.start(state.tick_interval_ms, self.tick)
            log.debug("food eaten, score %d, interval %dms", state.score, state.tick_interval_ms)
        else:
            state.snake.pop()

        self.render()

    def place_food(self) -> None:
        self.state.food = logic.random_free_cell(self.state.snake, self.rng)

    def game_over(self) -> None:
        state = self.state
        state.is_over = True
        self.phase = GAME_OVER
        self.clock.stop()

        self.display.set_visible(render.BOARD, False)
        self.display.set_visible(render.GAME_OVER_PANEL, True)
        self.display.set_text(render.FINAL_SCORE, str(state.score))
        log.info("game over, score %d", state.score)

        if state.score > self.high_score:
            self.high_score = state.score
            self.store.set(self.high_score)
            self.display.set_text(render.HIGH_SCORE, str(self.high_score))
            log.info("new high score %d", self.high_score)

    def render(self) -> None:
        if self.state is not None:
            render.draw_state(self.display, self.state)

    def show_start_screen(self) -> None:
        self.phase = IDLE
        self.display.set_visible(render.GAME_OVER_PANEL, False)
        self.display.set_visible(render.START_BUTTON, True)
        self.display.set_visible(render.BOARD, True)
        self.display.clear(config.BACKGROUND)
        self.display.set_text(render.HIGH_SCORE, str(self.high_score))
