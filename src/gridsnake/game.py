from __future__ import annotations

import logging

import pygame

from . import config, render
from .clock import PygameClock
from .engine import GameEngine
from .render import PygameDisplay
from .score_store import JsonScoreStore, MemoryScoreStore

log = logging.getLogger(__name__)

KEY_NAMES = {
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
}
QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)
CONFIRM_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE)


class App:
    """Wires pygame events to the engine: arrows steer, Enter/Space or a click
    presses whichever button is showing, the tick event advances the game."""

    def __init__(self, engine: GameEngine, clock: PygameClock, display: PygameDisplay):
        self.engine = engine
        self.clock = clock
        self.display = display
        self.running = True

    def press(self, button: str | None) -> None:
        if button == render.START_BUTTON:
            self.engine.init()
        elif button == render.PLAY_AGAIN:
            self.engine.show_start_screen()

    def visible_button(self) -> str | None:
        if self.display.visible[render.START_BUTTON]:
            return render.START_BUTTON
        if self.display.visible[render.GAME_OVER_PANEL]:
            return render.PLAY_AGAIN
        return None

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            if event.key in QUIT_KEYS:
                self.running = False
            elif event.key in KEY_NAMES:
                self.engine.handle_direction_input(KEY_NAMES[event.key])
            elif event.key in CONFIRM_KEYS:
                self.press(self.visible_button())
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.press(self.display.button_at(event.pos))
        else:
            self.clock.handle(event)


def main(high_score_file=None, save: bool = True, fps: int = config.FPS) -> int:
    pygame.init()
    pygame.display.set_caption("Snake")
    screen = pygame.display.set_mode((config.WIDTH, config.HEIGHT))
    frame_clock = pygame.time.Clock()

    if save:
        store = JsonScoreStore(high_score_file or config.HIGH_SCORE_PATH)
        log.info("high score file: %s", store.path)
    else:
        store = MemoryScoreStore()
    clock = PygameClock()
    display = PygameDisplay()
    engine = GameEngine(clock, display, store)
    app = App(engine, clock, display)
    engine.show_start_screen()

    while app.running:
        for event in pygame.event.get():
            app.handle_event(event)
            if not app.running:
                break

        display.present(screen)
        pygame.display.flip()
        frame_clock.tick(fps)

    clock.stop()
    pygame.quit()
    if engine.state is not None:
        print("Game Over! Score:", engine.state.score)
    return 0
