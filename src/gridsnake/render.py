from __future__ import annotations

import pygame

from . import config
from .state import GameState

BOARD = "board"
START_BUTTON = "start_button"
GAME_OVER_PANEL = "game_over"
PLAY_AGAIN = "play_again"

SCORE = "score"
HIGH_SCORE = "high_score"
FINAL_SCORE = "final_score"


def draw_state(display, state: GameState) -> None:
    display.clear(config.BACKGROUND)

    size = config.TILE_SIZE - config.TILE_GAP
    for x, y in state.snake:
        display.fill_square(x * config.TILE_SIZE, y * config.TILE_SIZE, size, config.SNAKE_COLOR)

    fx, fy = state.food
    display.fill_square(fx * config.TILE_SIZE, fy * config.TILE_SIZE, size, config.FOOD_COLOR)


class PygameDisplay:
    """Board surface plus the HUD, start button and game-over panel around it.

    The engine only issues draw and visibility commands; `present` composes
    the window from whatever is currently visible.
    """

    def __init__(self, font: pygame.font.Font | None = None, big_font: pygame.font.Font | None = None):
        self.board = pygame.Surface((config.BOARD_PX, config.BOARD_PX))
        self.board.fill(config.BACKGROUND)
        self.visible = {BOARD: True, START_BUTTON: True, GAME_OVER_PANEL: False}
        self.texts = {SCORE: "0", HIGH_SCORE: "0", FINAL_SCORE: "0"}
        if font is None or big_font is None:
            pygame.font.init()
        self.font = font or pygame.font.Font(None, 28)
        self.big_font = big_font or pygame.font.Font(None, 56)

        cx = config.WIDTH // 2
        cy = config.HUD_HEIGHT + config.BOARD_PX // 2
        self.start_rect = pygame.Rect(0, 0, 160, 44)
        self.start_rect.center = (cx, cy)
        self.play_again_rect = pygame.Rect(0, 0, 160, 44)
        self.play_again_rect.center = (cx, cy + 50)

    # --- Display capability used by the engine ---
    def clear(self, color) -> None:
        self.board.fill(color)

    def fill_square(self, px: int, py: int, size: int, color) -> None:
        pygame.draw.rect(self.board, color, pygame.Rect(px, py, size, size))

    def set_visible(self, region: str, visible: bool) -> None:
        if region not in self.visible:
            raise KeyError(f"unknown display region: {region}")
        self.visible[region] = visible

    def set_text(self, field: str, text: str) -> None:
        if field not in self.texts:
            raise KeyError(f"unknown text field: {field}")
        self.texts[field] = text

    # --- Window composition ---
    def button_at(self, pos: tuple[int, int]) -> str | None:
        if self.visible[START_BUTTON] and self.start_rect.collidepoint(pos):
            return START_BUTTON
        if self.visible[GAME_OVER_PANEL] and self.play_again_rect.collidepoint(pos):
            return PLAY_AGAIN
        return None

    def _draw_button(self, screen: pygame.Surface, rect: pygame.Rect, label: str) -> None:
        pygame.draw.rect(screen, config.BUTTON_COLOR, rect, border_radius=6)
        text = self.font.render(label, True, config.BUTTON_TEXT_COLOR)
        screen.blit(text, text.get_rect(center=rect.center))

    def present(self, screen: pygame.Surface) -> None:
        screen.fill(config.WINDOW_COLOR)

        hud = self.font.render(
            f"Score: {self.texts[SCORE]}    High Score: {self.texts[HIGH_SCORE]}",
            True,
            config.TEXT_COLOR,
        )
        screen.blit(hud, (10, (config.HUD_HEIGHT - hud.get_height()) // 2))

        if self.visible[BOARD]:
            screen.blit(self.board, (0, config.HUD_HEIGHT))

        if self.visible[START_BUTTON]:
            self._draw_button(screen, self.start_rect, "Start Game")

        if self.visible[GAME_OVER_PANEL]:
            cx = config.WIDTH // 2
            cy = config.HUD_HEIGHT + config.BOARD_PX // 2
            over = self.big_font.render("Game Over", True, config.TEXT_COLOR)
            screen.blit(over, over.get_rect(center=(cx, cy - 50)))
            final = self.font.render(f"Final Score: {self.texts[FINAL_SCORE]}", True, config.TEXT_COLOR)
            screen.blit(final, final.get_rect(center=(cx, cy)))
            self._draw_button(screen, self.play_again_rect, "Play Again")
