import pygame
import pytest

from gridsnake import config, render
from gridsnake.render import PygameDisplay, draw_state
from gridsnake.state import GameState


@pytest.fixture
def pg_display(pygame_init):
    return PygameDisplay()


def test_draw_state_leaves_grid_gap(pg_display):
    draw_state(pg_display, GameState(snake=[(2, 3)], food=(5, 5)))
    board = pg_display.board
    assert board.get_at((40, 60))[:3] == config.SNAKE_COLOR
    assert board.get_at((57, 77))[:3] == config.SNAKE_COLOR
    # Last two pixel rows/columns of the tile are background.
    assert board.get_at((58, 60))[:3] == config.BACKGROUND
    assert board.get_at((40, 79))[:3] == config.BACKGROUND
    assert board.get_at((100, 100))[:3] == config.FOOD_COLOR
    assert board.get_at((0, 0))[:3] == config.BACKGROUND


def test_clear_wipes_previous_frame(pg_display):
    draw_state(pg_display, GameState(snake=[(0, 0)], food=(1, 0)))
    pg_display.clear(config.BACKGROUND)
    assert pg_display.board.get_at((5, 5))[:3] == config.BACKGROUND


def test_unknown_region_and_field_rejected(pg_display):
    with pytest.raises(KeyError):
        pg_display.set_visible("menu", True)
    with pytest.raises(KeyError):
        pg_display.set_text("lives", "3")


def test_button_hit_testing_follows_visibility(pg_display):
    start = pg_display.start_rect.center
    again = pg_display.play_again_rect.center
    assert pg_display.button_at(start) == render.START_BUTTON

    pg_display.set_visible(render.START_BUTTON, False)
    assert pg_display.button_at(start) is None

    pg_display.set_visible(render.GAME_OVER_PANEL, True)
    assert pg_display.button_at(again) == render.PLAY_AGAIN
    assert pg_display.button_at((0, 0)) is None


def test_present_hides_board_on_game_over(pg_display):
    screen = pygame.Surface((config.WIDTH, config.HEIGHT))
    pg_display.fill_square(0, 0, 18, config.SNAKE_COLOR)
    pg_display.set_visible(render.START_BUTTON, False)

    pg_display.present(screen)
    assert screen.get_at((5, config.HUD_HEIGHT + 5))[:3] == config.SNAKE_COLOR

    pg_display.set_visible(render.BOARD, False)
    pg_display.set_visible(render.GAME_OVER_PANEL, True)
    pg_display.present(screen)
    assert screen.get_at((5, config.HUD_HEIGHT + 5))[:3] == config.WINDOW_COLOR
