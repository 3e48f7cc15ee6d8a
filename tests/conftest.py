import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from gridsnake.engine import GameEngine
from gridsnake.score_store import MemoryScoreStore


class FakeClock:
    def __init__(self):
        self.starts = []
        self.stops = 0
        self.callback = None

    def start(self, interval_ms, callback):
        self.starts.append(interval_ms)
        self.callback = callback

    def stop(self):
        self.stops += 1
        self.callback = None


class FakeDisplay:
    def __init__(self):
        self.calls = []
        self.visible = {}
        self.texts = {}

    def clear(self, color):
        self.calls = [("clear", color)]

    def fill_square(self, px, py, size, color):
        self.calls.append(("square", px, py, size, color))

    def set_visible(self, region, visible):
        self.visible[region] = visible

    def set_text(self, field, text):
        self.texts[field] = text


class ScriptedRandom(random.Random):
    """Hands out queued values from randint, then falls back to a seeded stream."""

    def __init__(self, values):
        super().__init__(0)
        self.values = list(values)

    def randint(self, a, b):
        if self.values:
            return self.values.pop(0)
        return super().randint(a, b)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def display():
    return FakeDisplay()


@pytest.fixture
def store():
    return MemoryScoreStore()


@pytest.fixture
def engine(clock, display, store):
    return GameEngine(clock, display, store, rng=random.Random(1234))


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def pygame_init():
    pygame.init()
    yield
    pygame.quit()
