from __future__ import annotations

from typing import Callable

import pygame

TICK_EVENT = pygame.USEREVENT + 1


class PygameClock:
    """Repeating tick timer on top of `pygame.time.set_timer`.

    Re-arming the same event type replaces the old schedule and an interval
    of 0 cancels it, so `start` doubles as restart.
    """

    def __init__(self, event_type: int = TICK_EVENT):
        self.event_type = event_type
        self.callback: Callable[[], None] | None = None
        self.interval_ms = 0

    def start(self, interval_ms: int, callback: Callable[[], None]) -> None:
        self.callback = callback
        self.interval_ms = interval_ms
        pygame.time.set_timer(self.event_type, interval_ms)

    def stop(self) -> None:
        self.callback = None
        self.interval_ms = 0
        pygame.time.set_timer(self.event_type, 0)

    def handle(self, event: pygame.event.Event) -> bool:
        if event.type != self.event_type:
            return False
        # A tick already queued when the timer stopped is dropped here.
        if self.callback is not None:
            self.callback()
        return True
