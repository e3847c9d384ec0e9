from __future__ import annotations

import logging

import pygame

from . import config

log = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1


class TickTimer:
    """Single-shot tick scheduler owned by the game loop.

    Every arm() posts at most one TICK_EVENT tagged with a fresh generation.
    Events from an older generation (queued before a pause or restart) and
    repeats of an already accepted event are refused, so at most one tick is
    ever in flight.
    """

    def __init__(self, interval_ms: int = config.TICK_MS, set_timer=None):
        self.interval_ms = interval_ms
        self._set_timer = set_timer or pygame.time.set_timer
        self.generation = 0
        self.armed = False

    def arm(self) -> None:
        self.generation += 1
        self.armed = True
        event = pygame.event.Event(TICK_EVENT, generation=self.generation)
        self._set_timer(event, self.interval_ms, 1)

    def cancel(self) -> None:
        if not self.armed:
            return
        self.generation += 1
        self.armed = False
        self._set_timer(TICK_EVENT, 0)
        log.debug("tick timer cancelled (generation %d)", self.generation)

    def accept(self, event) -> bool:
        if event.type != TICK_EVENT:
            return False
        if not self.armed or getattr(event, "generation", None) != self.generation:
            log.debug("dropped stale tick event")
            return False
        self.armed = False
        return True
