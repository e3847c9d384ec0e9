"""
Tests for the single-shot tick timer.
"""

import pygame

from gridsnake.timer import TICK_EVENT, TickTimer


class FakeSetTimer:
    def __init__(self):
        self.calls = []

    def __call__(self, event, millis, loops=0):
        self.calls.append((event, millis, loops))


def tick_event(generation):
    return pygame.event.Event(TICK_EVENT, generation=generation)


class TestTickTimer:
    def test_arm_schedules_one_shot(self):
        fake = FakeSetTimer()
        timer = TickTimer(150, set_timer=fake)
        timer.arm()

        assert timer.armed is True
        event, millis, loops = fake.calls[-1]
        assert event.type == TICK_EVENT
        assert event.generation == timer.generation
        assert millis == 150
        assert loops == 1

    def test_accepts_current_event_once(self):
        timer = TickTimer(150, set_timer=FakeSetTimer())
        timer.arm()
        event = tick_event(timer.generation)

        assert timer.accept(event) is True
        assert timer.armed is False
        assert timer.accept(event) is False

    def test_cancel_invalidates_queued_event(self):
        fake = FakeSetTimer()
        timer = TickTimer(150, set_timer=fake)
        timer.arm()
        queued = tick_event(timer.generation)
        timer.cancel()

        assert fake.calls[-1] == (TICK_EVENT, 0, 0)
        assert timer.accept(queued) is False

    def test_rearm_rejects_previous_generation(self):
        timer = TickTimer(150, set_timer=FakeSetTimer())
        timer.arm()
        old = tick_event(timer.generation)
        timer.cancel()
        timer.arm()

        assert timer.accept(old) is False
        assert timer.accept(tick_event(timer.generation)) is True

    def test_cancel_when_idle_does_nothing(self):
        fake = FakeSetTimer()
        timer = TickTimer(150, set_timer=fake)
        timer.cancel()
        assert fake.calls == []
        assert timer.generation == 0

    def test_ignores_other_events(self):
        timer = TickTimer(150, set_timer=FakeSetTimer())
        timer.arm()
        assert timer.accept(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP)) is False
        assert timer.armed is True
