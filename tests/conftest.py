"""Shared fixtures: headless canvas, scripted input, fake clock."""

import pytest

from term3d.canvas import Canvas
from term3d.events import InputSource
from term3d.engine import Game


class ScriptedInput(InputSource):
    """Replays a fixed list of events, then reports nothing pending."""

    def __init__(self, events=()):
        self.events = list(events)
        self.polls = 0

    def poll(self):
        self.polls += 1
        if self.events:
            return self.events.pop(0)
        return None


class FakeClock:
    """Monotonic clock that only moves when told to. sleep() advances it."""

    def __init__(self, start=0.0):
        self.now = start
        self.sleeps = []

    def __call__(self):
        return self.now

    def advance(self, dt):
        self.now += dt

    def sleep(self, dt):
        self.sleeps.append(dt)
        self.now += dt


class RecordingGame(Game):
    def __init__(self, on_update=None):
        self.calls = []
        self.on_update = on_update

    def start(self, engine):
        self.calls.append(('start',))

    def update(self, engine, delta):
        self.calls.append(('update', delta))
        if self.on_update:
            self.on_update(engine, delta)


@pytest.fixture()
def canvas():
    return Canvas(80, 24)


@pytest.fixture()
def clock():
    return FakeClock()
