import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest


class ScriptedRandom:
    """random() returns the scripted values in order, then repeats the last one."""

    def __init__(self, *values):
        self.values = list(values)
        self.calls = 0

    def random(self):
        i = min(self.calls, len(self.values) - 1)
        self.calls += 1
        return self.values[i]


class FakeCanvas:
    width, height = 505, 606

    def __init__(self):
        self.calls = []

    def draw_image(self, image, x, y):
        self.calls.append(("draw", image, x, y))

    def clear_rect(self, x, y, w, h):
        self.calls.append(("clear", x, y, w, h))


class FakeRes:
    """get() hands back the id itself so draws can be asserted by name."""

    def get(self, sid):
        return sid

    def __contains__(self, sid):
        return True


class FakeClock:
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def canvas():
    return FakeCanvas()


@pytest.fixture
def res():
    return FakeRes()


@pytest.fixture
def clock():
    return FakeClock(1000)
