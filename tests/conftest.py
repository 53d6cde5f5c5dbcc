import random

import pytest

from flappy_dragon.constants import BLACK
from flappy_dragon.game_state import GameState


class FakeContext:
    """Records every draw call; stands in for the pygame window."""

    def __init__(self, frame_time_ms=0.0, key=None):
        self.frame_time_ms = frame_time_ms
        self.key = key
        self.quitting = False
        self.background = BLACK
        self.cells = {}
        self.texts = []
        self.clears = 0

    def cls(self):
        self.cls_bg(BLACK)

    def cls_bg(self, color):
        self.clears += 1
        self.background = color
        self.cells = {}
        self.texts = []

    def set(self, x, y, fg, bg, glyph):
        self.cells[(x, y)] = (glyph, fg, bg)

    def print_centered(self, y, text):
        self.texts.append((None, y, text))

    def print(self, x, y, text):
        self.texts.append((x, y, text))

    def lines(self):
        return [text for _, _, text in self.texts]


@pytest.fixture
def ctx():
    return FakeContext()


@pytest.fixture
def state():
    return GameState(rng=random.Random(1234))


@pytest.fixture
def make_ctx():
    return FakeContext
