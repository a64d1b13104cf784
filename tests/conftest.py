import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from flappy_dragon.editions import SCORING
from flappy_dragon.game_state import State


class FakeConsole:
    """In-memory console: records what a frame drew."""

    def __init__(self):
        self.key = None
        self.frame_time_ms = 0.0
        self.quitting = False
        self.cells = {}
        self.sprites = {}
        self.text = []

    def cls_bg(self, color):
        self.cells.clear()
        self.sprites.clear()
        self.text.clear()

    def set(self, x, y, fg, bg, glyph):
        self.cells[(x, y)] = glyph

    def print_color(self, x, y, fg, bg, text):
        self.text.append(text)

    def print(self, x, y, text):
        self.text.append(text)

    def draw_sprite(self, x, y, name):
        self.sprites[(x, y)] = name

    def frame(self, state, key=None, ms=0.0):
        self.key = key
        self.frame_time_ms = ms
        state.tick(self)


@pytest.fixture
def console():
    return FakeConsole()


@pytest.fixture
def make_state():
    def _make(edition=SCORING, seed=1234):
        return State(edition, rng=random.Random(seed))
    return _make
