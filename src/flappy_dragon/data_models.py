"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass
from enum import Enum

from .constants import PLAYER_START


class GameMode(Enum):
    MENU = "menu"
    PLAYING = "playing"
    END = "end"


class Key(Enum):
    """Physical keys the console reports. Their meaning depends on the mode."""
    P = "p"
    Q = "q"
    SPACE = "space"
    ESCAPE = "escape"


@dataclass
class Player:
    """The dragon. `x` is its world column, the screen column never changes."""
    x: int = PLAYER_START[0]
    y: int = PLAYER_START[1]
    velocity: float = 0.0
    frame_number: int = 1


@dataclass
class Obstacle:
    """A wall with a gap of `size` cells centred on `gap_y`."""
    x: int
    gap_y: int
    size: int

    @property
    def half_size(self) -> int:
        return self.size // 2
