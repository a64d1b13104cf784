"""
editions.py: The five iterations of the game, expressed as feature flags.
"""

from dataclasses import dataclass
from typing import Dict, Union

from .errors import UnknownEditionError


@dataclass(frozen=True)
class Edition:
    number: int
    name: str
    respawn_obstacles: bool = False   # One obstacle, replaced once passed (else: up to two fixed walls)
    scoring: bool = False             # Count passed obstacles and narrow the gap
    animated: bool = False            # Cycle the dragon through its frames
    sprites: bool = False             # Draw from the sprite sheet instead of glyphs


WALLS = Edition(1, "walls")
OBSTACLES = Edition(2, "obstacles", respawn_obstacles=True)
SCORING = Edition(3, "scoring", respawn_obstacles=True, scoring=True)
ANIMATED = Edition(4, "animated", respawn_obstacles=True, scoring=True, animated=True)
SPRITES = Edition(5, "sprites", respawn_obstacles=True, scoring=True, animated=True, sprites=True)

EDITIONS: Dict[str, Edition] = {e.name: e for e in (WALLS, OBSTACLES, SCORING, ANIMATED, SPRITES)}
LATEST = SPRITES


def get_edition(key: Union[int, str]) -> Edition:
    """Looks an edition up by number ("3", 3) or by name ("scoring")."""
    text = str(key).strip().lower()
    if text.isdigit():
        for edition in EDITIONS.values():
            if edition.number == int(text):
                return edition
    elif text in EDITIONS:
        return EDITIONS[text]
    raise UnknownEditionError(key)
