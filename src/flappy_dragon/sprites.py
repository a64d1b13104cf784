"""
sprites.py: Named sprite surfaces for the sprite edition.

A sheet is either drawn procedurally or sliced from a PNG strip of five
square tiles: dragon_1, dragon_2, dragon_3, dragon_4, wall.
"""

import logging
from typing import Dict, List

import pygame

from .constants import ANIMATION_FRAMES, RED, YELLOW, BLACK
from .errors import SpriteSheetError

logger = logging.getLogger(__name__)

SPRITE_NAMES: List[str] = [f"dragon_{n}" for n in range(1, ANIMATION_FRAMES + 1)] + ["wall"]

MORTAR = (120, 0, 0)
WING = (255, 170, 0)

# Wing tip height per frame, as a fraction of the tile: up, level, down, level
WING_TIPS = (0.1, 0.45, 0.85, 0.45)


class SpriteSheet:
    def __init__(self, sprites: Dict[str, pygame.Surface]):
        missing = [name for name in SPRITE_NAMES if name not in sprites]
        if missing:
            raise SpriteSheetError(f"Sprite sheet is missing {', '.join(missing)}")
        self.sprites = sprites

    def __getitem__(self, name: str) -> pygame.Surface:
        return self.sprites[name]

    @classmethod
    def procedural(cls, cell_size: int) -> "SpriteSheet":
        sprites = {f"dragon_{n}": _draw_dragon(cell_size, tip) for n, tip in enumerate(WING_TIPS, start=1)}
        sprites["wall"] = _draw_wall(cell_size)
        return cls(sprites)

    @classmethod
    def from_file(cls, path: str, cell_size: int) -> "SpriteSheet":
        """Slices a horizontal strip of square tiles and scales each to one cell."""
        try:
            sheet = pygame.image.load(path)
        except (pygame.error, FileNotFoundError) as e:
            raise SpriteSheetError(f"Cannot load sprite sheet {path}: {e}") from e

        tile = sheet.get_height()
        if tile == 0 or sheet.get_width() < tile * len(SPRITE_NAMES):
            raise SpriteSheetError(
                f"{path} is {sheet.get_width()}x{tile}, expected a strip of {len(SPRITE_NAMES)} square tiles")

        sprites = {}
        for i, name in enumerate(SPRITE_NAMES):
            frame = sheet.subsurface(pygame.Rect(i * tile, 0, tile, tile))
            sprites[name] = pygame.transform.scale(frame, (cell_size, cell_size))
        logger.info("Loaded sprite sheet %s (%dpx tiles)", path, tile)
        return cls(sprites)


def _draw_dragon(size: int, wing_tip: float) -> pygame.Surface:
    surface = pygame.Surface((size, size), pygame.SRCALPHA)
    body = pygame.Rect(size // 6, size // 3, size * 2 // 3, size // 3)
    pygame.draw.ellipse(surface, YELLOW, body)
    pygame.draw.circle(surface, BLACK, (body.right - size // 6, body.top + size // 8), max(1, size // 12))

    shoulder = (body.centerx, body.centery)
    tip = (body.left, int(size * wing_tip))
    pygame.draw.polygon(surface, WING, [shoulder, tip, (body.centerx - size // 6, body.centery)])
    return surface


def _draw_wall(size: int) -> pygame.Surface:
    surface = pygame.Surface((size, size))
    surface.fill(RED)
    pygame.draw.line(surface, MORTAR, (0, size // 2), (size, size // 2))
    pygame.draw.line(surface, MORTAR, (size // 2, 0), (size // 2, size // 2))
    return surface
