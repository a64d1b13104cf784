"""
renderers.py: Draws the dragon and the walls onto a console, as glyphs or as sprites.
"""

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, PLAYER_SCREEN_X, WINDOW_BG,
    RED, YELLOW, DRAGON_GLYPH, DRAGON_FRAME_GLYPHS, WALL_GLYPH
)
from .data_models import Player, Obstacle


def wall_rows(obstacle: Obstacle):
    """Rows a wall occupies: everything above and below its gap."""
    half_size = obstacle.half_size
    yield from range(0, obstacle.gap_y - half_size)
    yield from range(obstacle.gap_y + half_size, SCREEN_HEIGHT)


def screen_column(obstacle: Obstacle, player: Player) -> int:
    """Walls scroll past the dragon, which never leaves PLAYER_SCREEN_X."""
    return obstacle.x - player.x + PLAYER_SCREEN_X


class GlyphRenderer:
    """Classic console look: '@' for the dragon, '|' for the walls."""

    def __init__(self, animated: bool = False):
        self.animated = animated

    def dragon_glyph(self, player: Player) -> str:
        if self.animated:
            return DRAGON_FRAME_GLYPHS[player.frame_number - 1]
        return DRAGON_GLYPH

    def render_player(self, ctx, player: Player):
        ctx.set(PLAYER_SCREEN_X, player.y, YELLOW, WINDOW_BG, self.dragon_glyph(player))

    def render_obstacle(self, ctx, obstacle: Obstacle, player: Player):
        screen_x = screen_column(obstacle, player)
        if not 0 <= screen_x < SCREEN_WIDTH:
            return
        for y in wall_rows(obstacle):
            ctx.set(screen_x, y, RED, WINDOW_BG, WALL_GLYPH)


class SpriteRenderer(GlyphRenderer):
    """Draws named sprites from the console's sprite sheet."""

    def __init__(self):
        super().__init__(animated=True)

    def render_player(self, ctx, player: Player):
        ctx.draw_sprite(PLAYER_SCREEN_X, player.y, f"dragon_{player.frame_number}")

    def render_obstacle(self, ctx, obstacle: Obstacle, player: Player):
        screen_x = screen_column(obstacle, player)
        if not 0 <= screen_x < SCREEN_WIDTH:
            return
        for y in wall_rows(obstacle):
            ctx.draw_sprite(screen_x, y, "wall")
