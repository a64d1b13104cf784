"""
game_state.py: The Menu -> Playing -> End state machine, driven once per rendered frame.
"""

import logging
import random
from typing import List, Optional

from .constants import (
    SCREEN_WIDTH, FRAME_DURATION, WINDOW_BG, WALLS_DIFFICULTY, MAX_WALLS,
    YELLOW, WHITE
)
from .data_models import GameMode, Key, Player, Obstacle
from .editions import Edition, LATEST
from .physics_core import PhysicsCore
from .renderers import GlyphRenderer, SpriteRenderer

logger = logging.getLogger(__name__)


class State:
    """
    Owns the player, the obstacles and the score.

    `tick` is called once per rendered frame with the console context, which
    supplies `frame_time_ms` and at most one `key`, and receives the drawing.
    """

    def __init__(self, edition: Edition = LATEST, rng: Optional[random.Random] = None):
        self.edition = edition
        self.physics = PhysicsCore(rng)
        if edition.sprites:
            self.renderer = SpriteRenderer()
        else:
            self.renderer = GlyphRenderer(animated=edition.animated)

        self.mode = GameMode.MENU
        self.player = Player()
        self.obstacles: List[Obstacle] = []
        self.frame_time = 0.0
        self.paused = False
        self.score = 0

    # ----------------- Frame dispatch -----------------

    def tick(self, ctx):
        if ctx.key is Key.ESCAPE:
            ctx.quitting = True
            return

        if self.mode is GameMode.MENU:
            self.main_menu(ctx)
        elif self.mode is GameMode.PLAYING:
            self.playing(ctx)
        else:
            self.game_over(ctx)

    def main_menu(self, ctx):
        ctx.cls_bg(WINDOW_BG)
        ctx.print_color(1, 1, YELLOW, WINDOW_BG, "Welcome to Flappy Dragon")
        ctx.print(2, 5, "(P) Play")
        ctx.print(2, 7, "(Q) Quit")

        if ctx.key is Key.P:
            self.restart()
        elif ctx.key is Key.Q:
            logger.info("Quit from the menu")
            ctx.quitting = True

    def playing(self, ctx):
        if not self.paused:
            self.frame_time += ctx.frame_time_ms
            if self.frame_time > FRAME_DURATION:
                self.update()

        if ctx.key is Key.SPACE and not self.paused:
            self.physics.flap(self.player)
        elif ctx.key is Key.P:
            self.pause()

        self.render(ctx)

    def game_over(self, ctx):
        ctx.cls_bg(WINDOW_BG)
        ctx.print_color(10, 10, YELLOW, WINDOW_BG, "You are dead!")
        if self.edition.scoring:
            ctx.print(10, 12, f"You earned {self.score} points")
        ctx.print(10, 14, "Press SPACE to return to the menu")

        if ctx.key is Key.SPACE:
            self.mode = GameMode.MENU
            logger.info("Back to the menu")

    # ----------------- Simulation -----------------

    def update(self):
        """One physics tick: spawn, fall, scroll, collide, score."""
        self.frame_time = 0.0

        if not self.edition.respawn_obstacles:
            self.add_walls()

        self.physics.gravity_and_move(self.player)

        # The walls stay put; the dragon's world column advances instead
        self.player.x += 1
        if self.edition.animated:
            self.physics.advance_frame(self.player)

        if self.physics.check_collision(self.player, self.obstacles):
            self.mode = GameMode.END
            logger.info("Game over at x=%d y=%d, score %d", self.player.x, self.player.y, self.score)
            return

        self.pass_obstacles()

    def add_walls(self):
        """Adds one wall per tick until MAX_WALLS stand, always at a fixed difficulty."""
        if len(self.obstacles) < MAX_WALLS:
            self.obstacles.append(
                self.physics.new_obstacle(SCREEN_WIDTH + self.player.x, WALLS_DIFFICULTY))

    def pass_obstacles(self):
        passed = [o for o in self.obstacles if self.player.x >= o.x]
        if not passed:
            return

        self.obstacles = [o for o in self.obstacles if self.player.x < o.x]
        if not self.edition.respawn_obstacles:
            return

        if self.edition.scoring:
            self.score += len(passed)
            logger.debug("Score %d", self.score)
        self.obstacles.append(self.physics.new_obstacle(self.player.x + SCREEN_WIDTH, self.score))

    def restart(self):
        self.player = Player()
        self.frame_time = 0.0
        self.paused = False
        self.score = 0
        if self.edition.respawn_obstacles:
            self.obstacles = [self.physics.new_obstacle(SCREEN_WIDTH, 0)]
        else:
            self.obstacles = []
        self.mode = GameMode.PLAYING
        logger.info("New game (%s edition)", self.edition.name)

    def pause(self):
        self.paused = not self.paused
        logger.info("Paused" if self.paused else "Resumed")

    # ----------------- Rendering -----------------

    def render(self, ctx):
        ctx.cls_bg(WINDOW_BG)
        for obstacle in self.obstacles:
            self.renderer.render_obstacle(ctx, obstacle, self.player)
        self.renderer.render_player(ctx, self.player)

        ctx.print(1, 1, "Press SPACE to flap.")
        if self.edition.scoring:
            ctx.print(1, 2, f"Score: {self.score}")
        if self.paused:
            ctx.print_color(35, 24, WHITE, WINDOW_BG, "PAUSED")
