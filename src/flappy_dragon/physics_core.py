"""
physics_core.py: The deterministic kinematic functions, obstacle factory and collision logic.
"""

import logging
import random
from typing import Iterable, Optional

from .constants import (
    GRAVITY, TERMINAL_VELOCITY, FLAP_VELOCITY, SCREEN_HEIGHT,
    GAP_Y_RANGE, BASE_GAP_SIZE, MIN_GAP_SIZE, ANIMATION_FRAMES
)
from .data_models import Player, Obstacle

logger = logging.getLogger(__name__)


class PhysicsCore:
    """
    Per-tick physics shared by every edition.
    All randomness goes through `self.rng` so a seeded run is reproducible.
    """

    SCREEN_HEIGHT = SCREEN_HEIGHT

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def apply_gravity(self, velocity: float) -> float:
        """Adds one tick of gravity, never past terminal velocity."""
        if velocity < TERMINAL_VELOCITY:
            velocity = round(velocity + GRAVITY, 4)
        return min(velocity, TERMINAL_VELOCITY)

    def gravity_and_move(self, player: Player):
        """
        Applies gravity, then moves the player by the whole part of its velocity.
        Mutates the player.
        """
        player.velocity = self.apply_gravity(player.velocity)
        player.y += int(player.velocity)

        # Top of the screen is a ceiling, not a collision
        if player.y < 0:
            player.y = 0

    def flap(self, player: Player):
        player.velocity = FLAP_VELOCITY

    def advance_frame(self, player: Player):
        player.frame_number = player.frame_number % ANIMATION_FRAMES + 1

    def gap_size(self, score: int) -> int:
        return max(MIN_GAP_SIZE, BASE_GAP_SIZE - score)

    def new_obstacle(self, x: int, score: int) -> Obstacle:
        """Builds a wall at world column `x`, its gap narrowing as the score grows."""
        obstacle = Obstacle(x=x, gap_y=self.rng.randrange(*GAP_Y_RANGE), size=self.gap_size(score))
        logger.debug("Spawned obstacle %s", obstacle)
        return obstacle

    def hit_obstacle(self, player: Player, obstacle: Obstacle) -> bool:
        if player.x != obstacle.x:
            return False

        half_size = obstacle.half_size
        above_gap = player.y < obstacle.gap_y - half_size
        below_gap = player.y > obstacle.gap_y + half_size
        return above_gap or below_gap

    def hit_floor(self, player: Player) -> bool:
        return player.y > self.SCREEN_HEIGHT

    def check_collision(self, player: Player, obstacles: Iterable[Obstacle]) -> bool:
        """Checks for collisions with the floor or any obstacle."""
        if self.hit_floor(player):
            return True
        return any(self.hit_obstacle(player, obstacle) for obstacle in obstacles)
