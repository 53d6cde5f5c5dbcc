"""
data_models.py: Data structures for the game state.
"""

import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Optional

from .constants import (
    SCREEN_HEIGHT, GAP_Y_MIN, GAP_Y_MAX,
    PLAYER_GLYPH, WALL_GLYPH, YELLOW, RED, BLACK
)
from .physics_core import PhysicsCore

if TYPE_CHECKING:
    from .display import DisplayContext

CORE = PhysicsCore()


class GameMode(Enum):
    MENU = "menu"
    PLAYING = "playing"
    END = "end"


class Key(Enum):
    """The keys the game reacts to. No key this frame is None."""
    FLAP = auto()
    PLAY = auto()
    QUIT = auto()


@dataclass
class Player:
    """The dragon: world-space progress, screen-space height."""
    x: int
    y: float
    velocity: float = 0.0

    @classmethod
    def new(cls, x: int, y: int) -> "Player":
        return cls(x=x, y=float(y), velocity=0.0)

    @property
    def row(self) -> int:
        """Screen row the player occupies (fraction truncated)."""
        return int(self.y)

    def integrate_physics(self):
        """One physics tick: gravity, vertical move, one step right."""
        self.y, self.velocity = CORE.apply_gravity_and_movement(self.y, self.velocity)
        self.x += CORE.X_STEP

    def flap(self):
        self.velocity = CORE.flap()

    def render(self, ctx: "DisplayContext"):
        # Always drawn in the first column; the world scrolls past it
        ctx.set(0, self.row, YELLOW, BLACK, PLAYER_GLYPH)


@dataclass
class Obstacle:
    """A vertical wall with one gap, centred on gap_y."""
    x: int
    gap_y: int
    size: int

    @classmethod
    def new(cls, x: int, score: int, rng: Optional[random.Random] = None) -> "Obstacle":
        rng = rng or random.Random()
        return cls(
            x=x,
            gap_y=rng.randrange(GAP_Y_MIN, GAP_Y_MAX),
            size=CORE.gap_size(score),
        )

    def render(self, ctx: "DisplayContext", player_x: int):
        screen_x = self.x - player_x
        half_size = self.size // 2

        # Top wall
        for y in range(0, self.gap_y - half_size):
            ctx.set(screen_x, y, RED, BLACK, WALL_GLYPH)

        # Bottom wall
        for y in range(self.gap_y + half_size, SCREEN_HEIGHT):
            ctx.set(screen_x, y, RED, BLACK, WALL_GLYPH)

    def hits(self, player: Player) -> bool:
        """Collision is only possible on the tick the player shares our x."""
        if player.x != self.x:
            return False
        return CORE.outside_gap(player.row, self.gap_y, self.size)
