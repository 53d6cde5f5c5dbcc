"""
game_state.py: The top-level controller and its Menu/Playing/End mode machine.
"""

import logging
import random
from typing import TYPE_CHECKING, Optional

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FRAME_DURATION, NAVY,
    PLAYER_START_X, PLAYER_START_Y
)
from .data_models import GameMode, Key, Obstacle, Player

if TYPE_CHECKING:
    from .display import DisplayContext

logger = logging.getLogger(__name__)


class GameState:
    """
    Owns the player, the single live obstacle and the score.
    The display collaborator calls tick() once per rendered frame.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.mode = GameMode.MENU
        self.frame_time = 0.0   # ms accumulated towards the next physics tick
        self.player = Player.new(PLAYER_START_X, PLAYER_START_Y)
        self.obstacle = Obstacle.new(SCREEN_WIDTH, 0, self.rng)
        self.score = 0

    def restart(self):
        """Resets the run and enters Playing."""
        self.player = Player.new(PLAYER_START_X, PLAYER_START_Y)
        self.frame_time = 0.0
        self.mode = GameMode.PLAYING
        self.obstacle = Obstacle.new(SCREEN_WIDTH, 0, self.rng)
        self.score = 0
        logger.info("New game started")

    def tick(self, ctx: "DisplayContext"):
        if self.mode is GameMode.MENU:
            self.main_menu(ctx)
        elif self.mode is GameMode.PLAYING:
            self.play(ctx)
        elif self.mode is GameMode.END:
            self.dead(ctx)

    def _handle_menu_keys(self, ctx: "DisplayContext"):
        if ctx.key is Key.PLAY:
            self.restart()
        elif ctx.key is Key.QUIT:
            logger.info("Quit requested from %s", self.mode.value)
            ctx.quitting = True

    def main_menu(self, ctx: "DisplayContext"):
        ctx.cls()
        ctx.print_centered(5, "Welcome to Flappy Dragon")
        ctx.print_centered(8, "(P) Play Game")
        ctx.print_centered(9, "(Q) Quit Game")
        self._handle_menu_keys(ctx)

    def dead(self, ctx: "DisplayContext"):
        ctx.cls()
        ctx.print_centered(5, "You are dead!")
        ctx.print_centered(6, f"You earned {self.score} points")
        ctx.print_centered(8, "(P) Play Again")
        ctx.print_centered(9, "(Q) Quit Game")
        self._handle_menu_keys(ctx)

    def play(self, ctx: "DisplayContext"):
        ctx.cls_bg(NAVY)

        # 1. Fixed-cadence physics, decoupled from the render rate
        self.frame_time += ctx.frame_time_ms
        if self.frame_time > FRAME_DURATION:
            self.frame_time = 0.0
            self.player.integrate_physics()

        # 2. Flap input applies immediately, not on the next physics tick
        if ctx.key is Key.FLAP:
            self.player.flap()

        # 3. Draw
        self.player.render(ctx)
        ctx.print(0, 0, "Press SPACE to flap.")
        ctx.print(0, 1, f"Score: {self.score}")
        self.obstacle.render(ctx, self.player.x)

        # 4. Score and replace a passed obstacle
        if self.player.x > self.obstacle.x:
            self.score += 1
            self.obstacle = Obstacle.new(self.player.x + SCREEN_WIDTH, self.score, self.rng)
            logger.debug("Score %d, next obstacle at x=%d size=%d",
                         self.score, self.obstacle.x, self.obstacle.size)

        # 5. Fell off the bottom or hit the wall
        if self.player.row > SCREEN_HEIGHT or self.obstacle.hits(self.player):
            self.mode = GameMode.END
            logger.info("Game over with score %d", self.score)
