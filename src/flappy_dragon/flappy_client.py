#!/usr/bin/env python3
"""
flappy_client.py

Game client: opens the character-grid window, polls input and drives
GameState once per rendered frame.
"""

import argparse
import logging
import random
from typing import List, Optional

import pygame

from .constants import WINDOW_TITLE, DEFAULT_FPS
from .display import TerminalContext
from .game_state import GameState

logger = logging.getLogger(__name__)


class FlappyDragonClient:
    def __init__(self, fps: int = DEFAULT_FPS, seed: Optional[int] = None):
        pygame.init()
        self.ctx = TerminalContext(WINDOW_TITLE, fps)
        self.state = GameState(rng=random.Random(seed))

    def run(self):
        """The main client execution loop. Returns once quit is requested."""
        logger.info("Client started at %d fps", self.ctx.fps)
        while not self.ctx.quitting:
            self.ctx.poll()
            if self.ctx.quitting:
                break
            self.state.tick(self.ctx)
            self.ctx.present()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="flappy-dragon", description=WINDOW_TITLE)
    parser.add_argument("--fps", type=int, default=DEFAULT_FPS,
                        help="render frame rate (physics always ticks every 75 ms)")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for obstacle placement")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        try:
            client = FlappyDragonClient(fps=args.fps, seed=args.seed)
        except pygame.error as e:
            logger.error("Could not initialise display: %s", e)
            return 1
        client.run()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
