"""
Flappy Dragon: a side-scrolling reflex game on an 80x50 character grid.
"""

from .data_models import GameMode, Key, Obstacle, Player
from .game_state import GameState

__all__ = ["GameMode", "GameState", "Key", "Obstacle", "Player"]
