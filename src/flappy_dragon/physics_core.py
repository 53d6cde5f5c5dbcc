"""
physics_core.py: The deterministic kinematic functions and gap geometry.
"""

from .constants import (
    GRAVITY, TERMINAL_VELOCITY, FLAP_STRENGTH,
    MAX_GAP_SIZE, MIN_GAP_SIZE
)


class PhysicsCore:
    """
    Shared deterministic physics used by the player and obstacle models.
    One call to apply_gravity_and_movement is one physics tick.
    """

    X_STEP = 1  # World-x cells advanced per tick

    def apply_gravity_and_movement(self, y: float, velocity: float) -> tuple[float, float]:
        """
        Calculates new position and velocity after one physics tick.

        Gravity is only added while below terminal velocity; there is no clamp
        after the add, so the tick that crosses the threshold may overshoot it.
        """
        if velocity < TERMINAL_VELOCITY:
            velocity += GRAVITY
        y += velocity

        # Row zero is the top of the screen
        if y < 0.0:
            y = 0.0

        return y, velocity

    def flap(self) -> float:
        """Returns the instantaneous velocity after a flap."""
        return -FLAP_STRENGTH

    def gap_size(self, score: int) -> int:
        """Gap height for an obstacle spawned at the given score."""
        return max(MIN_GAP_SIZE, MAX_GAP_SIZE - score)

    def gap_bounds(self, gap_y: int, size: int) -> tuple[int, int]:
        """Top and bottom passable rows of a gap, both inclusive."""
        half_size = size // 2
        return gap_y - half_size, gap_y + half_size

    def outside_gap(self, row: int, gap_y: int, size: int) -> bool:
        """True if the row is strictly above or strictly below the gap."""
        top, bottom = self.gap_bounds(gap_y, size)
        return row < top or row > bottom
