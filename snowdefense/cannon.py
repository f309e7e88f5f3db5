"""The rotating snowball cannon."""

import math
from dataclasses import dataclass

ROTATION_STEP = 0.05
MAX_ANGLE = math.pi / 2

# Screen position of the cannon's pivot and the pivot's position inside the sprite.
PIVOT_X = 450
PIVOT_Y = 680
SPRITE_PIVOT_X = 64
SPRITE_PIVOT_Y = 120


@dataclass
class Cannon:
    """A cannon aimed by an angle in radians; 0 points straight up, positive turns right."""

    angle: float = 0.0

    def rotate_left(self) -> None:
        """Turn one step to the left, stopping at horizontal."""
        self.angle = max(self.angle - ROTATION_STEP, -MAX_ANGLE)

    def rotate_right(self) -> None:
        """Turn one step to the right, stopping at horizontal."""
        self.angle = min(self.angle + ROTATION_STEP, MAX_ANGLE)