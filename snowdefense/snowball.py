"""Snowballs fired from the cannon."""

import math
from collections.abc import Iterable
from dataclasses import dataclass

from snowdefense.cannon import PIVOT_X, PIVOT_Y, Cannon
from snowdefense.penguin import Penguin

BARREL_LENGTH = 115


@dataclass
class Snowball:
    """A snowball; live while it flies across the screen."""

    x: int = 0
    y: int = 0
    live: bool = False
    speed: int = 10
    speed_x: int = 0
    speed_y: int = 0
    bound_x: int = 16
    bound_y: int = 16

    def fire(self, cannon: Cannon) -> bool:
        """Launch from the cannon's muzzle; return False if already flying."""
        if self.live:
            return False
        sin, cos = math.sin(cannon.angle), math.cos(cannon.angle)
        self.speed_x = int(sin * self.speed)
        self.speed_y = int(cos * self.speed)
        half_x, half_y = self.bound_x // 2, self.bound_y // 2
        self.x = int(PIVOT_X + sin * BARREL_LENGTH - half_x + sin * half_x)
        self.y = int(PIVOT_Y - cos * BARREL_LENGTH - half_y - cos * half_y)
        self.live = True
        return True

    def update(self, width: int, height: int) -> None:
        """Move one step and stop flying once outside the screen."""
        if not self.live:
            return
        self.x += self.speed_x
        self.y -= self.speed_y
        if self.x > width or self.x < -self.bound_x or self.y > height or self.y < -self.bound_y:
            self.live = False

    def collide(self, penguins: Iterable[Penguin]) -> bool:
        """Down the first live penguin whose hitbox wholly holds this snowball."""
        if not self.live:
            return False
        for penguin in penguins:
            if not (penguin.in_play and penguin.alive):
                continue
            box = penguin.hitbox()
            if (
                self.x >= box.left
                and self.x + self.bound_x <= box.right
                and self.y >= box.top
                and self.y + self.bound_y <= box.bottom
            ):
                penguin.alive = False
                self.live = False
                return True
        return False