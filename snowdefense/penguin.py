"""Paratrooper penguins that drift down towards the iceberg."""

from dataclasses import dataclass
from typing import NamedTuple, Protocol

START_CHANCE = 500

ICEBERG_LEFT = 90
ICEBERG_RIGHT = 800
ICEBERG_TOP = 765


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


class Hitbox(NamedTuple):
    left: int
    right: int
    top: int
    bottom: int


@dataclass
class Penguin:
    """A penguin; its bounds are the hitbox offsets inside its sprite."""

    x: int = 0
    y: int = 0
    in_play: bool = False
    alive: bool = True
    speed: int = 2
    bound_left: int = 26
    bound_right: int = 102
    bound_top: int = 10
    bound_bottom: int = 117
    sprite_width: int = 128

    def try_start(self, width: int, height: int, rng: RandomSource) -> bool:
        """Drop in from above the screen with a 1 in 500 chance; return True if started."""
        if self.in_play or rng.randrange(START_CHANCE) != 0:
            return False
        self.in_play = True
        self.alive = True
        span = width - (self.sprite_width - self.bound_left) + self.bound_left + 1
        self.x = rng.randrange(span) - self.bound_left
        self.y = -self.bound_bottom
        return True

    def update(self) -> None:
        """Fall; downed penguins fall four times as fast."""
        if self.in_play:
            self.y += self.speed if self.alive else self.speed * 4

    def collide(self, width: int, height: int) -> bool:
        """Return True if a live penguin landed on the iceberg; drop penguins that left the screen."""
        if not self.in_play:
            return False
        if self.alive:
            box = self.hitbox()
            if box.left >= ICEBERG_LEFT and box.right <= ICEBERG_RIGHT and box.bottom > ICEBERG_TOP:
                self.in_play = False
                return True
        if self.y > height:
            self.in_play = False
        return False

    def hitbox(self) -> Hitbox:
        """The hitbox in screen coordinates."""
        return Hitbox(
            self.x + self.bound_left,
            self.x + self.bound_right,
            self.y + self.bound_top,
            self.y + self.bound_bottom,
        )