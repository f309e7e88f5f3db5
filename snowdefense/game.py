"""Game state and the per-frame rules."""

import random
from dataclasses import dataclass

from snowdefense.cannon import Cannon
from snowdefense.penguin import Penguin, RandomSource
from snowdefense.snowball import Snowball

WIDTH = 900
HEIGHT = 900
NUM_SNOWBALLS = 5
NUM_ENEMIES = 10
START_LIVES = 5
FIRE_DELAY = 10


@dataclass
class Controls:
    """Which of the player's keys are held down."""

    left: bool = False
    right: bool = False
    fire: bool = False


class Game:
    """A cannon defending an iceberg from a pool of penguins with a pool of snowballs."""

    def __init__(
        self,
        num_snowballs: int = NUM_SNOWBALLS,
        num_enemies: int = NUM_ENEMIES,
        rng: RandomSource | None = None,
        width: int = WIDTH,
        height: int = HEIGHT,
    ) -> None:
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.cannon = Cannon()
        self.snowballs = [Snowball() for _ in range(num_snowballs)]
        self.penguins = [Penguin() for _ in range(num_enemies)]
        self.lives = START_LIVES
        self.score = 0
        self.fire_delay = FIRE_DELAY
        self.fire_cooldown = FIRE_DELAY
        self.lost = False

    def step(self, controls: Controls) -> None:
        """Advance the game by one frame."""
        if self.lost:
            return
        if self.fire_cooldown != self.fire_delay:
            self.fire_cooldown += 1
        if controls.left:
            self.cannon.rotate_left()
        if controls.right:
            self.cannon.rotate_right()
        if controls.fire and self.fire_cooldown == self.fire_delay:
            if any(snowball.fire(self.cannon) for snowball in self.snowballs):
                self.fire_cooldown = 0

        for snowball in self.snowballs:
            snowball.update(self.width, self.height)
        for penguin in self.penguins:
            penguin.try_start(self.width, self.height, self.rng)
        for penguin in self.penguins:
            penguin.update()
        for snowball in self.snowballs:
            if snowball.collide(self.penguins):
                self.add_score()
        for penguin in self.penguins:
            if penguin.collide(self.width, self.height):
                self.remove_life()

        if self.lives <= 0:
            self.lost = True

    def remove_life(self) -> None:
        self.lives -= 1

    def add_score(self) -> None:
        self.score += 1