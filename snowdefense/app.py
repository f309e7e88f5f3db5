"""Window, drawing and the main loop."""

import argparse
import math
import random
import sys
from dataclasses import dataclass
from pathlib import Path

import pygame

from snowdefense.cannon import PIVOT_X, PIVOT_Y, SPRITE_PIVOT_X, SPRITE_PIVOT_Y
from snowdefense.game import HEIGHT, NUM_ENEMIES, NUM_SNOWBALLS, WIDTH, Controls, Game

FPS = 60
FONT_FILE = "PressStart2P.ttf"
BLACK = (0, 0, 0)
RED = (255, 0, 0)

_KEY_FIELDS = {pygame.K_LEFT: "left", pygame.K_RIGHT: "right", pygame.K_SPACE: "fire"}


@dataclass
class Assets:
    """Images and fonts used to draw the game."""

    background: pygame.Surface
    igloo: pygame.Surface
    cannon: pygame.Surface
    snowball: pygame.Surface
    penguin: pygame.Surface
    penguin_downed: pygame.Surface
    font: pygame.font.Font
    big_font: pygame.font.Font

    @classmethod
    def load(cls, directory: Path) -> "Assets":
        """Load the game's images and fonts from a directory."""

        def image(name: str) -> pygame.Surface:
            surface = pygame.image.load(str(directory / name))
            return surface.convert_alpha() if pygame.display.get_surface() else surface

        font_path = str(directory / FONT_FILE)
        return cls(
            background=image("Background.png"),
            igloo=image("BackgroundIgloo.png"),
            cannon=image("Cannon.png"),
            snowball=image("Snowball.png"),
            penguin=image("PenguinParatrooper.png"),
            penguin_downed=image("PenguinParatrooperDowned.png"),
            font=pygame.font.Font(font_path, 24),
            big_font=pygame.font.Font(font_path, 64),
        )


class Renderer:
    """Draws a game onto a surface."""

    def __init__(self, screen: pygame.Surface, assets: Assets) -> None:
        self.screen = screen
        self.assets = assets

    def draw(self, game: Game) -> None:
        assets = self.assets
        self.screen.blit(assets.background, (0, 0))
        self._draw_cannon(game.cannon.angle)
        self.screen.blit(assets.igloo, (0, 0))

        for penguin in game.penguins:
            if penguin.in_play:
                image = assets.penguin if penguin.alive else assets.penguin_downed
                self.screen.blit(image, (penguin.x, penguin.y))
        for snowball in game.snowballs:
            if snowball.live:
                self.screen.blit(assets.snowball, (snowball.x, snowball.y))

        if not game.lost:
            lives = assets.font.render(f"Lives: {game.lives}", False, BLACK)
            self.screen.blit(lives, (5, 870))
            score = assets.font.render(f"Score: {game.score}", False, BLACK)
            self.screen.blit(score, score.get_rect(topright=(895, 870)))
        else:
            over = assets.big_font.render("GAME OVER", False, RED)
            self.screen.blit(over, over.get_rect(midtop=(450, 400)))
            final = assets.font.render(f"FINAL SCORE: {game.score}", False, RED)
            self.screen.blit(final, final.get_rect(midtop=(450, 475)))

    def _draw_cannon(self, angle: float) -> None:
        image = self.assets.cannon
        degrees = math.degrees(angle)
        to_center = pygame.math.Vector2(
            image.get_width() / 2 - SPRITE_PIVOT_X, image.get_height() / 2 - SPRITE_PIVOT_Y
        )
        center = pygame.math.Vector2(PIVOT_X, PIVOT_Y) + to_center.rotate(degrees)
        rotated = pygame.transform.rotate(image, -degrees)
        self.screen.blit(rotated, rotated.get_rect(center=(round(center.x), round(center.y))))


def _apply_key(controls: Controls, key: int, pressed: bool) -> None:
    field = _KEY_FIELDS.get(key)
    if field is not None:
        setattr(controls, field, pressed)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="snowdefense", description="Defend the iceberg from penguins.")
    parser.add_argument("--assets", type=Path, default=Path("."), help="directory holding images and the font")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("Snow Defense")
        try:
            assets = Assets.load(args.assets)
        except (OSError, pygame.error) as exc:
            print(f"snowdefense: cannot load assets: {exc}", file=sys.stderr)
            return 1

        game = Game(NUM_SNOWBALLS, NUM_ENEMIES, rng=random.Random())
        renderer = Renderer(screen, assets)
        controls = Controls()
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                    _apply_key(controls, event.key, event.type == pygame.KEYDOWN)
            game.step(controls)
            renderer.draw(game)
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())