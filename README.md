# snowdefense

A small arcade game. A snowball cannon sits at the bottom of the screen in
front of an igloo. Penguin paratroopers drift down from the sky, and any that
lands on your iceberg costs you a life. Knock them out with snowballs before
that happens.

## Installing

```
pip install .
```

The game needs `pygame`, which is installed along with the package.

## Playing

```
snowdefense
```

By default the game looks for its artwork (`Background.png`,
`BackgroundIgloo.png`, `Cannon.png`, `Snowball.png`,
`PenguinParatrooper.png`, `PenguinParatrooperDowned.png`) and the
`PressStart2P.ttf` font in the current directory. Point it elsewhere with
`--assets`:

```
snowdefense --assets path/to/assets
```

If any of these files cannot be loaded, the command prints an error and exits
with status 1. These files are not shipped with the package; supply your own.

Controls:

| Key         | Action                    |
|-------------|---------------------------|
| Left arrow  | Rotate the cannon left    |
| Right arrow | Rotate the cannon right   |
| Space       | Fire a snowball           |

Close the window to quit. The game runs at 60 frames per second in a
900×900 window.

Rules:

- You start with 5 lives and a score of 0.
- The cannon turns at most a quarter turn to either side of straight up.
- Up to five snowballs can be in the air at once, with a cooldown of ten
  frames between shots.
- Each of the ten penguins that is not already falling has a 1 in 500 chance
  per frame of dropping in from above the screen.
- A snowball that lies fully inside a falling penguin's hitbox knocks it out
  and scores a point. A downed penguin falls four times as fast and does no
  harm.
- A live penguin that comes down over the iceberg costs a life. When no lives
  are left the game stops and shows "GAME OVER" with the final score; close
  the window to quit.

## Using the pieces

The game logic does not depend on a display, so it can be driven and tested
on its own:

```python
import random

from snowdefense.game import Controls, Game

game = Game(rng=random.Random(1))
for _ in range(120):
    game.step(Controls(left=True, fire=True))
print(game.score, game.lives, game.lost)
```

`Game` takes the number of snowballs and penguins, a random source (anything
with a `randrange(stop)` method) and the playfield size. `Game.step` advances
one frame; `Game.add_score` and `Game.remove_life` change the counters.

`snowdefense.cannon.Cannon`, `snowdefense.snowball.Snowball` and
`snowdefense.penguin.Penguin` hold the state of each piece, and
`snowdefense.app.Renderer` draws a `Game` onto a pygame surface.

## Running the tests

```
pip install .[test]
pytest
```