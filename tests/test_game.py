from snowdefense.game import Controls, Game
from snowdefense.penguin import ICEBERG_TOP


class NeverStart:
    def randrange(self, stop):
        return stop - 1


def make_game():
    return Game(rng=NeverStart())


def live_snowballs(game):
    return sum(snowball.live for snowball in game.snowballs)


def test_new_game_state():
    game = make_game()
    assert game.lives == 5
    assert game.score == 0
    assert game.lost is False
    assert len(game.snowballs) == 5
    assert len(game.penguins) == 10


def test_fire_launches_one_snowball_and_starts_cooldown():
    game = make_game()
    game.step(Controls(fire=True))
    assert live_snowballs(game) == 1
    assert game.fire_cooldown == 0


def test_holding_fire_respects_delay():
    game = make_game()
    fire = Controls(fire=True)
    game.step(fire)
    for _ in range(game.fire_delay - 1):
        game.step(fire)
    assert live_snowballs(game) == 1
    game.step(fire)
    assert live_snowballs(game) == 2


def test_rotation_controls_turn_cannon():
    game = make_game()
    game.step(Controls(right=True))
    assert game.cannon.angle > 0
    game.step(Controls(left=True))
    game.step(Controls(left=True))
    assert game.cannon.angle < 0


def test_landing_penguin_costs_a_life():
    game = make_game()
    penguin = game.penguins[0]
    penguin.in_play = True
    penguin.x = 100
    penguin.y = ICEBERG_TOP - penguin.bound_bottom + 1
    game.step(Controls())
    assert game.lives == 4
    assert penguin.in_play is False


def test_hitting_penguin_scores():
    game = make_game()
    penguin = game.penguins[0]
    penguin.in_play = True
    penguin.x, penguin.y = 400, 300
    snowball = game.snowballs[0]
    snowball.live = True
    snowball.x, snowball.y = 440, 350
    game.step(Controls())
    assert game.score == 1
    assert penguin.alive is False
    assert snowball.live is False


def test_losing_last_life_ends_game_and_freezes_it():
    game = make_game()
    game.lives = 1
    penguin = game.penguins[0]
    penguin.in_play = True
    penguin.x = 100
    penguin.y = ICEBERG_TOP - penguin.bound_bottom + 1
    game.step(Controls())
    assert game.lost is True
    game.step(Controls(right=True, fire=True))
    assert game.cannon.angle == 0.0
    assert live_snowballs(game) == 0


def test_penguins_start_with_lucky_rng():
    class AlwaysStart:
        def randrange(self, stop):
            return 0

    game = Game(rng=AlwaysStart())
    game.step(Controls())
    assert all(penguin.in_play for penguin in game.penguins)


def test_score_and_life_helpers():
    game = make_game()
    game.add_score()
    game.add_score()
    game.remove_life()
    assert game.score == 2
    assert game.lives == 4