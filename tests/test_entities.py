import random

import pytest

from frogcross.colors import Colors, Key
from frogcross.config import GameConfig
from frogcross.entities import Car, Frog, GameObject, Moto, Obstacle
from frogcross.gamemap import GameMap
from frogcross.powerup import PowerUp, PowerUpType


def make_config(**overrides):
    config = GameConfig()
    config.power_ups_enabled = False
    for name, value in overrides.items():
        setattr(config, name, value)
    return config


def make_map(config=None):
    config = config or make_config()
    return GameMap(config, Colors(), random.Random(1)), config


class KeyScript:
    def __init__(self, *keys):
        self.keys = list(keys)
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.keys.pop(0) if self.keys else None


def test_game_object_is_abstract():
    game_map, config = make_map()
    with pytest.raises(TypeError):
        GameObject(1, 1, "X", game_map, config)


def test_obstacle_is_placed_and_static():
    game_map, config = make_map()
    obstacle = Obstacle(5, 3, game_map, config)
    assert game_map.has_obstacle(5, 3)
    assert game_map.grid[3][5].color == Colors().YELLOW
    assert obstacle.move(1000.0) is True
    assert (obstacle.x, obstacle.y) == (5, 3)


def test_frog_is_drawn_at_start():
    game_map, config = make_map()
    frog = Frog(20, 9, game_map, config, read_input=KeyScript())
    assert game_map.char_at(20, 9) == "F"
    assert frog.move(0.0) is True
    assert (frog.x, frog.y) == (20, 9)


def test_frog_moves_up_and_scores():
    game_map, config = make_map()
    frog = Frog(20, 9, game_map, config, read_input=KeyScript(Key.UP))
    assert frog.move(0.0) is True
    assert (frog.x, frog.y) == (20, 8)
    assert game_map.score == 3


def test_frog_sideways_move_scores_less_than_forward():
    side_map, config = make_map()
    Frog(20, 9, side_map, config, read_input=KeyScript(Key.LEFT)).move(0.0)
    up_map, config2 = make_map()
    Frog(20, 9, up_map, config2, read_input=KeyScript(Key.UP)).move(0.0)
    assert 0 < side_map.score < up_map.score


def test_frog_cooldown_blocks_input():
    game_map, config = make_map()
    keys = KeyScript(Key.LEFT, Key.LEFT)
    frog = Frog(20, 9, game_map, config, read_input=keys)
    frog.move(0.0)
    frog.move(50.0)
    assert keys.calls == 1
    assert frog.x == 19
    frog.move(60.0)
    assert keys.calls == 2
    assert frog.x == 18


def test_non_arrow_key_does_not_move_or_start_cooldown():
    game_map, config = make_map()
    keys = KeyScript("q", "q")
    frog = Frog(20, 9, game_map, config, read_input=keys)
    frog.move(0.0)
    frog.move(0.0)
    assert keys.calls == 2
    assert (frog.x, frog.y) == (20, 9)
    assert game_map.score == 0


def test_frog_stays_inside_map():
    game_map, config = make_map()
    frog = Frog(0, 9, game_map, config, read_input=KeyScript(Key.LEFT))
    frog.move(0.0)
    assert frog.x == 0
    assert game_map.score == 0


def test_obstacle_blocks_frog():
    game_map, config = make_map()
    Obstacle(20, 8, game_map, config)
    frog = Frog(20, 9, game_map, config, read_input=KeyScript(Key.UP))
    assert frog.move(0.0) is True
    assert (frog.x, frog.y) == (20, 9)
    assert game_map.score == 0


def test_score_zone_doubles_points():
    zone_map, config = make_map()
    Frog(20, 3, zone_map, config, read_input=KeyScript(Key.UP)).move(0.0)
    plain_map, config2 = make_map()
    Frog(20, 8, plain_map, config2, read_input=KeyScript(Key.UP)).move(0.0)
    assert zone_map.is_score_zone(20, 2)
    assert plain_map.score > 0
    assert zone_map.score == 2 * plain_map.score


def test_score_multiplier_applies():
    base_map, config = make_map()
    Frog(20, 9, base_map, config, read_input=KeyScript(Key.UP)).move(0.0)
    boosted_map, boosted = make_map(make_config(score_multiplier=2.0))
    Frog(20, 9, boosted_map, boosted, read_input=KeyScript(Key.UP)).move(0.0)
    assert boosted_map.score == 2 * base_map.score


def test_frog_collects_extra_life():
    game_map, config = make_map()
    game_map.power_ups.append(PowerUp(PowerUpType.EXTRA_LIFE, 20, 8))
    frog = Frog(20, 9, game_map, config, read_input=KeyScript(Key.UP))
    frog.move(0.0)
    assert game_map.lives == config.player_lives + 1


def test_frog_walking_into_car_collides():
    game_map, config = make_map()
    frog = Frog(20, 9, game_map, config, read_input=KeyScript(Key.UP))
    Car(20, 8, 2, game_map, config)
    assert frog.move(0.0) is False


def test_reaching_top_and_reset():
    game_map, config = make_map()
    frog = Frog(20, 1, game_map, config, read_input=KeyScript(Key.UP))
    assert not frog.has_reached_top()
    frog.move(0.0)
    assert frog.has_reached_top()
    frog.reset_position()
    assert (frog.x, frog.y) == (20, 1)
    assert not frog.has_reached_top()


def test_path_collision_detection():
    game_map, config = make_map()
    Frog(10, 3, game_map, config, read_input=KeyScript())
    car = Car(5, 3, 2, game_map, config)
    assert car.check_path_collision(5, 12, 3) is True
    assert car.check_path_collision(12, 5, 3) is True
    assert car.check_path_collision(11, 15, 3) is False
    assert car.check_path_collision(10, 10, 3) is False


def test_car_waits_for_interval():
    game_map, config = make_map()
    car = Car(5, 3, 2, game_map, config)
    assert car.move(100.0) is True
    assert car.x == 5
    assert car.move(100.0) is True
    assert car.x == 5 + 2
    assert game_map.char_at(car.x, 3) == "C"


def test_car_speed_scales_step():
    game_map, config = make_map(make_config(vehicle_speed=2))
    car = Car(5, 3, 2, game_map, config)
    car.move(200.0)
    assert car.x == 5 + 2 * 2


def test_car_wraps_around():
    game_map, config = make_map()
    car = Car(39, 3, 2, game_map, config)
    assert car.move(200.0) is True
    assert car.x == 0


def test_car_hitting_frog_returns_false_and_stays():
    game_map, config = make_map()
    Frog(6, 3, game_map, config, read_input=KeyScript())
    car = Car(5, 3, 2, game_map, config)
    assert car.move(200.0) is False
    assert car.x == 5


def test_moto_is_slower():
    game_map, config = make_map()
    moto = Moto(10, 3, -2, game_map, config)
    assert moto.move(250.0) is True
    assert moto.x == 10
    assert moto.move(50.0) is True
    assert moto.x == 10 - 2
    assert game_map.char_at(moto.x, 3) == "M"


def test_moto_color_and_speed():
    game_map, config = make_map()
    moto = Moto(10, 3, 2, game_map, config)
    assert moto.color == Colors().BRIGHT_RED
    assert moto.speed == pytest.approx(config.vehicle_speed * 0.7)