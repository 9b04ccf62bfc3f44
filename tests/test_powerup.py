import pytest

from frogcross.colors import Colors
from frogcross.powerup import POWER_UP_LIFETIME, PowerUp, PowerUpType


@pytest.mark.parametrize(
    "kind, symbol",
    [
        (PowerUpType.SHIELD, "S"),
        (PowerUpType.SPEED_BOOST, "B"),
        (PowerUpType.DOUBLE_SCORE, "D"),
        (PowerUpType.EXTRA_LIFE, "L"),
    ],
)
def test_symbols(kind, symbol):
    assert PowerUp(kind, 1, 1).symbol() == symbol


@pytest.mark.parametrize(
    "kind, text",
    [
        (PowerUpType.SHIELD, "Shield - Temporary Protection"),
        (PowerUpType.SPEED_BOOST, "Speed Boost - Enhanced Movement"),
        (PowerUpType.DOUBLE_SCORE, "Double Score - Bonus Points"),
        (PowerUpType.EXTRA_LIFE, "Extra Life - Additional Chance"),
    ],
)
def test_descriptions(kind, text):
    assert PowerUp(kind, 0, 0).description() == text


def test_colors_follow_kind():
    colors = Colors()
    assert PowerUp(PowerUpType.SHIELD, 0, 0, colors).color() == colors.BRIGHT_YELLOW
    assert PowerUp(PowerUpType.SPEED_BOOST, 0, 0, colors).color() == colors.BRIGHT_MAGENTA
    assert PowerUp(PowerUpType.DOUBLE_SCORE, 0, 0, colors).color() == colors.BRIGHT_CYAN
    assert PowerUp(PowerUpType.EXTRA_LIFE, 0, 0, colors).color() == colors.BRIGHT_GREEN


def test_kinds_from_random_index():
    assert [PowerUpType(i) for i in range(4)] == [
        PowerUpType.SHIELD,
        PowerUpType.SPEED_BOOST,
        PowerUpType.DOUBLE_SCORE,
        PowerUpType.EXTRA_LIFE,
    ]


def test_new_power_up_is_active():
    power_up = PowerUp(PowerUpType.SHIELD, 3, 4)
    assert power_up.active is True
    assert power_up.duration == POWER_UP_LIFETIME
    assert (power_up.x, power_up.y) == (3, 4)


def test_expires_after_lifetime():
    power_up = PowerUp(PowerUpType.EXTRA_LIFE, 0, 0)
    results = [power_up.update() for _ in range(POWER_UP_LIFETIME)]
    assert all(results[:-1])
    assert results[-1] is False
    assert power_up.active is False


def test_inactive_stays_inactive():
    power_up = PowerUp(PowerUpType.DOUBLE_SCORE, 0, 0, duration=1)
    assert power_up.update() is False
    assert power_up.update() is False
    assert power_up.duration == 0