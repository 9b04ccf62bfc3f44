from frogcross.colors import Colors
from frogcross.effects import EffectSystem


def test_empty_system_has_no_effects():
    system = EffectSystem()
    assert system.has_active_effects() is False
    assert system.render(40) == ""


def test_add_effect_defaults_to_white_and_three_frames():
    colors = Colors()
    system = EffectSystem(colors)
    system.add_effect(2, 3, "hello")
    assert system.has_active_effects()
    effect = system.active_effects[0]
    assert effect.color == colors.WHITE
    assert effect.duration == 3
    assert effect.text == "hello"


def test_effect_expires_after_its_duration():
    system = EffectSystem()
    system.add_effect(0, 0, "x", duration=2)
    system.update()
    assert system.has_active_effects()
    system.update()
    assert not system.has_active_effects()


def test_effects_expire_independently():
    system = EffectSystem()
    system.add_effect(0, 0, "short", duration=1)
    system.add_effect(0, 0, "long", duration=5)
    system.update()
    assert [e.text for e in system.active_effects] == ["long"]


def test_clear_removes_everything():
    system = EffectSystem()
    system.add_effect(0, 0, "a")
    system.add_effect(1, 1, "b")
    system.clear()
    assert system.has_active_effects() is False


def test_render_positions_cursor_below_header():
    colors = Colors()
    system = EffectSystem(colors)
    system.add_effect(1, 1, "Boom", colors.RED, 5)
    assert system.render(40) == f"\033[4;2H{colors.RED}Boom{colors.RESET}"