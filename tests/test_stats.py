from frogcross.colors import Colors
from frogcross.powerup import PowerUpType
from frogcross.stats import GameStats


def test_starts_at_zero():
    stats = GameStats()
    assert stats.total_moves == 0
    assert stats.collisions == 0
    assert stats.efficiency_score() == 0.0


def test_record_move_counts():
    stats = GameStats()
    for _ in range(5):
        stats.record_move()
    assert stats.total_moves == 5


def test_crossing_without_collision_is_perfect():
    stats = GameStats()
    stats.record_crossing()
    assert stats.successful_crossings == 1
    assert stats.perfect_crossings == 1
    assert stats.current_combo == 1
    assert stats.max_combo == 1


def test_collision_breaks_combo_but_keeps_max():
    stats = GameStats()
    stats.record_crossing()
    stats.record_crossing()
    stats.record_collision()
    assert stats.current_combo == 0
    assert stats.max_combo == 2
    stats.record_crossing()
    assert stats.perfect_crossings == 2
    assert stats.current_combo == 1


def test_efficiency_is_percentage_of_moves():
    stats = GameStats()
    for _ in range(4):
        stats.record_move()
    stats.record_crossing()
    assert stats.efficiency_score() == 25.0


def test_survival_time_accumulates_and_tracks_best():
    stats = GameStats()
    stats.update_survival_time(1500.0)
    stats.update_survival_time(1000.0)
    assert stats.survival_time == 2500.0
    assert stats.best_time == stats.survival_time
    assert stats.survival_time_seconds() == 2.5


def test_record_power_up_keeps_history():
    stats = GameStats()
    stats.record_power_up(PowerUpType.SHIELD)
    stats.record_power_up(PowerUpType.EXTRA_LIFE)
    assert stats.power_ups_collected == 2
    assert stats.collected_power_ups == [PowerUpType.SHIELD, PowerUpType.EXTRA_LIFE]


def test_render_contains_counters():
    colors = Colors()
    stats = GameStats(colors)
    stats.record_move()
    stats.record_move()
    stats.record_collision()
    stats.update_survival_time(3200.0)
    text = stats.render()
    assert "=== ENHANCED GAME STATISTICS ===" in text
    assert f"Total Moves: {colors.WHITE}2" in text
    assert f"Collisions: {colors.WHITE}1" in text
    assert f"Survival Time: {colors.WHITE}3s" in text
    assert f"Efficiency: {colors.WHITE}0%" in text