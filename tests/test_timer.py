import time

from frogcross.timer import GameTimer


def _fake_clock(values):
    it = iter(values)
    return lambda: next(it)


def test_update_reports_milliseconds():
    timer = GameTimer(clock=_fake_clock([1.0, 1.25, 2.0]))
    assert timer.update() == 250.0
    assert timer.update() == 750.0


def test_delta_time_matches_last_update():
    timer = GameTimer(clock=_fake_clock([0.0, 0.5, 0.75]))
    first = timer.update()
    assert timer.delta_time == first
    second = timer.update()
    assert timer.delta_time == second


def test_delta_time_starts_at_zero():
    timer = GameTimer(clock=_fake_clock([3.0]))
    assert timer.delta_time == 0.0


def test_deltas_add_up_to_total():
    stamps = [0.0, 0.125, 0.5, 1.0, 1.5]
    timer = GameTimer(clock=_fake_clock(stamps))
    total = sum(timer.update() for _ in stamps[1:])
    assert total == (stamps[-1] - stamps[0]) * 1000.0


def test_real_clock_is_non_negative():
    timer = GameTimer()
    time.sleep(0.01)
    assert timer.update() >= 0.0