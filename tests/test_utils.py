import random

import pytest

from frogcross.utils import generate_vehicle_positions, rand_between


@pytest.mark.parametrize("seed", range(20))
def test_rand_between_in_bounds(seed):
    value = rand_between(3, 9, random.Random(seed))
    assert 3 <= value <= 9


def test_rand_between_single_value():
    assert rand_between(5, 5, random.Random(0)) == 5


def test_rand_between_empty_range():
    with pytest.raises(ValueError):
        rand_between(4, 2)


def test_rand_between_is_reproducible():
    first = [rand_between(0, 100, random.Random(42)) for _ in range(3)]
    second = [rand_between(0, 100, random.Random(42)) for _ in range(3)]
    assert first == second


def test_zero_vehicles():
    assert generate_vehicle_positions(40, 0, 8, random.Random(0)) == []


@pytest.mark.parametrize("seed", range(30))
def test_positions_respect_spacing(seed):
    width, count, gap = 40, 3, 8
    positions = generate_vehicle_positions(width, count, gap, random.Random(seed))
    assert len(positions) == count
    assert all(0 <= p < width for p in positions)
    available = width - (count - 1) * gap
    assert positions[0] <= available - count
    for prev, nxt in zip(positions, positions[1:]):
        if nxt != width - 1:
            assert prev + 1 + gap <= nxt <= prev + 3 + gap


@pytest.mark.parametrize("seed", range(10))
def test_narrow_lane_reduces_vehicle_count(seed):
    width, count, gap = 20, 5, 5
    positions = generate_vehicle_positions(width, count, gap, random.Random(seed))
    assert 1 <= len(positions) < count
    assert all(0 <= p < width for p in positions)


@pytest.mark.parametrize("seed", range(10))
def test_positions_clamped_to_lane(seed):
    width = 12
    positions = generate_vehicle_positions(width, 2, 10, random.Random(seed))
    assert max(positions) <= width - 1
    assert positions == sorted(positions)