"""Random helpers for placing things on the map."""

from __future__ import annotations

import random
from typing import Optional


def rand_between(low: int, high: int, rng: Optional[random.Random] = None) -> int:
    """Random integer between low and high, both inclusive."""
    if high < low:
        raise ValueError(f"empty range: {low}..{high}")
    return (rng or random).randint(low, high)


def generate_vehicle_positions(
    lane_width: int,
    vehicle_count: int,
    min_gap: int,
    rng: Optional[random.Random] = None,
) -> list[int]:
    """X positions for the vehicles of one lane, spaced at least min_gap apart.

    When the lane is too narrow the number of vehicles is reduced.
    """
    if vehicle_count <= 0:
        return []

    available = lane_width - (vehicle_count - 1) * min_gap
    if available < vehicle_count:
        vehicle_count = max(1, available // (min_gap + 1))
        available = lane_width - (vehicle_count - 1) * min_gap

    positions = [rand_between(0, max(0, available - vehicle_count), rng)]
    for _ in range(1, vehicle_count):
        step = 1 + rand_between(min_gap, min_gap + 2, rng)
        positions.append(min(positions[-1] + step, lane_width - 1))
    return positions