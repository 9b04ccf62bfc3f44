"""Per-game statistics: moves, crossings, collisions, combos and timing."""

from __future__ import annotations

import time
from dataclasses import dataclass, field

from frogcross.colors import Colors
from frogcross.powerup import PowerUpType


@dataclass
class GameStats:
    """Counters collected while a game is being played.

    Times are kept in milliseconds, as delivered by the frame timer.
    """

    colors: Colors = field(default_factory=Colors)
    total_moves: int = 0
    successful_crossings: int = 0
    collisions: int = 0
    survival_time: float = 0.0
    max_combo: int = 0
    current_combo: int = 0
    power_ups_collected: int = 0
    perfect_crossings: int = 0
    best_time: float = 0.0
    collected_power_ups: list[PowerUpType] = field(default_factory=list)
    game_start_time: float = field(default_factory=time.time)

    def record_move(self) -> None:
        """Count one player move."""
        self.total_moves += 1

    def record_crossing(self) -> None:
        """Count a successful crossing and extend the combo."""
        self.successful_crossings += 1
        self.current_combo += 1
        self.max_combo = max(self.max_combo, self.current_combo)
        if self.collisions == 0:
            self.perfect_crossings += 1

    def record_collision(self) -> None:
        """Count a collision; it breaks the current combo."""
        self.collisions += 1
        self.current_combo = 0

    def update_survival_time(self, elapsed: float) -> None:
        """Add elapsed milliseconds to the survival time."""
        self.survival_time += elapsed
        self.best_time = max(self.best_time, self.survival_time)

    def record_power_up(self, kind: PowerUpType) -> None:
        """Count a collected power-up and remember its kind."""
        self.power_ups_collected += 1
        self.collected_power_ups.append(kind)

    def efficiency_score(self) -> float:
        """Crossings per move, as a percentage."""
        if self.total_moves == 0:
            return 0.0
        return self.successful_crossings / self.total_moves * 100.0

    def survival_time_seconds(self) -> float:
        """Survival time in seconds."""
        return self.survival_time / 1000.0

    def render(self) -> str:
        """Formatted statistics report."""
        c = self.colors
        label, value = c.YELLOW, c.WHITE
        lines = [
            f"{c.BRIGHT_CYAN}=== ENHANCED GAME STATISTICS ==={c.RESET}",
            f"{label}Total Moves: {value}{self.total_moves}",
            f"{label}Successful Crossings: {value}{self.successful_crossings}",
            f"{label}Perfect Crossings: {value}{self.perfect_crossings}",
            f"{label}Collisions: {value}{self.collisions}",
            f"{label}Survival Time: {value}{int(self.survival_time) // 1000}s",
            f"{label}Best Time: {value}{int(self.best_time) // 1000}s",
            f"{label}Max Combo: {value}{self.max_combo}",
            f"{label}Power-ups Collected: {value}{self.power_ups_collected}",
            f"{label}Efficiency: {value}{int(self.efficiency_score())}%",
            f"{c.BRIGHT_CYAN}================================={c.RESET}",
        ]
        return "\n".join(lines) + "\n"