"""Game configuration with validated parameters and difficulty presets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from frogcross.colors import Colors


@dataclass(frozen=True)
class ParameterLimits:
    """Inclusive bounds for every adjustable game parameter."""

    min_map_width: int = 20
    max_map_width: int = 80
    min_map_height: int = 8
    max_map_height: int = 20
    min_game_speed: int = 50
    max_game_speed: int = 500
    min_vehicle_speed: int = 1
    max_vehicle_speed: int = 5
    min_vehicle_count: int = 1
    max_vehicle_count: int = 8
    min_obstacle_count: int = 0
    max_obstacle_count: int = 15
    min_player_lives: int = 1
    max_player_lives: int = 9
    min_score_multiplier: float = 0.5
    max_score_multiplier: float = 5.0
    min_vehicle_gap: int = 3
    max_vehicle_gap: int = 15


class _Ranged:
    """A parameter that only accepts values inside its configured limits."""

    def __init__(self, mirror: Optional[str] = None) -> None:
        self.mirror = mirror

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self.attr = "_" + name

    def __get__(self, obj: Any, owner: Optional[type] = None) -> Any:
        if obj is None:
            return self
        return getattr(obj, self.attr)

    def __set__(self, obj: Any, value: Any) -> None:
        limits = type(obj).limits
        low = getattr(limits, f"min_{self.name}")
        high = getattr(limits, f"max_{self.name}")
        if not low <= value <= high:
            raise ValueError(
                f"{self.name} must be between {_num(low)} and {_num(high)}, got {value!r}"
            )
        setattr(obj, self.attr, value)
        if self.mirror is not None:
            setattr(obj, "_" + self.mirror, value)


def _num(value: float) -> str:
    return f"{value:g}"


PRESETS: dict[str, dict[str, Any]] = {
    "CASUAL": {
        "map_width": 35,
        "map_height": 8,
        "game_speed": 250,
        "vehicle_speed": 1,
        "vehicle_count": 2,
        "obstacle_count": 2,
        "player_lives": 5,
        "score_multiplier": 0.8,
        "vehicle_gap": 12,
        "power_ups_enabled": True,
        "colors_enabled": True,
    },
    "CLASSIC": {
        "map_width": 40,
        "map_height": 10,
        "game_speed": 150,
        "vehicle_speed": 1,
        "vehicle_count": 3,
        "obstacle_count": 4,
        "player_lives": 3,
        "score_multiplier": 1.0,
        "vehicle_gap": 8,
        "power_ups_enabled": True,
        "colors_enabled": True,
    },
    "CHALLENGE": {
        "map_width": 50,
        "map_height": 12,
        "game_speed": 100,
        "vehicle_speed": 2,
        "vehicle_count": 4,
        "obstacle_count": 8,
        "player_lives": 2,
        "score_multiplier": 2.0,
        "vehicle_gap": 5,
        "power_ups_enabled": False,
        "colors_enabled": True,
    },
    "EXTREME": {
        "map_width": 60,
        "map_height": 15,
        "game_speed": 70,
        "vehicle_speed": 3,
        "vehicle_count": 6,
        "obstacle_count": 12,
        "player_lives": 1,
        "score_multiplier": 3.0,
        "vehicle_gap": 4,
        "power_ups_enabled": False,
        "colors_enabled": True,
    },
}


class GameConfig:
    """Adjustable game parameters; out-of-range values raise ValueError."""

    limits = ParameterLimits()

    map_width = _Ranged()
    map_height = _Ranged()
    game_speed = _Ranged()
    vehicle_speed = _Ranged()
    vehicle_count = _Ranged()
    obstacle_count = _Ranged()
    player_lives = _Ranged(mirror="player_lives_max")
    score_multiplier = _Ranged()
    vehicle_gap = _Ranged()

    def __init__(self) -> None:
        self.map_width = 40
        self.map_height = 10
        self.game_speed = 150
        self.vehicle_speed = 1
        self.vehicle_count = 3
        self.obstacle_count = 4
        self.player_lives = 3
        self.score_multiplier = 1.0
        self.vehicle_gap = 8
        self.power_ups_enabled = True
        self.colors_enabled = True

    @property
    def player_lives_max(self) -> int:
        """Lives the player started with."""
        return self._player_lives_max

    def apply_preset(self, name: str) -> None:
        """Apply one of the named presets; unknown names leave the config as is."""
        for attribute, value in PRESETS.get(name, {}).items():
            setattr(self, attribute, value)

    def difficulty_name(self) -> str:
        """Classify the current settings as a preset name or CUSTOM."""
        speed, vehicles, count = self.game_speed, self.vehicle_speed, self.vehicle_count
        if speed >= 200 and vehicles <= 1 and count <= 2:
            return "CASUAL"
        if speed >= 150 and vehicles <= 2 and count <= 4:
            return "CLASSIC"
        if speed <= 100 and vehicles >= 2 and count >= 4:
            return "CHALLENGE"
        if speed <= 80 and vehicles >= 3 and count >= 5:
            return "EXTREME"
        return "CUSTOM"

    def describe(self, colors: Colors) -> str:
        """Formatted summary of the current configuration."""
        c = colors
        label, value = c.YELLOW, c.WHITE
        enabled = {True: "Enabled", False: "Disabled"}
        lines = [
            f"{c.BRIGHT_CYAN}\n========== CURRENT GAME CONFIGURATION =========={c.RESET}",
            f"{label}Map Size: {value}{self.map_width} x {self.map_height}",
            f"{label}Game Speed: {value}{self.game_speed} ms (lower = faster)",
            f"{label}Vehicle Speed: {value}{self.vehicle_speed}x",
            f"{label}Vehicles per Lane: {value}{self.vehicle_count}",
            f"{label}Total Obstacles: {value}{self.obstacle_count}",
            f"{label}Player Lives: {value}{self.player_lives}",
            f"{label}Score Multiplier: {value}{_num(self.score_multiplier)}x",
            f"{label}Vehicle Gap: {value}{self.vehicle_gap} units",
            f"{label}Power-ups: {value}{enabled[bool(self.power_ups_enabled)]}",
            f"{label}Colors: {value}{enabled[bool(self.colors_enabled)]}",
            f"{c.BRIGHT_CYAN}================================================={c.RESET}",
        ]
        return "\n".join(lines) + "\n"

    def parameter_guide(self, colors: Colors) -> str:
        """Formatted guide to the allowed and recommended parameter ranges."""
        c = colors
        lim = self.limits
        label, value = c.YELLOW, c.WHITE

        def span(low: float, high: float) -> str:
            return f"{_num(low)}-{_num(high)}"

        lines = [
            f"{c.BRIGHT_CYAN}\n============ PARAMETER ADJUSTMENT GUIDE ============{c.RESET}",
            f"{label}Map Width: {value}{span(lim.min_map_width, lim.max_map_width)}"
            " (recommended: 30-50 for balanced gameplay)",
            f"{label}Map Height: {value}{span(lim.min_map_height, lim.max_map_height)}"
            " (recommended: 8-12 for manageable difficulty)",
            f"{label}Game Speed: {value}{span(lim.min_game_speed, lim.max_game_speed)}"
            " ms (lower = faster, 100-200 recommended)",
            f"{label}Vehicle Speed: {value}{span(lim.min_vehicle_speed, lim.max_vehicle_speed)}"
            "x (1-2 for beginners, 3+ for experts)",
            f"{label}Vehicles per Lane: {value}{span(lim.min_vehicle_count, lim.max_vehicle_count)}"
            " (2-4 creates good challenge)",
            f"{label}Obstacles: {value}{span(lim.min_obstacle_count, lim.max_obstacle_count)}"
            " (3-6 adds strategic complexity)",
            f"{label}Player Lives: {value}{span(lim.min_player_lives, lim.max_player_lives)}"
            " (3-5 allows learning from mistakes)",
            f"{label}Score Multiplier: {value}"
            f"{span(lim.min_score_multiplier, lim.max_score_multiplier)}"
            "x (higher rewards skilled play)",
            f"{label}Vehicle Gap: {value}{span(lim.min_vehicle_gap, lim.max_vehicle_gap)}"
            " units (6-10 for comfortable spacing)",
            f"{c.BRIGHT_CYAN}===================================================={c.RESET}",
        ]
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return (
            f"GameConfig(map={self.map_width}x{self.map_height}, speed={self.game_speed}, "
            f"difficulty={self.difficulty_name()})"
        )