"""Collectable power-ups with a limited lifetime."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from frogcross.colors import Colors

POWER_UP_LIFETIME = 300


class PowerUpType(enum.IntEnum):
    """Kinds of power-up."""

    SHIELD = 0
    SPEED_BOOST = 1
    DOUBLE_SCORE = 2
    EXTRA_LIFE = 3


_SYMBOLS = {
    PowerUpType.SHIELD: "S",
    PowerUpType.SPEED_BOOST: "B",
    PowerUpType.DOUBLE_SCORE: "D",
    PowerUpType.EXTRA_LIFE: "L",
}

_COLOR_FIELDS = {
    PowerUpType.SHIELD: "BRIGHT_YELLOW",
    PowerUpType.SPEED_BOOST: "BRIGHT_MAGENTA",
    PowerUpType.DOUBLE_SCORE: "BRIGHT_CYAN",
    PowerUpType.EXTRA_LIFE: "BRIGHT_GREEN",
}

_DESCRIPTIONS = {
    PowerUpType.SHIELD: "Shield - Temporary Protection",
    PowerUpType.SPEED_BOOST: "Speed Boost - Enhanced Movement",
    PowerUpType.DOUBLE_SCORE: "Double Score - Bonus Points",
    PowerUpType.EXTRA_LIFE: "Extra Life - Additional Chance",
}


@dataclass
class PowerUp:
    """A power-up lying on the map until its lifetime runs out."""

    kind: PowerUpType
    x: int
    y: int
    colors: Colors = field(default_factory=Colors)
    duration: int = POWER_UP_LIFETIME
    active: bool = True

    def update(self) -> bool:
        """Advance one tick and return whether the power-up is still active."""
        if self.active:
            self.duration -= 1
            if self.duration <= 0:
                self.active = False
        return self.active

    def symbol(self) -> str:
        """Map character for this kind."""
        return _SYMBOLS.get(self.kind, "?")

    def color(self) -> str:
        """Colour code for this kind."""
        name = _COLOR_FIELDS.get(self.kind, "WHITE")
        return getattr(self.colors, name)

    def description(self) -> str:
        """Human-readable description of the effect."""
        return _DESCRIPTIONS.get(self.kind, "Unknown Power-up")