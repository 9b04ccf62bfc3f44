"""Short-lived text effects drawn over the playing field."""

from __future__ import annotations

from dataclasses import dataclass, field

from frogcross.colors import Colors


@dataclass
class Effect:
    """A coloured piece of text shown at a map position for some frames."""

    x: int
    y: int
    text: str
    color: str
    duration: int


@dataclass
class EffectSystem:
    """Collection of active effects that expire frame by frame."""

    colors: Colors = field(default_factory=Colors)
    active_effects: list[Effect] = field(default_factory=list)

    def add_effect(self, x: int, y: int, text: str, color: str = "", duration: int = 3) -> None:
        """Show text at (x, y) for the given number of frames."""
        self.active_effects.append(Effect(x, y, text, color or self.colors.WHITE, duration))

    def update(self) -> None:
        """Advance one frame and drop expired effects."""
        for effect in self.active_effects:
            effect.duration -= 1
        self.active_effects = [e for e in self.active_effects if e.duration > 0]

    def render(self, map_width: int) -> str:
        """Escape sequences that place every active effect on screen."""
        reset = self.colors.RESET
        return "".join(
            f"\033[{effect.y + 3};{effect.x + 1}H{effect.color}{effect.text}{reset}"
            for effect in self.active_effects
        )

    def clear(self) -> None:
        """Remove all effects."""
        self.active_effects.clear()

    def has_active_effects(self) -> bool:
        """Whether any effect is still showing."""
        return bool(self.active_effects)