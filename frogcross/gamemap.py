"""The playing field: lanes, terrain, power-ups, score and lives."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass
from typing import Any, Optional

from frogcross.colors import Colors, clear_screen
from frogcross.config import GameConfig
from frogcross.effects import EffectSystem
from frogcross.powerup import PowerUp, PowerUpType
from frogcross.stats import GameStats
from frogcross.utils import rand_between

_RESET = "\033[0m"


@dataclass(frozen=True)
class Cell:
    """One map character with its colour."""

    char: str = "."
    color: str = ""

    def render(self) -> str:
        """The character wrapped in its colour code."""
        return f"{self.color}{self.char}{_RESET}"


class GameMap:
    """Grid of cells holding terrain and whatever was placed this frame.

    ``base`` is the terrain the grid is reset to after every frame;
    ``grid`` is what gets drawn.
    """

    def __init__(
        self,
        config: GameConfig,
        colors: Optional[Colors] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config
        self.colors = colors or Colors()
        self._rng = rng if rng is not None else random.Random()
        self.width: int = config.map_width
        self.height: int = config.map_height
        self.lives: int = config.player_lives
        self.lives_max: int = config.player_lives_max
        self.score = 0
        self.stats: Optional[GameStats] = None
        self.effects: Optional[EffectSystem] = None
        self.power_ups: list[PowerUp] = []
        self._safe_rows = self._road_pattern()
        self._initialize()

    def _road_pattern(self) -> list[bool]:
        h = self.height
        safe = [i in (0, h - 1, h // 2) for i in range(h)]
        if sum(not s for s in safe) < 2:
            for i in range(1, h - 1, 2):
                safe[i] = False
        return safe

    def _initialize(self) -> None:
        c = self.colors
        plain = Cell(".", c.WHITE)
        ground = Cell("=", c.BRIGHT_YELLOW)
        self.base = [
            [ground if safe else plain] * self.width for safe in self._safe_rows
        ]
        self.grid = self._fresh_grid()

        if self.config.power_ups_enabled:
            self._generate_power_ups()

        indicator = Cell("C", c.BRIGHT_CYAN)
        for y, safe in enumerate(self._safe_rows):
            if not safe:
                self.grid[y][0 if y % 2 == 1 else self.width - 1] = indicator

        for x in range(0, self.width, max(6, self.width // 8)):
            self.grid[0][x] = Cell("*", c.BRIGHT_YELLOW)
            if self.height > 1:
                self.grid[self.height - 1][x] = Cell("~", c.BRIGHT_BLUE)

    def _fresh_grid(self) -> list[list[Cell]]:
        return [row[:] for row in self.base]

    def _generate_power_ups(self) -> None:
        for _ in range(max(1, self.width // 15)):
            kind = PowerUpType(self._rng.randrange(4))
            x = rand_between(1, self.width - 2, self._rng)
            y = rand_between(1, self.height - 2, self._rng)
            if self._safe_rows[y]:
                self.power_ups.append(PowerUp(kind, x, y, self.colors))

    def _update_power_ups(self) -> None:
        self.power_ups = [p for p in self.power_ups if p.update()]
        for power_up in self.power_ups:
            if power_up.active:
                self.set_xy(power_up.x, power_up.y, power_up.symbol(), power_up.color())

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= y < self.height and 0 <= x < self.width

    def render(self, data_manager: Any = None) -> str:
        """The full frame: header, status line, field and footer."""
        c = self.colors
        out: list[str] = [f"{c.BRIGHT_CYAN}===== ENHANCED FROG CROSSING GAME ====={c.RESET}\n"]

        if data_manager is not None and data_manager.has_logged_in_user():
            out.append(f"{c.BRIGHT_GREEN}{data_manager.user_stats_summary()}{c.RESET}\n")

        out.append(f"{c.YELLOW}Score: {c.WHITE}{self.score}{c.YELLOW} | Lives: {c.RESET}")
        out.append(f"{c.BRIGHT_GREEN}[*]{c.RESET}" * max(0, self.lives))
        out.append(f"{c.RED}[ ]{c.RESET}" * max(0, self.lives_max - self.lives))
        if self.stats is not None:
            out.append(f"{c.YELLOW} | Combo: {c.WHITE}{self.stats.current_combo}")
            out.append(f"{c.YELLOW} | Efficiency: {c.WHITE}{int(self.stats.efficiency_score())}%")
            out.append(f"{c.YELLOW} | Power-ups: {c.WHITE}{self.stats.power_ups_collected}")
        out.append("\n")

        out.append(
            f"{c.CYAN}Controls: Arrow Keys | Goal: Reach the {c.BRIGHT_YELLOW}stars"
            f"{c.CYAN}!{c.RESET}\n"
        )

        border = f"{c.BRIGHT_BLUE}={c.RESET}" * self.width + "\n"
        out.append(border)
        coloured = self.config.colors_enabled
        for row in self.grid:
            if coloured:
                out.append("".join(cell.render() for cell in row))
            else:
                out.append("".join(cell.char for cell in row))
            out.append("\n")
        out.append(border)

        if self.effects is not None and self.effects.has_active_effects():
            out.append(f"{c.BRIGHT_MAGENTA}*** SPECIAL EFFECTS ACTIVE ***{c.RESET}\n")
        if self.config.power_ups_enabled and self.power_ups:
            out.append(f"{c.BRIGHT_CYAN}Active Power-ups: {len(self.power_ups)}{c.RESET}\n")
        return "".join(out)

    def draw(self, data_manager: Any = None) -> None:
        """Clear the screen, print the frame and prepare the next one."""
        clear_screen()
        sys.stdout.write(self.render(data_manager))
        sys.stdout.flush()
        self.grid = self._fresh_grid()
        self._update_power_ups()

    def set_xy(self, x: int, y: int, char: str, color: str = "") -> bool:
        """Place a character; return False when a frog and a vehicle meet."""
        if not self._in_bounds(x, y):
            return True
        c = self.colors
        if not color:
            color = {
                "F": c.BRIGHT_GREEN,
                "C": c.BRIGHT_CYAN,
                "M": c.BRIGHT_RED,
                "O": c.YELLOW,
            }.get(char, c.WHITE)

        cell = Cell(char, color)
        if char == "O":
            self.base[y][x] = cell

        here = self.grid[y][x].char
        if char == "F" and here in ("C", "M"):
            return False
        if char in ("C", "M") and here == "F":
            return False

        self.grid[y][x] = cell
        return True

    def check_power_up_collision(self, x: int, y: int) -> Optional[PowerUp]:
        """The active power-up at (x, y), if any."""
        return next(
            (p for p in self.power_ups if p.active and p.x == x and p.y == y),
            None,
        )

    def collect_power_up(self, power_up: PowerUp) -> None:
        """Apply a power-up's effect and record it."""
        if self.stats is not None:
            self.stats.record_power_up(power_up.kind)
        if self.effects is not None:
            self.effects.add_effect(
                power_up.x, power_up.y, power_up.description(), power_up.color(), 7
            )
        if power_up.kind == PowerUpType.EXTRA_LIFE:
            self.lives += 1
        elif power_up.kind == PowerUpType.DOUBLE_SCORE:
            self.score += 50
        power_up.update()

    def add_score(self, points: int, config: Optional[GameConfig] = None) -> None:
        """Add points scaled by the configured multiplier."""
        multiplier = config.score_multiplier if config is not None else 1.0
        actual = int(points * multiplier)
        self.score += actual
        if self.stats is not None:
            self.stats.record_move()
            if self.effects is not None and actual > 1:
                self.effects.add_effect(
                    self.width // 2, self.height // 2, f"+{actual}", self.colors.BRIGHT_GREEN, 3
                )

    def lose_life(self) -> None:
        """Take one life away, if any are left."""
        if self.lives <= 0:
            return
        self.lives -= 1
        if self.stats is not None:
            self.stats.record_collision()
        if self.effects is not None:
            self.effects.add_effect(
                self.width // 2, self.height // 2, "COLLISION!", self.colors.BRIGHT_RED, 5
            )

    def char_at(self, x: int, y: int) -> str:
        """Character currently at (x, y); '.' outside the map."""
        if self._in_bounds(x, y):
            return self.grid[y][x].char
        return "."

    def has_obstacle(self, x: int, y: int) -> bool:
        """Whether an obstacle stands at (x, y)."""
        return self._in_bounds(x, y) and self.base[y][x].char == "O"

    def is_score_zone(self, x: int, y: int) -> bool:
        """Whether moving onto (x, y) earns double points."""
        return self._in_bounds(x, y) and y <= 2 and self.base[y][x].char == "."

    def is_road(self, y: int) -> bool:
        """Whether row y is a road lane."""
        return 0 <= y < self.height and not self._safe_rows[y]

    def reset_frog(self) -> None:
        """Remove the frog from the grid, restoring the terrain beneath it."""
        for y, row in enumerate(self.grid):
            for x, cell in enumerate(row):
                if cell.char == "F":
                    row[x] = self.base[y][x]