"""Interactive menus for choosing presets and tuning game parameters."""

from __future__ import annotations

import sys
from typing import Callable, Optional, TextIO

from frogcross.colors import Colors, clear_screen, wait_for_key
from frogcross.config import GameConfig

_PRESET_CHOICES = {
    1: ("CASUAL", "GREEN"),
    2: ("CLASSIC", "BLUE"),
    3: ("CHALLENGE", "YELLOW"),
    4: ("EXTREME", "RED"),
}


def _num(value: float) -> str:
    return f"{value:g}"


class ConfigurationMenu:
    """Menu that edits a :class:`GameConfig` in place before a game starts."""

    def __init__(
        self,
        config: GameConfig,
        colors: Optional[Colors] = None,
        *,
        read_line: Callable[[], str] = input,
        output: Optional[TextIO] = None,
        wait_key: Callable[[], None] = wait_for_key,
        clear: Callable[[], None] = clear_screen,
    ) -> None:
        self.config = config
        self.colors = colors or Colors()
        self._read_line = read_line
        self._output = output
        self._wait_key = wait_key
        self._clear = clear

    @property
    def output(self) -> TextIO:
        return self._output if self._output is not None else sys.stdout

    def _write(self, text: str) -> None:
        self.output.write(text)
        self.output.flush()

    def _say(self, text: str) -> None:
        self._write(text + "\n")

    def _pause(self, leading_newline: bool = False) -> None:
        c = self.colors
        prefix = "\n" if leading_newline else ""
        self._write(f"{c.YELLOW}{prefix}Press any key to continue...{c.RESET}")
        self._wait_key()

    def _ask_number(self, low: float, high: float, prompt: str, parse: Callable[[str], float]):
        c = self.colors
        while True:
            self._write(f"{c.CYAN}{prompt} ({_num(low)}-{_num(high)}): {c.RESET}")
            text = self._read_line().strip()
            try:
                value = parse(text)
            except ValueError:
                value = None
            if value is not None and low <= value <= high:
                return value
            self._say(
                f"{c.RED}Invalid input! Please enter a number between "
                f"{_num(low)} and {_num(high)}.{c.RESET}"
            )

    def _int_input(self, low: int, high: int, prompt: str) -> int:
        return self._ask_number(low, high, prompt, int)

    def _float_input(self, low: float, high: float, prompt: str) -> float:
        return self._ask_number(low, high, prompt, float)

    def _report(self, ok: bool, success: str, failure: str) -> None:
        c = self.colors
        if ok:
            self._say(f"{c.GREEN}{success}{c.RESET}")
        else:
            self._say(f"{c.RED}{failure}{c.RESET}")
        self._pause()

    def _assign(self, **values: float) -> bool:
        try:
            for name, value in values.items():
                setattr(self.config, name, value)
        except ValueError:
            return False
        return True

    def show_main_config_menu(self) -> None:
        """Run the main configuration menu until the player starts the game."""
        c = self.colors
        while True:
            self._clear()
            self._say(
                f"{c.BRIGHT_CYAN}\n================ ENHANCED GAME CONFIGURATION MENU "
                f"================{c.RESET}"
            )
            self._say(
                f"{c.YELLOW}Choose an option to customize your enhanced gaming experience:"
                f"{c.RESET}"
            )
            for option in (
                "1. Quick Setup (Use preset configurations)",
                "2. Custom Setup (Adjust individual parameters)",
                "3. View Current Settings",
                "4. View Parameter Guide",
                "5. Toggle Color Mode",
                "6. Reset to Default Settings",
                "7. Start Game with Current Settings",
            ):
                self._say(f"{c.WHITE}{option}")
            self._say(f"{c.BRIGHT_CYAN}{'=' * 68}{c.RESET}")

            choice = self._int_input(1, 7, "Enter your choice")
            if choice == 1:
                self.show_preset_menu()
            elif choice == 2:
                self.show_custom_config_menu()
            elif choice == 3:
                self._write(self.config.describe(c))
                self._pause(leading_newline=True)
            elif choice == 4:
                self._write(self.config.parameter_guide(c))
                self._pause(leading_newline=True)
            elif choice == 5:
                self.config.colors_enabled = not self.config.colors_enabled
                state = "enabled" if self.config.colors_enabled else "disabled"
                self._say(f"{c.GREEN}\nColor mode {state}!{c.RESET}")
                self._pause()
            elif choice == 6:
                vars(self.config).update(vars(GameConfig()))
                self._say(f"{c.GREEN}\nSettings reset to default values!{c.RESET}")
                self._pause()
            else:
                return

    def show_preset_menu(self) -> None:
        """Let the player pick one of the difficulty presets."""
        c = self.colors
        self._clear()
        self._say(f"{c.BRIGHT_CYAN}\n============== PRESET CONFIGURATIONS =============={c.RESET}")
        self._say(f"{c.YELLOW}Choose a preset that matches your preferred play style:{c.RESET}")
        self._say(f"{c.GREEN}1. CASUAL - Relaxed gaming for stress relief{c.RESET}")
        self._say(f"{c.BLUE}2. CLASSIC - Traditional frog crossing experience{c.RESET}")
        self._say(f"{c.YELLOW}3. CHALLENGE - Test your reflexes and strategy{c.RESET}")
        self._say(f"{c.RED}4. EXTREME - Only for the most dedicated players{c.RESET}")
        self._say(f"{c.WHITE}5. Return to main menu{c.RESET}")
        self._say(f"{c.BRIGHT_CYAN}{'=' * 52}{c.RESET}")

        choice = self._int_input(1, 5, "Select preset")
        if choice not in _PRESET_CHOICES:
            return
        name, color_name = _PRESET_CHOICES[choice]
        self.config.apply_preset(name)
        self._say(f"{getattr(c, color_name)}\n{name} preset applied!{c.RESET}")
        self._pause()

    def show_custom_config_menu(self) -> None:
        """Let the player adjust individual parameters until they return."""
        c = self.colors
        while True:
            self._clear()
            self._say(
                f"{c.BRIGHT_CYAN}\n============= CUSTOM CONFIGURATION ============={c.RESET}"
            )
            self._say(f"{c.YELLOW}Fine-tune individual game parameters:{c.RESET}")
            for option in (
                "1. Map Dimensions (Width x Height)",
                "2. Game Speed (Update frequency)",
                "3. Vehicle Settings (Speed and count)",
                "4. Obstacle Count",
                "5. Player Lives",
                "6. Scoring Settings",
                "7. Toggle Power-ups",
                "8. Return to main menu",
            ):
                self._say(f"{c.WHITE}{option}")
            self._say(f"{c.BRIGHT_CYAN}{'=' * 49}{c.RESET}")

            choice = self._int_input(1, 8, "Select category to adjust")
            if choice == 1:
                self._adjust_map_dimensions()
            elif choice == 2:
                self._adjust_game_speed()
            elif choice == 3:
                self._adjust_vehicle_settings()
            elif choice == 4:
                self._adjust_obstacle_count()
            elif choice == 5:
                self._adjust_player_lives()
            elif choice == 6:
                self._adjust_scoring_settings()
            elif choice == 7:
                self.config.power_ups_enabled = not self.config.power_ups_enabled
                state = "enabled" if self.config.power_ups_enabled else "disabled"
                self._say(f"{c.GREEN}\nPower-ups {state}!{c.RESET}")
                self._pause()
            else:
                return

    def _heading(self, title: str) -> None:
        c = self.colors
        self._say(f"{c.CYAN}\n--- {title} Configuration ---{c.RESET}")

    def _current(self, label: str, value: str) -> None:
        c = self.colors
        self._say(f"{c.YELLOW}{label}: {c.WHITE}{value}{c.RESET}")

    def _adjust_map_dimensions(self) -> None:
        cfg = self.config
        self._heading("Map Dimensions")
        self._current("Current size", f"{cfg.map_width} x {cfg.map_height}")
        width = self._int_input(20, 80, "Enter map width")
        height = self._int_input(8, 20, "Enter map height")
        self._report(
            self._assign(map_width=width, map_height=height),
            "Map dimensions updated successfully!",
            "Error updating map dimensions.",
        )

    def _adjust_game_speed(self) -> None:
        self._heading("Game Speed")
        self._current("Current speed", f"{self.config.game_speed} ms")
        speed = self._int_input(50, 500, "Enter game speed (milliseconds)")
        self._report(
            self._assign(game_speed=speed),
            "Game speed updated successfully!",
            "Error updating game speed.",
        )

    def _adjust_vehicle_settings(self) -> None:
        cfg = self.config
        self._heading("Vehicle Settings")
        self._current("Current vehicle speed", f"{cfg.vehicle_speed}x")
        self._current("Current vehicles per lane", str(cfg.vehicle_count))
        self._current("Current vehicle gap", f"{cfg.vehicle_gap} units")
        speed = self._int_input(1, 5, "Enter vehicle speed multiplier")
        count = self._int_input(1, 8, "Enter vehicles per lane")
        gap = self._int_input(3, 15, "Enter vehicle gap")
        self._report(
            self._assign(vehicle_speed=speed, vehicle_count=count, vehicle_gap=gap),
            "Vehicle settings updated successfully!",
            "Error updating vehicle settings.",
        )

    def _adjust_obstacle_count(self) -> None:
        self._heading("Obstacle Count")
        self._current("Current obstacles", str(self.config.obstacle_count))
        count = self._int_input(0, 15, "Enter obstacle count")
        self._report(
            self._assign(obstacle_count=count),
            "Obstacle count updated successfully!",
            "Error updating obstacle count.",
        )

    def _adjust_player_lives(self) -> None:
        self._heading("Player Lives")
        self._current("Current lives", str(self.config.player_lives))
        lives = self._int_input(1, 9, "Enter player lives")
        self._report(
            self._assign(player_lives=lives),
            "Player lives updated successfully!",
            "Error updating player lives.",
        )

    def _adjust_scoring_settings(self) -> None:
        self._heading("Scoring Settings")
        self._current("Current score multiplier", f"{_num(self.config.score_multiplier)}x")
        multiplier = self._float_input(0.5, 5.0, "Enter score multiplier")
        self._report(
            self._assign(score_multiplier=multiplier),
            "Score multiplier updated successfully!",
            "Error updating score multiplier.",
        )