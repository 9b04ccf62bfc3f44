"""A game session: player selection, configuration, world creation and the main loop."""

from __future__ import annotations

import argparse
import contextlib
import random
import sys
import time
from pathlib import Path
from typing import Callable, Optional, Sequence, TextIO, Union

from frogcross.colors import Colors, clear_screen, wait_for_key
from frogcross.config import GameConfig
from frogcross.config_menu import ConfigurationMenu
from frogcross.datamanager import DataManager
from frogcross.effects import EffectSystem
from frogcross.entities import Car, Frog, GameObject, InputReader, Moto, Obstacle
from frogcross.gamemap import GameMap
from frogcross.stats import GameStats
from frogcross.timer import GameTimer
from frogcross.user_menu import UserManagementMenu
from frogcross.utils import generate_vehicle_positions, rand_between

LIFE_LOST_PAUSE = 0.5
EXIT_COUNTDOWN = 5
VEHICLE_STEP = 2


class GameManager:
    """Owns every subsystem and drives one game from the menus to the result."""

    def __init__(
        self,
        *,
        data_folder: Union[str, Path] = "gamedata",
        rng: Optional[random.Random] = None,
        output: Optional[TextIO] = None,
        read_line: Callable[[], str] = input,
        wait_key: Callable[[], None] = wait_for_key,
        clear: Callable[[], None] = clear_screen,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.perf_counter,
        frog_input: Optional[InputReader] = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._output = output
        self._wait_key = wait_key
        self._clear = clear
        self._sleep = sleep
        self._frog_input = frog_input

        self.colors = Colors()
        self.timer = GameTimer(clock)
        self.config = GameConfig()
        self.stats = GameStats(self.colors)
        self.effects = EffectSystem(self.colors)

        self.data_manager = DataManager(self.colors, data_folder)
        self.data_manager.initialize()

        menu_io = dict(read_line=read_line, output=output, wait_key=wait_key, clear=clear)
        self.user_menu = UserManagementMenu(self.data_manager, self.colors, **menu_io)
        self.config_menu = ConfigurationMenu(self.config, self.colors, **menu_io)

        self.game_map: Optional[GameMap] = None
        self.frog: Optional[Frog] = None
        self.game_objects: list[GameObject] = []

    @property
    def output(self) -> TextIO:
        return self._output if self._output is not None else sys.stdout

    def _write(self, text: str) -> None:
        self.output.write(text)
        self.output.flush()

    def _say(self, text: str) -> None:
        self._write(text + "\n")

    # --- flow ----------------------------------------------------------------

    def run(self) -> int:
        """Play one session; return the process exit status."""
        if not self.user_menu.show_user_menu():
            return 0
        self._show_welcome_screen()
        self.config_menu.show_main_config_menu()
        self._show_game_ready_screen()
        self.create_game_world()
        self._run_game_loop()
        return 0

    def _show_welcome_screen(self) -> None:
        c = self.colors
        dm = self.data_manager
        self._clear()
        rule = f"{c.BRIGHT_CYAN}{'=' * 53}{c.RESET}"
        self._say(f"{c.BRIGHT_CYAN}\n{'=' * 53}{c.RESET}")
        self._say(f"{c.BRIGHT_YELLOW}         WELCOME TO ENHANCED FROG CROSSING!         {c.RESET}")
        self._say(rule)
        self._say(f"{c.GREEN}A fully customizable and colorful frog crossing experience!{c.RESET}")
        self._say(f"{c.CYAN}New features: User profiles, Statistics tracking, Leaderboards!{c.RESET}")
        if dm.has_logged_in_user():
            self._say(f"{c.BRIGHT_GREEN}Playing as: {dm.current_user.username}{c.RESET}")
        else:
            self._say(f"{c.YELLOW}Playing as: Guest{c.RESET}")
        self._say(rule)
        self._say(f"{c.YELLOW}\nPress any key to enter enhanced configuration menu...{c.RESET}")
        self._wait_key()

    def _show_game_ready_screen(self) -> None:
        c = self.colors
        dm = self.data_manager
        self._clear()
        self._say(f"{c.BRIGHT_GREEN}\n========== READY TO START ENHANCED GAME! =========={c.RESET}")
        self._write(self.config.describe(c))
        if dm.has_logged_in_user():
            self._say(
                f"{c.BRIGHT_GREEN}\nPlaying as registered user: {dm.current_user.username}{c.RESET}"
            )
            self._say(f"{c.CYAN}Your game progress will be saved automatically!{c.RESET}")
        else:
            self._say(f"{c.YELLOW}\nPlaying as guest - progress will not be saved{c.RESET}")
            self._say(f"{c.CYAN}Register an account to track your achievements!{c.RESET}")
        self._say(f"{c.YELLOW}\nPress any key to begin your enhanced adventure...{c.RESET}")
        self._wait_key()
        self._clear()

    # --- world ---------------------------------------------------------------

    def create_game_world(self) -> None:
        """Build the map and populate it with the frog, obstacles and vehicles."""
        self.game_objects = []
        self.game_map = GameMap(self.config, self.colors, self._rng)
        self.game_map.stats = self.stats
        self.game_map.effects = self.effects
        self._generate_frog()
        self._generate_obstacles()
        self._generate_vehicles()

    def _generate_frog(self) -> None:
        cfg = self.config
        extra = {"read_input": self._frog_input} if self._frog_input is not None else {}
        self.frog = Frog(
            cfg.map_width // 2, cfg.map_height - 1, self.game_map, cfg, self.colors, **extra
        )
        self.game_objects.append(self.frog)

    def _generate_obstacles(self) -> None:
        cfg = self.config
        for _ in range(cfg.obstacle_count):
            x = rand_between(0, cfg.map_width - 1, self._rng)
            y = rand_between(1, cfg.map_height - 2, self._rng)
            self.game_objects.append(Obstacle(x, y, self.game_map, cfg, self.colors))

    def _generate_vehicles(self) -> None:
        cfg = self.config
        height = cfg.map_height
        for row in range(1, height - 1):
            if not self.game_map.is_road(row):
                continue
            direction = VEHICLE_STEP if row % 2 == 1 else -VEHICLE_STEP
            vehicle_type = Moto if row % 2 == 1 else Car
            positions = generate_vehicle_positions(
                cfg.map_width, cfg.vehicle_count, cfg.vehicle_gap, self._rng
            )
            self.game_objects.extend(
                vehicle_type(x, row, direction, self.game_map, cfg, self.colors)
                for x in positions
            )

    # --- loop ----------------------------------------------------------------

    def _draw_frame(self) -> None:
        with contextlib.redirect_stdout(self.output):
            self.game_map.draw(self.data_manager)

    def _run_game_loop(self) -> None:
        cfg = self.config
        while True:
            delta = self.timer.update()
            self.stats.update_survival_time(delta)
            self.effects.update()
            self._draw_frame()

            if self.frog.has_reached_top():
                self._handle_level_complete()
                return

            for obj in self.game_objects:
                if obj.move(delta):
                    continue
                self.game_map.lose_life()
                if self.game_map.lives <= 0:
                    self._handle_game_over()
                    return
                self.frog.reset_position()
                self.effects.add_effect(
                    cfg.map_width // 2,
                    cfg.map_height // 2,
                    "Life Lost!",
                    self.colors.BRIGHT_RED,
                    5,
                )
                self._sleep(LIFE_LOST_PAUSE)

            self._sleep(cfg.game_speed / 1000.0)

    def _save_result(self) -> None:
        dm = self.data_manager
        if not dm.has_logged_in_user():
            return
        dm.record_game_result(
            self.game_map.score,
            self.config.player_lives - self.game_map.lives,
            self.stats.survival_time_seconds(),
            self.config.difficulty_name(),
            self.stats.power_ups_collected,
        )
        c = self.colors
        self._say(f"{c.BRIGHT_GREEN}\nGame result saved to your profile!{c.RESET}")

    def _handle_level_complete(self) -> None:
        c = self.colors
        self.stats.record_crossing()
        self._clear()
        self._say(f"{c.BRIGHT_GREEN}\n\n\n===== LEVEL COMPLETED! ====={c.RESET}")
        self._say(f"{c.YELLOW}Congratulations! You reached the stars!{c.RESET}")
        self._say(f"{c.CYAN}Your enhanced challenge has been conquered!{c.RESET}")
        self._write(self.stats.render())
        self._save_result()
        for remaining in range(EXIT_COUNTDOWN, 0, -1):
            self._write(f"\r{c.YELLOW}Game will exit in: {c.WHITE}{remaining} {c.RESET}")
            self._sleep(1.0)
        self._say(f"{c.BRIGHT_CYAN}\n\nThank you for playing the enhanced version!{c.RESET}")

    def _handle_game_over(self) -> None:
        c = self.colors
        self._clear()
        self._say(f"{c.BRIGHT_RED}\n\n\n===== GAME OVER ====={c.RESET}")
        self._say(f"{c.YELLOW}No more lives remaining!{c.RESET}")
        self._say(f"{c.CYAN}Your enhanced configuration provided quite a challenge!{c.RESET}")
        self._write(self.stats.render())
        self._save_result()
        self._say(f"{c.YELLOW}Press any key to exit...{c.RESET}")
        self._wait_key()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start an interactive game session."""
    parser = argparse.ArgumentParser(prog="frogcross", description="Frog crossing arcade game.")
    parser.add_argument(
        "--data-dir",
        default="gamedata",
        help="directory holding player profiles and the leaderboard",
    )
    args = parser.parse_args(argv)
    return GameManager(data_folder=args.data_dir).run()


if __name__ == "__main__":
    sys.exit(main())