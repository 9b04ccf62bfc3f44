"""Interactive menu for logging in, registering and browsing player data."""

from __future__ import annotations

import sys
from typing import Callable, Optional, TextIO

from frogcross.colors import Colors, clear_screen, wait_for_key
from frogcross.datamanager import DataManager, DuplicateUserError, UnknownUserError


class UserManagementMenu:
    """Menu shown before a game to pick a player or play as guest."""

    def __init__(
        self,
        data_manager: DataManager,
        colors: Optional[Colors] = None,
        *,
        read_line: Callable[[], str] = input,
        output: Optional[TextIO] = None,
        wait_key: Callable[[], None] = wait_for_key,
        clear: Callable[[], None] = clear_screen,
    ) -> None:
        self.data_manager = data_manager
        self.colors = colors or Colors()
        self._read_line = read_line
        self._output = output
        self._wait_key = wait_key
        self._clear = clear
        self._start_game = False

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

    def _prompt(self, prompt: str) -> str:
        c = self.colors
        self._write(f"{c.CYAN}{prompt}: {c.RESET}")
        return self._read_line()

    def show_user_menu(self) -> bool:
        """Run the menu; True to start a game, False when the player quits."""
        self._start_game = False
        try:
            while not self._start_game:
                if not self._menu_round():
                    return False
        except EOFError:
            return False
        return True

    def _menu_round(self) -> bool:
        c = self.colors
        dm = self.data_manager
        self._clear()
        self._say(f"{c.BRIGHT_CYAN}\n============ USER MANAGEMENT ============{c.RESET}")
        logged_in = dm.has_logged_in_user()
        if logged_in:
            self._say(f"{c.GREEN}Welcome back, {dm.current_user.username}!{c.RESET}")
            options = [
                "1. View Profile",
                "2. View Game History",
                "3. View Leaderboard",
                "4. Logout",
                "5. Start Game",
            ]
        else:
            self._say(f"{c.YELLOW}Please log in or register to continue{c.RESET}")
            options = [
                "1. Login",
                "2. Register New User",
                "3. View Leaderboard (Guest)",
                "4. Play as Guest",
            ]
        for option in options + ["0. Exit Game"]:
            self._say(f"{c.WHITE}{option}")
        self._say(f"{c.BRIGHT_CYAN}========================================={c.RESET}")

        max_choice = 5 if logged_in else 4
        self._write(f"{c.CYAN}Enter your choice (0-{max_choice}): {c.RESET}")
        line = self._read_line()
        try:
            choice = int(line.strip())
        except ValueError:
            self._say(f"{c.RED}Invalid input! Please enter a number.{c.RESET}")
            self._pause()
            return True

        if not 0 <= choice <= max_choice:
            self._say(
                f"{c.RED}Invalid choice! Please select between 0 and {max_choice}.{c.RESET}"
            )
            self._pause()
            return True

        if choice == 0:
            self._say(f"{c.YELLOW}Thank you for playing!{c.RESET}")
            return False

        if logged_in:
            self._handle_logged_in_user(choice)
        else:
            self._handle_guest_user(choice)
        return True

    def _handle_logged_in_user(self, choice: int) -> None:
        c = self.colors
        dm = self.data_manager
        if choice == 1:
            self._write(dm.user_profile_text())
            self._pause(leading_newline=True)
        elif choice == 2:
            self._write(dm.game_history_text())
            self._pause(leading_newline=True)
        elif choice == 3:
            self._write(dm.leaderboard_text())
            self._pause(leading_newline=True)
        elif choice == 4:
            dm.logout_user()
            self._say(f"{c.GREEN}Successfully logged out!{c.RESET}")
            self._pause()
        elif choice == 5:
            self._start_game = True

    def _handle_guest_user(self, choice: int) -> None:
        if choice == 1:
            self._perform_login()
        elif choice == 2:
            self._perform_registration()
        elif choice == 3:
            self._write(self.data_manager.leaderboard_text())
            self._pause(leading_newline=True)
        elif choice == 4:
            self._start_game = True

    def _perform_login(self) -> None:
        c = self.colors
        self._say(f"{c.BRIGHT_CYAN}\n============ USER LOGIN ============{c.RESET}")
        username = self._prompt("Enter username")
        try:
            self.data_manager.login_user(username)
        except UnknownUserError:
            self._say(
                f"{c.RED}User not found! Please check your username or register.{c.RESET}"
            )
        else:
            self._say(f"{c.GREEN}Login successful! Welcome back, {username}!{c.RESET}")
        self._pause()

    def _perform_registration(self) -> None:
        c = self.colors
        self._say(f"{c.BRIGHT_CYAN}\n========== USER REGISTRATION =========={c.RESET}")
        username = self._prompt("Enter desired username")
        email = self._prompt("Enter email address")
        try:
            self.data_manager.register_user(username, email)
        except DuplicateUserError:
            self._say(
                f"{c.RED}Username already exists! Please choose a different username.{c.RESET}"
            )
        else:
            self._say(f"{c.GREEN}Registration successful!{c.RESET}")
            self.data_manager.login_user(username)
            self._say(f"{c.GREEN}You are now logged in as {username}!{c.RESET}")
        self._pause()