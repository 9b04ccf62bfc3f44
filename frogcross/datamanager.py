"""Storage of users, their game history and the shared leaderboard."""

from __future__ import annotations

import dataclasses
import time
from pathlib import Path
from typing import Callable, Iterable, Optional, TypeVar, Union

from frogcross.colors import Colors
from frogcross.records import GameRecord, LeaderboardEntry, UserProfile

LEADERBOARD_SIZE = 20
SHOWN_ENTRIES = 10

T = TypeVar("T")


class DuplicateUserError(ValueError):
    """Raised when registering a username that is already taken."""


class UnknownUserError(LookupError):
    """Raised when logging in with a username that is not registered."""


def _read_records(path: Path, parse: Callable[[str], T]) -> list[T]:
    try:
        with path.open(encoding="utf-8") as handle:
            lines = [line.rstrip("\n") for line in handle]
    except FileNotFoundError:
        return []
    records = []
    for line in lines:
        if not line:
            continue
        try:
            records.append(parse(line))
        except ValueError:
            continue
    return records


def _average(total: int, count: int) -> int:
    return int(total / count)


class DataManager:
    """Loads and saves player data in a directory of line-based files."""

    def __init__(
        self,
        colors: Optional[Colors] = None,
        data_folder: Union[str, Path] = "gamedata",
    ) -> None:
        self.colors = colors or Colors()
        self.data_folder = Path(data_folder)
        self.users_file = self.data_folder / "users.dat"
        self.leaderboard_file = self.data_folder / "leaderboard.dat"
        self.current_user_file = self.data_folder / "current_user.dat"
        self.current_user: Optional[UserProfile] = None
        self.all_users: list[UserProfile] = []
        self.leaderboard: list[LeaderboardEntry] = []
        self.user_game_history: list[GameRecord] = []

    # --- storage -----------------------------------------------------------

    def _ensure_data_directory(self) -> None:
        self.data_folder.mkdir(parents=True, exist_ok=True)

    def _write_lines(self, path: Path, lines: Iterable[str]) -> None:
        self._ensure_data_directory()
        with path.open("w", encoding="utf-8") as handle:
            for line in lines:
                handle.write(line + "\n")

    def _history_file(self, username: str) -> Path:
        return self.data_folder / f"{username}_history.dat"

    def _sort_leaderboard(self) -> None:
        self.leaderboard.sort(key=lambda entry: entry.score, reverse=True)

    def _save_users(self) -> None:
        self._write_lines(self.users_file, (u.serialize() for u in self.all_users))

    def _save_leaderboard(self) -> None:
        self._write_lines(self.leaderboard_file, (e.serialize() for e in self.leaderboard))

    def _save_user_game_history(self) -> None:
        if self.current_user is None:
            return
        self._write_lines(
            self._history_file(self.current_user.username),
            (r.serialize() for r in self.user_game_history),
        )

    def _find_user(self, username: str) -> Optional[UserProfile]:
        return next((u for u in self.all_users if u.username == username), None)

    # --- public API --------------------------------------------------------

    def initialize(self) -> None:
        """Create the data directory, load all data and restore the last login."""
        self._ensure_data_directory()
        self.all_users = _read_records(self.users_file, UserProfile.deserialize)
        self.leaderboard = _read_records(self.leaderboard_file, LeaderboardEntry.deserialize)
        self._sort_leaderboard()
        self.load_current_user()

    def register_user(self, username: str, email: str) -> UserProfile:
        """Create and store a new user; raise DuplicateUserError if the name is taken."""
        if self._find_user(username) is not None:
            raise DuplicateUserError(f"username already exists: {username!r}")
        user = UserProfile(username, email)
        self.all_users.append(user)
        self._save_users()
        return user

    def login_user(self, username: str) -> UserProfile:
        """Make a registered user current; raise UnknownUserError if not found."""
        user = self._find_user(username)
        if user is None:
            raise UnknownUserError(f"user not found: {username!r}")
        self.current_user = dataclasses.replace(user)
        self.save_current_user()
        self.user_game_history = _read_records(
            self._history_file(username), GameRecord.deserialize
        )
        return self.current_user

    def save_current_user(self) -> None:
        """Remember the logged-in user for the next start."""
        username = self.current_user.username if self.current_user else ""
        self._write_lines(self.current_user_file, [username])

    def load_current_user(self) -> None:
        """Log in again as the user remembered from the last session, if any."""
        try:
            with self.current_user_file.open(encoding="utf-8") as handle:
                first = handle.readline()
        except FileNotFoundError:
            return
        if not first:
            return
        try:
            self.login_user(first.rstrip("\n"))
        except UnknownUserError:
            pass

    def record_game_result(
        self,
        score: int,
        lives_used: int,
        duration: float,
        difficulty: str,
        power_ups_collected: int,
    ) -> None:
        """Add a finished game to the user's totals, history and the leaderboard."""
        if not self.has_logged_in_user():
            return
        user = self.current_user
        user.total_games_played += 1
        user.total_score += score
        user.total_play_time += duration
        user.best_score = max(user.best_score, score)

        self.all_users = [
            dataclasses.replace(user) if u.username == user.username else u
            for u in self.all_users
        ]
        self.user_game_history.append(
            GameRecord(score, lives_used, duration, difficulty, power_ups_collected)
        )
        self.leaderboard.append(LeaderboardEntry(user.username, score, difficulty))
        self._sort_leaderboard()
        del self.leaderboard[LEADERBOARD_SIZE:]

        self._save_users()
        self._save_user_game_history()
        self._save_leaderboard()

    def user_profile_text(self) -> str:
        """Formatted profile of the logged-in user."""
        c = self.colors
        if not self.has_logged_in_user():
            return f"{c.RED}No user logged in!{c.RESET}\n"
        user = self.current_user
        label, value = c.YELLOW, c.WHITE
        created = time.strftime("%Y-%m-%d", time.localtime(user.created_date))
        if user.total_games_played > 0:
            average = _average(user.total_score, user.total_games_played)
        else:
            average = 0
        lines = [
            f"{c.BRIGHT_CYAN}\n========== USER PROFILE =========={c.RESET}",
            f"{label}Username: {value}{user.username}",
            f"{label}Email: {value}{user.email}",
            f"{label}Member Since: {value}{created}",
            f"{label}Games Played: {value}{user.total_games_played}",
            f"{label}Total Score: {value}{user.total_score}",
            f"{label}Best Score: {value}{user.best_score}",
            f"{label}Total Play Time: {value}{int(user.total_play_time / 60)} minutes",
            f"{label}Average Score: {value}{average}",
            f"{c.BRIGHT_CYAN}==================================={c.RESET}",
        ]
        return "\n".join(lines) + "\n"

    def leaderboard_text(self) -> str:
        """Formatted table of the top scores."""
        c = self.colors
        lines = [
            f"{c.BRIGHT_CYAN}\n=============== LEADERBOARD ==============={c.RESET}",
            f"{c.YELLOW}{'Rank':<6}{'Player':<16}{'Score':<10}{'Difficulty':<14}"
            f"{'Date':<12}{c.RESET}",
            f"{c.BRIGHT_BLUE}{'-' * 62}{c.RESET}",
        ]
        rank_colors = {1: c.BRIGHT_YELLOW, 2: c.BRIGHT_WHITE, 3: c.YELLOW}
        for rank, entry in enumerate(self.leaderboard[:SHOWN_ENTRIES], start=1):
            date = time.strftime("%m/%d", time.localtime(entry.achieved_date))
            color = rank_colors.get(rank, c.WHITE)
            lines.append(
                f"{color}{rank:<6}{entry.username:<16}{entry.score:<10}"
                f"{entry.difficulty:<14}{date:<12}{c.RESET}"
            )
        lines.append(f"{c.BRIGHT_CYAN}{'=' * 62}{c.RESET}")
        if not self.leaderboard:
            lines.append(
                f"{c.YELLOW}No scores recorded yet. Be the first to make it to the "
                f"leaderboard!{c.RESET}"
            )
        elif len(self.leaderboard) > SHOWN_ENTRIES:
            lines.append(
                f"{c.CYAN}Showing top 10 scores. Total recorded scores: "
                f"{len(self.leaderboard)}{c.RESET}"
            )
        return "\n".join(lines) + "\n"

    def game_history_text(self) -> str:
        """Formatted table of the user's most recent games."""
        c = self.colors
        history = self.user_game_history
        if not history:
            return f"{c.YELLOW}No game history available.{c.RESET}\n"
        lines = [
            f"{c.BRIGHT_CYAN}\n=============== GAME HISTORY ==============={c.RESET}",
            f"{c.YELLOW}{'Date & Time':<18}{'Score':<8}{'Lives':<8}{'Duration':<12}"
            f"{'Difficulty':<14}{c.RESET}",
            f"{c.BRIGHT_BLUE}{'-' * 60}{c.RESET}",
        ]
        for record in history[-SHOWN_ENTRIES:]:
            when = time.strftime("%m/%d %H:%M", time.localtime(record.play_date))
            duration = f"{int(record.play_duration)}s"
            lines.append(
                f"{c.WHITE}{when:<18}{record.final_score:<8}{record.lives_used:<8}"
                f"{duration:<12}{record.difficulty:<14}{c.RESET}"
            )
        lines.append(f"{c.BRIGHT_CYAN}{'=' * 60}{c.RESET}")
        if len(history) > SHOWN_ENTRIES:
            lines.append(
                f"{c.CYAN}Showing last 10 games. Total games played: {len(history)}{c.RESET}"
            )
        average = sum(r.final_score for r in history) / len(history)
        lines.append(f"{c.YELLOW}Average Score: {c.WHITE}{average:.1f}{c.RESET}")
        return "\n".join(lines) + "\n"

    def has_logged_in_user(self) -> bool:
        """Whether a named user is logged in."""
        return self.current_user is not None and bool(self.current_user.username)

    def logout_user(self) -> None:
        """Forget the current user and their remembered login."""
        self.current_user = None
        self.user_game_history = []
        self.current_user_file.unlink(missing_ok=True)

    def user_stats_summary(self) -> str:
        """One-line summary of the logged-in user, or an empty string."""
        if not self.has_logged_in_user():
            return ""
        user = self.current_user
        return (
            f"Player: {user.username} | Best: {user.best_score} | "
            f"Games: {user.total_games_played}"
        )