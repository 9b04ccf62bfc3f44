"""Persistent records: user profiles, game results and leaderboard entries.

Each record is stored as one line of ``|``-separated fields.
"""

from __future__ import annotations

import re
import time
from dataclasses import dataclass, field

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_FLOAT_RE = re.compile(
    r"\s*([+-]?(?:inf(?:inity)?|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))",
    re.IGNORECASE,
)
_INT32 = (-(2**31), 2**31 - 1)
_INT64 = (-(2**63), 2**63 - 1)


def _now() -> int:
    return int(time.time())


def _fields(line: str, count: int) -> list[str]:
    """The first ``count`` fields of a line; extra fields are ignored.

    A trailing separator does not open a new, empty field.
    """
    parts = line.split("|")
    if line.endswith("|"):
        parts.pop()
    if not line or len(parts) < count:
        raise ValueError(f"expected {count} fields in {line!r}")
    return parts[:count]


def _parse_int(text: str, bounds: tuple[int, int] = _INT32) -> int:
    """Leading integer of ``text``; trailing characters are ignored."""
    match = _INT_RE.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    value = int(match.group(1))
    low, high = bounds
    if not low <= value <= high:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _parse_float(text: str) -> float:
    """Leading floating point number of ``text``; trailing characters are ignored."""
    match = _FLOAT_RE.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return float(match.group(1))


def _num(value: float) -> str:
    return f"{value:g}"


@dataclass
class UserProfile:
    """A registered player and their accumulated totals."""

    username: str = ""
    email: str = ""
    created_date: int = field(default_factory=_now)
    total_games_played: int = 0
    total_score: int = 0
    best_score: int = 0
    total_play_time: float = 0.0
    achievement_count: int = 0

    def serialize(self) -> str:
        """One-line representation of the profile."""
        return "|".join(
            [
                self.username,
                self.email,
                str(self.created_date),
                str(self.total_games_played),
                str(self.total_score),
                str(self.best_score),
                _num(self.total_play_time),
                str(self.achievement_count),
            ]
        )

    @classmethod
    def deserialize(cls, line: str) -> "UserProfile":
        """Parse a line written by :meth:`serialize`; raise ValueError if malformed."""
        name, mail, created, games, total, best, play_time, achievements = _fields(line, 8)
        return cls(
            username=name,
            email=mail,
            created_date=_parse_int(created, _INT64),
            total_games_played=_parse_int(games),
            total_score=_parse_int(total),
            best_score=_parse_int(best),
            total_play_time=_parse_float(play_time),
            achievement_count=_parse_int(achievements),
        )


@dataclass
class GameRecord:
    """The outcome of one finished game."""

    final_score: int = 0
    lives_used: int = 0
    play_duration: float = 0.0
    difficulty: str = ""
    power_ups_collected: int = 0
    play_date: int = field(default_factory=_now)

    def serialize(self) -> str:
        """One-line representation of the record."""
        return "|".join(
            [
                str(self.play_date),
                str(self.final_score),
                str(self.lives_used),
                _num(self.play_duration),
                self.difficulty,
                str(self.power_ups_collected),
            ]
        )

    @classmethod
    def deserialize(cls, line: str) -> "GameRecord":
        """Parse a line written by :meth:`serialize`; raise ValueError if malformed."""
        date, score, lives, duration, difficulty, power_ups = _fields(line, 6)
        return cls(
            play_date=_parse_int(date, _INT64),
            final_score=_parse_int(score),
            lives_used=_parse_int(lives),
            play_duration=_parse_float(duration),
            difficulty=difficulty,
            power_ups_collected=_parse_int(power_ups),
        )


@dataclass
class LeaderboardEntry:
    """One score on the leaderboard."""

    username: str = ""
    score: int = 0
    difficulty: str = ""
    achieved_date: int = field(default_factory=_now)

    def serialize(self) -> str:
        """One-line representation of the entry."""
        return "|".join(
            [self.username, str(self.score), str(self.achieved_date), self.difficulty]
        )

    @classmethod
    def deserialize(cls, line: str) -> "LeaderboardEntry":
        """Parse a line written by :meth:`serialize`; raise ValueError if malformed."""
        name, score, date, difficulty = _fields(line, 4)
        return cls(
            username=name,
            score=_parse_int(score),
            achieved_date=_parse_int(date, _INT64),
            difficulty=difficulty,
        )