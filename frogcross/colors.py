"""ANSI colour codes and small console helpers for keyboard and screen."""

from __future__ import annotations

import enum
import os
import select
import subprocess
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional, TextIO, Union

try:
    import termios
    import tty
except ImportError:  # pragma: no cover - not available on Windows
    termios = None
    tty = None

try:
    import msvcrt
except ImportError:  # pragma: no cover - only available on Windows
    msvcrt = None


@dataclass(frozen=True)
class Colors:
    """ANSI escape sequences used for coloured terminal output."""

    RESET: str = "\033[0m"
    RED: str = "\033[31m"
    GREEN: str = "\033[32m"
    YELLOW: str = "\033[33m"
    BLUE: str = "\033[34m"
    MAGENTA: str = "\033[35m"
    CYAN: str = "\033[36m"
    WHITE: str = "\033[37m"
    BRIGHT_RED: str = "\033[91m"
    BRIGHT_GREEN: str = "\033[92m"
    BRIGHT_YELLOW: str = "\033[93m"
    BRIGHT_BLUE: str = "\033[94m"
    BRIGHT_MAGENTA: str = "\033[95m"
    BRIGHT_CYAN: str = "\033[96m"
    BRIGHT_WHITE: str = "\033[97m"
    BG_BLACK: str = "\033[40m"
    BG_RED: str = "\033[41m"
    BG_GREEN: str = "\033[42m"
    BG_YELLOW: str = "\033[43m"
    BG_BLUE: str = "\033[44m"
    BG_MAGENTA: str = "\033[45m"
    BG_CYAN: str = "\033[46m"
    BG_WHITE: str = "\033[47m"


class Key(enum.IntEnum):
    """Arrow keys, valued by their console scan codes."""

    UP = 72
    DOWN = 80
    LEFT = 75
    RIGHT = 77


_ANSI_ARROWS = {"A": Key.UP, "B": Key.DOWN, "C": Key.RIGHT, "D": Key.LEFT}
_ESCAPE_TIMEOUT = 0.05


def clear_screen() -> None:
    """Clear the terminal and move the cursor to the top left corner."""
    if sys.platform == "win32":
        subprocess.run("cls", shell=True, check=False)
    else:
        sys.stdout.write("\033[2J\033[H")
        sys.stdout.flush()


def _terminal_fd(stream: TextIO) -> Optional[int]:
    try:
        fd = stream.fileno()
    except (AttributeError, OSError, ValueError):
        return None
    return fd if os.isatty(fd) else None


@contextmanager
def _cbreak(stream: TextIO) -> Iterator[None]:
    fd = _terminal_fd(stream)
    if fd is None or termios is None:
        yield
        return
    saved = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def _input_ready(stream: TextIO, timeout: float) -> Optional[bool]:
    """Whether input is waiting; None when the stream cannot be polled."""
    try:
        fd = stream.fileno()
    except (AttributeError, OSError, ValueError):
        return None
    try:
        ready, _, _ = select.select([fd], [], [], timeout)
    except (OSError, ValueError):
        return None
    return bool(ready)


def _read_char(stream: TextIO) -> str:
    fd = _terminal_fd(stream)
    if fd is not None:
        return os.read(fd, 1).decode("utf-8", errors="replace")
    return stream.read(1)


def _uses_console_api(stream: TextIO) -> bool:
    return sys.platform == "win32" and msvcrt is not None and _terminal_fd(stream) is not None


def key_pressed() -> bool:
    """Return True when a key press is waiting to be read."""
    stream = sys.stdin
    if _uses_console_api(stream):
        return bool(msvcrt.kbhit())
    with _cbreak(stream):
        return _input_ready(stream, 0) is True


def read_key() -> Union[Key, str, None]:
    """Read one key press.

    Arrow keys come back as a :class:`Key`, other keys as their character,
    unrecognised escape sequences as None and end of input as an empty string.
    """
    stream = sys.stdin
    if _uses_console_api(stream):
        char = msvcrt.getwch()
        if char in ("\x00", "\xe0"):
            code = ord(msvcrt.getwch())
            try:
                return Key(code)
            except ValueError:
                return None
        return char

    with _cbreak(stream):
        char = _read_char(stream)
        if char != "\x1b":
            return char
        if _input_ready(stream, _ESCAPE_TIMEOUT) is False:
            return char
        introducer = _read_char(stream)
        if introducer not in ("[", "O"):
            return None
        return _ANSI_ARROWS.get(_read_char(stream))


def wait_for_key() -> None:
    """Block until a key is pressed and discard it."""
    read_key()