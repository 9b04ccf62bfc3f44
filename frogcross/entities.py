"""Things that live on the map: the frog, vehicles and obstacles."""

from __future__ import annotations

import abc
from typing import Callable, Optional, Union

from frogcross.colors import Colors, Key, key_pressed, read_key
from frogcross.config import GameConfig
from frogcross.gamemap import GameMap

KeyInput = Union[Key, str]
InputReader = Callable[[], Optional[KeyInput]]

INPUT_COOLDOWN_MS = 100.0
CAR_MOVE_INTERVAL_MS = 200.0
MOTO_MOVE_INTERVAL_MS = 300.0
MOTO_SPEED_FACTOR = 0.7


def _console_input() -> Optional[KeyInput]:
    """Next key from the console, or None when nothing was pressed."""
    if not key_pressed():
        return None
    key = read_key()
    return "\x1b" if key is None else key


class GameObject(abc.ABC):
    """Something drawn on the map at a position, advanced once per frame."""

    def __init__(
        self,
        x: int,
        y: int,
        char: str,
        game_map: GameMap,
        config: Optional[GameConfig] = None,
        colors: Optional[Colors] = None,
        color: str = "",
    ) -> None:
        self.x = x
        self.y = y
        self.char = char
        self.map = game_map
        self.config = config
        self.colors = colors or Colors()
        self.color = color or self.colors.WHITE
        self.move_timer = 0.0
        self.place(x, y)

    @abc.abstractmethod
    def move(self, delta_time: float) -> bool:
        """Advance by delta_time milliseconds; return False on a collision."""

    def place(self, x: int, y: int) -> bool:
        """Draw this object at (x, y); return False if it hit something."""
        return self.map.set_xy(x, y, self.char, self.color)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self.x}, y={self.y})"


class Obstacle(GameObject):
    """A static block the frog cannot walk through."""

    def __init__(
        self,
        x: int,
        y: int,
        game_map: GameMap,
        config: Optional[GameConfig] = None,
        colors: Optional[Colors] = None,
    ) -> None:
        colors = colors or Colors()
        super().__init__(x, y, "O", game_map, config, colors, colors.YELLOW)

    def move(self, delta_time: float) -> bool:
        """Obstacles never move and never collide."""
        return True


class Vehicle(GameObject):
    """A vehicle driving along its lane and wrapping around at the edges."""

    move_interval = CAR_MOVE_INTERVAL_MS

    def __init__(
        self,
        x: int,
        y: int,
        char: str,
        direction: int,
        game_map: GameMap,
        config: Optional[GameConfig] = None,
        colors: Optional[Colors] = None,
        color: str = "",
    ) -> None:
        super().__init__(x, y, char, game_map, config, colors, color)
        self.direction = direction
        self.speed = 1.0

    def check_path_collision(self, start_x: int, end_x: int, y: int) -> bool:
        """Whether the frog stands between start_x (inclusive) and end_x (exclusive)."""
        if start_x == end_x:
            return False
        step = 1 if end_x > start_x else -1
        return any(self.map.char_at(x, y) == "F" for x in range(start_x, end_x, step))

    def _drive(self, delta_time: float, distance: int) -> bool:
        self.move_timer += delta_time
        if self.move_timer >= self.move_interval:
            self.move_timer = 0.0
            width = self.map.width
            d = self.direction
            new_x = self.x + d * distance
            if new_x < 0:
                new_x = width - 1
            if new_x >= width:
                new_x = 0

            if (self.x < new_x and d > 0) or (self.x > new_x and d < 0):
                hit = self.check_path_collision(self.x, new_x, self.y)
            elif d > 0:
                hit = self.check_path_collision(
                    self.x, width, self.y
                ) or self.check_path_collision(0, new_x, self.y)
            else:
                hit = self.check_path_collision(
                    self.x, -1, self.y
                ) or self.check_path_collision(width - 1, new_x, self.y)

            if hit:
                return False
            self.x = new_x
        return self.place(self.x, self.y)


class Car(Vehicle):
    """A car: moves every 200 ms by its full configured speed."""

    move_interval = CAR_MOVE_INTERVAL_MS

    def __init__(
        self,
        x: int,
        y: int,
        direction: int,
        game_map: GameMap,
        config: Optional[GameConfig] = None,
        colors: Optional[Colors] = None,
        *,
        char: str = "C",
    ) -> None:
        colors = colors or Colors()
        super().__init__(x, y, char, direction, game_map, config, colors, colors.BRIGHT_CYAN)
        self.speed = float(config.vehicle_speed) if config is not None else 1.0

    def move(self, delta_time: float) -> bool:
        """Drive along the lane; return False when the frog is hit."""
        return self._drive(delta_time, int(self.speed))


class Moto(Vehicle):
    """A motorbike: slower than a car and moving every 300 ms."""

    move_interval = MOTO_MOVE_INTERVAL_MS

    def __init__(
        self,
        x: int,
        y: int,
        direction: int,
        game_map: GameMap,
        config: Optional[GameConfig] = None,
        colors: Optional[Colors] = None,
        *,
        char: str = "M",
    ) -> None:
        colors = colors or Colors()
        super().__init__(x, y, char, direction, game_map, config, colors, colors.BRIGHT_RED)
        base = config.vehicle_speed if config is not None else 1
        self.speed = base * MOTO_SPEED_FACTOR

    def move(self, delta_time: float) -> bool:
        """Drive along the lane, at least one cell a step; False when the frog is hit."""
        return self._drive(delta_time, max(1, int(self.speed)))


class Frog(GameObject):
    """The player, steered with the arrow keys."""

    def __init__(
        self,
        x: int,
        y: int,
        game_map: GameMap,
        config: Optional[GameConfig] = None,
        colors: Optional[Colors] = None,
        *,
        char: str = "F",
        read_input: Optional[InputReader] = None,
    ) -> None:
        colors = colors or Colors()
        super().__init__(x, y, char, game_map, config, colors, colors.BRIGHT_GREEN)
        self.start_x = x
        self.start_y = y
        self.input_cooldown = False
        self.input_timer = 0.0
        self._read_input = read_input or _console_input

    def move(self, delta_time: float) -> bool:
        """Handle a pending key press; return False when the frog was hit."""
        if self.input_cooldown:
            self.input_timer += delta_time
            if self.input_timer >= INPUT_COOLDOWN_MS:
                self.input_cooldown = False
                self.input_timer = 0.0

        if not self.input_cooldown:
            key = self._read_input()
            if key is not None:
                self._handle_key(key)

        return self.place(self.x, self.y)

    def _handle_key(self, key: KeyInput) -> None:
        old_x, old_y = self.x, self.y
        if isinstance(key, Key):
            if key is Key.UP and self.y > 0:
                self.y -= 1
            elif key is Key.DOWN and self.y < self.map.height - 1:
                self.y += 1
            elif key is Key.LEFT and self.x > 0:
                self.x -= 1
            elif key is Key.RIGHT and self.x < self.map.width - 1:
                self.x += 1
            self.input_cooldown = True

        if self.map.has_obstacle(self.x, self.y):
            self.x, self.y = old_x, old_y

        power_up = self.map.check_power_up_collision(self.x, self.y)
        if power_up is not None:
            self.map.collect_power_up(power_up)

        if (self.x, self.y) != (old_x, old_y):
            gain = 3 if self.y < old_y else 1
            if self.map.is_score_zone(self.x, self.y):
                gain *= 2
            self.map.add_score(gain, self.config)

    def reset_position(self) -> None:
        """Send the frog back to where it started."""
        self.x = self.start_x
        self.y = self.start_y

    def has_reached_top(self) -> bool:
        """Whether the frog has reached the goal row."""
        return self.y == 0