"""A configurable frog-crossing arcade game for the terminal, with profiles and a leaderboard."""

__version__ = "1.0.0"

__all__ = [
    "colors",
    "config",
    "timer",
    "utils",
    "powerup",
    "stats",
    "effects",
    "gamemap",
    "records",
    "datamanager",
    "entities",
    "user_menu",
    "config_menu",
    "game",
]