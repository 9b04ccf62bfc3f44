# frogcross

Guide a frog from the bottom of a busy road map to the stars at the top,
right in your terminal. Cars and motorbikes sweep across the lanes, static
obstacles block your way, and power-ups appear on the safe strips.

## Installing

```
pip install .
```

The package has no dependencies beyond the standard library.

## Playing

```
frogcross
```

Player data is kept in a `gamedata` directory under the working directory.
Another location can be chosen with `--data-dir`:

```
frogcross --data-dir ~/.frogcross
```

The game starts with a user menu:

- **Login** or **Register New User** to keep a profile. Registered players
  get their results saved: games played, total and best score, play time and
  a personal game history.
- **View Profile**, **View Game History** and **Logout** are offered once
  logged in.
- **View Leaderboard** shows the top ten scores of all players.
- **Play as Guest** starts without saving anything.
- **Exit Game** quits.

After that the configuration menu lets you pick a preset (`CASUAL`,
`CLASSIC`, `CHALLENGE`, `EXTREME`), tune each parameter on its own, view the
current settings or a parameter guide, or reset to the defaults:

| Parameter          | Range     | Default |
|--------------------|-----------|---------|
| Map width          | 20–80     | 40      |
| Map height         | 8–20      | 10      |
| Game speed (ms)    | 50–500    | 150     |
| Vehicle speed      | 1–5       | 1       |
| Vehicles per lane  | 1–8       | 3       |
| Obstacles          | 0–15      | 4       |
| Player lives       | 1–9       | 3       |
| Score multiplier   | 0.5–5.0   | 1.0     |
| Vehicle gap        | 3–15      | 8       |

Power-ups and colour output can be switched on or off.

### Controls and scoring

Move the frog with the arrow keys; obstacles (`O`) cannot be walked through.
Moving up scores 3 points, any other move 1 point, doubled on the road rows
just below the goal, and scaled by the score multiplier. Being hit by a car
(`C`) or a motorbike (`M`) costs a life and sends the frog back to the start.
Reach the top row to win; losing the last life ends the game.

Power-ups on the safe strips: `L` gives an extra life, `D` adds 50 points.
`S` (shield) and `B` (speed boost) are only counted in your statistics and
have no effect on play.

### What it does not do

There is no key to pause or leave a running game: a game ends only when the
frog reaches the top or the last life is lost. There is one level per
session; after it the program exits.

## Saved data

Profiles, the leaderboard (the best 20 results) and per-player histories are
kept as plain text, one `|`-separated record per line, in the data directory.
The last player to log in is logged in again automatically on the next start.

## Using it from Python

```python
from frogcross.config import GameConfig
from frogcross.datamanager import DataManager

config = GameConfig()
config.apply_preset("CHALLENGE")
print(config.difficulty_name())      # CHALLENGE
config.map_width = 100               # raises ValueError: out of range

data = DataManager(data_folder="gamedata")
data.initialize()
data.register_user("alice", "alice@example.com")
data.login_user("alice")
data.record_game_result(120, 1, 42.0, config.difficulty_name(), 2)
print(data.leaderboard_text())
```

`frogcross.game.GameManager().run()` starts a full interactive session.

## Running the tests

```
pip install .[test]
pytest
```