# mindrun

*Run with Mind* is a small maze chase game that runs in your terminal. You have
to get from the top-left corner of a 20×20 maze to the exit `E` without being
caught by the enemies `X`. Along the way you can pick up powerups `*`, which are
worth 10 points each.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Playing

```
mindrun
```

Options:

| Option              | Meaning                                                  |
|---------------------|----------------------------------------------------------|
| `--seed N`          | Seed the maze generator, so the same mazes come up again |
| `--save-file PATH`  | File used by the `save` and `load` commands (default `savegame.txt`) |

Controls:

| Key             | Action                                    |
|-----------------|-------------------------------------------|
| `W` `A` `S` `D` | Move up, left, down, right                |
| `M`             | Open the menu, then type `save` or `load` |

Keys are read one at a time without pressing Enter when standard input is a
terminal. The screen is cleared before each turn when output goes to a
terminal.

Each enemy takes one step toward you after every key press that is a move.
If an enemy lands on your square, the game is over. Level 1 has a sparse maze,
three enemies and two powerups. Reaching the exit takes you to Level 2, which
has a denser maze, walls across the middle, five enemies and three powerups.
Finish Level 2 to win. A corridor along the top row and down the right-hand
column is always kept open, so the exit can always be reached.

At the end of a game your final score and the total number of moves are shown.
You are then asked `Play Again? (Y/N)`; an answer starting with `Y` or `y`
starts a new game. The session also ends when input runs out.

Saving writes the current state to the save file in plain text; loading reads
it back. If the file cannot be written or read, a message is shown and play
continues.

## Using it as a library

The game logic does not depend on the terminal, so you can drive it yourself:

```python
import random
from mindrun.entity import Position
from mindrun.game import Game, calculate_enemy_move, is_valid_move

game = Game()
game.init_level(1, random.Random(42))
print(game.render(color=False))

target = game.player.pos.step(0, 1)
if is_valid_move(target, game.grid):
    game.player.pos = target
    game.move_counter += 1
game.move_enemies()
if game.player_caught():
    print("caught!")

text = game.dumps()          # the same text format the save file uses
restored = Game.loads(text)
```

- `mindrun.entity` holds `Position` (row `x`, column `y`, with `step(dx, dy)`),
  `in_bounds`, and the `Entity`, `Player` and `Enemy` classes with their
  `symbol()` characters.
- `mindrun.game` holds `Game` with `init_level`, `carve_guaranteed_path`,
  `collect_powerup`, `move_enemies`, `player_caught`, `render`, `dumps`,
  `loads`, `save` and `load`, plus `is_valid_move`, `calculate_enemy_move` and
  `run_game`, which plays one session with the key reader, line reader, output
  stream, random generator and save path you pass it, and returns the final
  `Game`.
- `mindrun.terminal` holds `get_input_char`, `clear_screen` and `pause`.

`Game.save(path)` and `Game.load(path)` write and read the save format on disk.
They raise `SaveError` when the file cannot be used; `Game.loads` raises it for
malformed text.

## What it does not do

There is no high-score table or other storage beyond the single save file, and
the maze size (20×20) and the two levels are fixed.