"""Maze state, level generation, enemy movement and the play loop."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterator, TextIO

from mindrun.entity import Enemy, Player, Position, in_bounds
from mindrun.terminal import CONTINUE_PROMPT, clear_screen, get_input_char

ROWS = 20
COLS = 20
WALLS = frozenset("#@")
EXIT = "E"
EMPTY = " "
POWERUP = "*"
POWERUP_SCORE = 10
DEFAULT_SAVE_PATH = "savegame.txt"

RESET = "\x1b[0m"
RED = "\x1b[31m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
BLUE = "\x1b[34m"
MAGENTA = "\x1b[35m"
BG_WHITE = "\x1b[47m"
BG_GRAY = "\x1b[100m"

TITLE = "Run with Mind"
BANNER = "====================================="
CONTROLS = "Controls: Move with WASD. Press 'M' for menu (save/load)."

_DIRECTIONS = {
    "w": (-1, 0),
    "s": (1, 0),
    "a": (0, -1),
    "d": (0, 1),
}

Grid = list[list[str]]


class SaveError(Exception):
    """A saved game could not be written or read."""


def is_valid_move(pos: Position, grid: Grid) -> bool:
    """Tell whether ``pos`` is on the grid and not a wall."""
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    return in_bounds(pos, rows, cols) and grid[pos.x][pos.y] not in WALLS


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def calculate_enemy_move(enemy_pos: Position, player_pos: Position, grid: Grid) -> Position:
    """Choose one step for an enemy chasing the player.

    The enemy moves along the axis with the larger distance (rows on a
    tie); if that cell is blocked it tries a column step instead, and
    otherwise stays where it is.
    """
    dx = player_pos.x - enemy_pos.x
    dy = player_pos.y - enemy_pos.y

    if abs(dx) >= abs(dy):
        candidate = enemy_pos.step(_sign(dx), 0)
    else:
        candidate = enemy_pos.step(0, _sign(dy))

    if not is_valid_move(candidate, grid):
        candidate = enemy_pos.step(0, _sign(dy))
    if not is_valid_move(candidate, grid):
        candidate = enemy_pos
    return candidate


def _default_player() -> Player:
    return Player(Position(1, 1))


@dataclass
class Game:
    """The whole state of a game in progress."""

    grid: Grid = field(default_factory=list)
    player: Player = field(default_factory=_default_player)
    enemies: list[Enemy] = field(default_factory=list)
    powerups: list[Position] = field(default_factory=list)
    exit_pos: Position = Position(0, 0)
    score: int = 0
    move_counter: int = 0
    total_moves: int = 0
    enemy_delay: int = 1
    level: int = 1
    game_over: bool = False

    def init_level(self, level: int, rng: random.Random | None = None) -> None:
        """Reset the state and generate the maze for ``level``."""
        rng = rng if rng is not None else random.Random()
        self.level = level
        self.score = 0
        self.move_counter = 0
        self.total_moves = 0
        self.game_over = False
        self.enemy_delay = 1

        self.grid = [[EMPTY] * COLS for _ in range(ROWS)]
        for row in self.grid:
            row[0] = row[-1] = "#"
        self.grid[0] = ["#"] * COLS
        self.grid[-1] = ["#"] * COLS

        fill_chance = 15 if level == 1 else 25
        for i in range(1, ROWS - 1):
            for j in range(1, COLS - 1):
                if rng.randrange(100) < fill_chance:
                    self.grid[i][j] = "#" if rng.randrange(2) == 0 else "@"
                else:
                    self.grid[i][j] = EMPTY

        if level == 2:
            mid_col = COLS // 2
            gaps = {ROWS // 3, (2 * ROWS) // 3}
            for i in range(1, ROWS - 1):
                if i not in gaps:
                    self.grid[i][mid_col] = "#"
            mid_row = ROWS // 2
            for j in range(1, COLS - 1):
                if j != COLS // 4:
                    self.grid[mid_row][j] = "@"

        self.player.pos = Position(1, 1)
        self.grid[1][1] = EMPTY

        self.exit_pos = Position(ROWS - 2, COLS - 2)
        self.grid[ROWS - 2][COLS - 2] = EXIT

        if level == 1:
            enemy_cells = [
                Position(1, COLS - 2),
                Position(ROWS // 2, 1),
                Position(ROWS // 2, COLS - 3),
            ]
            powerup_cells = [
                Position(ROWS // 2, COLS // 2),
                Position(3, COLS - 4),
            ]
        else:
            enemy_cells = [
                Position(1, COLS - 2),
                Position(ROWS - 2, 1),
                Position(ROWS // 2, COLS - 2),
                Position(ROWS - 2, COLS // 2),
                Position(ROWS // 3, COLS // 3),
            ]
            powerup_cells = [
                Position(ROWS // 2, 2),
                Position(ROWS - 3, COLS - 3),
                Position(2, 2),
            ]

        self.enemies = [Enemy(pos) for pos in enemy_cells]
        self.powerups = list(powerup_cells)
        for pos in (*enemy_cells, *powerup_cells):
            self.grid[pos.x][pos.y] = EMPTY

        self.carve_guaranteed_path()

    def carve_guaranteed_path(self) -> None:
        """Open an L-shaped corridor from the start to the exit."""
        for j in range(1, COLS - 1):
            self.grid[1][j] = EMPTY
        for i in range(1, ROWS - 1):
            self.grid[i][COLS - 2] = EMPTY
        self.grid[1][1] = EMPTY
        self.grid[ROWS - 2][COLS - 2] = EXIT

    def collect_powerup(self, pos: Position) -> bool:
        """Remove the powerup at ``pos``, telling whether there was one."""
        try:
            self.powerups.remove(pos)
        except ValueError:
            return False
        return True

    def move_enemies(self) -> bool:
        """Move every enemy toward the player once enough moves have passed."""
        if self.move_counter < self.enemy_delay:
            return False
        target = self.player.pos
        steps = [calculate_enemy_move(enemy.pos, target, self.grid) for enemy in self.enemies]
        for enemy, pos in zip(self.enemies, steps):
            enemy.pos = pos
        self.move_counter = 0
        return True

    def player_caught(self) -> bool:
        """Tell whether an enemy stands on the player's cell."""
        return any(enemy.pos == self.player.pos for enemy in self.enemies)

    def _cell(self, i: int, j: int, color: bool) -> str:
        here = Position(i, j)

        def paint(code: str, text: str) -> str:
            return f"{code}{text}{RESET}" if color else text

        if self.player.pos == here:
            return paint(GREEN, self.player.symbol())
        for enemy in self.enemies:
            if enemy.pos == here:
                return paint(RED, enemy.symbol())
        if here in self.powerups:
            return paint(YELLOW, POWERUP)
        cell = self.grid[i][j]
        if cell == EMPTY:
            return paint(BG_WHITE if (i + j) % 2 == 0 else BG_GRAY, EMPTY)
        if cell in WALLS:
            return paint(BLUE, cell)
        if cell == EXIT:
            return paint(MAGENTA, cell)
        return cell

    def render(self, color: bool = True) -> str:
        """Draw the title, the maze and the statistics as text."""

        def banner(text: str) -> str:
            return f"{YELLOW}{text}{RESET}" if color else text

        lines = [banner(BANNER), banner(f"\t{TITLE}"), banner(BANNER)]
        for i, row in enumerate(self.grid):
            lines.append("".join(self._cell(i, j, color) for j in range(len(row))))
        lines.append(f"Score: {self.score}   Level: {self.level}   Moves: {self.total_moves}")
        lines.append(CONTROLS)
        return "\n".join(lines) + "\n"

    def dumps(self) -> str:
        """Serialise the game to the save-file text format."""
        rows = len(self.grid)
        cols = len(self.grid[0]) if rows else 0
        lines = [
            f"{self.level} {self.score} {self.move_counter} {self.total_moves} "
            f"{self.enemy_delay} {int(self.game_over)}",
            f"{rows} {cols}",
            *("".join(row) for row in self.grid),
            f"{self.player.pos.x} {self.player.pos.y}",
            f"{self.exit_pos.x} {self.exit_pos.y}",
            str(len(self.enemies)),
            *(f"{enemy.pos.x} {enemy.pos.y}" for enemy in self.enemies),
            str(len(self.powerups)),
            *(f"{pos.x} {pos.y}" for pos in self.powerups),
        ]
        return "\n".join(lines) + "\n"

    @classmethod
    def loads(cls, text: str) -> Game:
        """Build a game from the save-file text format."""
        lines = text.splitlines()
        try:
            header = [int(token) for token in lines[0].split()]
            size = [int(token) for token in lines[1].split()]
            if len(header) != 6 or len(size) != 2:
                raise SaveError("malformed save header")
            level, score, move_counter, total_moves, enemy_delay, over = header
            rows, cols = size
            if rows < 0 or cols < 0:
                raise SaveError("negative grid size")
            grid_lines = lines[2 : 2 + rows]
            if len(grid_lines) != rows:
                raise SaveError("save file ends inside the grid")
            grid = [list(line[:cols].ljust(cols)) for line in grid_lines]

            numbers: Iterator[int] = (int(token) for line in lines[2 + rows :] for token in line.split())

            def position() -> Position:
                return Position(next(numbers), next(numbers))

            player_pos = position()
            exit_pos = position()
            enemies = [Enemy(position()) for _ in range(next(numbers))]
            powerups = [position() for _ in range(next(numbers))]
        except (IndexError, ValueError, StopIteration) as exc:
            raise SaveError("malformed save file") from exc

        return cls(
            grid=grid,
            player=Player(player_pos),
            enemies=enemies,
            powerups=powerups,
            exit_pos=exit_pos,
            score=score,
            move_counter=move_counter,
            total_moves=total_moves,
            enemy_delay=enemy_delay,
            level=level,
            game_over=over != 0,
        )

    def save(self, path: str | Path) -> None:
        """Write the game to ``path``."""
        try:
            Path(path).write_text(self.dumps(), encoding="utf-8")
        except OSError as exc:
            raise SaveError(f"cannot write {path}: {exc}") from exc

    @classmethod
    def load(cls, path: str | Path) -> Game:
        """Read a game saved at ``path``."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise SaveError(f"cannot read {path}: {exc}") from exc
        return cls.loads(text)


def _read_token(read_line: Callable[[], str]) -> str:
    """Return the next whitespace-separated word, skipping blank lines."""
    while True:
        line = read_line()
        if not line:
            return ""
        words = line.split()
        if words:
            return words[0]


def run_game(
    read_key: Callable[[], str] | None = None,
    read_line: Callable[[], str] | None = None,
    out: TextIO | None = None,
    rng: random.Random | None = None,
    save_path: str | Path = DEFAULT_SAVE_PATH,
) -> Game:
    """Play one session from level 1 until it is won, lost or input ends.

    Returns the game as it stood when the session finished.
    """
    console = out is None
    out = sys.stdout if out is None else out
    read_key = read_key if read_key is not None else get_input_char
    read_line = read_line if read_line is not None else sys.stdin.readline
    rng = rng if rng is not None else random.Random()
    clear = console and out.isatty()
    color = console

    def say(text: str = "") -> None:
        out.write(text + "\n")
        out.flush()

    def pause() -> None:
        out.write(CONTINUE_PROMPT)
        out.flush()
        read_key()

    game = Game()
    game.init_level(1, rng)

    while True:
        if clear:
            clear_screen()
        out.write(game.render(color=color))

        if game.player.pos == game.exit_pos:
            if game.level == 1:
                say("Level 1 Complete! Proceeding to Level 2...")
                pause()
                game.init_level(2, rng)
                continue
            say("Congratulations! You completed Level 2 and won the game!")
            break

        key = read_key()
        if not key:
            break

        if key in ("m", "M"):
            out.write("\nEnter command (save/load): ")
            out.flush()
            command = _read_token(read_line)
            if command == "save":
                try:
                    game.save(save_path)
                except SaveError:
                    say("Error opening file for saving.")
                else:
                    say(f"Game saved to {save_path}")
                pause()
            elif command == "load":
                try:
                    game = Game.load(save_path)
                except SaveError:
                    say("Error opening file for loading.")
                    read_key()
                else:
                    say(f"Game loaded from {save_path}")
                    pause()
            continue

        direction = _DIRECTIONS.get(key.lower())
        if direction is None:
            continue

        target = game.player.pos.step(*direction)
        if is_valid_move(target, game.grid):
            game.player.pos = target
            game.move_counter += 1
            game.total_moves += 1
            if game.collect_powerup(target):
                game.score += POWERUP_SCORE
                say("Powerup collected! Score increased.")
                pause()

        game.move_enemies()

        if game.player_caught():
            say("An enemy has caught you! Game Over.")
            game.game_over = True
            break

    say(f"Final Score: {game.score}")
    say(f"Total Moves Made: {game.total_moves}")
    return game