"""Grid coordinates and the things that occupy them."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A cell of the maze: ``x`` is the row, ``y`` the column."""

    x: int
    y: int

    def step(self, dx: int, dy: int) -> Position:
        """Return the position moved by ``dx`` rows and ``dy`` columns."""
        return Position(self.x + dx, self.y + dy)


def in_bounds(pos: Position, rows: int, cols: int) -> bool:
    """Tell whether ``pos`` lies on a grid of ``rows`` by ``cols`` cells."""
    return 0 <= pos.x < rows and 0 <= pos.y < cols


@dataclass
class Entity:
    """Anything that stands on a cell of the maze."""

    pos: Position

    def symbol(self) -> str:
        """The character drawn for this entity."""
        return "?"


@dataclass
class Player(Entity):
    """The character controlled from the keyboard."""

    def symbol(self) -> str:
        return "P"


@dataclass
class Enemy(Entity):
    """A chaser that steps toward the player."""

    def symbol(self) -> str:
        return "X"