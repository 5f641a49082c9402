"""
The carrier: a mobile agent with a position and a facing direction.

Turning never moves the carrier and moving never turns it. Directions
cycle clockwise UP -> RIGHT -> DOWN -> LEFT -> UP.
"""

from dataclasses import dataclass
from enum import Enum

from .cell import Position


class Direction(Enum):
    # value is the (row, col) offset of one step
    UP = (-1, 0)
    RIGHT = (0, 1)
    DOWN = (1, 0)
    LEFT = (0, -1)


_CLOCKWISE = (Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT)
_RIGHT_OF = {d: _CLOCKWISE[(i + 1) % 4] for i, d in enumerate(_CLOCKWISE)}
_LEFT_OF = {d: _CLOCKWISE[(i - 1) % 4] for i, d in enumerate(_CLOCKWISE)}


@dataclass
class Carrier:
    """Position and facing of the agent walking the grid.

    Attributes:
        position: Current (row, col). Starts at the grid origin.
        direction: Facing direction. Starts UP.
    """

    position: Position = (0, 0)
    direction: Direction = Direction.UP

    def step(self) -> Position:
        """Move one cell in the facing direction and return the new position."""
        dr, dc = self.direction.value
        row, col = self.position
        self.position = (row + dr, col + dc)
        return self.position

    def turn_right(self):
        self.direction = _RIGHT_OF[self.direction]

    def turn_left(self):
        self.direction = _LEFT_OF[self.direction]

    def reverse_direction(self):
        self.turn_right()
        self.turn_right()
