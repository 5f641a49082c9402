"""
Transition rules applied to the cell under the carrier.

Each rule acts on a Grid and a Carrier for exactly one step:
read (or toggle) the current cell, turn, write, then advance one cell.

  - basic_rule: two-state toggle. CLEAN -> INFECTED turning left,
    INFECTED -> CLEAN turning right.
  - evolved_rule: four-state cycle.
        CLEAN    -> WEAKENED  turn left
        WEAKENED -> INFECTED  no turn
        INFECTED -> FLAGGED   turn right
        FLAGGED  -> CLEAN     reverse

The set of rules is closed; Policy enumerates them and dispatches.
"""

from enum import Enum
from typing import FrozenSet

from core.carrier import Carrier
from core.cell import BASIC_ALPHABET, EVOLVED_ALPHABET, CellState, InvalidAlphabetState
from core.grid import Grid


def basic_rule(grid: Grid, carrier: Carrier):
    """Toggle the current cell and turn on the state seen before the toggle.

    Grid.reverse already refuses WEAKENED and FLAGGED cells; the final
    branch only guards against a grid that reports something else.
    """
    old_state = grid.reverse(carrier.position)
    if old_state is CellState.CLEAN:
        carrier.turn_left()
    elif old_state is CellState.INFECTED:
        carrier.turn_right()
    else:
        raise InvalidAlphabetState(old_state, BASIC_ALPHABET)
    carrier.step()


def evolved_rule(grid: Grid, carrier: Carrier):
    """Advance the current cell one stage through the four-state cycle."""
    position = carrier.position
    old_state = grid.state(position)
    if old_state is CellState.CLEAN:
        carrier.turn_left()
        grid.weaken(position)
    elif old_state is CellState.WEAKENED:
        grid.infect(position)
    elif old_state is CellState.INFECTED:
        carrier.turn_right()
        grid.flag(position)
    elif old_state is CellState.FLAGGED:
        carrier.reverse_direction()
        grid.clean(position)
    carrier.step()


class Policy(Enum):
    BASIC = "basic"
    EVOLVED = "evolved"

    @property
    def alphabet(self) -> FrozenSet[CellState]:
        return _ALPHABETS[self]

    @property
    def label(self) -> str:
        """Prefix used when reporting this policy's result."""
        return "" if self is Policy.BASIC else "Evolved "

    def apply(self, grid: Grid, carrier: Carrier):
        """Run one read-turn-write-move step of this policy."""
        _RULES[self](grid, carrier)

    def check_grid(self, grid: Grid):
        """Raise InvalidAlphabetState if the grid holds a foreign state."""
        for state in grid.states():
            if state not in self.alphabet:
                raise InvalidAlphabetState(state, self.alphabet)


_ALPHABETS = {
    Policy.BASIC: BASIC_ALPHABET,
    Policy.EVOLVED: EVOLVED_ALPHABET,
}

_RULES = {
    Policy.BASIC: basic_rule,
    Policy.EVOLVED: evolved_rule,
}
