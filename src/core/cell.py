"""
Cell states for the carrier infection grid.

Each grid cell carries one discrete state. Two alphabets are in use:
  - BASIC: CLEAN <-> INFECTED, toggled on every visit
  - EVOLVED: CLEAN -> WEAKENED -> INFECTED -> FLAGGED -> CLEAN

A rule that meets a state outside its own alphabet raises
InvalidAlphabetState instead of guessing a transition.
"""

from enum import Enum
from typing import FrozenSet, Tuple

# (row, col); row grows downwards, col grows to the right
Position = Tuple[int, int]


class CellState(Enum):
    CLEAN = "."
    WEAKENED = "W"
    INFECTED = "#"
    FLAGGED = "F"


BASIC_ALPHABET: FrozenSet[CellState] = frozenset(
    {CellState.CLEAN, CellState.INFECTED}
)
EVOLVED_ALPHABET: FrozenSet[CellState] = frozenset(CellState)


class InvalidAlphabetState(ValueError):
    """A rule was asked to interpret a state it has no transition for."""

    def __init__(self, state: CellState, alphabet: FrozenSet[CellState]):
        self.state = state
        self.alphabet = alphabet
        allowed = ", ".join(sorted(s.name for s in alphabet))
        super().__init__(
            f"cell state {state.name} is outside the rule alphabet ({allowed})"
        )
