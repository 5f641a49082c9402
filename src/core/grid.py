"""
Sparse infection grid.

The grid is conceptually infinite. Only cells that differ from CLEAN are
stored; a missing key is a CLEAN cell, and writing CLEAN removes the key.
The carrier's footprint is unbounded relative to the input block, so the
grid is never materialized densely.

Coordinates are centered on the input block: the character at line r,
column c of an h-by-w block maps to (r - h // 2, c - w // 2).
"""

from typing import Dict, Iterator, Optional, Set

from .cell import BASIC_ALPHABET, CellState, InvalidAlphabetState, Position


class MalformedInput(ValueError):
    """Map text is empty or its rows differ in length."""


class Grid:
    """Sparse mapping from Position to a non-CLEAN CellState.

    Attributes:
        cells: Dict of every non-CLEAN cell. Absent positions are CLEAN.
    """

    def __init__(self, cells: Optional[Dict[Position, CellState]] = None):
        self.cells: Dict[Position, CellState] = {}
        for pos, state in (cells or {}).items():
            self.set(pos, state)

    @classmethod
    def from_text(cls, text: str, infected_marker: str = "#") -> "Grid":
        """Build a grid from a rectangular block of characters.

        Every ``infected_marker`` becomes an INFECTED cell; any other
        character is left CLEAN. The text is assumed to be validated
        already (see simulations.loader.parse_map).
        """
        lines = text.splitlines()
        h = len(lines)
        w = len(lines[0]) if lines else 0

        grid = cls()
        for r, line in enumerate(lines):
            for c, ch in enumerate(line):
                if ch == infected_marker:
                    grid.cells[(r - h // 2, c - w // 2)] = CellState.INFECTED
        return grid

    def state(self, pos: Position) -> CellState:
        return self.cells.get(pos, CellState.CLEAN)

    def set(self, pos: Position, state: CellState):
        if state is CellState.CLEAN:
            self.cells.pop(pos, None)
        else:
            self.cells[pos] = state

    def clean(self, pos: Position):
        self.cells.pop(pos, None)

    def weaken(self, pos: Position):
        self.cells[pos] = CellState.WEAKENED

    def infect(self, pos: Position):
        self.cells[pos] = CellState.INFECTED

    def flag(self, pos: Position):
        self.cells[pos] = CellState.FLAGGED

    def reverse(self, pos: Position) -> CellState:
        """Toggle a cell between CLEAN and INFECTED.

        Returns the state observed before the toggle. Only defined on the
        two-state alphabet; WEAKENED and FLAGGED cells are left untouched
        and raise InvalidAlphabetState.
        """
        old = self.cells.get(pos, CellState.CLEAN)
        if old is CellState.CLEAN:
            self.cells[pos] = CellState.INFECTED
        elif old is CellState.INFECTED:
            del self.cells[pos]
        else:
            raise InvalidAlphabetState(old, BASIC_ALPHABET)
        return old

    # --- State queries ---

    def count_by_state(self) -> Dict[CellState, int]:
        """Count stored cells in each state. CLEAN is always 0."""
        counts = {s: 0 for s in CellState}
        for state in self.cells.values():
            counts[state] += 1
        return counts

    def states(self) -> Set[CellState]:
        """States present in the stored (non-CLEAN) cells."""
        return set(self.cells.values())

    def copy(self) -> "Grid":
        grid = Grid()
        grid.cells = dict(self.cells)
        return grid

    def __len__(self) -> int:
        return len(self.cells)

    def __contains__(self, pos: Position) -> bool:
        return pos in self.cells

    def __iter__(self) -> Iterator[Position]:
        return iter(self.cells)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.cells == other.cells

    def __repr__(self) -> str:
        return f"Grid({len(self.cells)} non-clean cells)"
