"""
Infection metrics for the carrier grid.

The headline metric is the number of infecting steps: steps whose
observation leaves the visited cell INFECTED. A cell toggled back to
CLEAN, or only WEAKENED, does not count.
"""

from typing import TYPE_CHECKING

from .cell import CellState

if TYPE_CHECKING:
    from simulations.engine import Simulation
    from .grid import Grid


def count_infections(simulation: "Simulation", steps: int) -> int:
    """Drive the simulation ``steps`` times and count infecting steps.

    The simulation is advanced exactly ``steps`` times; with ``steps == 0``
    neither the grid nor the carrier is touched. Negative counts are
    rejected upstream by RunConfig and are treated as zero here.

    Returns:
        Number of observations whose resulting state is INFECTED.
    """
    infected = 0
    step = simulation.step
    for _ in range(steps):
        _, state = step()
        if state is CellState.INFECTED:
            infected += 1
    return infected


def infection_rate(infections: int, steps: int) -> float:
    """Fraction of steps that infected a cell. 0.0 when nothing ran."""
    if steps <= 0:
        return 0.0
    return infections / steps


def infected_fraction(grid: "Grid") -> float:
    """Share of stored (non-CLEAN) cells that are INFECTED.

    For the two-state alphabet this is always 1.0 on a non-empty grid;
    it is informative for the evolved alphabet, where WEAKENED and
    FLAGGED cells are stored too.
    """
    if not len(grid):
        return 0.0
    return grid.count_by_state()[CellState.INFECTED] / len(grid)
