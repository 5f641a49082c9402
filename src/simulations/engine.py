"""
Simulation engine for the carrier infection grid.

Owns one Grid, one Carrier and one Policy for the duration of a run.
Every call to step() performs exactly one unit of work and returns the
observation (visited position, state of that cell after the step). The
sequence is stateful and cannot be restarted; to run another policy on
the same input, build a fresh Grid and Carrier.
"""

from typing import Iterator, Optional, Tuple

from core.carrier import Carrier
from core.cell import CellState, Position
from core.grid import Grid
from .policies import Policy

Observation = Tuple[Position, CellState]


class Simulation:
    """Drive a carrier across a grid under one policy."""

    def __init__(
        self,
        grid: Grid,
        carrier: Optional[Carrier] = None,
        policy: Policy = Policy.BASIC,
    ):
        policy.check_grid(grid)

        self.grid = grid
        self.carrier = carrier if carrier is not None else Carrier()
        self.policy = policy
        self.step_count = 0
        self.infection_count = 0

    def step(self) -> Observation:
        """Apply the policy once and report the visited cell's new state."""
        position = self.carrier.position
        self.policy.apply(self.grid, self.carrier)
        state = self.grid.state(position)

        self.step_count += 1
        if state is CellState.INFECTED:
            self.infection_count += 1
        return position, state

    def run(self, steps: int):
        """Run for multiple steps."""
        for _ in range(steps):
            self.step()

    def __iter__(self) -> Iterator[Observation]:
        while True:
            yield self.step()

    def summary(self) -> str:
        if not self.step_count:
            return "No simulation data."
        counts = self.grid.count_by_state()
        row, col = self.carrier.position
        lines = [
            f"=== {self.policy.value} policy, t={self.step_count} ===",
            f"  Infecting steps: {self.infection_count}",
            f"  Cells:   infected={counts[CellState.INFECTED]}, "
            f"weakened={counts[CellState.WEAKENED]}, "
            f"flagged={counts[CellState.FLAGGED]}",
            f"  Carrier: ({row}, {col}) facing {self.carrier.direction.name}",
        ]
        return "\n".join(lines)
