"""
Run configuration for the carrier simulation.

A RunConfig is validated at construction, so a negative step count never
reaches the engine. Named profiles cover the two reference runs.
"""

from dataclasses import dataclass
from typing import Dict, Tuple, Union

from .policies import Policy

DEFAULT_STEPS = 10000
DEFAULT_MAP_PATH = "example"


class InvalidStepCount(ValueError):
    """Step count is negative."""


def parse_policies(name: str) -> Tuple[Policy, ...]:
    """Map a CLI policy name ("basic", "evolved" or "all") to policies."""
    if name == "all":
        return tuple(Policy)
    try:
        return (Policy(name),)
    except ValueError:
        raise ValueError(f"unknown policy {name!r}") from None


@dataclass(frozen=True)
class RunConfig:
    steps: int = DEFAULT_STEPS
    map_path: str = DEFAULT_MAP_PATH
    policies: Tuple[Policy, ...] = (Policy.BASIC, Policy.EVOLVED)
    infected_marker: str = "#"

    def __post_init__(self):
        if self.steps < 0:
            raise InvalidStepCount(f"steps must be >= 0, got {self.steps}")
        if not self.policies:
            raise ValueError("at least one policy is required")
        if len(self.infected_marker) != 1:
            raise ValueError("infected_marker must be a single character")

    def run_kwargs(self) -> Dict[str, Union[int, str]]:
        return {
            "steps": self.steps,
            "infected_marker": self.infected_marker,
        }


PART_ONE_PROFILE = RunConfig(steps=10000, policies=(Policy.BASIC,))

PART_TWO_PROFILE = RunConfig(steps=10000000, policies=(Policy.EVOLVED,))
