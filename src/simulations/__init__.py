"""Carrier infection grid simulation engine."""
from .engine import Simulation
from .policies import (
    Policy,
    basic_rule,
    evolved_rule,
)
from .run_config import (
    InvalidStepCount,
    RunConfig,
    parse_policies,
    DEFAULT_STEPS,
    PART_ONE_PROFILE,
    PART_TWO_PROFILE,
)
from .loader import build_grid, load_map, parse_map
