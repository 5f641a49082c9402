"""
Carrier Infection Grid -- Simulation Runner
===========================================

Loads an initial map, runs the carrier under each requested policy and
prints the number of infecting steps per policy:

  1. Basic policy: cells toggle CLEAN <-> INFECTED
  2. Evolved policy: cells cycle CLEAN -> WEAKENED -> INFECTED -> FLAGGED

Run:  python run_simulation.py --steps 10000 --map example
"""

import sys
import os
import argparse

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

from core.metrics import count_infections
from simulations.engine import Simulation
from simulations.loader import build_grid, load_map
from simulations.run_config import (
    DEFAULT_MAP_PATH,
    DEFAULT_STEPS,
    RunConfig,
    parse_policies,
)


def _first_given(*values):
    return next(v for v in values if v is not None)


def run_policy(text, policy, steps, infected_marker="#"):
    """Run one policy on a freshly built grid and return the count."""
    sim = Simulation(build_grid(text, infected_marker), policy=policy)
    return count_infections(sim, steps)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Count infecting steps of a carrier walking an infection grid."
    )
    parser.add_argument(
        "steps_arg", nargs="?", type=int, metavar="steps",
        help=f"Number of simulated steps (default {DEFAULT_STEPS}).",
    )
    parser.add_argument(
        "map_arg", nargs="?", metavar="map",
        help=f"Path to the initial map file (default {DEFAULT_MAP_PATH}).",
    )
    parser.add_argument("--steps", type=int, help="Same as the steps argument.")
    parser.add_argument("--map", help="Same as the map argument.")
    parser.add_argument(
        "--policy",
        choices=["basic", "evolved", "all"],
        default="all",
        help="Policy to run.",
    )
    parser.add_argument(
        "--marker", default="#", help="Character marking an infected cell."
    )
    args = parser.parse_args(argv)

    steps = _first_given(args.steps, args.steps_arg, DEFAULT_STEPS)
    map_path = _first_given(args.map, args.map_arg, DEFAULT_MAP_PATH)

    try:
        config = RunConfig(
            steps=steps,
            map_path=map_path,
            policies=parse_policies(args.policy),
            infected_marker=args.marker,
        )
        text = load_map(config.map_path)
    except (OSError, ValueError) as e:
        parser.error(str(e))

    print("=" * 60)
    print("  Carrier Infection Grid")
    print("=" * 60)
    print(
        "  "
        f"map={config.map_path}, steps={config.steps}, "
        f"policies={','.join(p.value for p in config.policies)}"
    )

    run_kwargs = config.run_kwargs()
    for policy in config.policies:
        result = run_policy(text, policy, **run_kwargs)
        print(f"{policy.label}infections = {result}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
