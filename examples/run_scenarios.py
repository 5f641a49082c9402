"""
Reference Scenarios: Basic and Evolved policies on the sample map
=================================================================

Runs both policies on the 3x3 sample block at several horizons and saves
the counts and final grid summaries to results/scenarios.json.

Usage: python examples/run_scenarios.py [--long]
"""

import sys
import os
import json
import argparse

# Ensure src is on path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from core.metrics import count_infections, infected_fraction, infection_rate
from simulations.engine import Simulation
from simulations.loader import build_grid
from simulations.policies import Policy
from simulations.run_config import PART_ONE_PROFILE, PART_TWO_PROFILE, RunConfig

RESULTS_DIR = os.path.join(os.path.dirname(__file__), "..", "results")
os.makedirs(RESULTS_DIR, exist_ok=True)

SAMPLE_MAP = "..#\n#..\n..."

SCENARIOS = [
    ("basic-70", RunConfig(steps=70, policies=(Policy.BASIC,))),
    ("basic-10000", PART_ONE_PROFILE),
    ("evolved-100", RunConfig(steps=100, policies=(Policy.EVOLVED,))),
]

LONG_SCENARIOS = [
    ("evolved-10000000", PART_TWO_PROFILE),
]


def run_scenario(name, policy, steps, infected_marker="#", text=SAMPLE_MAP):
    """Run one scenario on a fresh grid and collect its figures."""
    sim = Simulation(build_grid(text, infected_marker), policy=policy)
    infections = count_infections(sim, steps)
    counts = sim.grid.count_by_state()

    return {
        "scenario": name,
        "policy": policy.value,
        "steps": steps,
        "infections": infections,
        "infection_rate": infection_rate(infections, steps),
        "final_cells": {s.name.lower(): n for s, n in counts.items() if n},
        "infected_fraction": infected_fraction(sim.grid),
        "carrier": {
            "position": list(sim.carrier.position),
            "direction": sim.carrier.direction.name,
        },
    }


def main():
    parser = argparse.ArgumentParser(
        description="Run the reference scenarios and save a JSON summary."
    )
    parser.add_argument(
        "--long", action="store_true", help="Include the 10,000,000-step run."
    )
    args = parser.parse_args()

    scenarios = SCENARIOS + (LONG_SCENARIOS if args.long else [])
    results = []
    for name, config in scenarios:
        print(f"--- {name} ---")
        for policy in config.policies:
            result = run_scenario(name, policy, **config.run_kwargs())
            print(f"  infections={result['infections']} "
                  f"rate={result['infection_rate']:.4f}")
            results.append(result)

    out_path = os.path.join(RESULTS_DIR, "scenarios.json")
    with open(out_path, "w") as f:
        json.dump(results, f, indent=2)
    print(f"\nSaved {out_path}")


if __name__ == "__main__":
    main()
