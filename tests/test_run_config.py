import pytest

from simulations.policies import Policy
from simulations.run_config import (
    DEFAULT_STEPS,
    PART_ONE_PROFILE,
    PART_TWO_PROFILE,
    InvalidStepCount,
    RunConfig,
    parse_policies,
)


def test_defaults():
    config = RunConfig()

    assert config.steps == DEFAULT_STEPS == 10000
    assert config.map_path == "example"
    assert config.policies == (Policy.BASIC, Policy.EVOLVED)


def test_negative_steps_rejected():
    with pytest.raises(InvalidStepCount):
        RunConfig(steps=-1)
    assert RunConfig(steps=0).steps == 0


def test_other_validation():
    with pytest.raises(ValueError):
        RunConfig(policies=())
    with pytest.raises(ValueError):
        RunConfig(infected_marker="##")
    with pytest.raises(ValueError):
        RunConfig(infected_marker="")


def test_parse_policies():
    assert parse_policies("all") == (Policy.BASIC, Policy.EVOLVED)
    assert parse_policies("evolved") == (Policy.EVOLVED,)
    with pytest.raises(ValueError):
        parse_policies("hexagonal")


def test_profiles_have_expected_keys():
    assert set(PART_ONE_PROFILE.run_kwargs()) == {"steps", "infected_marker"}
    assert PART_ONE_PROFILE.policies == (Policy.BASIC,)
    assert PART_TWO_PROFILE.run_kwargs()["steps"] == 10000000
