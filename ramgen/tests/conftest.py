import os
import sys

import pytest

# Add the project root to sys.path so that ramgen is importable
# This is needed because of the flat layout structure
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from ramgen.core.planner import SignalPlanner  # noqa: E402
from ramgen.model.config import RamConfig, TriggerPolicy  # noqa: E402


@pytest.fixture
def planner():
    return SignalPlanner()


@pytest.fixture
def word_config():
    """Scenario A: 16 x 8 bit RAM without byte enables."""
    return RamConfig(
        name="word_ram",
        word_width=8,
        address_width=4,
        trigger=TriggerPolicy.RISING_EDGE,
        byte_enables=False,
    )


@pytest.fixture
def ragged_config():
    """Scenario B: 4 x 12 bit RAM with two byte lanes, the upper one 4 bits wide."""
    return RamConfig(
        name="ragged_ram",
        word_width=12,
        address_width=2,
        trigger=TriggerPolicy.RISING_EDGE,
        byte_enables=True,
    )


@pytest.fixture
def word_plan(planner, word_config):
    return planner.plan(word_config)


@pytest.fixture
def ragged_plan(planner, ragged_config):
    return planner.plan(ragged_config)
