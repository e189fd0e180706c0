import random

import pytest

from fxagent_sim.config import DEFAULT_AGENT_CONFIG


class SequenceRandom:
    """Cycles through a fixed list of uniform draws and counts them."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def random(self):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@pytest.fixture
def default_config():
    return DEFAULT_AGENT_CONFIG


@pytest.fixture
def seeded_rng():
    return random.Random(20240611)


@pytest.fixture
def constant_rng():
    """Every draw is 0.5: zero drift jitter, zero fat tail, negative shock."""
    return SequenceRandom([0.5])


@pytest.fixture
def rising_rng():
    """Drift 0.5, u1 0.5, u2 0.0 (epsilon), fat tail 0.5: every period gains."""
    return SequenceRandom([0.5, 0.5, 0.0, 0.5])
