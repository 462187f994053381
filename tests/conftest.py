"""Shared test fixtures and configuration."""

import pytest
import torch
import numpy as np

from synapto.components.neurons.polarity import Polarity
from synapto.learning.stdp import PlasticityRegime, StandardSTDP


@pytest.fixture(autouse=True)
def set_random_seed():
    """Ensure reproducible tests by setting all random seeds.

    This fixture runs automatically for every test to ensure deterministic behavior.
    """
    torch.manual_seed(42)
    np.random.seed(42)
    if torch.cuda.is_available():
        torch.cuda.manual_seed_all(42)


@pytest.fixture
def device():
    """Get available device (prefer GPU if available)."""
    return torch.device("cuda" if torch.cuda.is_available() else "cpu")


@pytest.fixture
def n_synapses():
    """Standard synapse count for tests."""
    return 64


@pytest.fixture
def unit_rule():
    """Rule with unit amplitudes, eta=0.01 and 20ms time constants."""
    return StandardSTDP(
        source=Polarity.EXCITATORY,
        target=Polarity.EXCITATORY,
        eta=0.01,
        regime=PlasticityRegime.HEBBIAN,
        w_plus=1.0,
        w_minus=1.0,
        tau_plus=20.0,
        tau_minus=20.0,
    )


@pytest.fixture
def spike_times(n_synapses, device):
    """Random (last_post_spike_time, last_arrival_time) pair in [0, 100) ms."""
    last_post = torch.rand(n_synapses, device=device) * 100.0
    last_arrival = torch.rand(n_synapses, device=device) * 100.0
    return last_post, last_arrival
