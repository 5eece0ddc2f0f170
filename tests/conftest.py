"""Shared test fixtures and configuration."""

import os
import tempfile

# Console-only logging unless a test opts in; CLI runs write under a temp dir
os.environ.setdefault('TREND_BRAIN_LOG_FILE', '0')
os.environ.setdefault('TREND_BRAIN_LOG_DIR', tempfile.mkdtemp(prefix='trend_brain_logs_'))
os.environ.setdefault('MPLBACKEND', 'Agg')

import numpy as np
import pytest

from placement_config import default_config


@pytest.fixture
def rng():
    """Seeded generator so layouts are reproducible within a test."""
    return np.random.default_rng(42)


@pytest.fixture
def config():
    """Default brain geometry."""
    return default_config()


@pytest.fixture
def loose_config(config):
    """Default geometry with a small separation so every quota fills."""
    config.min_distance = 0.1
    return config.validate()


@pytest.fixture
def tiny_config(config):
    """Geometry shrunk a hundredfold with a small attempt budget."""
    small = config.scaled(0.01)
    small.attempts_per_neuron = 50
    return small.validate()
