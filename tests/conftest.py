"""
Pytest configuration and common fixtures for NEUROEVO testing.

This file contains shared fixtures and configuration that can be used
across all test modules.
"""

import pytest
import tempfile
import shutil
import json
from pathlib import Path
import numpy as np
import pandas as pd

# Add the project root to Python path
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from neuroevo.core import setup_logging
from neuroevo.core.logging import get_logger
from neuroevo.genetic.random_source import RandomSource
from neuroevo.network import Topology


class ScriptedRandomSource(RandomSource):
    """
    Random source that replays scripted draws.

    ``floats`` feed ``random()`` and ``ints`` feed ``randint()`` in order.
    With ``maximum=True`` every draw returns the top of its range instead.
    """

    def __init__(self, floats=(), ints=(), maximum=False):
        super().__init__(seed=0)
        self.floats = list(floats)
        self.ints = list(ints)
        self.maximum = maximum
        self.int_calls = []

    def random(self):
        if self.maximum:
            return 1.0 - 1e-12
        if not self.floats:
            raise AssertionError("ScriptedRandomSource ran out of float draws")
        return self.floats.pop(0)

    def randint(self, low, high):
        self.int_calls.append((low, high))
        if self.maximum:
            return high - 1
        if not self.ints:
            raise AssertionError("ScriptedRandomSource ran out of integer draws")
        value = self.ints.pop(0)
        assert low <= value < high, f"scripted draw {value} outside [{low}, {high})"
        return value


@pytest.fixture(scope="session")
def test_logger():
    """Set up logging for tests."""
    # Console only, no files
    setup_logging(level="DEBUG", enable_file=False, enable_console=True)
    return get_logger("test")


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_dir = Path(tempfile.mkdtemp())
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def scripted_rng():
    """Factory for random sources with scripted draws."""
    return ScriptedRandomSource


@pytest.fixture
def rng():
    """Seeded random source."""
    return RandomSource(seed=1234)


@pytest.fixture
def topology():
    """The 2-3-1 topology used throughout the tests (13 genes)."""
    return Topology(inputs=2, hidden=3, outputs=1)


@pytest.fixture
def sample_population():
    """Four individuals of five genes each."""
    return np.array([
        [0.10, 0.20, 0.30, 0.40, 0.50],
        [0.15, 0.25, 0.35, 0.45, 0.55],
        [0.60, 0.70, 0.80, 0.90, 0.95],
        [0.05, 0.01, 0.02, 0.03, 0.04],
    ])


@pytest.fixture
def sample_config_data():
    """Sample configuration data for testing."""
    return {
        "topology": {
            "inputs": 3,
            "hidden": 4,
            "outputs": 2
        },
        "operators": {
            "selection": "tournament",
            "crossover": "two_point",
            "mutation": "gaussian",
            "mutation_rate": 0.1,
            "tournament_size": 5
        },
        "search": {
            "population_size": 20,
            "max_generations": 30,
            "seed": 7
        },
        "logging": {
            "level": "DEBUG",
            "enable_file": False
        }
    }


@pytest.fixture
def config_file(temp_dir, sample_config_data):
    """Create a temporary config file for testing."""
    config_path = temp_dir / "test_config.json"
    with open(config_path, 'w') as f:
        json.dump(sample_config_data, f, indent=2)
    return config_path


@pytest.fixture
def clean_env(monkeypatch, temp_dir):
    """Run without NEUROEVO_* variables and away from any project .env file."""
    monkeypatch.delenv("NEUROEVO_SEED", raising=False)
    monkeypatch.delenv("NEUROEVO_LOG_LEVEL", raising=False)
    monkeypatch.chdir(temp_dir)


@pytest.fixture
def linear_dataset_csv(temp_dir):
    """CSV with y = 0.5 * x1 + 0.25 * x2, which a linear 2-3-1 network can fit."""
    rng = np.random.default_rng(0)
    x = rng.random((20, 2))
    df = pd.DataFrame({
        'x1': x[:, 0],
        'x2': x[:, 1],
        'y': 0.5 * x[:, 0] + 0.25 * x[:, 1],
    })
    csv_path = temp_dir / 'linear.csv'
    df.to_csv(csv_path, index=False)
    return csv_path
