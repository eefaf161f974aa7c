"""
Fitness evaluation for genetic algorithm optimization.

This module provides the interface the search loop uses to score gene
vectors, and an evaluator that scores networks against a labelled dataset.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from ..core.exceptions import DataError, LengthMismatchError
from ..core.logging import get_logger
from ..network.codec import decode
from ..network.evaluator import evaluate
from ..network.neural_network import Topology
from ..utils.validators import as_population, validate_dataframe

logger = get_logger(__name__)


class FitnessEvaluator(ABC):
    """Abstract base class for fitness evaluation."""

    @abstractmethod
    def evaluate(self, genes: np.ndarray) -> int:
        """
        Evaluate the fitness of one gene vector.

        Args:
            genes: Gene vector to evaluate

        Returns:
            Integer fitness, higher is better
        """
        pass

    def evaluate_population(self, population) -> np.ndarray:
        """
        Evaluate every individual of a population.

        Returns:
            Integer fitness array aligned with the population
        """
        population = as_population(population)
        fitness = np.empty(len(population), dtype=np.int64)
        for i, genes in enumerate(population):
            fitness[i] = self.evaluate(genes)
            logger.debug(f"Individual {i}: fitness {fitness[i]}")
        return fitness


class DatasetFitnessEvaluator(FitnessEvaluator):
    """
    Scores a network by how closely it reproduces dataset targets.

    Fitness is ``int(scale / (1 + mse))`` where ``mse`` is the mean squared
    error over every sample and output. A perfect network scores ``scale``;
    fitness never drops below zero, which keeps it usable by roulette
    selection.
    """

    def __init__(self, topology: Topology, inputs, targets, scale: int = 1000):
        """
        Args:
            topology: Network shape the gene vectors encode
            inputs: Array of shape (samples, topology.inputs)
            targets: Array of shape (samples, topology.outputs)
            scale: Fitness of an exact fit
        """
        inputs = np.atleast_2d(np.asarray(inputs, dtype=np.float64))
        targets = np.asarray(targets, dtype=np.float64)
        if targets.ndim == 1:
            targets = targets.reshape(-1, 1)

        if inputs.shape[1] != topology.inputs:
            raise LengthMismatchError(
                f"Dataset has {inputs.shape[1]} input columns, topology expects {topology.inputs}"
            )
        if targets.shape[1] != topology.outputs:
            raise LengthMismatchError(
                f"Dataset has {targets.shape[1]} target columns, topology expects {topology.outputs}"
            )
        if len(inputs) != len(targets):
            raise LengthMismatchError(
                f"Dataset has {len(inputs)} input rows but {len(targets)} target rows"
            )
        if len(inputs) == 0:
            raise DataError("Dataset must contain at least one sample")

        self.topology = topology
        self.inputs = inputs
        self.targets = targets
        self.scale = scale

    def predict(self, genes: np.ndarray) -> np.ndarray:
        """Network outputs for every sample, shape (samples, outputs)."""
        network = decode(genes, self.topology)
        return np.array([evaluate(network, sample) for sample in self.inputs])

    def mean_squared_error(self, genes: np.ndarray) -> float:
        return float(np.mean((self.predict(genes) - self.targets) ** 2))

    def evaluate(self, genes: np.ndarray) -> int:
        mse = self.mean_squared_error(genes)
        if not np.isfinite(mse):
            return 0
        return int(self.scale / (1.0 + mse))


def load_dataset(
    path: Union[str, Path],
    input_columns: Sequence[str],
    target_columns: Sequence[str],
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Load a CSV dataset.

    Args:
        path: CSV file path
        input_columns: Columns fed to the input layer, in order
        target_columns: Columns the outputs are compared against, in order

    Returns:
        Tuple of (inputs, targets) float arrays

    Raises:
        DataError: If the file cannot be read
        ValidationError: If columns are missing or hold null/infinite values
    """
    path = Path(path)
    try:
        df = pd.read_csv(path)
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise DataError(f"Failed to read dataset {path}: {str(e)}")

    columns: List[str] = list(input_columns) + list(target_columns)
    validate_dataframe(df, required_columns=columns)

    inputs = df[list(input_columns)].to_numpy(dtype=np.float64)
    targets = df[list(target_columns)].to_numpy(dtype=np.float64)

    logger.info(f"Loaded {len(df)} samples from {path}")
    return inputs, targets
