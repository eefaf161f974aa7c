"""
Population initialization and statistics.
"""

import numpy as np

from ..core.exceptions import ValidationError
from ..core.logging import get_logger
from ..utils.validators import as_population
from .random_source import RandomSource

logger = get_logger(__name__)


def random_population(size: int, gene_length: int, rng: RandomSource) -> np.ndarray:
    """
    Create a population of uniform random gene vectors in [0, 1).

    Args:
        size: Number of individuals
        gene_length: Genes per individual, normally ``Topology.param_count``
        rng: Random source to draw from

    Returns:
        Array of shape (size, gene_length)
    """
    if size < 0:
        raise ValidationError(f"Population size cannot be negative, got {size}")
    if gene_length < 1:
        raise ValidationError(f"Gene length must be at least 1, got {gene_length}")

    population = np.empty((size, gene_length), dtype=np.float64)
    for i in range(size):
        for j in range(gene_length):
            population[i, j] = rng.random()

    logger.info(f"Initialized population of {size} individuals with {gene_length} genes")
    return population


def population_diversity(population) -> float:
    """
    Mean pairwise Euclidean distance between gene vectors.

    Distances are taken one individual at a time against the rest, so the
    full individuals x individuals x genes delta array is never built.
    """
    population = as_population(population)
    if len(population) < 2:
        return 0.0

    distances = []
    for i in range(len(population) - 1):
        distances.append(np.linalg.norm(population[i + 1:] - population[i], axis=1))
    return float(np.concatenate(distances).mean())
