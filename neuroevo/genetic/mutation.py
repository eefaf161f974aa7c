"""
Mutation operators.

Every gene is considered independently: a uniform draw below ``rate`` marks
it for mutation. Genes are assumed to live in [0, 1); the uniform and
gaussian strategies bring perturbed values back into that range with
different policies.
"""

import math

import numpy as np

from ..core.logging import get_logger
from ..utils.validators import as_population, validate_probability
from .random_source import RandomSource

logger = get_logger(__name__)


def _mutate_genes(genes, rate: float, rng: RandomSource, mutate_gene) -> np.ndarray:
    genes = as_population(genes)
    rate = validate_probability(rate, "Mutation rate")

    mutated = genes.copy()
    count = 0
    for i in range(mutated.shape[0]):
        for j in range(mutated.shape[1]):
            if rng.random() < rate:
                mutated[i, j] = mutate_gene(mutated[i, j], rng)
                count += 1

    logger.debug(f"Mutated {count} of {mutated.size} genes")
    return mutated


def _reset(gene: float, rng: RandomSource) -> float:
    return rng.random()


def _uniform_perturb(gene: float, rng: RandomSource) -> float:
    value = gene + rng.random()
    if value > 1:
        value -= 1
    return value


def box_muller(rng: RandomSource) -> float:
    """Standard normal deviate from two uniform draws in (0, 1]."""
    u1 = 1.0 - rng.random()
    u2 = 1.0 - rng.random()
    return math.sqrt(-2.0 * math.log(u1)) * math.sin(2.0 * math.pi * u2)


def _gaussian_perturb(gene: float, rng: RandomSource) -> float:
    # fmod keeps the sign of the dividend, so negatives reflect through abs
    return abs(math.fmod(gene + box_muller(rng), 1.0))


def random_mutation(genes, rate: float, rng: RandomSource) -> np.ndarray:
    """Replace each selected gene with a fresh uniform value in [0, 1)."""
    return _mutate_genes(genes, rate, rng, _reset)


def uniform_mutation(genes, rate: float, rng: RandomSource) -> np.ndarray:
    """
    Add a uniform value in [0, 1) to each selected gene.

    A sum above 1 is wrapped once by subtracting 1, e.g. 0.9 + 0.5 -> 0.4.
    """
    return _mutate_genes(genes, rate, rng, _uniform_perturb)


def gaussian_mutation(genes, rate: float, rng: RandomSource) -> np.ndarray:
    """
    Add a standard normal deviate to each selected gene.

    The result is folded back as ``abs(fmod(value, 1))``, which reflects
    negative values instead of wrapping them.
    """
    return _mutate_genes(genes, rate, rng, _gaussian_perturb)


def no_mutation(genes, rate: float = 0.0) -> np.ndarray:
    """Identity."""
    validate_probability(rate, "Mutation rate")
    return as_population(genes)
