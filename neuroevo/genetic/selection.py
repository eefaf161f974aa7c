"""
Selection operators.

Each operator maps a population and its aligned fitness scores to a new
population of parents of the same size. Higher fitness is better.
"""

import math

import numpy as np

from ..core.exceptions import (
    InvalidFractionError,
    ValidationError,
    ZeroTotalFitnessError,
)
from ..core.logging import get_logger
from ..utils.validators import as_fitness, as_population
from .random_source import RandomSource

logger = get_logger(__name__)


def roulette_selection(population, fitness, rng: RandomSource) -> np.ndarray:
    """
    Fitness-proportionate selection.

    For every slot a value ``r`` is drawn in ``[0, total_fitness)`` and the
    first individual whose cumulative fitness exceeds ``r`` is chosen.
    Integer fitness arrays get integer draws. Negative scores are allowed;
    they lower the running sum, so an individual whose cumulative fitness
    never exceeds a draw is never chosen.

    Raises:
        ZeroTotalFitnessError: If the fitness scores sum to zero or less
    """
    population = as_population(population)
    fitness = as_fitness(fitness, len(population))

    total_fitness = fitness.sum()
    if total_fitness <= 0:
        raise ZeroTotalFitnessError(
            "Roulette selection cannot weight a population with zero total fitness"
        )

    integral = np.issubdtype(fitness.dtype, np.integer)
    parent_indices = np.empty(len(population), dtype=np.intp)

    for i in range(len(population)):
        if integral:
            draw = rng.randint(0, int(total_fitness))
        else:
            draw = rng.random() * total_fitness

        accumulated = 0
        # Falls back to the last individual if float rounding leaves draw uncovered
        parent_indices[i] = len(population) - 1
        for j in range(len(fitness)):
            accumulated += fitness[j]
            if draw < accumulated:
                parent_indices[i] = j
                break

    logger.debug(f"Roulette selected parents {parent_indices.tolist()}")
    return population[parent_indices]


def tournament_selection(population, fitness, rng: RandomSource, tournament_size: int = 3) -> np.ndarray:
    """
    Tournament selection with replacement.

    For every slot ``tournament_size`` contestants are drawn uniformly and the
    fittest wins; ties go to the contestant drawn first.
    """
    population = as_population(population)
    fitness = as_fitness(fitness, len(population))

    if tournament_size < 1:
        raise ValidationError(f"Tournament size must be at least 1, got {tournament_size}")

    size = len(population)
    parent_indices = np.empty(size, dtype=np.intp)

    for i in range(size):
        winner = rng.randint(0, size)
        for _ in range(tournament_size - 1):
            contestant = rng.randint(0, size)
            if fitness[contestant] > fitness[winner]:
                winner = contestant
        parent_indices[i] = winner

    logger.debug(f"Tournament(k={tournament_size}) selected parents {parent_indices.tolist()}")
    return population[parent_indices]


def truncation_selection(population, fitness, fraction: float = 0.5) -> np.ndarray:
    """
    Truncation selection.

    The population is ranked by descending fitness (stable for ties) and the
    top ``floor(size * fraction)`` individuals are cycled through in rank
    order until every slot is filled.

    Raises:
        InvalidFractionError: If the fraction is outside (0, 1] or selects nobody
    """
    population = as_population(population)
    fitness = as_fitness(fitness, len(population))

    if not 0 < fraction <= 1:
        raise InvalidFractionError(f"Truncation fraction must be in (0, 1], got {fraction}")

    size = len(population)
    truncate_size = math.floor(size * fraction)
    if truncate_size < 1:
        raise InvalidFractionError(
            f"Truncation fraction {fraction} selects no individuals from a population of {size}"
        )

    ranked = np.argsort(-fitness, kind="stable")
    parent_indices = ranked[np.arange(size) % truncate_size]

    logger.debug(f"Truncation kept top {truncate_size} of {size}")
    return population[parent_indices]


def no_selection(population, fitness=None) -> np.ndarray:
    """Identity: the population is its own parent set."""
    population = as_population(population)
    if fitness is not None:
        as_fitness(fitness, len(population))
    return population
