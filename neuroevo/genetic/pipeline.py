"""
Generation pipeline.

One generation step runs selection, crossover and mutation in that fixed
order, each stage consuming the previous stage's output.
"""

from dataclasses import dataclass
from typing import Optional, Union

import numpy as np

from ..core.exceptions import InvalidFractionError, ValidationError
from ..core.logging import get_logger
from ..utils.validators import as_fitness, as_population, validate_probability
from .operators import (
    CrossoverKind,
    MutationKind,
    SelectionKind,
    apply_crossover as run_crossover,
    apply_mutation as run_mutation,
    apply_selection as run_selection,
)
from .random_source import RandomSource

logger = get_logger(__name__)


@dataclass
class OperatorConfig:
    """Operator choice for a generation step."""

    selection: Union[SelectionKind, str] = SelectionKind.ROULETTE
    crossover: Union[CrossoverKind, str] = CrossoverKind.ONE_POINT
    mutation: Union[MutationKind, str] = MutationKind.UNIFORM
    mutation_rate: float = 0.05
    tournament_size: int = 3
    truncation_fraction: float = 0.5

    def __post_init__(self):
        self.selection = SelectionKind.parse(self.selection)
        self.crossover = CrossoverKind.parse(self.crossover)
        self.mutation = MutationKind.parse(self.mutation)
        self.mutation_rate = validate_probability(self.mutation_rate, "Mutation rate")
        if self.tournament_size < 1:
            raise ValidationError(f"Tournament size must be at least 1, got {self.tournament_size}")
        if not 0 < self.truncation_fraction <= 1:
            raise InvalidFractionError(
                f"Truncation fraction must be in (0, 1], got {self.truncation_fraction}"
            )

    @classmethod
    def from_config(cls, config) -> "OperatorConfig":
        """Build from the ``operators`` section of a :class:`neuroevo.core.config.Config`."""
        section = config.operators
        return cls(
            selection=section.selection,
            crossover=section.crossover,
            mutation=section.mutation,
            mutation_rate=section.mutation_rate,
            tournament_size=section.tournament_size,
            truncation_fraction=section.truncation_fraction,
        )


def step(
    population,
    fitness,
    selection,
    crossover,
    mutation,
    mutation_rate: float,
    rng: RandomSource,
    tournament_size: int = 3,
    truncation_fraction: float = 0.5,
) -> np.ndarray:
    """
    Produce the next generation.

    Args:
        population: Current gene vectors, one row per individual
        fitness: Fitness scores aligned with ``population``
        selection: SelectionKind or its name
        crossover: CrossoverKind or its name
        mutation: MutationKind or its name
        mutation_rate: Per-gene mutation probability in [0, 1]
        rng: Random source shared by all three stages
        tournament_size: Contestants per tournament (tournament selection only)
        truncation_fraction: Share of top individuals kept (truncation only)

    Returns:
        New population with the same shape as ``population``
    """
    population = as_population(population)
    fitness = as_fitness(fitness, len(population))

    parents = run_selection(
        selection, population, fitness, rng,
        tournament_size=tournament_size,
        truncation_fraction=truncation_fraction,
    )
    logger.debug(f"Selection ({SelectionKind.parse(selection).value}) produced {len(parents)} parents")

    children = run_crossover(crossover, parents, rng)
    logger.debug(f"Crossover ({CrossoverKind.parse(crossover).value}) produced {len(children)} children")

    mutated = run_mutation(mutation, children, mutation_rate, rng)
    logger.debug(f"Mutation ({MutationKind.parse(mutation).value}, rate={mutation_rate}) applied")

    return mutated


class GenerationPipeline:
    """
    Generation step bound to an operator configuration and a random source.

    This is the entry point the search loop calls once per generation.
    """

    def __init__(self, config: Optional[OperatorConfig] = None, rng: Optional[RandomSource] = None):
        self.config = config or OperatorConfig()
        self.rng = rng or RandomSource()

    def step(self, population, fitness) -> np.ndarray:
        config = self.config
        return step(
            population,
            fitness,
            config.selection,
            config.crossover,
            config.mutation,
            config.mutation_rate,
            self.rng,
            tournament_size=config.tournament_size,
            truncation_fraction=config.truncation_fraction,
        )

    def __repr__(self) -> str:
        return f"GenerationPipeline(config={self.config}, rng={self.rng})"
