"""
Operator kinds and dispatch.

Selection, crossover and mutation each come in a small closed set of
variants. A kind is an Enum member; ``apply_selection``, ``apply_crossover`` and
``apply_mutation`` dispatch a kind to the matching operator function.
"""

from enum import Enum
from typing import Union

import numpy as np

from ..core.exceptions import ConfigurationError
from .random_source import RandomSource
from . import crossover as crossover_ops
from . import mutation as mutation_ops
from . import selection as selection_ops


class _OperatorKind(str, Enum):

    @classmethod
    def parse(cls, kind: Union[str, "_OperatorKind"]):
        """Resolve an enum member or a case-insensitive name such as ``"one_point"``."""
        if isinstance(kind, cls):
            return kind
        if isinstance(kind, str):
            normalized = kind.strip().lower().replace("-", "_")
            for member in cls:
                if member.value == normalized:
                    return member
        choices = [member.value for member in cls]
        raise ConfigurationError(f"Unknown {cls.__name__} {kind!r}", details=choices)


class SelectionKind(_OperatorKind):
    ROULETTE = "roulette"
    TOURNAMENT = "tournament"
    TRUNCATE = "truncate"
    NONE = "none"


class CrossoverKind(_OperatorKind):
    ONE_POINT = "one_point"
    TWO_POINT = "two_point"
    NONE = "none"


class MutationKind(_OperatorKind):
    RANDOM = "random"
    UNIFORM = "uniform"
    GAUSSIAN = "gaussian"
    NONE = "none"


def apply_selection(
    kind,
    population,
    fitness,
    rng: RandomSource,
    tournament_size: int = 3,
    truncation_fraction: float = 0.5,
) -> np.ndarray:
    """Run the selection operator named by ``kind``."""
    kind = SelectionKind.parse(kind)
    if kind is SelectionKind.ROULETTE:
        return selection_ops.roulette_selection(population, fitness, rng)
    if kind is SelectionKind.TOURNAMENT:
        return selection_ops.tournament_selection(population, fitness, rng, tournament_size)
    if kind is SelectionKind.TRUNCATE:
        return selection_ops.truncation_selection(population, fitness, truncation_fraction)
    return selection_ops.no_selection(population, fitness)


_CROSSOVERS = {
    CrossoverKind.ONE_POINT: crossover_ops.one_point_crossover,
    CrossoverKind.TWO_POINT: crossover_ops.two_point_crossover,
}

_MUTATIONS = {
    MutationKind.RANDOM: mutation_ops.random_mutation,
    MutationKind.UNIFORM: mutation_ops.uniform_mutation,
    MutationKind.GAUSSIAN: mutation_ops.gaussian_mutation,
}


def apply_crossover(kind, parents, rng: RandomSource) -> np.ndarray:
    """Run the crossover operator named by ``kind``."""
    kind = CrossoverKind.parse(kind)
    if kind is CrossoverKind.NONE:
        return crossover_ops.no_crossover(parents)
    return _CROSSOVERS[kind](parents, rng)


def apply_mutation(kind, genes, rate: float, rng: RandomSource) -> np.ndarray:
    """Run the mutation operator named by ``kind``."""
    kind = MutationKind.parse(kind)
    if kind is MutationKind.NONE:
        return mutation_ops.no_mutation(genes, rate)
    return _MUTATIONS[kind](genes, rate, rng)
