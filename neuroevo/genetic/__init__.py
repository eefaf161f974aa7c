"""
Genetic algorithm over flat gene vectors: operators, generation pipeline and search loop.
"""

from .random_source import RandomSource
from .selection import roulette_selection, tournament_selection, truncation_selection, no_selection
from .crossover import one_point_crossover, two_point_crossover, no_crossover
from .mutation import random_mutation, uniform_mutation, gaussian_mutation, no_mutation
from .operators import (
    SelectionKind,
    CrossoverKind,
    MutationKind,
    apply_selection,
    apply_crossover,
    apply_mutation,
)
from .pipeline import OperatorConfig, GenerationPipeline, step
from .population import random_population, population_diversity
from .fitness import FitnessEvaluator, DatasetFitnessEvaluator, load_dataset
from .search import GeneticSearch, GeneticSearchConfig, GenerationResult

__all__ = [
    "RandomSource",
    "roulette_selection",
    "tournament_selection",
    "truncation_selection",
    "no_selection",
    "one_point_crossover",
    "two_point_crossover",
    "no_crossover",
    "random_mutation",
    "uniform_mutation",
    "gaussian_mutation",
    "no_mutation",
    "SelectionKind",
    "CrossoverKind",
    "MutationKind",
    "apply_selection",
    "apply_crossover",
    "apply_mutation",
    "OperatorConfig",
    "GenerationPipeline",
    "step",
    "random_population",
    "population_diversity",
    "FitnessEvaluator",
    "DatasetFitnessEvaluator",
    "load_dataset",
    "GeneticSearch",
    "GeneticSearchConfig",
    "GenerationResult",
]
