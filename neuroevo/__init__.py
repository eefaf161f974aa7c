"""
NEUROEVO - Genetic Algorithm Neuroevolution

Evolves the weights of small three-layer feed-forward networks. Each network
is encoded as a flat vector of genes; populations of gene vectors are
improved by selection, crossover and mutation.
"""

__version__ = "0.1.0"

from .core.config import Config
from .core.logging import setup_logging
from .network import Topology, NeuralNetwork, encode, decode, evaluate
from .genetic import (
    RandomSource,
    SelectionKind,
    CrossoverKind,
    MutationKind,
    OperatorConfig,
    GenerationPipeline,
    step,
    GeneticSearch,
    GeneticSearchConfig,
    FitnessEvaluator,
    DatasetFitnessEvaluator,
)

__all__ = [
    "Config",
    "setup_logging",
    "Topology",
    "NeuralNetwork",
    "encode",
    "decode",
    "evaluate",
    "RandomSource",
    "SelectionKind",
    "CrossoverKind",
    "MutationKind",
    "OperatorConfig",
    "GenerationPipeline",
    "step",
    "GeneticSearch",
    "GeneticSearchConfig",
    "FitnessEvaluator",
    "DatasetFitnessEvaluator",
]
