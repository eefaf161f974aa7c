"""
Genetic search over network weights.

This module drives the generational loop: initialize a population, score it,
track the best individual, and hand population and fitness to the
generation pipeline until the generation budget runs out or progress stalls.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from ..core.exceptions import LengthMismatchError, ValidationError
from ..core.logging import get_logger, log_with_correlation
from ..network.codec import decode
from ..network.neural_network import NeuralNetwork, Topology
from ..utils.validators import as_population
from .fitness import FitnessEvaluator
from .pipeline import GenerationPipeline, OperatorConfig
from .population import population_diversity, random_population
from .random_source import RandomSource

logger = get_logger(__name__)


@dataclass
class GeneticSearchConfig:
    """Configuration for the genetic search loop."""

    population_size: int = 50
    max_generations: int = 100

    # Early stopping
    patience: int = 20
    min_improvement: int = 1

    # Logging
    log_interval: int = 5

    def __post_init__(self):
        if self.population_size < 2 or self.population_size % 2:
            raise ValidationError(
                f"Population size must be an even number of at least 2, got {self.population_size}"
            )
        if self.max_generations < 1:
            raise ValidationError(f"Max generations must be at least 1, got {self.max_generations}")
        if self.patience < 1:
            raise ValidationError(f"Patience must be at least 1, got {self.patience}")

    @classmethod
    def from_config(cls, config) -> "GeneticSearchConfig":
        """Build from the ``search`` section of a :class:`neuroevo.core.config.Config`."""
        section = config.search
        return cls(
            population_size=section.population_size,
            max_generations=section.max_generations,
            patience=section.patience,
            min_improvement=section.min_improvement,
            log_interval=section.log_interval,
        )


@dataclass
class GenerationResult:
    """Result of a single generation."""

    generation: int
    best_fitness: int
    avg_fitness: float
    worst_fitness: int
    best_genes: np.ndarray
    population_diversity: float
    metadata: Dict[str, Any] = field(default_factory=dict)


class GeneticSearch:
    """
    Genetic algorithm over the weights of a fixed-topology network.

    The population is a 2-D array of gene vectors; fitness comes from a
    :class:`FitnessEvaluator` and the next generation from a
    :class:`GenerationPipeline`.
    """

    def __init__(
        self,
        fitness_evaluator: FitnessEvaluator,
        topology: Topology,
        operators: Optional[OperatorConfig] = None,
        config: Optional[GeneticSearchConfig] = None,
        seed: Optional[int] = None
    ):
        """
        Initialize genetic search.

        Args:
            fitness_evaluator: Evaluator for gene vector fitness
            topology: Network shape the gene vectors encode
            operators: Selection, crossover and mutation choice
            config: Genetic search configuration
            seed: Random seed for reproducibility
        """
        self.fitness_evaluator = fitness_evaluator
        self.topology = topology
        self.operators = operators or OperatorConfig()
        self.config = config or GeneticSearchConfig()
        self.seed = seed

        self.rng = RandomSource(seed)
        self.pipeline = GenerationPipeline(self.operators, self.rng)

        # Initialize state
        self.population: Optional[np.ndarray] = None
        self.generation_history: List[GenerationResult] = []
        self.best_genes: Optional[np.ndarray] = None
        self.best_fitness: Optional[int] = None
        self.generation: int = 0
        self.best_fitness_history: List[int] = []

    def initialize_population(self) -> None:
        """Initialize the population with uniform random gene vectors."""
        logger.info(f"Initializing population of size {self.config.population_size}")
        self.population = random_population(
            self.config.population_size, self.topology.param_count, self.rng
        )

    @log_with_correlation
    def run(self, initial_population=None) -> Tuple[np.ndarray, int]:
        """
        Run the genetic algorithm.

        Args:
            initial_population: Optional population to start from instead of
                a random one

        Returns:
            Tuple of (best_genes, best_fitness)
        """
        logger.info(
            f"Starting genetic search: topology {self.topology}, "
            f"{self.topology.param_count} genes, operators "
            f"{self.operators.selection.value}/{self.operators.crossover.value}/"
            f"{self.operators.mutation.value}"
        )

        if initial_population is not None:
            self.population = self._check_initial_population(initial_population)
        else:
            self.initialize_population()

        for generation in range(self.config.max_generations):
            self.generation = generation

            fitness = self.fitness_evaluator.evaluate_population(self.population)
            self._update_best_solution(fitness)

            result = self._create_generation_result(fitness)
            self.generation_history.append(result)

            if (generation + 1) % self.config.log_interval == 0:
                self._log_generation_progress(result)

            if self._should_stop_early():
                logger.info(f"Early stopping at generation {generation + 1}")
                break

            # The last generation is scored but not bred
            if generation + 1 < self.config.max_generations:
                self.population = self.pipeline.step(self.population, fitness)

        logger.info(f"Genetic search completed: best fitness {self.best_fitness}")
        return self.best_genes, self.best_fitness

    def _check_initial_population(self, population) -> np.ndarray:
        population = as_population(population)
        if population.shape[1] != self.topology.param_count:
            raise LengthMismatchError(
                f"Initial population has {population.shape[1]} genes per individual, "
                f"topology {self.topology} needs {self.topology.param_count}"
            )
        if len(population) != self.config.population_size:
            logger.warning(f"Initial population size {len(population)} "
                           f"doesn't match config size {self.config.population_size}")
        return population.copy()

    def _update_best_solution(self, fitness: np.ndarray) -> None:
        """Update the best solution found so far."""
        best_index = int(np.argmax(fitness))
        if self.best_fitness is None or fitness[best_index] > self.best_fitness:
            self.best_fitness = int(fitness[best_index])
            self.best_genes = self.population[best_index].copy()
            logger.info(f"New best fitness: {self.best_fitness}")

        self.best_fitness_history.append(self.best_fitness)

    def _create_generation_result(self, fitness: np.ndarray) -> GenerationResult:
        """Create result summary for current generation."""
        best_index = int(np.argmax(fitness))
        return GenerationResult(
            generation=self.generation,
            best_fitness=int(fitness[best_index]),
            avg_fitness=float(np.mean(fitness)),
            worst_fitness=int(np.min(fitness)),
            best_genes=self.population[best_index].copy(),
            population_diversity=population_diversity(self.population),
            metadata={
                "fitness_std": float(np.std(fitness)),
                "num_evaluations": len(fitness)
            }
        )

    def _log_generation_progress(self, result: GenerationResult) -> None:
        logger.info(
            f"Generation {result.generation + 1}: "
            f"Best={result.best_fitness}, "
            f"Avg={result.avg_fitness:.2f}, "
            f"Worst={result.worst_fitness}, "
            f"Diversity={result.population_diversity:.4f}"
        )

    def _should_stop_early(self) -> bool:
        """Stop when the best fitness improved less than min_improvement over the last patience generations."""
        if len(self.best_fitness_history) <= self.config.patience:
            return False

        recent_improvement = (
            self.best_fitness_history[-1] -
            self.best_fitness_history[-1 - self.config.patience]
        )
        return recent_improvement < self.config.min_improvement

    def best_network(self) -> NeuralNetwork:
        """Decode the best gene vector found so far."""
        if self.best_genes is None:
            raise ValidationError("No generation has been evaluated yet")
        return decode(self.best_genes, self.topology)

    def get_search_summary(self) -> Dict[str, Any]:
        """Get a summary of the search results."""
        return {
            "best_fitness": self.best_fitness,
            "best_genes": None if self.best_genes is None else self.best_genes.tolist(),
            "total_generations": len(self.generation_history),
            "population_size": self.config.population_size,
            "topology": str(self.topology),
            "final_population_diversity": (
                population_diversity(self.population) if self.population is not None else 0.0
            ),
            "fitness_history": list(self.best_fitness_history),
            "seed": self.seed,
        }
