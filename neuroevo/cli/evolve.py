"""
Evolution CLI for the NEUROEVO system.

This module provides a command-line interface for evolving network weights
against a CSV dataset.
"""

import argparse
from pathlib import Path
from typing import Any, Dict, Optional

from ..core.config import Config, SELECTION_CHOICES, CROSSOVER_CHOICES, MUTATION_CHOICES, set_config
from ..core.logging import configure_logging, get_logger
from ..genetic import (
    DatasetFitnessEvaluator,
    GeneticSearch,
    GeneticSearchConfig,
    OperatorConfig,
    load_dataset,
)
from ..network import Topology


def _split_columns(value: str) -> list:
    return [column.strip() for column in value.split(',') if column.strip()]


def _load_config(parsed_args: argparse.Namespace) -> Config:
    config = Config(config_file=parsed_args.config, env_file=parsed_args.env_file)
    config.override(
        "topology",
        hidden=parsed_args.hidden,
    )
    config.override(
        "operators",
        selection=parsed_args.selection,
        crossover=parsed_args.crossover,
        mutation=parsed_args.mutation,
        mutation_rate=parsed_args.mutation_rate,
        tournament_size=parsed_args.tournament_size,
        truncation_fraction=parsed_args.truncation_fraction,
    )
    config.override(
        "search",
        population_size=parsed_args.population_size,
        max_generations=parsed_args.max_generations,
        patience=parsed_args.patience,
        seed=parsed_args.seed,
    )
    config.override(
        "logging",
        level=parsed_args.log_level,
        log_file=str(parsed_args.log_file) if parsed_args.log_file else None,
    )
    if parsed_args.no_log_file:
        config.logging.enable_file = False
    return config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="neuroevo evolve",
        description="Evolve network weights against a CSV dataset",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Fit y from x1,x2 with default operators
  neuroevo evolve --data-path data.csv --inputs x1,x2 --targets y

  # Tournament selection, two-point crossover, gaussian mutation
  neuroevo evolve --data-path data.csv --inputs x1,x2 --targets y \\
      --selection tournament --crossover two_point --mutation gaussian --mutation-rate 0.02
        """
    )

    # -- Configuration ------------------------------------
    config_group = parser.add_argument_group('Configuration')
    config_group.add_argument('--config', '-c', type=Path, help='Path to configuration file (JSON)')
    config_group.add_argument('--env-file', '-e', type=Path, help='Path to .env file with NEUROEVO_* overrides')

    # -- Data Parameters ----------------------------------
    data_group = parser.add_argument_group('Data Parameters')
    data_group.add_argument('--data-path', type=Path, required=True, help='Path to CSV dataset')
    data_group.add_argument('--inputs', type=_split_columns, required=True,
                            help='Comma-separated input columns, one per input neuron')
    data_group.add_argument('--targets', type=_split_columns, required=True,
                            help='Comma-separated target columns, one per output neuron')

    # -- Network ------------------------------------------
    network_group = parser.add_argument_group('Network')
    network_group.add_argument('--hidden', type=int, help='Hidden layer size')

    # -- Genetic Operators --------------------------------
    operator_group = parser.add_argument_group('Genetic Operators')
    operator_group.add_argument('--selection', choices=SELECTION_CHOICES, help='Selection operator')
    operator_group.add_argument('--crossover', choices=CROSSOVER_CHOICES, help='Crossover operator')
    operator_group.add_argument('--mutation', choices=MUTATION_CHOICES, help='Mutation operator')
    operator_group.add_argument('--mutation-rate', type=float, help='Per-gene mutation probability')
    operator_group.add_argument('--tournament-size', type=int, help='Contestants per tournament')
    operator_group.add_argument('--truncation-fraction', type=float, help='Share of population kept by truncation')

    # -- Genetic Search -----------------------------------
    search_group = parser.add_argument_group('Genetic Search')
    search_group.add_argument('--population-size', type=int, help='Population size (even)')
    search_group.add_argument('--max-generations', type=int, help='Max generations')
    search_group.add_argument('--patience', type=int, help='Early stopping patience')
    search_group.add_argument('--seed', type=int, help='Random seed')

    # -- Output ------------------------------------------
    output_group = parser.add_argument_group('Output')
    output_group.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'], help='Logging level')
    output_group.add_argument('--log-file', type=Path, help='Log file path')
    output_group.add_argument('--no-log-file', action='store_true', help='Log to console only')

    return parser


def evolve_command(args: Optional[list] = None) -> Dict[str, Any]:
    parsed_args = build_parser().parse_args(args)

    config = _load_config(parsed_args)
    set_config(config)

    configure_logging(config.logging)
    logger = get_logger(__name__)
    logger.info(f"Configuration: {config}")

    inputs, targets = load_dataset(parsed_args.data_path, parsed_args.inputs, parsed_args.targets)
    topology = Topology(
        inputs=len(parsed_args.inputs),
        hidden=config.topology.hidden,
        outputs=len(parsed_args.targets),
    )

    search = GeneticSearch(
        fitness_evaluator=DatasetFitnessEvaluator(topology, inputs, targets),
        topology=topology,
        operators=OperatorConfig.from_config(config),
        config=GeneticSearchConfig.from_config(config),
        seed=config.search.seed,
    )
    best_genes, best_fitness = search.run()

    summary = search.get_search_summary()
    print("\n=== Evolution Completed ===")
    print(f"Topology: {topology} ({topology.param_count} genes)")
    print(f"Generations: {summary['total_generations']}")
    print(f"Best fitness: {best_fitness}")
    print(f"Best MSE: {search.fitness_evaluator.mean_squared_error(best_genes):.6f}")
    print("Best genes: " + " ".join(f"{gene:.6f}" for gene in best_genes))
    return summary


if __name__ == "__main__":
    evolve_command()
