"""
Crossover operators.

Parents are paired in consecutive order, (0, 1), (2, 3), ..., and every pair
yields two children that together hold exactly the parents' genes at each
position.
"""

import numpy as np

from ..core.exceptions import OddPopulationError, ValidationError
from ..core.logging import get_logger
from ..utils.validators import as_population
from .random_source import RandomSource

logger = get_logger(__name__)


def _check_pairable(parents: np.ndarray, min_gene_length: int) -> None:
    if len(parents) % 2:
        raise OddPopulationError(
            f"Crossover pairs parents two by two; got an odd population of {len(parents)}"
        )
    if len(parents) and parents.shape[1] < min_gene_length:
        raise ValidationError(
            f"Gene vectors must have at least {min_gene_length} genes, got {parents.shape[1]}"
        )


def _swap_window(parents: np.ndarray, starts, ends) -> np.ndarray:
    """Children swap the genes of each pair inside ``[start, end)``."""
    children = parents.copy()
    for pair, (start, end) in enumerate(zip(starts, ends)):
        a, b = 2 * pair, 2 * pair + 1
        children[a, start:end] = parents[b, start:end]
        children[b, start:end] = parents[a, start:end]
    return children


def one_point_crossover(parents, rng: RandomSource) -> np.ndarray:
    """
    One-point crossover.

    A division index ``d`` is drawn in ``[0, gene_length)`` per pair. Child A
    keeps parent A's genes before ``d`` and takes parent B's from ``d`` on;
    child B is the mirror image.

    Raises:
        OddPopulationError: If the number of parents is odd
    """
    parents = as_population(parents)
    _check_pairable(parents, min_gene_length=1)

    gene_length = parents.shape[1]
    divisions = [rng.randint(0, gene_length) for _ in range(len(parents) // 2)]

    logger.debug(f"One-point crossover divisions {divisions}")
    return _swap_window(parents, divisions, [gene_length] * len(divisions))


def two_point_crossover(parents, rng: RandomSource) -> np.ndarray:
    """
    Two-point crossover.

    Per pair ``d1`` is drawn in ``[0, gene_length // 2)`` and
    ``d2 = d1 + gene_length // 2``. Child A takes parent B's genes inside
    ``[d1, d2)`` and parent A's elsewhere; child B is the mirror image.

    Raises:
        OddPopulationError: If the number of parents is odd
    """
    parents = as_population(parents)
    _check_pairable(parents, min_gene_length=2)

    half = parents.shape[1] // 2 if len(parents) else 0
    starts = [rng.randint(0, half) for _ in range(len(parents) // 2)]
    ends = [start + half for start in starts]

    logger.debug(f"Two-point crossover windows {list(zip(starts, ends))}")
    return _swap_window(parents, starts, ends)


def no_crossover(parents) -> np.ndarray:
    """Identity: children are the parents unchanged."""
    return as_population(parents)
