"""
Validation utilities for the NEUROEVO system.

This module provides validation and coercion functions for populations,
fitness arrays, probabilities and tabular datasets.
"""

import pandas as pd
import numpy as np
from typing import List, Optional, Sequence

from ..core.exceptions import ValidationError, LengthMismatchError
from ..core.logging import get_logger


def as_population(population: Sequence[Sequence[float]]) -> np.ndarray:
    """
    Convert a population to a 2-D float array.

    Args:
        population: Sequence of equally long gene vectors

    Returns:
        Array of shape (population_size, gene_length)

    Raises:
        LengthMismatchError: If gene vectors differ in length
        ValidationError: If the population is not two-dimensional
    """
    if population is None:
        raise ValidationError("Population cannot be None")

    if isinstance(population, np.ndarray):
        array = population.astype(np.float64, copy=False)
    else:
        rows = [np.asarray(genes, dtype=np.float64) for genes in population]
        lengths = {row.shape for row in rows}
        if len(lengths) > 1:
            raise LengthMismatchError(
                "All gene vectors in a population must have the same length",
                details=sorted(len(row) for row in rows)
            )
        array = np.array(rows, dtype=np.float64) if rows else np.empty((0, 0))

    if array.ndim != 2:
        raise ValidationError(f"Population must be two-dimensional, got {array.ndim} dimensions")

    return array


def as_fitness(fitness: Sequence[float], population_size: int) -> np.ndarray:
    """
    Convert fitness scores to a 1-D array aligned with a population.

    Integer inputs keep an integer dtype so callers can draw integer
    roulette values.

    Raises:
        LengthMismatchError: If the fitness count differs from the population size
    """
    array = np.asarray(fitness)
    if array.ndim != 1:
        raise ValidationError(f"Fitness must be one-dimensional, got {array.ndim} dimensions")
    if not (np.issubdtype(array.dtype, np.integer) or np.issubdtype(array.dtype, np.floating)):
        raise ValidationError(f"Fitness must be numeric, got dtype {array.dtype}")
    if len(array) != population_size:
        raise LengthMismatchError(
            f"Fitness length {len(array)} does not match population size {population_size}"
        )
    return array


def validate_probability(value: float, name: str = "probability") -> float:
    """
    Validate that a value lies in [0, 1].

    Raises:
        ValidationError: If the value is outside [0, 1]
    """
    if not isinstance(value, (int, float, np.floating)) or not 0 <= value <= 1:
        raise ValidationError(f"{name} must be between 0 and 1, got {value!r}")
    return float(value)


def validate_dataframe(
    df: pd.DataFrame,
    required_columns: Optional[List[str]] = None,
    min_rows: int = 1,
    check_nulls: bool = True,
    check_infinite: bool = True
) -> bool:
    """
    Validate a pandas DataFrame holding a training dataset.

    Args:
        df: DataFrame to validate
        required_columns: List of required column names
        min_rows: Minimum number of rows required
        check_nulls: Whether to reject null values
        check_infinite: Whether to reject infinite values

    Returns:
        True if validation passes

    Raises:
        ValidationError: If validation fails
    """
    logger = get_logger(__name__)

    if df is None:
        raise ValidationError("DataFrame cannot be None")

    if not isinstance(df, pd.DataFrame):
        raise ValidationError(f"Expected pandas DataFrame, got {type(df)}")

    if len(df) < min_rows:
        raise ValidationError(f"DataFrame must have at least {min_rows} rows, got {len(df)}")

    if required_columns:
        missing_columns = set(required_columns) - set(df.columns)
        if missing_columns:
            raise ValidationError(f"Missing required columns: {sorted(missing_columns)}")

    columns = required_columns or list(df.columns)

    if check_nulls:
        null_counts = df[columns].isnull().sum()
        if null_counts.any():
            raise ValidationError(
                "Found null values in columns",
                details=null_counts[null_counts > 0].to_dict()
            )

    if check_infinite:
        numeric_columns = df[columns].select_dtypes(include=[np.number]).columns
        for col in numeric_columns:
            if np.isinf(df[col]).any():
                raise ValidationError(f"Found infinite values in column: {col}")

    logger.debug(f"DataFrame validation passed: {len(df)} rows, {len(df.columns)} columns")
    return True
