"""
Utility functions for the NEUROEVO system.

This module contains validators shared by the network and genetic packages.
"""

from .validators import as_population, as_fitness, validate_probability, validate_dataframe

__all__ = [
    "as_population",
    "as_fitness",
    "validate_probability",
    "validate_dataframe",
]
