"""
Core functionality for the NEUROEVO system.

This module contains configuration management, logging setup, and custom exceptions.
"""

from .config import Config, get_config, set_config
from .exceptions import (
    NeuroevoException,
    ConfigurationError,
    DataError,
    ValidationError,
    LengthMismatchError,
    OptimizationError,
    OddPopulationError,
    InvalidFractionError,
    ZeroTotalFitnessError,
)
from .logging import setup_logging, configure_logging, get_logger

__all__ = [
    "Config",
    "get_config",
    "set_config",
    "NeuroevoException",
    "ConfigurationError",
    "DataError",
    "ValidationError",
    "LengthMismatchError",
    "OptimizationError",
    "OddPopulationError",
    "InvalidFractionError",
    "ZeroTotalFitnessError",
    "setup_logging",
    "configure_logging",
    "get_logger"
]
