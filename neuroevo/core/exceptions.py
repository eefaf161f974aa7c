"""
Custom exceptions for the NEUROEVO system.

This module defines a hierarchy of exceptions that provide specific error handling
for the network codec, the genetic operators and the search driver.
"""

from typing import Optional, Any

class NeuroevoException(Exception):
    """Base exception for errors."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class ConfigurationError(NeuroevoException):
    """Raised when there are issues with configuration settings."""
    pass


class DataError(NeuroevoException):
    """Raised when there are issues loading or preparing datasets."""
    pass


class ValidationError(NeuroevoException):
    """Raised when data or parameters fail validation."""
    pass


class LengthMismatchError(ValidationError):
    """Raised when gene, network, input or fitness sizes disagree."""
    pass


class OptimizationError(NeuroevoException):
    """Raised when there are issues during genetic optimization."""
    pass


class OddPopulationError(OptimizationError):
    """Raised when crossover is asked to pair an odd number of parents."""
    pass


class InvalidFractionError(OptimizationError):
    """Raised when a truncation fraction selects no individuals."""
    pass


class ZeroTotalFitnessError(OptimizationError):
    """Raised when roulette selection has no positive fitness to weight by."""
    pass
