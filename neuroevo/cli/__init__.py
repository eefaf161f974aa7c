"""
Command Line Interface for the NEUROEVO system.

This package provides the ``neuroevo`` console script.
"""

from .main import main, topology_command
from .evolve import evolve_command

__all__ = [
    'main',
    'topology_command',
    'evolve_command',
]
