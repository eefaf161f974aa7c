"""
Configuration management for the NEUROEVO system.

This module provides file-based configuration for the network topology, the
genetic operators, the search loop and logging. A seed and log level can also
be supplied through environment variables (optionally from a .env file).
"""

import os
import json
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass, asdict
from dotenv import load_dotenv

from .exceptions import ConfigurationError
from .logging import get_logger


SELECTION_CHOICES = ("roulette", "tournament", "truncate", "none")
CROSSOVER_CHOICES = ("one_point", "two_point", "none")
MUTATION_CHOICES = ("random", "uniform", "gaussian", "none")


# JSON booleans load as bool, which is an int subclass
def _is_integer(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass
class TopologyConfig:
    """Configuration for the three-layer network shape."""
    inputs: int = 2
    hidden: int = 3
    outputs: int = 1


@dataclass
class OperatorsConfig:
    """Configuration for the genetic operators."""
    selection: str = "roulette"
    crossover: str = "one_point"
    mutation: str = "uniform"
    mutation_rate: float = 0.05
    tournament_size: int = 3
    truncation_fraction: float = 0.5


@dataclass
class SearchConfig:
    """Configuration for the generational search loop."""
    population_size: int = 50
    max_generations: int = 100
    patience: int = 20
    min_improvement: int = 1
    log_interval: int = 5
    seed: Optional[int] = None


@dataclass
class LoggingConfig:
    """Configuration for logging output."""
    level: str = "INFO"
    log_file: str = "logs/neuroevo.log"
    enable_file: bool = True


class Config:
    """
    Main configuration class for the NEUROEVO system.

    Defaults are overridden first by a JSON configuration file, then by the
    NEUROEVO_SEED and NEUROEVO_LOG_LEVEL environment variables.
    """

    def __init__(self, config_file: Optional[Path] = None, env_file: Optional[Path] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to JSON configuration file
            env_file: Path to .env file with environment overrides
        """
        self.logger = get_logger(__name__)

        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()

        self.topology = TopologyConfig()
        self.operators = OperatorsConfig()
        self.search = SearchConfig()
        self.logging = LoggingConfig()

        if config_file:
            config_file = Path(config_file)
            if not config_file.exists():
                raise ConfigurationError(f"Config file not found: {config_file}")
            self._load_from_file(config_file)

        self._load_environment()

        self._validate()

        self.logger.debug("Configuration loaded successfully")

    def _load_from_file(self, config_file: Path):
        """Load configuration from JSON file."""
        try:
            with open(config_file, 'r') as f:
                config_data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Failed to load config file {config_file}: {str(e)}")

        if not isinstance(config_data, dict):
            raise ConfigurationError(f"Config file {config_file} must contain a JSON object")

        for section_name, section_data in config_data.items():
            if section_name not in self.sections():
                self.logger.warning(f"Ignoring unknown config section: {section_name}")
                continue
            if not isinstance(section_data, dict):
                raise ConfigurationError(f"Config section {section_name} must be a JSON object")
            section = getattr(self, section_name)
            for key, value in section_data.items():
                if hasattr(section, key):
                    setattr(section, key, value)
                else:
                    self.logger.warning(f"Ignoring unknown config key: {section_name}.{key}")

        self.logger.info(f"Loaded configuration from {config_file}")

    def _load_environment(self):
        """Apply environment variable overrides."""
        seed = os.getenv("NEUROEVO_SEED")
        if seed:
            try:
                self.search.seed = int(seed)
            except ValueError:
                raise ConfigurationError(f"NEUROEVO_SEED must be an integer, got {seed!r}")

        level = os.getenv("NEUROEVO_LOG_LEVEL")
        if level:
            self.logging.level = level.upper()

    def _validate(self):
        """Validate configuration settings."""
        errors = []

        # Topology
        for name in ("inputs", "hidden", "outputs"):
            value = getattr(self.topology, name)
            if not _is_integer(value) or value < 1:
                errors.append(f"Topology {name} must be a positive integer")

        # Operators
        if self.operators.selection not in SELECTION_CHOICES:
            errors.append(f"Selection must be one of {SELECTION_CHOICES}")
        if self.operators.crossover not in CROSSOVER_CHOICES:
            errors.append(f"Crossover must be one of {CROSSOVER_CHOICES}")
        if self.operators.mutation not in MUTATION_CHOICES:
            errors.append(f"Mutation must be one of {MUTATION_CHOICES}")
        if not _is_number(self.operators.mutation_rate) or not 0 <= self.operators.mutation_rate <= 1:
            errors.append("Mutation rate must be between 0 and 1")
        if not _is_integer(self.operators.tournament_size) or self.operators.tournament_size < 1:
            errors.append("Tournament size must be at least 1")
        if not _is_number(self.operators.truncation_fraction) or not 0 < self.operators.truncation_fraction <= 1:
            errors.append("Truncation fraction must be in (0, 1]")

        # Search
        population_size = self.search.population_size
        if not _is_integer(population_size) or population_size < 2 or population_size % 2:
            errors.append("Population size must be an even number of at least 2")
        for name in ("max_generations", "patience", "log_interval"):
            value = getattr(self.search, name)
            if not _is_integer(value) or value <= 0:
                label = name.replace("_", " ").capitalize()
                errors.append(f"{label} must be positive and greater than 0")
        if not _is_number(self.search.min_improvement):
            errors.append("Min improvement must be a number")
        if self.search.seed is not None and not _is_integer(self.search.seed):
            errors.append("Seed must be an integer")

        # Logging
        level = self.logging.level
        if not isinstance(level, str) or level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"Unknown log level: {level}")
        if not isinstance(self.logging.log_file, str):
            errors.append("Log file must be a path string")
        if not isinstance(self.logging.enable_file, bool):
            errors.append("Enable file must be true or false")

        if errors:
            raise ConfigurationError("Configuration validation failed", details=errors)

    def override(self, section_name: str, **values):
        """
        Override values of one section and re-validate.

        None values are skipped so unset command line options keep the
        configured value.
        """
        if section_name not in self.sections():
            raise ConfigurationError(f"Unknown config section: {section_name}")
        section = getattr(self, section_name)
        for key, value in values.items():
            if value is None:
                continue
            if not hasattr(section, key):
                raise ConfigurationError(f"Unknown config key: {section_name}.{key}")
            setattr(section, key, value)
        self._validate()

    @staticmethod
    def sections():
        """Names of the configuration sections."""
        return ("topology", "operators", "search", "logging")

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {name: asdict(getattr(self, name)) for name in self.sections()}

    def save(self, config_file: Path):
        """Save configuration to JSON file."""
        config_file = Path(config_file)
        try:
            config_file.parent.mkdir(parents=True, exist_ok=True)
            with open(config_file, 'w') as f:
                json.dump(self.to_dict(), f, indent=2)
        except OSError as e:
            raise ConfigurationError(f"Failed to save config file {config_file}: {str(e)}")
        self.logger.info(f"Configuration saved to {config_file}")

    def __repr__(self) -> str:
        t = self.topology
        return (
            f"Config(topology=({t.inputs}, {t.hidden}, {t.outputs}), "
            f"selection={self.operators.selection}, crossover={self.operators.crossover}, "
            f"mutation={self.operators.mutation})"
        )


# Global configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Global configuration instance
    """
    global _config
    if _config is None:
        _config = Config()
    return _config


def set_config(config: Optional[Config]):
    """
    Set the global configuration instance.

    Args:
        config: Configuration instance to set (None resets to defaults on next access)
    """
    global _config
    _config = config
