"""
Injectable source of randomness for the genetic operators.

Every operator draws through a RandomSource handle rather than the global
``random`` module, so a run can be replayed exactly from its seed and tests
can substitute fixed draws.
"""

from typing import List, Optional

import numpy as np


class RandomSource:
    """Seeded wrapper around :class:`numpy.random.Generator`."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._seed_sequence = np.random.SeedSequence(seed)
        self._generator = np.random.default_rng(self._seed_sequence)

    def random(self) -> float:
        """Uniform float in [0, 1)."""
        return float(self._generator.random())

    def randint(self, low: int, high: int) -> int:
        """Uniform integer in [low, high)."""
        if high <= low:
            raise ValueError(f"Empty integer range [{low}, {high})")
        return int(self._generator.integers(low, high))

    def spawn(self, count: int) -> List["RandomSource"]:
        """
        Create independent child sources.

        Children are derived deterministically from this source's seed, so a
        caller that hands one child to each worker still replays exactly.
        """
        children = []
        for child_sequence in self._seed_sequence.spawn(count):
            child = RandomSource.__new__(RandomSource)
            child.seed = self.seed
            child._seed_sequence = child_sequence
            child._generator = np.random.default_rng(child_sequence)
            children.append(child)
        return children

    def __repr__(self) -> str:
        return f"RandomSource(seed={self.seed})"
