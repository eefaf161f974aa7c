"""
Tests for operator kinds and dispatch.
"""

import pytest
import numpy as np

from neuroevo.core.exceptions import ConfigurationError
from neuroevo.genetic import (
    CrossoverKind,
    MutationKind,
    SelectionKind,
    apply_crossover,
    apply_mutation,
    apply_selection,
)

pytestmark = [
    pytest.mark.unit,
    pytest.mark.genetic
]


class TestParse:

    @pytest.mark.parametrize("name, expected", [
        ("roulette", SelectionKind.ROULETTE),
        ("Tournament", SelectionKind.TOURNAMENT),
        (" truncate ", SelectionKind.TRUNCATE),
        (SelectionKind.NONE, SelectionKind.NONE),
    ])
    def test_selection_names(self, name, expected):
        assert SelectionKind.parse(name) is expected

    def test_hyphenated_names(self):
        assert CrossoverKind.parse("two-point") is CrossoverKind.TWO_POINT
        assert CrossoverKind.parse("ONE_POINT") is CrossoverKind.ONE_POINT

    def test_kinds_compare_as_strings(self):
        assert MutationKind.GAUSSIAN == "gaussian"

    def test_unknown_name(self):
        with pytest.raises(ConfigurationError) as exc_info:
            MutationKind.parse("cosmic_ray")
        assert exc_info.value.details == ["random", "uniform", "gaussian", "none"]

    def test_non_string(self):
        with pytest.raises(ConfigurationError):
            CrossoverKind.parse(3)


class TestDispatch:

    def test_selection_dispatch(self, sample_population, scripted_rng):
        parents = apply_selection("roulette", sample_population, [1, 2, 3, 4], scripted_rng(maximum=True))
        np.testing.assert_array_equal(parents[0], sample_population[3])

    def test_truncation_dispatch_passes_fraction(self, sample_population, rng):
        parents = apply_selection(
            SelectionKind.TRUNCATE, sample_population, [1, 2, 3, 4], rng, truncation_fraction=0.25
        )
        for row in parents:
            np.testing.assert_array_equal(row, sample_population[3])

    def test_tournament_dispatch_passes_size(self, sample_population, scripted_rng):
        rng = scripted_rng(maximum=True)
        apply_selection("tournament", sample_population, [1, 2, 3, 4], rng, tournament_size=5)
        assert len(rng.int_calls) == 4 * 5

    def test_none_selection(self, sample_population, rng):
        parents = apply_selection("none", sample_population, [1, 2, 3, 4], rng)
        np.testing.assert_array_equal(parents, sample_population)

    def test_crossover_dispatch(self, scripted_rng):
        parents = np.array([[0.0] * 4, [1.0] * 4])
        children = apply_crossover("one_point", parents, scripted_rng(ints=[2]))
        np.testing.assert_array_equal(children, [[0, 0, 1, 1], [1, 1, 0, 0]])

    def test_none_crossover_draws_nothing(self, sample_population, scripted_rng):
        rng = scripted_rng()
        children = apply_crossover(CrossoverKind.NONE, sample_population, rng)
        np.testing.assert_array_equal(children, sample_population)
        assert rng.int_calls == []

    def test_mutation_dispatch(self, scripted_rng):
        mutated = apply_mutation("uniform", [[0.9]], 1.0, scripted_rng(floats=[0.0, 0.5]))
        assert mutated[0, 0] == pytest.approx(0.4)

    def test_none_mutation(self, sample_population, scripted_rng):
        mutated = apply_mutation("none", sample_population, 1.0, scripted_rng())
        np.testing.assert_array_equal(mutated, sample_population)
