"""Tests for bracketed root finding."""

import math

import pytest

from vcrc.core.errors import ConstructionValidationError, SolverDivergenceError
from vcrc.core.fluids import InvalidStateError
from vcrc.core.solvers import finite_difference, find_root_near_guess


class TestFiniteDifference:
    def test_central(self):
        assert finite_difference(lambda x: x**2, 3.0, 0.0, 10.0) == pytest.approx(6.0, rel=1e-6)

    def test_one_sided_at_bracket_edge(self):
        assert finite_difference(lambda x: x**2, 1.0, 0.0, 1.0) == pytest.approx(2.0, rel=1e-4)


class TestFindRootNearGuess:
    def test_quadratic(self):
        root = find_root_near_guess(lambda x: x**2 - 2.0, 1.0, 0.0, 2.0, 1e-10)
        assert root == pytest.approx(math.sqrt(2.0), abs=1e-9)

    def test_picks_root_near_guess(self):
        root = find_root_near_guess(lambda x: math.sin(x), 3.0, 2.0, 4.0, 1e-10)
        assert root == pytest.approx(math.pi, abs=1e-9)

    def test_guess_outside_bracket(self):
        with pytest.raises(SolverDivergenceError):
            find_root_near_guess(lambda x: x - 0.5, 2.0, 0.0, 1.0, 1e-8)

    def test_iterate_leaves_bracket(self):
        # The root at 10 lies outside the bracket.
        with pytest.raises(SolverDivergenceError):
            find_root_near_guess(lambda x: x - 10.0, 0.5, 0.0, 1.0, 1e-8)

    def test_invalid_state_becomes_divergence(self):
        def residual(x):
            raise InvalidStateError("no such state")

        with pytest.raises(SolverDivergenceError, match="no such state"):
            find_root_near_guess(residual, 0.5, 0.0, 1.0, 1e-8)

    def test_validation_errors_propagate(self):
        def residual(x):
            raise ConstructionValidationError("bad input")

        with pytest.raises(ConstructionValidationError, match="bad input"):
            find_root_near_guess(residual, 0.5, 0.0, 1.0, 1e-8)

    def test_no_root(self):
        with pytest.raises(SolverDivergenceError):
            find_root_near_guess(lambda x: x**2 + 1.0, 0.5, -1.0, 1.0, 1e-12, max_iterations=5)
