"""Bracketed Newton-Raphson root finding.

The cycle closures (ejector flow ratio, ejector diffuser pressure, Zubadan
injection quality) are all scalar problems with a physical bracket and a
good initial guess.  They are solved with ``scipy.optimize.newton`` fed a
finite-difference derivative; any step outside the bracket is a failure.
"""

from __future__ import annotations

import logging
from typing import Callable

from scipy.optimize import newton

from vcrc.core.errors import SolverDivergenceError
from vcrc.core.fluids import InvalidStateError

logger = logging.getLogger(__name__)

DERIVATIVE_STEP = 1e-6  # relative finite-difference step
MAX_ITERATIONS = 100


class _OutOfBracketError(ArithmeticError):
    """Internal signal: the Newton iterate left the bracket."""


def finite_difference(
    func: Callable[[float], float],
    x: float,
    lower: float,
    upper: float,
    step: float = DERIVATIVE_STEP,
) -> float:
    """Central difference of *func* at *x*, one-sided at the bracket edges."""
    h = step * max(abs(x), 1.0)
    lo = max(x - h, lower)
    hi = min(x + h, upper)
    return (func(hi) - func(lo)) / (hi - lo)


def find_root_near_guess(
    func: Callable[[float], float],
    guess: float,
    lower: float,
    upper: float,
    tolerance: float,
    max_iterations: int = MAX_ITERATIONS,
) -> float:
    """Find a root of *func* inside [lower, upper] starting from *guess*.

    Args:
        func: Residual function.
        guess: Initial iterate.
        lower: Lower end of the bracket.
        upper: Upper end of the bracket.
        tolerance: Absolute step tolerance on the root.
        max_iterations: Newton iteration budget.

    Returns:
        The root.

    Raises:
        SolverDivergenceError: If the iteration leaves the bracket, does not
            converge, or the residual cannot be evaluated.
    """

    def bounded(x: float) -> float:
        if not lower <= x <= upper:
            raise _OutOfBracketError(f"Iterate {x:g} left the bracket [{lower:g}, {upper:g}]")
        return func(x)

    def derivative(x: float) -> float:
        return finite_difference(bounded, x, lower, upper)

    try:
        root, info = newton(
            bounded,
            guess,
            fprime=derivative,
            tol=tolerance,
            maxiter=max_iterations,
            full_output=True,
            disp=False,
        )
    except (_OutOfBracketError, InvalidStateError, RuntimeError, ZeroDivisionError) as exc:
        raise SolverDivergenceError(f"Root finding failed: {exc}") from exc

    if not info.converged or not lower <= root <= upper:
        raise SolverDivergenceError(
            f"Root finding did not converge after {info.iterations} iterations ({info.flag})"
        )
    logger.debug("Converged to %g in %d iterations", root, info.iterations)
    return float(root)
