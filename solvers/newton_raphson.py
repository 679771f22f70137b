from __future__ import annotations
import logging
from typing import List
from custom_types.types import ScalarFunction, as_float, is_finite
from derivatives.central import CentralDifference, DEFAULT_STEP
from inputs.settings import SolverSettings
from solvers.errors import DerivativeTooCloseToZero, MaxIterationsReached, NonFiniteValue
from solvers.results import IterationPoint, RootResult

logger = logging.getLogger(__name__)

METHOD = "newton"

# shared by every call, not user configurable
_DERIVATIVE = CentralDifference(DEFAULT_STEP)


class NewtonRaphson:
    """
    Newton-Raphson root finder with a central-difference derivative.

    Each iteration evaluates f three times: once at x and twice for the
    derivative estimate. Converges when the step |x_next - x| < tol; the
    residual f(x_next) is not checked.
    """

    def __init__(self, settings: SolverSettings = SolverSettings()):
        self.s = settings

    def find_root(self, f: ScalarFunction, initial_guess: float) -> float:
        return self.solve(f, initial_guess).root

    def solve(self, f: ScalarFunction, initial_guess: float) -> RootResult:
        x = as_float(initial_guess)
        if not is_finite(x):
            raise ValueError(f"initial_guess must be finite, got {initial_guess}")

        tol = self.s.tol
        calls = 0

        def evaluate(t: float) -> float:
            nonlocal calls
            calls += 1
            ft = f(t)
            if not is_finite(ft):
                logger.debug("Newton: non-finite f(%s)=%s", t, ft)
                raise NonFiniteValue(t, ft)
            return as_float(ft)

        hist: List[IterationPoint] = []

        for iteration in range(1, self.s.max_iter + 1):
            fx = evaluate(x)
            deriv = _DERIVATIVE.derivative(evaluate, x)
            hist.append(IterationPoint(iteration, x, fx))
            logger.debug("Newton iter %s: x=%s f(x)=%s deriv=%s", iteration, x, fx, deriv)

            if not is_finite(deriv):
                logger.debug("Newton: non-finite derivative %s at x=%s", deriv, x)
                raise NonFiniteValue(x, deriv, what="derivative")

            # never divide by a derivative below tolerance
            if abs(deriv) < tol:
                logger.debug("Newton: derivative %s below tol at x=%s", deriv, x)
                raise DerivativeTooCloseToZero(x, deriv, iteration)

            next_x = x - fx / deriv
            if not is_finite(next_x):
                logger.debug("Newton: non-finite step to %s from x=%s", next_x, x)
                raise NonFiniteValue(x, next_x, what="Newton step")

            if abs(next_x - x) < tol:
                return RootResult(root=next_x, method=METHOD, iterations=iteration,
                                  function_calls=calls, converged_by="step",
                                  history=tuple(hist))

            x = next_x

        logger.debug("Newton: %s iterations exhausted, last x=%s", self.s.max_iter, x)
        raise MaxIterationsReached(METHOD, self.s.max_iter, x)


def newton_raphson_find_root(
        f: ScalarFunction,
        initial_guess: float,
        tol: float = 1e-6,
        max_iter: int = 100
) -> float:
    """Root of f near initial_guess by Newton-Raphson.

    Raises DerivativeTooCloseToZero, MaxIterationsReached or NonFiniteValue.
    """
    solver = NewtonRaphson(SolverSettings(tol=tol, max_iter=max_iter))
    return solver.find_root(f, initial_guess)
