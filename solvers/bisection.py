from __future__ import annotations
import logging
from typing import List, Sequence, Union
from custom_types.types import ScalarFunction, as_float, is_finite, opposite_signs
from inputs.interval import Interval
from inputs.settings import SolverSettings
from solvers.errors import MaxIterationsReached, NoRootInInterval, NonFiniteValue
from solvers.results import IterationPoint, RootResult

logger = logging.getLogger(__name__)

METHOD = "bisection"


class Bisection:
    """
    Interval-halving root finder.

    Requires f(lower) and f(upper) to have strictly opposite signs; an
    endpoint that is itself an exact root does not qualify. The search stops
    on whichever of these happens first:
    - |f(mid)| < tol (residual)
    - interval width <= tol (width), the midpoint of the final interval is returned
    The iteration cap bounds everything else.
    """

    def __init__(self, settings: SolverSettings = SolverSettings()):
        self.s = settings

    def find_root(self, f: ScalarFunction,
                  interval: Union[Interval, Sequence[float]]) -> float:
        return self.solve(f, interval).root

    def solve(self, f: ScalarFunction,
              interval: Union[Interval, Sequence[float]]) -> RootResult:
        interval = _as_interval(interval)
        tol = self.s.tol
        calls = 0

        def evaluate(x: float) -> float:
            nonlocal calls
            calls += 1
            fx = f(x)
            if not is_finite(fx):
                logger.debug("Bisection: non-finite f(%s)=%s", x, fx)
                raise NonFiniteValue(x, fx)
            return as_float(fx)

        left, right = interval.lower, interval.upper
        f_left = evaluate(left)
        f_right = evaluate(right)

        # Endpoints must bracket a sign change; no midpoint is evaluated otherwise
        if not opposite_signs(f_left, f_right):
            logger.debug("Bisection: no sign change, f(%s)=%s f(%s)=%s",
                         left, f_left, right, f_right)
            raise NoRootInInterval(left, right, f_left, f_right)

        hist: List[IterationPoint] = []
        iterations = 0

        while right - left > tol and iterations < self.s.max_iter:
            mid = (left + right) / 2
            f_mid = evaluate(mid)
            iterations += 1
            hist.append(IterationPoint(iterations, mid, f_mid))
            logger.debug("Bisection iter %s: [%s, %s] mid=%s f(mid)=%s",
                         iterations, left, right, mid, f_mid)

            if abs(f_mid) < tol:
                return RootResult(root=mid, method=METHOD, iterations=iterations,
                                  function_calls=calls, converged_by="residual",
                                  history=tuple(hist))

            # keep the half whose endpoints still change sign
            if opposite_signs(f_left, f_mid):
                right = mid
            else:
                left, f_left = mid, f_mid

        if right - left <= tol:
            return RootResult(root=(left + right) / 2, method=METHOD,
                              iterations=iterations, function_calls=calls,
                              converged_by="width", history=tuple(hist))

        logger.debug("Bisection: %s iterations exhausted, width=%s",
                     self.s.max_iter, right - left)
        raise MaxIterationsReached(METHOD, self.s.max_iter, (left + right) / 2)


def _as_interval(interval: Union[Interval, Sequence[float]]) -> Interval:
    if isinstance(interval, Interval):
        return interval
    lower, upper = interval
    return Interval(lower, upper)


def bisection_find_root(
        f: ScalarFunction,
        lower: float,
        upper: float,
        tol: float = 1e-6,
        max_iter: int = 100
) -> float:
    """Root of f on [lower, upper] by bisection.

    Raises NoRootInInterval, MaxIterationsReached or NonFiniteValue.
    """
    solver = Bisection(SolverSettings(tol=tol, max_iter=max_iter))
    return solver.find_root(f, Interval(lower, upper))
