from __future__ import annotations
from typing import Optional
from custom_types.types import ScalarFunction
from inputs.interval import Interval
from inputs.settings import SolverSettings
from solvers.bisection import Bisection
from solvers.newton_raphson import NewtonRaphson
from solvers.results import RootResult


class RootSolver:
    def __init__(self, s: SolverSettings = SolverSettings()):
        self.s = s
        self._bisection = Bisection(s)
        self._newton = NewtonRaphson(s)

    def bisection(self, f: ScalarFunction, lower: float, upper: float) -> float:
        """Bracketed root, needs a sign change on [lower, upper]"""
        return self._bisection.find_root(f, Interval(lower, upper))

    def newton_raphson(self, f: ScalarFunction, initial_guess: float) -> float:
        """Newton with numerical derivative"""
        return self._newton.find_root(f, initial_guess)

    def solve(self, f: ScalarFunction, method: str = "newton", *,
              lower: Optional[float] = None, upper: Optional[float] = None,
              initial_guess: Optional[float] = None) -> RootResult:
        method = method.lower()
        if method == "bisection":
            if lower is None or upper is None:
                raise ValueError("bisection needs both 'lower' and 'upper'")
            return self._bisection.solve(f, Interval(lower, upper))
        elif method == "newton":
            if initial_guess is None:
                raise ValueError("newton needs 'initial_guess'")
            return self._newton.solve(f, initial_guess)
        else:
            raise ValueError("method must be 'newton' or 'bisection'")
