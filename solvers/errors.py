"""Error taxonomy shared by the bisection and Newton-Raphson solvers."""


class RootFindingError(ArithmeticError):
    """Base class for root finding failures."""


class NoRootInInterval(RootFindingError):
    """f(lower) and f(upper) do not have strictly opposite signs."""

    def __init__(self, lower: float, upper: float, f_lower: float, f_upper: float):
        self.lower = lower
        self.upper = upper
        self.f_lower = f_lower
        self.f_upper = f_upper
        super().__init__(
            f"No sign change on [{lower}, {upper}]: "
            f"f(lower)={f_lower}, f(upper)={f_upper}"
        )


class DerivativeTooCloseToZero(RootFindingError):
    """Estimated derivative fell below the tolerance in magnitude."""

    def __init__(self, x: float, derivative: float, iteration: int):
        self.x = x
        self.derivative = derivative
        self.iteration = iteration
        super().__init__(
            f"Derivative {derivative:.3e} at x={x} is too close to zero "
            f"(iteration {iteration})"
        )


class MaxIterationsReached(RootFindingError):
    """Iteration budget exhausted before the convergence criterion was met."""

    def __init__(self, method: str, max_iter: int, last_estimate: float):
        self.method = method
        self.max_iter = max_iter
        self.last_estimate = last_estimate
        super().__init__(
            f"{method} did not converge within {max_iter} iterations "
            f"(last estimate {last_estimate})"
        )


class NonFiniteValue(RootFindingError):
    """The target function (or its derivative estimate) returned NaN or infinity."""

    def __init__(self, x: float, value: float, what: str = "f(x)"):
        self.x = x
        self.value = value
        self.what = what
        super().__init__(f"{what} is not finite at x={x}: {value}")
