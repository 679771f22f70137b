from custom_types.types import ScalarFunction

# fixed step used by the Newton-Raphson solver
DEFAULT_STEP = 1e-5


class CentralDifference:
    """
    Numerical first derivative of a scalar function.

    f'(x) ≈ (f(x + h) - f(x - h)) / (2h), two evaluations of f per call.
    """

    def __init__(self, h: float = DEFAULT_STEP):
        if not h > 0.0:
            raise ValueError(f"Step h must be > 0, got {h}")
        self.h = h

    def derivative(self, f: ScalarFunction, x: float) -> float:
        # Value at x + h
        f_up = f(x + self.h)

        # Value at x - h
        f_down = f(x - self.h)

        return (f_up - f_down) / (2 * self.h)


# Convenience function
def central_difference(f: ScalarFunction, x: float, h: float = DEFAULT_STEP) -> float:
    return CentralDifference(h).derivative(f, x)
