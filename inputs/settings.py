from dataclasses import dataclass
import numbers
import warnings
from custom_types.types import is_finite

# width convergence below this is not reliably reachable in double precision
MIN_RECOMMENDED_TOL = 1e-12


@dataclass(frozen=True)
class SolverSettings:
    tol: float = 1e-6       # convergence tolerance (residual, width or step)
    max_iter: int = 100     # iteration cap, the only bound on non-convergence

    def __post_init__(self):
        """Validate tolerance and iteration cap"""
        if isinstance(self.tol, bool) or not isinstance(self.tol, numbers.Real):
            raise ValueError(f"tol must be a real number, got {self.tol!r}")
        if not is_finite(self.tol) or self.tol <= 0.0:
            raise ValueError(f"tol must be finite and > 0, got {self.tol}")

        if isinstance(self.max_iter, bool) or not isinstance(self.max_iter, numbers.Integral):
            raise ValueError(f"max_iter must be an integer, got {self.max_iter!r}")
        if self.max_iter < 1:
            raise ValueError(f"max_iter must be >= 1, got {self.max_iter}")

        if self.tol < MIN_RECOMMENDED_TOL:
            warnings.warn(
                f"Tolerance {self.tol:.3e} is below {MIN_RECOMMENDED_TOL:.0e}. "
                f"Convergence may be unreachable in double precision.",
                UserWarning,
                stacklevel=2
            )
