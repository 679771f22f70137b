from dataclasses import dataclass
from typing import Tuple
import pandas as pd


@dataclass(frozen=True)
class IterationPoint:
    iteration: int
    x: float
    fx: float


@dataclass(frozen=True)
class RootResult:
    """Outcome of a successful solve, with diagnostics"""
    root: float
    method: str                  # "bisection" or "newton"
    iterations: int              # completed iterations
    function_calls: int          # evaluations of the target function
    converged_by: str            # "residual", "width" or "step"
    history: Tuple[IterationPoint, ...] = ()

    def to_frame(self) -> pd.DataFrame:
        """History as a DataFrame with columns iteration, x, fx"""
        return pd.DataFrame(
            [(p.iteration, p.x, p.fx) for p in self.history],
            columns=['iteration', 'x', 'fx']
        )
