import logging
import math
import pytest
from scipy import optimize
from inputs.settings import SolverSettings
from solvers.errors import DerivativeTooCloseToZero, MaxIterationsReached, NonFiniteValue
from solvers.newton_raphson import NewtonRaphson, newton_raphson_find_root


class TestNewtonRaphsonScenarios:
    """Reference scenarios for the Newton-Raphson solver"""

    def test_sqrt_two(self):
        """x^2 - 2 from 1.5 converges to sqrt(2)"""
        root = newton_raphson_find_root(lambda x: x * x - 2, 1.5)
        print(f"Newton sqrt(2): {root:.12f}")

        assert abs(root - math.sqrt(2)) < 1e-6

    def test_cubic(self):
        """x^3 - x - 2 from 1.5 agrees with scipy's Newton"""
        f = lambda x: x ** 3 - x - 2
        root = newton_raphson_find_root(f, 1.5)
        expected = optimize.newton(f, 1.5, fprime=lambda x: 3 * x ** 2 - 1, tol=1e-12)
        print(f"Newton cubic: {root:.12f} (scipy {expected:.12f})")

        assert root == pytest.approx(1.521, abs=1e-3)
        assert abs(root - expected) < 1e-6

    def test_sin(self):
        """sin from 0.5 converges to 0"""
        root = newton_raphson_find_root(math.sin, 0.5)
        assert abs(root) < 1e-6

    def test_flat_derivative_at_start(self):
        """x^3 at 0 has zero slope, no step is taken"""
        with pytest.raises(DerivativeTooCloseToZero) as exc_info:
            newton_raphson_find_root(lambda x: x ** 3, 0.0)

        err = exc_info.value
        assert err.x == 0.0
        assert err.iteration == 1
        assert abs(err.derivative) < 1e-6


class TestNewtonRaphsonBehaviour:
    """Termination, error and bookkeeping behaviour"""

    def test_flat_derivative_later_in_search(self):
        """Triple root: the slope vanishes before the step size does"""
        with pytest.raises(DerivativeTooCloseToZero) as exc_info:
            newton_raphson_find_root(lambda x: (x - 1.0) ** 3, 2.0)

        err = exc_info.value
        assert err.iteration > 1
        assert abs(err.derivative) < 1e-6
        assert err.x == pytest.approx(1.0, abs=1e-3)

    def test_max_iterations_reached(self):
        """One iteration from 1.5 leaves a step far above tol"""
        with pytest.raises(MaxIterationsReached) as exc_info:
            newton_raphson_find_root(lambda x: x * x - 2, 1.5, max_iter=1)

        err = exc_info.value
        assert err.method == "newton"
        assert err.max_iter == 1
        assert err.last_estimate == pytest.approx(17.0 / 12.0, abs=1e-8)

    def test_three_evaluations_per_iteration(self):
        result = NewtonRaphson().solve(lambda x: x * x - 2, 1.5)

        assert result.converged_by == "step"
        assert result.method == "newton"
        assert result.function_calls == 3 * result.iterations
        assert len(result.history) == result.iterations
        assert result.history[0].x == 1.5
        assert result.history[0].fx == pytest.approx(0.25)

    def test_step_criterion_satisfied(self):
        """Returned root is within tol of the last iterate"""
        tol = 1e-10
        result = NewtonRaphson(SolverSettings(tol=tol)).solve(lambda x: math.exp(x) - 2.0, 0.0)

        assert abs(result.root - result.history[-1].x) < tol
        assert result.root == pytest.approx(math.log(2.0), abs=1e-9)

    def test_non_finite_value(self):
        """log(x) overshoots below zero, NaN is reported"""
        f = lambda x: math.log(x) if x > 0 else math.nan
        with pytest.raises(NonFiniteValue) as exc_info:
            newton_raphson_find_root(f, 3.0)
        assert exc_info.value.x < 0.0

    def test_non_finite_derivative(self):
        """Central difference across a +/-1e308 jump overflows to infinity"""
        f = lambda x: 1e308 if x > 0 else -1e308
        with pytest.raises(NonFiniteValue) as exc_info:
            newton_raphson_find_root(f, 0.0)

        err = exc_info.value
        assert err.what == "derivative"
        assert err.x == 0.0
        assert math.isinf(err.value)

    def test_non_finite_step(self):
        """Huge f(x) over a modest slope sends the next iterate to infinity"""
        f = lambda x: 1e308 if x == 0.0 else x * 1e-3
        with pytest.raises(NonFiniteValue) as exc_info:
            newton_raphson_find_root(f, 0.0)

        err = exc_info.value
        assert err.what == "Newton step"
        assert err.x == 0.0
        assert math.isinf(err.value)

    def test_non_finite_failures_are_logged(self, caplog):
        f = lambda x: 1e308 if x > 0 else -1e308
        with caplog.at_level(logging.DEBUG, logger="solvers.newton_raphson"):
            with pytest.raises(NonFiniteValue):
                newton_raphson_find_root(f, 0.0)
        assert "non-finite derivative" in caplog.text

    def test_non_finite_initial_guess(self):
        with pytest.raises(ValueError):
            newton_raphson_find_root(lambda x: x, math.inf)

    def test_determinism(self):
        """Identical calls give bit-identical roots"""
        f = lambda x: math.cos(x) - x
        r1 = newton_raphson_find_root(f, 1.0, tol=1e-10)
        r2 = newton_raphson_find_root(f, 1.0, tol=1e-10)
        assert r1 == r2

    def test_history_frame(self):
        result = NewtonRaphson().solve(math.sin, 0.5)
        frame = result.to_frame()

        assert list(frame.columns) == ['iteration', 'x', 'fx']
        assert len(frame) == result.iterations
        assert frame['x'].iloc[0] == 0.5


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
