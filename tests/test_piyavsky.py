"""
Tests for the public optimize() entry point and the Piyavsky method.

Validates:
  - determinism and trace bookkeeping (2 + iterations evaluations)
  - sortedness of the search state after every iteration
  - termination by gap, by iteration cap and by float resolution
  - midpoint sampling and leftmost tie-break
  - benchmark scenarios and input validation
"""

import math

import numpy as np
import pytest

from piyavskyAPP import optimize
from piyavskyAPP.core.engine import OptimizationEngine
from piyavskyAPP.core.exceptions import (
    InvalidIterationBoundError,
    InvalidRangeError,
    InvalidSampleCountError,
    InvalidToleranceError,
    NonFiniteValueError,
    OptimizationError,
)
from piyavskyAPP.core.functions import custom_function, easom, rastrigin
from piyavskyAPP.core.lipschitz import estimate_lipschitz_constant
from piyavskyAPP.core.piyavsky import PiyavskyMethod


def wavy(x):
    return math.sin(3.0 * x) + 0.3 * x


class TestResultContract:
    def test_deterministic(self):
        first = optimize(wavy, -3.0, 3.0, eps=1e-3, max_iterations=200)
        second = optimize(wavy, -3.0, 3.0, eps=1e-3, max_iterations=200)
        assert first.evaluations == second.evaluations
        assert (first.x, first.y, first.iterations) == (second.x, second.y, second.iterations)
        assert first.lipschitz_constant == second.lipschitz_constant

    @pytest.mark.parametrize("max_iterations", [0, 1, 7, 150])
    def test_evaluation_count(self, max_iterations):
        result = optimize(wavy, -3.0, 3.0, eps=1e-6, max_iterations=max_iterations)
        assert result.iterations == max_iterations
        assert len(result.evaluations) == 2 + result.iterations
        assert result.func_evals == 50 + 2 + result.iterations

    def test_best_is_minimum_of_whole_trace(self):
        result = optimize(wavy, -3.0, 3.0, eps=1e-3, max_iterations=300)
        ys = [p.y for p in result.evaluations]
        assert result.y == min(ys)
        assert (result.x, result.y) in [(p.x, p.y) for p in result.evaluations]

    def test_trace_in_evaluation_order(self):
        result = optimize(wavy, -3.0, 3.0, eps=1e-3, max_iterations=20)
        assert result.evaluations[0].x == -3.0
        assert result.evaluations[1].x == 3.0
        assert result.evaluations[2].x == 0.0
        xs = [p.x for p in result.evaluations]
        assert xs != sorted(xs)
        assert len(set(xs)) == len(xs)

    def test_evaluation_points_are_immutable(self):
        result = optimize(wavy, -3.0, 3.0, eps=1e-3, max_iterations=2)
        with pytest.raises(AttributeError):
            result.evaluations[0].y = 0.0
        with pytest.raises(AttributeError):
            result.y = 0.0

    def test_lipschitz_constant_is_populated(self):
        result = optimize(wavy, -3.0, 3.0, eps=1e-3, max_iterations=5)
        assert result.lipschitz_constant > 0.0
        assert result.lipschitz_constant == estimate_lipschitz_constant(wavy, -3.0, 3.0, 50)

    def test_lipschitz_samples_forwarded(self):
        result = optimize(wavy, -3.0, 3.0, eps=1e-3, max_iterations=5, lipschitz_samples=10)
        assert result.lipschitz_constant == estimate_lipschitz_constant(wavy, -3.0, 3.0, 10)
        assert result.func_evals == 10 + 2 + 5

    def test_elapsed_and_metadata(self):
        result = optimize(wavy, -3.0, 3.0, eps=1e-3, max_iterations=5)
        assert result.elapsed >= 0.0
        assert result.interval == (-3.0, 3.0)
        assert result.eps == 1e-3
        assert result.method_name

    def test_as_arrays(self):
        result = optimize(wavy, -3.0, 3.0, eps=1e-3, max_iterations=5)
        xs, ys = result.as_arrays()
        assert xs.tolist() == [p.x for p in result.evaluations]
        assert ys.tolist() == [p.y for p in result.evaluations]


class TestTermination:
    def test_search_state_sorted_after_every_iteration(self):
        method = PiyavskyMethod(wavy)
        checks = []

        def check(_it):
            state = method.search
            checks.append(state.is_strictly_ascending() and len(state.xs) == len(state.ys))

        OptimizationEngine().run(method, -3.0, 3.0, eps=1e-4, max_iter=250, callback=check)
        assert len(checks) == 250
        assert all(checks)
        assert len(method.search) == 2 + 250

    @pytest.mark.parametrize("eps", [2.0, 2.5, 100.0])
    def test_eps_at_least_width_gives_one_iteration(self, square, eps):
        result = optimize(square, -1.0, 1.0, eps=eps)
        assert result.iterations == 1
        assert result.stopped_by == "max_gap"

    def test_zero_iterations_uses_bounds_only(self):
        result = optimize(lambda x: 3.0 - x, 2.0, 3.0, eps=1e-3, max_iterations=0)
        assert result.iterations == 0
        assert [(p.x, p.y) for p in result.evaluations] == [(2.0, 1.0), (3.0, 0.0)]
        assert (result.x, result.y) == (3.0, 0.0)
        assert result.stopped_by == "max_iter"

    def test_stops_when_gap_below_eps(self):
        result = optimize(lambda x: abs(x), -1.0, 1.0, eps=0.6, max_iterations=1000)
        assert result.stopped_by == "max_gap"
        assert result.iterations == 3
        assert [p.x for p in result.evaluations] == [-1.0, 1.0, 0.0, -0.5, 0.5]
        xs = sorted(p.x for p in result.evaluations)
        assert max(np.diff(xs)) < 0.6

    def test_iteration_cap(self):
        result = optimize(wavy, -3.0, 3.0, eps=1e-9, max_iterations=40)
        assert result.iterations == 40
        assert result.stopped_by == "max_iter"

    def test_resolution_stop(self):
        b = float(np.nextafter(1.0, 2.0))
        result = optimize(lambda x: x, 1.0, b, eps=1e-300, lipschitz_constant=1.0)
        assert result.iterations == 0
        assert result.stopped_by == "method:resolution"
        assert len(result.evaluations) == 2


class TestSampling:
    def test_midpoint_not_intersection(self):
        # the bounding lines of f(x) = x on [0, 1] meet at x = 1/12, not 1/2
        result = optimize(lambda x: x, 0.0, 1.0, eps=1e-3, max_iterations=1)
        assert result.evaluations[2].x == 0.5

    def test_constant_function_picks_leftmost_interval(self, constant_five):
        result = optimize(constant_five, 0.0, 1.0, eps=1e-3, max_iterations=20)
        assert result.lipschitz_constant == 0.0
        assert [p.x for p in result.evaluations[2:]] == [0.5 ** k for k in range(1, 21)]
        assert result.y == 5.0
        assert result.x == 0.0
        assert result.stopped_by == "max_iter"

    def test_constant_function_terminates_by_gap(self, constant_five):
        result = optimize(constant_five, 0.0, 1.0, eps=0.6)
        assert result.iterations == 1
        assert result.stopped_by == "max_gap"
        assert result.y == 5.0

    def test_fixed_lipschitz_constant_skips_estimation(self, square):
        result = optimize(square, -1.0, 1.0, eps=1e-3, max_iterations=3, lipschitz_constant=4.0)
        assert result.lipschitz_constant == 4.0
        assert result.func_evals == 2 + 3
        assert len(square.calls) == 2 + 3

    def test_negative_fixed_lipschitz_constant(self, square):
        with pytest.raises(OptimizationError):
            optimize(square, -1.0, 1.0, eps=1e-3, lipschitz_constant=-1.0)


class TestScenarios:
    def test_square(self, square):
        result = optimize(square, -1.0, 1.0, eps=0.01)
        L = result.lipschitz_constant
        assert L == pytest.approx(1.2 * (2.0 - 2.0 / 49.0))
        assert abs(result.x) < 0.01
        assert result.y == pytest.approx(0.0, abs=1e-4)
        assert result.y <= L * abs(result.x) + 1e-12

    def test_rastrigin(self):
        result = optimize(rastrigin, -2.0, 2.0, eps=1e-3)
        assert result.x == pytest.approx(0.0, abs=1e-9)
        assert result.y == pytest.approx(0.0, abs=1e-12)

    def test_easom_symmetric_minima(self):
        result = optimize(easom, -10.0, 10.0, eps=1e-3)
        distance = min(abs(result.x - (math.pi - 1.84)), abs(result.x - (math.pi + 1.84)))
        assert distance < 0.05
        assert result.y < -0.0088

    def test_custom_minimum_on_boundary(self):
        result = optimize(custom_function, 0.0, 4.0, eps=1e-3)
        assert (result.x, result.y) == (0.0, 0.0)


class TestValidation:
    @pytest.mark.parametrize("a, b", [(1.0, 1.0), (2.0, 1.0), (-math.inf, 1.0), (0.0, math.nan)])
    def test_invalid_range(self, square, a, b):
        with pytest.raises(InvalidRangeError):
            optimize(square, a, b, eps=0.1)
        assert square.calls == []

    @pytest.mark.parametrize("eps", [0.0, -1e-3, math.nan])
    def test_invalid_tolerance(self, square, eps):
        with pytest.raises(InvalidToleranceError):
            optimize(square, -1.0, 1.0, eps=eps)
        assert square.calls == []

    @pytest.mark.parametrize("max_iterations", [-1, -100, 2.0])
    def test_invalid_iteration_bound(self, square, max_iterations):
        with pytest.raises(InvalidIterationBoundError):
            optimize(square, -1.0, 1.0, eps=0.1, max_iterations=max_iterations)
        assert square.calls == []

    def test_invalid_sample_count(self, square):
        with pytest.raises(InvalidSampleCountError):
            optimize(square, -1.0, 1.0, eps=0.1, lipschitz_samples=1)
        assert square.calls == []

    def test_errors_are_value_errors(self, square):
        with pytest.raises(ValueError):
            optimize(square, 1.0, -1.0, eps=0.1)

    def test_non_finite_value_during_refinement(self):
        def broken(x):
            return math.nan if x == 0.5 else x

        with pytest.raises(NonFiniteValueError):
            optimize(broken, 0.0, 1.0, eps=1e-3)
