"""
Tests for the iteration engine and the Optimizer base class.

Validates:
  - per-iteration callback records
  - engine defaults and method-requested stops
  - counter reset between runs of the same method object
"""

import math

import pytest

from piyavskyAPP.core.engine import OptimizationEngine, best_evaluation
from piyavskyAPP.core.exceptions import InvalidIterationBoundError, InvalidToleranceError
from piyavskyAPP.core.iteration_result import EvaluationPoint, IterationResult
from piyavskyAPP.core.optimizer_base import Optimizer, StepResult
from piyavskyAPP.core.piyavsky import PiyavskyMethod


class StopImmediately(Optimizer):
    def initialize(self, a, b):
        self.record(a)
        self.record(b)

    def _step_impl(self):
        return StepResult(x_new=None, f_new=None, max_gap=1.0, meta={"stopped_by": "done"})


class BrokenStep(Optimizer):
    def initialize(self, a, b):
        self.record(a)
        self.record(b)

    def _step_impl(self):
        return {"x_new": 0.0}


class TestEngine:
    def test_callback_records(self):
        records = []
        method = PiyavskyMethod(lambda x: (x - 0.3) ** 2)
        result = OptimizationEngine().run(method, 0.0, 1.0, eps=1e-6, max_iter=12, callback=records.append)

        assert [r.index for r in records] == list(range(1, 13))
        assert all(isinstance(r, IterationResult) for r in records)
        for record, point in zip(records, result.evaluations[2:]):
            x1, x2 = record.interval
            assert record.x == (x1 + x2) / 2.0
            assert (record.x, record.f) == (point.x, point.y)
            assert math.isfinite(record.potential)
            assert record.max_gap > 0.0

    def test_first_record_splits_whole_interval(self):
        records = []
        method = PiyavskyMethod(lambda x: x)
        OptimizationEngine().run(method, 0.0, 1.0, eps=1e-6, max_iter=1, callback=records.append)
        assert records[0].interval == (0.0, 1.0)
        assert records[0].max_gap == 0.5
        assert records[0].meta["interval_index"] == 0

    def test_engine_defaults(self):
        engine = OptimizationEngine(eps=0.75, max_iter=5)
        result = engine.run(PiyavskyMethod(lambda x: x * x), -1.0, 1.0)
        assert result.iterations == 3
        assert result.stopped_by == "max_gap"
        assert result.eps == 0.75

        result = engine.run(PiyavskyMethod(lambda x: x * x), -1.0, 1.0, eps=1e-9)
        assert result.iterations == 5
        assert result.stopped_by == "max_iter"

    def test_invalid_defaults(self):
        with pytest.raises(InvalidToleranceError):
            OptimizationEngine(eps=0.0)
        with pytest.raises(InvalidIterationBoundError):
            OptimizationEngine(max_iter=-1)

    def test_method_requested_stop(self):
        result = OptimizationEngine().run(StopImmediately(lambda x: x), 0.0, 1.0, eps=0.1)
        assert result.stopped_by == "method:done"
        assert result.iterations == 0
        assert result.lipschitz_constant == 0.0
        assert result.method_name == "StopImmediately"

    def test_step_must_return_step_result(self):
        with pytest.raises(TypeError):
            OptimizationEngine().run(BrokenStep(lambda x: x), 0.0, 1.0, eps=0.1)

    def test_rerun_resets_counters(self):
        method = PiyavskyMethod(lambda x: x * x)
        engine = OptimizationEngine()
        first = engine.run(method, -1.0, 1.0, eps=1e-6, max_iter=10)
        second = engine.run(method, -1.0, 1.0, eps=1e-6, max_iter=10)
        assert first.func_evals == second.func_evals == 50 + 2 + 10
        assert first.evaluations == second.evaluations

    def test_step_before_initialize(self):
        with pytest.raises(RuntimeError):
            PiyavskyMethod(lambda x: x).step()


class TestBestEvaluation:
    def test_first_minimum_wins(self):
        points = [EvaluationPoint(0.0, 2.0), EvaluationPoint(1.0, 1.0), EvaluationPoint(2.0, 1.0)]
        assert best_evaluation(points) == EvaluationPoint(1.0, 1.0)

    def test_empty_trace(self):
        with pytest.raises(ValueError):
            best_evaluation([])
