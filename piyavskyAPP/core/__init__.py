"""
Обчислювальна частина: оцінка константи Ліпшиця, метод Піявського,
движок ітерацій та структури результатів.
"""

from .engine import (
    DEFAULT_EPS,
    DEFAULT_MAX_ITERATIONS,
    OptimizationEngine,
    OptimizationResult,
    optimize,
)
from .exceptions import (
    DegenerateIntervalError,
    InvalidIterationBoundError,
    InvalidRangeError,
    InvalidSampleCountError,
    InvalidToleranceError,
    NonFiniteValueError,
    OptimizationError,
)
from .iteration_result import EvaluationPoint, IterationResult
from .lipschitz import estimate_lipschitz_constant
from .piyavsky import PiyavskyMethod
from .search_state import SearchState

__all__ = [
    "DEFAULT_EPS",
    "DEFAULT_MAX_ITERATIONS",
    "OptimizationEngine",
    "OptimizationResult",
    "optimize",
    "OptimizationError",
    "InvalidRangeError",
    "DegenerateIntervalError",
    "InvalidToleranceError",
    "InvalidSampleCountError",
    "InvalidIterationBoundError",
    "NonFiniteValueError",
    "EvaluationPoint",
    "IterationResult",
    "estimate_lipschitz_constant",
    "PiyavskyMethod",
    "SearchState",
]
