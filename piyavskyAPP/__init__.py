"""
Глобальна мінімізація функцій однієї змінної методом Піявського.

    from piyavskyAPP import optimize
    result = optimize(lambda x: x * x, -1.0, 1.0, eps=0.01)
"""

from .core.engine import OptimizationResult, optimize
from .core.exceptions import OptimizationError

__version__ = "0.1.0"

__all__ = ["OptimizationResult", "OptimizationError", "optimize", "__version__"]
