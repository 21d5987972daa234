"""
exceptions.py

Типізовані помилки вхідних даних для глобальної мінімізації.

Усі класи наслідуються від OptimizationError, а той від ValueError,
тож код, який ловить ValueError, продовжує працювати.
"""

from __future__ import annotations


class OptimizationError(ValueError):
    """Базова помилка некоректних параметрів оптимізації."""


class InvalidRangeError(OptimizationError):
    """
    Некоректний інтервал пошуку: потрібно a < b, обидві межі скінченні.
    """


class DegenerateIntervalError(InvalidRangeError):
    """
    Інтервал нульової ширини (a == b) або сегмент сітки, ширина якого
    після округлення дорівнює нулю, тож нахил обчислити неможливо.
    """


class InvalidToleranceError(OptimizationError):
    """Точність eps повинна бути додатною."""


class InvalidSampleCountError(OptimizationError):
    """Для оцінки константи Ліпшиця потрібно щонайменше 2 точки сітки."""


class InvalidIterationBoundError(OptimizationError):
    """max_iterations повинно бути невід'ємним цілим числом."""


class NonFiniteValueError(OptimizationError):
    """Цільова функція повернула nan або ±inf у точці обчислення."""


__all__ = [
    "OptimizationError",
    "InvalidRangeError",
    "DegenerateIntervalError",
    "InvalidToleranceError",
    "InvalidSampleCountError",
    "InvalidIterationBoundError",
    "NonFiniteValueError",
]
