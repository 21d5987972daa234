"""
validation.py

Перевірка вхідних параметрів перед запуском оптимізації.

Кожна функція або мовчки повертає нормалізоване значення,
або піднімає відповідну помилку з core.exceptions.
Перевірки виконуються ДО першого виклику цільової функції.
"""

from __future__ import annotations

import math
import numbers
from typing import Tuple

from .exceptions import (
    DegenerateIntervalError,
    InvalidIterationBoundError,
    InvalidRangeError,
    InvalidSampleCountError,
    InvalidToleranceError,
    OptimizationError,
)


def _is_integer(value) -> bool:
    # bool теж Integral, але True як кількість ітерацій є помилкою виклику
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def check_interval(a: float, b: float) -> Tuple[float, float]:
    """
    Перевірити інтервал [a, b]:
        - межі скінченні;
        - a == b  -> DegenerateIntervalError;
        - a > b   -> InvalidRangeError;
        - ширина b - a скінченна (не переповнюється).
    """
    a = float(a)
    b = float(b)

    if not (math.isfinite(a) and math.isfinite(b)):
        raise InvalidRangeError(f"Межі інтервалу повинні бути скінченними: a={a}, b={b}.")
    if a == b:
        raise DegenerateIntervalError(f"Інтервал нульової ширини: a = b = {a}.")
    if a > b:
        raise InvalidRangeError(f"Ліва межа повинна бути меншою за праву: a={a}, b={b}.")
    if not math.isfinite(b - a):
        raise InvalidRangeError(f"Ширина інтервалу [{a}, {b}] не є скінченною.")

    return a, b


def check_tolerance(eps: float) -> float:
    """eps > 0 (nan теж відхиляється)."""
    eps = float(eps)
    if not eps > 0.0:
        raise InvalidToleranceError(f"Точність eps повинна бути додатною, отримано: {eps}.")
    return eps


def check_iteration_bound(max_iterations: int) -> int:
    """max_iterations: ціле число >= 0; нуль дозволений."""
    if not _is_integer(max_iterations):
        raise InvalidIterationBoundError(
            f"max_iterations повинно бути цілим числом, отримано: {max_iterations!r}."
        )
    if max_iterations < 0:
        raise InvalidIterationBoundError(
            f"max_iterations не може бути від'ємним, отримано: {max_iterations}."
        )
    return int(max_iterations)


def check_sample_count(samples: int) -> int:
    """Кількість точок сітки для оцінки L: ціле число >= 2."""
    if not _is_integer(samples) or samples < 2:
        raise InvalidSampleCountError(
            f"Потрібно щонайменше 2 точки сітки, отримано: {samples!r}."
        )
    return int(samples)


def check_safety_factor(safety_factor: float) -> float:
    """Множник запасу для L: скінченне додатне число."""
    safety_factor = float(safety_factor)
    if not (math.isfinite(safety_factor) and safety_factor > 0.0):
        raise OptimizationError(
            f"Множник запасу повинен бути додатним, отримано: {safety_factor}."
        )
    return safety_factor


__all__ = [
    "check_interval",
    "check_tolerance",
    "check_iteration_bound",
    "check_sample_count",
    "check_safety_factor",
]
