"""
functions.py

Тестові одновимірні функції для глобальної мінімізації.

Формат:
    - усі функції приймають одне дійсне число x і повертають float;
    - реалізовані:
        rastrigin, easom, ackley, custom_function
    - є реєстр FUNCTIONS для вибору функції в CLI/движку разом
      з інтервалом пошуку [a, b] за замовчуванням.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

import numpy as np

ScalarFunction = Callable[[float], float]


# ---------------------------------------------------------------------------
# Цільові функції
# ---------------------------------------------------------------------------

def rastrigin(x: float) -> float:
    """
    f(x) = x^2 - 10 * cos(2πx) + 10

    Багато локальних мінімумів, глобальний мінімум f(0) = 0.
    """
    return float(x * x - 10.0 * np.cos(2.0 * np.pi * x) + 10.0)


def easom(x: float) -> float:
    """
    f(x) = -cos(x) * exp(-(x - π)^2)

    Одновимірний зріз функції Ізома: пік f(π) = 1, два рівні мінімуми
    f ≈ -0.009 у точках x ≈ π ± 1.84.
    """
    return float(-np.cos(x) * np.exp(-(x - np.pi) ** 2))


def ackley(x: float) -> float:
    """
    f(x) = -20 * exp(-0.2 * sqrt(0.5 x^2)) - exp(0.5 * cos(2πx)) + 20 + e
    """
    term1 = -20.0 * np.exp(-0.2 * np.sqrt(0.5 * x * x))
    term2 = -np.exp(0.5 * np.cos(2.0 * np.pi * x))
    return float(term1 + term2 + 20.0 + np.e)


def custom_function(x: float) -> float:
    """
    f(x) = x + sin(3.14159 * x)
    """
    return float(x + np.sin(3.14159 * x))


# ---------------------------------------------------------------------------
# Реєстр функцій
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TargetFunction:
    key: str
    name: str
    func: ScalarFunction
    a: float
    b: float


FUNCTIONS: Dict[str, TargetFunction] = {
    "rastrigin": TargetFunction(
        key="rastrigin",
        name="Функція Растригіна: x² - 10*cos(2πx) + 10",
        func=rastrigin,
        a=-2.0,
        b=2.0,
    ),
    "easom": TargetFunction(
        key="easom",
        name="Функція Ізома: -cos(x)*exp(-(x-π)²)",
        func=easom,
        a=-10.0,
        b=10.0,
    ),
    "custom": TargetFunction(
        key="custom",
        name="Користувацька: x + sin(3.14159*x)",
        func=custom_function,
        a=0.0,
        b=4.0,
    ),
    "ackley": TargetFunction(
        key="ackley",
        name="Функція Еклі: -20*exp(-0.2√(0.5x²)) - exp(0.5*cos(2πx)) + e + 20",
        func=ackley,
        a=-5.0,
        b=5.0,
    ),
}

__all__ = [
    "ScalarFunction",
    "rastrigin",
    "easom",
    "ackley",
    "custom_function",
    "TargetFunction",
    "FUNCTIONS",
]
