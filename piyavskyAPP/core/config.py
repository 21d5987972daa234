"""
config.py

Параметри одного запуску оптимізації, які заповнює CLI.

OptimizationConfig містить ключ тестової функції, відрізок пошуку
та налаштування методу; validate() перевіряє все до запуску движка.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .engine import DEFAULT_EPS, DEFAULT_MAX_ITERATIONS
from .functions import FUNCTIONS, TargetFunction
from .lipschitz import DEFAULT_LIPSCHITZ_SAMPLES, DEFAULT_SAFETY_FACTOR
from .validation import (
    check_interval,
    check_iteration_bound,
    check_safety_factor,
    check_sample_count,
    check_tolerance,
)


@dataclass
class OptimizationConfig:
    """
    Налаштування одного запуску.

    Атрибути:
        function_key      - ключ у core.functions.FUNCTIONS
        a, b              - відрізок пошуку
        eps               - точність за max_gap
        max_iterations    - обмеження на кількість ітерацій
        lipschitz_samples - кількість вузлів сітки для оцінки L
        safety_factor     - множник запасу для L
    """
    function_key: str
    a: float
    b: float
    eps: float = DEFAULT_EPS
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    lipschitz_samples: int = DEFAULT_LIPSCHITZ_SAMPLES
    safety_factor: float = DEFAULT_SAFETY_FACTOR

    @classmethod
    def from_function(
        cls,
        function_key: str,
        a: Optional[float] = None,
        b: Optional[float] = None,
        **kwargs: Any,
    ) -> "OptimizationConfig":
        """
        Створити конфігурацію для тестової функції; якщо a / b не задані,
        береться відрізок за замовчуванням з реєстру.
        """
        if function_key not in FUNCTIONS:
            raise KeyError(f"Функція з ключем '{function_key}' не знайдена.")
        tf = FUNCTIONS[function_key]
        return cls(
            function_key=function_key,
            a=tf.a if a is None else a,
            b=tf.b if b is None else b,
            **kwargs,
        )

    @property
    def target(self) -> TargetFunction:
        return FUNCTIONS[self.function_key]

    def validate(self) -> "OptimizationConfig":
        """Перевірити всі параметри; повертає self для ланцюжків."""
        if self.function_key not in FUNCTIONS:
            raise KeyError(f"Функція з ключем '{self.function_key}' не знайдена.")
        check_interval(self.a, self.b)
        check_tolerance(self.eps)
        check_iteration_bound(self.max_iterations)
        check_sample_count(self.lipschitz_samples)
        check_safety_factor(self.safety_factor)
        return self

    def method_options(self) -> Dict[str, Any]:
        """options для PiyavskyMethod."""
        return {
            "lipschitz_samples": self.lipschitz_samples,
            "safety_factor": self.safety_factor,
        }


__all__ = ["OptimizationConfig"]
