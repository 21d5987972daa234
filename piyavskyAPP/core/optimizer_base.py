"""
optimizer_base.py

Базові класи та типи для методів глобальної мінімізації на відрізку (Strategy).

Ідея:
    - Є абстрактний клас Optimizer, від якого наслідуються конкретні методи
      (зараз це PiyavskyMethod).
    - Движок викликає initialize(a, b) один раз, далі step() на кожній
      ітерації; метод сам веде свій стан пошуку.

Формат:
    step() -> StepResult
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .exceptions import NonFiniteValueError
from .functions import ScalarFunction
from .iteration_result import EvaluationPoint


# ---------------------------------------------------------------------------
# Результат одного кроку методу
# ---------------------------------------------------------------------------

@dataclass
class StepResult:
    """
    Результат одного кроку оптимізації.

    Атрибути:
        x_new   - нова обчислена точка (None, якщо крок не виконано)
        f_new   - значення функції f(x_new)
        max_gap - максимальна відстань між сусідніми точками після кроку
        meta    - додаткова інформація (інтервал, потенціал, "stopped_by", ...)
    """
    x_new: Optional[float]
    f_new: Optional[float]
    max_gap: float
    meta: Dict[str, Any] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Базовий клас Optimizer (Strategy)
# ---------------------------------------------------------------------------

class Optimizer(ABC):
    """
    Абстрактний базовий клас для методів мінімізації на [a, b].

    Кожен конкретний метод:
        - наслідується від Optimizer;
        - реалізує initialize() та _step_impl().

    Використання:
        opt = PiyavskyMethod(func=..., options={...})
        opt.reset()
        opt.initialize(a, b)
        res = opt.step()  # StepResult
    """

    def __init__(
        self,
        func: ScalarFunction,
        options: Optional[Dict[str, Any]] = None,
        name: Optional[str] = None,
    ) -> None:
        """
        Parameters
        ----------
        func : ScalarFunction
            Цільова функція f(x) одного дійсного аргументу.
        options : Optional[dict]
            Додаткові параметри методу.
        name : Optional[str]
            Людяна назва методу (для логів/таблиць).
        """
        self.func = func
        self.options: Dict[str, Any] = options or {}
        self.name: str = name or self.__class__.__name__

        # Лічильник усіх викликів f (включно з допоміжними)
        self.func_evals: int = 0

        # Траса обчислень, що потрапляють у результат, у порядку обчислення
        self.evaluations: List[EvaluationPoint] = []

        self.state: Dict[str, Any] = {}

    # ------------------------------------------------------------------
    # Обчислення f із підрахунком викликів
    # ------------------------------------------------------------------

    def eval_f(self, x: float) -> float:
        """Обчислити f(x), збільшити лічильник і перевірити скінченність."""
        self.func_evals += 1
        value = float(self.func(float(x)))
        if not math.isfinite(value):
            raise NonFiniteValueError(f"Функція повернула {value} у точці x = {x}.")
        return value

    def record(self, x: float) -> EvaluationPoint:
        """Обчислити f(x) і додати точку в трасу обчислень."""
        point = EvaluationPoint(x=float(x), y=self.eval_f(x))
        self.evaluations.append(point)
        return point

    # ------------------------------------------------------------------
    # Життєвий цикл методу
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """
        Скинути внутрішній стан та лічильники перед новим запуском.
        Викликається движком перед initialize().
        """
        self.func_evals = 0
        self.evaluations = []
        self.state.clear()

    @abstractmethod
    def initialize(self, a: float, b: float) -> None:
        """Підготувати стан пошуку для відрізка [a, b]."""
        raise NotImplementedError

    def step(self) -> StepResult:
        """
        Виконати один крок методу.

        Повертає:
            StepResult(x_new, f_new, max_gap, meta)
        """
        result = self._step_impl()

        if not isinstance(result, StepResult):
            raise TypeError(
                f"{self.__class__.__name__}._step_impl() "
                f"повинен повертати StepResult, отримано: {type(result)}"
            )

        return result

    @abstractmethod
    def _step_impl(self) -> StepResult:
        raise NotImplementedError


__all__ = [
    "StepResult",
    "Optimizer",
]
