"""
engine.py

Ітераційний двигун для запуску методів глобальної мінімізації (Optimizer).

Функціонал:
    - викликає initialize(a, b), а далі step() до спрацювання критерію зупинки;
    - зупиняється, коли max_gap < eps, коли вичерпано max_iter
      або коли метод сам попросив зупинитися (meta["stopped_by"]);
    - вимірює час роботи (оцінка L + граничні точки + весь цикл);
    - шукає мінімум по ВСІЙ трасі обчислень і формує OptimizationResult;
    - підтримує callback для логів / CLI на кожній ітерації.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

import numpy as np

from .functions import ScalarFunction
from .iteration_result import EvaluationPoint, IterationResult
from .lipschitz import DEFAULT_LIPSCHITZ_SAMPLES, DEFAULT_SAFETY_FACTOR
from .optimizer_base import Optimizer, StepResult
from .piyavsky import PiyavskyMethod
from .validation import check_interval, check_iteration_bound, check_tolerance

logger = logging.getLogger(__name__)

DEFAULT_EPS = 1e-3
DEFAULT_MAX_ITERATIONS = 1000


@dataclass(frozen=True)
class OptimizationResult:
    """
    Підсумок одного запуску оптимізації.

    Атрибути:
        x                  - точка з найменшим значенням серед усіх обчислень.
        y                  - f(x), мінімум по всій трасі.
        iterations         - кількість фактично виконаних ітерацій.
        elapsed            - час роботи, секунди.
        evaluations        - траса обчислень у порядку обчислення:
                             a, b, далі по одній середині на ітерацію.
        lipschitz_constant - значення L, за яким ранжувались інтервали.
        method_name        - назва методу (Optimizer.name).
        stopped_by         - причина зупинки ("max_gap", "max_iter", "method:...").
        func_evals         - усі виклики f, включно з сіткою для оцінки L.
        interval           - відрізок пошуку (a, b).
        eps                - використана точність.
    """
    x: float
    y: float
    iterations: int
    elapsed: float
    evaluations: Tuple[EvaluationPoint, ...]
    lipschitz_constant: float
    method_name: str = ""
    stopped_by: str = "max_iter"
    func_evals: int = 0
    interval: Tuple[float, float] = (0.0, 0.0)
    eps: float = DEFAULT_EPS

    @property
    def n_evaluations(self) -> int:
        return len(self.evaluations)

    def as_arrays(self) -> Tuple[np.ndarray, np.ndarray]:
        """Траса обчислень як два масиви (xs, ys) у порядку обчислення."""
        xs = np.fromiter((p.x for p in self.evaluations), dtype=float, count=len(self.evaluations))
        ys = np.fromiter((p.y for p in self.evaluations), dtype=float, count=len(self.evaluations))
        return xs, ys


# Тип callback'а для CLI/логів
IterationCallback = Callable[[IterationResult], None]


def best_evaluation(evaluations) -> EvaluationPoint:
    """
    Точка з найменшим y по всій трасі; при рівності найраніше обчислена.
    """
    if not evaluations:
        raise ValueError("Траса обчислень порожня.")
    return min(evaluations, key=lambda p: p.y)


class OptimizationEngine:
    """
    Движок, який керує ітераційним процесом для заданого Optimizer.

    Налаштування за замовчуванням (можуть бути переозначені у run()):
        eps      : поріг для максимальної відстані між точками (default: 1e-3)
        max_iter : максимальна кількість ітерацій (default: 1000)
    """

    def __init__(
        self,
        eps: float = DEFAULT_EPS,
        max_iter: int = DEFAULT_MAX_ITERATIONS,
    ) -> None:
        self.eps_default = check_tolerance(eps)
        self.max_iter_default = check_iteration_bound(max_iter)

    def run(
        self,
        optimizer: Optimizer,
        a: float,
        b: float,
        eps: Optional[float] = None,
        max_iter: Optional[int] = None,
        callback: Optional[IterationCallback] = None,
    ) -> OptimizationResult:
        """
        Запустити процес оптимізації на [a, b].

        Усі параметри перевіряються до першого виклику цільової функції.
        """
        a, b = check_interval(a, b)
        eps = check_tolerance(eps if eps is not None else self.eps_default)
        max_iter = check_iteration_bound(
            max_iter if max_iter is not None else self.max_iter_default
        )

        optimizer.reset()

        start = time.perf_counter()
        optimizer.initialize(a, b)

        iterations = 0
        stopped_by = "max_iter"

        while iterations < max_iter:
            step_res: StepResult = optimizer.step()
            meta = dict(step_res.meta or {})

            # Чи метод сам попросив зупинити процес?
            method_stopped = meta.get("stopped_by")
            if method_stopped is not None:
                stopped_by = f"method:{method_stopped}"
                break

            iterations += 1
            max_gap = float(step_res.max_gap)

            if callback is not None:
                callback(
                    IterationResult(
                        index=iterations,
                        x=float(step_res.x_new),
                        f=float(step_res.f_new),
                        interval=meta.get("interval", (float("nan"), float("nan"))),
                        potential=float(meta.get("potential", float("nan"))),
                        max_gap=max_gap,
                        meta=meta,
                    )
                )

            logger.debug(
                "%s: iteration %d, x = %.10g, f = %.10g, max_gap = %.3g",
                optimizer.name, iterations, step_res.x_new, step_res.f_new, max_gap,
            )

            if max_gap < eps:
                stopped_by = "max_gap"
                break

        elapsed = time.perf_counter() - start

        evaluations = tuple(optimizer.evaluations)
        best = best_evaluation(evaluations)

        logger.info(
            "%s finished: stopped_by=%s, iterations=%d, f* = %.10g at x* = %.10g",
            optimizer.name, stopped_by, iterations, best.y, best.x,
        )

        return OptimizationResult(
            x=best.x,
            y=best.y,
            iterations=iterations,
            elapsed=elapsed,
            evaluations=evaluations,
            lipschitz_constant=float(getattr(optimizer, "lipschitz_constant", 0.0)),
            method_name=optimizer.name,
            stopped_by=stopped_by,
            func_evals=optimizer.func_evals,
            interval=(a, b),
            eps=eps,
        )


def optimize(
    func: ScalarFunction,
    a: float,
    b: float,
    eps: float,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    lipschitz_samples: int = DEFAULT_LIPSCHITZ_SAMPLES,
    *,
    safety_factor: float = DEFAULT_SAFETY_FACTOR,
    lipschitz_constant: Optional[float] = None,
    callback: Optional[IterationCallback] = None,
) -> OptimizationResult:
    """
    Знайти глобальний мінімум func на [a, b] методом Піявського.

    Parameters
    ----------
    func : Callable[[float], float]
        Чиста функція одного дійсного аргументу.
    a, b : float
        Межі пошуку, a < b.
    eps : float
        Точність (> 0) за максимальною відстанню між сусідніми точками.
    max_iterations : int
        Обмеження на кількість ітерацій (>= 0; при 0 лише граничні точки).
    lipschitz_samples : int
        Кількість вузлів сітки для оцінки L (>= 2).
    safety_factor : float
        Множник запасу для оцінки L.
    lipschitz_constant : Optional[float]
        Відома константа L; якщо задана, оцінка на сітці не виконується.
    callback : Optional[IterationCallback]
        Викликається після кожної ітерації.

    Raises
    ------
    InvalidRangeError, InvalidToleranceError, InvalidIterationBoundError,
    InvalidSampleCountError
        Некоректні вхідні параметри (до першого виклику func).
    """
    options = {
        "lipschitz_samples": lipschitz_samples,
        "safety_factor": safety_factor,
    }
    if lipschitz_constant is not None:
        options["lipschitz_constant"] = lipschitz_constant

    method = PiyavskyMethod(func=func, options=options)
    engine = OptimizationEngine()
    return engine.run(
        method,
        a,
        b,
        eps=eps,
        max_iter=max_iterations,
        callback=callback,
    )


__all__ = [
    "DEFAULT_EPS",
    "DEFAULT_MAX_ITERATIONS",
    "IterationCallback",
    "OptimizationResult",
    "OptimizationEngine",
    "best_evaluation",
    "optimize",
]
