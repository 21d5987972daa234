"""
iteration_result.py

Структури даних для представлення окремих обчислень та ітерацій
процесу глобальної мінімізації. Використовуються як у движку,
так і в CLI / графіках.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class EvaluationPoint:
    """
    Одне обчислення цільової функції: пара (x, y = f(x)).
    Після створення не змінюється.
    """
    x: float
    y: float


@dataclass
class IterationResult:
    """
    Опис однієї ітерації методу Піявського.

    Атрибути:
        index      - номер ітерації (1, 2, ...)
        x          - нова точка (середина обраного інтервалу)
        f          - значення функції f(x)
        interval   - обраний інтервал (x1, x2)
        potential  - оцінка знизу (потенціал) обраного інтервалу
        max_gap    - максимальна відстань між сусідніми точками після вставки
        meta       - довільна додаткова інформація (індекс інтервалу, ...)
    """
    index: int
    x: float
    f: float
    interval: Tuple[float, float]
    potential: float
    max_gap: float
    meta: Dict[str, Any] = field(default_factory=dict)


__all__ = [
    "EvaluationPoint",
    "IterationResult",
]
