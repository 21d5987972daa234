"""
results_summary.py

Зведена таблиця результатів кількох запусків оптимізації
(наприклад, методу Піявського на всіх тестових функціях).

Рядок таблиці будується з OptimizationResult:
    - method_name
    - interval
    - x, y
    - iterations
    - func_evals
    - lipschitz_constant
    - elapsed
    - stopped_by
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .engine import OptimizationResult


@dataclass
class ResultsSummary:
    """
    Зведення результатів кількох запусків.

    Приклад використання:
        summary = ResultsSummary()
        summary.add_run(result_rastrigin, label="rastrigin")
        summary.add_run(result_easom, label="easom")
        rows = summary.as_rows()  # для CLI / pandas / CSV
    """
    runs: List[OptimizationResult] = field(default_factory=list)
    labels: List[str] = field(default_factory=list)

    def add_run(self, run: OptimizationResult, label: Optional[str] = None) -> None:
        """Додати результат одного запуску до зведення."""
        self.runs.append(run)
        self.labels.append(label if label is not None else run.method_name)

    def __len__(self) -> int:
        return len(self.runs)

    # ------------------------------------------------------------------
    # Перетворення в "табличний" вигляд
    # ------------------------------------------------------------------

    def as_rows(self) -> List[Dict[str, Any]]:
        """
        Повернути список dict-рядків, придатних для:
            - створення pandas.DataFrame,
            - виводу в консоль,
            - експорту в CSV.
        """
        rows: List[Dict[str, Any]] = []

        for label, run in zip(self.labels, self.runs):
            a, b = run.interval
            rows.append(
                {
                    "label": label,
                    "method": run.method_name,
                    "a": float(a),
                    "b": float(b),
                    "x_star": float(run.x),
                    "f_star": float(run.y),
                    "n_iter": int(run.iterations),
                    "n_points": run.n_evaluations,
                    "func_evals": int(run.func_evals),
                    "lipschitz": float(run.lipschitz_constant),
                    "elapsed_ms": float(run.elapsed) * 1000.0,
                    "stopped_by": run.stopped_by,
                }
            )

        return rows

    # ------------------------------------------------------------------
    # Вибір "найкращого" запуску
    # ------------------------------------------------------------------

    def best_by_f(self) -> Optional[OptimizationResult]:
        """
        Повернути запуск з найменшим знайденим значенням y.
        Якщо список порожній, повертає None.
        """
        if not self.runs:
            return None
        return min(self.runs, key=lambda run: run.y)

    def to_dataframe(self):
        """
        Повернути pandas.DataFrame зі зведеною таблицею.

        Вимога: встановлений пакет pandas (extra "table").
        """
        try:
            import pandas as pd  # type: ignore
        except ImportError as exc:  # pragma: no cover
            raise RuntimeError(
                "Для використання ResultsSummary.to_dataframe() "
                "потрібно встановити пакет 'pandas'."
            ) from exc

        return pd.DataFrame(self.as_rows())


__all__ = ["ResultsSummary"]
