"""
ascii_plot.py

Текстовий графік функції та результату оптимізації для консолі.

Позначення на полотні:
    •  - графік функції
    ×  - точки, у яких обчислювалась функція
    ★  - знайдений мінімум
    ─  - вісь y = 0 (якщо потрапляє в діапазон)
"""

from __future__ import annotations

from typing import List

import numpy as np

from ..core.engine import OptimizationResult
from ..core.functions import ScalarFunction

CURVE_CHAR = "•"
POINT_CHAR = "×"
MINIMUM_CHAR = "★"
AXIS_CHAR = "─"


class AsciiPlotter:
    """
    Малює функцію, трасу обчислень і мінімум у прямокутнику width × height.

    Використання:
        plotter = AsciiPlotter(width=80, height=20)
        print(plotter.render(func, result, a, b, "Назва"))
    """

    def __init__(self, width: int = 80, height: int = 20, range_samples: int = 100) -> None:
        if width < 10 or height < 2:
            raise ValueError(f"Замале полотно: {width}x{height} (потрібно >= 10x2).")
        self.width = width
        self.height = height
        self.range_samples = range_samples

    # ------------------------------------------------------------------
    # Перетворення координат у позиції полотна
    # ------------------------------------------------------------------

    def _column(self, x: float, a: float, b: float) -> int:
        col = int((x - a) / (b - a) * (self.width - 1))
        return min(max(col, 0), self.width - 1)

    def _row(self, y: float, y_min: float, y_max: float) -> int:
        y_range = y_max - y_min
        if y_range <= 0.0:
            return (self.height - 1) // 2
        row = int((y_max - y) / y_range * (self.height - 1))
        return min(max(row, 0), self.height - 1)

    # ------------------------------------------------------------------
    # Побудова полотна
    # ------------------------------------------------------------------

    def canvas(
        self,
        func: ScalarFunction,
        result: OptimizationResult,
        a: float,
        b: float,
    ) -> List[List[str]]:
        """Полотно height × width без рамки та підписів."""
        if not a < b:
            raise ValueError(f"Для графіка потрібно a < b: a={a}, b={b}.")

        probe = [func(float(x)) for x in np.linspace(a, b, self.range_samples + 1)]
        _, traced = result.as_arrays()
        values = np.concatenate([np.asarray(probe, dtype=float), traced])
        y_min = float(np.min(values))
        y_max = float(np.max(values))

        grid = [[" "] * self.width for _ in range(self.height)]

        if y_min <= 0.0 <= y_max:
            zero_row = self._row(0.0, y_min, y_max)
            grid[zero_row] = [AXIS_CHAR] * self.width

        for col in range(self.width):
            x = a + col * (b - a) / (self.width - 1)
            grid[self._row(func(x), y_min, y_max)][col] = CURVE_CHAR

        for point in result.evaluations:
            grid[self._row(point.y, y_min, y_max)][self._column(point.x, a, b)] = POINT_CHAR

        grid[self._row(result.y, y_min, y_max)][self._column(result.x, a, b)] = MINIMUM_CHAR
        return grid

    def render(
        self,
        func: ScalarFunction,
        result: OptimizationResult,
        a: float,
        b: float,
        title: str = "",
    ) -> str:
        """Повний текстовий графік із заголовком, рамкою та підписами осі x."""
        lines = [
            "=" * self.width,
            title.center(self.width),
            "=" * self.width,
        ]
        lines.extend(f"│{''.join(row)}│" for row in self.canvas(func, result, a, b))
        lines.append("└" + "─" * self.width + "┘")

        left = f"{a:.2f}"
        right = f"{b:.2f}"
        gap = max(self.width + 2 - len(left) - len(right) - 2, 1)
        lines.append(f"  {left}{' ' * gap}{right}")
        return "\n".join(lines)


__all__ = ["AsciiPlotter", "CURVE_CHAR", "POINT_CHAR", "MINIMUM_CHAR", "AXIS_CHAR"]
