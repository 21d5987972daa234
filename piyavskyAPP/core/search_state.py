"""
search_state.py

Поточний стан пошуку методу Піявського: впорядкований набір обчислених
точок (x_i, y_i).

Інваріанти:
    - xs строго зростає, дублікатів немає;
    - len(xs) == len(ys) до і після кожної вставки.

Стан належить одному запуску оптимізації і назовні не повертається.
"""

from __future__ import annotations

from bisect import bisect_right
from typing import Iterable, List, Optional, Tuple

import numpy as np


class SearchState:
    """
    Два паралельні списки xs / ys, відсортовані за x.

    Використання:
        state = SearchState.from_bounds(a, f(a), b, f(b))
        index, potential = state.select_interval(L)
        state.insert(x_new, y_new)
    """

    def __init__(self) -> None:
        self.xs: List[float] = []
        self.ys: List[float] = []

    @classmethod
    def from_bounds(cls, a: float, fa: float, b: float, fb: float) -> "SearchState":
        """Початковий стан: дві граничні точки a < b."""
        state = cls()
        state.insert(a, fa)
        state.insert(b, fb)
        return state

    @classmethod
    def from_points(cls, points: Iterable[Tuple[float, float]]) -> "SearchState":
        """Відновити стан з довільно впорядкованих пар (x, y), напр. з траси."""
        state = cls()
        for x, y in points:
            state.insert(x, y)
        return state

    def __len__(self) -> int:
        return len(self.xs)

    @property
    def n_intervals(self) -> int:
        return max(len(self.xs) - 1, 0)

    def interval(self, index: int) -> Tuple[float, float]:
        """Межі інтервалу з номером index: (x_index, x_{index+1})."""
        return self.xs[index], self.xs[index + 1]

    # ------------------------------------------------------------------
    # Вставка нової точки
    # ------------------------------------------------------------------

    def insert(self, x: float, y: float) -> int:
        """
        Вставити (x, y), зберігаючи строге зростання xs.

        Індекс вставки: перший індекс, де xs[i] > x (бінарний пошук);
        якщо такого немає, точка додається в кінець.

        Returns
        -------
        int
            Позиція, на яку вставлено точку.

        Raises
        ------
        ValueError
            Якщо точка з таким x уже є у стані.
        """
        index = bisect_right(self.xs, x)
        if index > 0 and self.xs[index - 1] == x:
            raise ValueError(f"Точка x = {x} уже присутня у стані пошуку.")

        self.xs.insert(index, x)
        self.ys.insert(index, y)
        return index

    # ------------------------------------------------------------------
    # Потенціали та вибір інтервалу
    # ------------------------------------------------------------------

    def potentials(self, lipschitz_constant: float) -> np.ndarray:
        """
        Потенціал кожного інтервалу [x_i, x_{i+1}]:

            R_i = 0.5 * (y_i + y_{i+1}) - 0.5 * L * (x_{i+1} - x_i)

        Це мінімум "пилки", тобто двох прямих з нахилами ±L, проведених
        з кінців інтервалу.
        """
        if len(self.xs) < 2:
            return np.empty(0, dtype=float)

        xs = np.asarray(self.xs, dtype=float)
        ys = np.asarray(self.ys, dtype=float)
        return 0.5 * (ys[:-1] + ys[1:]) - 0.5 * lipschitz_constant * np.diff(xs)

    def select_interval(self, lipschitz_constant: float) -> Optional[Tuple[int, float]]:
        """
        (індекс, потенціал) інтервалу з найменшим потенціалом.

        При рівних потенціалах перемагає найлівіший інтервал
        (np.argmin повертає перше входження мінімуму).
        None, якщо у стані менше двох точок.
        """
        potentials = self.potentials(lipschitz_constant)
        if potentials.size == 0:
            return None
        index = int(np.argmin(potentials))
        return index, float(potentials[index])

    # ------------------------------------------------------------------
    # Критерій зупинки та перевірки
    # ------------------------------------------------------------------

    def max_gap(self) -> float:
        """Найбільша відстань між сусідніми x (0.0 для < 2 точок)."""
        if len(self.xs) < 2:
            return 0.0
        return float(np.max(np.diff(np.asarray(self.xs, dtype=float))))

    def is_strictly_ascending(self) -> bool:
        if len(self.xs) != len(self.ys):
            return False
        return all(x1 < x2 for x1, x2 in zip(self.xs, self.xs[1:]))

    # ------------------------------------------------------------------
    # Нижня оцінка для графіків
    # ------------------------------------------------------------------

    def lower_bound(self, lipschitz_constant: float) -> Tuple[np.ndarray, np.ndarray]:
        """
        Вершини ламаної "пилки", нижньої оцінки функції.

        Для кожного інтервалу додається точка перетину прямих
            y_i - L (x - x_i)   та   y_{i+1} + L (x - x_{i+1}),
        обрізана до [x_i, x_{i+1}]. При L = 0 береться середина.
        """
        if not self.xs:
            return np.empty(0, dtype=float), np.empty(0, dtype=float)

        bx: List[float] = [self.xs[0]]
        by: List[float] = [self.ys[0]]

        for i in range(len(self.xs) - 1):
            x1, x2 = self.xs[i], self.xs[i + 1]
            y1, y2 = self.ys[i], self.ys[i + 1]

            if lipschitz_constant > 0.0:
                x_star = 0.5 * (x1 + x2) + (y1 - y2) / (2.0 * lipschitz_constant)
                x_star = min(max(x_star, x1), x2)
                y_star = max(y1 - lipschitz_constant * (x_star - x1),
                             y2 + lipschitz_constant * (x_star - x2))
            else:
                x_star = 0.5 * (x1 + x2)
                y_star = min(y1, y2)

            bx.extend([x_star, x2])
            by.extend([y_star, y2])

        return np.asarray(bx, dtype=float), np.asarray(by, dtype=float)


__all__ = ["SearchState"]
