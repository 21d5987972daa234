"""
lipschitz.py

Оцінка константи Ліпшиця цільової функції на відрізку [a, b].

Ідея:
    - розбиваємо [a, b] на (samples - 1) рівних сегментів;
    - для кожної пари сусідніх вузлів рахуємо скінченну різницю
          |f(x_{i+1}) - f(x_i)| / |x_{i+1} - x_i|;
    - беремо максимум і множимо на запас safety_factor (1.2).

Це евристика, а не гарантована верхня межа: якщо між вузлами сітки
є крутий "пік", оцінка може виявитися заниженою.
"""

from __future__ import annotations

import numpy as np

from .exceptions import DegenerateIntervalError, NonFiniteValueError
from .functions import ScalarFunction
from .validation import check_interval, check_safety_factor, check_sample_count

DEFAULT_LIPSCHITZ_SAMPLES = 50
DEFAULT_SAFETY_FACTOR = 1.2


def lipschitz_grid(a: float, b: float, samples: int) -> np.ndarray:
    """Вузли сітки x_i = a + i * step, i = 0 .. samples - 1."""
    step = (b - a) / (samples - 1)
    return a + np.arange(samples, dtype=float) * step


def estimate_lipschitz_constant(
    func: ScalarFunction,
    a: float,
    b: float,
    samples: int = DEFAULT_LIPSCHITZ_SAMPLES,
    safety_factor: float = DEFAULT_SAFETY_FACTOR,
) -> float:
    """
    Оцінити константу Ліпшиця L функції func на [a, b].

    Parameters
    ----------
    func : Callable[[float], float]
        Цільова функція. Викликається рівно samples разів, по одному
        разу в кожному вузлі сітки.
    a, b : float
        Межі інтервалу, a < b.
    samples : int
        Кількість вузлів сітки (>= 2).
    safety_factor : float
        Множник запасу, на який домножується максимальний нахил.

    Returns
    -------
    float
        L >= 0 (для сталої функції L = 0).

    Raises
    ------
    DegenerateIntervalError
        a == b, або ширина сегмента сітки після округлення дорівнює нулю.
    InvalidRangeError
        a > b або нескінченні межі.
    InvalidSampleCountError
        samples < 2.
    NonFiniteValueError
        func повернула nan / ±inf у вузлі сітки.
    """
    a, b = check_interval(a, b)
    samples = check_sample_count(samples)
    safety_factor = check_safety_factor(safety_factor)

    xs = lipschitz_grid(a, b, samples)
    ys = np.array([func(float(x)) for x in xs], dtype=float)

    if not np.all(np.isfinite(ys)):
        bad = int(np.flatnonzero(~np.isfinite(ys))[0])
        raise NonFiniteValueError(
            f"Функція повернула {ys[bad]} у точці x = {xs[bad]} (оцінка L)."
        )

    widths = np.abs(np.diff(xs))
    if np.any(widths == 0.0):
        raise DegenerateIntervalError(
            f"Сітка з {samples} вузлів на [{a}, {b}] містить сегмент нульової ширини."
        )

    slopes = np.abs(np.diff(ys)) / widths
    return float(np.max(slopes)) * safety_factor


__all__ = [
    "DEFAULT_LIPSCHITZ_SAMPLES",
    "DEFAULT_SAFETY_FACTOR",
    "lipschitz_grid",
    "estimate_lipschitz_constant",
]
