"""
piyavsky.py

Метод Піявського (послідовний перебір з оцінкою константи Ліпшиця)
як стратегія Optimizer.

Ідея:
    - один раз оцінюємо L на грубій сітці (core.lipschitz);
    - стартуємо з двох граничних точок a та b;
    - на кожному кроці:
        * для кожного інтервалу [x_i, x_{i+1}] рахуємо потенціал
              R_i = 0.5 (y_i + y_{i+1}) - 0.5 L (x_{i+1} - x_i);
        * обираємо інтервал з найменшим R_i (при рівності найлівіший);
        * обчислюємо f у СЕРЕДИНІ інтервалу (а не в точці перетину
          прямих, як у класичному методі);
        * вставляємо нову точку, зберігаючи сортування.

Критерій зупинки (max_gap < eps або max_iter) перевіряє движок.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, Optional

from .exceptions import OptimizationError
from .functions import ScalarFunction
from .lipschitz import (
    DEFAULT_LIPSCHITZ_SAMPLES,
    DEFAULT_SAFETY_FACTOR,
    estimate_lipschitz_constant,
)
from .optimizer_base import Optimizer, StepResult
from .search_state import SearchState
from .validation import check_interval, check_safety_factor, check_sample_count

logger = logging.getLogger(__name__)


class PiyavskyMethod(Optimizer):
    """
    Метод Піявського з вибором середини інтервалу.

    Налаштування (options):
        lipschitz_samples  : кількість вузлів сітки для оцінки L (default: 50)
        safety_factor      : множник запасу для оцінки L (default: 1.2)
        lipschitz_constant : відома константа L >= 0; якщо задана,
                             оцінка на сітці не виконується (default: None)
    """

    def __init__(
        self,
        func: ScalarFunction,
        options: Optional[Dict[str, Any]] = None,
        name: Optional[str] = None,
    ) -> None:
        super().__init__(func=func, options=options, name=name or "Метод Піявського")

        self.lipschitz_samples: int = check_sample_count(
            self.options.get("lipschitz_samples", DEFAULT_LIPSCHITZ_SAMPLES)
        )
        self.safety_factor: float = check_safety_factor(
            self.options.get("safety_factor", DEFAULT_SAFETY_FACTOR)
        )

        fixed_l = self.options.get("lipschitz_constant")
        if fixed_l is not None:
            fixed_l = float(fixed_l)
            if not (math.isfinite(fixed_l) and fixed_l >= 0.0):
                raise OptimizationError(
                    f"Константа Ліпшиця повинна бути скінченною та >= 0, отримано: {fixed_l}."
                )
        self.fixed_lipschitz_constant: Optional[float] = fixed_l

        self.lipschitz_constant: float = 0.0
        self.search: Optional[SearchState] = None

    def reset(self) -> None:
        super().reset()
        self.lipschitz_constant = 0.0
        self.search = None

    # ------------------------------------------------------------------
    # Ініціалізація: оцінка L + граничні точки
    # ------------------------------------------------------------------

    def initialize(self, a: float, b: float) -> None:
        a, b = check_interval(a, b)

        if self.fixed_lipschitz_constant is not None:
            self.lipschitz_constant = self.fixed_lipschitz_constant
        else:
            self.lipschitz_constant = estimate_lipschitz_constant(
                self.eval_f,
                a,
                b,
                samples=self.lipschitz_samples,
                safety_factor=self.safety_factor,
            )
        logger.debug("%s: L = %.6g on [%g, %g]", self.name, self.lipschitz_constant, a, b)

        left = self.record(a)
        right = self.record(b)
        self.search = SearchState.from_bounds(left.x, left.y, right.x, right.y)

    # ------------------------------------------------------------------
    # Один крок
    # ------------------------------------------------------------------

    def _step_impl(self) -> StepResult:
        if self.search is None:
            raise RuntimeError(f"{self.name}: initialize() не було викликано.")

        search = self.search
        selected = search.select_interval(self.lipschitz_constant)

        if selected is None:
            # За інваріантом стану сюди не потрапляємо
            logger.warning("%s: no interval to refine, stopping", self.name)
            return StepResult(
                x_new=None,
                f_new=None,
                max_gap=search.max_gap(),
                meta={"stopped_by": "no_interval"},
            )

        index, potential = selected
        x1, x2 = search.interval(index)
        x_new = (x1 + x2) / 2.0

        if not x1 < x_new < x2:
            # x1 та x2: сусідні числа з плаваючою комою
            logger.info("%s: interval [%r, %r] cannot be split further", self.name, x1, x2)
            return StepResult(
                x_new=None,
                f_new=None,
                max_gap=search.max_gap(),
                meta={"stopped_by": "resolution", "interval": (x1, x2)},
            )

        point = self.record(x_new)
        search.insert(point.x, point.y)
        max_gap = search.max_gap()

        return StepResult(
            x_new=point.x,
            f_new=point.y,
            max_gap=max_gap,
            meta={
                "interval": (x1, x2),
                "interval_index": index,
                "potential": potential,
            },
        )


__all__ = ["PiyavskyMethod"]
