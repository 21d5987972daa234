"""
Графіки результату оптимізації (matplotlib) у компактному темному стилі.

Будує дві сторінки на одній фігурі:
    - функція f(x), нижня оцінка-"пилка", точки обчислень та мінімум;
    - f у порядку обчислення разом з поточним найкращим значенням.

Використовується без pyplot: Figure + FigureCanvasAgg, тому працює
і без дисплея.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import numpy as np
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from ..core.engine import OptimizationResult
from ..core.functions import ScalarFunction
from ..core.search_state import SearchState
from .styles import PALETTE, style_axes


def build_result_figure(
    func: ScalarFunction,
    result: OptimizationResult,
    title: Optional[str] = None,
    grid_size: int = 400,
    show_lower_bound: bool = True,
) -> Figure:
    """
    Побудувати фігуру з двома графіками для результату result.

    Відрізок береться з result.interval.
    """
    a, b = result.interval
    figure = Figure(figsize=(9.0, 6.0), facecolor=PALETTE.surface_alt)
    FigureCanvasAgg(figure)
    ax_func, ax_trace = figure.subplots(2, 1, gridspec_kw={"height_ratios": [3, 2]})

    # ---- f(x) + пилка + точки ----
    style_axes(ax_func)
    grid = np.linspace(a, b, grid_size)
    values = np.array([func(float(x)) for x in grid], dtype=float)
    ax_func.plot(grid, values, linewidth=1.4, color=PALETTE.text_main, label="f(x)")

    xs, ys = result.as_arrays()

    if show_lower_bound and result.lipschitz_constant > 0.0:
        state = SearchState.from_points(zip(xs.tolist(), ys.tolist()))
        bx, by = state.lower_bound(result.lipschitz_constant)
        ax_func.plot(
            bx, by,
            linestyle="--", linewidth=0.9, color=PALETTE.text_muted,
            label=f"нижня оцінка (L = {result.lipschitz_constant:.3g})",
        )

    ax_func.scatter(xs, ys, marker="x", s=18, color=PALETTE.accent, zorder=4, label="обчислення")
    ax_func.scatter(
        [result.x], [result.y],
        marker="*", s=160, color=PALETTE.highlight, zorder=5,
        label=f"мінімум f({result.x:.4f}) = {result.y:.4f}",
    )
    ax_func.set_xlim(a, b)
    ax_func.set_xlabel("x")
    ax_func.set_ylabel("f(x)")
    ax_func.set_title(title or result.method_name)
    ax_func.legend(loc="best", fontsize=8)

    # ---- f у порядку обчислення ----
    style_axes(ax_trace)
    ks = np.arange(len(ys))
    ax_trace.plot(ks, ys, marker="o", linestyle="-", linewidth=0.8, markersize=2.5, color=PALETTE.accent)
    ax_trace.plot(ks, np.minimum.accumulate(ys), linewidth=1.5, color=PALETTE.highlight, label="найкраще f")
    ax_trace.set_xlabel("номер обчислення")
    ax_trace.set_ylabel("f")
    ax_trace.legend(loc="best", fontsize=8)

    figure.tight_layout()
    return figure


def save_result_plot(
    path: Union[str, Path],
    func: ScalarFunction,
    result: OptimizationResult,
    title: Optional[str] = None,
    dpi: int = 100,
) -> Path:
    """Зберегти графік результату у файл (формат визначає розширення, напр. .png)."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    figure = build_result_figure(func, result, title=title)
    figure.savefig(path, dpi=dpi, facecolor=figure.get_facecolor())
    return path


__all__ = ["build_result_figure", "save_result_plot"]
