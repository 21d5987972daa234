"""
app.py

Консольний застосунок для глобальної мінімізації тестових функцій
методом Піявського.

Зв'язує:
    - core.functions.FUNCTIONS (тестові функції та відрізки)
    - core.engine.OptimizationEngine + core.piyavsky.PiyavskyMethod
    - ui.ascii_plot.AsciiPlotter (текстовий графік)
    - ui.plot_view (PNG-графіки, опційно)
    - core.results_summary.ResultsSummary (зведена таблиця)

Функціонал:
    - запуск однієї функції (--function) або всіх по черзі;
    - друк текстового графіка та блоку результатів;
    - зведена таблиця для кількох запусків;
    - коди виходу: 0 (успіх), 1 (усі запуски впали), 2 (некоректні параметри).
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .core.config import OptimizationConfig
from .core.engine import DEFAULT_EPS, DEFAULT_MAX_ITERATIONS, OptimizationEngine, OptimizationResult
from .core.exceptions import OptimizationError
from .core.functions import FUNCTIONS
from .core.lipschitz import DEFAULT_LIPSCHITZ_SAMPLES, DEFAULT_SAFETY_FACTOR
from .core.piyavsky import PiyavskyMethod
from .core.results_summary import ResultsSummary
from .ui.ascii_plot import AsciiPlotter
from .ui.plot_view import save_result_plot

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_RUN_FAILED = 1
EXIT_INVALID_INPUT = 2


# ---------------------------------------------------------------------------
# Аргументи командного рядка
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="piyavsky",
        description="Глобальна мінімізація функцій однієї змінної методом Піявського.",
    )
    parser.add_argument(
        "--function",
        choices=sorted(FUNCTIONS),
        default=None,
        help="Ключ тестової функції; без нього запускаються всі функції.",
    )
    parser.add_argument("--a", type=float, default=None, help="Ліва межа (за замовчуванням з реєстру).")
    parser.add_argument("--b", type=float, default=None, help="Права межа (за замовчуванням з реєстру).")
    parser.add_argument("--eps", type=float, default=DEFAULT_EPS, help="Точність за max_gap.")
    parser.add_argument(
        "--max-iter",
        type=int,
        default=DEFAULT_MAX_ITERATIONS,
        help="Максимальна кількість ітерацій.",
    )
    parser.add_argument(
        "--samples",
        type=int,
        default=DEFAULT_LIPSCHITZ_SAMPLES,
        help="Кількість вузлів сітки для оцінки константи Ліпшиця.",
    )
    parser.add_argument(
        "--safety-factor",
        type=float,
        default=DEFAULT_SAFETY_FACTOR,
        help="Множник запасу для оцінки константи Ліпшиця.",
    )
    parser.add_argument("--width", type=int, default=80, help="Ширина текстового графіка.")
    parser.add_argument("--height", type=int, default=20, help="Висота текстового графіка.")
    parser.add_argument("--no-plot", action="store_true", help="Не друкувати текстовий графік.")
    parser.add_argument(
        "--save-plot",
        type=Path,
        default=None,
        metavar="DIR",
        help="Зберегти PNG-графіки результатів у каталог DIR.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Детальний лог (DEBUG).")
    return parser


# ---------------------------------------------------------------------------
# Запуск та форматування
# ---------------------------------------------------------------------------

def run_config(cfg: OptimizationConfig, engine: Optional[OptimizationEngine] = None) -> OptimizationResult:
    """Запустити метод Піявського для однієї конфігурації."""
    cfg.validate()
    engine = engine or OptimizationEngine()
    method = PiyavskyMethod(func=cfg.target.func, options=cfg.method_options())
    return engine.run(
        method,
        cfg.a,
        cfg.b,
        eps=cfg.eps,
        max_iter=cfg.max_iterations,
    )


def format_result(result: OptimizationResult) -> str:
    """Блок "РЕЗУЛЬТАТИ" для консолі."""
    return "\n".join(
        [
            "",
            "РЕЗУЛЬТАТИ:",
            f"   Мінімум: f({result.x:.6f}) = {result.y:.6f}",
            f"   Ітерації: {result.iterations}",
            f"   Час: {result.elapsed * 1000.0:.3f} мс",
            f"   Точок обчислень: {result.n_evaluations}",
            f"   Викликів f: {result.func_evals}",
            f"   Константа Ліпшиця: {result.lipschitz_constant:.6f}",
            f"   Зупинка: {result.stopped_by}",
        ]
    )


def format_summary(summary: ResultsSummary) -> str:
    """Зведена таблиця у вигляді вирівняного тексту."""
    header = f"{'функція':<12}{'x*':>14}{'f*':>14}{'ітер.':>8}{'f викл.':>9}{'L':>12}{'мс':>10}  зупинка"
    lines = [header, "-" * len(header)]
    for row in summary.as_rows():
        lines.append(
            f"{row['label']:<12}{row['x_star']:>14.6f}{row['f_star']:>14.6f}"
            f"{row['n_iter']:>8d}{row['func_evals']:>9d}{row['lipschitz']:>12.4f}"
            f"{row['elapsed_ms']:>10.3f}  {row['stopped_by']}"
        )
    return "\n".join(lines)


def _run_and_report(
    cfg: OptimizationConfig,
    plotter: Optional[AsciiPlotter],
    plot_dir: Optional[Path],
) -> OptimizationResult:
    tf = cfg.target
    print("\n" + f" ТЕСТ: {tf.name} ".ljust(50, "─"))

    result = run_config(cfg)

    if plotter is not None:
        print(plotter.render(tf.func, result, cfg.a, cfg.b, tf.name))
    print(format_result(result))

    if plot_dir is not None:
        path = save_result_plot(plot_dir / f"{tf.key}.png", tf.func, result, title=tf.name)
        print(f"   Графік: {path}")

    return result


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    keys: List[str] = [args.function] if args.function else list(FUNCTIONS)

    try:
        configs = [
            OptimizationConfig.from_function(
                key,
                a=args.a,
                b=args.b,
                eps=args.eps,
                max_iterations=args.max_iter,
                lipschitz_samples=args.samples,
                safety_factor=args.safety_factor,
            ).validate()
            for key in keys
        ]
        plotter = None if args.no_plot else AsciiPlotter(width=args.width, height=args.height)
    except (OptimizationError, ValueError) as exc:
        print(f"Помилка: {exc}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    summary = ResultsSummary()

    for cfg in configs:
        try:
            result = _run_and_report(cfg, plotter, args.save_plot)
        except OptimizationError as exc:
            print(f"[WARN] Функція {cfg.function_key} завершилась помилкою: {exc}")
            logger.debug("run failed", exc_info=True)
            continue
        summary.add_run(result, label=cfg.function_key)

    if not len(summary):
        print("Жоден запуск не завершився коректно.", file=sys.stderr)
        return EXIT_RUN_FAILED

    if len(summary) > 1:
        print("\nЗВЕДЕНА ТАБЛИЦЯ:")
        print(format_summary(summary))

        best = summary.best_by_f()
        best_label = summary.labels[summary.runs.index(best)]
        print(f"\nНайменше f*: {best_label}, f({best.x:.6f}) = {best.y:.6f}")

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
