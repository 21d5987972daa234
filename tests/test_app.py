"""
Smoke tests for the command-line front end.
"""

import pytest

from piyavskyAPP.app import (
    EXIT_INVALID_INPUT,
    EXIT_OK,
    build_parser,
    format_result,
    format_summary,
    main,
    run_config,
)
from piyavskyAPP.core.config import OptimizationConfig
from piyavskyAPP.core.results_summary import ResultsSummary


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.function is None
        assert args.eps == 1e-3
        assert args.max_iter == 1000
        assert args.samples == 50
        assert args.safety_factor == 1.2
        assert args.save_plot is None

    def test_unknown_function(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--function", "sphere"])


class TestRun:
    def test_run_config(self):
        cfg = OptimizationConfig.from_function("rastrigin", max_iterations=10)
        result = run_config(cfg)
        assert result.iterations == 10
        assert result.interval == (-2.0, 2.0)

    def test_format_result(self):
        result = run_config(OptimizationConfig.from_function("custom", max_iterations=5))
        text = format_result(result)
        assert "РЕЗУЛЬТАТИ:" in text
        assert "f(0.000000) = 0.000000" in text
        assert "Ітерації: 5" in text

    def test_format_summary(self):
        summary = ResultsSummary()
        summary.add_run(run_config(OptimizationConfig.from_function("custom", max_iterations=5)), label="custom")
        lines = format_summary(summary).split("\n")
        assert len(lines) == 3
        assert lines[2].startswith("custom")


class TestMain:
    def test_single_function(self, capsys):
        code = main(["--function", "rastrigin", "--max-iter", "20", "--width", "30", "--height", "8"])
        out = capsys.readouterr().out
        assert code == EXIT_OK
        assert "РЕЗУЛЬТАТИ:" in out
        assert "★" in out
        assert "ЗВЕДЕНА ТАБЛИЦЯ" not in out

    def test_all_functions(self, capsys):
        code = main(["--max-iter", "20", "--no-plot"])
        out = capsys.readouterr().out
        assert code == EXIT_OK
        assert out.count("РЕЗУЛЬТАТИ:") == 4
        assert "ЗВЕДЕНА ТАБЛИЦЯ" in out
        assert "★" not in out

    def test_save_plot(self, tmp_path, capsys):
        code = main(["--function", "custom", "--max-iter", "10", "--no-plot", "--save-plot", str(tmp_path)])
        assert code == EXIT_OK
        assert (tmp_path / "custom.png").exists()

    @pytest.mark.parametrize(
        "argv",
        [
            ["--eps", "0"],
            ["--max-iter", "-1"],
            ["--samples", "1"],
            ["--function", "custom", "--a", "1", "--b", "1"],
            ["--width", "3"],
        ],
    )
    def test_invalid_input(self, argv, capsys):
        assert main(argv) == EXIT_INVALID_INPUT
        assert "Помилка" in capsys.readouterr().err
