"""Tests for the command-line interface."""

import pytest
from typer.testing import CliRunner

from ansi_charts.cli.app import STYLE_ENV, WIDTH_ENV, create_app
from ansi_charts.core.ansi_text import strip_ansi


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def app():
    return create_app()


class TestChartCommands:

    def test_spark(self, runner, app) -> None:
        result = runner.invoke(app, ["spark", "1", "5", "22", "13", "53", "29", "44", "90"])
        assert result.exit_code == 0
        assert result.stdout == "▁▁▂▁▅▃▄█\n"

    def test_bars(self, runner, app) -> None:
        result = runner.invoke(app, ["bars", "A=10", "B=5", "--style", "ascii", "--width", "10"])
        assert result.exit_code == 0
        assert result.stdout == (
            "A            | ########## (10)\n"
            "B            | ##### (5)\n"
        )

    def test_bars_options_from_environment(self, runner, app) -> None:
        result = runner.invoke(
            app, ["bars", "A=2"], env={STYLE_ENV: "ascii", WIDTH_ENV: "3"},
        )
        assert result.exit_code == 0
        assert result.stdout == "A            | ### (2)\n"

    def test_bars_seeded_random_colors(self, runner, app) -> None:
        args = ["bars", "A=4", "--random-colors", "--seed", "7"]
        first = runner.invoke(app, args)
        second = runner.invoke(app, args)
        assert first.exit_code == 0
        assert first.stdout == second.stdout
        assert strip_ansi(first.stdout).startswith("A            | ")

    @pytest.mark.parametrize("pair", ["novalue", "=3", "A=abc", "A=-1"])
    def test_bars_bad_input(self, runner, app, pair) -> None:
        result = runner.invoke(app, ["bars", pair])
        assert result.exit_code == 1

    @pytest.mark.parametrize("command", ["spark", "line"])
    def test_non_finite_values(self, runner, app, command) -> None:
        result = runner.invoke(app, [command, "1", "inf", "3"])
        assert result.exit_code == 1
        assert "Traceback" not in result.output

    def test_unknown_style(self, runner, app) -> None:
        result = runner.invoke(app, ["bars", "A=1", "--style", "fancy"])
        assert result.exit_code == 1

    def test_line(self, runner, app) -> None:
        result = runner.invoke(
            app,
            ["line", "1", "2", "3", "--style", "ascii", "--width", "10", "--height", "5",
             "--title", "Up", "--stats"],
        )
        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert lines[0] == "    Up"
        assert "*" in result.stdout
        assert "Points: 3" in result.stdout

    def test_breakdown(self, runner, app) -> None:
        result = runner.invoke(
            app, ["breakdown", "A=1", "B=1", "--style", "ascii", "--width", "10"],
        )
        assert result.exit_code == 0
        lines = strip_ansi(result.stdout).splitlines()
        assert lines[0] == "=========="
        assert "o A (50.0%)" in lines


class TestStructureCommands:

    def test_table(self, runner, app) -> None:
        result = runner.invoke(
            app, ["table", "Alice,25", "Bob,30", "--headers", "Name,Age", "--style", "ascii"],
        )
        assert result.exit_code == 0
        assert result.stdout.splitlines() == [
            "+-------+-------+",
            "| Name  | Age   |",
            "+-------+-------+",
            "| Alice | 25    |",
            "| Bob   | 30    |",
            "+-------+-------+",
        ]

    def test_table_alternate_needs_theme(self, runner, app) -> None:
        result = runner.invoke(app, ["table", "a", "b", "--headers", "h", "--alternate"])
        assert result.exit_code == 1
        themed = runner.invoke(
            app, ["table", "a", "b", "--headers", "h", "--alternate", "--theme", "blue"],
        )
        assert themed.exit_code == 0

    def test_table_unknown_theme(self, runner, app) -> None:
        result = runner.invoke(app, ["table", "a", "--headers", "h", "--theme", "neon"])
        assert result.exit_code == 1

    def test_tree(self, runner, app) -> None:
        result = runner.invoke(
            app,
            ["tree", "src/main.py", "src/lib.py", "README.md", "--root", "Project", "--style", "ascii"],
        )
        assert result.exit_code == 0
        assert result.stdout == (
            "Project\n"
            "|-src\n"
            "| |-main.py\n"
            "| `-lib.py\n"
            "`-README.md\n"
        )

    def test_toast(self, runner, app) -> None:
        result = runner.invoke(app, ["toast", "Hi", "--no-icon"])
        assert result.exit_code == 0
        assert strip_ansi(result.stdout).splitlines() == [
            "┌──────────┐",
            "│ INFO: Hi │",
            "└──────────┘",
        ]

    def test_toast_unknown_kind(self, runner, app) -> None:
        result = runner.invoke(app, ["toast", "Hi", "--kind", "panic"])
        assert result.exit_code == 1

    def test_demo(self, runner, app) -> None:
        result = runner.invoke(app, ["demo"])
        assert result.exit_code == 0
        for heading in ("Sparkline", "Bar Chart", "Line Chart", "Breakdown", "Table", "Tree", "Toasts"):
            assert f"=== {heading} ===" in result.stdout
