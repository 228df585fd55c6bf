"""End-to-end CLI runs through typer's test runner."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from backend.engine.gamesolver import Solver
from backend.engine.gridloader import GridLoader
from frontend.cli.vanilla import app as vanilla
from main import app

runner = CliRunner()


def _write(tmp_path: Path, *rows: str) -> Path:
    path = tmp_path / "puzzle.txt"
    path.write_text("\n".join(rows) + "\n")
    return path


def test_prints_numbered_route(tmp_path: Path) -> None:
    path = _write(tmp_path, "S0.", "...", "0.F")
    result = runner.invoke(app, [str(path), "--no-timing"])

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        "",
        "Shortest path:",
        "",
        "1. Start at (1,1)",
        "2. Move down to (1,2)",
        "3. Move right to (3,2)",
        "4. Move down to (3,3)",
        "5. Done!",
        "",
        "Total steps: 4",
    ]


def test_adjacent_finish(tmp_path: Path) -> None:
    path = _write(tmp_path, "S.F")
    result = runner.invoke(app, [str(path)])

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[3:6] == ["1. Start at (1,1)", "2. Move right to (3,1)", "3. Done!"]
    assert lines[-1].startswith("Solved in ")


def test_no_solution_is_not_a_failure(tmp_path: Path) -> None:
    path = _write(tmp_path, "S00", ".0F")
    result = runner.invoke(app, [str(path)])

    assert result.exit_code == 0
    assert result.output.strip() == "No solution found."


def test_fifo_order_option(tmp_path: Path) -> None:
    path = _write(tmp_path, "..0", "...", "S0F", "...", "...", "...")
    result = runner.invoke(app, [str(path), "--order", "fifo", "--no-timing"])

    assert result.exit_code == 0, result.output
    assert "Total steps: 8" in result.output


def test_malformed_input_aborts(tmp_path: Path) -> None:
    path = _write(tmp_path, "S..", ".F", "...")
    result = runner.invoke(app, [str(path)])

    assert result.exit_code == 1
    assert "Error: Inconsistent line lengths" in result.output
    assert "Shortest path" not in result.output
    assert "No solution" not in result.output


def test_missing_file_aborts(tmp_path: Path) -> None:
    result = runner.invoke(app, [str(tmp_path / "nope.txt")])

    assert result.exit_code == 1
    assert "Error: File not found" in result.output


@pytest.mark.parametrize("rows", [("S..", "0.F"), ("S00", ".0F")])
def test_rich_frontend(tmp_path: Path, rows: tuple[str, ...]) -> None:
    path = _write(tmp_path, *rows)
    result = runner.invoke(app, [str(path), "-f", "rich"])

    assert result.exit_code == 0, result.output
    if rows[0] == "S..":
        assert "Shortest path" in result.output
        assert "Move down to (3,2)" in result.output
    else:
        assert "No solution found." in result.output


def test_frontend_from_environment(tmp_path: Path) -> None:
    path = _write(tmp_path, "S.F")
    result = runner.invoke(app, [str(path)], env={"ICE_SLIDE_FRONTEND": "rich"})

    assert result.exit_code == 0, result.output
    assert "Moves:" in result.output


def test_vanilla_runner_prints_report(capsys: pytest.CaptureFixture[str]) -> None:
    grid = GridLoader.parse(["S..", "0.F"])
    vanilla.run(grid, Solver(grid).solve(), show_timing=False)

    lines = capsys.readouterr().out.splitlines()
    assert lines[3:7] == [
        "1. Start at (1,1)",
        "2. Move right to (3,1)",
        "3. Move down to (3,2)",
        "4. Done!",
    ]
    assert lines[-1] == "Total steps: 3"
