from __future__ import annotations

import pytest

import project_config
from contracts.errors import UnsolvableError
from sudoku_grid import SEPARATOR
from tools.cli import generate as cli
from tools.cli.generate import main


@pytest.fixture(autouse=True)
def _fresh_config():
    project_config.reload()
    yield
    project_config.reload()


def test_main_prints_generated_board(capsys):
    assert main(["--seed", "5"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Generated sudoku:"
    assert out[1] == SEPARATOR and out[-1] == SEPARATOR
    rows = out[2:-1]
    assert len(rows) == 9
    filled = sum(sum(ch.isdigit() for ch in row) for row in rows)
    assert filled == 30


def test_main_is_reproducible_with_seed(capsys):
    main(["--seed", "11"])
    first = capsys.readouterr().out
    main(["--seed", "11"])
    assert capsys.readouterr().out == first


def test_main_rejects_bad_configured_target(tmp_path, monkeypatch, capsys):
    path = tmp_path / "bad.toml"
    path.write_text("[generator]\ntarget_filled = 90\n", encoding="utf-8")
    monkeypatch.setenv(project_config.CONFIG_ENV_VAR, str(path))
    assert main([]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "between 0 and 81" in captured.err


def test_resolve_log_level_accepts_known_names():
    assert cli._resolve_log_level("debug") == "DEBUG"
    assert cli._resolve_log_level(None) == "WARNING"


def test_main_rejects_unknown_log_level_flag(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--log-level", "verbose", "--seed", "1"])
    assert excinfo.value.code == 2
    assert "--log-level" in capsys.readouterr().err


def test_main_rejects_bad_configured_log_level(tmp_path, monkeypatch, capsys):
    path = tmp_path / "bad_level.toml"
    path.write_text('[logging]\nlevel = "verbose"\n', encoding="utf-8")
    monkeypatch.setenv(project_config.CONFIG_ENV_VAR, str(path))
    with pytest.raises(ValueError):
        cli._resolve_log_level(None)
    assert main(["--seed", "1"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "unknown logging level" in captured.err


def _use_target(tmp_path, monkeypatch, target: int) -> None:
    path = tmp_path / "target.toml"
    path.write_text(f"[generator]\ntarget_filled = {target}\n", encoding="utf-8")
    monkeypatch.setenv(project_config.CONFIG_ENV_VAR, str(path))


def test_check_flag_validates_the_solution(tmp_path, monkeypatch, capsys):
    # a high clue count keeps the plain backtracking solve fast
    _use_target(tmp_path, monkeypatch, 60)
    assert main(["--seed", "3", "--check"]) == 0
    captured = capsys.readouterr()
    assert captured.out.startswith("Generated sudoku:")
    assert "error" not in captured.err


def test_check_flag_reports_failure(tmp_path, monkeypatch, capsys):
    _use_target(tmp_path, monkeypatch, 60)

    def _unsolvable(grid):
        raise UnsolvableError("Sudoku puzzle cannot be solved")

    monkeypatch.setattr(cli, "solve_puzzle", _unsolvable)
    assert main(["--seed", "3", "--check"]) == 1
    assert "self-check failed" in capsys.readouterr().err
