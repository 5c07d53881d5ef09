from __future__ import annotations

import io

import pytest

import rpncalc


@pytest.fixture(autouse=True)
def _default_settings(monkeypatch):
    monkeypatch.delenv("RPNCALC_OPERATOR_SET", raising=False)


def test_eval_prints_result_and_exits_zero(capsys):
    code = rpncalc.main(["eval", "5 5 + 5 +"])

    out = capsys.readouterr().out
    assert code == 0
    assert "success" in out
    assert "15" in out


def test_eval_error_exits_one(capsys):
    code = rpncalc.main(["eval", "5040 0 /"])

    assert code == 1
    assert "Division by zero" in capsys.readouterr().out


def test_eval_narrow_flag(capsys):
    code = rpncalc.main(["eval", "--narrow", "2 3 *"])

    assert code == 1
    assert "found_non_operator" in capsys.readouterr().out


def test_file_evaluates_non_blank_lines(tmp_path, capsys):
    path = tmp_path / "exprs.txt"
    path.write_text("1 1 +\n\n2004 6 /\n", encoding="utf-8")

    code = rpncalc.main(["file", str(path)])

    out = capsys.readouterr().out
    assert code == 0
    assert "[2]" in out
    assert "334" in out


def test_file_with_failing_line_exits_one(tmp_path):
    path = tmp_path / "exprs.txt"
    path.write_text("1 1 +\n1 2 3\n", encoding="utf-8")

    assert rpncalc.main(["file", str(path)]) == 1


def test_file_missing_exits_one(tmp_path, capsys):
    assert rpncalc.main(["file", str(tmp_path / "missing.txt")]) == 1
    assert "cannot read" in capsys.readouterr().err


def test_repl_stops_at_quit(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 1 +\n\n1 x\nquit\n9 9 +\n"))

    code = rpncalc.main(["repl"])

    out = capsys.readouterr().out
    assert code == 0
    assert "= 2" in out
    assert "error: Invalid character found: 'x'" in out
    assert "18" not in out
