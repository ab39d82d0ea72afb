import io

import pytest

from judgebox.cli import main
from judgebox.numbers import run_change, run_walking


def test_change_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("380\n"))
    assert main(["change"]) == 0
    assert capsys.readouterr().out == run_change("380\n")


def test_walking_from_file(tmp_path, capsys):
    source = tmp_path / "walk.txt"
    source.write_text("3 4 1 1\n")
    assert main(["walking", "--input", str(source)]) == 0
    assert capsys.readouterr().out == run_walking("3 4 1 1\n")


def test_bad_input_reports_error(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["change"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "unexpected end of input" in captured.err


def test_unknown_problem_exits():
    with pytest.raises(SystemExit) as info:
        main(["no-such-problem"])
    assert info.value.code == 2