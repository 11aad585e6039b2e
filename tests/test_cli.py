import io
import json
import sys

import pytest

from exprtree.cli import SEPARATOR, main


def test_single_expression(capsys):
    assert main(["a+b*c"]) == 0
    out = capsys.readouterr().out
    assert "후위: abc*+" in out
    assert "수식 트리:" in out


def test_failed_expression_sets_exit_code(capsys):
    assert main(["a()"]) == 1
    assert "수식 오류:" in capsys.readouterr().out


def test_empty_argument_is_reported():
    assert main([""]) == 1


def test_several_expressions(capsys):
    assert main(["a+b", "ab"]) == 1
    out = capsys.readouterr().out
    assert SEPARATOR in out
    assert "후위: ab+" in out
    assert "수식 오류:" in out


def test_json_output(capsys):
    assert main(["--format", "json", "*+abc"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["postfix"] == "ab+c*"


def test_no_tree_and_ascii(capsys):
    main(["--no-tree", "a+b"])
    assert "수식 트리:" not in capsys.readouterr().out
    main(["--ascii", "a+b"])
    assert "\\-- +" in capsys.readouterr().out


def test_file_input(tmp_path, capsys):
    path = tmp_path / "expressions.txt"
    path.write_text("a+b\n\n*+abc\n", encoding="utf-8")
    assert main(["-f", str(path), "--format", "json"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [json.loads(line)["postfix"] for line in lines] == ["ab+", "ab+c*"]


def test_missing_file(tmp_path):
    with pytest.raises(SystemExit) as info:
        main(["-f", str(tmp_path / "missing.txt")])
    assert info.value.code == 2


def test_invalid_environment(monkeypatch):
    monkeypatch.setenv("EXPRTREE_FORMAT", "xml")
    with pytest.raises(SystemExit) as info:
        main(["a+b"])
    assert info.value.code == 2


def test_command_line_overrides_environment(monkeypatch, capsys):
    monkeypatch.setenv("EXPRTREE_FORMAT", "json")
    main(["--format", "text", "a+b"])
    assert "후위: ab+" in capsys.readouterr().out


def test_stdin_lines(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("ab+\n\n"))
    assert main(["--format", "json"]) == 0
    assert json.loads(capsys.readouterr().out)["notation"] == "postfix"


def test_interactive(monkeypatch, capsys):
    answers = iter(["", "a+b", "(a+b", "quit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main(["-i"]) == 0
    out = capsys.readouterr().out
    assert "수식을 입력해 주세요." in out
    assert "후위: ab+" in out
    assert "수식 오류:" in out


def test_interactive_ends_on_eof(monkeypatch):
    def no_more_input(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_more_input)
    assert main(["-i"]) == 0


def test_long_expression(capsys):
    assert main(["--format", "json", "*".join(["x"] * 1500)]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["error"] is None
    assert payload["postfix"] == "x" + "x*" * 1499
