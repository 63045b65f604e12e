import sys

import pytest
from sxp.__main__ import main


def run_main(monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", ["sxp", *args])
    main()


def test_parse_file(tmp_path, monkeypatch, capsys):
    src = tmp_path / "prog.sxp"
    src.write_text('\n(greet\n  "world")\n')
    run_main(monkeypatch, str(src))
    assert capsys.readouterr().out == "List\n  Identifier('greet')\n  StringLiteral('world')\n"


def test_parse_file_error(tmp_path, monkeypatch, capsys):
    src = tmp_path / "bad.sxp"
    src.write_text("(greet\n  42)\n")
    with pytest.raises(SystemExit) as exc_info:
        run_main(monkeypatch, str(src))
    assert exc_info.value.code == 1
    assert capsys.readouterr().err == "ERROR: unexpected char '4' in expression on line 2 column 3\n"


def test_too_many_arguments(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc_info:
        run_main(monkeypatch, "a.sxp", "b.sxp")
    assert exc_info.value.code == 1
    assert "Usage" in capsys.readouterr().err


def test_no_arguments_starts_repl(monkeypatch, capsys):
    def fake_input(prompt):
        raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)
    run_main(monkeypatch)
    assert capsys.readouterr().out == ""
