import io
from pathlib import Path

import pytest
from sexpl.__main__ import main
from sexpl.interpreter import Session, run
from sexpl.log import CaptureLogger
from sexpl.types import Options

EXAMPLES_DIR = Path(__file__).resolve().parent.parent.parent.parent / "examples"


def program(name):
    path = EXAMPLES_DIR / "programs" / name
    if not path.exists():
        pytest.skip("example files not found")
    return path


def test_arithmetic_program():
    log = CaptureLogger()
    run(program("arithmetic.sxp").read_text(), log)
    assert log.output == ["6", "6", "24", "3.5", "total: 42"]
    assert log.errors == []


def test_variables_program():
    log = CaptureLogger()
    env = {}
    run(program("variables.sxp").read_text(), log, env)
    assert log.output == ["hello world", "1 2 3"]
    assert env == {"greeting": "hello", "nums": [1, 2, 3]}


def test_session_keeps_variables():
    log = CaptureLogger()
    sess = Session(log)
    assert sess.run("(set x 5)") == [5]
    assert sess.run("(get x)") == [5]
    assert sess.run("(get y)") == []
    assert sess.env == {"x": 5}
    assert log.errors == []


def test_fresh_sessions_do_not_share_variables():
    Session(CaptureLogger()).run("(set x 1)")
    assert Session(CaptureLogger()).run("(get x)") == []


def test_errors_from_every_stage_are_reported_in_order():
    log = CaptureLogger()
    result = run('((print 1) (sub 3 "a") @ (bar))', log)
    assert log.errors == [
        "line 1: unknown character '@'",
        "invalid subtraction",
        "unknown command 'bar'",
    ]
    assert log.output == ["1"]
    assert result == [[1], [3], [1]]


def test_unterminated_string_program():
    log = CaptureLogger()
    result = run('("abc', log)
    assert log.errors == ["line 1: unterminated string", "unterminated list"]
    assert result == "unterminated list"


def test_show_tokens_and_ast():
    log = CaptureLogger()
    sess = Session(log, Options(show_tokens=True, show_ast=True))
    sess.run("(add 1 2)")
    assert log.output[0].startswith("Token(LPAREN, line=1)")
    assert log.output[1] == "(add 1 2)"


def test_cli_runs_file(capsys):
    main([str(program("arithmetic.sxp")), "--no-color"])
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["6", "6", "24", "3.5", "total: 42"]
    assert captured.err == ""


def test_cli_reports_diagnostics(tmp_path, capsys):
    src = tmp_path / "bad.sxp"
    src.write_text("(foo 1)")
    main([str(src), "--no-color"])
    assert capsys.readouterr().err == "error: unknown command 'foo'\n"


def test_cli_ast_flag(tmp_path, capsys):
    src = tmp_path / "p.sxp"
    src.write_text("(print\n  (mult 2 3))")
    main([str(src), "--ast", "--no-color"])
    assert capsys.readouterr().out.splitlines() == ["(print (mult 2 3))", "6"]


def test_cli_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / "nope.sxp")])
    assert exc.value.code == 1
    assert "cannot read" in capsys.readouterr().err


def test_deep_nesting_is_reported_not_raised():
    log = CaptureLogger()
    run("(" * 1500 + ")" * 1500, log)
    assert log.errors == ["nesting too deep"]


def test_cli_rejects_non_utf8_file(tmp_path, capsys):
    src = tmp_path / "latin1.sxp"
    src.write_bytes(b'(print "\xff")')
    with pytest.raises(SystemExit) as exc:
        main([str(src)])
    assert exc.value.code == 1
    assert "not valid UTF-8" in capsys.readouterr().err


def test_cli_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("(print (add 2 2))"))
    main(["--no-color"])
    assert capsys.readouterr().out == "4\n"
