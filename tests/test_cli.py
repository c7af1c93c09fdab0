import io

import pytest

from atto import __version__
from atto.cli import build_parser, main
from atto.interpreter import Interpreter
from atto.shell import Shell


@pytest.fixture
def script(tmp_path):
    def write(code: str):
        path = tmp_path / "prog.at"
        path.write_text(code, encoding="utf-8")
        return str(path)
    return write


def test_runs_main_and_prints(script, capsys):
    path = script('fn main is print + "sum: " str sum range 1 5')
    assert main([path]) == 0
    assert capsys.readouterr().out == "sum: 10\n"


def test_passes_arguments_to_main(script, capsys):
    path = script("fn main a b is print + a b")
    assert main([path, "foo", "bar"]) == 0
    assert capsys.readouterr().out == "foobar\n"


def test_dump_ast(script, capsys):
    path = script("fn main is print + 1 * 2 3")
    assert main(["--dump-ast", path]) == 0
    assert capsys.readouterr().out == "fn main is (print (+ 1 (* 2 3)))\n"


def test_runtime_error_exit_status(script, capsys):
    path = script("fn main is head null")
    assert main([path]) == 1
    err = capsys.readouterr().err
    assert err.startswith("error: head:")


def test_parse_error_exit_status(script, capsys):
    path = script("fn main is + 1")
    assert main([path]) == 1
    assert "expects 2 argument(s)" in capsys.readouterr().err


def test_no_prelude_flag(script, capsys):
    path = script("fn main is print len null")
    assert main(["--no-prelude", path]) == 1
    assert "Unknown function 'len'" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.at")]) == 1
    assert "could not open" in capsys.readouterr().err


def test_version(capsys):
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--version"])
    assert __version__ in capsys.readouterr().out


def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv("ATTO_LOG_LEVEL", "debug")
    assert build_parser().parse_args([]).log_level == "DEBUG"


# ------------------------
# Interactive shell
# ------------------------
@pytest.fixture
def shell(console):
    out = io.StringIO()
    return Shell(Interpreter(console=console), stdout=out), out


def test_shell_defines_and_evaluates(shell):
    sh, out = shell
    sh.onecmd("fn sq x is * x x")
    sh.onecmd("sq 7")
    sh.onecmd("+ 1 2")
    assert out.getvalue() == "defined fn sq x is\n49\n3\n"


def test_shell_reports_errors_and_continues(shell):
    sh, out = shell
    sh.onecmd("head null")
    sh.onecmd("len range 0 3")
    lines = out.getvalue().splitlines()
    assert lines[0].startswith("error: head:")
    assert lines[1] == "3"


def test_shell_ast_command(shell):
    sh, out = shell
    sh.onecmd("ast - * 3 3 5")
    assert out.getvalue() == "(- (* 3 3) 5)\n"


def test_shell_exit(shell):
    sh, _ = shell
    assert sh.onecmd("exit") is True
