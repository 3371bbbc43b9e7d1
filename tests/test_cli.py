# LineForge - A line-oriented PostScript evaluator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

import io
import sys

import pytest

from lineforge import cli_runner
from lineforge.cli import main
from lineforge.cli_args import apply_arguments, build_argument_parser
from lineforge.core.context_init import init_system_params

SCOPING_JOB = ["/x", "1", "def", "/p", "{", "x", "}", "def", "/x", "2", "def", "p", "="]


def write_job(tmp_path, name, lines):
    path = tmp_path / name
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(path)


def test_batch_file(tmp_path, capsys):
    job = write_job(tmp_path, "add.ps", ["1", "2", "add", "="])
    assert main([job]) == 0
    assert capsys.readouterr().out == "3\n"


def test_failing_line_does_not_stop_the_job(tmp_path, capsys):
    job = write_job(tmp_path, "err.ps", ["nosuch", "(ok)", "="])
    assert main([job]) == 0
    out = capsys.readouterr().out
    assert out == "Error: /undefined in --nosuch--\n(ok)\n"


def test_files_share_one_context(tmp_path, capsys):
    first = write_job(tmp_path, "a.ps", ["/x", "5", "def"])
    second = write_job(tmp_path, "b.ps", ["x", "="])
    assert main([first, second]) == 0
    assert capsys.readouterr().out == "5\n"


def test_unreadable_file(tmp_path, capsys):
    good = write_job(tmp_path, "good.ps", ["(still)", "="])
    missing = str(tmp_path / "missing.ps")
    assert main([missing, good]) == 1
    out = capsys.readouterr().out
    assert out.startswith(f"LineForge Error: cannot read '{missing}'")
    assert out.endswith("(still)\n")


def test_quit_skips_remaining_input(tmp_path, capsys):
    first = write_job(tmp_path, "a.ps", ["(one)", "=", "quit", "(two)", "="])
    second = write_job(tmp_path, "b.ps", ["(three)", "="])
    assert main([first, second]) == 0
    assert capsys.readouterr().out == "(one)\n"


def test_unterminated_procedure_is_reported(tmp_path, capsys):
    job = write_job(tmp_path, "open.ps", ["{", "1"])
    assert main([job]) == 0
    out = capsys.readouterr().out
    assert "/syntaxerror" in out
    assert "unterminated procedure" in out


def test_standard_input_job(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("2\n3\nmul\n=\n"))
    assert main(["-"]) == 0
    assert capsys.readouterr().out == "6\n"


@pytest.mark.parametrize("flags, expected", [([], "2\n"), (["--dynamic"], "2\n"), (["--lexical"], "1\n")])
def test_scoping_flag(tmp_path, capsys, flags, expected):
    job = write_job(tmp_path, "scope.ps", SCOPING_JOB)
    assert main(flags + [job]) == 0
    assert capsys.readouterr().out == expected


def test_printing_an_array_that_contains_itself(tmp_path, capsys):
    job = write_job(tmp_path, "cycle.ps", ["/a", "1", "array", "def", "a", "0", "a", "put", "a", "=", "(next)", "="])
    assert main([job]) == 0
    assert capsys.readouterr().out == "[[...]]\n(next)\n"


def test_non_finite_count_is_reported_not_crashed(tmp_path, capsys):
    job = write_job(tmp_path, "inf.ps", ["1e400", "{", "1", "}", "repeat", "(next)", "="])
    assert main([job]) == 0
    out = capsys.readouterr().out
    assert out == "Error: /typecheck in --repeat--\n(next)\n"


def test_runaway_recursion_is_fatal(tmp_path, capsys):
    job = write_job(tmp_path, "rec.ps", ["/f", "{", "f", "}", "def", "f"])
    assert main([job]) == 1
    assert "LineForge Fatal:" in capsys.readouterr().out


def test_unexpected_exception_is_reported_and_session_continues(new_context, capsys):
    ctxt = new_context()

    def broken(ctxt, ostack):
        raise ValueError("boom")

    ctxt.register_operator("broken", broken)
    failures = cli_runner.run_lines(ctxt, ["broken", "(next)", "="], "job")
    assert failures == 1
    out = capsys.readouterr().out
    assert "Unexpected error: boom" in out
    assert "Traceback" in out
    assert out.endswith("(next)\n")


def test_interactive_session(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\n{\n2\n}\nstack\n"))
    assert main(["-q"]) == 0
    out = capsys.readouterr().out
    assert "LineForge" not in out
    assert ">> " in out
    assert ".. " in out
    assert "{ 2 }\n1\n" in out


def test_interactive_quit(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("quit\n(never)\n=\n"))
    assert main(["-q"]) == 0
    assert "never" not in capsys.readouterr().out


@pytest.mark.parametrize("flags, mode", [([], "dynamic"), (["--lexical"], "lexical")])
def test_interactive_banner(monkeypatch, capsys, flags, mode):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main(flags) == 0
    out = capsys.readouterr().out
    assert out.startswith(f"LineForge 0.3.0 ({mode} scoping)\n")
    assert "Type 'quit' to exit." in out


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    assert "LineForge 0.3.0" in capsys.readouterr().out


def test_scoping_flags_are_exclusive(capsys):
    with pytest.raises(SystemExit):
        build_argument_parser().parse_args(["--lexical", "--dynamic"])


def test_apply_arguments():
    parser = build_argument_parser()

    params = apply_arguments(parser.parse_args([]), init_system_params())
    assert params["Lexical"] is False
    assert params["Banner"] is True

    params = apply_arguments(parser.parse_args(["--lexical", "-q", "job.ps"]), init_system_params())
    assert params["Lexical"] is True
    assert params["Banner"] is False

    params = init_system_params()
    params["Lexical"] = True
    params = apply_arguments(parser.parse_args(["--dynamic"]), params)
    assert params["Lexical"] is False
