# LineForge - A line-oriented PostScript evaluator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from lineforge import cli_runner
from lineforge.core import error as ps_error
from lineforge.core import types as ps


def rendered(stack):
    return [str(obj) for obj in stack]


def test_if_runs_body_only_when_true(run):
    assert rendered(run("true { 1 } if false { 2 } if")) == ["1"]


def test_ifelse_picks_a_branch(run):
    assert rendered(run("4 3 lt { (T) } { (F) } ifelse")) == ["(F)"]
    assert rendered(run("3 4 lt { (T) } { (F) } ifelse")) == ["(F)", "(T)"]


def test_if_requires_boolean_and_procedure(run):
    with pytest.raises(ps_error.PSError) as exc:
        run("1 { 2 } if")
    assert exc.value.name == "typecheck"
    with pytest.raises(ps_error.PSError) as exc:
        run("clear true 2 if")
    assert exc.value.name == "typecheck"


def test_if_underflow(run):
    with pytest.raises(ps_error.PSError) as exc:
        run("{ 1 } if")
    assert exc.value.name == "stackunderflow"


def test_repeat(run):
    assert rendered(run("3 { 7 } repeat")) == ["7", "7", "7"]


def test_repeat_negative_count_runs_nothing(run):
    assert rendered(run("-2 { 7 } repeat")) == []


def test_repeat_truncates_real_count(run):
    assert rendered(run("2.7 { 7 } repeat")) == ["7", "7"]


@pytest.mark.parametrize("count", ["1e400", "-1e400", "1e400 1e400 sub"])
def test_repeat_count_must_truncate_to_an_integer(ctxt, run, count):
    with pytest.raises(ps_error.PSError) as exc:
        run(count + " { 1 } repeat")
    assert exc.value.name == "typecheck"
    assert exc.value.command == "repeat"
    # operands are left in place
    assert [obj.TYPE for obj in ctxt.o_stack] == [ps.T_REAL, ps.T_PROC]


def test_repeat_pops_operands_before_running(run):
    assert rendered(run("1 2 3 4 3 { pop } repeat")) == ["1"]


@pytest.mark.parametrize(
    "source, expected",
    [
        ("0 1 1 4 { add } for", ["10"]),
        ("1 2 6 { } for", ["1", "3", "5"]),
        ("3 -.5 1 { } for", ["3", "2.5", "2", "1.5", "1"]),
        ("5 1 1 { } for", []),
    ],
)
def test_for(run, source, expected):
    assert rendered(run(source)) == expected


def test_for_control_variable_type(run):
    stack = run("1 1 2 { } for 1.0 1 2 { } for 1 1 2.5 { } for")
    assert [obj.TYPE for obj in stack] == [
        ps.T_INT, ps.T_INT, ps.T_REAL, ps.T_REAL, ps.T_INT, ps.T_INT,
    ]


def test_for_zero_increment_is_rangecheck(run):
    with pytest.raises(ps_error.PSError) as exc:
        run("1 0 5 { } for")
    assert exc.value.name == "rangecheck"


def test_forall_over_array(run):
    stack = run("/a 3 array def a 0 13 put a 1 29 put a 2 -8 put 0 a { add } forall")
    assert rendered(stack) == ["34"]


def test_forall_over_dictionary_in_definition_order(run):
    stack = run("/d 2 dict def d /b 2 put d /a 1 put d { } forall")
    assert rendered(stack) == ["/b", "2", "/a", "1"]
    assert not stack[0].executable


def test_forall_empty_collection(run):
    assert rendered(run("0 array { 1 } forall")) == []


def test_forall_typecheck(run):
    with pytest.raises(ps_error.PSError) as exc:
        run("5 { } forall")
    assert exc.value.name == "typecheck"


def test_loop_until_exit(run):
    assert rendered(run("0 { 1 add dup 5 eq { exit } if } loop")) == ["5"]


def test_exit_outside_loop(ctxt, run):
    with pytest.raises(ps_error.PSError) as exc:
        run("exit")
    assert exc.value.name == "invalidexit"
    assert ctxt.loop_depth == 0


def test_exit_leaves_only_the_innermost_loop(run):
    stack = run("3 { 0 { 1 add dup 2 eq { exit } if } loop } repeat")
    assert rendered(stack) == ["2", "2", "2"]


def test_exit_from_called_procedure_ends_the_loop(run):
    stack = run("/stop { exit } def 0 { 1 add dup 3 eq { stop } if } loop")
    assert rendered(stack) == ["3"]


def test_exit_keeps_values_pushed_by_the_body(run):
    assert rendered(run("{ 1 2 exit 3 } loop")) == ["1", "2"]


def test_error_inside_loop_resets_loop_depth(ctxt, run):
    with pytest.raises(ps_error.PSError):
        run("3 { nosuch } repeat")
    assert ctxt.loop_depth == 0
    with pytest.raises(ps_error.PSError) as exc:
        run("exit")
    assert exc.value.name == "invalidexit"


def test_loop_typecheck(run):
    with pytest.raises(ps_error.PSError) as exc:
        run("1 loop")
    assert exc.value.name == "typecheck"


def test_quit_inside_loop_stops_the_session(ctxt, capsys):
    lines = ["0", "{", "1", "add", "dup", "3", "eq", "{", "quit", "}", "if", "}", "loop", "(after)", "="]
    failures = cli_runner.run_lines(ctxt, lines, "test")
    assert failures == 0
    assert ctxt.quit_requested
    assert rendered(ctxt.o_stack) == ["3"]
    assert capsys.readouterr().out == ""


def test_control_operators_see_the_live_scopes_under_lexical_mode(run_lexical):
    stack = run_lexical("/x 1 def /p { x } def /x 2 def true { p x } if")
    assert rendered(stack) == ["1", "2"]
