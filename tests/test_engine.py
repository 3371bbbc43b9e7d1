# LineForge - A line-oriented PostScript evaluator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging

import pytest

from lineforge.core import error as ps_error
from lineforge.core import types as ps
from lineforge.operators import control as ps_control


def test_literals_are_pushed_unchanged(ctxt):
    values = [
        ps.Int(1), ps.Real(2.5), ps.Bool(True), ps.String("s"),
        ps.Array(), ps.Dict(), ps.Procedure(["x"]), ps.Name("lit"),
    ]
    for value in values:
        ps_control.eval_token(ctxt, value)
    assert all(a is b for a, b in zip(ctxt.o_stack, values))


def test_procedure_literal_is_not_executed(run):
    stack = run("{ 1 2 add }")
    assert len(stack) == 1
    assert stack[0].TYPE == ps.T_PROC


def test_undefined_name(ctxt):
    with pytest.raises(ps_error.PSError) as exc:
        ps_control.eval_token(ctxt, ps.Name("nosuch", ps.ATTRIB_EXEC))
    assert exc.value.name == "undefined"
    assert ctxt.last_error is exc.value
    assert str(exc.value) == "/undefined in --nosuch--"


def test_bound_non_procedure_value_is_pushed(run):
    stack = run("/a 3 array def a a")
    assert stack[0] is stack[1]


def test_registry_is_consulted_before_scopes(run):
    stack = run("/add { 99 } def 1 2 add")
    assert [str(obj) for obj in stack] == ["3"]


def test_dynamic_scoping_resolves_at_call_time(run):
    stack = run("/x 1 def /p { x } def /x 2 def p")
    assert str(stack[-1]) == "2"


def test_lexical_scoping_resolves_at_definition_time(run_lexical):
    stack = run_lexical("/x 1 def /p { x } def /x 2 def p")
    assert str(stack[-1]) == "1"


def test_lexical_def_attaches_a_snapshot(lexical_ctxt, run_lexical):
    run_lexical("/p { x } def")
    proc = lexical_ctxt.d_stack.lookup("p")
    assert proc.lexical_env is not None
    assert len(proc.lexical_env) == 2
    assert proc.lexical_env[1] is not lexical_ctxt.d_stack[1]


def test_dynamic_def_attaches_nothing(ctxt, run):
    run("/p { x } def")
    assert ctxt.d_stack.lookup("p").lexical_env is None


def test_body_is_reparsed_on_every_run(run):
    stack = run("/p { q } def /q 1 def p /q 2 def p")
    assert [str(obj) for obj in stack] == ["1", "2"]


def test_lexical_definitions_inside_a_call_stay_local(lexical_ctxt, run_lexical):
    run_lexical("/p { /y 9 def y } def p p")
    assert [str(obj) for obj in lexical_ctxt.o_stack] == ["9", "9"]
    assert lexical_ctxt.d_stack.lookup("y") is None
    proc = lexical_ctxt.d_stack.lookup("p")
    assert all("y" not in scope for scope in proc.lexical_env)


def test_lexical_call_restores_chain_after_error(lexical_ctxt, run_lexical):
    before = lexical_ctxt.d_stack.scopes()
    with pytest.raises(ps_error.PSError) as exc:
        run_lexical("/p { 5 dict begin nosuch } def p")
    assert exc.value.name == "undefined"
    assert len(lexical_ctxt.d_stack) == 2
    assert all(a is b for a, b in zip(lexical_ctxt.d_stack, before))


def test_lexical_call_restores_chain_after_success(lexical_ctxt, run_lexical):
    before = lexical_ctxt.d_stack.scopes()
    run_lexical("/p { 5 dict begin } def p")
    assert len(lexical_ctxt.d_stack) == 2
    assert lexical_ctxt.d_stack.current is before[1]


def test_exec_bypasses_the_captured_environment(run_lexical):
    stack = run_lexical("/x 1 def /p { x } def /x 2 def /p load exec p")
    assert [str(obj) for obj in stack] == ["2", "1"]


def test_lexical_procedure_sees_helpers_defined_before_it(run_lexical):
    stack = run_lexical("/sq { dup mul } def /f { sq 1 add } def 3 f")
    assert str(stack[-1]) == "10"


def test_lexical_procedure_cannot_see_later_definitions(run_lexical):
    with pytest.raises(ps_error.PSError) as exc:
        run_lexical("/f { g } def /g { 1 } def f")
    assert exc.value.name == "undefined"


def test_failure_leaves_partial_stack(run):
    with pytest.raises(ps_error.PSError):
        run("/p { 1 2 nosuch 3 } def p")
    # no rollback: values pushed before the failure stay
    # the run fixture shares its context, so inspect it again
    assert [str(obj) for obj in run("")] == ["1", "2"]


def test_quit_stops_a_procedure(ctxt, run):
    run("/p { 1 quit 2 } def p")
    assert ctxt.quit_requested
    assert [str(obj) for obj in ctxt.o_stack] == ["1"]


def test_exec_on_executable_name(run):
    assert str(run("1 2 /add cvx exec")[-1]) == "3"


def test_exec_on_literal_is_typecheck(run):
    with pytest.raises(ps_error.PSError) as exc:
        run("/add exec")
    assert exc.value.name == "typecheck"


def test_unknown_token_shape_is_internal_error(ctxt):
    with pytest.raises(RuntimeError):
        ps_control.eval_token(ctxt, ps.Mark())


def test_lexical_call_without_environment_is_internal_error(ctxt):
    with pytest.raises(RuntimeError):
        ps_control.execute_procedure_lexical(ctxt, ps.Procedure(["1"]))


def test_contexts_are_independent(new_context):
    first = new_context()
    second = new_context(lexical=True)
    ps_control.eval_token(first, ps.Int(1))
    first.d_stack.define("only_here", ps.Int(1))
    assert not second.o_stack
    assert second.d_stack.lookup("only_here") is None
    assert first.lexical is False and second.lexical is True


def test_lexical_switches_are_logged(caplog, run_lexical):
    caplog.set_level(logging.DEBUG, logger="lineforge")
    run_lexical("/p { 1 } def p")
    messages = [record.getMessage() for record in caplog.records]
    assert any("entering captured environment" in m for m in messages)
    assert any("restored live environment" in m for m in messages)


def test_errors_are_logged_at_debug(caplog, run):
    caplog.set_level(logging.DEBUG, logger="lineforge")
    with pytest.raises(ps_error.PSError):
        run("add")
    assert any("stackunderflow" in record.getMessage() for record in caplog.records)
