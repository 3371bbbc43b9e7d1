# LineForge - A line-oriented PostScript evaluator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

import operator

import pytest

from lineforge.core import error as ps_error
from lineforge.core import types as ps


def rendered(stack):
    return [str(obj) for obj in stack]


def test_pop_and_peek_on_empty_stack_underflow():
    stack = ps.Stack()
    with pytest.raises(ps_error.PSError) as exc:
        stack.pop()
    assert exc.value.name == "stackunderflow"
    with pytest.raises(ps_error.PSError):
        stack.peek()


def test_push_pop_peek_count():
    stack = ps.Stack()
    stack.push(ps.Int(1))
    stack.push(ps.Int(2))
    assert stack.count() == 2
    assert stack.peek() == ps.Int(2)
    assert stack.pop() == ps.Int(2)
    assert stack.count() == 1


def test_top_down_and_bottom_up_views():
    stack = ps.Stack([ps.Int(1), ps.Int(2), ps.Int(3)])
    assert rendered(stack.top_down()) == ["3", "2", "1"]
    assert rendered(stack.bottom_up()) == ["1", "2", "3"]


def test_typed_pops_reject_non_numbers():
    stack = ps.Stack([ps.String("x")])
    with pytest.raises(ps_error.PSError) as exc:
        stack.pop_number()
    assert exc.value.name == "typecheck"


def test_pop_int_truncates():
    stack = ps.Stack([ps.Real(-3.7)])
    assert stack.pop_int() == -3


def test_two_number_combinator_keeps_integers():
    stack = ps.Stack([ps.Int(3), ps.Int(4)])
    result = stack.pop_two_numbers(operator.add)
    assert result.TYPE == ps.T_INT
    assert result.val == 7
    assert not stack


def test_two_number_combinator_mixed_operands_give_real():
    stack = ps.Stack([ps.Real(9.5), ps.Int(1)])
    result = stack.pop_two_numbers(operator.add)
    assert result.TYPE == ps.T_REAL
    assert result.val == 10.5


def test_two_number_combinator_promotes_on_overflow():
    stack = ps.Stack([ps.Int(ps.MAX_POSTSCRIPT_INTEGER), ps.Int(1)])
    result = stack.pop_two_numbers(operator.add)
    assert result.TYPE == ps.T_REAL


def test_make_number():
    assert ps.make_number(4.0).TYPE == ps.T_INT
    assert ps.make_number(4.5).TYPE == ps.T_REAL
    assert ps.make_number(float("nan")).TYPE == ps.T_REAL
    assert ps.make_number(2 ** 70).TYPE == ps.T_REAL


def test_dup_shares_composites(run):
    stack = run("3 array dup")
    assert len(stack) == 2
    assert stack[-1] is stack[-2]


def test_dup_and_exch(run):
    assert rendered(run("1 2 exch")) == ["2", "1"]
    assert rendered(run("dup")) == ["2", "1", "1"]


def test_pop_clear_count(run):
    assert rendered(run("1 2 3 pop")) == ["1", "2"]
    assert rendered(run("count")) == ["1", "2", "2"]
    assert rendered(run("clear count")) == ["0"]


def test_index(run):
    assert rendered(run("(a) (b) (c) (d) 3 index")) == ["(a)", "(b)", "(c)", "(d)", "(a)"]


def test_index_out_of_range(run):
    with pytest.raises(ps_error.PSError) as exc:
        run("1 5 index")
    assert exc.value.name == "rangecheck"


@pytest.mark.parametrize(
    "source, expected",
    [
        ("(a) (b) (c) 3 -1 roll", ["(b)", "(c)", "(a)"]),
        ("(a) (b) (c) 3 1 roll", ["(c)", "(a)", "(b)"]),
        ("(a) (b) (c) 3 0 roll", ["(a)", "(b)", "(c)"]),
        ("(a) (b) (c) 2 4 roll", ["(a)", "(b)", "(c)"]),
        ("(a) (b) (c) 0 1 roll", ["(a)", "(b)", "(c)"]),
    ],
)
def test_roll(run, source, expected):
    assert rendered(run(source)) == expected


def test_roll_needs_enough_operands(run):
    with pytest.raises(ps_error.PSError) as exc:
        run("1 3 1 roll")
    assert exc.value.name == "rangecheck"


def test_copy_integer_form(run):
    assert rendered(run("(a) (b) (c) 2 copy")) == ["(a)", "(b)", "(c)", "(b)", "(c)"]
    assert rendered(run("0 copy")) == ["(a)", "(b)", "(c)", "(b)", "(c)"]


def test_copy_too_many(run):
    with pytest.raises(ps_error.PSError) as exc:
        run("1 2 copy")
    assert exc.value.name == "rangecheck"


def test_mark_counttomark_cleartomark(run):
    assert rendered(run("1 mark 2 3 counttomark")) == ["1", "-mark-", "2", "3", "2"]
    assert rendered(run("cleartomark")) == ["1"]


def test_cleartomark_without_mark(run):
    with pytest.raises(ps_error.PSError) as exc:
        run("1 2 cleartomark")
    assert exc.value.name == "unmatchedmark"


def test_counttomark_without_mark(run):
    with pytest.raises(ps_error.PSError) as exc:
        run("counttomark")
    assert exc.value.name == "unmatchedmark"


@pytest.mark.parametrize("op", ["pop", "dup", "exch", "index", "roll", "copy"])
def test_operators_underflow_on_empty_stack(run, op):
    with pytest.raises(ps_error.PSError) as exc:
        run(op)
    assert exc.value.name == "stackunderflow"
    assert exc.value.command == op
