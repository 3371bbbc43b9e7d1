# LineForge - A line-oriented PostScript evaluator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

import copy

import pytest

from lineforge.core import types as ps


def test_integer_renders_as_plain_digits():
    assert str(ps.Int(42)) == "42"
    assert str(ps.Int(-7)) == "-7"


def test_integral_real_renders_without_trailing_zero():
    assert str(ps.Real(3.0)) == "3"
    assert str(ps.Real(-2.0)) == "-2"
    assert str(ps.Real(1.5)) == "1.5"


def test_non_finite_real_renders():
    assert str(ps.Real(float("inf"))) == "inf"


def test_scalar_rendering():
    assert str(ps.Bool(True)) == "true"
    assert str(ps.Bool(False)) == "false"
    assert str(ps.Null()) == "null"
    assert str(ps.Mark()) == "-mark-"


def test_string_renders_in_parentheses():
    assert str(ps.String("hello world")) == "(hello world)"
    assert str(ps.String("")) == "()"


def test_literal_name_renders_with_solidus():
    assert str(ps.Name("foo")) == "/foo"
    assert str(ps.Name("foo", ps.ATTRIB_EXEC)) == "foo"


def test_composite_rendering():
    arr = ps.Array([ps.Int(1), ps.String("a"), ps.Name("k")])
    assert str(arr) == "[1 (a) /k]"

    proc = ps.Procedure(["x", "1", "add"])
    assert str(proc) == "{ x 1 add }"

    d = ps.Dict()
    d.put("a", ps.Int(1))
    assert str(d) == "<<a -> 1>>"


def test_self_containing_composites_render_a_marker():
    arr = ps.Array.of_length(2)
    arr.put(0, arr)
    assert str(arr) == "[[...] null]"

    d = ps.Dict()
    d.put("me", d)
    d.put("items", arr)
    assert str(d) == "<<me -> <<...>>, items -> [[...] null]>>"


def test_shared_composite_is_not_a_cycle():
    inner = ps.Array([ps.Int(1)])
    outer = ps.Array([inner, inner])
    assert str(outer) == "[[1] [1]]"


def test_name_flag_is_fixed_at_construction():
    name = ps.Name("foo")
    with pytest.raises(AttributeError):
        name.attrib = ps.ATTRIB_EXEC
    assert not name.executable


def test_integer_and_real_compare_by_value():
    assert ps.Int(4) == ps.Real(4.0)
    assert ps.Real(4.0) == ps.Int(4)
    assert ps.Int(4) != ps.Real(4.5)
    assert ps.Int(1) != ps.Bool(True)


def test_string_and_name_compare_by_text():
    assert ps.String("abc") == ps.Name("abc")
    assert ps.Name("abc") == ps.String("abc")
    assert ps.String("abc") == ps.String("abc")
    assert ps.Name("abc") == ps.Name("abc", ps.ATTRIB_EXEC)


def test_composites_compare_by_identity():
    a = ps.Array([ps.Int(1)])
    b = ps.Array([ps.Int(1)])
    assert a == a
    assert a != b
    assert ps.Dict() != ps.Dict()
    proc = ps.Procedure(["x"])
    assert proc == proc
    assert proc != ps.Procedure(["x"])


def test_array_of_length_is_all_null():
    arr = ps.Array.of_length(3)
    assert arr.length == 3
    assert all(elem.TYPE == ps.T_NULL for elem in arr.val)


def test_string_put_is_seen_through_every_alias():
    s = ps.String("abc")
    alias = s
    s.put(0, ord("X"))
    assert alias.val == "Xbc"
    assert alias.get(0) == ps.Int(ord("X"))


def test_shallow_copy_shares_composite_payload():
    arr = ps.Array([ps.Int(1)])
    other = copy.copy(arr)
    other.put(0, ps.Int(9))
    assert arr.get(0) == ps.Int(9)


def test_dict_copy_is_independent_mapping_with_shared_values():
    shared = ps.Array([ps.Int(1)])
    d = ps.Dict()
    d.put("a", shared)
    dup = d.copy()
    dup.put("b", ps.Int(2))
    assert "b" not in d
    assert dup["a"] is shared


def test_dict_items_snapshot_allows_mutation_while_iterating():
    d = ps.Dict()
    d.put("a", ps.Int(1))
    for key, _ in d.items():
        d.put(key + "x", ps.Int(2))
    assert "ax" in d


def test_procedure_keeps_lines_and_capture():
    env = [ps.Dict(name="systemdict"), ps.Dict(name="userdict")]
    proc = ps.Procedure(["x"], env)
    assert proc.lines == ("x",)
    assert proc.lexical_env == tuple(env)
    assert proc.attrib == ps.ATTRIB_EXEC
    assert ps.Procedure(["x"]).lexical_env is None


@pytest.mark.parametrize(
    "obj, name",
    [
        (ps.Int(1), "integertype"),
        (ps.Real(1.0), "realtype"),
        (ps.Bool(True), "booleantype"),
        (ps.String(""), "stringtype"),
        (ps.Name("a"), "nametype"),
        (ps.Array(), "arraytype"),
        (ps.Dict(), "dicttype"),
        (ps.Procedure([]), "proceduretype"),
        (ps.Null(), "nulltype"),
        (ps.Mark(), "marktype"),
    ],
)
def test_type_names(obj, name):
    assert obj.type_name() == name
