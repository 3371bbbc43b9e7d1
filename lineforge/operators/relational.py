# LineForge - A line-oriented PostScript evaluator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

import operator

from ..core import error as ps_error
from ..core import types as ps


def ps_and(ctxt, ostack):
    """
    bool₁ bool₂ **and** bool₃
      int₁ int₂ **and** int₃


    returns the logical conjunction of the operands if they are boolean. If the operands
    are integers, **and** returns the bitwise "**and**" of their binary representations.

    **Examples**
        true true **and**       -> true         % A complete truth table
        true false **and**      -> false
        false true **and**      -> false
        false false **and**     -> false

        99 1 **and**            -> 1
        52 7 **and**            -> 4

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **or**, **xor**, **not**, true, false
    """
    _logical(ctxt, ostack, "and", operator.and_)


def ps_or(ctxt, ostack):
    """
    bool₁ bool₂ **or** bool₃
      int₁ int₂ **or** int₃


    returns the logical disjunction of the operands if they are boolean. If the operands
    are integers, **or** returns the bitwise "inclusive **or**" of their binary representations.

    **Examples**
        true false **or**       -> true
        false false **or**      -> false

        17 5 **or**             -> 21

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **and**, **not**, **xor**
    """
    _logical(ctxt, ostack, "or", operator.or_)


def xor(ctxt, ostack):
    """
    bool₁ bool₂ **xor** bool₃
      int₁ int₂ **xor** int₃


    returns the logical "exclusive or" of the operands if they are boolean. If the
    operands are integers, **xor** returns the bitwise "exclusive or" of their binary
    representations.

    **Examples**
        true true **xor**       -> false
        true false **xor**      -> true

        7 3 **xor**             -> 4
        12 3 **xor**            -> 15

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **or**, **and**, **not**
    """
    _logical(ctxt, ostack, "xor", operator.xor)


def _logical(ctxt, ostack, op, func):
    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 2:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, op)
    # 2. TYPECHECK - Check operand types (bool₁|int₁ bool₂|int₂, must be same type)
    if ostack[-1].TYPE not in {ps.T_BOOL, ps.T_INT}:
        return ps_error.e(ctxt, ps_error.TYPECHECK, op)
    if ostack[-1].TYPE != ostack[-2].TYPE:
        return ps_error.e(ctxt, ps_error.TYPECHECK, op)

    second = ostack.pop()
    first = ostack[-1]
    if first.TYPE == ps.T_BOOL:
        ostack[-1] = ps.Bool(func(first.val, second.val))
    else:
        ostack[-1] = ps.Int(func(first.val, second.val))


def ps_not(ctxt, ostack):
    """
    bool₁ **not** bool₂
     int₁ **not** int₂


    returns the logical negation of the operand if it is boolean. If the operand is an
    integer, **not** returns the bitwise complement (ones complement) of its binary
    representation.

    **Examples**
        true **not**        -> false        % A complete truth table
        false **not**       -> true
        52 **not**          -> -53

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **and**, **or**, **xor**, **if**
    """
    op = "not"

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 1:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, op)
    # 2. TYPECHECK - Check operand type
    if ostack[-1].TYPE not in {ps.T_BOOL, ps.T_INT}:
        return ps_error.e(ctxt, ps_error.TYPECHECK, op)

    if ostack[-1].TYPE == ps.T_BOOL:
        ostack[-1] = ps.Bool(not ostack[-1].val)
    else:
        ostack[-1] = ps.Int(~ostack[-1].val)


def eq(ctxt, ostack, op_name=None):
    """
    any₁ any₂ **eq** bool


    pops two objects from the operand stack and pushes true if they are equal, or false
    if not. Simple objects are equal if their types and values are the same. Strings are
    equal if their characters are equal. Other composite objects (arrays, dictionaries
    and procedures) are equal only if they are the same object. Separate values are
    considered unequal, even if all the components of those values are the same.

    Integers and real numbers can be compared freely: an integer and a real number
    representing the same mathematical value are considered equal by **eq**. Strings and
    names can likewise be compared freely: a name defined by some sequence of characters
    is equal to a string whose elements are the same sequence of characters.

    **Examples**
        4.0 4 eq            -> true     % A real number and an integer may be equal
        (abc) (abc) eq      -> true     % Strings with equal elements are equal
        (abc) /abc eq       -> true     % A string and a name may be equal

    **Errors**:     **stackunderflow**
    **See Also**:   **ne**, **le**, **lt**, **ge**, **gt**
    """

    if op_name is None:
        op_name = eq.__name__

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 2:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, op_name)

    result = ostack[-2] == ostack[-1]
    ostack.pop()
    ostack[-1] = ps.Bool(result)


def ne(ctxt, ostack):
    """
    any₁ any₂ **ne** bool


    pops two objects from the operand stack and pushes false if they are equal, or true
    if not. What it means for objects to be equal is presented in the description of
    the **eq** operator.

    **Errors**:     **stackunderflow**
    **See Also**:   **eq**, **ge**, **gt**, **le**, **lt**
    """

    eq(ctxt, ostack, ne.__name__)
    ostack[-1] = ps.Bool(not ostack[-1].val)


def _compare(ctxt, ostack, op, func):
    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 2:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, op)
    # 2. TYPECHECK - two numbers or two strings
    first, second = ostack[-2], ostack[-1]
    if first.TYPE in ps.NUMERIC_TYPES and second.TYPE in ps.NUMERIC_TYPES:
        result = func(first.val, second.val)
    elif first.TYPE == ps.T_STRING and second.TYPE == ps.T_STRING:
        result = func(first.val, second.val)
    else:
        return ps_error.e(ctxt, ps_error.TYPECHECK, op)

    ostack.pop()
    ostack[-1] = ps.Bool(result)


def ge(ctxt, ostack):
    """
          num₁ num₂ **ge** bool
    string₁ string₂ **ge** bool


    pops two objects from the operand stack and pushes true if the first operand is
    greater than or equal to the second, or false otherwise. If both operands are
    numbers, **ge** compares their mathematical values. If both operands are strings, **ge**
    compares them character by character. If the operands are of other types or one is a
    string and the other is a number, a **typecheck** error occurs.

    **Examples**
        4.2 4 ge            -> true
        (abc) (d) ge        -> false
        (aba) (ab) ge       -> true
        (aba) (aba) ge      -> true

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **gt**, **eq**, **ne**, **le**, **lt**
    """
    _compare(ctxt, ostack, ge.__name__, operator.ge)


def gt(ctxt, ostack):
    """
          num₁ num₂ **gt** bool
    string₁ string₂ **gt** bool


    pops two objects from the operand stack and pushes true if the first operand is
    greater than the second, or false otherwise.

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **ge**, **eq**, **ne**, **le**, **lt**
    """
    _compare(ctxt, ostack, gt.__name__, operator.gt)


def le(ctxt, ostack):
    """
          num₁ num₂ **le** bool
    string₁ string₂ **le** bool


    pops two objects from the operand stack and pushes true if the first operand is less
    than or equal to the second, or false otherwise.

    **Examples**
        3 4 le              -> true
        (abc) (d) le        -> true

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **lt**, **eq**, **ne**, **ge**, **gt**
    """
    _compare(ctxt, ostack, le.__name__, operator.le)


def lt(ctxt, ostack):
    """
          num₁ num₂ **lt** bool
    string₁ string₂ **lt** bool


    pops two objects from the operand stack and pushes true if the first operand is less
    than the second, or false otherwise.

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **le**, **eq**, **ne**, **ge**, **gt**
    """
    _compare(ctxt, ostack, lt.__name__, operator.lt)
