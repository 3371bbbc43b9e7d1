# LineForge - A line-oriented PostScript evaluator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import copy
import math

from ..core import error as ps_error
from ..core import types as ps


def cvi(ctxt: ps.Context, ostack: ps.Stack) -> None:
    """
       num **cvi** int
    string **cvi** int


    (convert to integer) takes an integer, real, or string object from the stack and
    produces an integer result. If the operand is an integer, **cvi** simply returns it. If the
    operand is a real number, it truncates any fractional part (that is, rounds it toward
    0) and converts it to an integer. If the operand is a string, **cvi** interprets the
    characters of the string as a number. If that number is a real number, **cvi** converts
    it to an integer. A **rangecheck** error occurs if a real number is too large to
    convert to an integer.

    **Examples**
        (3.3E1) **cvi**     -> 33
        –47.8 **cvi**       -> –47
        520.9 **cvi**       -> 520

    **Errors**:     **rangecheck**, **stackunderflow**, **syntaxerror**, **typecheck**
    **See Also**:   **cvr**, **ceiling**, **floor**, **round**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 1:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, cvi.__name__)
    # 2. TYPECHECK - Check operand type
    if ostack[-1].TYPE not in {ps.T_INT, ps.T_REAL, ps.T_STRING}:
        return ps_error.e(ctxt, ps_error.TYPECHECK, cvi.__name__)

    if ostack[-1].TYPE == ps.T_INT:
        return

    if ostack[-1].TYPE == ps.T_REAL:
        value = ostack[-1].val
    else:
        try:
            value = float(ostack[-1].python_string())
        except ValueError:
            return ps_error.e(ctxt, ps_error.SYNTAXERROR, cvi.__name__)

    # 3. RANGECHECK - nan, infinity and values outside 64 bits
    if not math.isfinite(value):
        return ps_error.e(ctxt, ps_error.RANGECHECK, cvi.__name__)
    result = ps.make_number(int(value))
    if result.TYPE != ps.T_INT:
        return ps_error.e(ctxt, ps_error.RANGECHECK, cvi.__name__)

    ostack[-1] = result


def cvlit(ctxt: ps.Context, ostack: ps.Stack) -> None:
    """
    any **cvlit** any


    (convert to literal) makes the object on the top of the operand stack have
    the literal instead of the executable attribute. A name is replaced by a new
    literal name with the same text.

    **Errors**:     **stackunderflow**
    **See Also**:   **cvx**, **xcheck**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 1:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, cvlit.__name__)

    ostack[-1] = _with_attrib(ostack[-1], ps.ATTRIB_LIT)


def cvx(ctxt: ps.Context, ostack: ps.Stack) -> None:
    """
    any **cvx** any


    (convert to executable) makes the object on the top of the operand stack have
    the executable instead of the literal attribute. A name is replaced by a new
    executable name with the same text, which **exec** can then invoke.

    **Example**
        /add **cvx** 2 3 3 -1 roll **exec**     -> 5

    **Errors**:     **stackunderflow**
    **See Also**:   **cvlit**, **xcheck**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 1:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, cvx.__name__)

    ostack[-1] = _with_attrib(ostack[-1], ps.ATTRIB_EXEC)


def _with_attrib(obj, attrib):
    if obj.attrib == attrib:
        return obj
    if obj.TYPE == ps.T_NAME:
        # the flag of a Name never changes in place
        return ps.Name(obj.val, attrib)
    obj = copy.copy(obj)
    obj.attrib = attrib
    return obj


def cvr(ctxt: ps.Context, ostack: ps.Stack) -> None:
    """
       num **cvr** real
    string **cvr** real


    (convert to real) takes an integer, real, or string object and produces a real
    result. If the operand is an integer, **cvr** converts it to a real number. If the operand
    is a real number, **cvr** simply returns it. If the operand is a string, **cvr**
    interprets the characters of the string as a number and converts it to a real.

    **Errors**:     **stackunderflow**, **syntaxerror**, **typecheck**
    **See Also**:   **cvi**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 1:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, cvr.__name__)
    # 2. TYPECHECK - Check operand type
    if ostack[-1].TYPE not in {ps.T_INT, ps.T_REAL, ps.T_STRING}:
        return ps_error.e(ctxt, ps_error.TYPECHECK, cvr.__name__)

    if ostack[-1].TYPE == ps.T_STRING:
        try:
            ostack[-1] = ps.Real(float(ostack[-1].python_string()))
        except ValueError:
            return ps_error.e(ctxt, ps_error.SYNTAXERROR, cvr.__name__)
    else:
        ostack[-1] = ps.Real(ostack[-1].val)


def cvs(ctxt: ps.Context, ostack: ps.Stack) -> None:
    """
    any string **cvs** substring


    (convert to string) produces a text representation of an arbitrary object any, stores
    the text into string (overwriting some initial portion of its value), and returns a
    new string holding just the text written. If string is too small to hold the result
    of the conversion, a **rangecheck** error occurs.

    If any is a number, **cvs** produces a string representation of that number. If any is a
    boolean value, **cvs** produces either the string true or the string false. If any is a
    string, **cvs** copies its contents into string. If any is a name, **cvs** produces the
    text of that name. If any is any other type, **cvs** produces the text --nostringval--.

    **Examples**
        /str 20 string def
        123 456 add str **cvs**     -> (579)
        mark str **cvs**            -> (--nostringval--)

    **Errors**:     **invalidaccess**, **rangecheck**, **stackunderflow**, **typecheck**
    **See Also**:   **cvi**, **cvr**, **string**, **type**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 2:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, cvs.__name__)
    # 2. TYPECHECK - Check destination type
    if ostack[-1].TYPE != ps.T_STRING:
        return ps_error.e(ctxt, ps_error.TYPECHECK, cvs.__name__)
    # 3. INVALIDACCESS - destination must be writable
    if not ostack[-1].mutable:
        return ps_error.e(ctxt, ps_error.INVALIDACCESS, cvs.__name__)

    the_string = ostack[-1]
    obj = ostack[-2]

    if obj.TYPE in {ps.T_INT, ps.T_REAL, ps.T_BOOL}:
        s = str(obj)
    elif obj.TYPE in {ps.T_STRING, ps.T_NAME}:
        s = obj.val
    else:
        s = "--nostringval--"

    # 4. RANGECHECK - result must fit
    if len(s) > the_string.length:
        return ps_error.e(ctxt, ps_error.RANGECHECK, cvs.__name__)

    the_string.val = s + the_string.val[len(s):]

    ostack.pop()
    ostack[-1] = ps.String(s)


def readonly(ctxt: ps.Context, ostack: ps.Stack) -> None:
    """
     array **readonly** array
      dict **readonly** dict
    string **readonly** string


    marks a string read-only: **put**, **copy** and **cvs** can no longer write into it,
    through this or any other reference to the same string. Arrays, dictionaries and
    procedures carry no access restrictions and are returned unchanged.

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **put**, **string**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 1:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, readonly.__name__)
    # 2. TYPECHECK - Check operand type
    if ostack[-1].TYPE not in ps.COMPOSITE_TYPES:
        return ps_error.e(ctxt, ps_error.TYPECHECK, readonly.__name__)

    if ostack[-1].TYPE == ps.T_STRING:
        ostack[-1].mutable = False


def ps_type(ctxt: ps.Context, ostack: ps.Stack) -> None:
    """
    any **type** name


    returns a name object that identifies the **type** of the object any. The possible
    names that **type** can return are as follows:

        **arraytype**                       **nametype**
        **booleantype**                     **nulltype**
        **dicttype**                        **proceduretype**
        **integertype**                     **realtype**
        **marktype**                        **stringtype**

    The returned name has the executable attribute.

    **Errors**:     **stackunderflow**
    """
    op = "type"

    if len(ostack) < 1:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, op)

    ostack[-1] = ps.Name(ostack[-1].type_name(), attrib=ps.ATTRIB_EXEC)


def xcheck(ctxt: ps.Context, ostack: ps.Stack) -> None:
    """
    any **xcheck** bool


    tests whether the operand has the executable or the literal attribute, returning true
    if it is executable or false if it is literal. Procedures are executable.

    **Errors**:     **stackunderflow**
    **See Also**:   **cvx**, **cvlit**
    """

    if len(ostack) < 1:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, xcheck.__name__)

    if ostack[-1].attrib == ps.ATTRIB_EXEC:
        ostack[-1] = ps.Bool(True)
    else:
        ostack[-1] = ps.Bool(False)
