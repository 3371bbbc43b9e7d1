# LineForge - A line-oriented PostScript evaluator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Output operators. Everything goes to standard output; the operand stack
listings print the top element first.
"""

import sys

from ..core import error as ps_error
from ..core import types as ps


def ps_print(ctxt, ostack):
    """
    any **print** -


    writes the characters of a string to the standard output file without a trailing
    newline. Any other object is written in its rendered form.

    **Errors**:     **stackunderflow**
    **See Also**:   =, ==, **stack**
    """
    op = "print"

    if len(ostack) < 1:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, op)

    obj = ostack.pop()
    if obj.TYPE == ps.T_STRING:
        sys.stdout.write(obj.python_string())
    else:
        sys.stdout.write(str(obj))
    sys.stdout.flush()


def equals(ctxt, ostack):
    """
    any **=** -


    pops an object from the operand stack and writes its rendered text to the
    standard output file, followed by a newline.

    **Errors**:     **stackunderflow**
    **See Also**:   ==, **print**, **stack**
    """
    op = "="

    if len(ostack) < 1:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, op)

    print(ostack.pop())


def equals_equals(ctxt, ostack):
    """
    any **==** -


    pops an object from the operand stack and writes the name of its type and its
    rendered text to the standard output file, followed by a newline.

    **Example**
        5 **==**        % prints integertype: 5

    **Errors**:     **stackunderflow**
    **See Also**:   =, **print**, **pstack**, **type**
    """
    op = "=="

    if len(ostack) < 1:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, op)

    obj = ostack.pop()
    print(f"{obj.type_name()}: {obj}")


def stack(ctxt, ostack):
    """
    |- any(1) ... any(n) **stack** |- any(1) ... any(n)


    writes the rendered text of every object on the operand stack, one per line,
    starting with the topmost. The operand stack is left unchanged.

    **Errors**:     **none**
    **See Also**:   **pstack**, =, **count**
    """

    for obj in ostack.top_down():
        print(obj)


def pstack(ctxt, ostack):
    """
    |- any(1) ... any(n) **pstack** |- any(1) ... any(n)


    writes every object on the operand stack, one per line, starting with the topmost,
    the same way **stack** does. The operand stack is left unchanged.

    **Errors**:     **none**
    **See Also**:   **stack**, ==, **count**
    """

    stack(ctxt, ostack)
