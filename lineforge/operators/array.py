# LineForge - A line-oriented PostScript evaluator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from ..core import error as ps_error
from ..core import types as ps


def aload(ctxt, ostack):
    """
    array **aload** any(0) ... any(n-1) array

    successively pushes all n elements of array on the operand stack (where n is the
    length of the operand), and then pushes the operand itself.

    **Example**
        [23 (ab) –6] **aload** -> 23 (ab) –6 [23 (ab) –6]

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **astore**, **get**, **getinterval**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 1:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, aload.__name__)
    # 2. TYPECHECK - Check operand type
    if ostack[-1].TYPE != ps.T_ARRAY:
        return ps_error.e(ctxt, ps_error.TYPECHECK, aload.__name__)

    arr = ostack.pop()
    ostack.extend(arr.val)
    ostack.append(arr)


def array(ctxt, ostack):
    """
    int **array** **array**

    creates an **array** of length int, each of whose elements is initialized with a null object,
    and pushes this **array** on the operand stack. The int operand must be a nonnegative
    integer not greater than the maximum allowable **array** length. A real int is
    truncated.

    **Example**
        3 **array** -> [null null null]

    **Errors**:     **rangecheck**, **stackunderflow**, **typecheck**
    **See Also**:   **aload**, **astore**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 1:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, array.__name__)
    # 2. TYPECHECK - Check operand type
    if ostack[-1].TYPE not in ps.NUMERIC_TYPES:
        return ps_error.e(ctxt, ps_error.TYPECHECK, array.__name__)
    # 3. RANGECHECK - Check value
    if ostack[-1].val < 0:
        return ps_error.e(ctxt, ps_error.RANGECHECK, array.__name__)

    ostack[-1] = ps.Array.of_length(ps.to_int(ctxt, ostack[-1], array.__name__))


def astore(ctxt, ostack):
    """
    any(0) ... any(n-1) array **astore** array

    stores the objects any(0) to any(n-1) from the operand stack into array, where n is
    the length of array. The **astore** operator first removes the array operand from the
    stack and determines its length. It then removes that number of objects from the
    stack, storing the topmost one into element n - 1 of array and the bottommost
    one into element 0. Finally, it pushes array back on the stack.

    **Example**
        (a) (bcd) (ef) 3 array astore -> [(a) (bcd) (ef)]

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **aload**, **put**, **putinterval**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 1:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, astore.__name__)
    # 2. TYPECHECK - Check operand type
    if ostack[-1].TYPE != ps.T_ARRAY:
        return ps_error.e(ctxt, ps_error.TYPECHECK, astore.__name__)
    # 3. STACKUNDERFLOW - enough objects to fill the array
    n = ostack[-1].length
    if len(ostack) < n + 1:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, astore.__name__)

    arr = ostack.pop()
    if n:
        arr.val[:] = ostack[-n:]
        del ostack[-n:]
    ostack.append(arr)
