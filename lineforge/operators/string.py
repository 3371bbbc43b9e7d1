# LineForge - A line-oriented PostScript evaluator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from ..core import error as ps_error
from ..core import types as ps


def string(ctxt, ostack):
    """
    int **string** **string**


    creates a **string** of length int, each of whose elements is initialized with a
    space character, and pushes this **string** on the operand stack. The int operand
    must be a nonnegative integer. The new string is mutable.

    **Example**
        3 **string**    -> (   )

    **Errors**:     **rangecheck**, **stackunderflow**, **typecheck**
    **See Also**:   **length**, **type**, **readonly**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 1:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, string.__name__)
    # 2. TYPECHECK - Check operand type
    if ostack[-1].TYPE not in ps.NUMERIC_TYPES:
        return ps_error.e(ctxt, ps_error.TYPECHECK, string.__name__)
    # 3. RANGECHECK - Check value
    if ostack[-1].val < 0:
        return ps_error.e(ctxt, ps_error.RANGECHECK, string.__name__)

    ostack[-1] = ps.String(" " * ps.to_int(ctxt, ostack[-1], string.__name__))
