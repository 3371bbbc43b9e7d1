# LineForge - A line-oriented PostScript evaluator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from ..core import error as ps_error
from ..core import types as ps


def clear(ctxt, ostack):
    """
    |- any(1) ... any(n) **clear** |-


    pops all objects from the operand stack and discards them.

    **Errors**:     **none**
    **See Also**:   **count**, **cleartomark**, **pop**
    """

    ostack.clear()


def cleartomark(ctxt, ostack):
    """
    mark obj(1) ... obj(n) **cleartomark** -


    pops entries from the operand stack repeatedly until it encounters a mark, which
    it also pops from the stack. obj(1) through obj(n) are any objects other than marks.

    **Errors**:     **unmatchedmark**
    **See Also**:   **clear**, **mark**, **counttomark**, **pop**
    """

    depth = _depth_to_mark(ostack)
    if depth is None:
        return ps_error.e(ctxt, ps_error.UNMATCHEDMARK, cleartomark.__name__)

    del ostack[len(ostack) - depth - 1:]


def count(ctxt, ostack):
    """
    |- any(1) ... any(n) **count** |- any(1) ... any(n) n


    counts the number of items on the operand stack and pushes this **count** on the
    operand stack.

    **Examples**
        **clear** **count**         -> 0
        **clear** 1 2 3 **count**   -> 1 2 3 3

    **Errors**:     **none**
    **See Also**:   **counttomark**
    """

    ostack.append(ps.Int(len(ostack)))


def counttomark(ctxt, ostack):
    """
    mark obj(1) ... obj(n) **counttomark** - mark obj(1) ... obj(n) n


    counts the number of objects on the operand stack, starting with the top element
    and continuing down to but not including the first mark encountered.

    **Examples**
        1 mark 2 3 **counttomark**  -> 1 mark 2 3 2
        1 mark **counttomark**      -> 1 mark 0

    **Errors**:     **unmatchedmark**
    **See Also**:   **mark**, **count**
    """

    depth = _depth_to_mark(ostack)
    if depth is None:
        return ps_error.e(ctxt, ps_error.UNMATCHEDMARK, counttomark.__name__)

    ostack.append(ps.Int(depth))


def _depth_to_mark(ostack):
    """Number of objects above the topmost mark, or None if there is no mark."""
    for depth, obj in enumerate(reversed(ostack)):
        if obj.TYPE == ps.T_MARK:
            return depth
    return None


def dup(ctxt, ostack):
    """
    any **dup** any any


    duplicates the top element on the operand stack. **dup** copies only the object; the
    value of a composite object is not copied but is shared.

    **Errors**:     **stackunderflow**
    **See Also**:   **copy**, **index**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 1:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, dup.__name__)

    ostack.append(ostack.peek())


def exch(ctxt, ostack):
    """
    any₁ any₂ **exch** any₂ any₁


    exchanges the top two elements on the operand stack.

    **Examples**
        1 2 **exch** -> 2 1

    **Errors**:     **stackunderflow**
    **See Also**:   **dup**, **roll**, **index**, **pop**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 2:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, exch.__name__)

    ostack[-1], ostack[-2] = ostack[-2], ostack[-1]


def index(ctxt, ostack):
    """
    any(n) ... any(0) n **index** any(n) ... any(0) any(n)


    removes the nonnegative integer n from the operand stack, counts down
    to the nth element from the top of the stack, and pushes that element
    on the stack. A real n is truncated.

    **Examples**
        (a) (b) (c) (d) 0 **index** -> (a) (b) (c) (d) (d)
        (a) (b) (c) (d) 3 **index** -> (a) (b) (c) (d) (a)

    **Errors**:     **rangecheck**, **stackunderflow**, **typecheck**
    **See Also**:   **copy**, **dup**, **roll**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 1:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, index.__name__)
    # 2. TYPECHECK - Check operand type
    if ostack[-1].TYPE not in ps.NUMERIC_TYPES:
        return ps_error.e(ctxt, ps_error.TYPECHECK, index.__name__)

    n = ps.to_int(ctxt, ostack[-1], index.__name__)
    if n < 0 or n > len(ostack) - 2:
        return ps_error.e(ctxt, ps_error.RANGECHECK, index.__name__)

    ostack[-1] = ostack[-2 - n]


def ps_mark(ctxt, ostack):
    """
    - **mark** **mark**


    pushes a **mark** object on the operand stack. All marks are identical, and the operand
    stack may contain any number of them at once. Operators such as **counttomark** and
    **cleartomark** work down to the topmost mark.

    **Errors**:     **none**
    **See Also**:   **counttomark**, **cleartomark**, **pop**
    """

    ostack.append(ps.Mark())


def pop(ctxt, ostack):
    """
    any **pop** -


    removes the top element from the operand stack and discards it.

    **Examples**
        1 2 3 **pop**       -> 1 2
        1 2 3 **pop** **pop**   -> 1

    **Errors**:     **stackunderflow**
    **See Also**:   **clear**, **dup**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 1:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, pop.__name__)

    ostack.pop()


def roll(ctxt, ostack):
    """
    any(n-1) ... any(0) n j **roll** any((j-1) mod(n)) ... any(0) any(n-1) ... any((j)mod(n))


    performs a circular shift of the objects any(n-1) through any(0) on the operand stack
    by the amount j. Positive j indicates upward motion on the stack, whereas negative
    j indicates downward motion.

    **Examples**
        (a) (b) (c) 3 -1 **roll**   -> (b) (c) (a)
        (a) (b) (c) 3 1 **roll**    -> (c) (a) (b)
        (a) (b) (c) 3 0 **roll**    -> (a) (b) (c)

    **Errors**:     **rangecheck**, **stackunderflow**, **typecheck**
    **See Also**:   **exch**, **index**, **copy**, **pop**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 2:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, roll.__name__)
    # 2. TYPECHECK - Check operand types (n j)
    if ostack[-1].TYPE not in ps.NUMERIC_TYPES:
        return ps_error.e(ctxt, ps_error.TYPECHECK, roll.__name__)
    if ostack[-2].TYPE not in ps.NUMERIC_TYPES:
        return ps_error.e(ctxt, ps_error.TYPECHECK, roll.__name__)

    n = ps.to_int(ctxt, ostack[-2], roll.__name__)
    j = ps.to_int(ctxt, ostack[-1], roll.__name__)
    if n < 0 or len(ostack) < n + 2:
        return ps_error.e(ctxt, ps_error.RANGECHECK, roll.__name__)

    ostack.pop()
    ostack.pop()
    if n < 2:
        return

    shift = j % n
    if shift:
        ostack[-n:] = ostack[-shift:] + ostack[-n:-shift]


def stack_copy(ctxt, ostack, n):
    """Duplicate the top n operands (the integer form of copy)."""
    if n < 0 or n > len(ostack):
        return ps_error.e(ctxt, ps_error.RANGECHECK, "copy")
    if n:
        ostack.extend(ostack[-n:])
