# LineForge - A line-oriented PostScript evaluator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Compound operators: copy, get, put, length and getinterval work on
several collection types.
"""

from . import operand_stack as ps_operand_stack
from ..core import error as ps_error
from ..core import types as ps


def ps_copy(ctxt, ostack):
    """
        any(1) ... any(n) n **copy** any(1) ... any(n) any(1) ... any(n)

          array₁ array₂ **copy** array₂
        string₁ string₂ **copy** string₂


    performs two entirely different functions, depending on the type of the topmost
    operand.

    In the first form, where the top element on the operand stack is a nonnegative integer
    n, **copy** pops n from the stack and duplicates the top n elements on the stack. A
    real n is truncated.

    In the second form, **copy** copies all the elements of the first array (or string)
    into the second, starting at index 0, and pushes the second operand. The second
    operand must be at least as long as the first; elements beyond the copied ones are
    left unchanged. Elements that are composite objects are shared, not duplicated.

    **Examples**
        (a) (b) (c) 2 **copy**          -> (a) (b) (c) (b) (c)
        (a) (b) (c) 0 **copy**          -> (a) (b) (c)

    **Errors**:     **invalidaccess**, **rangecheck**, **stackunderflow**, **typecheck**
    **See Also**:   **dup**, **get**, **put**, **getinterval**
    """
    op = "copy"

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 1:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, op)

    if ostack[-1].TYPE in ps.NUMERIC_TYPES:
        n = ps.to_int(ctxt, ostack[-1], op)
        # 2. RANGECHECK - n must fit below itself
        if n < 0 or n > len(ostack) - 1:
            return ps_error.e(ctxt, ps_error.RANGECHECK, op)
        ostack.pop()
        return ps_operand_stack.stack_copy(ctxt, ostack, n)

    # 2. STACKUNDERFLOW - the composite forms take two operands
    if len(ostack) < 2:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, op)
    # 3. TYPECHECK - two arrays or two strings
    source, dest = ostack[-2], ostack[-1]
    if source.TYPE not in (ps.T_ARRAY, ps.T_STRING) or source.TYPE != dest.TYPE:
        return ps_error.e(ctxt, ps_error.TYPECHECK, op)
    # 4. INVALIDACCESS - destination string must be writable
    if dest.TYPE == ps.T_STRING and not dest.mutable:
        return ps_error.e(ctxt, ps_error.INVALIDACCESS, op)
    # 5. RANGECHECK - destination must be long enough
    if source.length > dest.length:
        return ps_error.e(ctxt, ps_error.RANGECHECK, op)

    n = source.length
    if dest.TYPE == ps.T_ARRAY:
        dest.val[:n] = source.val
    else:
        dest.val = source.val + dest.val[n:]

    ostack.pop()
    ostack[-1] = dest


def _index(ctxt, obj, container, op):
    """Validated integer index into container; reals are truncated."""
    if obj.TYPE not in ps.NUMERIC_TYPES:
        return ps_error.e(ctxt, ps_error.TYPECHECK, op)
    index = ps.to_int(ctxt, obj, op)
    if index < 0 or index >= container.length:
        return ps_error.e(ctxt, ps_error.RANGECHECK, op)
    return index


def get(ctxt, ostack):
    """
     array index **get** any
      dict key   **get** any
    string index **get** int


    returns a single element from the value of the first operand. If the first operand is
    an array or a string, **get** treats the second operand as an index and returns the
    element identified by the index, counting from 0. index must be in the range 0 to
    n - 1, where n is the length of the array or string. If it is outside this range, a
    **rangecheck** error occurs.

    If the first operand is a dictionary, **get** looks up the second operand as a key in
    the dictionary and returns the associated value. If the key is not present in the
    dictionary, an **undefined** error occurs.

    **Examples**
        [31 41 59] 0 **get**            -> 31
        /mykey (hello) def
        currentdict /mykey **get**      -> (hello)
        (abc) 1 **get**                 -> 98      % Character code for b

    **Errors**:     **rangecheck**, **stackunderflow**, **typecheck**, **undefined**
    **See Also**:   **put**, **getinterval**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 2:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, get.__name__)
    # 2. TYPECHECK - Check container type
    container = ostack[-2]
    if container.TYPE not in (ps.T_ARRAY, ps.T_DICT, ps.T_STRING):
        return ps_error.e(ctxt, ps_error.TYPECHECK, get.__name__)

    if container.TYPE == ps.T_DICT:
        if ostack[-1].TYPE not in (ps.T_NAME, ps.T_STRING):
            return ps_error.e(ctxt, ps_error.TYPECHECK, get.__name__)
        key = ostack[-1].val
        if key not in container:
            return ps_error.e(ctxt, ps_error.UNDEFINED, get.__name__, key)
        value = container[key]
    else:
        value = container.get(_index(ctxt, ostack[-1], container, get.__name__))

    ostack.pop()
    ostack[-1] = value


def put(ctxt, ostack):
    """
     array index any **put** –
      dict key   any **put** –
    string index int **put** –


    replaces a single element of the value of the first operand. If the first operand is
    an array or a string, **put** treats the second operand as an index and stores the third
    operand at the position identified by the index, counting from 0. index must be in
    the range 0 to n - 1, where n is the length of the array or string. If it is outside this
    range, a **rangecheck** error occurs.

    If the first operand is a dictionary, **put** uses the second operand as a key and the
    third operand as a value, and stores this key-value pair into dict.

    If the first operand is a string, the third operand must be an integer character
    code, and the string must be mutable; a string marked **readonly** causes an
    **invalidaccess** error.

    **Examples**
        /ar [5 17 3 8] def
        ar 2 (abcd) **put**
        ar                          -> [5 17 (abcd) 8]

        /st (abc) def
        st 0 65 **put**             % 65 is the ASCII code for character A
        st                          -> (Abc)

    **Errors**:     **invalidaccess**, **rangecheck**, **stackunderflow**, **typecheck**
    **See Also**:   **get**, **getinterval**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 3:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, put.__name__)
    # 2. TYPECHECK - Check container type
    container = ostack[-3]
    if container.TYPE not in (ps.T_ARRAY, ps.T_DICT, ps.T_STRING):
        return ps_error.e(ctxt, ps_error.TYPECHECK, put.__name__)

    value = ostack[-1]
    if container.TYPE == ps.T_DICT:
        if ostack[-2].TYPE not in (ps.T_NAME, ps.T_STRING):
            return ps_error.e(ctxt, ps_error.TYPECHECK, put.__name__)
        container.put(ostack[-2].val, value)
    elif container.TYPE == ps.T_ARRAY:
        container.put(_index(ctxt, ostack[-2], container, put.__name__), value)
    else:
        # 3. INVALIDACCESS - Check string mutability
        if not container.mutable:
            return ps_error.e(ctxt, ps_error.INVALIDACCESS, put.__name__)
        index = _index(ctxt, ostack[-2], container, put.__name__)
        if value.TYPE != ps.T_INT:
            return ps_error.e(ctxt, ps_error.TYPECHECK, put.__name__)
        if not 0 <= value.val <= 0x10FFFF:
            return ps_error.e(ctxt, ps_error.RANGECHECK, put.__name__)
        container.put(index, value.val)

    del ostack[-3:]


def length(ctxt, ostack):
    """
     array **length** int
      dict **length** int
    string **length** int
      name **length** int


    returns the number of elements in the value of its operand if the operand is an
    array, a string or a name. If the operand is a dictionary, **length** returns the
    current number of entries it contains.

    **Examples**
        [1 2 4] **length**      -> 3
        [] **length**           -> 0        % An array of zero length
        /ar 20 array def
        ar **length**           -> 20
        () **length**           -> 0        % No characters between ( and )
        /foo **length**         -> 3

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **getinterval**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 1:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, length.__name__)
    # 2. TYPECHECK - Check operand type
    if ostack[-1].TYPE not in (ps.T_ARRAY, ps.T_DICT, ps.T_STRING, ps.T_NAME):
        return ps_error.e(ctxt, ps_error.TYPECHECK, length.__name__)

    ostack[-1] = ostack[-1].len()


def getinterval(ctxt, ostack):
    """
     array index count **getinterval** subarray
    string index count **getinterval** substring


    creates a new array or string whose value consists of some subsequence of the
    original array or string. The subsequence consists of count elements starting at the
    specified index in the original object. Composite elements of an array are shared
    between the original and the new array; the new array's slots are its own.

    **getinterval** requires index to be a valid index in the original object and count to be
    a nonnegative integer such that index + count is not greater than the length of the
    original object.

    **Examples**
        [9 8 7 6 5] 1 3 **getinterval**     -> [8 7 6]
        (abcde) 1 3 **getinterval**         -> (bcd)
        (abcde) 0 0 **getinterval**         -> ()       % An empty string

    **Errors**:     **rangecheck**, **stackunderflow**, **typecheck**
    **See Also**:   **get**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 3:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, getinterval.__name__)
    # 2. TYPECHECK - Check operand types (composite index count)
    if ostack[-1].TYPE != ps.T_INT:
        return ps_error.e(ctxt, ps_error.TYPECHECK, getinterval.__name__)
    if ostack[-2].TYPE != ps.T_INT:
        return ps_error.e(ctxt, ps_error.TYPECHECK, getinterval.__name__)
    if ostack[-3].TYPE not in (ps.T_ARRAY, ps.T_STRING):
        return ps_error.e(ctxt, ps_error.TYPECHECK, getinterval.__name__)

    # 3. RANGECHECK - Check bounds
    source = ostack[-3]
    start = ostack[-2].val
    count = ostack[-1].val
    if start < 0 or count < 0 or start + count > source.length:
        return ps_error.e(ctxt, ps_error.RANGECHECK, getinterval.__name__)

    if source.TYPE == ps.T_ARRAY:
        obj = ps.Array(source.val[start:start + count])
    else:
        obj = ps.String(source.val[start:start + count], source.mutable)

    ostack.pop()
    ostack.pop()
    ostack[-1] = obj
