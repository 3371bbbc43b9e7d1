# LineForge - A line-oriented PostScript evaluator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import math
import operator

from ..core import error as ps_error
from ..core import types as ps


def _check_two_numbers(ctxt, ostack, op):
    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 2:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, op)
    # 2. TYPECHECK - Check operand types
    if ostack[-1].TYPE not in ps.NUMERIC_TYPES:
        return ps_error.e(ctxt, ps_error.TYPECHECK, op)
    if ostack[-2].TYPE not in ps.NUMERIC_TYPES:
        return ps_error.e(ctxt, ps_error.TYPECHECK, op)


def _check_one_number(ctxt, ostack, op):
    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 1:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, op)
    # 2. TYPECHECK - Check operand type
    if ostack[-1].TYPE not in ps.NUMERIC_TYPES:
        return ps_error.e(ctxt, ps_error.TYPECHECK, op)


def ps_abs(ctxt: ps.Context, ostack: ps.Stack) -> None:
    """
    num₁ **abs** num₂


    returns the absolute value of num1. The type of the result is the same as the type of
    num₁ unless the result leaves the integer range, in which case it is a real number.

    **Examples**
        4.5 **abs**     -> 4.5
        –3 **abs**      -> 3
        0 **abs**       -> 0

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **neg**
    """
    _check_one_number(ctxt, ostack, "abs")

    obj = ostack[-1]
    ostack[-1] = ps.make_number(abs(obj.val)) if obj.TYPE == ps.T_INT else ps.Real(abs(obj.val))


def add(ctxt: ps.Context, ostack: ps.Stack) -> None:
    """
    num₁ num₂ **add** sum


    returns the sum of num₁ and num₂. If the sum is a whole number within integer range,
    the result is an integer, whatever the operand types; otherwise, the result is a real
    number.

    **Examples**
        3 4 **add**         -> 7
        1.5 1.5 **add**     -> 3
        9.9 1.2 **add**     -> 11.1

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **div**, **mul**, **sub**, **idiv**, **mod**
    """
    _check_two_numbers(ctxt, ostack, add.__name__)

    ostack.append(ostack.pop_two_numbers(operator.add))


def sub(ctxt: ps.Context, ostack: ps.Stack) -> None:
    """
    num₁ num₂ **sub** difference


    returns the result of subtracting num₂ from num₁. If the difference is a whole number
    within integer range, the result is an integer; otherwise, the result is a real number.

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **add**, **div**, **mul**, **idiv**, **mod**
    """
    _check_two_numbers(ctxt, ostack, sub.__name__)

    ostack.append(ostack.pop_two_numbers(operator.sub))


def mul(ctxt: ps.Context, ostack: ps.Stack) -> None:
    """
    num₁ num₂ **mul** product


    returns the product of num₁ and num₂. If the product is a whole number within integer
    range, the result is an integer; otherwise, the result is a real number.

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **add**, **div**, **idiv**, **mod**, **sub**
    """
    _check_two_numbers(ctxt, ostack, mul.__name__)

    ostack.append(ostack.pop_two_numbers(operator.mul))


def div(ctxt: ps.Context, ostack: ps.Stack) -> None:
    """
    num₁ num₂ **div** quotient


    divides num₁ by num₂, producing a result that is always a real number even if both
    operands are integers.

    **Examples**
        3 2 **div**         -> 1.5
        4 2 **div**         -> 2

    **Errors**:     **rangecheck**, **stackunderflow**, **typecheck**
    **See Also**:   **idiv**, **add**, **mul**, **sub**, **mod**
    """
    _check_two_numbers(ctxt, ostack, div.__name__)

    if ostack[-1].val == 0:
        return ps_error.e(ctxt, ps_error.RANGECHECK, div.__name__)

    divisor = ostack.pop_number()
    dividend = ostack.pop_number()
    ostack.append(ps.Real(dividend / divisor))


def idiv(ctxt: ps.Context, ostack: ps.Stack) -> None:
    """
    int₁ int₂ **idiv** quotient


    divides int₁ by int₂ and returns the integer part of the quotient, with any fractional
    part discarded (truncated toward zero). Real operands are truncated first.

    **Examples**
        3 2 **idiv**        -> 1
        -5 2 **idiv**       -> -2

    **Errors**:     **rangecheck**, **stackunderflow**, **typecheck**
    **See Also**:   **div**, **add**, **mul**, **sub**, **mod**
    """
    _check_two_numbers(ctxt, ostack, idiv.__name__)

    # 3. RANGECHECK - finite operands, nonzero divisor
    divisor = ps.to_int(ctxt, ostack[-1], idiv.__name__)
    dividend = ps.to_int(ctxt, ostack[-2], idiv.__name__)
    if divisor == 0:
        return ps_error.e(ctxt, ps_error.RANGECHECK, idiv.__name__)

    del ostack[-2:]
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    ostack.append(ps.make_number(quotient))


def mod(ctxt: ps.Context, ostack: ps.Stack) -> None:
    """
    int₁ int₂ **mod** remainder


    returns the remainder that results from dividing int₁ by int₂. The sign of the result
    is the same as the sign of the dividend int₁.

    **Examples**
        5 3 **mod**     -> 2
        -5 3 **mod**    -> -2

    **Errors**:     **rangecheck**, **stackunderflow**, **typecheck**
    **See Also**:   **idiv**, **div**
    """
    _check_two_numbers(ctxt, ostack, mod.__name__)

    # 3. RANGECHECK - finite operands, nonzero divisor
    divisor = ps.to_int(ctxt, ostack[-1], mod.__name__)
    dividend = ps.to_int(ctxt, ostack[-2], mod.__name__)
    if divisor == 0:
        return ps_error.e(ctxt, ps_error.RANGECHECK, mod.__name__)

    del ostack[-2:]
    remainder = abs(dividend) % abs(divisor)
    ostack.append(ps.Int(-remainder if dividend < 0 else remainder))


def neg(ctxt: ps.Context, ostack: ps.Stack) -> None:
    """
    num₁ **neg** num₂


    returns the negative of num₁. The type of the result is the same as the type of num₁
    unless the result leaves the integer range.

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **abs**
    """
    _check_one_number(ctxt, ostack, neg.__name__)

    obj = ostack[-1]
    ostack[-1] = ps.make_number(-obj.val) if obj.TYPE == ps.T_INT else ps.Real(-obj.val)


def ceiling(ctxt: ps.Context, ostack: ps.Stack) -> None:
    """
    num₁ **ceiling** num₂


    returns the least integer value greater than or equal to num₁. The type of the result
    is the same as the type of the operand.

    **Examples**
        3.2 **ceiling**     -> 4
        -4.8 **ceiling**    -> -4
        99 **ceiling**      -> 99

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **floor**, **round**
    """
    _check_one_number(ctxt, ostack, ceiling.__name__)

    # infinity and nan are their own ceiling
    if ostack[-1].TYPE == ps.T_REAL and math.isfinite(ostack[-1].val):
        ostack[-1] = ps.Real(math.ceil(ostack[-1].val))


def floor(ctxt: ps.Context, ostack: ps.Stack) -> None:
    """
    num₁ **floor** num₂


    returns the greatest integer value less than or equal to num₁. The type of the result
    is the same as the type of the operand.

    **Examples**
        3.2 **floor**       -> 3
        -4.8 **floor**      -> -5
        99 **floor**        -> 99

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **ceiling**, **round**
    """
    _check_one_number(ctxt, ostack, floor.__name__)

    if ostack[-1].TYPE == ps.T_REAL and math.isfinite(ostack[-1].val):
        ostack[-1] = ps.Real(math.floor(ostack[-1].val))


def ps_round(ctxt: ps.Context, ostack: ps.Stack) -> None:
    """
    num₁ **round** num₂


    returns the integer value nearest to num₁. If num₁ is equally close to its two nearest
    integers, **round** returns the greater of the two. The type of the result is the same as
    the type of the operand.

    **Examples**
        3.2 **round**       -> 3
        6.5 **round**       -> 7
        -4.8 **round**      -> -5
        -6.5 **round**      -> -6

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **ceiling**, **floor**
    """
    _check_one_number(ctxt, ostack, "round")

    if ostack[-1].TYPE == ps.T_REAL and math.isfinite(ostack[-1].val):
        ostack[-1] = ps.Real(math.floor(ostack[-1].val + 0.5))


def sqrt(ctxt: ps.Context, ostack: ps.Stack) -> None:
    """
    num **sqrt** real


    returns the square root of num, which must be a nonnegative number. The result is a
    real number.

    **Errors**:     **rangecheck**, **stackunderflow**, **typecheck**
    **See Also**:   **exp**
    """
    _check_one_number(ctxt, ostack, sqrt.__name__)

    if ostack[-1].val < 0:
        return ps_error.e(ctxt, ps_error.RANGECHECK, sqrt.__name__)

    ostack[-1] = ps.Real(math.sqrt(ostack[-1].val))


def sin(ctxt: ps.Context, ostack: ps.Stack) -> None:
    """
    angle **sin** real


    returns the sine of angle, which is interpreted as an angle in degrees. The result is a
    real number.

    **Errors**:     **stackunderflow**, **typecheck**, **undefinedresult**
    **See Also**:   **cos**, **atan**
    """
    _check_one_number(ctxt, ostack, sin.__name__)
    if not math.isfinite(ostack[-1].val):
        return ps_error.e(ctxt, ps_error.UNDEFINEDRESULT, sin.__name__)

    ostack[-1] = ps.Real(math.sin(math.radians(ostack[-1].val)))


def cos(ctxt: ps.Context, ostack: ps.Stack) -> None:
    """
    angle **cos** real


    returns the cosine of angle, which is interpreted as an angle in degrees. The result is
    a real number.

    **Errors**:     **stackunderflow**, **typecheck**, **undefinedresult**
    **See Also**:   **sin**, **atan**
    """
    _check_one_number(ctxt, ostack, cos.__name__)
    if not math.isfinite(ostack[-1].val):
        return ps_error.e(ctxt, ps_error.UNDEFINEDRESULT, cos.__name__)

    ostack[-1] = ps.Real(math.cos(math.radians(ostack[-1].val)))


def atan(ctxt: ps.Context, ostack: ps.Stack) -> None:
    """
    num den **atan** angle


    returns the angle (in degrees between 0 and 360) whose tangent is num divided by
    den. Either num or den may be 0, but not both. The signs of num and den determine
    the quadrant in which the result will lie. The result is a real number.

    **Examples**
        0 1 **atan**        -> 0
        1 0 **atan**        -> 90
        -100 0 **atan**     -> 270
        4 4 **atan**        -> 45

    **Errors**:     **stackunderflow**, **typecheck**, **undefinedresult**
    **See Also**:   **cos**, **sin**
    """
    _check_two_numbers(ctxt, ostack, atan.__name__)

    if ostack[-2].val == 0 and ostack[-1].val == 0:
        return ps_error.e(ctxt, ps_error.UNDEFINEDRESULT, atan.__name__)

    den = ostack.pop_number()
    num = ostack.pop_number()
    result = math.degrees(math.atan2(num, den))
    if result < 0:
        result += 360
    ostack.append(ps.Real(result))


def rand(ctxt: ps.Context, ostack: ps.Stack) -> None:
    """
    - **rand** int


    returns a random integer in the range 0 to 2**31 - 2, produced by a pseudo-random
    number generator. The random number generator's state can be reset by **srand**
    and interrogated by **rrand**.

    **Errors**:     **none**
    **See Also**:   **srand**, **rrand**
    """

    ostack.append(ps.Int(ctxt.random.randrange(ps.RAND_MAX)))


def rrand(ctxt: ps.Context, ostack: ps.Stack) -> None:
    """
    - **rrand** int


    returns the seed most recently given to **srand** (or the seed chosen when the
    session started). Passing it to **srand** restarts the same sequence.

    **Errors**:     **none**
    **See Also**:   **rand**, **srand**
    """

    ostack.append(ps.Int(ctxt.random_seed))


def srand(ctxt: ps.Context, ostack: ps.Stack) -> None:
    """
    int **srand** -


    initializes the random number generator with the seed int, which may be
    any integer value. Executing **srand** with a particular value causes subsequent
    invocations of **rand** to generate a reproducible sequence of results.

    The random number state is kept separately for each context.

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **rand**, **rrand**
    """
    _check_one_number(ctxt, ostack, srand.__name__)

    ctxt.random_seed = ps.to_int(ctxt, ostack[-1], srand.__name__)
    ostack.pop()
    ctxt.random.seed(ctxt.random_seed)
