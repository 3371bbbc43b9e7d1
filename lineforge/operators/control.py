# LineForge - A line-oriented PostScript evaluator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Evaluation Engine and Control Flow

This module implements the evaluation engine and the control-flow
operators. Execution is a plain call/return recursion:

    eval_token -> execute_procedure -> eval_token -> ...

Operators such as if, repeat and forall re-enter execute_procedure, and
execute_procedure feeds every token back through eval_token, so the depth
of a run is bounded only by the Python call stack.

Key Functions:
    - eval_token: dispatch one value (push literals, invoke names)
    - execute_procedure: run a procedure body against the live dictionary stack
    - execute_procedure_lexical: run a procedure under its captured environment

Scoping:
    Under dynamic scoping every procedure sees the dictionary stack as it
    is when the procedure runs. Under lexical scoping, def attaches a
    snapshot of the dictionary stack to a procedure, and invoking that
    procedure by name swaps the snapshot in for the duration of the call.
    The live stack is put back on every exit path. Procedures run through
    exec or through the control-flow operators always use the live stack.
"""

import logging

from ..core import error as ps_error
from ..core import tokenizer as ps_token
from ..core import types as ps

logger = logging.getLogger(__name__)


def eval_token(ctxt: "ps.Context", token: "ps.PSObject") -> None:
    """
    Evaluate one value against the context.

    Literals (numbers, booleans, strings, arrays, dictionaries, procedure
    bodies) and literal names are pushed unchanged. An executable name is
    looked up in the operator registry first, then on the dictionary stack;
    a procedure found there is executed, any other value is pushed.
    """
    ostack = ctxt.o_stack

    if token.TYPE in ps.LITERAL_TYPES:
        ostack.append(token)
        return

    if token.TYPE == ps.T_NAME:
        if token.attrib != ps.ATTRIB_EXEC:
            ostack.append(token)
            return

        name = token.val

        native = ctxt.find_operator(name)
        if native is not None:
            native(ctxt, ostack)
            return

        value = ctxt.d_stack.lookup(name)
        if value is None:
            return ps_error.e(ctxt, ps_error.UNDEFINED, name)

        if value.TYPE == ps.T_PROC:
            if ctxt.lexical and value.lexical_env is not None:
                execute_procedure_lexical(ctxt, value)
            else:
                execute_procedure(ctxt, value)
        else:
            ostack.append(value)
        return

    raise RuntimeError(f"unhandled token: {token!r}")


def execute_procedure(ctxt: "ps.Context", proc: "ps.Procedure") -> None:
    """
    Run proc against the live dictionary stack.

    Each body line is parsed again on every run, so redefining a name
    between two runs changes what the body does. Stops early once quit has
    been requested.
    """
    reader = ps_token.LineReader()
    for line in proc.lines:
        for obj in reader.feed(line):
            eval_token(ctxt, obj)
            if ctxt.quit_requested:
                return
        if ctxt.quit_requested:
            return
    reader.finish("exec")


def execute_procedure_lexical(ctxt: "ps.Context", proc: "ps.Procedure") -> None:
    """
    Run proc under the environment captured when it was defined.

    The dictionary stack is replaced by fresh copies of the captured scopes
    (definitions made during the call never reach the captured snapshot),
    and the previous stack is restored however the body finishes.
    """
    env = proc.lexical_env
    if env is None:
        raise RuntimeError("lexical call of a procedure with no captured environment")

    saved = ctxt.d_stack.scopes()
    logger.debug("entering captured environment (%d scopes)", len(env))
    try:
        ctxt.d_stack.replace_with([d.copy() for d in env])
        execute_procedure(ctxt, proc)
    finally:
        ctxt.d_stack.replace_with(saved)
        logger.debug("restored live environment (%d scopes)", len(saved))


def _run_loop(ctxt: "ps.Context", steps, proc: "ps.Procedure", before=None) -> None:
    """
    Drive one looping operator. steps yields once per iteration; before, if
    given, is called with each yielded item to push the loop operands.
    exit ends the loop; a quit request ends it too.
    """
    ctxt.loop_depth += 1
    try:
        for item in steps:
            if before is not None:
                before(item)
            execute_procedure(ctxt, proc)
            if ctxt.quit_requested:
                break
    except ps_error.ExitLoop:
        pass
    finally:
        ctxt.loop_depth -= 1


def ps_exec(ctxt, ostack):
    """
    any **exec** –

    Executes the operand immediately. A procedure runs against the live
    dictionary stack, whatever the scoping mode; a captured environment on
    the procedure is not used. An executable name is evaluated exactly as
    if it had been read from input.

    **Errors**: **stackunderflow**, **typecheck**
    **See Also**: **cvx**, **if**
    """
    op = "exec"
    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 1:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, op)

    # 2. TYPECHECK - procedure or executable name
    obj = ostack[-1]
    if obj.TYPE == ps.T_PROC:
        ostack.pop()
        execute_procedure(ctxt, obj)
    elif obj.TYPE == ps.T_NAME and obj.attrib == ps.ATTRIB_EXEC:
        ostack.pop()
        eval_token(ctxt, obj)
    else:
        return ps_error.e(ctxt, ps_error.TYPECHECK, op)


def ps_if(ctxt, ostack):
    """
    bool proc **if** -


    removes both operands from the stack, then executes proc if bool is true. The **if** operator
    pushes no results of its own on the operand stack, but proc may do so.

    Example
        3 4 lt {(3 is less than 4)} if      -> (3 is less than 4)

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **ifelse**
    """
    op = "if"

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 2:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, op)
    # 2. TYPECHECK - Check operand types (boolean procedure)
    if ostack[-1].TYPE != ps.T_PROC:
        return ps_error.e(ctxt, ps_error.TYPECHECK, op)
    if ostack[-2].TYPE != ps.T_BOOL:
        return ps_error.e(ctxt, ps_error.TYPECHECK, op)

    proc = ostack.pop()
    cond = ostack.pop()
    if cond.val:
        execute_procedure(ctxt, proc)


def ifelse(ctxt, ostack):
    """
    bool proc₁ proc₂ **ifelse** -


    removes all three operands from the stack, then executes proc₁ if bool is true or
    proc₂ if bool is false. The **ifelse** operator pushes no results of its own on the operand
    stack, but the procedure it executes may do so.

    **Example**
        4 3 lt
            {(TruePart)}
            {(FalsePart)}
        **ifelse**              -> (FalsePart)      % Since 4 is not less than 3

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **if**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 3:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, ifelse.__name__)
    # 2. TYPECHECK - Check operand types (bool proc1 proc2)
    if ostack[-1].TYPE != ps.T_PROC or ostack[-2].TYPE != ps.T_PROC:
        return ps_error.e(ctxt, ps_error.TYPECHECK, ifelse.__name__)
    if ostack[-3].TYPE != ps.T_BOOL:
        return ps_error.e(ctxt, ps_error.TYPECHECK, ifelse.__name__)

    proc2 = ostack.pop()
    proc1 = ostack.pop()
    cond = ostack.pop()
    execute_procedure(ctxt, proc1 if cond.val else proc2)


def repeat(ctxt, ostack):
    """
    int proc **repeat** -


    executes the procedure proc int times. A real count is truncated to an
    integer; a count of zero or less executes proc not at all. Both operands are
    removed before proc runs for the first time. If proc executes the **exit**
    operator, **repeat** terminates prematurely.

    **Examples**
        4 {(abc)} **repeat**                    -> (abc) (abc) (abc) (abc)
        1 2 3 4 3 {pop} **repeat**              -> 1    % Pops 3 values (down to the 1)
        mark 0 {(will not happen)} **repeat**   -> mark

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **for**, **loop**, **forall**, **exit**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 2:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, repeat.__name__)
    # 2. TYPECHECK - Check operand types (int proc)
    if ostack[-1].TYPE != ps.T_PROC:
        return ps_error.e(ctxt, ps_error.TYPECHECK, repeat.__name__)
    if ostack[-2].TYPE not in ps.NUMERIC_TYPES:
        return ps_error.e(ctxt, ps_error.TYPECHECK, repeat.__name__)

    # a count that cannot be truncated to an integer is a typecheck
    count = ps.to_int(ctxt, ostack[-2], repeat.__name__, ps_error.TYPECHECK)
    proc = ostack.pop()
    ostack.pop()

    _run_loop(ctxt, range(max(count, 0)), proc)


def ps_for(ctxt, ostack):
    """
    initial increment limit proc **for** -


    executes the procedure proc repeatedly, passing it a sequence of values from initial
    by steps of increment to limit. Before each repetition the control variable is
    compared with limit; if limit has not been exceeded, **for** pushes the control
    variable on the operand stack, executes proc, and adds increment to it.

    If increment is positive, **for** terminates when the control variable becomes greater
    than limit. If increment is negative, **for** terminates when the control variable becomes
    less than limit. The control variable is a real if initial or increment is a real,
    otherwise an integer. If proc executes the **exit** operator, **for** terminates prematurely.

    **Examples**
        0 1 1 4 {add} **for**       -> 10
        1 2 6 { } **for**           -> 1 3 5
        3 -.5 1 { } **for**         -> 3 2.5 2 1.5 1

    **Errors**:     **rangecheck**, **stackunderflow**, **typecheck**
    **See Also**:   **repeat**, **loop**, **forall**, **exit**
    """
    op = "for"

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 4:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, op)
    # 2. TYPECHECK - Check operand types (initial increment limit proc)
    if ostack[-1].TYPE != ps.T_PROC:
        return ps_error.e(ctxt, ps_error.TYPECHECK, op)
    for n in range(-4, -1):
        if ostack[n].TYPE not in ps.NUMERIC_TYPES:
            return ps_error.e(ctxt, ps_error.TYPECHECK, op)
    # 3. RANGECHECK - a zero increment never terminates
    if ostack[-3].val == 0:
        return ps_error.e(ctxt, ps_error.RANGECHECK, op)

    # Only convert control variable to real if initial or
    # increment is real. A real limit alone does not force real control values.
    make_control_real = (ostack[-4].TYPE == ps.T_REAL or ostack[-3].TYPE == ps.T_REAL)

    proc = ostack.pop()
    limit = ostack.pop().val
    increment = ostack.pop().val
    control = ostack.pop().val
    if make_control_real:
        control = float(control)
        increment = float(increment)

    def steps():
        current = control
        if increment > 0:
            while current <= limit:
                yield current
                current += increment
        else:
            while current >= limit:
                yield current
                current += increment

    number = ps.Real if make_control_real else ps.Int
    _run_loop(ctxt, steps(), proc, lambda value: ostack.append(number(value)))


def forall(ctxt, ostack):
    """
    array proc **forall** -
     dict proc **forall** -


    enumerates the elements of the first operand, executing the procedure proc for
    each element. For an array, **forall** pushes each element, beginning with index 0,
    and executes proc. For a dictionary, **forall** pushes each key (as a literal name)
    and its value, then executes proc; entries are enumerated in the order they were
    first defined. The entries are those present when **forall** starts.

    If the first operand is empty, **forall** does not execute proc at all. If proc
    executes the **exit** operator, **forall** terminates prematurely.

    **Examples**
        0 [13 29 3 -8 21] {add} **forall**          -> 58
        /d 2 dict def
        d /abc 123 put
        d /xyz (test) put
        d {} **forall**                             -> /abc 123 /xyz (test)

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **for**, **repeat**, **loop**, **exit**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 2:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, forall.__name__)
    # 2. TYPECHECK - Check procedure and collection types
    if ostack[-1].TYPE != ps.T_PROC:
        return ps_error.e(ctxt, ps_error.TYPECHECK, forall.__name__)
    if ostack[-2].TYPE not in (ps.T_ARRAY, ps.T_DICT):
        return ps_error.e(ctxt, ps_error.TYPECHECK, forall.__name__)

    proc = ostack.pop()
    collection = ostack.pop()

    if collection.TYPE == ps.T_ARRAY:
        _run_loop(ctxt, list(collection.val), proc, ostack.append)
    else:
        def push_entry(entry):
            key, value = entry
            ostack.append(ps.Name(key, ps.ATTRIB_LIT))
            ostack.append(value)

        _run_loop(ctxt, collection.items(), proc, push_entry)


def loop(ctxt, ostack):
    """
    proc **loop** -


    repeatedly executes proc until proc executes the **exit** operator, at which point
    interpretation resumes after the **loop** operator. If proc never executes **exit**
    (or **quit**), the loop never ends.

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **for**, **repeat**, **forall**, **exit**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 1:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, loop.__name__)
    # 2. TYPECHECK - Check procedure type
    if ostack[-1].TYPE != ps.T_PROC:
        return ps_error.e(ctxt, ps_error.TYPECHECK, loop.__name__)

    proc = ostack.pop()

    def forever():
        while True:
            yield None

    _run_loop(ctxt, forever(), proc)


def ps_exit(ctxt, ostack):
    """
    – **exit** –


    terminates execution of the innermost, dynamically enclosing instance of a looping
    context (**for**, **forall**, **loop** or **repeat**) without regard to lexical
    relationship. Everything the loop body pushed before **exit** stays on the stack.

    **Errors**:     **invalidexit**
    **See Also**:   **loop**, **for**, **forall**, **repeat**
    """
    op = "exit"

    if not ctxt.loop_depth:
        return ps_error.e(ctxt, ps_error.INVALIDEXIT, op)

    raise ps_error.ExitLoop()


def ps_quit(ctxt, ostack):
    """
    – **quit** –

    Requests the end of the session. Execution stops at the next token
    boundary; the driver then leaves its read loop.
    """
    ctxt.quit_requested = True
