# LineForge - A line-oriented PostScript evaluator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging
from typing import Any

from . import array as ps_array
from . import control_flow as ps_compound
from . import control as ps_control
from ..core import error as ps_error
from . import file as ps_file
from . import math as ps_math
from . import operand_stack as ps_operand_stack
from . import relational as ps_rel_bool_bitwise
from . import string as ps_string
from . import type_convert as ps_type_attrib_conv
from ..core import types as ps

logger = logging.getLogger(__name__)


def init_dictionaries(ctxt) -> None:
    """
    Seed the two floor scopes of a fresh context: the constants go into
    systemdict, every operator is registered (which also binds its name in
    userdict).
    """
    system_dict = ctxt.d_stack[0]
    add_to_dict(system_dict, "true", ps.Bool, True)
    add_to_dict(system_dict, "false", ps.Bool, False)
    add_to_dict(system_dict, "null", ps.Null, None)

    for name, action in create_operator_table():
        ctxt.register_operator(name, action)

    logger.debug("registered %d operators", len(ctxt.operator_names()))


def add_to_dict(d, name: str, the_type: Any, val) -> None:
    d.put(name, the_type(val))


def create_operator_table() -> list:
    return [
        # array operators
        ("aload", ps_array.aload),
        ("array", ps_array.array),
        ("astore", ps_array.astore),
        # compound operators
        ("copy", ps_compound.ps_copy),
        ("length", ps_compound.length),
        ("get", ps_compound.get),
        ("getinterval", ps_compound.getinterval),
        ("put", ps_compound.put),
        # control operators
        ("exec", ps_control.ps_exec),
        ("exit", ps_control.ps_exit),
        ("for", ps_control.ps_for),
        ("forall", ps_control.forall),
        ("if", ps_control.ps_if),
        ("ifelse", ps_control.ifelse),
        ("loop", ps_control.loop),
        ("quit", ps_control.ps_quit),
        ("repeat", ps_control.repeat),
        # dictionary operators
        ("begin", begin),
        ("countdictstack", countdictstack),
        ("currentdict", currentdict),
        ("def", ps_def),
        ("dict", ps_dict),
        ("end", end),
        ("known", known),
        ("load", load),
        ("store", store),
        ("undef", undef),
        ("where", where),
        # output operators
        ("=", ps_file.equals),
        ("==", ps_file.equals_equals),
        ("print", ps_file.ps_print),
        ("pstack", ps_file.pstack),
        ("stack", ps_file.stack),
        # math operators
        ("abs", ps_math.ps_abs),
        ("add", ps_math.add),
        ("atan", ps_math.atan),
        ("ceiling", ps_math.ceiling),
        ("cos", ps_math.cos),
        ("div", ps_math.div),
        ("floor", ps_math.floor),
        ("idiv", ps_math.idiv),
        ("mod", ps_math.mod),
        ("mul", ps_math.mul),
        ("neg", ps_math.neg),
        ("rand", ps_math.rand),
        ("round", ps_math.ps_round),
        ("rrand", ps_math.rrand),
        ("sin", ps_math.sin),
        ("sqrt", ps_math.sqrt),
        ("srand", ps_math.srand),
        ("sub", ps_math.sub),
        # operand stack operators
        ("clear", ps_operand_stack.clear),
        ("cleartomark", ps_operand_stack.cleartomark),
        ("count", ps_operand_stack.count),
        ("counttomark", ps_operand_stack.counttomark),
        ("dup", ps_operand_stack.dup),
        ("exch", ps_operand_stack.exch),
        ("index", ps_operand_stack.index),
        ("mark", ps_operand_stack.ps_mark),
        ("pop", ps_operand_stack.pop),
        ("roll", ps_operand_stack.roll),
        # relational, boolean and bitwise operators
        ("and", ps_rel_bool_bitwise.ps_and),
        ("eq", ps_rel_bool_bitwise.eq),
        ("ge", ps_rel_bool_bitwise.ge),
        ("gt", ps_rel_bool_bitwise.gt),
        ("le", ps_rel_bool_bitwise.le),
        ("lt", ps_rel_bool_bitwise.lt),
        ("ne", ps_rel_bool_bitwise.ne),
        ("not", ps_rel_bool_bitwise.ps_not),
        ("or", ps_rel_bool_bitwise.ps_or),
        ("xor", ps_rel_bool_bitwise.xor),
        # string operators
        ("string", ps_string.string),
        # type, attribute and conversion operators
        ("cvi", ps_type_attrib_conv.cvi),
        ("cvlit", ps_type_attrib_conv.cvlit),
        ("cvr", ps_type_attrib_conv.cvr),
        ("cvs", ps_type_attrib_conv.cvs),
        ("cvx", ps_type_attrib_conv.cvx),
        ("readonly", ps_type_attrib_conv.readonly),
        ("type", ps_type_attrib_conv.ps_type),
        ("xcheck", ps_type_attrib_conv.xcheck),
    ]


def _key(ctxt, obj, op, literal_only=False):
    """
    Dictionary key text for a name or string operand. With literal_only, an
    executable name (one made with cvx) is a typecheck.
    """
    if obj.TYPE not in (ps.T_NAME, ps.T_STRING):
        return ps_error.e(ctxt, ps_error.TYPECHECK, op)
    if literal_only and obj.TYPE == ps.T_NAME and obj.executable:
        return ps_error.e(ctxt, ps_error.TYPECHECK, op)
    return obj.val


def begin(ctxt, ostack):
    """
    dict **begin** –


    pushes dict on the dictionary stack, making it the current dictionary and installing
    it as the first of the dictionaries consulted during implicit name lookup and by
    **def**, **load**, **store**, and **where**.

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **end**, **countdictstack**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 1:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, begin.__name__)
    # 2. TYPECHECK - Check operand type
    if ostack[-1].TYPE != ps.T_DICT:
        return ps_error.e(ctxt, ps_error.TYPECHECK, begin.__name__)

    ctxt.d_stack.begin(ostack.pop())


def countdictstack(ctxt, ostack):
    """
    – **countdictstack** int


    counts the number of dictionaries currently on the dictionary stack and pushes
    this count on the operand stack.

    **Errors**:     **none**
    **See Also**:   **begin**, **end**
    """

    ostack.append(ps.Int(len(ctxt.d_stack)))


def currentdict(ctxt, ostack):
    """
    – **currentdict** dict


    pushes the current dictionary (the dictionary on the top of the dictionary stack)
    on the operand stack. **currentdict** does not pop the dictionary stack; the pushed
    object is the same dictionary, not a copy.

    **Errors**:     **none**
    **See Also**:   **begin**
    """

    ostack.append(ctxt.d_stack.current)


def ps_def(ctxt, ostack):
    """
    key value **def** –


    associates key with value in the current dictionary, the one on the top of the
    dictionary stack. If key is already present in the current dictionary, **def** simply
    replaces its value; otherwise, **def** creates a new entry for key and stores value
    with it.

    When the context uses lexical scoping and value is a procedure, the procedure
    that gets stored carries a snapshot of the dictionary stack as it is at this
    moment (before key is bound). Names used inside it resolve against that snapshot
    whenever it is invoked by name.

    **Examples**
        /ncnt 1 **def**             % Define ncnt to be 1 in current dict
        /ncnt ncnt 1 add **def**    % ncnt now has value 2

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **store**, **put**
    """
    op = "def"

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 2:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, op)
    # 2. TYPECHECK - Check key type
    key = _key(ctxt, ostack[-2], op, literal_only=True)

    value = ostack[-1]
    if ctxt.lexical and value.TYPE == ps.T_PROC:
        value = ps.Procedure(value.lines, ctxt.d_stack.snapshot())
        logger.debug("captured %d scopes for /%s", len(value.lexical_env), key)

    ctxt.d_stack.define(key, value)

    ostack.pop()
    ostack.pop()


def ps_dict(ctxt, ostack):
    """
    int **dict** **dict**


    creates an empty dictionary and pushes it on the operand stack. int is expected to
    be a nonnegative integer; it is accepted as a capacity hint only, the dictionary
    grows as entries are added.

    **Errors**:     **rangecheck**, **stackunderflow**, **typecheck**
    **See Also**:   **begin**, **def**
    """
    op = "dict"

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 1:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, op)
    # 2. TYPECHECK - Check operand type
    if ostack[-1].TYPE != ps.T_INT:
        return ps_error.e(ctxt, ps_error.TYPECHECK, op)
    # 3. RANGECHECK - Check value
    if ostack[-1].val < 0:
        return ps_error.e(ctxt, ps_error.RANGECHECK, op)

    ostack[-1] = ps.Dict()


def end(ctxt, ostack):
    """
    – **end** –


    pops the current dictionary off the dictionary stack, making the dictionary below
    it the current dictionary. The two permanent entries (systemdict and userdict)
    are never popped.

    **Errors**:     **dictstackunderflow**
    **See Also**:   **begin**, **countdictstack**
    """

    if len(ctxt.d_stack) <= ps.D_STACK_MIN:
        return ps_error.e(ctxt, ps_error.DICTSTACKUNDERFLOW, end.__name__)

    ctxt.d_stack.end()


def known(ctxt, ostack):
    """
    dict key **known** bool


    returns true if there is an entry in the dictionary dict whose key is key; otherwise,
    it returns false.

    **Example**
        /mydict 5 dict def
        mydict /total 0 put
        mydict /total **known**     -> true
        mydict /badname **known**   -> false

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **where**, **load**, **get**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 2:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, known.__name__)
    # 2. TYPECHECK - Check operand types (dict key)
    if ostack[-2].TYPE != ps.T_DICT:
        return ps_error.e(ctxt, ps_error.TYPECHECK, known.__name__)
    key = _key(ctxt, ostack[-1], known.__name__)

    ostack.pop()
    ostack[-1] = ps.Bool(key in ostack[-1])


def load(ctxt, ostack):
    """
    key **load** value


    searches for key in each dictionary on the dictionary stack, starting with the
    topmost (current) dictionary. If key is found in some dictionary, **load** pushes the
    associated value on the operand stack; otherwise, an **undefined** error occurs.

    **load** looks up key the same way the interpreter looks up executable names that
    it encounters during execution. However, **load** always pushes the associated value
    on the operand stack; it never executes that value.

    **Errors**:     **stackunderflow**, **typecheck**, **undefined**
    **See Also**:   **where**, **get**, **store**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 1:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, load.__name__)
    # 2. TYPECHECK - Check key type
    key = _key(ctxt, ostack[-1], load.__name__)

    value = ctxt.d_stack.lookup(key)
    if value is None:
        return ps_error.e(ctxt, ps_error.UNDEFINED, load.__name__, key)

    ostack[-1] = value


def store(ctxt, ostack):
    """
    key value **store** –


    searches for key in each dictionary on the dictionary stack, starting with the
    topmost (current) dictionary. If key is found in some dictionary, **store** replaces its
    value by the value operand; otherwise, an **undefined** error occurs. Unlike **def**,
    **store** never creates a new entry.

    **Errors**:     **stackunderflow**, **typecheck**, **undefined**
    **See Also**:   **def**, **put**, **where**, **load**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 2:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, store.__name__)
    # 2. TYPECHECK - Check key type
    key = _key(ctxt, ostack[-2], store.__name__, literal_only=True)

    d = ctxt.d_stack.where(key)
    if d is None:
        return ps_error.e(ctxt, ps_error.UNDEFINED, store.__name__, key)

    d.put(key, ostack.pop())
    ostack.pop()


def undef(ctxt, ostack):
    """
    dict key **undef** –


    removes key and its associated value from the dictionary dict. dict does not need to
    be on the dictionary stack. No error occurs if key is not present in dict.

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **def**, **known**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 2:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, undef.__name__)
    # 2. TYPECHECK - Check operand types (dict key)
    if ostack[-2].TYPE != ps.T_DICT:
        return ps_error.e(ctxt, ps_error.TYPECHECK, undef.__name__)
    key = _key(ctxt, ostack[-1], undef.__name__)

    ostack.pop()
    ostack.pop().undef(key)


def where(ctxt, ostack):
    """
    key **where** dict true (if found)
              false (if not found)


    determines which dictionary on the dictionary stack, if any, contains an entry
    whose key is key. **where** searches for key in each dictionary on the dictionary
    stack, starting with the topmost (current) dictionary. If key is found in some
    dictionary, **where** returns that dictionary object and the boolean value true;
    otherwise, **where** simply returns false.

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **known**, **load**, **get**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 1:
        return ps_error.e(ctxt, ps_error.STACKUNDERFLOW, where.__name__)
    # 2. TYPECHECK - Check key type
    key = _key(ctxt, ostack[-1], where.__name__, literal_only=True)

    d = ctxt.d_stack.where(key)
    if d is None:
        ostack[-1] = ps.Bool(False)
    else:
        ostack[-1] = d
        ostack.append(ps.Bool(True))
