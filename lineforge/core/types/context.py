# LineForge - A line-oriented PostScript evaluator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
LineForge Types Context and Execution Infrastructure Module

This module contains the execution state of one evaluator:

- Stack: the operand stack, a list with underflow-checked pops and typed
  numeric helpers
- DictStack: the scope chain (dictionary stack), with define/store/where/
  lookup, begin/end and whole-chain snapshot/replace
- Context: one engine instance - both stacks, the operator registry, the
  scoping mode and the cooperative quit flag

A Context owns its stacks exclusively. Independent sessions need
independent Context objects; nothing here is shared between them.
"""

import math
import random
from typing import Callable, Dict as _Mapping, List, Optional, Union

from .. import error as ps_error
from .base import PSObject
from .constants import (
    D_STACK_MIN, MAX_POSTSCRIPT_INTEGER, MIN_POSTSCRIPT_INTEGER,
    ATTRIB_LIT, T_INT, T_REAL
)
from .primitive import Int, Real
from .composite import Dict, Name


class Stack(list):
    """
    Operand stack. The top is the end of the list.

    Extends Python list so operators can index it directly
    (``ostack[-1]``), and adds the checked accessors every operator relies
    on: pop/peek fail with stackunderflow, the typed pops fail with
    typecheck.
    """

    def push(self, obj: PSObject) -> None:
        self.append(obj)

    def pop(self, index: int = -1) -> PSObject:
        if not self:
            raise ps_error.PSError(ps_error.STACKUNDERFLOW, "pop")
        return super().pop(index)

    def peek(self) -> PSObject:
        if not self:
            raise ps_error.PSError(ps_error.STACKUNDERFLOW, "peek")
        return self[-1]

    def count(self) -> int:
        return len(self)

    def top_down(self) -> List[PSObject]:
        return list(reversed(self))

    def bottom_up(self) -> List[PSObject]:
        return list(self)

    def pop_number(self) -> Union[int, float]:
        obj = self.pop()
        if obj.TYPE not in (T_INT, T_REAL):
            raise ps_error.PSError(ps_error.TYPECHECK, "pop", f"expected number but got {obj}")
        return obj.val

    def pop_int(self) -> int:
        """Pop a number and truncate it to an integer. nan and infinity fail with rangecheck."""
        value = self.pop_number()
        if isinstance(value, float) and not math.isfinite(value):
            raise ps_error.PSError(ps_error.RANGECHECK, "pop", f"cannot truncate {value} to an integer")
        return int(value)

    def pop_two_numbers(self, func: Callable) -> PSObject:
        """
        Pop num2 then num1 and return func(num1, num2) as a value. The result
        is an Integer whenever it is exactly integral and fits in 64 bits,
        whatever the operand types; otherwise it is a Real.
        """
        second = self.pop()
        first = self.pop()
        if first.TYPE not in (T_INT, T_REAL) or second.TYPE not in (T_INT, T_REAL):
            raise ps_error.PSError(ps_error.TYPECHECK, "pop", f"expected numbers but got {first} {second}")
        return make_number(func(first.val, second.val))

    def __str__(self) -> str:
        return "[" + ", ".join(item.__str__() for item in self) + "]"

    def __repr__(self) -> str:
        return self.__str__()


def make_number(result: Union[int, float]) -> PSObject:
    """An Integer if result is integral and within 64 bits, else a Real."""
    if isinstance(result, float):
        if not math.isfinite(result) or result != int(result):
            return Real(result)
        result = int(result)
    if MIN_POSTSCRIPT_INTEGER <= result <= MAX_POSTSCRIPT_INTEGER:
        return Int(result)
    return Real(float(result))


def to_int(ctxt, obj: PSObject, op: str, error_code: int = ps_error.RANGECHECK) -> int:
    """
    Truncate a numeric operand toward zero for use as a count or index.
    A real that is nan or infinite fails with error_code.
    """
    if obj.TYPE == T_REAL and not math.isfinite(obj.val):
        return ps_error.e(ctxt, error_code, op)
    return int(obj.val)


class DictStack(list):
    """
    The scope chain. Index 0 is the system scope (outermost), the last
    element the current scope.

    The two seed scopes are the floor: end() never pops below them.
    """

    def __init__(self, scopes: Optional[List[Dict]] = None) -> None:
        super().__init__(scopes or [Dict(name="systemdict"), Dict(name="userdict")])

    @property
    def current(self) -> Dict:
        return self[-1]

    def begin(self, d: Dict) -> None:
        self.append(d)

    def end(self) -> Dict:
        if len(self) <= D_STACK_MIN:
            raise ps_error.PSError(ps_error.DICTSTACKUNDERFLOW, "end")
        return super().pop()

    def define(self, name: str, value: PSObject) -> None:
        self[-1].put(name, value)

    def store(self, name: str, value: PSObject) -> None:
        d = self.where(name)
        if d is None:
            raise ps_error.PSError(ps_error.UNDEFINED, "store", name)
        d.put(name, value)

    def where(self, name: str) -> Optional[Dict]:
        for d in reversed(self):
            if name in d:
                return d
        return None

    def lookup(self, name: str) -> Optional[PSObject]:
        for d in reversed(self):
            value = d.get(name)
            if value is not None:
                return value
        return None

    def snapshot(self) -> List[Dict]:
        """Independent copies of every scope, bottom first."""
        return [d.copy() for d in self]

    def scopes(self) -> List[Dict]:
        """The live scope objects themselves, bottom first."""
        return list(self)

    def replace_with(self, scopes: List[Dict]) -> None:
        if len(scopes) < D_STACK_MIN:
            raise RuntimeError(f"malformed scope chain: {len(scopes)} scopes")
        self[:] = scopes

    def __str__(self) -> str:
        return "[" + ", ".join(repr(item) for item in self) + "]"


class Context(object):
    """
    One evaluation engine: operand stack, dictionary stack, operator
    registry, scoping mode and quit flag.

    ``lexical`` is fixed at construction. Operators are plain functions
    ``op(ctxt, ostack)`` registered by name; the registry is consulted
    before the dictionary stack on every executable name.
    """

    def __init__(self, system_params: _Mapping, lexical: bool = False) -> None:
        self.system_params = system_params
        self._lexical = lexical

        self.o_stack = Stack()
        self.d_stack = DictStack()

        # native operators, consulted before the dictionary stack
        self._operator_table = {}

        self.quit_requested = False
        self.loop_depth = 0
        self.random_seed = 0
        self.random = random.Random(self.random_seed)
        self.last_error = None

    @property
    def lexical(self) -> bool:
        return self._lexical

    def register_operator(self, name: str, action: Callable) -> None:
        self._operator_table[name] = action
        # make the operator discoverable through where/load/known
        self.d_stack.define(name, Name(name, ATTRIB_LIT))

    def find_operator(self, name: str) -> Optional[Callable]:
        return self._operator_table.get(name)

    def operator_names(self) -> List[str]:
        return sorted(self._operator_table)
