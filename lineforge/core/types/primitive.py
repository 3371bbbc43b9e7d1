# LineForge - A line-oriented PostScript evaluator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
LineForge Types Primitive Classes Module

This module contains the simple atomic value types. They are immutable and
compare by value.
"""

import math

from .base import PSObject
from .constants import (
    ATTRIB_LIT,
    T_BOOL, T_NULL, T_INT, T_REAL, T_MARK
)


class Bool(PSObject):
    """Boolean value - true/false."""
    TYPE = T_BOOL

    def __init__(self, val: bool) -> None:
        super().__init__(bool(val))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Bool):
            return False
        return self.val == other.val

    def __hash__(self):
        return hash(self.val)

    def __str__(self) -> str:
        return str(self.val).lower()

    def __repr__(self) -> str:
        return self.__str__()


class Null(PSObject):
    """Null value - the empty/absent value."""
    TYPE = T_NULL

    def __init__(self, val: None = None) -> None:
        super().__init__(None)

    def __eq__(self, other) -> bool:
        return isinstance(other, Null)

    def __hash__(self):
        return hash(None)

    def __str__(self) -> str:
        return "null"

    def __repr__(self) -> str:
        return self.__str__()


class Int(PSObject):
    """Integer value - 64-bit signed whole number."""
    TYPE = T_INT

    def __init__(self, val: int) -> None:
        super().__init__(int(val))

    def __eq__(self, other) -> bool:
        if not isinstance(other, (Int, Real)):
            return False
        # an integer and a real representing the same value are equal
        return self.val == other.val

    def __hash__(self):
        return hash(self.val)

    def __str__(self) -> str:
        return str(self.val)

    def __repr__(self) -> str:
        return self.__str__()


class Real(PSObject):
    """Real value - 64-bit floating point number."""
    TYPE = T_REAL

    def __init__(self, val: float) -> None:
        super().__init__(float(val))

    def __eq__(self, other) -> bool:
        if not isinstance(other, (Int, Real)):
            return False
        return self.val == other.val

    def __hash__(self):
        return hash(self.val)

    def __str__(self) -> str:
        # integral reals print without the trailing .0
        if math.isfinite(self.val) and self.val == int(self.val):
            return str(int(self.val))
        return repr(self.val)

    def __repr__(self) -> str:
        return self.__str__()


class Mark(PSObject):
    """Stack marker pushed by mark and consumed by cleartomark/counttomark."""
    TYPE = T_MARK

    def __init__(self, attrib: int = ATTRIB_LIT) -> None:
        super().__init__(None, attrib=attrib)

    def __eq__(self, other) -> bool:
        return isinstance(other, Mark)

    def __hash__(self):
        return hash(T_MARK)

    def __str__(self) -> str:
        return "-mark-"

    def __repr__(self) -> str:
        return self.__str__()
