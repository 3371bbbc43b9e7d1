# LineForge - A line-oriented PostScript evaluator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
LineForge Types Composite String Module

This module contains the String type: a mutable character buffer with a
mutability flag. Strings are composite, so every stack slot or dictionary
entry holding the same String object sees in-place writes made through any
of them.
"""

from ..base import PSObject
from ..constants import ATTRIB_LIT, T_NAME, T_STRING
from ..primitive import Int


class String(PSObject):
    TYPE = T_STRING

    def __init__(self, chars: str = "", mutable: bool = True, attrib: int = ATTRIB_LIT) -> None:
        super().__init__(chars, attrib, is_composite=True)
        self.mutable = mutable

    @property
    def length(self) -> int:
        return len(self.val)

    def len(self) -> Int:
        return Int(len(self.val))

    def python_string(self) -> str:
        return self.val

    def get(self, index: int) -> Int:
        """Character code at index. Caller checks bounds."""
        return Int(ord(self.val[index]))

    def put(self, index: int, code: int) -> None:
        """
        Overwrite one character in place. Caller checks mutability and bounds;
        the buffer object itself is replaced, the String identity is kept so
        aliases see the change.
        """
        self.val = self.val[:index] + chr(code) + self.val[index + 1:]

    def __eq__(self, other) -> bool:
        # Strings compare by content, and equal a Name with the same text
        other_type = getattr(other, "TYPE", None)
        if other_type == T_STRING or other_type == T_NAME:
            return self.val == other.val
        return False

    def __hash__(self):
        return id(self)

    def __str__(self) -> str:
        return f"({self.val})"

    def __repr__(self) -> str:
        return self.__str__()
