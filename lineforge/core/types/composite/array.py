# LineForge - A line-oriented PostScript evaluator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
LineForge Types Composite Array Module

This module contains the Array type: an ordered, mutable, fixed-length
sequence of values. put/copy overwrite element slots; nothing resizes an
Array after creation.
"""

from typing import List, Optional

from ..base import PSObject, render_once
from ..constants import ATTRIB_LIT, T_ARRAY
from ..primitive import Int, Null


class Array(PSObject):
    TYPE = T_ARRAY

    def __init__(self, elements: Optional[List[PSObject]] = None, attrib: int = ATTRIB_LIT) -> None:
        super().__init__(list(elements) if elements is not None else [], attrib, is_composite=True)

    @classmethod
    def of_length(cls, length: int) -> "Array":
        """A new Array of length elements, all null."""
        return cls([Null() for _ in range(length)])

    @property
    def length(self) -> int:
        return len(self.val)

    def len(self) -> Int:
        return Int(len(self.val))

    def get(self, index: int) -> PSObject:
        return self.val[index]

    def put(self, index: int, value: PSObject) -> None:
        self.val[index] = value

    def __eq__(self, other) -> bool:
        # separate arrays are never equal, even with equal elements
        return self is other

    def __hash__(self):
        return id(self)

    def __str__(self) -> str:
        return render_once(self, lambda: "[" + " ".join(str(item) for item in self.val) + "]", "[...]")

    def __repr__(self) -> str:
        return self.__str__()
