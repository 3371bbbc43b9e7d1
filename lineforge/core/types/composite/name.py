# LineForge - A line-oriented PostScript evaluator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
LineForge Types Composite Name Module

This module contains the Name type. A Name is a text identifier plus an
executable flag: literal names (``/foo``) are pushed as data, executable
names (``foo``) are looked up and invoked. The flag is fixed at
construction; cvx/cvlit build a new Name instead of flipping it.
"""

from ..base import PSObject
from ..constants import ATTRIB_LIT, ATTRIB_EXEC, T_NAME, T_STRING
from ..primitive import Int


class Name(PSObject):
    TYPE = T_NAME

    def __init__(self, name: str, attrib: int = ATTRIB_LIT) -> None:
        super().__init__(name, attrib)
        # Cache hash since Name.val is immutable
        self._hash = hash(name)

    @property
    def executable(self) -> bool:
        return self.attrib == ATTRIB_EXEC

    def __setattr__(self, key, value):
        if key == "attrib" and "attrib" in self.__dict__:
            raise AttributeError("the executable flag of a Name cannot change")
        super().__setattr__(key, value)

    def __hash__(self):
        return self._hash

    def __eq__(self, other) -> bool:
        other_type = getattr(other, "TYPE", None)
        if other_type == T_NAME or other_type == T_STRING:
            return self.val == other.val
        if isinstance(other, str):
            return self.val == other
        return False

    def len(self) -> Int:
        return Int(len(self.val))

    def __str__(self) -> str:
        return self.val if self.attrib == ATTRIB_EXEC else f"/{self.val}"

    def __repr__(self) -> str:
        return self.__str__()
