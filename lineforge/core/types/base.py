# LineForge - A line-oriented PostScript evaluator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
LineForge Types Base Classes Module

This module contains the base class shared by every runtime value. Concrete
types set ``TYPE`` and keep their payload in ``val``.
"""

from typing import Any, Callable

from .constants import (
    ATTRIB_LIT,
    T_ARRAY, T_BOOL, T_DICT, T_INT, T_MARK, T_NAME, T_NULL, T_PROC, T_REAL, T_STRING
)

# names reported by the type operator
TYPE_NAMES = {
    T_ARRAY: "arraytype",
    T_BOOL: "booleantype",
    T_DICT: "dicttype",
    T_INT: "integertype",
    T_MARK: "marktype",
    T_NAME: "nametype",
    T_NULL: "nulltype",
    T_PROC: "proceduretype",
    T_REAL: "realtype",
    T_STRING: "stringtype",
}


# ids of the composites whose rendering is in progress
_rendering = set()


def render_once(obj: "PSObject", render: Callable[[], str], marker: str) -> str:
    """
    Render a composite that may contain itself. While obj is being rendered,
    any nested occurrence of it renders as marker instead of recursing.
    """
    key = id(obj)
    if key in _rendering:
        return marker
    _rendering.add(key)
    try:
        return render()
    finally:
        _rendering.discard(key)


class PSObject(object):
    """
    Base class for all LineForge runtime values.

    Holds the payload (``val``), the literal/executable attribute and
    whether the value is composite (shared by reference when copied onto
    the stack or into a dictionary).
    """
    TYPE = None  # Base class - no specific type

    def __init__(
        self,
        val: Any,
        attrib: int = ATTRIB_LIT,
        is_composite: bool = False,
    ) -> None:
        self.val = val
        self.attrib = attrib
        self.is_composite = is_composite

    def __copy__(self):
        """Shallow copy - composite payloads stay shared."""
        new_obj = self.__class__.__new__(self.__class__)
        new_obj.__dict__.update(self.__dict__)
        return new_obj

    def type_name(self) -> str:
        return TYPE_NAMES.get(self.TYPE, "unknowntype")
