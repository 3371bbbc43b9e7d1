# LineForge - A line-oriented PostScript evaluator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
LineForge Types Composite Dict Module

This module contains the Dict type: a mapping from name text to value, used
both as a data value and as one scope of the dictionary stack. Keys are the
plain text of a Name (no leading ``/``).
"""

from typing import Dict as _Mapping, Iterator, Optional, Tuple

from ..base import PSObject, render_once
from ..constants import ATTRIB_LIT, T_DICT
from ..primitive import Int


class Dict(PSObject):
    TYPE = T_DICT

    def __init__(
        self,
        d: Optional[_Mapping[str, PSObject]] = None,
        name: str = "dictionary",
        attrib: int = ATTRIB_LIT,
    ) -> None:
        super().__init__(d if d is not None else {}, attrib, is_composite=True)
        self.name = name

    def __getitem__(self, item: str) -> PSObject:
        return self.val[item]

    def __contains__(self, item: str) -> bool:
        return item in self.val

    def get(self, key: str) -> Optional[PSObject]:
        return self.val.get(key)

    def put(self, key: str, value: PSObject) -> None:
        self.val[key] = value

    def undef(self, key: str) -> None:
        self.val.pop(key, None)

    def items(self) -> Iterator[Tuple[str, PSObject]]:
        return iter(list(self.val.items()))

    def copy(self) -> "Dict":
        """
        Independent copy of the bindings. The mapping is new; the values it
        holds are the same objects.
        """
        return Dict(dict(self.val), self.name, self.attrib)

    def len(self) -> Int:
        return Int(len(self.val))

    def __eq__(self, other) -> bool:
        return self is other

    def __hash__(self):
        return id(self)

    def __str__(self) -> str:
        return render_once(
            self, lambda: "<<" + ", ".join(f"{key} -> {val}" for key, val in self.val.items()) + ">>", "<<...>>"
        )

    def __repr__(self) -> str:
        return f"<<{self.name}>>"
