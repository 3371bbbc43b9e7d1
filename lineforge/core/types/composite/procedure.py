# LineForge - A line-oriented PostScript evaluator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
LineForge Types Composite Procedure Module

This module contains the Procedure type. A Procedure keeps its body as the
unparsed token lines it was read from; the engine re-parses them on every
run, so a bare word inside a body always means whatever it resolves to at
that moment.

Under lexical scoping, ``def`` attaches a captured environment: an
independent list of Dict copies taken from the dictionary stack at
definition time. The captured list is never written to. Each lexical
invocation runs on fresh copies of it.
"""

from typing import List, Optional

from ..base import PSObject
from ..constants import ATTRIB_EXEC, T_PROC
from ..primitive import Int
from .dict import Dict


class Procedure(PSObject):
    TYPE = T_PROC

    def __init__(self, lines: List[str], lexical_env: Optional[List[Dict]] = None) -> None:
        super().__init__(tuple(lines), ATTRIB_EXEC, is_composite=True)
        self._lexical_env = None
        if lexical_env is not None:
            self.capture(lexical_env)

    @property
    def lines(self) -> tuple:
        return self.val

    @property
    def lexical_env(self) -> Optional[tuple]:
        return self._lexical_env

    def capture(self, env: List[Dict]) -> None:
        """Attach a captured scope-chain snapshot (bottom first)."""
        self._lexical_env = tuple(env)

    def len(self) -> Int:
        return Int(len(self.val))

    def __eq__(self, other) -> bool:
        return self is other

    def __hash__(self):
        return id(self)

    def __str__(self) -> str:
        return "{ " + " ".join(self.val) + " }"

    def __repr__(self) -> str:
        return self.__str__()
