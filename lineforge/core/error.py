# LineForge - A line-oriented PostScript evaluator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

# error types
DICTSTACKUNDERFLOW = 0
INVALIDACCESS = 1
INVALIDEXIT = 2
RANGECHECK = 3
STACKUNDERFLOW = 4
SYNTAXERROR = 5
TYPECHECK = 6
UNDEFINED = 7
UNDEFINEDRESULT = 8
UNMATCHEDMARK = 9

error_names = [
    "dictstackunderflow",
    "invalidaccess",
    "invalidexit",
    "rangecheck",
    "stackunderflow",
    "syntaxerror",
    "typecheck",
    "undefined",
    "undefinedresult",
    "unmatchedmark",
]


class PSError(Exception):
    """
    The single tagged failure raised by the engine and the operator library.

    ``name`` is the short reason code (``stackunderflow``, ``typecheck``...)
    and ``command`` the operator or name that failed.
    """

    def __init__(self, code: int, command: str = "", detail: str = "") -> None:
        self.code = code
        self.name = error_names[code]
        self.command = command
        self.detail = detail
        super().__init__(str(self))

    def __str__(self) -> str:
        text = f"/{self.name}"
        if self.command:
            text += f" in --{self.command}--"
        if self.detail:
            text += f": {self.detail}"
        return text


class ExitLoop(Exception):
    """Raised by exit; caught by the innermost loop, repeat, for or forall."""


def e(ctxt, error_code: int, func_name: str, detail: str = "") -> None:
    if func_name.startswith("ps_"):
        func_name = func_name[3:]

    err = PSError(error_code, func_name, detail)
    if ctxt is not None:
        ctxt.last_error = err
    logger.debug("raising %s", err)
    raise err
