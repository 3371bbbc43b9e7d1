# LineForge - A line-oriented PostScript evaluator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Line reader.

Turns raw input lines into runtime values, one token per line:

    (text)      -> String (mutable)
    /name       -> literal Name
    true false  -> Bool
    123  -7     -> Int (out of 64-bit range becomes Real)
    16#FF       -> Int in the given radix (2 through 36)
    1.5  2e3    -> Real
    {  ...  }   -> Procedure; '{' and '}' each alone on a line
    % ...       -> comment, no token
    anything    -> executable Name

Procedure bodies are collected verbatim, nested braces included, and are
parsed again each time the procedure runs.
"""

from __future__ import annotations

import re
from typing import List

from . import error as ps_error
from . import types as ps

L_CRLY_BRACKET = "{"
R_CRLY_BRACKET = "}"
L_PAREN = "("
R_PAREN = ")"
SOLIDUS = "/"
PERCENT = "%"

_INT_RE = re.compile(r"^[+-]?\d+$")
_REAL_RE = re.compile(r"^[+-]?(\d+\.\d*|\.\d+|\d+)([eE][+-]?\d+)?$")
_RADIX_RE = re.compile(r"^(\d+)#([0-9A-Za-z]+)$")


def parse_token(text: str) -> ps.PSObject:
    """Convert one trimmed, non-structural line into a value."""

    # strings (single line)
    if len(text) >= 2 and text.startswith(L_PAREN) and text.endswith(R_PAREN):
        return ps.String(text[1:-1])

    # literal name
    if text.startswith(SOLIDUS):
        return ps.Name(text[1:], ps.ATTRIB_LIT)

    if text == "true":
        return ps.Bool(True)
    if text == "false":
        return ps.Bool(False)

    if _INT_RE.match(text):
        int_val = int(text)
        # too large for an integer: it becomes a real
        if int_val < ps.MIN_POSTSCRIPT_INTEGER or int_val > ps.MAX_POSTSCRIPT_INTEGER:
            return ps.Real(float(int_val))
        return ps.Int(int_val)

    m = _RADIX_RE.match(text)
    if m:
        base = int(m.group(1))
        if 2 <= base <= 36:
            try:
                value = int(m.group(2), base)
            except ValueError:
                pass
            else:
                if value <= ps.MAX_POSTSCRIPT_INTEGER:
                    return ps.Int(value)

    if _REAL_RE.match(text):
        return ps.Real(float(text))

    # all else failed, it must be an executable name
    return ps.Name(text, ps.ATTRIB_EXEC)


class LineReader(object):
    """
    Stateful line reader. Brace depth is tracked across calls, so a
    procedure may span any number of feed() calls; values come out only
    once fully assembled.
    """

    def __init__(self) -> None:
        self._depth = 0
        self._buffer: List[str] = []

    @property
    def pending(self) -> bool:
        """True while inside an unfinished procedure body."""
        return self._depth > 0

    def reset(self) -> None:
        self._depth = 0
        self._buffer = []

    def feed(self, line: str) -> List[ps.PSObject]:
        """Parse one line; returns zero or one values."""
        text = line.strip()
        if not text:
            return []

        if self._depth:
            if text == L_CRLY_BRACKET:
                self._depth += 1
            elif text == R_CRLY_BRACKET:
                self._depth -= 1
                if not self._depth:
                    lines = self._buffer
                    self._buffer = []
                    return [ps.Procedure(lines)]
            self._buffer.append(text)
            return []

        if text.startswith(PERCENT):
            return []

        if text == L_CRLY_BRACKET:
            self._depth = 1
            self._buffer = []
            return []

        if text == R_CRLY_BRACKET:
            raise ps_error.PSError(ps_error.SYNTAXERROR, "}", "unmatched closing brace")

        return [parse_token(text)]

    def finish(self, command: str = "") -> None:
        """Fail if input ended in the middle of a procedure body."""
        if self._depth:
            self.reset()
            raise ps_error.PSError(ps_error.SYNTAXERROR, command, "unterminated procedure")


def parse_lines(lines) -> List[ps.PSObject]:
    """Parse a complete sequence of lines into values."""
    reader = LineReader()
    values = []
    for line in lines:
        values.extend(reader.feed(line))
    reader.finish()
    return values
