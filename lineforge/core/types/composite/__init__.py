# LineForge - A line-oriented PostScript evaluator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
LineForge Types Composite Sub-Package

This sub-package contains the composite value types, one per module:

- string.py: String - mutable character buffer with a mutability flag
- name.py: Name - identifier with a fixed executable flag
- array.py: Array - fixed-length sequence of values
- dict.py: Dict - name to value mapping, also used as a scope
- procedure.py: Procedure - deferred token lines plus optional captured environment

All classes are re-exported to the main types package, so the standard
import pattern ``from ..core import types as ps`` reaches them as
``ps.String``, ``ps.Name`` and so on.
"""

from .string import String
from .name import Name
from .array import Array
from .dict import Dict
from .procedure import Procedure

__all__ = [
    'String',
    'Name',
    'Array',
    'Dict',
    'Procedure',
]
