# LineForge - A line-oriented PostScript evaluator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
LineForge Types Package - Public API

This package provides the unified types interface for the LineForge
evaluator. All runtime value types, constants and the execution context are
available through this single namespace to support the standard import
pattern: `from ..core import types as ps`

**Internal Module Organization:**
- constants.py: type tags, attribute flags, limits and type groupings
- base.py: the PSObject base class
- primitive.py: Bool, Null, Int, Real, Mark
- composite/: String, Name, Array, Dict, Procedure
- context.py: Stack (operand stack), DictStack (scope chain), Context

**Usage:**
```python
from ..core import types as ps

ctxt = ps.Context(system_params)
ctxt.o_stack.push(ps.Int(3))
proc = ps.Procedure(["x", "1", "add"])
```
"""

from .constants import *
from .base import *
from .primitive import *
from .composite import *
from .context import *
