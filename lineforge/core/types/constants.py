# LineForge - A line-oriented PostScript evaluator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
LineForge Types Constants Module

This module contains the constants used throughout the LineForge evaluator:
type tags for every runtime value, attribute flags, numeric limits and the
grouping sets used for fast type checks.
"""

# Dictionary stack floor: the system scope and the user scope are never popped
D_STACK_MIN = 2

# Integer limits (64-bit signed)
MIN_POSTSCRIPT_INTEGER = -9223372036854775808
MAX_POSTSCRIPT_INTEGER = 9223372036854775807

# Upper bound (exclusive) of values produced by rand
RAND_MAX = 2147483647

# attribute types
ATTRIB_LIT = 0
ATTRIB_EXEC = 1

# PSObject types
T_ARRAY = 0
T_BOOL = 1
T_DICT = 2
T_INT = 3
T_MARK = 4
T_NAME = 5
T_NULL = 6
T_PROC = 7
T_REAL = 8
T_STRING = 9

# Type grouping constants for fast type checking
# For single types, use direct comparison: obj.TYPE == T_XXX
NUMERIC_TYPES = frozenset({T_INT, T_REAL})
COMPOSITE_TYPES = frozenset({T_ARRAY, T_DICT, T_STRING, T_PROC})

# Values eval_token pushes unchanged (procedures are data until invoked)
LITERAL_TYPES = frozenset({T_INT, T_REAL, T_BOOL, T_STRING, T_ARRAY, T_DICT, T_PROC})
