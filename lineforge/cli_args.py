# LineForge - A line-oriented PostScript evaluator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
CLI argument parsing for LineForge.

Handles command-line argument definition and maps parsed arguments onto
the system parameters dictionary.
"""

from __future__ import annotations

import argparse
from typing import Any, Dict

from .core.context_init import PRODUCT, VERSION


def build_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the LineForge argument parser.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="lineforge",
        description="LineForge - a line-oriented PostScript evaluator",
        epilog="If no input file is provided, LineForge will run in interactive mode.",
    )

    parser.add_argument(
        "-V", "--version", action="version",
        version=f"{PRODUCT} {VERSION}"
    )
    parser.add_argument(
        "inputfiles", nargs="*",
        help="input files to process, one token per line (each as separate job; - reads stdin)"
    )

    scoping = parser.add_mutually_exclusive_group()
    scoping.add_argument(
        "--lexical", dest="lexical", action="store_true", default=None,
        help="resolve names inside procedures against their definition-time scopes"
    )
    scoping.add_argument(
        "--dynamic", dest="lexical", action="store_false",
        help="resolve names inside procedures at call time (default)"
    )

    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Do not print the interactive banner"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose (debug) logging"
    )

    return parser


def apply_arguments(args: argparse.Namespace, system_params: Dict[str, Any]) -> Dict[str, Any]:
    """Copy the command-line settings into system_params and return it."""
    if args.lexical is not None:
        system_params["Lexical"] = args.lexical
    if args.quiet:
        system_params["Banner"] = False
    return system_params
