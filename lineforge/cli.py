# LineForge - A line-oriented PostScript evaluator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
LineForge command line entry point.

Usage:
    lineforge                       interactive session, dynamic scoping
    lineforge --lexical             interactive session, lexical scoping
    lineforge job1.ps job2.ps       run each file as a batch job
    cat job.ps | lineforge -        run standard input as a batch job
"""

import logging
import sys

from .cli_args import apply_arguments, build_argument_parser
from .cli_runner import run
from .core.context_init import init_system_params


def main(argv=None) -> int:
    """
    Main entry point for the LineForge evaluator.

    Returns:
        Exit code: 0 for success, 1 for error, 130 when interrupted
    """

    parser = build_argument_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    system_params = apply_arguments(args, init_system_params())

    try:
        return run(system_params, args.inputfiles)
    except KeyboardInterrupt:
        print()
        return 130


if __name__ == "__main__":
    sys.exit(main())
