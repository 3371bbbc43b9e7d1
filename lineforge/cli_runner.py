# LineForge - A line-oriented PostScript evaluator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
LineForge execution logic.

Handles job execution (batch and interactive modes) and the main run loop
that ties context initialization to evaluation. This is the only place
where evaluation failures are turned into user-visible messages: a failing
line is reported and the session carries on with the next one.
"""

import logging
import sys
import traceback

from .core import error as ps_error
from .core import tokenizer as ps_token
from .core import types as ps
from .core.context_init import create_context
from .operators import control as ps_control

logger = logging.getLogger(__name__)


class FatalError(Exception):
    """The session cannot continue (host stack exhaustion)."""


def execute_line(ctxt: ps.Context, reader: ps_token.LineReader, line: str) -> bool:
    """
    Feed one input line through the reader and evaluate whatever it yields.

    Returns False if the line failed. Engine errors and unexpected Python
    exceptions are reported on stdout; RecursionError is re-raised as
    FatalError.
    """
    try:
        for token in reader.feed(line):
            ps_control.eval_token(ctxt, token)
            if ctxt.quit_requested:
                break
        return True
    except ps_error.PSError as e:
        print(f"Error: {e}")
        return False
    except RecursionError as e:
        raise FatalError("recursion too deep, host stack exhausted") from e
    except Exception as e:
        print(f"Unexpected error: {e}")
        print("Full traceback:")
        traceback.print_exc(file=sys.stdout)
        return False


def finish_input(reader: ps_token.LineReader, source: str) -> bool:
    """Report an unterminated procedure body at the end of an input source."""
    try:
        reader.finish(source)
        return True
    except ps_error.PSError as e:
        print(f"Error: {e}")
        return False


def run_lines(ctxt: ps.Context, lines, source: str = "") -> int:
    """
    Evaluate every line of one job. Returns the number of lines that failed.
    Stops early once quit has been requested.
    """
    reader = ps_token.LineReader()
    failures = 0
    for line in lines:
        if not execute_line(ctxt, reader, line):
            failures += 1
        if ctxt.quit_requested:
            return failures
    if not finish_input(reader, source):
        failures += 1
    return failures


def _run_batch_jobs(ctxt: ps.Context, inputfiles) -> int:
    """Execute input files as batch jobs, in order, on one context.

    Args:
        ctxt: Evaluation context shared by every job.
        inputfiles: List of input file paths; "-" reads standard input.

    Returns:
        0 if every file could be read, 1 otherwise.
    """
    exit_code = 0
    for i, inputfile in enumerate(inputfiles):
        display_name = "<stdin>" if inputfile == "-" else inputfile
        logger.info("processing job %d/%d: %s", i + 1, len(inputfiles), display_name)

        if inputfile == "-":
            lines = sys.stdin.read().splitlines()
        else:
            try:
                with open(inputfile, "r", encoding="utf-8") as f:
                    lines = f.read().splitlines()
            except OSError as e:
                print(f"{ctxt.system_params['Product']} Error: cannot read '{inputfile}': {e.strerror}")
                exit_code = 1
                continue

        failures = run_lines(ctxt, lines, display_name)
        logger.info("job %s finished with %d failing lines", display_name, failures)

        if ctxt.quit_requested:
            break

    return exit_code


def _run_interactive(ctxt: ps.Context) -> int:
    """Run the interactive read-eval loop on standard input.

    The prompt switches to the continuation prompt while a procedure body
    is still open. The loop ends on quit or end of input.
    """
    params = ctxt.system_params
    if params["Banner"]:
        mode = "lexical" if ctxt.lexical else "dynamic"
        print(f"{params['Product']} {params['Version']} ({mode} scoping)")
        print("Type 'quit' to exit.")

    reader = ps_token.LineReader()
    while not ctxt.quit_requested:
        prompt = params["ContinuationPrompt"] if reader.pending else params["Prompt"]
        try:
            line = input(prompt)
        except EOFError:
            print()
            finish_input(reader, "")
            break
        execute_line(ctxt, reader, line)

    return 0


def run(system_params, inputfiles) -> int:
    """Core LineForge execution logic.

    Initializes the context and runs either batch jobs or the interactive
    loop.

    Args:
        system_params: Settings from init_system_params(), adjusted by the
                      command line.
        inputfiles: Input file paths (empty for interactive mode).

    Returns:
        Exit code (0 for success, non-zero for error).
    """
    ctxt, err_string = create_context(system_params)
    if err_string:
        print(err_string)
        return 1

    try:
        if inputfiles:
            return _run_batch_jobs(ctxt, inputfiles)
        return _run_interactive(ctxt)
    except FatalError as e:
        print(f"{system_params['Product']} Fatal: {e}")
        return 1
