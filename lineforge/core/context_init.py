# LineForge - A line-oriented PostScript evaluator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
LineForge context initialization.

Creates and initializes one evaluation environment: the operand stack, the
dictionary stack with its two floor scopes (systemdict and userdict), the
operator registry and the random number generator.
"""

import logging
import random
from typing import Any, Dict, Optional, Tuple

from . import error as ps_error
from . import types as ps
from ..operators import dict as ps_dict

logger = logging.getLogger(__name__)

PRODUCT = "LineForge"
VERSION = "0.3.0"


def init_system_params() -> Dict[str, Any]:
    """
    Initialize system parameters for the evaluator.

    Returns:
        Dict[str, Any]: System parameters dictionary containing:
            - Lexical: True for lexical scoping, False for dynamic scoping
            - Prompt: interactive prompt
            - ContinuationPrompt: prompt shown inside an unfinished procedure body
            - Banner: whether the interactive session prints a banner
            - Product: product name
            - Version: product version
    """

    return {
        "Lexical": False,
        "Prompt": ">> ",
        "ContinuationPrompt": ".. ",
        "Banner": True,
        "Product": PRODUCT,
        "Version": VERSION,
    }


def create_context(
    system_params: Dict[str, Any],
) -> Tuple[Optional[ps.Context], Optional[str]]:
    """
    Create and initialize a complete evaluation context.

    The scoping mode is read from ``system_params["Lexical"]`` and is fixed
    for the lifetime of the context. Every call builds an entirely separate
    context; nothing is shared between two of them.

    Args:
        system_params: Dictionary from init_system_params(), possibly
                      adjusted by the command line

    Returns:
        Tuple[Optional[ps.Context], Optional[str]]: Success/failure result
            - Success: (Context object, None) - Ready for evaluation
            - Failure: (None, error_description) - Initialization failed
    """

    ctxt = ps.Context(system_params, lexical=bool(system_params.get("Lexical", False)))

    try:
        ps_dict.init_dictionaries(ctxt)
    except ps_error.PSError as e:
        return None, f"{PRODUCT} Error: context initialization failed: {e}"

    # Initialize the random number generator with a random seed
    ctxt.random_seed = random.randrange(ps.RAND_MAX)
    ctxt.random.seed(ctxt.random_seed)

    logger.debug(
        "context ready: %s scoping, %d scopes",
        "lexical" if ctxt.lexical else "dynamic",
        len(ctxt.d_stack),
    )
    return ctxt, None
