# LineForge - A line-oriented PostScript evaluator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from lineforge.core import tokenizer as ps_token
from lineforge.core.context_init import create_context, init_system_params
from lineforge.operators import control as ps_control


def make_context(lexical=False):
    params = init_system_params()
    params["Lexical"] = lexical
    ctxt, err = create_context(params)
    assert err is None
    return ctxt


def evaluate(ctxt, lines):
    """Feed lines through one LineReader and evaluate every token. Errors propagate."""
    reader = ps_token.LineReader()
    for line in lines:
        for token in reader.feed(line):
            ps_control.eval_token(ctxt, token)
    reader.finish()
    return ctxt.o_stack


@pytest.fixture
def ctxt():
    return make_context()


@pytest.fixture
def lexical_ctxt():
    return make_context(lexical=True)


@pytest.fixture
def run(ctxt):
    """Evaluate whitespace-separated source, one token per word, on ctxt."""
    return lambda source: evaluate(ctxt, source.split())


@pytest.fixture
def run_lexical(lexical_ctxt):
    return lambda source: evaluate(lexical_ctxt, source.split())


@pytest.fixture
def run_lines(ctxt):
    """Evaluate explicit lines on ctxt (for strings containing spaces)."""
    return lambda lines: evaluate(ctxt, lines)


@pytest.fixture
def new_context():
    return make_context
