# skicomb/__init__.py
"""
skicomb public API surface.

An interpreter for combinatory logic over I, K, S, B, C and W, reading
three notations that all compile to the same application trees:

    - SKI:  ((SK)K), SKK, B(CW)
    - Iota: *i*i*ii
    - Jot:  11100

Core:
    - Terms: Term, Leaf, App, Comb, Arg, leaf, apply, apply_all
    - Parsing: parse, parse_ski, parse_iota, parse_jot
    - Rewriting: simplify, reduce, Simplifier, SimplifyConfig
    - Errors: ParseError and subclasses, InvariantError, StepLimitExceeded
"""

from __future__ import annotations

from .core.term import (
    App,
    Arg,
    Comb,
    Leaf,
    Term,
    apply,
    apply_all,
    arg,
    leaf,
)
from .config import SimplifyConfig
from .errors import (
    DegenerateGroupError,
    EmptyInputError,
    IncompleteExpressionError,
    InvalidCharacterError,
    InvariantError,
    ParseError,
    StepLimitExceeded,
    TrailingTermsError,
    UnbalancedParenthesesError,
)
from .parsing.dispatch import detect_notation, parse
from .parsing.iota import left_iota, parse_iota, right_iota
from .parsing.jot import parse_jot
from .parsing.ski import parse_ski
from .engine.simplifier import Simplifier, reduce, simplify
from .engine.trace import TraceResult, TraceStep, trace_simplify
from .api import run_program


def full_string(term: Term) -> str:
    return term.full_string()


def short_string(term: Term) -> str:
    return term.short_string()


__all__ = [
    # terms
    "Term",
    "Leaf",
    "App",
    "Comb",
    "Arg",
    "leaf",
    "arg",
    "apply",
    "apply_all",
    "full_string",
    "short_string",

    # parsing
    "parse",
    "detect_notation",
    "parse_ski",
    "parse_iota",
    "parse_jot",
    "left_iota",
    "right_iota",

    # rewriting
    "Simplifier",
    "SimplifyConfig",
    "simplify",
    "reduce",
    "trace_simplify",
    "TraceStep",
    "TraceResult",

    # high-level
    "run_program",

    # errors
    "ParseError",
    "EmptyInputError",
    "InvalidCharacterError",
    "UnbalancedParenthesesError",
    "DegenerateGroupError",
    "TrailingTermsError",
    "IncompleteExpressionError",
    "InvariantError",
    "StepLimitExceeded",
]
