# skicomb/api.py
"""
High-level skicomb helpers.

    - run_program(text) : parse, simplify and reduce in one call, returning
                          a JSON-ready dict of renderings
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from .config import SimplifyConfig
from .engine.simplifier import Simplifier
from .parsing.dispatch import detect_notation, parse


def run_program(
    text: str,
    *,
    reduce_args: bool = True,
    config: Optional[SimplifyConfig] = None,
) -> Dict[str, Any]:
    """
    Parse text in any notation and run it.

    Returns:
        {
            "notation":    "ski" | "iota" | "jot",
            "input":       text as given,
            "parsed":      short rendering of the parsed term,
            "parsed_full": fully parenthesized rendering,
            "simplified":  short rendering of the fixpoint,
            "reduced":     short rendering after Reduce (None if skipped),
            "arguments":   trailing arguments consumed (None if skipped),
        }

    Raises:
        ParseError         on malformed text.
        StepLimitExceeded  if config.max_passes is hit.
    """
    notation = detect_notation(text)
    term = parse(text)
    sim = Simplifier(config)

    simplified = sim.simplify(term)
    reduced = None
    arguments = None
    if reduce_args:
        r, arguments = sim.saturate(simplified)
        reduced = r.short_string()

    return {
        "notation": notation,
        "input": text,
        "parsed": term.short_string(),
        "parsed_full": term.full_string(),
        "simplified": simplified.short_string(),
        "reduced": reduced,
        "arguments": arguments,
    }
