# skicomb/parsing/dispatch.py
"""
Front door for all three notations.

The first non-whitespace character picks the grammar:

    ( ) I K S B C W   -> SKI
    * i               -> Iota
    0 1               -> Jot
"""

from __future__ import annotations

from ..core.term import Term
from ..errors import EmptyInputError, InvalidCharacterError
from .iota import IOTA_CHARS, parse_iota
from .jot import JOT_CHARS, parse_jot
from .ski import SKI_CHARS, parse_ski

_PARSERS = {
    "ski": parse_ski,
    "iota": parse_iota,
    "jot": parse_jot,
}


def strip_whitespace(text: str) -> str:
    return "".join(text.split())


def detect_notation(text: str) -> str:
    """Return "ski", "iota" or "jot" for text (whitespace ignored)."""
    s = strip_whitespace(text)
    if not s:
        raise EmptyInputError()
    first = s[0]
    if first in SKI_CHARS:
        return "ski"
    if first in IOTA_CHARS:
        return "iota"
    if first in JOT_CHARS:
        return "jot"
    raise InvalidCharacterError(first)


def parse(text: str) -> Term:
    """
    Parse a program in any of the three notations. Whitespace is ignored.
    Raises a ParseError subclass on malformed input.
    """
    notation = detect_notation(text)
    return _PARSERS[notation](strip_whitespace(text))
