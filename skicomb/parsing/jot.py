# skicomb/parsing/jot.py
"""
Jot notation: every string over {0, 1} is a program.

Folds left to right onto I: 0 applies ι to the accumulator, 1 applies
the accumulator to ι.
"""

from __future__ import annotations

from ..core.term import Term, I
from ..errors import InvalidCharacterError
from .iota import left_iota, right_iota

JOT_CHARS = frozenset("01")


def parse_jot(s: str) -> Term:
    t = I
    for ch in s:
        if ch == "0":
            t = left_iota(t)
        elif ch == "1":
            t = right_iota(t)
        else:
            raise InvalidCharacterError(ch, "Jot")
    return t
