# skicomb/parsing/ski.py
"""
Explicit combinator notation.

    Expr := Letter | '(' Expr Expr Expr* ')'     Letter in I K S B C W

Application is left-associative and left-branching parentheses may be
elided: ABCD and (ABCD) both denote (((AB)C)D). Every parenthesized
group must hold at least two subterms.
"""

from __future__ import annotations

from typing import List, Optional

from ..core.term import Term, App, Comb, Leaf
from ..errors import (
    DegenerateGroupError,
    InvalidCharacterError,
    InvariantError,
    UnbalancedParenthesesError,
)

COMB_CHARS = frozenset(Comb.__members__)
SKI_CHARS = COMB_CHARS | {"(", ")"}


def count_subterms(span: str) -> int:
    """
    Number of first-level subterms in a single parenthesized span:
    letters and nested groups seen at depth 1.
    """
    n = 0
    depth = 0
    for ch in span:
        if ch == "(":
            if depth == 1:
                n += 1
            depth += 1
        elif ch == ")":
            depth -= 1
        elif depth == 1:
            n += 1
    return n


def _matching_paren(s: str, start: int) -> int:
    depth = 0
    for j in range(start, len(s)):
        if s[j] == "(":
            depth += 1
        elif s[j] == ")":
            depth -= 1
            if depth == 0:
                return j
    raise InvariantError(f"no closing parenthesis for position {start} in {s!r}")


def check_ski(s: str) -> None:
    """Raise the first ParseError found in s, or return None."""
    opened = closed = 0
    ordered = True
    for ch in s:
        if ch not in SKI_CHARS:
            raise InvalidCharacterError(ch, "SKI")
        if ch == "(":
            opened += 1
        elif ch == ")":
            closed += 1
            if closed > opened:
                ordered = False
    if opened != closed or not ordered:
        raise UnbalancedParenthesesError(s, opened, closed)

    for i, ch in enumerate(s):
        if ch != "(":
            continue
        span = s[i : _matching_paren(s, i) + 1]
        n = count_subterms(span)
        if n < 2:
            raise DegenerateGroupError(span, n)


def _fold(acc: Optional[Term], t: Term) -> Term:
    return t if acc is None else App(acc, t)


def parse_ski(s: str) -> Term:
    """Parse whitespace-free SKI text into a Term."""
    check_ski(s)

    # one accumulator per open group, the bottom one for the top level
    groups: List[Optional[Term]] = [None]
    for ch in s:
        if ch == "(":
            groups.append(None)
        elif ch == ")":
            inner = groups.pop()
            if inner is None:
                raise InvariantError(f"empty group in {s!r}")
            groups[-1] = _fold(groups[-1], inner)
        else:
            groups[-1] = _fold(groups[-1], Leaf(Comb[ch]))

    if len(groups) != 1 or groups[0] is None:
        raise InvariantError(f"parse_ski: unbalanced result {groups!r} for {s!r}")
    return groups[0]
