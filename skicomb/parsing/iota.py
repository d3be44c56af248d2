# skicomb/parsing/iota.py
"""
Iota notation: one primitive ι = λx. x S K and a prefix apply marker.

    Expr := 'i' | '*' Expr Expr

Also home of the two ι-elimination identities shared with Jot:

    ιF == F S K      (left_iota)
    Fι == S(K F)     (right_iota)
"""

from __future__ import annotations

from typing import List, Union

from ..core.term import Term, App, I, K, S
from ..errors import (
    InvalidCharacterError,
    IncompleteExpressionError,
    InvariantError,
    TrailingTermsError,
)

IOTA_CHARS = frozenset("*i")


class _Iota:
    """Placeholder for an ι not yet eliminated; never a Term."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "ι"


IOTA = _Iota()


def left_iota(f: Term) -> Term:
    """ι applied to f: f S K."""
    return App(App(f, S), K)


def right_iota(f: Term) -> Term:
    """f applied to ι: S(K f)."""
    return App(S, App(K, f))


def check_iota(s: str) -> None:
    """
    Validate an Iota program.

    Well-formed iff the last character is an i, there are equally many
    *s and is before it, and at every earlier position the *s seen so
    far are at least as many as the is.
    """
    stars = 0
    iotas = 0
    for pos, ch in enumerate(s):
        if ch == "*":
            stars += 1
        elif ch == "i":
            iotas += 1
            if iotas == stars + 1 and pos < len(s) - 1:
                raise TrailingTermsError(s[: pos + 1])
        else:
            raise InvalidCharacterError(ch, "Iota")

    missing = stars + 1 - iotas
    if missing > 0:
        raise IncompleteExpressionError(missing)
    if missing < 0:
        raise InvariantError(f"check_iota: {iotas} is for {stars} *s in {s!r}")


def parse_iota(s: str) -> Term:
    """Parse whitespace-free Iota text into a Term."""
    check_iota(s)
    if s == "i":
        return left_iota(I)

    stack: List[Union[Term, _Iota]] = []
    for ch in reversed(s):
        if ch == "i":
            stack.append(IOTA)
            continue
        # '*': top is the operator, the item below it the operand
        fn = stack.pop()
        x = stack.pop()
        if fn is IOTA and x is IOTA:
            stack.append(I)
        elif fn is IOTA:
            stack.append(left_iota(x))
        elif x is IOTA:
            stack.append(right_iota(fn))
        else:
            stack.append(App(fn, x))

    if len(stack) != 1 or stack[0] is IOTA:
        raise InvariantError(f"parse_iota: stack ended as {stack!r}")
    return stack[0]
