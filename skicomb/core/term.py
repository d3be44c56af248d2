"""
skicomb TERM CORE
=================
Binary application trees over six predeclared combinators and the
synthetic trailing arguments introduced by the Reducer.

    Leaf(Comb.K)                 K
    Leaf(Arg(1))                 a
    App(App(S, K), K)            SKK

Terms are immutable values. Rewriting builds new App nodes and reuses
existing subterms by reference, so a subterm may appear in several
places of a tree. Rendering, hashing and equality walk the tree with
explicit stacks, so arbitrarily deep terms (long Jot programs) are fine.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Union

from ..errors import InvariantError


class Comb(Enum):
    """The predeclared combinators."""
    I = 1  # Ia = a
    K = 2  # Kab = a
    S = 3  # Sabc = ac(bc)
    B = 4  # Babc = a(bc)
    C = 5  # Cabc = acb
    W = 6  # Wab = abb

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Arg:
    """A trailing argument bound by the Reducer; index 1 renders as 'a'."""
    index: int

    def __post_init__(self) -> None:
        if isinstance(self.index, bool) or not isinstance(self.index, int) or self.index < 1:
            raise ValueError(f"Arg index must be a positive int, got {self.index!r}")

    def __str__(self) -> str:
        return chr(96 + self.index)


Tag = Union[Comb, Arg]


class Term:
    """Common surface of Leaf and App."""

    __slots__ = ()

    # ---------- structural queries ----------

    def leftmost(self) -> Tag:
        """Tag of the leaf reached by descending through left children."""
        node = self
        while isinstance(node, App):
            node = node.left
        return node.tag

    def args(self) -> List[Term]:
        """Head followed by the spine arguments, left to right."""
        spine: List[Term] = []
        node = self
        while isinstance(node, App):
            spine.append(node.right)
            node = node.left
        spine.append(node)
        spine.reverse()
        return spine

    # ---------- rendering ----------

    def _render(self, wrap_all: bool) -> str:
        # stack holds Terms still to render and literal parens, popped in order
        out: List[str] = []
        stack: List[Union[Term, str]] = [self]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                out.append(item)
            elif isinstance(item, Leaf):
                out.append(str(item.tag))
            elif wrap_all:
                stack.extend((")", item.right, item.left, "("))
            elif isinstance(item.right, App):
                stack.extend((")", item.right, "(", item.left))
            else:
                stack.extend((item.right, item.left))
        return "".join(out)

    def full_string(self) -> str:
        """Every application parenthesized: ((IS)K)."""
        return self._render(wrap_all=True)

    def short_string(self) -> str:
        """Left-associative chains bare, right-branching applications wrapped: AB(CD)."""
        return self._render(wrap_all=False)

    def __str__(self) -> str:
        return self.short_string()


@dataclass(frozen=True)
class Leaf(Term):
    tag: Tag

    def __post_init__(self) -> None:
        if not isinstance(self.tag, (Comb, Arg)):
            raise InvariantError(f"Leaf tag must be Comb or Arg, got {self.tag!r}")

    def __repr__(self) -> str:
        return f"Leaf({self.tag})"


@dataclass(frozen=True, eq=False)
class App(Term):
    left: Term
    right: Term

    def __post_init__(self) -> None:
        if not isinstance(self.left, Term) or not isinstance(self.right, Term):
            raise InvariantError(f"App children must be Terms: {self.left!r}, {self.right!r}")
        # children already carry their hashes, so this stays O(1) per node
        object.__setattr__(self, "_hash", hash((self.left, self.right)))

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, App):
            return NotImplemented
        pairs = [(self, other)]
        while pairs:
            a, b = pairs.pop()
            if a is b:
                continue
            if isinstance(a, App) and isinstance(b, App):
                if a._hash != b._hash:
                    return False
                pairs.append((a.right, b.right))
                pairs.append((a.left, b.left))
            elif a != b:
                return False
        return True

    def __repr__(self) -> str:
        return f"App({self.left!r}, {self.right!r})"


# ---------- constructors ----------


def leaf(tag: Union[Comb, str]) -> Leaf:
    """
    Build a predeclared-combinator leaf from a Comb or its letter.
    Raises ValueError for anything outside the six combinators.
    """
    if isinstance(tag, Comb):
        return Leaf(tag)
    if isinstance(tag, str) and len(tag) == 1 and tag in Comb.__members__:
        return Leaf(Comb[tag])
    raise ValueError(f"leaf: invalid combinator {tag!r}")


def arg(index: int) -> Leaf:
    return Leaf(Arg(index))


def apply(left: Term, right: Term) -> App:
    """Application of left to right."""
    return App(left, right)


def apply_all(head: Term, *args: Term) -> Term:
    """Left fold: apply_all(S, x, y, z) == ((S x) y) z."""
    t = head
    for a in args:
        t = App(t, a)
    return t


I = leaf(Comb.I)
K = leaf(Comb.K)
S = leaf(Comb.S)
B = leaf(Comb.B)
C = leaf(Comb.C)
W = leaf(Comb.W)
