# skicomb/reduction/rules.py
"""
The six combinator rewrite rules, applied at a single node.

    I x      -> x
    K x y    -> x
    W x y    -> x y y
    S x y z  -> x z (y z)
    B x y z  -> x (y z)
    C x y z  -> x z y

The node's left spine is inspected one, two, then three levels deep.
The first level whose node is a leaf decides: if that leaf is a
combinator taking exactly that many arguments the rule fires, otherwise
nothing does. Rules only allocate App nodes; argument subterms are
reused by reference.
"""

from __future__ import annotations

from typing import Dict, Optional

from ..core.term import App, Comb, Leaf, Term
from ..errors import InvariantError

ARITY: Dict[Comb, int] = {
    Comb.I: 1,
    Comb.K: 2,
    Comb.W: 2,
    Comb.S: 3,
    Comb.B: 3,
    Comb.C: 3,
}


def _head_at(term: Term, n: int) -> Optional[Leaf]:
    """Leaf n steps down the left spine, if the spine is that long."""
    node = term
    for _ in range(n):
        if not isinstance(node, App):
            return None
        node = node.left
    return node if isinstance(node, Leaf) else None


class CombinatorRules:
    """One-step rewriting at the root of a term."""

    def match(self, term: Term) -> Optional[Comb]:
        """The combinator whose rule fires at term's root, or None."""
        if not isinstance(term, App):
            return None
        for n in (1, 2, 3):
            head = _head_at(term, n)
            if head is None:
                continue
            tag = head.tag
            if isinstance(tag, Comb) and ARITY[tag] == n:
                return tag
            return None
        return None

    def rewrite(self, term: Term) -> Optional[Term]:
        """Rewrite term's root once; None when no rule applies."""
        comb = self.match(term)
        if comb is None:
            return None

        # a match means the spine holds exactly ARITY[comb] operands
        operands = term.args()[1:]
        if comb is Comb.I or comb is Comb.K:
            return operands[0]
        if comb is Comb.W:
            x, y = operands
            return App(App(x, y), y)

        x, y, z = operands
        if comb is Comb.S:
            return App(App(x, z), App(y, z))
        if comb is Comb.B:
            return App(x, App(y, z))
        if comb is Comb.C:
            return App(App(x, z), y)

        raise InvariantError(f"unhandled combinator {comb}")


rules = CombinatorRules()
