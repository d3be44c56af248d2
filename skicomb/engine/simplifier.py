# skicomb/engine/simplifier.py
"""
Fixpoint simplification and argument-saturating reduction.

Execution model:
----------------
A tree pass tries the one-step rules at a node, then walks into the
children of whatever node results (unless the rewrite produced a leaf).
Simplify repeats tree passes until one reports no change.

Reduce keeps appending fresh trailing arguments a, b, c, ... and
re-simplifying until the head of the term is one of those arguments:

    reduce(S)  -> ac(bc), 3
    reduce(KI) -> b, 2

Neither loop is guaranteed to terminate (SII(SII) never does); pass a
SimplifyConfig with max_passes to bound a single simplification.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from ..config import DEFAULT_CONFIG, SimplifyConfig
from ..core.term import App, Arg, Leaf, Term, arg
from ..errors import StepLimitExceeded
from ..reduction.rules import CombinatorRules, rules as default_rules


class Simplifier:
    """Rewriting engine bound to one configuration."""

    def __init__(
        self,
        config: Optional[SimplifyConfig] = None,
        rules: Optional[CombinatorRules] = None,
    ) -> None:
        self.config = config if config is not None else DEFAULT_CONFIG
        self.rules = rules if rules is not None else default_rules

    # ------------------------------------------------------------------
    # Tree pass
    # ------------------------------------------------------------------
    def _enter(self, term: Term) -> Tuple[Term, bool, bool]:
        """Rewrite term's root once: (node, changed, finished)."""
        if isinstance(term, Leaf):
            return term, False, True
        rewritten = self.rules.rewrite(term)
        if rewritten is None:
            return term, False, False
        return rewritten, True, isinstance(rewritten, Leaf)

    def step(self, term: Term) -> Tuple[Term, bool]:
        """
        One simplification pass over term's tree.

        Returns the new root and whether anything was rewritten. Nodes are
        visited root first, then left subtree, then right subtree; the
        walk keeps its own stack so deep terms do not hit the recursion
        limit.
        """
        # frames: [node, changed at node, left result, left changed]
        stack: List[list] = []
        pending: Optional[Term] = term
        done: Tuple[Term, bool] = (term, False)
        while True:
            if pending is not None:
                node, changed, finished = self._enter(pending)
                pending = None
                if not finished:
                    stack.append([node, changed, None, False])
                    pending = node.left
                    continue
                done = (node, changed)

            if not stack:
                return done
            frame = stack[-1]
            if frame[2] is None:
                frame[2], frame[3] = done
                pending = frame[0].right
                continue

            stack.pop()
            node, changed, left, lchanged = frame
            right, rchanged = done
            if lchanged or rchanged:
                node = App(left, right)
            done = (node, changed or lchanged or rchanged)

    # ------------------------------------------------------------------
    # Fixpoint
    # ------------------------------------------------------------------
    def iter_simplify(self, term: Term) -> Iterator[Term]:
        """Yield term, then every form a pass changes it into."""
        limit = self.config.max_passes
        passes = 0
        yield term
        while True:
            if limit is not None and passes >= limit:
                raise StepLimitExceeded(term, passes)
            term, changed = self.step(term)
            passes += 1
            if not changed:
                return
            yield term

    def simplify(self, term: Term) -> Term:
        trace = self.config.trace
        for term in self.iter_simplify(term):
            if trace is not None:
                print(term.short_string(), file=trace)
        return term

    # ------------------------------------------------------------------
    # Reducer
    # ------------------------------------------------------------------
    def reduce(self, term: Term) -> Tuple[Term, int]:
        """
        Apply term to as many trailing arguments as it takes for one of
        them to reach the head. Returns the simplified result and the
        number of arguments consumed.
        """
        return self.saturate(self.simplify(term))

    def saturate(self, term: Term) -> Tuple[Term, int]:
        """reduce for a term that is already a fixpoint."""
        count = 0
        while not isinstance(term.leftmost(), Arg):
            count += 1
            term = self.simplify(App(term, arg(count)))
        return term, count


def simplify(term: Term, config: Optional[SimplifyConfig] = None) -> Term:
    """Simplify term until no rule applies."""
    return Simplifier(config).simplify(term)


def reduce(term: Term, config: Optional[SimplifyConfig] = None) -> Tuple[Term, int]:
    """See Simplifier.reduce."""
    return Simplifier(config).reduce(term)
