# skicomb/engine/trace.py
"""
Structured view of a simplification run.

Where SimplifyConfig.trace streams text, trace_simplify keeps the
intermediate Terms themselves, capped at max_steps so divergent terms
still return.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ..config import SimplifyConfig
from ..core.term import Term
from .simplifier import Simplifier


@dataclass(frozen=True)
class TraceStep:
    i: int
    term: Term


@dataclass(frozen=True)
class TraceResult:
    result: Term
    steps: List[TraceStep]
    converged: bool

    def lines(self) -> List[str]:
        return [s.term.short_string() for s in self.steps]


def trace_simplify(
    term: Term,
    *,
    max_steps: int = 64,
    simplifier: Optional[Simplifier] = None,
) -> TraceResult:
    """
    Simplify term, capturing every intermediate form.

    steps[0] is the input; when converged, steps[-1] is the fixpoint.
    """
    if max_steps <= 0:
        raise ValueError("max_steps must be > 0")
    sim = simplifier if simplifier is not None else Simplifier(SimplifyConfig())

    steps: List[TraceStep] = []
    cur = term
    for i, cur in enumerate(sim.iter_simplify(term)):
        if i >= max_steps:
            return TraceResult(result=steps[-1].term, steps=steps, converged=False)
        steps.append(TraceStep(i=i, term=cur))
    return TraceResult(result=cur, steps=steps, converged=True)
