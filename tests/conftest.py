"""
Pytest configuration for skicomb tests.

Provides:
- Hypothesis profiles (select with HYPOTHESIS_PROFILE, default "default")
- Shared term-building helpers
"""

import os

from hypothesis import settings

from skicomb.core.term import Comb, Leaf, apply_all

# Default profile keeps the example database; "ci" trades it for a
# derandomized, reproducible search.
settings.register_profile("default", print_blob=True, derandomize=False)
settings.register_profile("ci", print_blob=True, derandomize=True, database=None)
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))


def build(head, *args):
    """build("S", "K", "K") -> ((SK)K); accepts letters or Terms."""
    def as_term(x):
        return Leaf(Comb[x]) if isinstance(x, str) else x

    return apply_all(as_term(head), *(as_term(a) for a in args))
