"""
Property-based checks over randomly built terms and programs.

Run with: pytest tests/test_term_fuzzer.py --hypothesis-show-statistics
"""

from hypothesis import given, strategies as st
from hypothesis.strategies import composite

from skicomb import parse, simplify
from skicomb.core.term import App, Comb, Leaf
from skicomb.errors import IncompleteExpressionError, TrailingTermsError
from skicomb.parsing.iota import check_iota, parse_iota
from skicomb.parsing.jot import parse_jot
from skicomb.reduction.rules import rules


def terms_over(combs, max_leaves=16):
    leaves = st.sampled_from(combs).map(Leaf)
    return st.recursive(leaves, lambda kids: st.builds(App, kids, kids), max_leaves=max_leaves)


any_terms = terms_over(list(Comb))

# no S or W: nothing is duplicated, every rewrite shrinks the tree
linear_terms = terms_over([Comb.I, Comb.K, Comb.B, Comb.C])


@composite
def iota_programs(draw, max_depth=6):
    if max_depth <= 0 or draw(st.booleans()):
        return "i"
    left = draw(iota_programs(max_depth=max_depth - 1))
    right = draw(iota_programs(max_depth=max_depth - 1))
    return "*" + left + right


def _subterms(t):
    yield t
    if isinstance(t, App):
        yield from _subterms(t.left)
        yield from _subterms(t.right)


@given(any_terms)
def test_full_string_round_trip(t):
    assert parse(t.full_string()) == t


@given(any_terms)
def test_short_string_round_trip(t):
    assert parse(t.short_string()) == t


@given(linear_terms)
def test_simplify_idempotent(t):
    once = simplify(t)
    assert simplify(once) == once


@given(linear_terms)
def test_simplified_has_no_redex(t):
    nf = simplify(t)
    assert all(rules.match(sub) is None for sub in _subterms(nf))


@given(iota_programs())
def test_iota_programs_parse(s):
    check_iota(s)
    assert parse(s) == parse_iota(s)


@given(iota_programs(), st.data())
def test_iota_strict_prefix_is_incomplete(s, data):
    if len(s) < 2:
        return
    cut = data.draw(st.integers(min_value=1, max_value=len(s) - 1))
    try:
        check_iota(s[:cut])
    except IncompleteExpressionError as e:
        assert e.missing >= 1
    else:
        raise AssertionError(f"prefix {s[:cut]!r} accepted")


@given(iota_programs(), st.sampled_from("*i"))
def test_iota_trailing_character_rejected(s, extra):
    try:
        check_iota(s + extra)
    except TrailingTermsError as e:
        assert e.prefix == s
    else:
        raise AssertionError(f"{s + extra!r} accepted")


@given(st.text(alphabet="01", max_size=24))
def test_every_jot_string_parses(s):
    t = parse_jot(s)
    assert t.leftmost() in tuple(Comb)
    if s:
        assert parse(s) == t
