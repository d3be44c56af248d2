import io

import pytest

from skicomb import run_program
from skicomb.config import SimplifyConfig
from skicomb.errors import EmptyInputError, ParseError, StepLimitExceeded


def test_run_program_ski():
    out = run_program("((SK)K)")
    assert out == {
        "notation": "ski",
        "input": "((SK)K)",
        "parsed": "SKK",
        "parsed_full": "((SK)K)",
        "simplified": "SKK",
        "reduced": "a",
        "arguments": 1,
    }


def test_run_program_iota():
    out = run_program("*i*i*ii")
    assert out["notation"] == "iota"
    assert out["parsed"] == "ISKSK"
    assert out["simplified"] == "K"
    assert (out["reduced"], out["arguments"]) == ("a", 2)


def test_run_program_jot_without_reduce():
    out = run_program("11111000", reduce_args=False)
    assert out["notation"] == "jot"
    assert out["simplified"] == "S"
    assert out["reduced"] is None
    assert out["arguments"] is None


@pytest.mark.parametrize("bad", ["", "()", "(S)", "((SK)K", "Z", "s", "*", "ii"])
def test_run_program_rejects(bad):
    with pytest.raises(ParseError):
        run_program(bad)


def test_empty_input_error():
    with pytest.raises(EmptyInputError, match="Invalid input"):
        run_program("  \n ")


def test_pass_limit_propagates():
    with pytest.raises(StepLimitExceeded):
        run_program("SII(SII)", config=SimplifyConfig(max_passes=50))


def test_trace_lists_fixpoint_once():
    sink = io.StringIO()
    run_program("IC", config=SimplifyConfig(trace=sink))
    assert sink.getvalue().splitlines() == ["IC", "C", "Ca", "Cab", "Cabc", "acb"]


def test_deep_jot_program():
    out = run_program("1" * 3000, reduce_args=False)
    assert out["notation"] == "jot"
    assert out["simplified"] == out["parsed"]
    assert out["parsed_full"].count("(") == 6000
