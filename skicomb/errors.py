# skicomb/errors.py
"""
Error taxonomy for skicomb.

Two families, never mixed:

    - ParseError (a ValueError): bad user input. Raised by the parsers,
      recoverable, always carries the offending fragment.
    - InvariantError / StepLimitExceeded (RuntimeError): states that
      upstream validation should have made unreachable, or an opt-in
      resource limit tripping.
"""

from __future__ import annotations


class ParseError(ValueError):
    """Base class for recoverable parse failures."""
    pass


class EmptyInputError(ParseError):
    def __init__(self) -> None:
        super().__init__("Invalid input")


class InvalidCharacterError(ParseError):
    """A character outside the notation's alphabet."""

    def __init__(self, char: str, notation: str = "") -> None:
        self.char = char
        self.notation = notation
        label = f"Invalid {notation} character" if notation else "Invalid character"
        super().__init__(f"{label} {char}")


class UnbalancedParenthesesError(ParseError):
    def __init__(self, text: str, opened: int, closed: int) -> None:
        self.text = text
        self.opened = opened
        self.closed = closed
        super().__init__(f"Mismatched parentheses in {text} ({opened} vs. {closed})")


class DegenerateGroupError(ParseError):
    """A parenthesized group wrapping fewer than two subterms."""

    def __init__(self, span: str, count: int) -> None:
        self.span = span
        self.count = count
        noun = "term" if count == 1 else "terms"
        super().__init__(f"{count} {noun} in {span}")


class TrailingTermsError(ParseError):
    def __init__(self, prefix: str) -> None:
        self.prefix = prefix
        super().__init__(f"Unexpected terms following {prefix}")


class IncompleteExpressionError(ParseError):
    def __init__(self, missing: int) -> None:
        self.missing = missing
        noun = "term" if missing == 1 else "terms"
        super().__init__(f"Incomplete expression (expected {missing} more {noun})")


class InvariantError(RuntimeError):
    """Internal structural invariant violated (programmer error)."""
    pass


class StepLimitExceeded(RuntimeError):
    """Raised when an opt-in pass limit is hit before a fixpoint."""

    def __init__(self, term, passes: int) -> None:
        self.term = term
        self.passes = passes
        super().__init__(f"No fixpoint after {passes} passes")


__all__ = [
    "ParseError",
    "EmptyInputError",
    "InvalidCharacterError",
    "UnbalancedParenthesesError",
    "DegenerateGroupError",
    "TrailingTermsError",
    "IncompleteExpressionError",
    "InvariantError",
    "StepLimitExceeded",
]
