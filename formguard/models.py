"""Validation models: classification modes, policies, error codes and exceptions."""

from enum import Enum
from typing import Optional


class ComparisonMode(str, Enum):
    """How an ordered comparison interprets its operands."""

    DATE = "date"        # Both operands parsed under an explicit format
    NUMERIC = "numeric"  # Value parsed as a number
    LENGTH = "length"    # Character length of the value


class EqualityPolicy(str, Enum):
    """Equality semantics a Validator is bound to.

    LOOSE: numeric operands compare by value across types (5 == "5").
    STRICT: type and value must both match (5 != "5").
    """

    LOOSE = "loose"
    STRICT = "strict"


class ErrorCode(str, Enum):
    """Error codes for rule misconfiguration surfaced to callers."""

    PATTERN_INVALID = "PATTERN_INVALID"


class PatternError(ValueError):
    """A regular expression handed to ``is_match`` could not be compiled.

    Raised instead of returning False so callers can tell "no match" apart
    from a malformed rule.
    """

    code = ErrorCode.PATTERN_INVALID

    def __init__(self, pattern: str, reason: Optional[str] = None):
        self.pattern = pattern
        self.reason = reason
        message = f"Invalid regular expression {pattern!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
