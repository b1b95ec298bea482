"""Type-adaptive ordered comparison.

Each comparison first classifies its operands, then applies the operator
to the two normalized, same-kind operands:

1. A format is given: both operands are parsed as dates under it.
2. No format, value is numeric: value and bound compare as numbers.
3. Otherwise: the character length of the value compares against the bound.

Modes are never mixed. If the chosen mode cannot normalize both operands
(unparseable date, non-numeric bound) the comparison fails closed. Booleans
and non-finite numbers have no meaningful size, so they fail closed too.
"""

import math
import operator
from decimal import Decimal
from typing import Any, Callable, NamedTuple, Optional

import structlog

from formguard.dates import parse_date
from formguard.models import ComparisonMode
from formguard.numeric import parse_number

logger = structlog.get_logger()

OPERATORS: dict[str, Callable[[Any, Any], bool]] = {
    ">=": operator.ge,
    "<=": operator.le,
    ">": operator.gt,
    "<": operator.lt,
}


class Classified(NamedTuple):
    """Operands normalized to a single comparison mode."""

    mode: ComparisonMode
    value: Any
    bound: Any


def as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def classify(value: Any, bound: Any, fmt: Optional[str] = None) -> Optional[Classified]:
    """Pick the comparison mode for ``value`` and normalize both operands.

    Args:
        value: The user-supplied value
        bound: The limit it is compared against
        fmt: Optional date format descriptor; forces date mode when given

    Returns:
        Classified operands, or None if the pair cannot be compared
    """
    if fmt is not None:
        left = parse_date(value, fmt)
        right = parse_date(bound, fmt)
        if left is None or right is None:
            logger.debug(
                "comparison_unclassified",
                mode=ComparisonMode.DATE.value,
                format=fmt,
                value_parsed=left is not None,
                bound_parsed=right is not None,
            )
            return None
        return Classified(ComparisonMode.DATE, left, right)

    limit = parse_number(bound)
    if limit is None:
        logger.debug("comparison_unclassified", reason="bound_not_numeric", bound=repr(bound))
        return None

    if isinstance(value, bool) or (isinstance(value, (float, Decimal)) and not math.isfinite(value)):
        logger.debug("comparison_unclassified", reason="value_not_measurable", value=repr(value))
        return None

    number = parse_number(value)
    if number is not None:
        return Classified(ComparisonMode.NUMERIC, number, limit)

    return Classified(ComparisonMode.LENGTH, Decimal(len(as_text(value))), limit)


def compare(op: str, value: Any, bound: Any, fmt: Optional[str] = None) -> bool:
    """Apply ``op`` (one of ``OPERATORS``) to the classified operands.

    Returns False when classification fails.
    """
    apply = OPERATORS[op]
    classified = classify(value, bound, fmt)
    if classified is None:
        return False

    try:
        return bool(apply(classified.value, classified.bound))
    except TypeError as e:
        # Naive vs aware datetimes passed in pre-parsed
        logger.debug("comparison_unclassified", reason="incomparable_operands", error=str(e))
        return False
