"""Numeric literal parsing used by equality and ordered comparisons.

A value counts as numeric when it is a finite int/float/Decimal (bools
excluded) or a string of the form::

    [+-] digits [. digits] [e|E [+-] digits]

with optional surrounding whitespace. ".5" and "5." are accepted. Hex,
underscores, "inf" and "nan" are not.
"""

import math
import re
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

NUMERIC_LITERAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(value: Any) -> Optional[Decimal]:
    """Return ``value`` as a Decimal, or None when it is not a numeric literal."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(repr(value)) if math.isfinite(value) else None
    if isinstance(value, Decimal):
        return value if value.is_finite() else None
    if isinstance(value, str):
        text = value.strip()
        if not NUMERIC_LITERAL.fullmatch(text):
            return None
        try:
            return Decimal(text)
        except InvalidOperation:
            return None
    return None


def is_numeric(value: Any) -> bool:
    return parse_number(value) is not None
