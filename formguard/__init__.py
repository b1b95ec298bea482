"""formguard: pure predicates for validating user-supplied input.

Usage:
    from formguard import default_validator as validator

    if not validator.is_email(form["email"]):
        # Caller decides how to report the failure
"""

from formguard.comparison import classify, compare
from formguard.config import Settings, get_settings
from formguard.dates import is_valid_date, parse_date
from formguard.logging_config import configure_logging
from formguard.markup import parse_allowed_tags, strip_tags, tokenize
from formguard.models import ComparisonMode, EqualityPolicy, ErrorCode, PatternError
from formguard.numeric import is_numeric, parse_number
from formguard.reference_data import DEFAULT_ALLOWED_TAGS, DEFAULT_DATE_FORMAT
from formguard.validator import RULES, Validator, default_validator

__all__ = [
    "Validator",
    "default_validator",
    "RULES",
    "Settings",
    "get_settings",
    "configure_logging",
    "ComparisonMode",
    "EqualityPolicy",
    "ErrorCode",
    "PatternError",
    "classify",
    "compare",
    "parse_date",
    "is_valid_date",
    "tokenize",
    "strip_tags",
    "parse_allowed_tags",
    "parse_number",
    "is_numeric",
    "DEFAULT_ALLOWED_TAGS",
    "DEFAULT_DATE_FORMAT",
]
