"""Validator: the predicate surface of formguard.

Every method is a pure predicate returning a bool. The only exception that
escapes is PatternError, for a malformed regular expression in is_match.

Usage:
    from formguard import default_validator as validator

    validator.is_required(form.get("name"))
    validator.is_in_range(form.get("age"), 18, 99)
    validator.is_at_least(form.get("start"), "2025-01-01", "YYYY-MM-DD")
"""

import re
from collections.abc import Sized
from functools import lru_cache
from typing import Any, Optional, Union

import structlog
from email_validator import EmailNotValidError, validate_email
from pydantic import AnyUrl, TypeAdapter, ValidationError

from formguard.comparison import as_text, compare
from formguard.config import Settings, get_settings
from formguard.dates import is_valid_date
from formguard.markup import AllowedTags, parse_allowed_tags, strip_tags
from formguard.models import EqualityPolicy, PatternError
from formguard.numeric import parse_number

logger = structlog.get_logger()

_URL_ADAPTER = TypeAdapter(AnyUrl)

# Rule name → Validator method, for callers that keep rule names in configuration
RULES: dict[str, str] = {
    "required": "is_required",
    "equal": "is_equal",
    "not_equal": "is_not_equal",
    "match": "is_match",
    "text": "is_plain_text",
    "html": "is_allowed_html",
    "email": "is_email",
    "url": "is_url",
    "date": "is_date",
    "min": "is_at_least",
    "max": "is_at_most",
    "less": "is_less_than",
    "greater": "is_greater_than",
    "min_max": "is_in_range",
    "between": "is_strictly_between",
}


@lru_cache(maxsize=256)
def _compile(pattern: str) -> re.Pattern:
    try:
        return re.compile(pattern)
    except re.error as e:
        logger.error("pattern_invalid", pattern=pattern, error=str(e))
        raise PatternError(pattern, str(e)) from e


class Validator:
    """Stateless set of input predicates.

    Instances only hold defaults (equality policy, allow-list, date format)
    taken from Settings; no state is kept between calls, so one instance
    can be shared across threads.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        equality_policy: Optional[Union[EqualityPolicy, str]] = None,
        allowed_tags: AllowedTags = None,
        date_format: Optional[str] = None,
    ):
        """Initialize with Settings defaults, optionally overridden per instance.

        Args:
            settings: Settings to take defaults from. Defaults to get_settings().
            equality_policy: "loose" or "strict"
            allowed_tags: Default allow-list for is_allowed_html
            date_format: Default format for is_date
        """
        settings = settings or get_settings()
        self.equality_policy = EqualityPolicy(equality_policy or settings.EQUALITY_POLICY)
        self.allowed_tags = parse_allowed_tags(
            allowed_tags if allowed_tags is not None else settings.ALLOWED_TAGS
        )
        self.date_format = date_format or settings.DATE_FORMAT

    # ── Presence & Equality ──

    def is_required(self, value: Any) -> bool:
        """False for None, False, blank strings and empty collections; True otherwise.

        0 and "0" are present values.
        """
        if value is None or value is False:
            return False
        if isinstance(value, str):
            return value.strip() != ""
        if isinstance(value, Sized):
            return len(value) > 0
        return True

    def is_equal(self, value: Any, other: Any) -> bool:
        """Equality under the instance's policy.

        LOOSE: two numeric operands (numbers or numeric literal strings)
        compare by value, so 5 equals "5" and "1e1" equals 10. Anything
        else falls back to ==.
        STRICT: types must match exactly as well as values.
        """
        if self.equality_policy == EqualityPolicy.STRICT:
            return type(value) is type(other) and value == other

        left = parse_number(value)
        right = parse_number(other)
        if left is not None and right is not None:
            return left == right
        return value == other

    def is_not_equal(self, value: Any, other: Any) -> bool:
        return not self.is_equal(value, other)

    # ── Pattern ──

    def is_match(self, value: Any, pattern: str) -> bool:
        """True iff the whole of ``value`` matches ``pattern``.

        Args:
            value: Value to test, matched as a string
            pattern: Regular expression body; anchors are optional

        Raises:
            PatternError: if ``pattern`` does not compile
        """
        return _compile(pattern).fullmatch(as_text(value)) is not None

    # ── Content ──

    def is_plain_text(self, value: Any) -> bool:
        """True if ``value`` contains no markup at all."""
        text = as_text(value)
        return strip_tags(text) == text

    def is_allowed_html(self, value: Any, allowed_tags: AllowedTags = None) -> bool:
        """True if every tag in ``value`` is on the allow-list.

        Args:
            value: HTML fragment
            allowed_tags: "<p><b>" style string or iterable of names.
                Defaults to the instance allow-list.
        """
        text = as_text(value)
        allowed = self.allowed_tags if allowed_tags is None else parse_allowed_tags(allowed_tags)
        return strip_tags(text, allowed) == text

    # ── Formats ──

    def is_email(self, value: Any) -> bool:
        """Syntax-only email check; no DNS lookups."""
        if not isinstance(value, str):
            return False
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            return False
        return True

    def is_url(self, value: Any) -> bool:
        """True for an absolute URL with a scheme and a host and no whitespace."""
        if not isinstance(value, str) or any(c.isspace() for c in value):
            return False
        try:
            url = _URL_ADAPTER.validate_python(value)
        except ValidationError:
            return False
        return bool(url.scheme) and bool(url.host)

    def is_date(self, value: Any, fmt: Optional[str] = None) -> bool:
        """True if ``value`` is a real date written exactly in ``fmt``.

        Args:
            value: Date string
            fmt: Format descriptor such as "YYYY-MM-DD". Defaults to the instance date format.
        """
        return is_valid_date(value, fmt if fmt is not None else self.date_format)

    # ── Ordered comparisons ──
    # With fmt: both operands are dates under fmt. Without: numbers compare
    # numerically, anything else by string length. See formguard.comparison.

    def is_at_least(self, value: Any, minimum: Any, fmt: Optional[str] = None) -> bool:
        return compare(">=", value, minimum, fmt)

    def is_at_most(self, value: Any, maximum: Any, fmt: Optional[str] = None) -> bool:
        return compare("<=", value, maximum, fmt)

    def is_less_than(self, value: Any, maximum: Any, fmt: Optional[str] = None) -> bool:
        return compare("<", value, maximum, fmt)

    def is_greater_than(self, value: Any, minimum: Any, fmt: Optional[str] = None) -> bool:
        return compare(">", value, minimum, fmt)

    def is_in_range(self, value: Any, minimum: Any, maximum: Any, fmt: Optional[str] = None) -> bool:
        """Inclusive range check: minimum <= value <= maximum."""
        return self.is_at_least(value, minimum, fmt) and self.is_at_most(value, maximum, fmt)

    def is_strictly_between(self, value: Any, minimum: Any, maximum: Any, fmt: Optional[str] = None) -> bool:
        """Exclusive range check: minimum < value < maximum."""
        return self.is_greater_than(value, minimum, fmt) and self.is_less_than(value, maximum, fmt)

    # ── Rule lookup ──

    def check(self, rule: str, value: Any, *args: Any, **kwargs: Any) -> bool:
        """Run a predicate by rule name, e.g. ``check("min", age, 18)``.

        Raises:
            KeyError: if ``rule`` is not in RULES
        """
        try:
            method = RULES[rule]
        except KeyError:
            raise KeyError(f"Unknown validation rule '{rule}'") from None
        return getattr(self, method)(value, *args, **kwargs)


# Module-level singleton
default_validator = Validator()
