"""Date parsing against a format descriptor, with a strict round-trip check.

Format descriptors use moment-style tokens (see ``DATE_FORMAT_TOKENS``),
e.g. ``"YYYY-MM-DD"`` or ``"DD.MM.YYYY HH:mm"``. Anything that is not a
token is a literal. A descriptor containing ``%`` is treated as a native
strftime format and used unchanged.
"""

import re
from datetime import date, datetime, time
from functools import lru_cache
from typing import Any, Optional

from formguard.reference_data import DATE_FORMAT_TOKENS

_TOKEN_RE = re.compile("|".join(re.escape(t) for t in DATE_FORMAT_TOKENS))
_YEAR_DIRECTIVE = re.compile(r"%%|%Y")


@lru_cache(maxsize=128)
def to_strftime(fmt: str) -> str:
    """Translate a token format descriptor into a strftime directive string.

    Args:
        fmt: Descriptor such as "YYYY-MM-DD", or a strftime string ("%Y-%m-%d")

    Returns:
        The equivalent strftime format
    """
    if "%" in fmt:
        return fmt

    out = []
    pos = 0
    for match in _TOKEN_RE.finditer(fmt):
        out.append(fmt[pos:match.start()])
        out.append(DATE_FORMAT_TOKENS[match.group()])
        pos = match.end()
    out.append(fmt[pos:])
    return "".join(out)


def parse_date(value: Any, fmt: str) -> Optional[datetime]:
    """Parse ``value`` under ``fmt``; None if it does not parse.

    date / datetime instances are accepted as already parsed. Plain dates
    are widened to midnight so they compare against datetimes.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if not isinstance(value, str):
        return None

    try:
        return datetime.strptime(value, to_strftime(fmt))
    except ValueError:
        return None


def format_date(moment: datetime, fmt: str) -> str:
    """Format ``moment`` under ``fmt``; four-digit years are always zero-padded."""
    year = f"{moment.year:04d}"
    directives = _YEAR_DIRECTIVE.sub(lambda m: year if m.group() == "%Y" else m.group(), to_strftime(fmt))
    return moment.strftime(directives)


def is_valid_date(value: Any, fmt: str) -> bool:
    """True when ``value`` parses under ``fmt`` and re-formats to the identical string.

    The round trip rejects values the parser tolerates but that are not in
    canonical form, e.g. "2025-1-7" for "YYYY-MM-DD".
    """
    if not isinstance(value, str):
        return False

    parsed = parse_date(value, fmt)
    if parsed is None:
        return False
    return format_date(parsed, fmt) == value
