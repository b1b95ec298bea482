"""Reference data: default HTML allow-list and date-format tokens.

Fixed tables the predicates fall back to when the caller (or Settings)
does not supply its own.
"""

# ──────────────────────────────────────────────────────────────────────
# HTML ALLOW-LIST
# ──────────────────────────────────────────────────────────────────────

DEFAULT_ALLOWED_TAGS: tuple[str, ...] = (
    "a",
    "b",
    "blockquote",
    "br",
    "code",
    "div",
    "em",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "hr",
    "i",
    "li",
    "ol",
    "p",
    "s",
    "span",
    "strong",
    "u",
    "ul",
)


# ──────────────────────────────────────────────────────────────────────
# DATE FORMAT TOKENS
# ──────────────────────────────────────────────────────────────────────

DEFAULT_DATE_FORMAT = "YYYY-MM-DD"

# Token → strftime directive. Longest tokens first so "MMMM" wins over "MM".
DATE_FORMAT_TOKENS: dict[str, str] = {
    "YYYY": "%Y",
    "MMMM": "%B",
    "MMM": "%b",
    "YY": "%y",
    "MM": "%m",
    "DD": "%d",
    "HH": "%H",
    "hh": "%I",
    "mm": "%M",
    "ss": "%S",
    "A": "%p",
}
