"""HTML tag tokenizer and allow-list stripping.

The content predicates strip tags and compare the result with the input,
so the tokenizer must reproduce every byte it keeps. Rules:

- A tag opens at "<" followed by an ASCII letter, "/", "!" or "?".
  Any other "<" is plain text ("a < b", "<3").
- A tag closes at the first ">" outside a quoted attribute value. An
  unterminated tag runs to the end of the input.
- "<!-- ... -->" comments, declarations ("<!DOCTYPE html>") and processing
  instructions ("<?xml ...?>") are never kept.
- Tag names are matched case-insensitively. Attributes are not inspected;
  a kept tag is emitted verbatim.
"""

import re
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Iterable, Iterator, Optional, Union

_TAG_NAME = re.compile(r"/?([A-Za-z][A-Za-z0-9-]*)")
_BRACKETED_NAME = re.compile(r"<\s*/?\s*([A-Za-z][A-Za-z0-9-]*)[^>]*>")

AllowedTags = Union[str, Iterable[str], None]


class TokenKind(str, Enum):
    TEXT = "text"
    TAG = "tag"
    COMMENT = "comment"
    DECLARATION = "declaration"


@dataclass(frozen=True)
class Token:
    """A slice of the input. ``text`` is always the original substring."""

    kind: TokenKind
    text: str
    name: Optional[str] = None  # Lowercased tag name, TAG tokens only
    closing: bool = False


def _opens_tag(char: str) -> bool:
    return (char.isascii() and char.isalpha()) or char in "/!?"


def _tag_end(value: str, start: int) -> int:
    """Index just past the ">" closing the tag that begins before ``start``."""
    quote = None
    for i in range(start, len(value)):
        char = value[i]
        if quote:
            if char == quote:
                quote = None
        elif char in "\"'":
            quote = char
        elif char == ">":
            return i + 1
    return len(value)


def tokenize(value: str) -> Iterator[Token]:
    """Split ``value`` into text, tag, comment and declaration tokens.

    Concatenating the ``text`` of every token yields ``value`` unchanged.
    """
    length = len(value)
    text_start = 0
    i = 0

    while i < length:
        if value[i] != "<" or i + 1 >= length or not _opens_tag(value[i + 1]):
            i += 1
            continue

        if text_start < i:
            yield Token(TokenKind.TEXT, value[text_start:i])

        if value.startswith("<!--", i):
            end = value.find("-->", i + 4)
            stop = length if end == -1 else end + 3
            yield Token(TokenKind.COMMENT, value[i:stop])
        elif value[i + 1] in "!?":
            stop = _tag_end(value, i + 2)
            yield Token(TokenKind.DECLARATION, value[i:stop])
        else:
            stop = _tag_end(value, i + 1)
            match = _TAG_NAME.match(value, i + 1)
            # "</ >" and similar carry no usable name and are never allowed
            name = match.group(1).lower() if match else None
            yield Token(
                TokenKind.TAG,
                value[i:stop],
                name=name,
                closing=value[i + 1] == "/",
            )

        i = stop
        text_start = stop

    if text_start < length:
        yield Token(TokenKind.TEXT, value[text_start:])


@lru_cache(maxsize=64)
def _parse_tag_string(allowed: str) -> frozenset[str]:
    if "<" in allowed:
        return frozenset(name.lower() for name in _BRACKETED_NAME.findall(allowed))
    return frozenset(part.lower() for part in re.split(r"[\s,]+", allowed) if part)


def parse_allowed_tags(allowed: AllowedTags) -> frozenset[str]:
    """Normalize an allow-list to a set of lowercase tag names.

    Accepts PHP-style bracketed strings ("<a><b>"), comma/space separated
    names ("a, b") or any iterable of names ("a", "<b>", "B").
    """
    if allowed is None:
        return frozenset()
    if isinstance(allowed, str):
        return _parse_tag_string(allowed)
    return frozenset(name.strip().strip("<>/").strip().lower() for name in allowed if name.strip())


def strip_tags(value: str, allowed_tags: AllowedTags = ()) -> str:
    """Remove every tag from ``value`` except those named in ``allowed_tags``.

    Kept tags are copied byte for byte. Comments and declarations are always removed.
    """
    allowed = parse_allowed_tags(allowed_tags)
    kept = []
    for token in tokenize(value):
        if token.kind == TokenKind.TEXT:
            kept.append(token.text)
        elif token.kind == TokenKind.TAG and token.name in allowed:
            kept.append(token.text)
    return "".join(kept)
