"""Identifier case conversion for ``rename_all`` directives."""

from __future__ import annotations

import re
from typing import Callable

from variant_resolver.common import CaseStyle

_SEPARATOR_PATTERN = re.compile(r"[\W_]+")

WordFormat = Callable[[str], str]


def _lower(word: str) -> str:
    return word.lower()


def _upper(word: str) -> str:
    return word.upper()


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


# style -> (separator, first word, remaining words)
_STYLE_FORMATS: dict[CaseStyle, tuple[str, WordFormat, WordFormat]] = {
    CaseStyle.LOWER: ("", _lower, _lower),
    CaseStyle.UPPER: ("", _upper, _upper),
    CaseStyle.SNAKE: ("_", _lower, _lower),
    CaseStyle.SCREAMING_SNAKE: ("_", _upper, _upper),
    CaseStyle.KEBAB: ("-", _lower, _lower),
    CaseStyle.SCREAMING_KEBAB: ("-", _upper, _upper),
    CaseStyle.PASCAL: ("", _capitalize, _capitalize),
    CaseStyle.CAMEL: ("", _lower, _capitalize),
    CaseStyle.TITLE: (" ", _capitalize, _capitalize),
    CaseStyle.TRAIN: ("-", _capitalize, _capitalize),
    CaseStyle.LOWER_SPACED: (" ", _lower, _lower),
    CaseStyle.UPPER_SPACED: (" ", _upper, _upper),
}


def convert(name: str, style: CaseStyle) -> str:
    """Rewrites a PascalCase-style identifier under the given case style."""

    if style is CaseStyle.VERBATIM:
        return name

    separator, first_format, rest_format = _STYLE_FORMATS[style]
    words = split_words(name)
    if not words:
        return ""

    head, *tail = words
    return separator.join([first_format(head), *(rest_format(word) for word in tail)])


def split_words(name: str) -> list[str]:
    """Splits an identifier into words.

    Words break at separators (anything that is not a letter or digit),
    where an uppercase letter follows a lowercase letter or digit, and
    before the last capital of an acronym run (``HTTPServer`` ->
    ``HTTP``, ``Server``). Digits stay with the preceding word.
    """

    words: list[str] = []
    for chunk in _SEPARATOR_PATTERN.split(name):
        if chunk:
            words.extend(_split_chunk(chunk))
    return words


def _split_chunk(chunk: str) -> list[str]:
    words: list[str] = []
    start = 0
    for index in range(1, len(chunk)):
        prev, cur = chunk[index - 1], chunk[index]
        if not cur.isupper():
            continue
        nxt = chunk[index + 1] if index + 1 < len(chunk) else ""
        if prev.islower() or prev.isdigit() or (prev.isupper() and nxt.islower()):
            words.append(chunk[start:index])
            start = index
    words.append(chunk[start:])
    return words
