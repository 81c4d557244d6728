"""Whitespace cleanup applied after leet and diacritic normalization."""

from __future__ import annotations

import re
from dataclasses import dataclass

ZERO_WIDTH_SPACE = "\u200b"

# Unicode general category Zs (space separators).
SPACE_SEPARATORS = " \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a\u202f\u205f\u3000"

# ASCII whitespace (tab, newline, form feed, carriage return) plus the space
# separators. Vertical tab and U+2028/U+2029 are not in the class.
_WHITESPACE_CLASS = "[" + re.escape("\t\n\f\r" + SPACE_SEPARATORS) + "]"

_EDGE_WHITESPACE_RE = re.compile(rf"^{_WHITESPACE_CLASS}+|{_WHITESPACE_CLASS}+$")
_WHITESPACE_RUN_RE = re.compile(rf"{_WHITESPACE_CLASS}{{2,}}")


@dataclass(frozen=True)
class WhitespaceSettings:
    convert_tabs: bool = True
    strip_zero_width: bool = True
    collapse_runs: bool = True


def sanitize_whitespace(text: str, settings: WhitespaceSettings | None = None) -> str:
    """Apply the enabled whitespace steps in order: tabs, zero-width, runs.

    Runs of two or more whitespace characters are deleted outright, not
    reduced to a single space, so "foo  bar" becomes "foobar".
    """
    settings = settings or WhitespaceSettings()

    if settings.convert_tabs:
        text = text.replace("\t", " ")

    if settings.strip_zero_width:
        text = text.replace(ZERO_WIDTH_SPACE, "")

    if settings.collapse_runs:
        text = _EDGE_WHITESPACE_RE.sub("", text)
        text = _WHITESPACE_RUN_RE.sub("", text)

    return text
