"""Leet-speak substitution tables.

Each table is an ordered tuple of pairs. Order matters for the multi-character
table because its patterns can share characters (``|<`` and ``1<`` both end in
``<``, which is itself a single-character rule); the other two are ordered only
so that every run produces the same output.
"""

from __future__ import annotations

from types import MappingProxyType

MULTI_CHAR_LEET: tuple[tuple[str, str], ...] = (
    ("vv", "w"),
    ("uu", "w"),
    ("\\/\\/", "w"),
    ("><", "x"),
    ("1<", "k"),
    ("|<", "k"),
    ("()", "o"),
    ("[]", "o"),
    ("ph", "f"),
)

SINGLE_CHAR_LEET: tuple[tuple[str, str], ...] = (
    ("4", "a"),
    ("@", "a"),
    ("8", "b"),
    ("(", "c"),
    ("<", "c"),
    ("[", "c"),
    ("3", "e"),
    ("€", "e"),  # euro sign
    ("6", "g"),
    ("9", "g"),
    ("#", "h"),
    ("j", "i"),
    ("0", "o"),
    ("5", "s"),
    ("$", "s"),
    ("7", "t"),
    ("+", "t"),
    ("v", "u"),
    ("2", "z"),
)

AMBIGUOUS_LEET: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("!", ("i", "l")),
    ("|", ("i", "l")),
    ("1", ("i", "l")),
    ("]", ("i", "l")),
    ("}", ("i", "l")),
)

# Read-only lookups for callers that only need to ask "what does X become?"
MULTI_CHAR_MAP = MappingProxyType(dict(MULTI_CHAR_LEET))
SINGLE_CHAR_MAP = MappingProxyType(dict(SINGLE_CHAR_LEET))
AMBIGUOUS_MAP = MappingProxyType(dict(AMBIGUOUS_LEET))
