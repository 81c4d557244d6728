from __future__ import annotations

import unicodedata

from ..errors import MalformedTextError


def fold_diacritics(text: str) -> str:
    """Strip combining marks so accented letters compare equal to their base letter.

    "café" -> "cafe". Raises MalformedTextError for text that is not valid
    Unicode (lone surrogates smuggled in through ``surrogateescape`` and similar).
    """
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise MalformedTextError(f"Cannot normalize text: {e.reason} at position {e.start}") from e

    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")
    return unicodedata.normalize("NFC", stripped)
