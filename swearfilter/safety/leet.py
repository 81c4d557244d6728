from __future__ import annotations

from .leet_tables import AMBIGUOUS_LEET, MULTI_CHAR_LEET, SINGLE_CHAR_LEET


def expand_ambiguous(text: str) -> list[str]:
    """Return one copy of ``text`` per (ambiguous symbol, candidate) pair present.

    Every occurrence of a symbol is swapped for the same candidate; different
    symbols are expanded independently, never jointly.
    """
    variants: list[str] = []
    for symbol, candidates in AMBIGUOUS_LEET:
        if symbol not in text:
            continue
        for candidate in candidates:
            variants.append(text.replace(symbol, candidate))
    return variants


def normalize_leet_speak(text: str) -> str:
    """Rewrite leet-speak into letters.

    Multi-character sequences go first, then single characters. If the result
    still holds ambiguous symbols, every interpretation is returned joined by
    single spaces so a substring search can hit any of them.
    """
    normalized = text.lower()

    for leet, letter in MULTI_CHAR_LEET:
        normalized = normalized.replace(leet, letter)

    for leet, letter in SINGLE_CHAR_LEET:
        normalized = normalized.replace(leet, letter)

    variants = expand_ambiguous(normalized)
    if variants:
        return " ".join(variants)
    return normalized
