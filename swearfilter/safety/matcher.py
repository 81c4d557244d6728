"""Message normalization pipeline and bad-word matching."""

from __future__ import annotations

from typing import Iterable

from .leet import normalize_leet_speak
from .settings import FilterSettings
from .unicode_fold import fold_diacritics
from .whitespace import sanitize_whitespace

# A banned "word" consisting of one space flags messages that are empty once
# normalized (only whitespace or zero-width characters).
BLANK_MESSAGE_SENTINEL = " "


def normalize_message(text: str, settings: FilterSettings | None = None) -> str:
    """Lower-case ``text`` and run leet, diacritic and whitespace normalization."""
    settings = settings or FilterSettings()
    message = text.lower()

    if not settings.disable_leet_speak:
        message = normalize_leet_speak(message)

    if not settings.disable_normalize:
        message = fold_diacritics(message)

    return sanitize_whitespace(message, settings.whitespace())


def find_tripped_words(message: str, bad_words: Iterable[str], enable_spaced_bypass: bool = False) -> list[str]:
    """Return the bad words contained in an already normalized ``message``.

    With ``enable_spaced_bypass`` a word also trips when it appears in the
    message after every ASCII space has been removed. Each word is reported once.
    """
    tripped: list[str] = []
    check_blank = False
    compact: str | None = None

    for word in bad_words:
        if word == BLANK_MESSAGE_SENTINEL:
            check_blank = True
            continue

        if word in message:
            tripped.append(word)
            continue

        if enable_spaced_bypass:
            if compact is None:
                compact = message.replace(" ", "")
            if word in compact:
                tripped.append(word)

    if check_blank and message == "":
        tripped.append(BLANK_MESSAGE_SENTINEL)

    return tripped


def check_message(text: str, bad_words: Iterable[str], settings: FilterSettings | None = None) -> list[str]:
    """Normalize ``text`` and match it against ``bad_words``.

    An empty word collection short-circuits to an empty result without
    normalizing, so malformed text is only reported when there is something to
    match against.
    """
    words = list(bad_words)
    if not words:
        return []

    settings = settings or FilterSettings()
    message = normalize_message(text, settings)
    return find_tripped_words(message, words, settings.enable_spaced_bypass)
