"""Bad-word detection that sees through leet speak, accents and whitespace tricks."""

from .core.swear_filter import SwearFilter, new_swear_filter
from .errors import MalformedTextError, SwearFilterError
from .safety.leet import normalize_leet_speak
from .safety.matcher import BLANK_MESSAGE_SENTINEL, find_tripped_words, normalize_message
from .safety.settings import FilterSettings
from .safety.unicode_fold import fold_diacritics
from .safety.whitespace import WhitespaceSettings, sanitize_whitespace

__all__ = [
    "BLANK_MESSAGE_SENTINEL",
    "FilterSettings",
    "MalformedTextError",
    "SwearFilter",
    "SwearFilterError",
    "WhitespaceSettings",
    "find_tripped_words",
    "fold_diacritics",
    "new_swear_filter",
    "normalize_leet_speak",
    "normalize_message",
    "sanitize_whitespace",
]
