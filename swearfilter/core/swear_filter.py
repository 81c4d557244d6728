from __future__ import annotations

from dataclasses import asdict, fields
from typing import Iterable

from ..errors import MalformedTextError
from ..logging_config import logger
from ..safety.matcher import check_message
from ..safety.settings import FilterSettings
from ..services.word_store import WordStore


class SwearFilter:
    """Checks messages against a mutable list of bad words.

    The toggles are plain attributes and may be flipped at any time by the
    owner of the filter:

    - ``disable_normalize``: keep diacritics (à stays à)
    - ``disable_spaced_tab``: keep tabs instead of turning them into spaces
    - ``disable_multi_whitespace_stripping``: keep leading, trailing and repeated whitespace
    - ``disable_zero_width_stripping``: keep zero-width spaces
    - ``disable_leet_speak``: skip leet-speak rewriting
    - ``enable_spaced_bypass``: also match with spaces removed (h e l l -> hell)
    """

    def __init__(self, words: Iterable[str] = (), enable_spaced_bypass: bool = False) -> None:
        self.disable_normalize = False
        self.disable_spaced_tab = False
        self.disable_multi_whitespace_stripping = False
        self.disable_zero_width_stripping = False
        self.disable_leet_speak = False
        self.enable_spaced_bypass = enable_spaced_bypass
        self._store = WordStore(words)

    def check(self, message: str | bytes) -> list[str]:
        """Return every bad word the message trips, in no particular order.

        An empty list means nothing matched or no words are configured.
        Raises MalformedTextError when the message is not valid Unicode.
        """
        if isinstance(message, (bytes, bytearray)):
            try:
                message = bytes(message).decode("utf-8")
            except UnicodeDecodeError as e:
                logger.warning(f"Rejected message that is not valid UTF-8: {e.reason}")
                raise MalformedTextError(f"Message is not valid UTF-8: {e.reason}") from e

        settings = self.settings()
        try:
            tripped, size = self._store.read(
                lambda words: (check_message(message, words, settings), len(words))
            )
        except MalformedTextError as e:
            logger.warning(f"Rejected message during normalization: {e}")
            raise

        logger.debug(f"Checked message against {size} words, {len(tripped)} tripped")
        return tripped

    def is_clean(self, message: str | bytes) -> bool:
        return not self.check(message)

    def add(self, *words: str) -> None:
        self._store.add(*words)

    def delete(self, *words: str) -> None:
        self._store.delete(*words)

    def words(self) -> list[str]:
        return self._store.words()

    def settings(self) -> FilterSettings:
        return FilterSettings(**{f.name: bool(getattr(self, f.name)) for f in fields(FilterSettings)})

    def apply_settings(self, settings: FilterSettings) -> None:
        for name, value in asdict(settings).items():
            setattr(self, name, value)

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, word: object) -> bool:
        return word in self._store

    def __repr__(self) -> str:
        return f"SwearFilter(words={len(self._store)}, settings={self.settings()!r})"


def new_swear_filter(enable_spaced_bypass: bool = False, *words: str) -> SwearFilter:
    """Build a filter seeded with ``words``."""
    return SwearFilter(words, enable_spaced_bypass=enable_spaced_bypass)
