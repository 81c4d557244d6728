from __future__ import annotations

from typing import Callable, Iterable, TypeVar

from ..logging_config import logger
from .rw_lock import ReadWriteLock

T = TypeVar("T")


class WordStore:
    """Thread-safe set of banned words.

    Reads (``words``, ``snapshot``, ``read``) share the lock; ``add`` and
    ``delete`` hold it exclusively.
    """

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._lock = ReadWriteLock()
        self._words: set[str] = set(words)

    def add(self, *words: str) -> None:
        if not words:
            return
        with self._lock.write_locked():
            self._words.update(words)
            size = len(self._words)
        logger.debug(f"Added {len(words)} word(s), {size} active")

    def delete(self, *words: str) -> None:
        if not words:
            return
        with self._lock.write_locked():
            self._words.difference_update(words)
            size = len(self._words)
        logger.debug(f"Deleted {len(words)} word(s), {size} active")

    def words(self) -> list[str]:
        with self._lock.read_locked():
            return list(self._words)

    def snapshot(self) -> frozenset[str]:
        with self._lock.read_locked():
            return frozenset(self._words)

    def read(self, fn: Callable[[set[str]], T]) -> T:
        """Run ``fn`` against the live set while holding the shared lock.

        ``fn`` must not mutate the set or call back into the store's writers.
        """
        with self._lock.read_locked():
            return fn(self._words)

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._words)

    def __contains__(self, word: object) -> bool:
        with self._lock.read_locked():
            return word in self._words
