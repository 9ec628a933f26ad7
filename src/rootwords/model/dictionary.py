"""
Word Dictionary
===============
The word-validity collaborator: a set of known words read once from a
newline-delimited word list.

Until the list is loaded every word is unknown, so commits fail closed.
"""
from __future__ import annotations

import logging
import os
from typing import Iterable, Optional

logger = logging.getLogger(__name__)


def read_word_list(path: str | os.PathLike) -> tuple[str, ...]:
    """
    Read a word list file: one word per line, trimmed and lower-cased.
    Blank lines and repeats are skipped; file order is kept.

    Raises:
        OSError: If the file cannot be read.
    """
    with open(path, "r", encoding="utf-8") as f:
        return _unique_words(line for line in f)


def _unique_words(words: Iterable[str]) -> tuple[str, ...]:
    normalized = (w.strip().lower() for w in words if w)
    return tuple(dict.fromkeys(w for w in normalized if w))


class WordDictionary:
    def __init__(self, words: Optional[Iterable[str]] = None) -> None:
        self._words: frozenset[str] = frozenset()
        self._word_list: tuple[str, ...] = ()
        self._loaded = False
        if words is not None:
            self.install(words)

    @property
    def loaded(self) -> bool:
        return self._loaded

    def __len__(self) -> int:
        return len(self._words)

    def load(self, path: str | os.PathLike) -> None:
        """Read the word list at `path`. Only the first load takes effect."""
        if self._loaded:
            logger.warning(f"Dictionary already loaded, ignoring '{path}'.")
            return
        logger.info(f"Loading dictionary from: {path}")
        self.install(read_word_list(path))

    def install(self, words: Iterable[str]) -> None:
        """Use an already-read word list (e.g. from a background loader), keeping its order."""
        if self._loaded:
            logger.warning("Dictionary already loaded, ignoring new word set.")
            return
        self._word_list = _unique_words(words)
        self._words = frozenset(self._word_list)
        self._loaded = True
        logger.info(f"Dictionary ready with {len(self._words)} words.")

    def is_valid_word(self, word: str) -> bool:
        """Case-insensitive membership test; always False before loading."""
        if not self._loaded:
            return False
        return word.lower() in self._words

    __contains__ = is_valid_word

    def find_subset_words(self, letters: str, min_length: int = 4) -> list[str]:
        return find_subset_words(self._word_list, letters, min_length)


def find_subset_words(words: Iterable[str], letters: str, min_length: int = 4) -> list[str]:
    """
    Words spelled only with the given letters (each letter may repeat).

    Args:
        words: Candidate words, returned in their given order.
        letters: The available letters, any case.
        min_length: Shortest word to report.
    """
    available = set(letters.lower())
    if not available:
        return []
    return [
        word for word in words
        if len(word) >= min_length and set(word.lower()) <= available
    ]
