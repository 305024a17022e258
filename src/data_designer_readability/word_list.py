"""Reference list of familiar words used to classify difficult words.

The packaged list is the Dale-Chall list of roughly 3000 words known to most
fourth-grade readers. It is loaded once when this module is imported and is
read-only afterwards, so calculators on any thread can share it.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)

_DATA_DIR = os.path.join(os.path.dirname(__file__), "data")
DEFAULT_WORD_LIST_PATH = os.path.join(_DATA_DIR, "dale_chall_words.txt")


class WordListError(ValueError):
    """Raised when a reference word list cannot be loaded or is malformed."""


@dataclass(frozen=True)
class ReferenceWordList:
    """Immutable set of lowercase familiar words."""

    words: frozenset[str]

    @classmethod
    def from_words(cls, words: Iterable[str]) -> ReferenceWordList:
        entries = frozenset(words)
        if not entries:
            raise WordListError("Reference word list is empty")
        for word in entries:
            if not isinstance(word, str) or not word or word != word.strip() or " " in word:
                raise WordListError(f"Invalid reference word entry: {word!r}")
            if word != word.lower():
                raise WordListError(f"Reference word entries must be lowercase: {word!r}")
        return cls(words=entries)

    def __contains__(self, word: object) -> bool:
        return word in self.words

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def __len__(self) -> int:
        return len(self.words)


def load_word_list(path: str | None = None) -> ReferenceWordList:
    """Read a newline-delimited word list; blank lines and ``#`` comments are skipped."""
    path = path or DEFAULT_WORD_LIST_PATH
    try:
        with open(path, "r", encoding="utf-8") as handle:
            lines = [line.strip() for line in handle]
    except OSError as exc:
        raise WordListError(f"Could not read reference word list {path!r}: {exc}") from exc

    word_list = ReferenceWordList.from_words(line for line in lines if line and not line.startswith("#"))
    logger.debug(f"Loaded {len(word_list)} reference words from {path}")
    return word_list


DEFAULT_WORD_LIST = load_word_list()
