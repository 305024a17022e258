"""Word-frequency summary used to feed a word cloud."""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass

from data_designer_readability.settings import DEFAULT_SETTINGS, Settings

_NON_WORD_RE = re.compile(r"[^\w\s']", re.ASCII)

_STOPWORDS = frozenset({
    "the", "and", "for", "are", "but", "not", "you", "all", "can", "had", "her",
    "was", "one", "our", "out", "day", "get", "has", "him", "his", "how", "man",
    "new", "now", "old", "see", "two", "way", "who", "boy", "did", "its", "let",
    "put", "say", "she", "too", "use",
})


@dataclass(frozen=True)
class WordFrequency:
    text: str
    count: int
    size: int

    def to_payload(self) -> dict[str, object]:
        return {"text": self.text, "count": self.count, "size": self.size}


def word_frequencies(text: str, settings: Settings | None = None) -> list[WordFrequency]:
    """Most frequent words of ``text``, highest count first.

    Ties keep the order in which the words first appear. ``size`` is a font
    size proportional to the count and bounded by the word cloud settings.
    """
    settings = settings or DEFAULT_SETTINGS
    tokens = _NON_WORD_RE.sub(" ", text.lower()).split()
    counts = Counter(t for t in tokens if len(t) >= settings.word_cloud_min_word_length)

    kept = [
        (word, count) for word, count in counts.items()
        if count >= settings.word_cloud_min_frequency
        and not (settings.exclude_stop_words and word in _STOPWORDS)
    ]
    kept.sort(key=lambda item: item[1], reverse=True)

    return [
        WordFrequency(
            text=word,
            count=count,
            size=max(settings.word_cloud_min_size, min(settings.word_cloud_max_size, count * settings.word_cloud_size_step)),
        )
        for word, count in kept[: settings.word_cloud_max_words]
    ]
