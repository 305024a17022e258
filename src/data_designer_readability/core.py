# Readability metrics for English prose.
#
# Tokenizes text, estimates syllables with a vowel-group heuristic, classifies
# difficult words against a familiar-word list, and evaluates eight classic
# readability formulas. All functions are pure; no state survives a call.

from __future__ import annotations

import math
import re
from dataclasses import asdict, dataclass

from data_designer_readability.frequency import word_frequencies
from data_designer_readability.interpretation import interpret
from data_designer_readability.settings import DEFAULT_SETTINGS, Settings
from data_designer_readability.word_list import DEFAULT_WORD_LIST, ReferenceWordList

# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TextStatistics:
    """Counts gathered from one text, consumed by the formula functions."""

    word_count: int
    sentence_count: int
    syllable_count: int
    character_count: int
    complex_word_count: int
    difficult_word_count: int
    words: tuple[str, ...]
    syllables: tuple[int, ...]

    @property
    def avg_words_per_sentence(self) -> float:
        return self.word_count / self.sentence_count

    @property
    def avg_syllables_per_word(self) -> float:
        return self.syllable_count / self.word_count

    @property
    def complex_word_pct(self) -> float:
        return (self.complex_word_count / self.word_count) * 100

    @property
    def difficult_word_pct(self) -> float:
        return (self.difficult_word_count / self.word_count) * 100


@dataclass(frozen=True)
class ReadabilityMetrics:
    gunning_fog: float
    flesch_reading_ease: float
    flesch_kincaid_grade: float
    smog_index: float
    coleman_liau_index: float
    automated_readability_index: float
    dale_chall_readability_score: float
    difficult_words: int
    linsear_write_formula: float

    word_count: int
    sentence_count: int
    syllable_count: int
    character_count: int

    @classmethod
    def empty(cls) -> ReadabilityMetrics:
        return cls(
            gunning_fog=0.0, flesch_reading_ease=0.0, flesch_kincaid_grade=0.0,
            smog_index=0.0, coleman_liau_index=0.0, automated_readability_index=0.0,
            dale_chall_readability_score=0.0, difficult_words=0, linsear_write_formula=0.0,
            word_count=0, sentence_count=0, syllable_count=0, character_count=0,
        )

    def to_payload(self) -> dict[str, float | int]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Tokenizer
# ---------------------------------------------------------------------------

_WHITESPACE_RE = re.compile(r"\s+")
_NON_WORD_RE = re.compile(r"[^\w\s']", re.ASCII)
_SENTENCE_END_RE = re.compile(r"[.!?]+(?=\s+[A-Z]|$)")
_NON_LETTER_RE = re.compile(r"[^a-z]")

_VOWELS = frozenset("aeiouy")


def normalize_text(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def _raw_tokens(normalized: str) -> list[str]:
    # Case is kept so the proper-noun check can see the first letter.
    return _NON_WORD_RE.sub(" ", normalized).split()


def count_sentences(normalized: str) -> int:
    """Count terminal punctuation runs followed by a capital letter or the end of text.

    Abbreviations and decimals are miscounted; the result is never below 1.
    """
    return max(1, len(_SENTENCE_END_RE.findall(normalized)))


def tokenize(text: str) -> tuple[list[str], int]:
    """Split text into lowercased words (in order) and a sentence count."""
    normalized = normalize_text(text)
    words = [token.lower() for token in _raw_tokens(normalized)]
    return words, count_sentences(normalized)


# ---------------------------------------------------------------------------
# Syllables and word classes
# ---------------------------------------------------------------------------


def count_syllables(word: str) -> int:
    letters = _NON_LETTER_RE.sub("", word.lower())
    if len(letters) <= 3:
        return 1

    count = 0
    prev_is_vowel = False
    for ch in letters:
        is_vowel = ch in _VOWELS
        if is_vowel and not prev_is_vowel:
            count += 1
        prev_is_vowel = is_vowel

    # silent 'e'
    if letters.endswith("e") and count > 1:
        count -= 1
    return max(1, count)


def is_proper_noun(token: str) -> bool:
    return bool(token) and "A" <= token[0] <= "Z"


def is_difficult(word: str, word_list: ReferenceWordList) -> bool:
    return word.lower() not in word_list


def is_complex(token: str) -> bool:
    return count_syllables(token) >= 3 and not is_proper_noun(token)


# ---------------------------------------------------------------------------
# Formulas (unclamped)
# ---------------------------------------------------------------------------


def gunning_fog(stats: TextStatistics) -> float:
    return 0.4 * (stats.avg_words_per_sentence + stats.complex_word_pct)


def flesch_reading_ease(stats: TextStatistics) -> float:
    return 206.835 - (1.015 * stats.avg_words_per_sentence) - (84.6 * stats.avg_syllables_per_word)


def flesch_kincaid_grade(stats: TextStatistics) -> float:
    return (0.39 * stats.avg_words_per_sentence) + (11.8 * stats.avg_syllables_per_word) - 15.59


def smog_index(stats: TextStatistics) -> float:
    return 1.043 * math.sqrt(stats.complex_word_count * (30 / stats.sentence_count)) + 3.1291


def coleman_liau_index(stats: TextStatistics) -> float:
    letters_per_100 = (stats.character_count / stats.word_count) * 100
    sentences_per_100 = (stats.sentence_count / stats.word_count) * 100
    return 0.0588 * letters_per_100 - 0.296 * sentences_per_100 - 15.8


def automated_readability_index(stats: TextStatistics) -> float:
    return 4.71 * (stats.character_count / stats.word_count) + 0.5 * stats.avg_words_per_sentence - 21.43


def dale_chall_score(stats: TextStatistics) -> float:
    pct = stats.difficult_word_pct
    score = 0.1579 * pct + 0.0496 * stats.avg_words_per_sentence
    if pct > 5:
        score += 3.6365
    return score


def linsear_write_formula(stats: TextStatistics, sample_size: int = 100) -> float:
    sample = stats.syllables[:sample_size]
    easy = sum(1 for n in sample if n <= 2)
    hard = len(sample) - easy
    raw_score = (easy * 1 + hard * 3) / (len(sample) / stats.sentence_count)
    if raw_score > 10:
        return raw_score / 2
    return (raw_score - 2) / 2


def compute_metrics(stats: TextStatistics, settings: Settings | None = None) -> ReadabilityMetrics:
    """Evaluate every formula and apply the floor (and Flesch ceiling) clamps."""
    settings = settings or DEFAULT_SETTINGS
    return ReadabilityMetrics(
        gunning_fog=max(0.0, gunning_fog(stats)),
        flesch_reading_ease=max(0.0, min(100.0, flesch_reading_ease(stats))),
        flesch_kincaid_grade=max(0.0, flesch_kincaid_grade(stats)),
        smog_index=max(0.0, smog_index(stats)),
        coleman_liau_index=max(0.0, coleman_liau_index(stats)),
        automated_readability_index=max(0.0, automated_readability_index(stats)),
        dale_chall_readability_score=max(0.0, dale_chall_score(stats)),
        difficult_words=stats.difficult_word_count,
        linsear_write_formula=max(0.0, linsear_write_formula(stats, settings.linsear_sample_size)),
        word_count=stats.word_count,
        sentence_count=stats.sentence_count,
        syllable_count=stats.syllable_count,
        character_count=stats.character_count,
    )


# ---------------------------------------------------------------------------
# Calculator
# ---------------------------------------------------------------------------


class ReadabilityCalculator:
    """Readability scorer bound to one reference word list and settings."""

    def __init__(self, word_list: ReferenceWordList | None = None, settings: Settings | None = None) -> None:
        self.word_list = DEFAULT_WORD_LIST if word_list is None else word_list
        self.settings = settings or DEFAULT_SETTINGS

    def statistics(self, text: str) -> TextStatistics | None:
        """Gather counts for ``text``; ``None`` when it holds no words.

        ``character_count`` is in code points, so characters outside the Basic
        Multilingual Plane (emoji) count once rather than as two UTF-16 units.
        """
        normalized = normalize_text(text)
        tokens = _raw_tokens(normalized)
        if not tokens:
            return None

        words = tuple(token.lower() for token in tokens)
        syllables = tuple(count_syllables(w) for w in words)
        return TextStatistics(
            word_count=len(words),
            sentence_count=count_sentences(normalized),
            syllable_count=sum(syllables),
            character_count=len(normalized),
            complex_word_count=sum(1 for token in tokens if is_complex(token)),
            difficult_word_count=sum(1 for w in words if is_difficult(w, self.word_list)),
            words=words,
            syllables=syllables,
        )

    def calculate(self, text: str) -> ReadabilityMetrics:
        stats = self.statistics(text)
        if stats is None:
            return ReadabilityMetrics.empty()
        return compute_metrics(stats, self.settings)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def calculate_readability_metrics(
    text: str, word_list: ReferenceWordList | None = None, settings: Settings | None = None
) -> ReadabilityMetrics:
    """Score text with the eight readability formulas.

    Text without any words yields an all-zero record instead of raising.
    """
    return ReadabilityCalculator(word_list, settings).calculate(text)


def analyze_text(text: str, settings: Settings | None = None, word_list: ReferenceWordList | None = None) -> dict:
    """Score text and describe the result.

    Args:
        text: The prose to analyze.
        settings: Optional overrides. Uses sensible defaults if omitted.
        word_list: Familiar-word list for Dale-Chall. Defaults to the packaged list.

    Returns:
        Dict with every ReadabilityMetrics field plus ``interpretations``
        (metric name -> label and level) and ``word_frequencies``.
    """
    settings = settings or DEFAULT_SETTINGS
    metrics = calculate_readability_metrics(text, word_list, settings)
    result: dict = metrics.to_payload()
    result["interpretations"] = interpret(metrics, show_advanced=settings.show_advanced_metrics)
    result["word_frequencies"] = [wf.to_payload() for wf in word_frequencies(text, settings)]
    return result


def is_readable(metrics: ReadabilityMetrics, min_reading_ease: float = 0.0, max_grade_level: float | None = None) -> bool:
    """Whether scored text meets a reading-ease floor and an optional grade ceiling."""
    if metrics.flesch_reading_ease < min_reading_ease:
        return False
    return max_grade_level is None or metrics.flesch_kincaid_grade <= max_grade_level
