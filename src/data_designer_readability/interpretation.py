"""Human-readable labels and difficulty levels for readability scores."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from data_designer_readability.core import ReadabilityMetrics

EASY = "easy"
MODERATE = "moderate"
DIFFICULT = "difficult"
VERY_DIFFICULT = "very_difficult"

BASIC_METRICS = ("gunning_fog", "flesch_reading_ease", "flesch_kincaid_grade")
ADVANCED_METRICS = (
    "smog_index",
    "coleman_liau_index",
    "automated_readability_index",
    "dale_chall_readability_score",
    "linsear_write_formula",
    "difficult_words",
)


def gunning_fog_interpretation(score: float) -> str:
    if score < 8:
        return "Easy reading"
    if score < 12:
        return "Comfortable reading"
    if score < 17:
        return "Difficult reading"
    return "Very difficult"


def gunning_fog_level(score: float) -> str:
    if score < 8:
        return EASY
    if score < 12:
        return MODERATE
    if score < 17:
        return DIFFICULT
    return VERY_DIFFICULT


def flesch_reading_ease_interpretation(score: float) -> str:
    if score >= 90:
        return "Very easy"
    if score >= 80:
        return "Easy"
    if score >= 70:
        return "Fairly easy"
    if score >= 60:
        return "Standard"
    if score >= 50:
        return "Fairly difficult"
    if score >= 30:
        return "Difficult"
    return "Very confusing"


def flesch_reading_ease_level(score: float) -> str:
    # Higher is easier.
    if score >= 80:
        return EASY
    if score >= 60:
        return MODERATE
    if score >= 50:
        return DIFFICULT
    return VERY_DIFFICULT


def grade_interpretation(score: float) -> str:
    return f"Grade {score:.1f} level"


def grade_level(score: float) -> str:
    if score <= 6:
        return EASY
    if score <= 9:
        return MODERATE
    if score <= 12:
        return DIFFICULT
    return VERY_DIFFICULT


def dale_chall_interpretation(score: float) -> str:
    if score <= 4.9:
        return "Easy (4th grade)"
    if score <= 5.9:
        return "5th-6th grade"
    if score <= 6.9:
        return "7th-8th grade"
    if score <= 7.9:
        return "9th-10th grade"
    if score <= 8.9:
        return "High school"
    if score <= 9.9:
        return "College"
    return "Graduate"


def dale_chall_level(score: float) -> str:
    if score <= 5.9:
        return EASY
    if score <= 7.9:
        return MODERATE
    if score <= 8.9:
        return DIFFICULT
    return VERY_DIFFICULT


def difficult_words_interpretation(count: int) -> str:
    return f"{count} difficult words found"


def difficult_words_level(count: int) -> str:
    if count <= 5:
        return EASY
    if count <= 10:
        return MODERATE
    if count <= 20:
        return DIFFICULT
    return VERY_DIFFICULT


def _describe(name: str, value: float) -> dict[str, str]:
    if name == "gunning_fog":
        return {"label": gunning_fog_interpretation(value), "level": gunning_fog_level(value)}
    if name == "flesch_reading_ease":
        return {"label": flesch_reading_ease_interpretation(value), "level": flesch_reading_ease_level(value)}
    if name == "dale_chall_readability_score":
        return {"label": dale_chall_interpretation(value), "level": dale_chall_level(value)}
    if name == "difficult_words":
        return {"label": difficult_words_interpretation(int(value)), "level": difficult_words_level(int(value))}
    return {"label": grade_interpretation(value), "level": grade_level(value)}


def interpret(metrics: ReadabilityMetrics, show_advanced: bool = True) -> dict[str, dict[str, str]]:
    """Label and level for each metric, keyed by field name.

    With ``show_advanced=False`` only Gunning Fog and the two Flesch scores are described.
    """
    names = BASIC_METRICS + ADVANCED_METRICS if show_advanced else BASIC_METRICS
    return {name: _describe(name, getattr(metrics, name)) for name in names}
