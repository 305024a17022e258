from __future__ import annotations

from typing import Literal

from pydantic import Field

from data_designer.config.column_configs import SingleColumnConfig


class ReadabilityColumnConfig(SingleColumnConfig):
    """Score text columns with classic readability formulas.

    Computes Gunning Fog, Flesch Reading Ease, Flesch-Kincaid Grade, SMOG,
    Coleman-Liau, ARI, Dale-Chall and Linsear Write for each row's text, along
    with word, sentence, syllable and character counts.

    Attributes:
        target_columns: Columns whose text content will be concatenated and scored.
        min_reading_ease: Minimum Flesch Reading Ease (0-100) for ``is_valid=True``.
            Defaults to 0, which accepts every row.
        max_grade_level: Optional Flesch-Kincaid grade ceiling for ``is_valid=True``.
        include_interpretations: Include a label and difficulty level per metric.
        include_word_frequencies: Include the most frequent words of the row's text.
        show_advanced_metrics: Emit SMOG, Coleman-Liau, ARI, Dale-Chall, Linsear Write
            and the difficult word count in addition to the three basic scores.
    """

    target_columns: list[str]
    min_reading_ease: float = Field(default=0.0, ge=0, le=100, description="Minimum Flesch Reading Ease for is_valid=True")
    max_grade_level: float | None = Field(default=None, ge=0, description="Maximum Flesch-Kincaid grade for is_valid=True")
    include_interpretations: bool = Field(default=True, description="Include per-metric labels and levels in output")
    include_word_frequencies: bool = Field(default=False, description="Include word-frequency summary in output")
    show_advanced_metrics: bool = Field(default=True, description="Include advanced readability metrics in output")
    column_type: Literal["readability"] = "readability"

    @staticmethod
    def get_column_emoji() -> str:
        return "\U0001f4d6"

    @property
    def required_columns(self) -> list[str]:
        return self.target_columns

    @property
    def side_effect_columns(self) -> list[str]:
        return []
