from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import data_designer.lazy_heavy_imports as lazy
from data_designer.engine.column_generators.generators.base import ColumnGeneratorFullColumn

from data_designer_readability.config import ReadabilityColumnConfig
from data_designer_readability.core import ReadabilityCalculator, is_readable
from data_designer_readability.frequency import word_frequencies
from data_designer_readability.interpretation import ADVANCED_METRICS, interpret
from data_designer_readability.settings import Settings

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)


def _row_text(values) -> str:
    # Structured cells (lists, arrays) are stringified; only scalar nulls are skipped.
    return " ".join(str(v) for v in values if v is not None and not (lazy.pd.api.types.is_scalar(v) and lazy.pd.isna(v)))


class ReadabilityColumnGenerator(ColumnGeneratorFullColumn[ReadabilityColumnConfig]):
    """Column generator that scores text with readability formulas."""

    def generate(self, data: pd.DataFrame) -> pd.DataFrame:
        logger.info(f"\U0001f4d6 Scoring column {self.config.name!r} for readability")
        logger.info(f"   target columns: {self.config.target_columns}")
        logger.info(f"   min_reading_ease: {self.config.min_reading_ease}")
        if self.config.max_grade_level is not None:
            logger.info(f"   max_grade_level: {self.config.max_grade_level}")

        settings = Settings(show_advanced_metrics=self.config.show_advanced_metrics)
        calculator = ReadabilityCalculator(settings=settings)

        results = []
        for _, row in data[self.config.target_columns].iterrows():
            text = _row_text(row.values)
            metrics = calculator.calculate(text)
            payload = metrics.to_payload()
            if not self.config.show_advanced_metrics:
                payload = {k: v for k, v in payload.items() if k not in ADVANCED_METRICS}

            output: dict = {
                "is_valid": is_readable(metrics, self.config.min_reading_ease, self.config.max_grade_level),
                **payload,
            }
            if self.config.include_interpretations:
                output["interpretations"] = interpret(metrics, show_advanced=self.config.show_advanced_metrics)
            if self.config.include_word_frequencies:
                output["word_frequencies"] = [wf.to_payload() for wf in word_frequencies(text, settings)]
            results.append(output)

        data = data.copy()
        data[self.config.name] = results
        return data
