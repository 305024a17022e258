# SPDX-License-Identifier: Apache-2.0
"""Readability plugin for NeMo Data Designer.

Adds a ``readability`` column type that scores text with eight classic
readability formulas (Gunning Fog, Flesch Reading Ease, Flesch-Kincaid,
SMOG, Coleman-Liau, ARI, Dale-Chall, Linsear Write). No LLM calls, no API
dependencies.

Usage::

    from data_designer_readability import ReadabilityColumnConfig

    builder.add_column(ReadabilityColumnConfig(
        name="readability",
        target_columns=["article"],
        min_reading_ease=50,
    ))

The scoring core is usable on its own::

    from data_designer_readability import calculate_readability_metrics

    calculate_readability_metrics("The cat sat on the mat.").flesch_reading_ease
"""

from data_designer_readability.core import (
    ReadabilityCalculator,
    ReadabilityMetrics,
    analyze_text,
    calculate_readability_metrics,
)
from data_designer_readability.settings import Settings
from data_designer_readability.word_list import ReferenceWordList, WordListError, load_word_list

__all__ = [
    "ReadabilityColumnConfig",
    "ReadabilityCalculator",
    "ReadabilityMetrics",
    "ReferenceWordList",
    "Settings",
    "WordListError",
    "analyze_text",
    "calculate_readability_metrics",
    "load_word_list",
]


def __getattr__(name: str):
    # The column config needs the Data Designer runtime; the scoring core does not.
    if name == "ReadabilityColumnConfig":
        from data_designer_readability.config import ReadabilityColumnConfig

        return ReadabilityColumnConfig
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
