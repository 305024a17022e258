import pytest

pytest.importorskip("data_designer.config.column_configs")
pytest.importorskip("data_designer.engine.column_generators.generators.base")

import pandas as pd  # noqa: E402
from pydantic import ValidationError  # noqa: E402

from data_designer_readability.config import ReadabilityColumnConfig  # noqa: E402
from data_designer_readability.generator import ReadabilityColumnGenerator, _row_text  # noqa: E402
from data_designer_readability.interpretation import ADVANCED_METRICS, BASIC_METRICS  # noqa: E402


SIMPLE_TEXT = "The cat sat on the mat. We had fun."
ACADEMIC_TEXT = (
    "Institutional accountability mechanisms necessitate comprehensive evaluation of "
    "organizational performance indicators. Interdisciplinary collaboration "
    "facilitates the identification of unanticipated operational vulnerabilities."
)


def _frame() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "title": [SIMPLE_TEXT, ACADEMIC_TEXT],
            "notes": [float("nan"), ["first part", "second part"]],
        }
    )


def _generate(monkeypatch, **overrides) -> list[dict]:
    config = ReadabilityColumnConfig(name="readability", target_columns=["title", "notes"], **overrides)
    monkeypatch.setattr(ReadabilityColumnGenerator, "config", property(lambda self: config))
    generator = ReadabilityColumnGenerator.__new__(ReadabilityColumnGenerator)
    return list(generator.generate(_frame())["readability"])


class TestReadabilityColumnConfig:
    def test_defaults(self):
        config = ReadabilityColumnConfig(name="readability", target_columns=["article"])
        assert config.column_type == "readability"
        assert config.min_reading_ease == 0.0
        assert config.max_grade_level is None
        assert config.include_interpretations is True
        assert config.include_word_frequencies is False
        assert config.show_advanced_metrics is True
        assert config.required_columns == ["article"]
        assert config.side_effect_columns == []

    @pytest.mark.parametrize("overrides", [{"min_reading_ease": 101}, {"min_reading_ease": -1}, {"max_grade_level": -2}])
    def test_rejects_out_of_range_thresholds(self, overrides):
        with pytest.raises(ValidationError):
            ReadabilityColumnConfig(name="readability", target_columns=["article"], **overrides)


class TestRowText:
    def test_skips_scalar_nulls(self):
        assert _row_text(["cat", None, float("nan"), pd.NA]) == "cat"

    def test_stringifies_structured_cells(self):
        assert _row_text(["cat", ["dog", "bird"]]) == "cat ['dog', 'bird']"


class TestReadabilityColumnGenerator:
    def test_scores_every_row(self, monkeypatch):
        simple, academic = _generate(monkeypatch)
        assert simple["word_count"] == 9
        assert simple["sentence_count"] == 2
        # 19 words of prose plus the four tokens of the stringified list
        assert academic["word_count"] == 23
        assert set(simple["interpretations"]) == set(BASIC_METRICS + ADVANCED_METRICS)
        assert "word_frequencies" not in simple
        assert simple["is_valid"] and academic["is_valid"]

    def test_min_reading_ease(self, monkeypatch):
        simple, academic = _generate(monkeypatch, min_reading_ease=60)
        assert simple["is_valid"]
        assert not academic["is_valid"]

    def test_max_grade_level(self, monkeypatch):
        simple, academic = _generate(monkeypatch, max_grade_level=8)
        assert simple["is_valid"]
        assert not academic["is_valid"]

    def test_basic_metrics_only(self, monkeypatch):
        simple, _ = _generate(monkeypatch, show_advanced_metrics=False)
        for name in ADVANCED_METRICS:
            assert name not in simple
        for name in BASIC_METRICS + ("word_count", "sentence_count", "syllable_count", "character_count"):
            assert name in simple
        assert set(simple["interpretations"]) == set(BASIC_METRICS)

    def test_output_switches(self, monkeypatch):
        simple, _ = _generate(monkeypatch, include_interpretations=False, include_word_frequencies=True)
        assert "interpretations" not in simple
        assert simple["word_frequencies"] == []
