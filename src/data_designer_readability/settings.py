from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    """Tunables for the readability analyzer and the word-frequency summary.

    Only ``linsear_sample_size`` affects the readability scores; the rest shape
    the word-frequency summary and which interpretations are reported.
    """

    linsear_sample_size: int = 100

    word_cloud_max_words: int = 50
    word_cloud_min_frequency: int = 3
    word_cloud_min_word_length: int = 3
    word_cloud_min_size: int = 12
    word_cloud_max_size: int = 60
    word_cloud_size_step: int = 8
    exclude_stop_words: bool = True

    show_advanced_metrics: bool = True

    def __post_init__(self) -> None:
        for name in ("linsear_sample_size", "word_cloud_max_words", "word_cloud_min_frequency", "word_cloud_size_step"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be at least 1, got {getattr(self, name)}")
        if self.word_cloud_min_size > self.word_cloud_max_size:
            raise ValueError(
                f"word_cloud_min_size ({self.word_cloud_min_size}) exceeds word_cloud_max_size ({self.word_cloud_max_size})"
            )


DEFAULT_SETTINGS = Settings()
