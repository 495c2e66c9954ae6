from __future__ import annotations

import math

from ..models import MetricsSnapshot
from ..textutils import safe_divide
from .base import Interpretation, ReadabilityFormula, interpret_flesch


class FleschReadingEase(ReadabilityFormula):
    """206.835 - 1.015 * words/sentence - 84.6 * syllables/word, clamped to [0, 100]."""

    key = "flesch"
    name = "Flesch Reading Ease"
    is_grade_level = False
    floor = 0.0
    cap = 100.0

    def compute(self, metrics: MetricsSnapshot) -> float:
        return (
            206.835
            - 1.015 * metrics.avg_words_per_sentence
            - 84.6 * metrics.avg_syllables_per_word
        )

    def interpret(self, value: float) -> Interpretation:
        return interpret_flesch(value)


class FleschKincaidGrade(ReadabilityFormula):
    key = "flesch_kincaid"
    name = "Flesch-Kincaid Grade Level"
    floor = 0.0

    def compute(self, metrics: MetricsSnapshot) -> float:
        return (
            0.39 * metrics.avg_words_per_sentence
            + 11.8 * metrics.avg_syllables_per_word
            - 15.59
        )


class GunningFog(ReadabilityFormula):
    key = "gunning_fog"
    name = "Gunning Fog Index"

    def compute(self, metrics: MetricsSnapshot) -> float:
        complex_ratio = safe_divide(metrics.complex_word_count, metrics.word_count)
        return 0.4 * (metrics.avg_words_per_sentence + 100 * complex_ratio)


class Smog(ReadabilityFormula):
    key = "smog"
    name = "SMOG Index"

    def compute(self, metrics: MetricsSnapshot) -> float:
        polysyllables = metrics.complex_word_count * safe_divide(
            30, metrics.sentence_count
        )
        return 1.0430 * math.sqrt(polysyllables) + 3.1291


class ColemanLiau(ReadabilityFormula):
    """0.0588 * L - 0.296 * S - 15.8 with L, S per 100 words."""

    key = "coleman_liau"
    name = "Coleman-Liau Index"
    floor = 0.0

    def compute(self, metrics: MetricsSnapshot) -> float:
        letters = 100 * safe_divide(metrics.character_count, metrics.word_count)
        sentences = 100 * safe_divide(metrics.sentence_count, metrics.word_count)
        return 0.0588 * letters - 0.296 * sentences - 15.8


class AutomatedReadabilityIndex(ReadabilityFormula):
    key = "ari"
    name = "Automated Readability Index"
    floor = 0.0

    def compute(self, metrics: MetricsSnapshot) -> float:
        return (
            4.71 * metrics.avg_characters_per_word
            + 0.5 * metrics.avg_words_per_sentence
            - 21.43
        )
