from __future__ import annotations

from typing import List, Optional

from .models import MetricsSnapshot, ReadabilityScore, Recommendation

LONG_SENTENCE_WORDS = 20
COMPLEX_WORD_PERCENTAGE = 15
DIFFICULT_FLESCH = 50
HIGH_SYLLABLES_PER_WORD = 1.7


def build_recommendations(
    metrics: MetricsSnapshot, flesch: Optional[ReadabilityScore] = None
) -> List[Recommendation]:
    """Suggest edits when sentence length, vocabulary or ease cross thresholds."""
    recommendations: List[Recommendation] = []

    if metrics.avg_words_per_sentence > LONG_SENTENCE_WORDS:
        recommendations.append(
            Recommendation(
                kind="sentence-length",
                severity="high",
                message="Consider breaking down long sentences. Average words per sentence is high.",
                suggestion="Aim for 15-20 words per sentence for better readability.",
            )
        )

    if metrics.percentage_complex_words > COMPLEX_WORD_PERCENTAGE:
        recommendations.append(
            Recommendation(
                kind="vocabulary",
                severity="medium",
                message="High percentage of complex words detected.",
                suggestion="Consider using simpler alternatives where possible.",
            )
        )

    if flesch is not None and flesch.rounded_value < DIFFICULT_FLESCH:
        recommendations.append(
            Recommendation(
                kind="overall-difficulty",
                severity="high",
                message="Text is difficult to read for general audience.",
                suggestion="Simplify vocabulary and sentence structure.",
            )
        )

    if metrics.avg_syllables_per_word > HIGH_SYLLABLES_PER_WORD:
        recommendations.append(
            Recommendation(
                kind="word-complexity",
                severity="medium",
                message="Words are relatively complex.",
                suggestion="Use shorter, more common words where appropriate.",
            )
        )

    return recommendations
