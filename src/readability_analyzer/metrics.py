from __future__ import annotations

from collections import Counter

from .models import Document, MetricsSnapshot
from .segmentation import SENTENCE_TYPES
from .textutils import count_non_whitespace, safe_divide


def compute_metrics(document: Document) -> MetricsSnapshot:
    """Aggregate counts and rates for a segmented Document."""
    tokens = document.tokens
    word_count = len(tokens)
    sentence_count = max(len(document.sentences), 1)
    paragraph_count = max(len(document.paragraphs), 1)
    character_count = count_non_whitespace(document.text)

    syllable_count = 0
    complex_word_count = 0
    long_word_count = 0
    distribution: Counter[int] = Counter()
    for token in tokens:
        syllable_count += token.syllables
        distribution[token.syllables] += 1
        if token.is_complex:
            complex_word_count += 1
        if token.is_long:
            long_word_count += 1

    sentence_types = {name: 0 for name in SENTENCE_TYPES}
    for sentence in document.sentences:
        sentence_types[sentence.sentence_type] += 1

    return MetricsSnapshot(
        word_count=word_count,
        sentence_count=sentence_count,
        paragraph_count=paragraph_count,
        character_count=character_count,
        character_count_with_spaces=len(document.text),
        syllable_count=syllable_count,
        complex_word_count=complex_word_count,
        long_word_count=long_word_count,
        avg_words_per_sentence=safe_divide(word_count, sentence_count),
        avg_syllables_per_word=safe_divide(syllable_count, word_count),
        avg_characters_per_word=safe_divide(character_count, word_count),
        percentage_complex_words=100 * safe_divide(complex_word_count, word_count),
        percentage_long_words=100 * safe_divide(long_word_count, word_count),
        avg_sentences_per_paragraph=safe_divide(sentence_count, paragraph_count),
        avg_words_per_paragraph=safe_divide(word_count, paragraph_count),
        syllable_distribution=dict(sorted(distribution.items())),
        sentence_types=sentence_types,
    )
