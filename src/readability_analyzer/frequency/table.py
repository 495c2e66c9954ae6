from __future__ import annotations

import statistics
from collections import Counter
from typing import AbstractSet, Iterable, List

from ..models import FrequencyStatistics, FrequencyTable, LexicalDiversity, TopWord
from ..textutils import round_to, safe_divide

DEFAULT_STOP_WORDS: frozenset[str] = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
        "of", "with", "by", "from", "up", "about", "into", "through", "during",
        "before", "after", "above", "below", "between", "under", "again", "further",
        "then", "once", "here", "there", "when", "where", "why", "how", "all",
        "both", "each", "few", "more", "most", "other", "some", "such", "only",
        "own", "same", "so", "than", "too", "very", "can", "will", "just", "should",
    }
)

# (exclusive lower bound, label, description), highest first.
DIVERSITY_BANDS = (
    (0.7, "Very High", "Highly diverse vocabulary"),
    (0.5, "High", "Diverse vocabulary"),
    (0.3, "Medium", "Moderate vocabulary diversity"),
    (0.1, "Low", "Limited vocabulary diversity"),
)


def build_frequency_table(
    words: Iterable[str],
    stop_words: AbstractSet[str] = DEFAULT_STOP_WORDS,
    min_length: int = 2,
    case_sensitive: bool = False,
) -> FrequencyTable:
    """Count words, skipping stop words and words shorter than ``min_length``.

    Counts preserve first-seen order so ties can be broken stably.
    """
    counts: Counter[str] = Counter()
    total = 0
    for word in words:
        processed = word if case_sensitive else word.lower()
        if len(processed) < min_length:
            continue
        if processed.lower() in stop_words:
            continue
        counts[processed] += 1
        total += 1
    return FrequencyTable(counts=dict(counts), total_words=total)


def top_words(table: FrequencyTable, limit: int) -> List[TopWord]:
    """Rank words by descending count; ties keep first-seen order."""
    if limit <= 0:
        return []
    ordered = sorted(table.counts.items(), key=lambda item: -item[1])
    return [
        TopWord(
            word=word,
            count=count,
            rank=rank,
            percentage=round_to(100 * safe_divide(count, table.total_words), 2),
        )
        for rank, (word, count) in enumerate(ordered[:limit], start=1)
    ]


def lexical_diversity(unique_count: int, total_count: int) -> LexicalDiversity:
    """Type-token ratio with an interpretation band."""
    if total_count <= 0:
        return LexicalDiversity(
            ttr=0.0,
            percentage=0.0,
            label="None",
            description="No words to analyze",
            unique_words=unique_count,
            total_words=0,
        )
    ttr = unique_count / total_count
    label, description = "Very Low", "Highly repetitive"
    for bound, band_label, band_description in DIVERSITY_BANDS:
        if ttr > bound:
            label, description = band_label, band_description
            break
    return LexicalDiversity(
        ttr=round_to(ttr, 4),
        percentage=round_to(ttr * 100, 2),
        label=label,
        description=description,
        unique_words=unique_count,
        total_words=total_count,
    )


def table_diversity(table: FrequencyTable) -> LexicalDiversity:
    return lexical_diversity(table.unique_count, table.total_words)


def frequency_statistics(table: FrequencyTable) -> FrequencyStatistics:
    """Summary statistics over the per-word occurrence counts."""
    frequencies = list(table.counts.values())
    if not frequencies:
        return FrequencyStatistics(
            mean=0.0, median=0.0, mode=0, minimum=0, maximum=0, total_occurrences=0
        )
    return FrequencyStatistics(
        mean=round_to(statistics.mean(frequencies), 2),
        median=round_to(statistics.median(frequencies), 2),
        mode=statistics.multimode(frequencies)[0],
        minimum=min(frequencies),
        maximum=max(frequencies),
        total_occurrences=sum(frequencies),
    )
