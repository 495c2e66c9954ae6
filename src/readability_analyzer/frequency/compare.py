from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import AbstractSet, Dict

from ..models import FrequencyTable
from ..textutils import round_to


@dataclass(slots=True, frozen=True)
class WordDifference:
    first: int
    second: int
    difference: int
    percentage_difference: float


@dataclass(slots=True, frozen=True)
class FrequencyComparison:
    """Vocabulary overlap between two frequency tables."""

    common_words: frozenset[str]
    unique_to_first: frozenset[str]
    unique_to_second: frozenset[str]
    differences: Dict[str, WordDifference] = field(default_factory=dict)
    jaccard_similarity: float = 0.0
    overlap_coefficient: float = 0.0


def jaccard_similarity(first: AbstractSet[str], second: AbstractSet[str]) -> float:
    """|A & B| / |A | B|, rounded to four places; 0 when both are empty."""
    union = first | second
    if not union:
        return 0.0
    return round_to(len(first & second) / len(union), 4)


def overlap_coefficient(first: AbstractSet[str], second: AbstractSet[str]) -> float:
    """|A & B| / min(|A|, |B|), rounded to four places; 0 when either is empty."""
    smallest = min(len(first), len(second))
    if smallest == 0:
        return 0.0
    return round_to(len(first & second) / smallest, 4)


def merge_frequency_tables(*tables: FrequencyTable) -> FrequencyTable:
    merged: Counter[str] = Counter()
    total = 0
    for table in tables:
        merged.update(table.counts)
        total += table.total_words
    return FrequencyTable(counts=dict(merged), total_words=total)


def compare_frequency_tables(
    first: FrequencyTable, second: FrequencyTable
) -> FrequencyComparison:
    first_words = first.unique_words
    second_words = second.unique_words
    common = first_words & second_words

    differences: Dict[str, WordDifference] = {}
    for word in sorted(common):
        count_a = first.counts[word]
        count_b = second.counts[word]
        differences[word] = WordDifference(
            first=count_a,
            second=count_b,
            difference=count_a - count_b,
            percentage_difference=round_to(100 * (count_a - count_b) / count_a, 2),
        )

    return FrequencyComparison(
        common_words=common,
        unique_to_first=first_words - second_words,
        unique_to_second=second_words - first_words,
        differences=differences,
        jaccard_similarity=jaccard_similarity(first_words, second_words),
        overlap_coefficient=overlap_coefficient(first_words, second_words),
    )
