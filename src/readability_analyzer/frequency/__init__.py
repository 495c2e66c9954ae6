from __future__ import annotations

from typing import AbstractSet, Sequence

from ..models import FrequencyReport, NGram
from .characters import CharacterCount, character_frequency
from .compare import (
    FrequencyComparison,
    WordDifference,
    compare_frequency_tables,
    jaccard_similarity,
    merge_frequency_tables,
    overlap_coefficient,
)
from .ngrams import analyze_ngrams, iter_ngrams
from .table import (
    DEFAULT_STOP_WORDS,
    build_frequency_table,
    frequency_statistics,
    lexical_diversity,
    table_diversity,
    top_words,
)

__all__ = [
    "DEFAULT_STOP_WORDS",
    "CharacterCount",
    "FrequencyComparison",
    "WordDifference",
    "analyze_frequency",
    "analyze_ngrams",
    "build_frequency_table",
    "character_frequency",
    "compare_frequency_tables",
    "frequency_statistics",
    "iter_ngrams",
    "jaccard_similarity",
    "lexical_diversity",
    "merge_frequency_tables",
    "overlap_coefficient",
    "table_diversity",
    "top_words",
]


def analyze_frequency(
    words: Sequence[str],
    *,
    stop_words: AbstractSet[str] = DEFAULT_STOP_WORDS,
    min_length: int = 2,
    max_results: int = 10,
    ngram_size: int = 2,
    max_ngram_results: int = 10,
) -> FrequencyReport:
    """Build the frequency section of a report from an ordered word list.

    N-grams are not counted at all when ``max_ngram_results`` is 0.
    """
    table = build_frequency_table(words, stop_words=stop_words, min_length=min_length)
    ngrams: tuple[NGram, ...] = ()
    if max_ngram_results > 0:
        ngrams = tuple(analyze_ngrams(words, ngram_size, max_ngram_results))
    return FrequencyReport(
        top_words=tuple(top_words(table, max_results)),
        diversity=table_diversity(table),
        statistics=frequency_statistics(table),
        ngrams=ngrams,
    )
