import pytest

from readability_analyzer.frequency import (
    DEFAULT_STOP_WORDS,
    analyze_frequency,
    analyze_ngrams,
    build_frequency_table,
    character_frequency,
    compare_frequency_tables,
    frequency_statistics,
    iter_ngrams,
    jaccard_similarity,
    lexical_diversity,
    merge_frequency_tables,
    overlap_coefficient,
    top_words,
)


def test_build_frequency_table_filters_stop_words_and_short_words():
    table = build_frequency_table(["The", "cat", "a", "Cat", "of", "x", "dog"])
    assert table.counts == {"cat": 2, "dog": 1}
    assert table.total_words == 3
    assert table.unique_count == 2
    assert "the" in DEFAULT_STOP_WORDS


def test_top_words_ranks_by_count_with_stable_ties():
    words = ["zeta", "alpha", "zeta", "beta", "alpha", "gamma", "zeta"]
    ranked = top_words(build_frequency_table(words, stop_words=frozenset()), 3)
    assert [(w.word, w.count, w.rank) for w in ranked] == [
        ("zeta", 3, 1),
        ("alpha", 2, 2),
        ("beta", 1, 3),
    ]
    assert ranked[0].percentage == pytest.approx(42.86)
    assert top_words(build_frequency_table(words), 0) == []


@pytest.mark.parametrize(
    ("unique", "total", "label"),
    [
        (0, 0, "None"),
        (8, 10, "Very High"),
        (7, 10, "High"),
        (4, 10, "Medium"),
        (2, 10, "Low"),
        (1, 10, "Very Low"),
    ],
)
def test_lexical_diversity_bands(unique: int, total: int, label: str):
    assert lexical_diversity(unique, total).label == label


def test_lexical_diversity_values():
    diversity = lexical_diversity(2, 3)
    assert diversity.ttr == 0.6667
    assert diversity.percentage == 66.67
    assert lexical_diversity(0, 0).description == "No words to analyze"


def test_frequency_statistics():
    table = build_frequency_table(
        ["red", "red", "red", "blue", "blue", "green", "pink"], stop_words=frozenset()
    )
    stats = frequency_statistics(table)
    assert stats.mean == 1.75
    assert stats.median == 1.5
    assert stats.mode == 1
    assert stats.minimum == 1
    assert stats.maximum == 3
    assert stats.total_occurrences == 7

    empty = frequency_statistics(build_frequency_table([]))
    assert empty.mean == 0.0
    assert empty.mode == 0


def test_ngrams():
    words = ["The", "big", "dog", "the", "big", "cat"]
    assert iter_ngrams(words, 2)[0] == "the big"
    assert iter_ngrams(words, 7) == []
    ngrams = analyze_ngrams(words, 2, limit=2)
    assert ngrams[0].ngram == "the big"
    assert ngrams[0].count == 2
    assert ngrams[0].words == ("the", "big")
    assert ngrams[1].ngram == "big dog"
    assert analyze_ngrams(words, 3, limit=0) == []


def test_set_similarity_measures():
    first = {"a", "b", "c"}
    second = {"b", "c", "d", "e"}
    assert jaccard_similarity(first, second) == 0.4
    assert overlap_coefficient(first, second) == 0.6667
    assert jaccard_similarity(set(), set()) == 0.0
    assert overlap_coefficient(first, set()) == 0.0


def test_merge_and_compare_tables():
    first = build_frequency_table(["apple", "apple", "pear", "plum"], stop_words=frozenset())
    second = build_frequency_table(["apple", "kiwi", "plum", "plum"], stop_words=frozenset())

    merged = merge_frequency_tables(first, second)
    assert merged.counts == {"apple": 3, "pear": 1, "plum": 3, "kiwi": 1}
    assert merged.total_words == 8

    comparison = compare_frequency_tables(first, second)
    assert comparison.common_words == {"apple", "plum"}
    assert comparison.unique_to_first == {"pear"}
    assert comparison.unique_to_second == {"kiwi"}
    assert comparison.differences["apple"].difference == 1
    assert comparison.differences["apple"].percentage_difference == 50.0
    assert comparison.differences["plum"].percentage_difference == -100.0
    assert comparison.jaccard_similarity == 0.5
    assert comparison.overlap_coefficient == pytest.approx(0.6667)


def test_analyze_frequency_bundles_sections():
    report = analyze_frequency(
        ["sun", "moon", "sun", "star"],
        stop_words=frozenset(),
        max_results=2,
        ngram_size=2,
        max_ngram_results=1,
    )
    assert [w.word for w in report.top_words] == ["sun", "moon"]
    assert report.diversity.unique_words == 3
    assert report.statistics.maximum == 2
    assert len(report.ngrams) == 1


def test_character_frequency():
    counts = character_frequency("Aa b!")
    assert counts[0].character == "a"
    assert counts[0].count == 2
    assert counts[0].is_letter
    bang = next(c for c in counts if c.character == "!")
    assert bang.is_punctuation
    assert character_frequency("") == []
