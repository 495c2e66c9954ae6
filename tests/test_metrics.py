import pytest

from readability_analyzer.metrics import compute_metrics
from readability_analyzer.segmentation import build_document


def test_empty_text_floors_sentence_and_paragraph_counts():
    metrics = compute_metrics(build_document(""))
    assert metrics.word_count == 0
    assert metrics.sentence_count == 1
    assert metrics.paragraph_count == 1
    assert metrics.avg_words_per_sentence == 0.0
    assert metrics.avg_syllables_per_word == 0.0
    assert metrics.percentage_complex_words == 0.0


def test_simple_sentence_metrics():
    metrics = compute_metrics(build_document("The cat sat on the mat."))
    assert metrics.word_count == 6
    assert metrics.sentence_count == 1
    assert metrics.syllable_count == 6
    assert metrics.character_count == 18
    assert metrics.character_count_with_spaces == 23
    assert metrics.avg_words_per_sentence == 6.0
    assert metrics.avg_characters_per_word == 3.0
    assert metrics.syllable_distribution == {1: 6}
    assert metrics.sentence_types["declarative"] == 1


def test_complex_and_long_word_counts():
    text = "Beautiful elephants wander. Cats nap."
    metrics = compute_metrics(build_document(text))
    assert metrics.word_count == 5
    assert metrics.sentence_count == 2
    assert metrics.complex_word_count == 2
    assert metrics.long_word_count == 2
    assert metrics.percentage_complex_words == pytest.approx(40.0)
    assert metrics.avg_words_per_sentence == 2.5


def test_paragraph_rates():
    text = "One. Two.\n\nThree."
    metrics = compute_metrics(build_document(text))
    assert metrics.paragraph_count == 2
    assert metrics.sentence_count == 3
    assert metrics.avg_sentences_per_paragraph == 1.5
    assert metrics.avg_words_per_paragraph == 1.5
