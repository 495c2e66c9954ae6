import pytest

from readability_analyzer.segmentation import (
    DECLARATIVE,
    EXCLAMATORY,
    IMPERATIVE,
    INTERROGATIVE,
    build_document,
    classify_sentence,
    paragraph_complexity,
    sentence_complexity,
    split_into_paragraphs,
    split_into_sentences,
)
from readability_analyzer.tokenization import extract_words, tokenize_words


def test_abbreviations_do_not_end_sentences():
    sentences = split_into_sentences("Dr. Smith went home. He was tired.")
    assert sentences == ["Dr. Smith went home.", "He was tired."]


def test_decimals_do_not_end_sentences():
    assert split_into_sentences("The value is 3.14 today.") == ["The value is 3.14 today."]


def test_trailing_fragment_counts_as_sentence():
    assert split_into_sentences("No punctuation here") == ["No punctuation here"]


def test_punctuation_only_fragments_are_dropped():
    assert split_into_sentences("Wait... what?!") == ["Wait...", "what?!"]
    assert split_into_sentences("...") == []


def test_custom_abbreviations_extend_defaults():
    text = "See approx. five cats. Mr. Lee agreed."
    document = build_document(text, abbreviations=["approx."])
    assert [s.text for s in document.sentences] == [
        "See approx. five cats.",
        "Mr. Lee agreed.",
    ]


def test_classify_sentence():
    assert classify_sentence("Is it raining?") == INTERROGATIVE
    assert classify_sentence("What a day!") == EXCLAMATORY
    assert classify_sentence("Please close the door.") == IMPERATIVE
    assert classify_sentence("Doors close at noon.") == DECLARATIVE
    assert classify_sentence("The cat sat.") == DECLARATIVE


def test_sentence_complexity_is_capped():
    assert sentence_complexity("Short one.", 2) == 0.0
    assert sentence_complexity("We left, because it rained.", 5) == pytest.approx(0.2)
    noisy = "a; b; c; d; e; f; g; h; i; j; k; l"
    assert sentence_complexity(noisy, 30) == 1.0


def test_paragraphs_split_on_blank_lines():
    text = "First para. Still first.\n\n  \nSecond para.\n"
    assert split_into_paragraphs(text) == ["First para. Still first.", "Second para."]

    document = build_document(text)
    assert len(document.paragraphs) == 2
    assert document.paragraphs[0].sentence_count == 2
    assert document.paragraphs[1].word_count == 2
    assert paragraph_complexity(document.paragraphs[0].sentences) == 0.2


def test_sentence_word_counts_sum_to_token_count():
    text = (
        "Mr. Brown paid $3.50 for tea, e.g. green tea. Why?\n\n"
        "Stop! ... The end -- really"
    )
    document = build_document(text)
    assert sum(s.word_count for s in document.sentences) == len(document.tokens)
    assert sum(p.sentence_count for p in document.paragraphs) == len(document.sentences)


def test_sentence_offsets_point_into_original_text():
    text = "Dr. Who arrived.  Then he left!"
    document = build_document(text)
    for sentence in document.sentences:
        assert text[sentence.start_char : sentence.start_char + sentence.char_length] == sentence.text
    for token in document.tokens:
        assert text[token.start_char : token.end_char] == token.text


def test_empty_text_produces_empty_document():
    document = build_document("   ")
    assert document.sentences == ()
    assert document.paragraphs == ()
    assert document.tokens == ()


def test_tokenize_words_returns_offsets():
    tokens = tokenize_words("Hello, world!", offset=10)
    assert [t.text for t in tokens] == ["Hello", "world"]
    assert tokens[0].start_char == 10
    assert tokens[1].end_char == 22
    assert tokens[0].normalized == "hello"
    assert extract_words("It's A test") == ["it", "s", "a", "test"]


def test_nul_characters_in_input_are_preserved():
    document = build_document("Hi\x00there. Dr. Who\x00 left.")
    assert [s.text for s in document.sentences] == ["Hi\x00there.", "Dr. Who\x00 left."]
    assert document.paragraphs[0].text == "Hi\x00there. Dr. Who\x00 left."
    assert split_into_sentences("Pi is 3.14\x00ish. Yes.") == ["Pi is 3.14\x00ish.", "Yes."]
