from __future__ import annotations

import logging
import re
from typing import Dict, Iterable, Iterator, List, Sequence, Tuple

from .models import Document, Paragraph, Sentence, Token
from .tokenization import tokenize_words

logger = logging.getLogger(__name__)

DEFAULT_ABBREVIATIONS: Tuple[str, ...] = (
    "Mr.",
    "Mrs.",
    "Ms.",
    "Dr.",
    "Prof.",
    "Sr.",
    "Jr.",
    "vs.",
    "etc.",
    "e.g.",
    "i.e.",
)

# Single character so protected offsets match the original text, which
# every sentence and paragraph is sliced from.
PERIOD_SENTINEL = "\x00"

SENTENCE_RE = re.compile(r"[^.!?]+[.!?]*")
DECIMAL_RE = re.compile(r"(?<=\d)\.(?=\d)")
PARAGRAPH_SEPARATOR_RE = re.compile(r"\n\s*\n")
WORD_CHAR_RE = re.compile(r"\w")
PUNCTUATION_RE = re.compile(r"[^\w\s]")
IMPERATIVE_RE = re.compile(
    r"^(?:please|do|don't|let|make|help|stop|start)\b", re.IGNORECASE
)
SUBORDINATOR_RE = re.compile(
    r"\b(?:because|although|while|since|unless|if)\b", re.IGNORECASE
)

DECLARATIVE = "declarative"
INTERROGATIVE = "interrogative"
EXCLAMATORY = "exclamatory"
IMPERATIVE = "imperative"
SENTENCE_TYPES = (DECLARATIVE, INTERROGATIVE, EXCLAMATORY, IMPERATIVE)


def compile_abbreviation_pattern(abbreviations: Iterable[str]) -> re.Pattern[str] | None:
    """Build one alternation matching any abbreviation at a word start."""
    unique = {abbr.strip() for abbr in abbreviations if abbr and abbr.strip()}
    if not unique:
        return None
    ordered = sorted(unique, key=len, reverse=True)
    alternation = "|".join(re.escape(abbr) for abbr in ordered)
    return re.compile(rf"(?<![\w.])(?:{alternation})", re.IGNORECASE)


def protect_periods(text: str, abbreviation_re: re.Pattern[str] | None) -> str:
    """Replace non-terminal periods (abbreviations, decimals) with a sentinel."""
    protected = text
    if abbreviation_re is not None:
        protected = abbreviation_re.sub(
            lambda match: match.group().replace(".", PERIOD_SENTINEL), protected
        )
    return DECIMAL_RE.sub(PERIOD_SENTINEL, protected)


def iter_sentence_spans(
    text: str, abbreviations: Sequence[str] = DEFAULT_ABBREVIATIONS
) -> Iterator[Tuple[int, str]]:
    """Yield ``(start_char, sentence_text)`` pairs in original-text order."""
    if not isinstance(text, str) or not text:
        return
    protected = protect_periods(text, compile_abbreviation_pattern(abbreviations))
    for start, end in _iter_protected_spans(protected):
        yield start, text[start:end]


def split_into_sentences(
    text: str, abbreviations: Sequence[str] = DEFAULT_ABBREVIATIONS
) -> List[str]:
    """Split text into sentences, keeping abbreviations and decimals intact."""
    return [sentence for _, sentence in iter_sentence_spans(text, abbreviations)]


def classify_sentence(sentence: str) -> str:
    """Classify a sentence by terminal punctuation and imperative cues."""
    trimmed = sentence.strip()
    if not trimmed:
        return DECLARATIVE
    last_char = trimmed[-1]
    if last_char == "?":
        return INTERROGATIVE
    if last_char == "!":
        return EXCLAMATORY
    if last_char == "." and IMPERATIVE_RE.match(trimmed):
        return IMPERATIVE
    return DECLARATIVE


def sentence_complexity(sentence: str, word_count: int) -> float:
    """Diagnostic 0-1 complexity from length, punctuation and subordinators."""
    complexity = 0.0
    if word_count > 25:
        complexity += 0.3
    elif word_count > 15:
        complexity += 0.2
    elif word_count > 10:
        complexity += 0.1

    complexity += 0.05 * sentence.count(",")
    complexity += 0.10 * sentence.count(";")
    complexity += 0.10 * sentence.count(":")

    if SUBORDINATOR_RE.search(sentence):
        complexity += 0.15

    return min(complexity, 1.0)


def paragraph_complexity(sentences: Sequence[Sentence]) -> float:
    if not sentences:
        return 0.0
    average = sum(s.complexity for s in sentences) / len(sentences)
    length_factor = min(len(sentences) / 10, 0.3)
    return min(average + length_factor, 1.0)


def split_into_paragraphs(text: str) -> List[str]:
    """Split text on blank lines, discarding empty blocks."""
    return [block.strip() for _, block in _iter_paragraph_spans(text)]


def build_document(text: str, abbreviations: Sequence[str] = ()) -> Document:
    """Segment ``text`` into paragraphs, sentences and tokens.

    ``abbreviations`` extends the default abbreviation list. Empty or
    non-string input produces an empty Document.
    """
    if not isinstance(text, str) or not text.strip():
        return Document(text=text if isinstance(text, str) else "")

    abbreviation_re = compile_abbreviation_pattern(
        (*DEFAULT_ABBREVIATIONS, *abbreviations)
    )
    protected = protect_periods(text, abbreviation_re)
    syllable_cache: Dict[str, int] = {}

    paragraphs: List[Paragraph] = []
    all_sentences: List[Sentence] = []
    all_tokens: List[Token] = []

    for para_start, block in _iter_paragraph_spans(protected):
        sentences: List[Sentence] = []
        for rel_start, rel_end in _iter_protected_spans(block):
            start_char = para_start + rel_start
            sentence_text = text[start_char : para_start + rel_end]
            tokens = tuple(
                tokenize_words(sentence_text, start_char, syllable_cache)
            )
            sentence = Sentence(
                index=len(all_sentences) + len(sentences),
                text=sentence_text,
                start_char=start_char,
                tokens=tokens,
                sentence_type=classify_sentence(sentence_text),
                complexity=sentence_complexity(sentence_text, len(tokens)),
                punctuation_count=len(PUNCTUATION_RE.findall(sentence_text)),
            )
            sentences.append(sentence)
            all_tokens.extend(tokens)
        if not sentences:
            continue
        paragraphs.append(
            Paragraph(
                index=len(paragraphs),
                text=text[para_start : para_start + len(block)].strip(),
                sentences=tuple(sentences),
                complexity=paragraph_complexity(sentences),
            )
        )
        all_sentences.extend(sentences)

    logger.debug(
        "Segmented %d paragraphs, %d sentences, %d tokens.",
        len(paragraphs),
        len(all_sentences),
        len(all_tokens),
    )
    return Document(
        text=text,
        paragraphs=tuple(paragraphs),
        sentences=tuple(all_sentences),
        tokens=tuple(all_tokens),
    )


def _iter_protected_spans(protected: str) -> Iterator[Tuple[int, int]]:
    """Yield trimmed ``(start, end)`` offsets of each sentence fragment."""
    for match in SENTENCE_RE.finditer(protected):
        raw = match.group()
        stripped = raw.strip()
        if not stripped or not WORD_CHAR_RE.search(stripped):
            continue
        leading = len(raw) - len(raw.lstrip())
        start = match.start() + leading
        yield start, start + len(stripped)


def _iter_paragraph_spans(text: str) -> Iterator[Tuple[int, str]]:
    """Yield ``(start_char, raw_block)`` for each non-blank paragraph."""
    if not isinstance(text, str) or not text:
        return
    cursor = 0
    for separator in PARAGRAPH_SEPARATOR_RE.finditer(text):
        chunk = text[cursor : separator.start()]
        if chunk.strip():
            yield cursor, chunk
        cursor = separator.end()
    tail = text[cursor:]
    if tail.strip():
        yield cursor, tail
