from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


@dataclass(slots=True, frozen=True)
class SourceText:
    """Represents an input text loaded from disk or the network."""

    doc_id: str
    text: str


@dataclass(slots=True, frozen=True)
class Token:
    """A word with its inclusive-exclusive character offsets."""

    text: str
    normalized: str
    start_char: int
    end_char: int
    syllables: int = 0

    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def is_long(self) -> bool:
        return self.length > 6

    @property
    def is_complex(self) -> bool:
        return self.syllables >= 3


@dataclass(slots=True, frozen=True)
class Sentence:
    """A sentence and the tokens it contains, in original-text order."""

    index: int
    text: str
    start_char: int
    tokens: Tuple[Token, ...]
    sentence_type: str
    complexity: float
    punctuation_count: int = 0

    @property
    def word_count(self) -> int:
        return len(self.tokens)

    @property
    def char_length(self) -> int:
        return len(self.text)


@dataclass(slots=True, frozen=True)
class Paragraph:
    """A blank-line delimited block of sentences."""

    index: int
    text: str
    sentences: Tuple[Sentence, ...]
    complexity: float

    @property
    def sentence_count(self) -> int:
        return len(self.sentences)

    @property
    def word_count(self) -> int:
        return sum(sentence.word_count for sentence in self.sentences)

    @property
    def character_count(self) -> int:
        return len(self.text)

    @property
    def avg_words_per_sentence(self) -> float:
        if not self.sentences:
            return 0.0
        return self.word_count / len(self.sentences)


@dataclass(slots=True, frozen=True)
class Document:
    """Segmented text with flat views over its sentences and tokens."""

    text: str
    paragraphs: Tuple[Paragraph, ...] = ()
    sentences: Tuple[Sentence, ...] = ()
    tokens: Tuple[Token, ...] = ()


@dataclass(slots=True, frozen=True)
class MetricsSnapshot:
    """Counts and rates derived once per analysis from a Document."""

    word_count: int
    sentence_count: int
    paragraph_count: int
    character_count: int
    character_count_with_spaces: int
    syllable_count: int
    complex_word_count: int
    long_word_count: int
    avg_words_per_sentence: float
    avg_syllables_per_word: float
    avg_characters_per_word: float
    percentage_complex_words: float
    percentage_long_words: float
    avg_sentences_per_paragraph: float
    avg_words_per_paragraph: float
    syllable_distribution: Dict[int, int] = field(default_factory=dict)
    sentence_types: Dict[str, int] = field(default_factory=dict)


@dataclass(slots=True, frozen=True)
class ReadabilityScore:
    """Score produced by a single readability formula."""

    key: str
    name: str
    raw_value: float
    rounded_value: float
    label: str
    description: str
    audience: str = ""


@dataclass(slots=True, frozen=True)
class ConsensusGrade:
    """Average of all grade-level style scores."""

    average_grade: float
    minimum: float
    maximum: float
    grades_used: int
    label: str
    description: str


@dataclass(slots=True, frozen=True)
class ReadabilityReport:
    flesch: Optional[ReadabilityScore] = None
    flesch_kincaid: Optional[ReadabilityScore] = None
    gunning_fog: Optional[ReadabilityScore] = None
    smog: Optional[ReadabilityScore] = None
    coleman_liau: Optional[ReadabilityScore] = None
    ari: Optional[ReadabilityScore] = None
    consensus: Optional[ConsensusGrade] = None

    def scores(self) -> Tuple[ReadabilityScore, ...]:
        """Return the computed formula scores in report order."""
        candidates = (
            self.flesch,
            self.flesch_kincaid,
            self.gunning_fog,
            self.smog,
            self.coleman_liau,
            self.ari,
        )
        return tuple(score for score in candidates if score is not None)


@dataclass(slots=True, frozen=True)
class ReadingTime:
    """Estimated reading time for one speed preset."""

    preset: str
    words_per_minute: float
    minutes: int
    seconds: int
    formatted: str


@dataclass(slots=True, frozen=True)
class FrequencyTable:
    """Occurrence counts keyed by normalized word."""

    counts: Dict[str, int]
    total_words: int

    @property
    def unique_words(self) -> frozenset[str]:
        return frozenset(self.counts)

    @property
    def unique_count(self) -> int:
        return len(self.counts)


@dataclass(slots=True, frozen=True)
class TopWord:
    word: str
    count: int
    rank: int
    percentage: float


@dataclass(slots=True, frozen=True)
class LexicalDiversity:
    """Type-token ratio with its interpretation band."""

    ttr: float
    percentage: float
    label: str
    description: str
    unique_words: int
    total_words: int


@dataclass(slots=True, frozen=True)
class FrequencyStatistics:
    mean: float
    median: float
    mode: int
    minimum: int
    maximum: int
    total_occurrences: int


@dataclass(slots=True, frozen=True)
class NGram:
    ngram: str
    count: int
    rank: int
    words: Tuple[str, ...]


@dataclass(slots=True, frozen=True)
class FrequencyReport:
    top_words: Tuple[TopWord, ...]
    diversity: LexicalDiversity
    statistics: FrequencyStatistics
    ngrams: Tuple[NGram, ...] = ()


@dataclass(slots=True, frozen=True)
class Recommendation:
    """A suggested edit derived from the metrics and Flesch score."""

    kind: str
    severity: str
    message: str
    suggestion: str


@dataclass(slots=True, frozen=True)
class Report:
    """Complete result of a single ``analyze`` call."""

    metrics: MetricsSnapshot
    readability: Optional[ReadabilityReport] = None
    frequency: Optional[FrequencyReport] = None
    reading_time: Dict[str, ReadingTime] = field(default_factory=dict)
    recommendations: Tuple[Recommendation, ...] = ()
