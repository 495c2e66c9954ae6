from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional

from .config import AnalysisOptions, resolve_options
from .errors import InvalidInputError
from .frequency import (
    FrequencyComparison,
    analyze_frequency,
    build_frequency_table,
    compare_frequency_tables,
)
from .insights import build_recommendations
from .metrics import compute_metrics
from .models import Document, FrequencyTable, Recommendation, Report
from .reading_time import estimate_reading_time
from .scoring import score_readability
from .segmentation import build_document
from .textutils import prepare_text, round_to

logger = logging.getLogger(__name__)

OptionsLike = AnalysisOptions | Mapping[str, Any] | None


@dataclass(slots=True, frozen=True)
class TextComparison:
    """Side-by-side readability of two texts."""

    first: Report
    second: Report
    flesch_difference: Optional[float]
    grade_difference: Optional[float]
    more_readable: Optional[str]
    vocabulary: FrequencyComparison


def segment(text: str, options: OptionsLike = None) -> Document:
    """Validate input and segment it with the same preparation ``analyze`` uses."""
    _require_text(text)
    resolved = resolve_options(options)
    prepared = prepare_text(text, ignore_code_blocks=resolved.ignore_code_blocks)
    return build_document(prepared, resolved.abbreviations)


def analyze(text: str, options: OptionsLike = None) -> Report:
    """
    Analyze ``text`` and return a complete Report.

    Raises InvalidInputError when ``text`` is not a string and
    InvalidOptionsError when options are malformed; both checks happen before
    any work. Empty text is valid and yields floored counts.
    """
    _require_text(text)
    resolved = resolve_options(options)

    prepared = prepare_text(text, ignore_code_blocks=resolved.ignore_code_blocks)
    document = build_document(prepared, resolved.abbreviations)
    metrics = compute_metrics(document)

    readability = None
    if resolved.include_readability:
        readability = score_readability(metrics, resolved.formulas)

    frequency = None
    if resolved.include_frequency:
        words = [token.normalized for token in document.tokens]
        frequency = analyze_frequency(
            words,
            stop_words=resolved.stop_words,
            min_length=resolved.min_word_length,
            max_results=resolved.max_frequency_results,
            ngram_size=resolved.ngram_size,
            max_ngram_results=resolved.max_ngram_results if resolved.include_ngrams else 0,
        )

    reading_time = {}
    if resolved.include_reading_time:
        reading_time = estimate_reading_time(
            metrics.word_count, resolved.reading_speed_presets
        )

    recommendations: tuple[Recommendation, ...] = ()
    if resolved.include_recommendations:
        flesch = readability.flesch if readability is not None else None
        recommendations = tuple(build_recommendations(metrics, flesch))

    logger.debug(
        "Analyzed %d words in %d sentences.",
        metrics.word_count,
        metrics.sentence_count,
    )
    return Report(
        metrics=metrics,
        readability=readability,
        frequency=frequency,
        reading_time=reading_time,
        recommendations=recommendations,
    )


def analyze_batch(texts: Iterable[str], options: OptionsLike = None) -> List[Report]:
    """Analyze every text with the same options."""
    resolved = resolve_options(options)
    return [analyze(text, resolved) for text in texts]


def compare_texts(first: str, second: str, options: OptionsLike = None) -> TextComparison:
    """Compare readability and vocabulary of two texts."""
    _require_text(first)
    _require_text(second)
    resolved = resolve_options(options)
    first_report = analyze(first, resolved)
    second_report = analyze(second, resolved)

    flesch_difference = None
    more_readable = None
    first_flesch = first_report.readability.flesch if first_report.readability else None
    second_flesch = second_report.readability.flesch if second_report.readability else None
    if first_flesch is not None and second_flesch is not None:
        flesch_difference = round_to(
            first_flesch.rounded_value - second_flesch.rounded_value, 2
        )
        more_readable = (
            "first" if first_flesch.rounded_value > second_flesch.rounded_value else "second"
        )

    grade_difference = None
    first_consensus = first_report.readability.consensus if first_report.readability else None
    second_consensus = second_report.readability.consensus if second_report.readability else None
    if first_consensus is not None and second_consensus is not None:
        grade_difference = round_to(
            first_consensus.average_grade - second_consensus.average_grade, 2
        )

    vocabulary = compare_frequency_tables(
        _frequency_table(first, resolved), _frequency_table(second, resolved)
    )
    return TextComparison(
        first=first_report,
        second=second_report,
        flesch_difference=flesch_difference,
        grade_difference=grade_difference,
        more_readable=more_readable,
        vocabulary=vocabulary,
    )


def _frequency_table(text: str, options: AnalysisOptions) -> FrequencyTable:
    document = build_document(
        prepare_text(text, ignore_code_blocks=options.ignore_code_blocks),
        options.abbreviations,
    )
    return build_frequency_table(
        (token.normalized for token in document.tokens),
        stop_words=options.stop_words,
        min_length=options.min_word_length,
    )


def _require_text(text: object) -> None:
    if not isinstance(text, str):
        raise InvalidInputError(
            f"Text must be a string, got {type(text).__name__}."
        )
