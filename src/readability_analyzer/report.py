from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict

from .models import Report
from .pipeline import TextComparison


def report_to_dict(report: Report) -> dict[str, Any]:
    """Convert a Report into JSON-serializable primitives."""
    payload = asdict(report)
    payload["recommendations"] = list(payload["recommendations"])
    if payload["frequency"] is not None:
        payload["frequency"]["top_words"] = list(payload["frequency"]["top_words"])
        payload["frequency"]["ngrams"] = [
            {**ngram, "words": list(ngram["words"])}
            for ngram in payload["frequency"]["ngrams"]
        ]
    return payload


def comparison_to_dict(comparison: TextComparison) -> dict[str, Any]:
    """Convert a TextComparison into JSON-serializable primitives."""
    vocabulary = comparison.vocabulary
    return {
        "first": report_to_dict(comparison.first),
        "second": report_to_dict(comparison.second),
        "flesch_difference": comparison.flesch_difference,
        "grade_difference": comparison.grade_difference,
        "more_readable": comparison.more_readable,
        "vocabulary": {
            "common_words": sorted(vocabulary.common_words),
            "unique_to_first": sorted(vocabulary.unique_to_first),
            "unique_to_second": sorted(vocabulary.unique_to_second),
            "differences": {
                word: asdict(diff) for word, diff in vocabulary.differences.items()
            },
            "jaccard_similarity": vocabulary.jaccard_similarity,
            "overlap_coefficient": vocabulary.overlap_coefficient,
        },
    }


def flatten_report(report: Report) -> Dict[str, Any]:
    """One flat record of counts, rates and scores for tabular export."""
    metrics = report.metrics
    record: Dict[str, Any] = {
        "word_count": metrics.word_count,
        "sentence_count": metrics.sentence_count,
        "paragraph_count": metrics.paragraph_count,
        "character_count": metrics.character_count,
        "syllable_count": metrics.syllable_count,
        "complex_word_count": metrics.complex_word_count,
        "long_word_count": metrics.long_word_count,
        "avg_words_per_sentence": metrics.avg_words_per_sentence,
        "avg_syllables_per_word": metrics.avg_syllables_per_word,
        "avg_characters_per_word": metrics.avg_characters_per_word,
        "percentage_complex_words": metrics.percentage_complex_words,
    }
    if report.readability is not None:
        for score in report.readability.scores():
            record[score.key] = score.rounded_value
        consensus = report.readability.consensus
        record["consensus_grade"] = consensus.average_grade if consensus else None
    if report.frequency is not None:
        record["lexical_diversity"] = report.frequency.diversity.ttr
    for preset, reading in report.reading_time.items():
        record[f"reading_time_{preset}_min"] = reading.minutes
    return record


def format_summary(report: Report) -> str:
    """Render a short plain-text summary of a Report."""
    metrics = report.metrics
    lines = ["=== Readability Analysis Summary ===", ""]

    readability = report.readability
    if readability is not None and readability.flesch is not None:
        lines.append(f"Flesch Reading Ease: {readability.flesch.rounded_value:.2f}")
        lines.append(f"  Level: {readability.flesch.label}")
        lines.append(f"  Grade: {readability.flesch.audience}")
        lines.append("")

    if readability is not None and readability.consensus is not None:
        consensus = readability.consensus
        lines.append(f"Consensus Grade Level: {consensus.average_grade:.2f}")
        lines.append(f"  Level: {consensus.label}")
        lines.append(
            f"  Range: {consensus.minimum:.2f}-{consensus.maximum:.2f} "
            f"({consensus.grades_used} scores)"
        )
        lines.append("")

    lines.append("Base Metrics:")
    lines.append(f"  Words: {metrics.word_count}")
    lines.append(f"  Sentences: {metrics.sentence_count}")
    lines.append(f"  Paragraphs: {metrics.paragraph_count}")
    lines.append(f"  Avg Words/Sentence: {metrics.avg_words_per_sentence:.2f}")

    average = report.reading_time.get("average")
    if average is not None:
        lines.append(f"  Reading Time (average): {average.formatted}")

    if report.recommendations:
        lines.append("")
        lines.append("Recommendations:")
        for item in report.recommendations:
            lines.append(f"  - [{item.severity}] {item.message} {item.suggestion}")

    return "\n".join(lines)
