from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from .formulas import FORMULA_NAMES, ReadabilityFormula, build_formulas, interpret_grade_level
from .models import ConsensusGrade, MetricsSnapshot, ReadabilityReport, ReadabilityScore
from .textutils import round_to

GRADE_LEVEL_KEYS = frozenset(
    {"flesch_kincaid", "gunning_fog", "smog", "coleman_liau", "ari"}
)


def score_formulas(
    metrics: MetricsSnapshot, formulas: Iterable[ReadabilityFormula]
) -> List[ReadabilityScore]:
    """Score each formula against the same metrics snapshot."""
    return [formula.score(metrics) for formula in formulas]


def consensus_grade(scores: Sequence[ReadabilityScore]) -> Optional[ConsensusGrade]:
    """
    Average the grade-level style scores.

    Flesch Reading Ease is not a grade level and is skipped. Returns None when
    no grade-level score is present.
    """
    grades = [s.rounded_value for s in scores if s.key in GRADE_LEVEL_KEYS]
    if not grades:
        return None
    average = round_to(sum(grades) / len(grades), 2)
    interpretation = interpret_grade_level(average)
    return ConsensusGrade(
        average_grade=average,
        minimum=min(grades),
        maximum=max(grades),
        grades_used=len(grades),
        label=interpretation.label,
        description=interpretation.description,
    )


def score_readability(
    metrics: MetricsSnapshot, formula_names: Iterable[str] = FORMULA_NAMES
) -> ReadabilityReport:
    """Apply the named formulas and assemble a ReadabilityReport."""
    scores = score_formulas(metrics, build_formulas(formula_names))
    by_key = {score.key: score for score in scores}
    return ReadabilityReport(
        flesch=by_key.get("flesch"),
        flesch_kincaid=by_key.get("flesch_kincaid"),
        gunning_fog=by_key.get("gunning_fog"),
        smog=by_key.get("smog"),
        coleman_liau=by_key.get("coleman_liau"),
        ari=by_key.get("ari"),
        consensus=consensus_grade(scores),
    )
