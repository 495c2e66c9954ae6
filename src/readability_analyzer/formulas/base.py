from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..models import MetricsSnapshot, ReadabilityScore
from ..textutils import round_to


@dataclass(slots=True, frozen=True)
class Interpretation:
    label: str
    description: str
    audience: str = ""


# (minimum score, interpretation), highest threshold first.
FLESCH_BANDS: tuple[tuple[float, Interpretation], ...] = (
    (90, Interpretation("Very Easy", "Very easy to read", "5th grade")),
    (80, Interpretation("Easy", "Easy to read", "6th grade")),
    (70, Interpretation("Fairly Easy", "Fairly easy to read", "7th grade")),
    (60, Interpretation("Standard", "Plain English", "8th-9th grade")),
    (50, Interpretation("Fairly Difficult", "Fairly difficult to read", "10th-12th grade")),
    (30, Interpretation("Difficult", "Difficult to read", "College")),
    (0, Interpretation("Very Difficult", "Very difficult to read", "College graduate")),
)

# (maximum grade, interpretation), lowest ceiling first.
GRADE_BANDS: tuple[tuple[float, Interpretation], ...] = (
    (6, Interpretation("Elementary", "Elementary school level", "Easy for general audience")),
    (8, Interpretation("Middle School", "Middle school level", "Average reader")),
    (12, Interpretation("High School", "High school level", "High school student")),
    (16, Interpretation("College", "College level", "College student")),
)
GRADUATE_BAND = Interpretation("Professional", "Post-graduate level", "Expert/Professional")


def interpret_flesch(score: float) -> Interpretation:
    for threshold, interpretation in FLESCH_BANDS:
        if score >= threshold:
            return interpretation
    return FLESCH_BANDS[-1][1]


def interpret_grade_level(grade: float) -> Interpretation:
    for ceiling, interpretation in GRADE_BANDS:
        if grade <= ceiling:
            return interpretation
    return GRADUATE_BAND


class ReadabilityFormula(ABC):
    """A standardized readability formula over a MetricsSnapshot."""

    key: str = ""
    name: str = ""
    is_grade_level: bool = True
    floor: float | None = None
    cap: float | None = None

    @abstractmethod
    def compute(self, metrics: MetricsSnapshot) -> float:
        """Return the unrounded, unclamped formula value."""
        raise NotImplementedError

    def interpret(self, value: float) -> Interpretation:
        return interpret_grade_level(value)

    def clamp(self, value: float) -> float:
        if self.floor is not None:
            value = max(self.floor, value)
        if self.cap is not None:
            value = min(self.cap, value)
        return value

    def score(self, metrics: MetricsSnapshot) -> ReadabilityScore:
        """Compute, round to two places, clamp and interpret."""
        raw = self.compute(metrics)
        rounded = self.clamp(round_to(raw, 2))
        interpretation = self.interpret(rounded)
        return ReadabilityScore(
            key=self.key,
            name=self.name,
            raw_value=raw,
            rounded_value=rounded,
            label=interpretation.label,
            description=interpretation.description,
            audience=interpretation.audience,
        )
