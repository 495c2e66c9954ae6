from __future__ import annotations

from typing import Dict, Iterable, List, Type

from .base import (
    Interpretation,
    ReadabilityFormula,
    interpret_flesch,
    interpret_grade_level,
)
from .standard import (
    AutomatedReadabilityIndex,
    ColemanLiau,
    FleschKincaidGrade,
    FleschReadingEase,
    GunningFog,
    Smog,
)

__all__ = [
    "Interpretation",
    "ReadabilityFormula",
    "FleschReadingEase",
    "FleschKincaidGrade",
    "GunningFog",
    "Smog",
    "ColemanLiau",
    "AutomatedReadabilityIndex",
    "FORMULA_NAMES",
    "create_formula",
    "build_formulas",
    "interpret_flesch",
    "interpret_grade_level",
]

_REGISTRY: Dict[str, Type[ReadabilityFormula]] = {
    cls.key: cls
    for cls in (
        FleschReadingEase,
        FleschKincaidGrade,
        GunningFog,
        Smog,
        ColemanLiau,
        AutomatedReadabilityIndex,
    )
}

_ALIASES = {
    "flesch_reading_ease": "flesch",
    "fleschkincaid": "flesch_kincaid",
    "flesch_kincaid_grade": "flesch_kincaid",
    "fog": "gunning_fog",
    "automated_readability_index": "ari",
}

FORMULA_NAMES: tuple[str, ...] = tuple(_REGISTRY)


def create_formula(name: str) -> ReadabilityFormula:
    """Factory for building formulas by name."""
    normalized = name.lower().strip().replace("-", "_")
    normalized = _ALIASES.get(normalized, normalized)
    formula_cls = _REGISTRY.get(normalized)
    if formula_cls is None:
        raise ValueError(f"Unknown readability formula '{name}'.")
    return formula_cls()


def build_formulas(names: Iterable[str]) -> List[ReadabilityFormula]:
    """Instantiate formulas in canonical report order, dropping duplicates."""
    requested = {create_formula(name).key for name in names}
    return [_REGISTRY[key]() for key in FORMULA_NAMES if key in requested]
