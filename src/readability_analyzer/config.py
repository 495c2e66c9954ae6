from __future__ import annotations

import math
from collections.abc import Collection, Iterable
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Mapping, MutableMapping

import yaml

from .errors import InvalidOptionsError
from .formulas import FORMULA_NAMES, create_formula
from .frequency import DEFAULT_STOP_WORDS
from .reading_time import DEFAULT_READING_SPEEDS


@dataclass(slots=True)
class AnalysisOptions:
    """Per-call options for ``analyze``; every field has a usable default."""

    include_readability: bool = True
    include_frequency: bool = True
    include_reading_time: bool = True
    include_ngrams: bool = True
    include_recommendations: bool = True
    formulas: List[str] = field(default_factory=lambda: list(FORMULA_NAMES))
    stop_words: frozenset[str] = DEFAULT_STOP_WORDS
    min_word_length: int = 2
    max_frequency_results: int = 10
    ngram_size: int = 2
    max_ngram_results: int = 10
    reading_speed_presets: Dict[str, float] = field(
        default_factory=lambda: dict(DEFAULT_READING_SPEEDS)
    )
    abbreviations: List[str] = field(default_factory=list)
    ignore_code_blocks: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return a plain, YAML-friendly dictionary of the options."""
        data: dict[str, Any] = {}
        for option in fields(self):
            value = getattr(self, option.name)
            if isinstance(value, (set, frozenset)):
                value = sorted(value)
            elif isinstance(value, dict):
                value = dict(value)
            elif isinstance(value, list):
                value = list(value)
            data[option.name] = value
        return data


_COUNT_FIELDS = ("min_word_length", "max_frequency_results", "max_ngram_results")
_WORD_LIST_FIELDS = ("formulas", "abbreviations", "stop_words")


def validate_options(options: AnalysisOptions) -> AnalysisOptions:
    """
    Raise InvalidOptionsError when any option is malformed.

    Stop words are case-folded in place so lookups match normalized tokens.
    """
    for name in _COUNT_FIELDS:
        value = getattr(options, name)
        if not _is_int(value):
            raise InvalidOptionsError(f"{name} must be an integer, got {value!r}.")
        if value < 0:
            raise InvalidOptionsError(f"{name} must be non-negative, got {value}.")

    if not _is_int(options.ngram_size) or options.ngram_size < 1:
        raise InvalidOptionsError(
            f"ngram_size must be a positive integer, got {options.ngram_size!r}."
        )

    if not isinstance(options.reading_speed_presets, Mapping):
        raise InvalidOptionsError("reading_speed_presets must be a mapping.")
    for preset, wpm in options.reading_speed_presets.items():
        if (
            not isinstance(wpm, (int, float))
            or isinstance(wpm, bool)
            or not math.isfinite(wpm)
            or wpm <= 0
        ):
            raise InvalidOptionsError(
                f"Reading speed '{preset}' must be a positive number, got {wpm!r}."
            )

    for name in _WORD_LIST_FIELDS:
        _require_strings(name, getattr(options, name))

    for name in options.formulas:
        try:
            create_formula(name)
        except ValueError as exc:
            raise InvalidOptionsError(str(exc)) from exc

    folded = frozenset(word.lower() for word in options.stop_words)
    if folded != options.stop_words:
        options.stop_words = folded
    return options


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _require_strings(name: str, value: object) -> None:
    if isinstance(value, str) or not isinstance(value, Collection):
        raise InvalidOptionsError(
            f"{name} must be a collection of strings, got {value!r}."
        )
    for item in value:
        if not isinstance(item, str):
            raise InvalidOptionsError(f"{name} entries must be strings, got {item!r}.")


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {option.name for option in fields(AnalysisOptions)}
    kwargs = {key: data[key] for key in data if key in allowed}
    if "reading_speed_presets" in kwargs and isinstance(
        kwargs["reading_speed_presets"], Mapping
    ):
        kwargs["reading_speed_presets"] = dict(kwargs["reading_speed_presets"])
    for name in _WORD_LIST_FIELDS:
        if name not in kwargs:
            continue
        value = kwargs[name]
        if value is None:
            value = ()
        if isinstance(value, str) or not isinstance(value, Iterable):
            raise InvalidOptionsError(
                f"{name} must be a collection of strings, got {value!r}."
            )
        kwargs[name] = list(value)
    if "stop_words" in kwargs:
        _require_strings("stop_words", kwargs["stop_words"])
        kwargs["stop_words"] = frozenset(word.lower() for word in kwargs["stop_words"])
    return kwargs


def options_from_dict(data: Mapping[str, Any] | None) -> AnalysisOptions:
    """Build AnalysisOptions from a dictionary-like input; unknown keys are ignored."""
    if data is None:
        return AnalysisOptions()
    if not isinstance(data, Mapping):
        raise InvalidOptionsError("Options must be a mapping or AnalysisOptions.")
    return AnalysisOptions(**_build_kwargs(data))


def options_from_yaml(path: str | Path) -> AnalysisOptions:
    """Load options from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise InvalidOptionsError("Configuration YAML must define a mapping.")
    return options_from_dict(parsed)


def load_options(path: str | Path | None = None) -> AnalysisOptions:
    """Load options from YAML when provided, otherwise return defaults."""
    if path is None:
        return AnalysisOptions()
    return options_from_yaml(path)


def resolve_options(
    options: AnalysisOptions | Mapping[str, Any] | None,
) -> AnalysisOptions:
    """Coerce and validate whatever the caller passed as options."""
    if isinstance(options, AnalysisOptions):
        resolved = options
    else:
        resolved = options_from_dict(options)
    return validate_options(resolved)
