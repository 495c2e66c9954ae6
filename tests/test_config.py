from pathlib import Path

import pytest

from readability_analyzer.config import (
    AnalysisOptions,
    load_options,
    options_from_dict,
    options_from_yaml,
    resolve_options,
    validate_options,
)
from readability_analyzer.errors import InvalidOptionsError
from readability_analyzer.frequency import DEFAULT_STOP_WORDS


def test_defaults():
    options = load_options()
    assert options.min_word_length == 2
    assert options.max_frequency_results == 10
    assert options.reading_speed_presets["average"] == 250
    assert options.stop_words == DEFAULT_STOP_WORDS
    assert validate_options(options) is options


def test_options_from_dict_ignores_unknown_keys():
    options = options_from_dict(
        {"min_word_length": 3, "stop_words": ["Foo", "bar"], "unknown": True}
    )
    assert options.min_word_length == 3
    assert options.stop_words == frozenset({"foo", "bar"})


def test_defaults_are_not_shared_between_instances():
    first = AnalysisOptions()
    first.reading_speed_presets["average"] = 999
    assert AnalysisOptions().reading_speed_presets["average"] == 250


def test_options_from_yaml(tmp_path: Path):
    path = tmp_path / "options.yaml"
    path.write_text(
        "max_frequency_results: 5\n"
        "formulas: [flesch, smog]\n"
        "reading_speed_presets:\n"
        "  average: 220\n",
        encoding="utf-8",
    )
    options = options_from_yaml(path)
    assert options.max_frequency_results == 5
    assert options.formulas == ["flesch", "smog"]
    assert options.reading_speed_presets == {"average": 220}


def test_yaml_must_be_a_mapping(tmp_path: Path):
    path = tmp_path / "bad.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(InvalidOptionsError):
        load_options(path)


def test_resolve_options_rejects_non_mappings():
    with pytest.raises(InvalidOptionsError):
        resolve_options(["not", "options"])  # type: ignore[arg-type]


def test_to_dict_is_plain_data():
    data = AnalysisOptions(stop_words=frozenset({"b", "a"})).to_dict()
    assert data["stop_words"] == ["a", "b"]
    assert data["ignore_code_blocks"] is False
