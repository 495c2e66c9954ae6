"""
Heuristic English syllable counting.

The counter tallies vowel groups and applies two suffix corrections plus a
small exception table. It is approximate: disagreements with dictionary
syllable counts are expected and the readability formulas are calibrated
against this heuristic's output.
"""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

VOWELS = frozenset("aeiouy")
NON_LETTER_RE = re.compile(r"[^a-z]")
SILENT_E_RE = re.compile(r"[^aeiou]e$")
CONSONANT_LE_RE = re.compile(r"[^aeiouy]le$")

SYLLABLE_EXCEPTIONS: Dict[str, int] = {
    "simile": 3,
    "recipe": 3,
    "people": 2,
    "chocolate": 3,
}


@dataclass(slots=True, frozen=True)
class TextSyllables:
    total: int
    word_syllables: Tuple[Tuple[str, int], ...] = ()
    distribution: Dict[int, int] = field(default_factory=dict)

    @property
    def average_per_word(self) -> float:
        if not self.word_syllables:
            return 0.0
        return self.total / len(self.word_syllables)


def count_syllables(word: str) -> int:
    """Estimate the number of syllables in a single word."""
    if not isinstance(word, str):
        return 0
    clean = NON_LETTER_RE.sub("", word.lower())
    if not clean:
        return 0
    if len(clean) <= 2:
        return 1

    count = 0
    previous_was_vowel = False
    for char in clean:
        is_vowel = char in VOWELS
        if is_vowel and not previous_was_vowel:
            count += 1
        previous_was_vowel = is_vowel

    if SILENT_E_RE.search(clean):
        count -= 1
    if CONSONANT_LE_RE.search(clean):
        count += 1
    if clean in SYLLABLE_EXCEPTIONS:
        return SYLLABLE_EXCEPTIONS[clean]

    return max(count, 1)


def count_text_syllables(words: Iterable[str]) -> TextSyllables:
    """Count syllables for every word and summarize the distribution."""
    word_syllables: List[Tuple[str, int]] = []
    distribution: Counter[int] = Counter()
    total = 0
    for word in words:
        syllables = count_syllables(word)
        word_syllables.append((word, syllables))
        distribution[syllables] += 1
        total += syllables
    return TextSyllables(
        total=total,
        word_syllables=tuple(word_syllables),
        distribution=dict(sorted(distribution.items())),
    )
