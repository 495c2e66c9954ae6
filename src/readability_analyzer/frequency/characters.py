from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import List


@dataclass(slots=True, frozen=True)
class CharacterCount:
    character: str
    count: int
    rank: int
    is_letter: bool
    is_digit: bool
    is_punctuation: bool


def character_frequency(text: str, case_sensitive: bool = False) -> List[CharacterCount]:
    """Rank the non-whitespace characters of ``text`` by frequency."""
    if not isinstance(text, str) or not text:
        return []
    processed = text if case_sensitive else text.lower()
    counts = Counter(char for char in processed if not char.isspace())
    ordered = sorted(counts.items(), key=lambda item: -item[1])
    return [
        CharacterCount(
            character=char,
            count=count,
            rank=rank,
            is_letter=char.isalpha(),
            is_digit=char.isdigit(),
            is_punctuation=not char.isalnum() and char != "_",
        )
        for rank, (char, count) in enumerate(ordered, start=1)
    ]
