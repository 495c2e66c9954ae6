from __future__ import annotations

import re
from typing import Dict, List

from .models import Token
from .syllables import count_syllables

TOKEN_PATTERN = re.compile(r"\w+", re.UNICODE)


def tokenize_words(
    text: str, offset: int = 0, syllable_cache: Dict[str, int] | None = None
) -> List[Token]:
    """Tokenize text into word tokens with character offsets and syllables.

    ``offset`` is added to every character position so tokens from a
    substring can be reported against the full text.
    """
    if not isinstance(text, str) or not text:
        return []
    cache: Dict[str, int] = {} if syllable_cache is None else syllable_cache
    tokens: List[Token] = []
    for match in TOKEN_PATTERN.finditer(text):
        surface = match.group()
        normalized = surface.lower()
        syllables = cache.get(normalized)
        if syllables is None:
            syllables = count_syllables(normalized)
            cache[normalized] = syllables
        tokens.append(
            Token(
                text=surface,
                normalized=normalized,
                start_char=match.start() + offset,
                end_char=match.end() + offset,
                syllables=syllables,
            )
        )
    return tokens


def extract_words(text: str) -> List[str]:
    """Return the case-folded words of ``text`` in order."""
    if not isinstance(text, str) or not text:
        return []
    return [match.group().lower() for match in TOKEN_PATTERN.finditer(text)]
