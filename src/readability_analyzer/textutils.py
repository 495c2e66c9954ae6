from __future__ import annotations

import math
import re

CODE_FENCE_RE = re.compile(r"^[ \t]*```.*?^[ \t]*```[ \t]*$", re.MULTILINE | re.DOTALL)
WHITESPACE_RE = re.compile(r"\s")
QUOTE_TRANSLATION = str.maketrans(
    {
        "“": '"',
        "”": '"',
        "‘": "'",
        "’": "'",
    }
)


def prepare_text(value: str, *, ignore_code_blocks: bool = False) -> str:
    """Normalize line breaks and typographic quotes ahead of segmentation."""
    if not isinstance(value, str) or not value:
        return ""
    prepared = value.replace("\r\n", "\n").replace("\r", "\n")
    prepared = prepared.translate(QUOTE_TRANSLATION)
    if ignore_code_blocks:
        prepared = CODE_FENCE_RE.sub("", prepared)
    return prepared


def count_non_whitespace(value: str) -> int:
    if not value:
        return 0
    return len(WHITESPACE_RE.sub("", value))


def round_to(value: float, places: int = 2) -> float:
    """Round half up (toward positive infinity) to ``places`` decimals."""
    factor = 10**places
    return math.floor(value * factor + 0.5) / factor


def safe_divide(numerator: float, denominator: float) -> float:
    """Divide, returning 0.0 when the denominator is zero."""
    if not denominator:
        return 0.0
    return numerator / denominator
