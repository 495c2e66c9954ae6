from __future__ import annotations

from collections import Counter
from typing import List, Sequence

from ..models import NGram


def iter_ngrams(words: Sequence[str], n: int) -> List[str]:
    """Return every contiguous ``n``-word window, case-folded and space-joined."""
    if n < 1 or len(words) < n:
        return []
    folded = [word.lower() for word in words]
    return [" ".join(folded[i : i + n]) for i in range(len(folded) - n + 1)]


def analyze_ngrams(words: Sequence[str], n: int = 2, limit: int = 20) -> List[NGram]:
    """Count n-grams and return the ``limit`` most frequent, first-seen on ties."""
    if limit <= 0:
        return []
    counts = Counter(iter_ngrams(words, n))
    ordered = sorted(counts.items(), key=lambda item: -item[1])
    return [
        NGram(ngram=ngram, count=count, rank=rank, words=tuple(ngram.split(" ")))
        for rank, (ngram, count) in enumerate(ordered[:limit], start=1)
    ]
