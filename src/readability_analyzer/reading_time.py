from __future__ import annotations

import math
from typing import Dict, Mapping

from .models import ReadingTime

DEFAULT_READING_SPEEDS: Mapping[str, int] = {
    "slow": 200,
    "average": 250,
    "fast": 300,
    "expert": 400,
}


def format_reading_time(total_minutes: int) -> str:
    """Render ceiling minutes as "Xh Ym", "X min" or "< 1 min"."""
    hours, remaining = divmod(total_minutes, 60)
    if hours > 0:
        return f"{hours}h {remaining}m"
    if total_minutes > 0:
        return f"{total_minutes} min"
    return "< 1 min"


def reading_time_for(word_count: int, preset: str, words_per_minute: float) -> ReadingTime:
    minutes = word_count / words_per_minute if word_count > 0 else 0.0
    total_minutes = math.ceil(minutes)
    return ReadingTime(
        preset=preset,
        words_per_minute=words_per_minute,
        minutes=total_minutes,
        seconds=round(minutes * 60),
        formatted=format_reading_time(total_minutes),
    )


def estimate_reading_time(
    word_count: int, presets: Mapping[str, float] = DEFAULT_READING_SPEEDS
) -> Dict[str, ReadingTime]:
    """Estimate reading time for every preset, keyed by preset name."""
    return {
        name: reading_time_for(word_count, name, wpm)
        for name, wpm in presets.items()
    }
