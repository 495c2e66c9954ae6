"""
readability_analyzer exports the analysis entry points for library consumers.
"""

from __future__ import annotations

from . import errors
from .config import AnalysisOptions, load_options, options_from_dict, options_from_yaml
from .metrics import compute_metrics
from .models import Report
from .pipeline import TextComparison, analyze, analyze_batch, compare_texts, segment
from .segmentation import build_document
from .syllables import count_syllables

__all__ = [
    "AnalysisOptions",
    "Report",
    "TextComparison",
    "analyze",
    "analyze_batch",
    "build_document",
    "compare_texts",
    "compute_metrics",
    "count_syllables",
    "errors",
    "load_options",
    "options_from_dict",
    "options_from_yaml",
    "segment",
]

__version__ = "0.1.0"
