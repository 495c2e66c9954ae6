from __future__ import annotations


class ReadabilityAnalyzerError(Exception):
    """Base class for errors raised at the analysis boundary."""


class InvalidInputError(ReadabilityAnalyzerError, TypeError):
    """Raised when the text handed to ``analyze`` is not a string."""


class InvalidOptionsError(ReadabilityAnalyzerError, ValueError):
    """Raised when analysis options are malformed or out of range."""


class IngestError(RuntimeError):
    """Raised when an input file or URL cannot be read."""
