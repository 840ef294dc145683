from __future__ import annotations


class ConverterInternalError(AssertionError):
    """Raised when an internal invariant of the conversion pipeline is broken."""
