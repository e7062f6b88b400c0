"""Internal conversion faults."""

from __future__ import annotations


class ConversionInvariantError(Exception):
    """Raised when conversion reaches a state valid input cannot produce."""


class DepthLimitExceededError(ConversionInvariantError):
    """Raised when a type reference nests deeper than the mapping ceiling."""


class UnknownScalarError(ConversionInvariantError):
    """Raised for a scalar outside the built-in set when no fallback is supplied."""


class SelectionStackError(ConversionInvariantError):
    """Raised when selection frames do not unwind with the document."""
