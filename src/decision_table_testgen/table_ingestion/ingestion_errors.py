"""Decision table ingestion errors."""

from __future__ import annotations


class DecisionTableError(Exception):
    """Raised when a decision table cannot be parsed."""


class UnsupportedFormatError(DecisionTableError):
    """Raised when no reader exists for the requested format or extension."""


class InvalidFormatError(DecisionTableError):
    """Raised when a document does not have a recognized decision table shape."""


class TableReadError(DecisionTableError):
    """Raised when the decision table file cannot be read."""
