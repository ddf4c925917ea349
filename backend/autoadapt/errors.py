"""Exception hierarchy for the adaptation engine."""

from __future__ import annotations

from typing import Any


class AutoAdaptError(Exception):
    """Base exception for all adaptation errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context = context or {}

    def __str__(self) -> str:
        message = super().__str__()
        if self.context:
            return f"{message} Context: {self.context}"
        return message


class NoReferenceSizeError(AutoAdaptError):
    """The document has no size to use as a reference layout."""


class HeuristicFailureError(AutoAdaptError):
    """Non-skew placement collapsed to an all-zero box."""


class InvalidSizeError(AutoAdaptError, ValueError):
    """A size string could not be turned into a usable canvas."""
