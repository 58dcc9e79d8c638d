"""
Exceptions raised by the paraphraser services.

Only InputValidationError carries a message meant for end users; everything
else is logged and collapsed into a generic message by the action service.
"""

from __future__ import annotations

from typing import Any, Optional


class ParaphraserError(Exception):
    """Base exception for all paraphraser errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InputValidationError(ParaphraserError):
    """User-supplied text failed a precondition (shown verbatim)."""


class ProviderError(ParaphraserError):
    """The LLM call itself failed: network, timeout, quota, auth, unknown model."""


class SchemaValidationError(ParaphraserError):
    """The LLM replied, but the reply does not conform to the output schema."""


class InvalidTransitionError(ParaphraserError):
    """A page state transition was requested from the wrong state."""
