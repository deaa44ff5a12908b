"""Exception classes for report token conversion.

Malformed tokens raise :class:`ParseError`. Tokens that are well formed but
cannot be converted (variable wind, unknown visibility unit) are not errors
and are reported through sentinel return values instead.
"""

from __future__ import annotations

from typing import Optional


class ConversionError(Exception):
    """Base class for conversion failures.

    Carries the offending token and the underlying exception, when there
    is one, for debugging.
    """

    def __init__(
        self,
        message: str,
        token: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            token: The report token that failed to convert
            original_error: The original exception that was caught
        """
        super().__init__(message if token is None else f"{message}: {token!r}")
        self.message: str = message
        self.token: Optional[str] = token
        self.original_error: Optional[Exception] = original_error


class ParseError(ConversionError):
    """Raised when a token holds malformed numeric text or an invalid time."""

    pass
