"""Custom exceptions for the QURI builder.

This module defines all custom exceptions raised while building and rendering
QURI expressions, so callers can catch one base class.
"""

from typing import Any, Dict


# Base exception
class QuriError(Exception):
    """Base exception for all QURI errors.

    Attributes:
        message: Error message
        details: Additional error context as key-value pairs
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        """Initialize exception with message and additional details.

        Args:
            message: Human-readable error message
            **kwargs: Additional context (e.g., operator, field, connective)
        """
        self.message = message
        self.details: Dict[str, Any] = kwargs
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the complete error message with details."""
        if not self.details:
            return self.message

        details_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
        if self.message:
            return f"{self.message} ({details_str})"
        return details_str

    def __repr__(self) -> str:
        """Return detailed representation of the exception."""
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# Construction exceptions
class ExpressionError(QuriError):
    """Raised when an expression cannot be added to a group.

    Example:
        >>> raise ExpressionError("Invalid expression", field="age")
    """


class InvalidOperatorError(ExpressionError):
    """Raised when an operator token has no canonical QURI spelling.

    Example:
        >>> raise InvalidOperatorError("Unknown operator", operator="~=", field="name")
    """


class InvalidConnectiveError(ExpressionError):
    """Raised when a group is created with something other than and/or.

    Example:
        >>> raise InvalidConnectiveError("Unknown connective", connective="xor")
    """


# Rendering exceptions
class RenderError(QuriError):
    """Raised when a group fails to render.

    Example:
        >>> raise RenderError("Render failed", reason="bad node")
    """


class EncodingError(RenderError, ValueError):
    """Raised when a field name or value cannot be encoded as a JSON literal.

    Example:
        >>> raise EncodingError("Value is not JSON serializable", value_type="set", field="tags")
    """


class CyclicGroupError(RenderError, RecursionError):
    """Raised when a group is nested inside itself, directly or transitively.

    Example:
        >>> raise CyclicGroupError("Group contains itself", connective="and")
    """
