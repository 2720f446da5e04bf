"""
Structured error types for netspine operators.

Every failure an operator can produce is a subclass of NetspineError. Each
error carries a category for routing, an explicit ``retryable`` flag, a
structured ErrorContext naming the offending argument and call-site, and an
optional chained cause.

Manifesto:
    - **Typed Error Hierarchy:** One class per failure kind, so hosts can
      tell a bad argument count from a bad address without parsing messages
    - **Actionable Context:** argument index and value travel with the error
    - **Error Chaining:** the original exception is preserved as ``cause``
    - **Terminal:** nothing an operator raises is retryable; identical inputs
      fail identically

Architecture:
    ::

        ┌──────────────────────────────────────────────────────────────┐
        │                       NetspineError                           │
        │  (category, retryable, context, cause)                        │
        ├──────────────────────────────────────────────────────────────┤
        │                                                               │
        │  ArgumentError            ParseError        ConfigError        │
        │  (VALIDATION)             (PARSE)           (CONFIG)           │
        │       │                                          │             │
        │  ArgumentCountError       ReferenceResolutionError             │
        │  ArgumentTypeError        PathNotFoundError                    │
        │  CoercionError            (SOURCE)         OperatorNotFoundError│
        │  BoundsError                                                   │
        └──────────────────────────────────────────────────────────────┘

Examples:
    >>> error = BoundsError("Start index 300 exceeds size of subnet 10.0.0.0/24")
    >>> error.with_context(operator="ips", argument_index=1, argument_value=300)
    BoundsError('Start index 300 exceeds size of subnet 10.0.0.0/24', category=VALIDATION)
    >>> error.to_dict()["context"]["argument_index"]
    1

Tags:
    error-handling, exception-hierarchy, error-context, netspine, operators

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """
    Standard error categories for classification and routing.

    Attributes:
        VALIDATION: Bad argument count, type, shape or range
        PARSE: Unparseable address or block text
        SOURCE: Failure inside the host's reference resolution capability
        CONFIG: Unknown operator, invalid settings
        INTERNAL: Bugs, unexpected state
    """

    VALIDATION = "VALIDATION"
    PARSE = "PARSE"
    SOURCE = "SOURCE"
    CONFIG = "CONFIG"
    INTERNAL = "INTERNAL"


@dataclass
class ErrorContext:
    """
    Structured metadata attached to an error.

    Attributes:
        operator: Name of the operator that failed (e.g. ``"ips"``)
        location: Call-site path in the host document
        argument_index: Zero-based position of the offending argument
        argument_value: The offending value, as received or resolved
        reference: Reference path that failed to resolve
        metadata: Additional key-value pairs
    """

    operator: str | None = None
    location: str | None = None
    argument_index: int | None = None
    argument_value: Any = None
    reference: str | None = None

    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["operator", "location", "argument_index", "argument_value", "reference"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class NetspineError(Exception):
    """
    Base exception for all netspine errors.

    Subclasses set ``default_category`` and ``default_retryable`` so the
    common case needs nothing but a message.
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL
    default_retryable: bool = False

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        retryable: bool | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.retryable = retryable if retryable is not None else self.default_retryable
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> NetspineError:
        """
        Add context to this error (fluent API).

        Usage:
            raise CoercionError("not an integer").with_context(
                argument_index=1, argument_value="five"
            )
        """
        for key, value in kwargs.items():
            if hasattr(self.context, key) and key != "metadata":
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
            "retryable": self.retryable,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# ARGUMENT ERRORS
# =============================================================================


class ArgumentError(NetspineError):
    """An operator argument is missing, malformed or out of range."""

    default_category = ErrorCategory.VALIDATION


class ArgumentCountError(ArgumentError):
    """Too few or too many arguments for the operator."""

    def __init__(self, message: str, *, expected: tuple[int, int] | None = None, received: int | None = None):
        super().__init__(message)
        self.expected = expected
        self.received = received
        if expected is not None:
            self.context.metadata["expected"] = f"{expected[0]}..{expected[1]}"
        if received is not None:
            self.context.metadata["received"] = received


class ArgumentTypeError(ArgumentError):
    """Argument is neither a literal nor a reference, or resolved to an unusable value."""


class CoercionError(ArgumentError):
    """Index or count is not integer-shaped."""


class BoundsError(ArgumentError):
    """Index or index+count does not fit in the block."""


# =============================================================================
# PARSE / SOURCE ERRORS
# =============================================================================


class ParseError(NetspineError):
    """Text is neither a CIDR block nor a bare IP address."""

    default_category = ErrorCategory.PARSE


class PathNotFoundError(NetspineError):
    """A cursor path does not exist in the document."""

    default_category = ErrorCategory.SOURCE

    def __init__(self, path: str, message: str):
        super().__init__(message)
        self.path = path
        self.context.reference = path


class ReferenceResolutionError(NetspineError):
    """The host's reference resolution capability failed."""

    default_category = ErrorCategory.SOURCE

    def __init__(self, reference: str, message: str, *, cause: Exception | None = None):
        super().__init__(f"Unable to resolve `{reference}`: {message}", cause=cause)
        self.reference = reference
        self.context.reference = reference


# =============================================================================
# CONFIG ERRORS
# =============================================================================


class ConfigError(NetspineError):
    """Configuration or registration problem."""

    default_category = ErrorCategory.CONFIG


class OperatorNotFoundError(ConfigError):
    """No operator registered under the requested name."""

    def __init__(self, name: str, available: list[str] | None = None):
        listing = ", ".join(available or []) or "none"
        super().__init__(f"Operator '{name}' not found. Available: {listing}")
        self.operator_name = name
        self.context.operator = name


def categorize_error(error: Exception) -> ErrorCategory:
    """Return the category of ``error``, INTERNAL for foreign exceptions."""
    if isinstance(error, NetspineError):
        return error.category
    return ErrorCategory.INTERNAL


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "NetspineError",
    "ArgumentError",
    "ArgumentCountError",
    "ArgumentTypeError",
    "CoercionError",
    "BoundsError",
    "ParseError",
    "PathNotFoundError",
    "ReferenceResolutionError",
    "ConfigError",
    "OperatorNotFoundError",
    "categorize_error",
]
