"""Identifi Packet Error Taxonomy.

This module defines the error hierarchy for packet construction and
validation, providing structured error handling with specific error
codes and context information.
"""
from __future__ import annotations

from typing import Any


class IdentifiError(Exception):
    """Base exception for all Identifi errors.

    This is the root exception class that all Identifi-specific errors
    inherit from. It provides a standardized way to handle packet-level
    errors with error codes and additional context.

    Attributes:
        code: Error code following the identifi:<area>/<name> pattern
        message: Human-readable error message
        details: Optional additional error context
    """

    def __init__(self, code: str, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Serialize to ``{code, message, details}`` dict."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class PacketValidationError(IdentifiError):
    """Common base for errors that abort packet construction.

    A packet is never left partially initialized: when one of these is
    raised, no packet object exists (or an existing one is unchanged).
    """


class MalformedDocumentError(PacketValidationError):
    """Raised when a packet document cannot be parsed or is not canonical.

    This covers JSON syntax errors, documents whose re-encoding differs
    from the input text, and fields holding a value of the wrong JSON type.
    """

    def __init__(self, reason: str, details: dict[str, Any] | None = None) -> None:
        message = f"Malformed document: {reason}"
        super().__init__(
            code="identifi:packet/malformed_document", message=message, details=details or {}
        )
        self.reason = reason


class MissingRequiredFieldError(PacketValidationError):
    """Raised when a required packet field is absent.

    Attributes:
        field: Name of the missing field as it appears in the document
    """

    def __init__(self, field: str, details: dict[str, Any] | None = None) -> None:
        message = f"Missing required field: {field}"
        super().__init__(
            code="identifi:packet/missing_field",
            message=message,
            details={"field": field, **(details or {})},
        )
        self.field = field


class InvalidCardinalityError(PacketValidationError):
    """Raised when the author or recipient list is empty or has a bad entry.

    Every packet needs at least one author (subject) and one recipient
    (object), and each entry must be a ``[type, value]`` pair.

    Attributes:
        field: "author" or "recipient"
        reason: What was wrong with the list
    """

    def __init__(self, field: str, reason: str, details: dict[str, Any] | None = None) -> None:
        message = f"Invalid {field} list: {reason}"
        super().__init__(
            code="identifi:packet/invalid_cardinality",
            message=message,
            details={"field": field, "reason": reason, **(details or {})},
        )
        self.field = field
        self.reason = reason


class InvalidRatingRangeError(PacketValidationError):
    """Raised when a rating lies outside its declared range or the range is empty.

    Attributes:
        rating: The rating value
        min_rating: Declared lower bound
        max_rating: Declared upper bound
    """

    def __init__(
        self,
        rating: int,
        min_rating: int,
        max_rating: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        message = f"Invalid rating {rating} for range [{min_rating}, {max_rating}]"
        super().__init__(
            code="identifi:packet/invalid_rating",
            message=message,
            details={
                "rating": rating,
                "min_rating": min_rating,
                "max_rating": max_rating,
                **(details or {}),
            },
        )
        self.rating = rating
        self.min_rating = min_rating
        self.max_rating = max_rating


class InvalidSignatureError(PacketValidationError):
    """Embedded signature does not verify against the signed data."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            code="identifi:packet/invalid_signature",
            message=message,
            details=details or {},
        )
