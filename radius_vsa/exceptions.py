# radius_vsa/exceptions.py
"""
Custom exceptions for the RADIUS VSA codec.

Wire and value errors also subclass ValueError so callers that already
guard low-level parsers with ``except ValueError`` keep working.
"""

from typing import Any


class RadiusVsaError(Exception):
    """Base exception for all radius_vsa errors."""

    error_code = "radius_vsa_error"

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


# Value / codec exceptions
class InvalidInputError(RadiusVsaError, ValueError):
    """Raised when a required value is missing or out of range."""

    error_code = "invalid_input"


class AddressFamilyMismatchError(InvalidInputError):
    """Raised when a non-IPv4 address is supplied to an IPv4 field."""

    error_code = "address_family_mismatch"


class InvalidEncodingError(RadiusVsaError, ValueError):
    """Raised when bytes that must be UTF-8 text are not."""

    error_code = "invalid_encoding"


class TruncatedValueError(RadiusVsaError, ValueError):
    """Raised when a fixed-width value has fewer bytes than required."""

    error_code = "truncated"


# Framing exceptions
class ValueTooLargeError(RadiusVsaError, ValueError):
    """Raised when a value does not fit a single attribute and the format
    has no fragmentation mechanism."""

    error_code = "value_too_large"

    def __init__(self, message: str, size: int, limit: int, **kwargs: Any):
        details = {"size": size, "limit": limit, **kwargs}
        super().__init__(message, details)
        self.size = size
        self.limit = limit


class MalformedAttributeError(RadiusVsaError, ValueError):
    """Raised when an attribute's declared lengths disagree with its bytes."""

    error_code = "malformed_attribute"


class IncompleteFragmentChainError(RadiusVsaError, ValueError):
    """Raised when a continuation chain ends or diverges before its
    terminal segment."""

    error_code = "incomplete_fragment_chain"


# Config exceptions
class ConfigError(RadiusVsaError):
    """Base exception for configuration-related errors."""

    error_code = "config_error"


class ConfigValidationError(ConfigError):
    """Raised when configuration validation fails."""

    error_code = "config_validation_error"

    def __init__(
        self, message: str, field: str | None = None, value: Any = None, **kwargs: Any
    ):
        details = {"field": field, "value": value, **kwargs}
        super().__init__(message, details)
        self.field = field
        self.value = value
