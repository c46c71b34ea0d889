"""
Error handling for jam.

Every failure raised by the library is a JamError carrying an integer code.
Each typed subclass also derives from the matching builtin exception so that
callers may catch either form (e.g. ``JamIndexError`` is an ``IndexError``).
"""

from __future__ import annotations

from typing import Optional


# =============================================================================
# Error Codes
# =============================================================================

# Success
JAM_OK = 0

# General errors (1-9)
JAM_ERROR_UNKNOWN = 1

# Argument errors (10-19)
JAM_ERROR_DIMENSION_MISMATCH = 11
JAM_ERROR_DOMAIN_ERROR = 12
JAM_ERROR_RANGE_ERROR = 13
JAM_ERROR_INDEX_OUT_OF_BOUNDS = 14
JAM_ERROR_FORMAT_ERROR = 15

# Type errors (20-29)
JAM_ERROR_TYPE_ERROR = 20
JAM_ERROR_UNSUPPORTED_OPERATION = 22

# Numerical errors (50-59)
JAM_ERROR_DIVISION_BY_ZERO = 51


_ERROR_MESSAGES = {
    JAM_OK: "Success",
    JAM_ERROR_UNKNOWN: "Unknown error",
    JAM_ERROR_DIMENSION_MISMATCH: "Dimension mismatch",
    JAM_ERROR_DOMAIN_ERROR: "Domain error",
    JAM_ERROR_RANGE_ERROR: "Range error",
    JAM_ERROR_INDEX_OUT_OF_BOUNDS: "Index out of bounds",
    JAM_ERROR_FORMAT_ERROR: "Format error",
    JAM_ERROR_TYPE_ERROR: "Type error",
    JAM_ERROR_UNSUPPORTED_OPERATION: "Unsupported operation",
    JAM_ERROR_DIVISION_BY_ZERO: "Division by zero",
}


# =============================================================================
# Exception Classes
# =============================================================================

class JamError(Exception):
    """
    Base exception for all jam errors.

    Attributes:
        code: Integer error code (one of the JAM_ERROR_* constants)
        message: Human-readable description
    """

    default_code = JAM_ERROR_UNKNOWN

    def __init__(self, message: Optional[str] = None, code: Optional[int] = None):
        if code is None:
            code = self.default_code
        self.code = code
        if message is None:
            message = _ERROR_MESSAGES.get(code, f"Unknown error (code={code})")
        self.message = message
        super().__init__(message)

    @classmethod
    def from_code(cls, code: int, context: str = "") -> "JamError":
        """Create the exception matching an error code, with optional context."""
        base_msg = _ERROR_MESSAGES.get(code, "Unknown error")
        msg = f"{context}: {base_msg}" if context else base_msg
        exc_type = _CODE_TYPES.get(code, cls)
        return exc_type(msg, code)


class JamIndexError(JamError, IndexError):
    """Invalid element, row or column index."""
    default_code = JAM_ERROR_INDEX_OUT_OF_BOUNDS


class DimensionMismatchError(JamError, ValueError):
    """Operand length or shape does not match."""
    default_code = JAM_ERROR_DIMENSION_MISMATCH


class DomainError(JamError, ValueError):
    """Operation is undefined for the given operand (e.g. non-square matrix)."""
    default_code = JAM_ERROR_DOMAIN_ERROR


class JamRangeError(JamError, ValueError):
    """Scalar argument lies outside its valid range."""
    default_code = JAM_ERROR_RANGE_ERROR


class JamFormatError(JamError, ValueError):
    """Malformed numeric text."""
    default_code = JAM_ERROR_FORMAT_ERROR


class JamTypeError(JamError, TypeError):
    """Operand has an unsupported type."""
    default_code = JAM_ERROR_TYPE_ERROR


class UnsupportedOperationError(JamError, TypeError):
    """API misuse, such as hashing a mutable numeric container."""
    default_code = JAM_ERROR_UNSUPPORTED_OPERATION


class ZeroDivisorError(JamError, ZeroDivisionError):
    """Division by a sum or norm that is zero within tolerance."""
    default_code = JAM_ERROR_DIVISION_BY_ZERO


_CODE_TYPES = {
    JAM_ERROR_INDEX_OUT_OF_BOUNDS: JamIndexError,
    JAM_ERROR_DIMENSION_MISMATCH: DimensionMismatchError,
    JAM_ERROR_DOMAIN_ERROR: DomainError,
    JAM_ERROR_RANGE_ERROR: JamRangeError,
    JAM_ERROR_FORMAT_ERROR: JamFormatError,
    JAM_ERROR_TYPE_ERROR: JamTypeError,
    JAM_ERROR_UNSUPPORTED_OPERATION: UnsupportedOperationError,
    JAM_ERROR_DIVISION_BY_ZERO: ZeroDivisorError,
}


# =============================================================================
# Validation Helpers
# =============================================================================

def check_index(index: int, length: int, what: str = "element") -> int:
    """
    Ensure that an index lies in ``[0, length)``.

    Negative indexes are rejected; there is no wrap-around.

    Raises:
        JamIndexError: If the index is out of bounds
    """
    if index < 0 or index >= length:
        raise JamIndexError(f"Invalid {what} index: [{index}] not in [0, {length}).")
    return index


def check_length(length: int, what: str = "length") -> int:
    """
    Ensure that a container dimension is non-negative.

    Raises:
        JamRangeError: If the dimension is negative
    """
    if length < 0:
        raise JamRangeError(f"Negative {what}: [{length}].")
    return length


__all__ = [
    # Codes
    "JAM_OK",
    "JAM_ERROR_UNKNOWN",
    "JAM_ERROR_DIMENSION_MISMATCH",
    "JAM_ERROR_DOMAIN_ERROR",
    "JAM_ERROR_RANGE_ERROR",
    "JAM_ERROR_INDEX_OUT_OF_BOUNDS",
    "JAM_ERROR_FORMAT_ERROR",
    "JAM_ERROR_TYPE_ERROR",
    "JAM_ERROR_UNSUPPORTED_OPERATION",
    "JAM_ERROR_DIVISION_BY_ZERO",
    # Exceptions
    "JamError",
    "JamIndexError",
    "DimensionMismatchError",
    "DomainError",
    "JamRangeError",
    "JamFormatError",
    "JamTypeError",
    "UnsupportedOperationError",
    "ZeroDivisorError",
    # Helpers
    "check_index",
    "check_length",
]
