"""
Shared error handling package.

Defines transport-level errors and centralizes error-to-HTTP mapping
so that every failure is translated into a consistent API response.
"""

from greeter.shared.errors.transport import (
    DecodeError,
    ListenError,
    PayloadTooLargeError,
    TransportError,
)

__all__ = [
    "DecodeError",
    "ListenError",
    "PayloadTooLargeError",
    "TransportError",
]
