"""
Transport-level errors.

These are raised at the HTTP boundary and never by the domain.
They are distinct from domain errors, which travel in-band.
"""


class TransportError(Exception):
    """Base error for failures at the transport boundary."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class DecodeError(TransportError):
    """Raised when a request body cannot be decoded."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Malformed request body: {reason}")
        self.reason = reason


class PayloadTooLargeError(TransportError):
    """Raised when a request body exceeds the configured size limit."""

    def __init__(self, size: int, limit: int) -> None:
        super().__init__(f"Request body too large: {size} > {limit} bytes")
        self.size = size
        self.limit = limit


class ListenError(TransportError):
    """Raised when the HTTP listener cannot bind its address."""

    def __init__(self, addr: str, reason: str) -> None:
        super().__init__(f"listen {addr}: {reason}")
        self.addr = addr
        self.reason = reason
