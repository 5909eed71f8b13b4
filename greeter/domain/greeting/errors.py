"""
Domain-specific errors for the greeting bounded context.

All errors raised from the domain layer must be defined here.
The endpoint adapter carries them in-band; strict mode maps them
to HTTP responses at the interface layer.
No framework imports allowed.
"""


class GreetingDomainError(Exception):
    """Base error for all greeting domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class InvalidArgumentError(GreetingDomainError):
    """Raised when the caller supplies an unusable argument."""

    def __init__(self, reason: str = "no name provided") -> None:
        super().__init__(reason)
        self.reason = reason
