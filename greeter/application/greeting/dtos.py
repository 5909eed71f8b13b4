"""
Data Transfer Objects for the greeting application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass

from greeter.domain.greeting.errors import GreetingDomainError


@dataclass(frozen=True)
class GreetRequest:
    """Input DTO for requesting a greeting.

    Attributes:
        name: Name of the caller. May be empty.
    """

    name: str = ""


@dataclass(frozen=True)
class GreetResponse:
    """Output DTO for a greeting.

    Exactly one outcome is carried: either a non-empty greeting, or a
    domain error with an empty greeting. Anything else is rejected.

    Attributes:
        greeting: The greeting text, empty on failure.
        error: The domain error, None on success.
    """

    greeting: str = ""
    error: GreetingDomainError | None = None

    def __post_init__(self) -> None:
        if self.error is None and not self.greeting:
            raise ValueError("a successful GreetResponse needs a greeting")
        if self.error is not None and self.greeting:
            raise ValueError("a failed GreetResponse must have an empty greeting")

    @property
    def ok(self) -> bool:
        return self.error is None
