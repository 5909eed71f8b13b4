"""
Port interfaces (ABCs) for the greeting bounded context.

Ports define the contracts the rest of the application depends on.
Implementations and decorators are substitutable wherever a port
is required.
"""

from abc import ABC, abstractmethod


class GreetService(ABC):
    """Port for the greeting capability."""

    @abstractmethod
    def hello(self, name: str) -> str:
        """Return a greeting for ``name``.

        Raises:
            GreetingDomainError: If no greeting can be produced.
        """
        raise NotImplementedError
