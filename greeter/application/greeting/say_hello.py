"""
Use case: Greet a caller by name.

Input: GreetRequest (name)
Output: GreetResponse (greeting or in-band error)
Side effects: None.
Failure cases: GreetingDomainError is returned in-band, never raised.
"""

import logging

from greeter.application.greeting.dtos import GreetRequest, GreetResponse
from greeter.domain.greeting.errors import GreetingDomainError
from greeter.domain.greeting.ports import GreetService

logger = logging.getLogger(__name__)


class SayHelloUseCase:
    """Adapts a transport-agnostic request into a GreetService call.

    Business failures are carried inside the returned GreetResponse so
    that callers can tell them apart from transport failures.
    """

    def __init__(self, greet_service: GreetService) -> None:
        self._greet_service = greet_service

    def execute(self, request: object) -> GreetResponse:
        """Run the greeting use case.

        Args:
            request: The greeting request. Must be a GreetRequest.

        Returns:
            A GreetResponse holding either the greeting or the domain error.

        Raises:
            TypeError: If ``request`` is not a GreetRequest.
        """
        if not isinstance(request, GreetRequest):
            raise TypeError(
                f"expected GreetRequest, got {type(request).__name__}"
            )

        try:
            greeting = self._greet_service.hello(request.name)
        except GreetingDomainError as exc:
            logger.debug("Greeting failed for name=%r: %s", request.name, exc)
            return GreetResponse(greeting="", error=exc)

        return GreetResponse(greeting=greeting, error=None)
