"""
Dependency injection for the greeting bounded context.

Provides FastAPI dependency functions that compose the greeting
service with its decorators and hand it to the use case.
These are the composition root for the greeting context.
"""

from greeter.application.greeting.logging_service import LoggingGreetService
from greeter.application.greeting.say_hello import SayHelloUseCase
from greeter.domain.greeting.ports import GreetService
from greeter.domain.greeting.service import BasicGreetService


def get_greet_service() -> GreetService:
    """Build the base greeting service wrapped in its logging decorator."""
    return LoggingGreetService(BasicGreetService())


def get_say_hello_use_case() -> SayHelloUseCase:
    """Build SayHelloUseCase with its service dependency."""
    return SayHelloUseCase(greet_service=get_greet_service())
