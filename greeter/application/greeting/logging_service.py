"""
Logging decorator for the greeting capability.

Wraps any GreetService and emits one structured record per call with
the method, input, error and elapsed time. Results and errors pass
through unchanged.
"""

import time

import structlog

from greeter.domain.greeting.ports import GreetService

logger = structlog.get_logger(__name__)


def _format_duration(seconds: float) -> str:
    return f"{seconds * 1000:.3f}ms"


class LoggingGreetService(GreetService):
    """GreetService that logs every call made to the wrapped service."""

    def __init__(self, next_service: GreetService, log=None) -> None:
        self._next = next_service
        self._logger = log if log is not None else logger

    def hello(self, name: str) -> str:
        begin = time.perf_counter()
        err: Exception | None = None
        try:
            return self._next.hello(name)
        except Exception as exc:
            err = exc
            raise
        finally:
            self._logger.info(
                "hello",
                method="Hello",
                input=name,
                err=err,
                took=_format_duration(time.perf_counter() - begin),
            )
