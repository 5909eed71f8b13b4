"""
Logging configuration for the application.

structlog renders every record, from structlog and stdlib loggers alike,
as one logfmt line on stderr.
Logging must not change program behavior.
Never logs request bodies above DEBUG.
"""

import logging
import sys

import structlog

KEY_ORDER = ["timestamp", "level", "logger", "event"]


def _escape(text: str) -> str:
    if text.isprintable():
        return text
    return "".join(
        char if char.isprintable() else char.encode("unicode_escape").decode("ascii")
        for char in text
    )


def escape_control_characters(
    _logger: object, _method_name: str, event_dict: structlog.types.EventDict
) -> structlog.types.EventDict:
    """Escape line breaks and other non-printable characters in values.

    Keeps every record on a single line whatever the caller passed in.
    Exceptions are rendered as their message.
    """
    for key, value in event_dict.items():
        if isinstance(value, BaseException):
            value = str(value)
        if isinstance(value, str):
            event_dict[key] = _escape(value)
    return event_dict


def configure_logging(level: str = "INFO") -> None:
    """Configure structlog processors and output routing.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            escape_control_characters,
            structlog.processors.LogfmtRenderer(
                key_order=KEY_ORDER, bool_as_flag=False
            ),
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Suppress noisy third-party loggers
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.WARNING)
