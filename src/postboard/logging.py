"""
Structured logging for Postboard.

Request-scoped fields (request id, GraphQL operation) are bound with
structlog's contextvars support, so every log line emitted while a request
is being served carries them without passing loggers around.
"""

import logging
import sys
import uuid

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars, merge_contextvars


def configure_logging(level: str = "INFO", json_output: bool = False) -> None:
    """Route structlog through the stdlib root logger.

    ``json_output`` switches from the coloured console renderer to one JSON
    object per line.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())
    )

    structlog.configure(
        processors=[
            merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="ISO", utc=True),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def bind_request(request_id: str | None = None, operation: str | None = None) -> str:
    """Bind request fields for the current context and return the request id."""
    request_id = request_id or uuid.uuid4().hex[:16]
    fields = {"request_id": request_id}
    if operation:
        fields["graphql_operation"] = operation
    bind_contextvars(**fields)
    return request_id


def unbind_request() -> None:
    clear_contextvars()
