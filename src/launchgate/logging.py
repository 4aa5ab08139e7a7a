"""
structlog setup and per-request log context.

Request and user ids live in structlog's context variables, so every event
logged while a request is being served carries them, including events from
resolvers running in child tasks.
"""

import logging
import secrets
import sys

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars

REQUEST_ID_HEADER = "X-Request-ID"


def configure_logging(debug: bool = False, level: str | None = None) -> None:
    """Route structlog through stdlib logging on stdout.

    Args:
        debug: Render colored console output instead of JSON lines
        level: Log level name; DEBUG when ``debug`` is set, INFO otherwise
    """
    log_level = logging.getLevelName((level or ("DEBUG" if debug else "INFO")).upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    logging.basicConfig(level=log_level, stream=sys.stdout, format="%(message)s", force=True)

    renderer = (
        structlog.dev.ConsoleRenderer(colors=True)
        if debug
        else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="ISO", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def new_request_id() -> str:
    return secrets.token_hex(8)


def set_request_context(request_id: str | None = None) -> str:
    """Start a fresh log context for one request and return its request id.

    A caller-supplied id (from the ``X-Request-ID`` header) is kept when it is
    short and printable; otherwise a new one is generated.
    """
    if not request_id or len(request_id) > 64 or not request_id.isprintable():
        request_id = new_request_id()
    clear_contextvars()
    bind_contextvars(request_id=request_id)
    return request_id


def bind_user_id(user_id: str | None) -> None:
    """Attach the authenticated user to the current log context."""
    bind_contextvars(user_id=user_id)


def clear_request_context() -> None:
    clear_contextvars()
