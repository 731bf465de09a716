"""Structured logging configuration with JSON output and context injection."""

import contextvars
import logging
import logging.config

import structlog

from chingoohaja.core.config import get_settings

# Context var for the session being operated on (thread-safe for async)
session_id_var: contextvars.ContextVar[str] = contextvars.ContextVar(
    "session_id", default="no-session-id"
)


def get_session_id() -> str:
    """Get current session ID from context."""
    return session_id_var.get()


def set_session_id(session_id: str) -> None:
    """Set session ID for current context."""
    session_id_var.set(session_id)


def configure_logging(level: str | None = None) -> None:
    """Configure structlog with JSON output for production."""
    level = (level or get_settings().log_level).upper()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Configure stdlib logging to use structlog
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "processor": structlog.dev.ConsoleRenderer(),
                },
            },
            "handlers": {
                "default": {
                    "level": level,
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "loggers": {
                "": {
                    "handlers": ["default"],
                    "level": level,
                    "propagate": True,
                }
            },
        }
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structlog logger with session ID already bound."""
    return structlog.get_logger(name).bind(session_id=get_session_id())
