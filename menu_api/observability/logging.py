from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


_UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")
_handler: logging.Handler | None = None


def _level_number(level: int | str) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.INFO)


def _install_handler() -> logging.Handler:
    pre_chain: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=[
            *pre_chain,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(),
            foreign_pre_chain=pre_chain,
        )
    )

    logging.getLogger().handlers = [handler]
    # uvicorn installs its own handlers; route them through ours.
    for name in _UVICORN_LOGGERS:
        logger = logging.getLogger(name)
        logger.handlers = [handler]
        logger.propagate = False
    return handler


def configure_logging(level: int | str = logging.INFO) -> None:
    """JSON logs on stdout via structlog's stdlib bridge.

    The handler is installed once per process; every call re-applies ``level``
    so each app built by ``create_app`` gets the level from its settings.
    """
    global _handler
    if _handler is None:
        _handler = _install_handler()

    level = _level_number(level)
    logging.getLogger().setLevel(level)
    for name in _UVICORN_LOGGERS:
        logging.getLogger(name).setLevel(level)
