"""structlog configuration for userkit.

userkit is a library, so only the ``userkit`` logger tree is touched: one
stderr handler is installed on the ``userkit`` logger and the root logger is
left to the embedding application. Records still propagate, so an
application's own root handlers (and pytest's ``caplog``) keep seeing them.

Two output modes, picked by :class:`UserkitSettings`:
- Console (default): ``user.rejected errors=[...]`` lines to stderr
- JSON (``log_json``): one JSON object per event to stderr
"""

from __future__ import annotations

import logging
import sys

import structlog

from userkit.config.settings import UserkitSettings

HANDLER_NAME = "userkit"

# Domain code logs through stdlib ``logging``; the service layer through
# structlog. Both end up in the same formatter.
_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
]


def configure_logging(settings: UserkitSettings | None = None) -> None:
    """Route ``userkit`` logs to stderr according to *settings*.

    Without *settings*, ``UserkitSettings()`` is read from the environment.
    Calling again replaces the previous handler instead of stacking a new one.
    """
    settings = settings or UserkitSettings()

    if settings.log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_SHARED_PROCESSORS,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    userkit_logger = logging.getLogger("userkit")
    for existing in userkit_logger.handlers[:]:
        if existing.get_name() == HANDLER_NAME:
            userkit_logger.removeHandler(existing)
    userkit_logger.addHandler(handler)
    userkit_logger.setLevel(logging.DEBUG if settings.verbose else logging.WARNING)
