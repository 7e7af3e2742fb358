"""Structured logging setup for applications embedding the rule pipeline.

The pipeline modules only ever call structlog.get_logger(__name__). The host
application calls configure_logging() once at startup to decide how those
events are rendered:

    from rule_pipeline import configure_logging
    configure_logging()                      # from environment / .env
    configure_logging(Settings(ENVIRONMENT="production"))

ENVIRONMENT=production renders one JSON object per line, anything else a
colored console line. DEBUG=true forces the DEBUG level.
"""

import logging
import sys
from typing import Optional

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from rule_pipeline.config import Settings, settings as default_settings


def app_context_processor(app_name: str, app_version: str) -> Processor:
    """Build a processor stamping every event with the application identity."""

    def add_app_context(
        logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> EventDict:
        event_dict.setdefault("app", app_name)
        event_dict.setdefault("app_version", app_version)
        return event_dict

    return add_app_context


def resolve_log_level(settings: Settings) -> int:
    """DEBUG wins over LOG_LEVEL; unknown level names fall back to INFO."""
    if settings.DEBUG:
        return logging.DEBUG
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Route structlog and stdlib logging through one stdout handler.

    Args:
        settings: Settings to read LOG_LEVEL, DEBUG, ENVIRONMENT, APP_NAME and
            APP_VERSION from (defaults to the global settings)
    """
    settings = settings or default_settings
    level = resolve_log_level(settings)
    is_production = settings.ENVIRONMENT.lower() == "production"

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        app_context_processor(settings.APP_NAME, settings.APP_VERSION),
    ]

    if is_production:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())

    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=renderer,
            foreign_pre_chain=shared_processors,
        )
    )
    handler.setLevel(level)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    structlog.get_logger(__name__).debug(
        "Logging configured",
        level=logging.getLevelName(level),
        renderer="json" if is_production else "console",
    )
