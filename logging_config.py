"""Structured logging configuration for the Stackdriver stats translator"""
import logging
import os
import sys
from typing import Any, Dict, List
import structlog
from structlog.stdlib import LoggerFactory
from structlog.dev import ConsoleRenderer
from structlog.processors import JSONRenderer, TimeStamper, StackInfoRenderer
from config import Config

# Structured attributes carried by translation errors
ERROR_FIELDS = (
    "metric_name",
    "value_type",
    "expected",
    "actual",
    "reason",
    "seconds",
    "nanos",
    "bound_count",
    "bucket_count",
)


def _renderer():
    """Console output when ENVIRONMENT=development, JSON lines otherwise"""
    if os.getenv("ENVIRONMENT", "production").lower() == "development":
        return ConsoleRenderer()
    return JSONRenderer()


def _build_handlers(config: Config, level: int) -> List[logging.Handler]:
    handlers = []
    if config.log_file is not None:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(str(config.log_file)))
    handlers.append(logging.StreamHandler(sys.stdout))
    for handler in handlers:
        handler.setLevel(level)
    return handlers


def setup_structured_logging(config: Config) -> None:
    """Route translator logs through stdlib logging at the configured level.

    Safe to call more than once; each call replaces the root handlers.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            TimeStamper(fmt="iso", utc=True),
            StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _renderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    level = getattr(logging, config.log_level.upper())
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=_build_handlers(config, level),
        force=True
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance"""
    return structlog.get_logger(name)


def bind_metric(logger: structlog.stdlib.BoundLogger, metric_name: str, metric_prefix: str) -> structlog.stdlib.BoundLogger:
    """Attach the metric being translated to every subsequent event"""
    return logger.bind(metric_name=metric_name, metric_prefix=metric_prefix)


def log_translation(logger: structlog.stdlib.BoundLogger, metric_name: str, series_count: int, point_count: int) -> None:
    """Log a translated metric with structured data"""
    logger.debug(
        "Metric translated",
        metric_name=metric_name,
        series_count=series_count,
        point_count=point_count,
        event_type="metric_translation"
    )


def error_fields(error: Exception) -> Dict[str, Any]:
    """Structured attributes of a translation error, enums rendered by name"""
    fields = {}
    for name in ERROR_FIELDS:
        if hasattr(error, name):
            value = getattr(error, name)
            fields[name] = getattr(value, "name", value)
    return fields


def log_error(logger: structlog.stdlib.BoundLogger, error: Exception, context: Dict[str, Any] = None) -> None:
    """Log a failed translation with the error's own attributes"""
    logger.error(
        "Translation failed",
        error=str(error),
        error_type=type(error).__name__,
        context=context or {},
        **error_fields(error),
        event_type="translation_error",
        exc_info=True
    )
