"""
Centralized logging configuration for the TA Signals engine.

This module provides standardized logging configuration using structlog
for all components. All logging throughout the package should use this
configuration to ensure consistent formatting and structured logging.
"""
import logging
import sys
from typing import TYPE_CHECKING, Optional, TextIO

import structlog
from structlog.types import FilteringBoundLogger

from ..errors import ConfigurationError

if TYPE_CHECKING:
    from ..signals.models import Signal

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None,
    stream: Optional[TextIO] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL), any case
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include a UTC ISO-8601 timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
        stream: Output stream (default stdout)

    Raises:
        ConfigurationError: ``level`` is not one of LOG_LEVELS
    """
    # Only the standard names; getattr(logging, ...) would take any attribute
    level_name = level.strip().upper()
    if level_name not in LOG_LEVELS:
        raise ConfigurationError(
            f"Unknown log level: {level!r}",
            context={"level": level, "allowed": list(LOG_LEVELS)},
        )
    output = stream or sys.stdout

    # Standard library logging only routes; structlog renders
    logging.basicConfig(
        level=getattr(logging, level_name),
        stream=output,
        format="%(message)s"
    )

    # Shared processor chain
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    # UTC, like the epoch-ms timestamps on price points
    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso", utc=True))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    # Renderer goes last; colours only on a terminal
    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=output.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_signal_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for signal decisions.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for signal synthesis
    """
    return get_logger(name).bind(
        subsystem="signals",
        audit_trail=True
    )


def log_signal_decision(
    logger: FilteringBoundLogger,
    signal: "Signal",
    symbol: Optional[str] = None,
) -> None:
    """
    Log a synthesized signal with standardized format.

    Args:
        logger: Structlog logger instance
        signal: The emitted signal
        symbol: Symbol the series belongs to, if known
    """
    bound_logger = logger.bind(
        indicator=signal.indicator,
        signal=signal.signal.value,
        strength=round(signal.strength, 2),
        reason=signal.reason,
    )

    if symbol:
        bound_logger = bound_logger.bind(symbol=symbol)

    if signal.is_actionable:
        bound_logger.info("Actionable signal")
    else:
        bound_logger.debug("Neutral signal")
