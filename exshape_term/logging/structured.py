"""
Structured JSON Logger
======================

Bounded Context: Observability Infrastructure

Design:
- JSON output (one object per line, parseable by log aggregators)
- Thread-safe (uses standard logging module)
- Contextual metadata (ring_count, reason, etc.)
- Type-safe events (LogEvent enum)

Example:
    >>> logger = StructuredLogger(component="codec")
    >>> logger.warning(
    ...     event=LogEvent.EMPTY_POLYGON,
    ...     message="Rejected polygon term",
    ...     metadata={'reason': 'empty_sequence'}
    ... )

Output:
    {
        "timestamp": "2026-10-17T09:12:03.512844+00:00",
        "level": "WARNING",
        "component": "codec",
        "event": "error.empty_polygon",
        "message": "Rejected polygon term",
        "metadata": {"reason": "empty_sequence"}
    }
"""

import json
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from .events import LogEvent


class StructuredLogger:
    """
    JSON structured logger.

    Wraps Python's logging module with structured metadata support.

    Attributes:
        component: Component name (e.g., "codec")
        logger: Underlying Python logger instance

    Thread Safety:
        Thread-safe via Python's logging module.
    """

    def __init__(
        self,
        component: str,
        level: int = logging.INFO,
        logger_name: Optional[str] = None
    ):
        """
        Initialize structured logger.

        Args:
            component: Component identifier (e.g., "codec")
            level: Logging level (default: INFO)
            logger_name: Custom logger name (default: exshape_term.<component>)
        """
        self.component = component
        self.logger_name = logger_name or f"exshape_term.{component}"
        self.logger = logging.getLogger(self.logger_name)
        self.logger.setLevel(level)

        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def _log(
        self,
        level: str,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        """
        Internal log method with structured format.

        Args:
            level: Log level name (DEBUG, INFO, WARNING)
            event: Typed log event
            message: Human-readable message
            metadata: Additional context
            exc_info: Exception summarized in the entry
        """
        log_level = getattr(logging, level)
        if not self.logger.isEnabledFor(log_level):
            return

        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': level,
            'component': self.component,
            'event': event.value,
            'message': message,
        }

        if metadata:
            log_entry['metadata'] = metadata

        if exc_info:
            log_entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info)
            }

        self.logger.log(log_level, json.dumps(log_entry, default=str))

    def debug(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log DEBUG level message."""
        self._log('DEBUG', event, message, metadata)

    def info(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log INFO level message.

        Args:
            event: Typed log event
            message: Human-readable message
            metadata: Additional context
        """
        self._log('INFO', event, message, metadata)

    def warning(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        """
        Log WARNING level message.

        Args:
            event: Typed log event
            message: Human-readable message
            metadata: Additional context
            exc_info: Exception summarized in the entry (no traceback)

        Example:
            >>> logger.warning(
            ...     event=LogEvent.DECODE_REJECTED,
            ...     message="Rejected polygon term",
            ...     metadata={'reason': 'bad_ring'}
            ... )
        """
        self._log('WARNING', event, message, metadata, exc_info)


class JSONFormatter(logging.Formatter):
    """
    Formatter that passes through the JSON built by StructuredLogger.
    """

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


def create_logger(
    component: str,
    level: int = logging.INFO
) -> StructuredLogger:
    """
    Factory function to create configured StructuredLogger.

    Args:
        component: Component identifier
        level: Logging level (default: INFO)

    Returns:
        Configured StructuredLogger instance

    Example:
        >>> logger = create_logger("codec", level=logging.DEBUG)
    """
    return StructuredLogger(component=component, level=level)
