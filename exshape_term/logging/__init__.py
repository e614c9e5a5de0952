"""
Structured Logging for Exshape Term
===================================

Bounded Context: Observability

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from exshape_term.logging import create_logger, LogEvent
    >>> logger = create_logger("codec")
    >>> logger.info(
    ...     event=LogEvent.CONFIG_LOADED,
    ...     message="Loaded codec config",
    ...     metadata={'path': 'codec.yaml'}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
