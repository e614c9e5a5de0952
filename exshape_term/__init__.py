"""
Exshape Term Package
====================

Bounded Context: Polygon exchange with a host process

This package converts exshape_shape polygons to and from the term form a
host sends across its call boundary.

Architecture:
- schemas/: Immutable term forms, failure taxonomy, tagged results
- codec.py: PolygonCodec (decode/encode, JSON, counters)
- config.py: CodecConfig (YAML)
- logging/: Structured JSON logging for observability

Public API
----------
Schemas:
    RingTerm, PolygonTerm
    DecodeFailure, DecodeResult
    BadArgError, EmptyPolygonError
    decode_polygon, encode_polygon

Codec:
    PolygonCodec, CodecConfig

Logging:
    LogEvent, StructuredLogger, create_logger

Example:
    >>> from exshape_term import PolygonCodec, EmptyPolygonError
    >>> codec = PolygonCodec()
    >>> polygon = codec.decode([
    ...     [[0, 0], [10, 0], [10, 10], [0, 0]],
    ...     [[2, 2], [4, 2], [4, 4], [2, 2]],
    ... ])
    >>> polygon.ring_count
    2
    >>> try:
    ...     codec.decode([])
    ... except EmptyPolygonError as e:
    ...     print(e.reason.value)
    empty_sequence
"""

# Version
__version__ = "1.0.0"

# Schemas
from .schemas import (
    BadArgError,
    DecodeFailure,
    DecodeResult,
    EmptyPolygonError,
    RingTerm,
    PolygonTerm,
    decode_polygon,
    encode_polygon,
)

# Codec
from .config import CodecConfig
from .codec import PolygonCodec

# Logging
from .logging import (
    LogEvent,
    StructuredLogger,
    create_logger,
)

__all__ = [
    # Version
    '__version__',
    # Schemas
    'BadArgError',
    'DecodeFailure',
    'DecodeResult',
    'EmptyPolygonError',
    'RingTerm',
    'PolygonTerm',
    'decode_polygon',
    'encode_polygon',
    # Codec
    'PolygonCodec',
    'CodecConfig',
    # Logging
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
