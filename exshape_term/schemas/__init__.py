"""
Exshape Term Schemas
====================

Bounded Context: External term data structures

This module defines the immutable, typed forms that polygons and rings take
at the host boundary, plus the decode failure taxonomy.

Design:
- Frozen dataclasses (immutability)
- decode() raises BadArgError, try_decode() returns DecodeResult
- encode() yields JSON-compatible nested lists

Public API
----------
Common Types:
    DecodeFailure: Enum of rejection reasons
    DecodeResult: Tagged success/failure
    BadArgError: Invalid external argument
    EmptyPolygonError: Polygon term with no rings

Term Types:
    RingTerm: External ring
    PolygonTerm: External polygon
    decode_polygon, encode_polygon: One-step conversions

Example:
    >>> from exshape_term.schemas import decode_polygon, encode_polygon
    >>> polygon = decode_polygon([[[0, 0], [1, 0], [1, 1], [0, 0]]])
    >>> encode_polygon(polygon)
    [[[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 0.0]]]
"""

from .common import BadArgError, DecodeFailure, DecodeResult, EmptyPolygonError
from .ring import RingTerm
from .polygon import PolygonTerm, decode_polygon, encode_polygon

__all__ = [
    # Common types
    'BadArgError',
    'DecodeFailure',
    'DecodeResult',
    'EmptyPolygonError',
    # Term types
    'RingTerm',
    'PolygonTerm',
    'decode_polygon',
    'encode_polygon',
]
