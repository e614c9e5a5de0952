"""
Geometry Layer
==============

Bounded Context: Polygon/ring composite data model.

Responsibilities:
- Ring representation (immutable point arrays)
- Polygon composite (ordered, never empty)
- NO term decoding, NO logging, NO I/O

Design Philosophy:
- Immutable leaves, append-only composite
- Fail-fast validation
- Zero side effects
"""

from exshape_shape.geometry.ring import Ring
from exshape_shape.geometry.polygon import Polygon

__all__ = [
    "Ring",
    "Polygon",
]
