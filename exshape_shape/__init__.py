"""
Exshape Shape Model v1.0
========================

Bounded Context: In-memory polygon geometry.

Architecture:

    exshape_shape/
    └── geometry/          # Pure geometry (no I/O, no logging)
        ├── ring.py        # Ring (immutable Nx2 point array)
        └── polygon.py     # Polygon (ordered, non-empty rings)

Usage:

    from exshape_shape import Ring, Polygon

    outer = Ring.from_points([(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)])
    polygon = Polygon.from_ring(outer)
    polygon.append(Ring.from_points([(2, 2), (4, 2), (4, 4), (2, 2)]))

    polygon.first_ring   # -> outer
    len(polygon)         # -> 2

Converting to and from the host term form lives in exshape_term.
"""

from exshape_shape.geometry.ring import Ring
from exshape_shape.geometry.polygon import Polygon

__all__ = [
    "Ring",
    "Polygon",
]

__version__ = "1.0.0"
