"""
Ring Term Schema
================

Bounded Context: External ring representation

A ring term is what the host sends for one ring: an ordered sequence of
[x, y] point terms.

Design:
- RingTerm: Immutable tuple of (x, y) float pairs
- Structural checks only (closure and point count belong to Ring)
- Conversion to and from the internal Ring always copies

Wire Format:
    [[0.0, 0.0], [10.0, 0.0], [10.0, 10.0], [0.0, 0.0]]
"""

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, List, Optional, Tuple

from exshape_shape.geometry.ring import Ring
from .common import DecodeFailure, DecodeResult, describe, is_term_sequence

PointTerm = Tuple[float, float]


def _to_coordinate(value: Any) -> Optional[float]:
    """Finite float for a numeric coordinate, None otherwise."""
    if not isinstance(value, Real) or isinstance(value, bool):
        return None
    try:
        coordinate = float(value)
    except OverflowError:
        return None
    return coordinate if math.isfinite(coordinate) else None


@dataclass(frozen=True)
class RingTerm:
    """
    External form of a ring.

    Attributes:
        points: Ordered (x, y) pairs

    Example:
        >>> term = RingTerm.decode([[0, 0], [1, 0], [1, 1], [0, 0]])
        >>> term.encode()
        [[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 0.0]]
    """
    points: Tuple[PointTerm, ...]

    @classmethod
    def try_decode(cls, term: Any) -> DecodeResult['RingTerm']:
        """Decode a ring term without raising.

        Args:
            term: Host value expected to be a sequence of [x, y] pairs

        Returns:
            DecodeResult with a RingTerm, or BAD_RING / BAD_POINT failure
        """
        if not is_term_sequence(term):
            return DecodeResult.fail(
                DecodeFailure.BAD_RING,
                f"ring must be a sequence, got {describe(term)}"
            )

        points = []
        for index, point in enumerate(term):
            if not is_term_sequence(point) or len(point) != 2:
                return DecodeResult.fail(
                    DecodeFailure.BAD_POINT,
                    f"point {index} must be an [x, y] pair, got {describe(point)}"
                )
            x, y = point
            cx, cy = _to_coordinate(x), _to_coordinate(y)
            if cx is None or cy is None:
                return DecodeResult.fail(
                    DecodeFailure.BAD_POINT,
                    f"point {index} coordinates must be finite numbers, "
                    f"got ({type(x).__name__}, {type(y).__name__})"
                )
            points.append((cx, cy))

        return DecodeResult.success(cls(points=tuple(points)))

    @classmethod
    def decode(cls, term: Any) -> 'RingTerm':
        """Decode a ring term.

        Raises:
            BadArgError: If term is not a sequence of [x, y] pairs
        """
        return cls.try_decode(term).unwrap()

    def encode(self) -> List[List[float]]:
        """Serialize to JSON-compatible nested lists."""
        return [[x, y] for x, y in self.points]

    def to_ring(self) -> Ring:
        """Convert to the internal Ring."""
        return Ring.from_points(self.points)

    @classmethod
    def from_ring(cls, ring: Ring) -> 'RingTerm':
        """Build the external form of an internal Ring."""
        return cls(points=tuple(ring))

    @property
    def point_count(self) -> int:
        """Number of point terms in the ring."""
        return len(self.points)
