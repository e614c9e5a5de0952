"""
Polygon Term Schema
===================

Bounded Context: External polygon representation

This module is the validation gate for polygon data arriving from the host.

Design:
- PolygonTerm: Immutable, non-empty tuple of RingTerm
- Validation order: sequence check, then emptiness, then each ring
- Emptiness is rejected before any ring is looked at
- No partial results: a PolygonTerm is built only when every ring decodes

Conversion Flow:
    host term → PolygonTerm.decode → to_polygon() → Polygon
    Polygon → PolygonTerm.from_polygon → encode() → host term

Wire Format:
    [
        [[0.0, 0.0], [10.0, 0.0], [10.0, 10.0], [0.0, 0.0]],   # primary ring
        [[2.0, 2.0], [4.0, 2.0], [4.0, 4.0], [2.0, 2.0]]       # further rings
    ]
"""

from dataclasses import dataclass
from typing import Any, List, Tuple

from exshape_shape.geometry.polygon import Polygon
from .common import (
    DecodeFailure,
    DecodeResult,
    EmptyPolygonError,
    describe,
    is_term_sequence,
)
from .ring import RingTerm


@dataclass(frozen=True)
class PolygonTerm:
    """
    External form of a polygon.

    Attributes:
        rings: Ordered ring terms, primary ring first

    Invariants:
        - rings is never empty

    Example:
        >>> term = PolygonTerm.decode([[[0, 0], [1, 0], [1, 1], [0, 0]]])
        >>> polygon = term.to_polygon()
        >>> PolygonTerm.from_polygon(polygon).encode()
        [[[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 0.0]]]
    """
    rings: Tuple[RingTerm, ...]

    def __post_init__(self):
        """Validate invariants."""
        if not self.rings:
            raise EmptyPolygonError()

    @classmethod
    def try_decode(cls, term: Any) -> DecodeResult['PolygonTerm']:
        """Decode a polygon term without raising.

        Args:
            term: Host value expected to be a non-empty sequence of ring terms

        Returns:
            DecodeResult with a PolygonTerm, or the first failure found
        """
        if not is_term_sequence(term):
            return DecodeResult.fail(
                DecodeFailure.NOT_A_SEQUENCE,
                f"polygon must be a sequence of rings, got {describe(term)}"
            )
        if len(term) == 0:
            return DecodeResult.fail(
                DecodeFailure.EMPTY_SEQUENCE,
                "polygon term has no rings"
            )

        rings = []
        for index, ring_term in enumerate(term):
            result = RingTerm.try_decode(ring_term)
            if not result.ok:
                return DecodeResult.fail(
                    DecodeFailure.BAD_RING,
                    f"ring {index}: {result.detail}"
                )
            rings.append(result.value)

        return DecodeResult.success(cls(rings=tuple(rings)))

    @classmethod
    def decode(cls, term: Any) -> 'PolygonTerm':
        """Decode a polygon term.

        Raises:
            EmptyPolygonError: If the term is an empty sequence
            BadArgError: If the term or any ring is malformed
        """
        return cls.try_decode(term).unwrap()

    def encode(self) -> List[List[List[float]]]:
        """Serialize to JSON-compatible nested lists."""
        return [ring.encode() for ring in self.rings]

    def to_polygon(self) -> Polygon:
        """Convert to the internal Polygon, preserving ring order."""
        return Polygon.from_rings(ring.to_ring() for ring in self.rings)

    @classmethod
    def from_polygon(cls, polygon: Polygon) -> 'PolygonTerm':
        """Build the external form of an internal Polygon."""
        return cls(rings=tuple(RingTerm.from_ring(ring) for ring in polygon))

    @property
    def ring_count(self) -> int:
        """Number of rings, primary ring included."""
        return len(self.rings)


def decode_polygon(term: Any) -> Polygon:
    """Decode a host term straight to a Polygon.

    Raises:
        EmptyPolygonError: If the term is an empty sequence
        BadArgError: If the term or any ring is malformed
    """
    return PolygonTerm.decode(term).to_polygon()


def encode_polygon(polygon: Polygon) -> List[List[List[float]]]:
    """Encode a Polygon as a host term."""
    return PolygonTerm.from_polygon(polygon).encode()
