"""
Polygon Module
==============

Ordered, non-empty composite of rings.

Design:
- Ring 0 is the primary ring (first_ring); later rings carry no implied meaning
- Never empty: promotion wraps one ring, assembly rejects an empty sequence
- Monotonic growth: append is the only mutation (no removal, no reordering)
- Internal list is private; callers see an immutable tuple view

Thread Safety:
    No internal locking. Callers serialize append() against reads of the
    same instance. Rings are immutable, so a ring returned by first_ring
    stays valid after later appends.
"""

from typing import Iterable, Iterator, List, Tuple

from exshape_shape.geometry.ring import Ring


class Polygon:
    """
    A polygon made of one or more rings.

    Example:
        >>> outer = Ring.from_points([(0, 0), (10, 0), (10, 10), (0, 0)])
        >>> hole = Ring.from_points([(2, 2), (4, 2), (4, 4), (2, 2)])
        >>> polygon = Polygon.from_ring(outer)
        >>> polygon.append(hole)
        >>> polygon.first_ring is outer
        True
        >>> len(polygon)
        2
    """

    __slots__ = ('_rings',)

    def __init__(self, ring: Ring):
        self._rings: List[Ring] = [_check_ring(ring)]

    @classmethod
    def from_ring(cls, ring: Ring) -> 'Polygon':
        """Promote a single ring to a one-ring polygon."""
        return cls(ring)

    @classmethod
    def from_rings(cls, rings: Iterable[Ring]) -> 'Polygon':
        """
        Assemble a polygon from an ordered sequence of rings.

        Args:
            rings: Rings in order; the first becomes the primary ring

        Returns:
            Polygon holding the rings in input order

        Raises:
            ValueError: If rings is empty
            TypeError: If any element is not a Ring
        """
        it = iter(rings)
        try:
            first = next(it)
        except StopIteration:
            raise ValueError("Polygon must have at least 1 ring, got 0") from None

        polygon = cls(first)
        for ring in it:
            polygon.append(ring)
        return polygon

    @property
    def first_ring(self) -> Ring:
        """Primary ring (position 0). Always present."""
        return self._rings[0]

    @property
    def rings(self) -> Tuple[Ring, ...]:
        """All rings in order (read-only snapshot)."""
        return tuple(self._rings)

    @property
    def ring_count(self) -> int:
        """Number of rings, primary ring included."""
        return len(self._rings)

    def append(self, ring: Ring) -> None:
        """Add a ring after the existing ones."""
        self._rings.append(_check_ring(ring))

    def __len__(self) -> int:
        return len(self._rings)

    def __iter__(self) -> Iterator[Ring]:
        return iter(tuple(self._rings))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polygon):
            return NotImplemented
        return self._rings == other._rings

    def __repr__(self) -> str:
        return f"Polygon(ring_count={len(self._rings)}, first_ring={self.first_ring!r})"


def _check_ring(ring: Ring) -> Ring:
    if not isinstance(ring, Ring):
        raise TypeError(f"ring must be Ring, got {type(ring)}")
    return ring
