"""
Ring Module
===========

Immutable closed point loop - the building block of a polygon.

Design:
- Immutable shape (frozen dataclass pattern)
- Nx2 float64 numpy array, made read-only at construction
- Structural validation only (closure and point count are reported, not enforced)
- Thread-safe by design (immutability)
"""

import numpy as np
from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple


@dataclass(frozen=True, eq=False)
class Ring:
    """
    Immutable ordered sequence of (x, y) coordinate points.

    Attributes:
        points: Nx2 array of (x, y) ring points

    Invariants:
        - points.ndim == 2 and points.shape[1] == 2
        - every coordinate is finite
        - points is read-only after construction

    Example:
        >>> ring = Ring.from_points([(0, 0), (10, 0), (10, 10), (0, 0)])
        >>> ring.point_count
        4
        >>> ring.is_closed
        True
    """

    points: np.ndarray

    def __post_init__(self):
        """Validate points and freeze the backing array."""
        if not isinstance(self.points, np.ndarray):
            raise TypeError(f"points must be np.ndarray, got {type(self.points)}")
        if self.points.ndim != 2 or self.points.shape[1] != 2:
            raise ValueError(f"points must be Nx2 array, got shape {self.points.shape}")

        # Own a float64 copy so callers cannot mutate the ring through their array
        owned = np.array(self.points, dtype=np.float64, copy=True)
        if not np.isfinite(owned).all():
            raise ValueError("points must be finite (no NaN or inf)")
        owned.flags.writeable = False
        object.__setattr__(self, 'points', owned)

    @classmethod
    def from_points(cls, points: Iterable[Tuple[float, float]]) -> 'Ring':
        """
        Build a ring from an iterable of (x, y) pairs.

        Args:
            points: Iterable of (x, y) coordinates

        Returns:
            Ring instance

        Raises:
            ValueError: If points cannot form an Nx2 array
        """
        data = np.asarray(list(points), dtype=np.float64)
        if data.size == 0:
            data = data.reshape((0, 2))
        return cls(points=data)

    @property
    def point_count(self) -> int:
        """Number of points in the ring."""
        return int(self.points.shape[0])

    @property
    def is_closed(self) -> bool:
        """True when the last point repeats the first one."""
        if self.point_count < 2:
            return False
        return bool(np.array_equal(self.points[0], self.points[-1]))

    def __len__(self) -> int:
        return self.point_count

    def __iter__(self) -> Iterator[Tuple[float, float]]:
        for x, y in self.points:
            yield float(x), float(y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ring):
            return NotImplemented
        return bool(np.array_equal(self.points, other.points))

    def __hash__(self) -> int:
        # +0.0 folds -0.0 into 0.0 so equal rings hash equal
        return hash((self.points.shape, (self.points + 0.0).tobytes()))

    def __repr__(self) -> str:
        return f"Ring(point_count={self.point_count}, closed={self.is_closed})"
