"""
Common Schema Types
===================

Bounded Context: Shared decode vocabulary

This module defines the failure taxonomy and the tagged result returned by
the term decoders.

Design Principles:
- Immutability: frozen=True prevents accidental mutation
- One exception family: every decode failure is a BadArgError (a ValueError)
- Tagged results: try_decode() reports why, decode() raises

Types:
- DecodeFailure: Enum of failure reasons
- BadArgError: Invalid external argument
- EmptyPolygonError: Polygon term with no rings
- DecodeResult: Success value or failure reason
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, Sequence, TypeVar

T = TypeVar('T')


class DecodeFailure(str, Enum):
    """Reason a term was rejected."""
    NOT_A_SEQUENCE = "not_a_sequence"
    EMPTY_SEQUENCE = "empty_sequence"
    BAD_RING = "bad_ring"
    BAD_POINT = "bad_point"
    NOT_JSON = "not_json"


class BadArgError(ValueError):
    """Raised when an external term fails structural validation."""

    def __init__(self, reason: DecodeFailure, detail: str = ""):
        self.reason = reason
        self.detail = detail
        super().__init__(f"{reason.value}: {detail}" if detail else reason.value)


class EmptyPolygonError(BadArgError):
    """Raised when a polygon term holds no rings."""

    def __init__(self, detail: str = "polygon term has no rings"):
        super().__init__(DecodeFailure.EMPTY_SEQUENCE, detail)


@dataclass(frozen=True)
class DecodeResult(Generic[T]):
    """
    Tagged decode outcome: either a value or a failure reason.

    Attributes:
        value: Decoded value (None on failure)
        failure: Failure reason (None on success)
        detail: Human-readable context for the failure

    Invariants:
        - Exactly one of value / failure is set

    Example:
        >>> result = PolygonTerm.try_decode([])
        >>> result.ok
        False
        >>> result.failure
        <DecodeFailure.EMPTY_SEQUENCE: 'empty_sequence'>
    """
    value: Optional[T] = None
    failure: Optional[DecodeFailure] = None
    detail: str = ""

    def __post_init__(self):
        """Validate invariants."""
        if (self.value is None) == (self.failure is None):
            raise ValueError("DecodeResult needs exactly one of value or failure")

    @classmethod
    def success(cls, value: T) -> 'DecodeResult[T]':
        return cls(value=value)

    @classmethod
    def fail(cls, failure: DecodeFailure, detail: str = "") -> 'DecodeResult[T]':
        return cls(failure=failure, detail=detail)

    @property
    def ok(self) -> bool:
        """True when decoding succeeded."""
        return self.failure is None

    def to_error(self) -> Optional[BadArgError]:
        """Exception matching the failure reason (None on success)."""
        if self.failure is None:
            return None
        if self.failure == DecodeFailure.EMPTY_SEQUENCE:
            return EmptyPolygonError(self.detail) if self.detail else EmptyPolygonError()
        return BadArgError(self.failure, self.detail)

    def unwrap(self) -> T:
        """Return the value or raise the matching BadArgError.

        Raises:
            EmptyPolygonError: If the polygon term was empty
            BadArgError: For any other failure reason
        """
        error = self.to_error()
        if error is not None:
            raise error
        return self.value


def is_term_sequence(term: Any) -> bool:
    """True for list/tuple terms (strings, bytes, dicts and arrays excluded)."""
    return isinstance(term, (list, tuple))


def describe(term: Any) -> str:
    """Short type description used in failure details."""
    if isinstance(term, Sequence) and not isinstance(term, (str, bytes)):
        return f"{type(term).__name__}[{len(term)}]"
    return type(term).__name__
