"""
Polygon Codec
=============

Bounded Context: Host Boundary

This module is the single entry point a host integration uses to exchange
polygons: nested-list terms in memory, or JSON text across a process boundary.

Design:
- Delegates validation to PolygonTerm (one gate, no re-checks afterwards)
- Logs rejections as structured events, then re-raises to the caller
- Counters guarded by a lock (safe to share one codec between threads)

Message Flow:
    host term / JSON → PolygonCodec.decode / loads → Polygon
    Polygon → PolygonCodec.encode / dumps → host term / JSON

Example:
    >>> codec = PolygonCodec()
    >>> polygon = codec.decode([[[0, 0], [1, 0], [1, 1], [0, 0]]])
    >>> codec.dumps(polygon)
    '[[[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 0.0]]]'
"""

import json
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from exshape_shape.geometry.polygon import Polygon
from .config import CodecConfig
from .logging import LogEvent, StructuredLogger, create_logger
from .schemas import (
    BadArgError,
    DecodeFailure,
    DecodeResult,
    PolygonTerm,
)


class PolygonCodec:
    """
    Converts polygons to and from the host term form.

    Attributes:
        config: Codec configuration
        logger: Structured logger instance

    Thread Safety:
        Stateless apart from counters, which use a lock.
    """

    def __init__(
        self,
        config: Optional[CodecConfig] = None,
        logger: Optional[StructuredLogger] = None
    ):
        """
        Initialize codec.

        Args:
            config: Codec configuration (default: CodecConfig())
            logger: Structured logger (default: one named after config.component)
        """
        self.config = config or CodecConfig()
        self.logger = logger or create_logger(self.config.component, level=self.config.level)

        self._decoded = 0
        self._encoded = 0
        self._rejected = 0
        self._stats_lock = threading.Lock()

    @classmethod
    def from_config_file(
        cls,
        yaml_path: Path,
        logger: Optional[StructuredLogger] = None
    ) -> 'PolygonCodec':
        """Build a codec from a YAML config file."""
        config = CodecConfig.from_yaml(yaml_path)
        codec = cls(config=config, logger=logger)
        codec.logger.info(
            event=LogEvent.CONFIG_LOADED,
            message="Loaded codec config",
            metadata={'path': str(yaml_path), 'log_level': config.log_level}
        )
        return codec

    def try_decode(self, term: Any) -> DecodeResult[Polygon]:
        """
        Decode a host term without raising.

        Args:
            term: Host value (sequence of ring terms)

        Returns:
            DecodeResult with a Polygon, or the failure reason
        """
        result = PolygonTerm.try_decode(term)
        if not result.ok:
            self._record_rejection(result)
            return DecodeResult.fail(result.failure, result.detail)

        polygon = result.value.to_polygon()
        with self._stats_lock:
            self._decoded += 1

        if self.config.log_conversions:
            self.logger.debug(
                event=LogEvent.POLYGON_DECODED,
                message="Decoded polygon term",
                metadata={
                    'ring_count': polygon.ring_count,
                    'point_counts': [ring.point_count for ring in polygon]
                }
            )
        return DecodeResult.success(polygon)

    def decode(self, term: Any) -> Polygon:
        """
        Decode a host term into a Polygon.

        Raises:
            EmptyPolygonError: If the term holds no rings
            BadArgError: If the term or any ring is malformed
        """
        return self.try_decode(term).unwrap()

    def encode(self, polygon: Polygon) -> List[List[List[float]]]:
        """Encode a Polygon as a host term (nested lists)."""
        term = PolygonTerm.from_polygon(polygon).encode()
        with self._stats_lock:
            self._encoded += 1

        if self.config.log_conversions:
            self.logger.debug(
                event=LogEvent.POLYGON_ENCODED,
                message="Encoded polygon",
                metadata={'ring_count': polygon.ring_count}
            )
        return term

    def loads(self, payload: Union[str, bytes]) -> Polygon:
        """
        Decode a JSON payload into a Polygon.

        Raises:
            BadArgError: If payload is not JSON (reason NOT_JSON) or not a polygon term
        """
        try:
            if isinstance(payload, bytes):
                payload = payload.decode('utf-8')
            data = json.loads(payload)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            with self._stats_lock:
                self._rejected += 1
            self.logger.warning(
                event=LogEvent.DESERIALIZATION_ERROR,
                message="Failed to decode JSON payload",
                exc_info=e,
                metadata={'reason': DecodeFailure.NOT_JSON.value}
            )
            raise BadArgError(DecodeFailure.NOT_JSON, str(e)) from e
        return self.decode(data)

    def dumps(self, polygon: Polygon) -> str:
        """Encode a Polygon as JSON text."""
        return json.dumps(
            self.encode(polygon),
            indent=self.config.json_indent,
            allow_nan=False
        )

    def get_stats(self) -> Dict[str, int]:
        """
        Get codec statistics.

        Returns:
            Dictionary with decoded, encoded and rejected counts
        """
        with self._stats_lock:
            return {
                'decoded': self._decoded,
                'encoded': self._encoded,
                'rejected': self._rejected,
            }

    def _record_rejection(self, result: DecodeResult) -> None:
        with self._stats_lock:
            self._rejected += 1

        if result.failure == DecodeFailure.EMPTY_SEQUENCE:
            event = LogEvent.EMPTY_POLYGON
        else:
            event = LogEvent.DECODE_REJECTED
        self.logger.warning(
            event=event,
            message="Rejected polygon term",
            metadata={'reason': result.failure.value, 'detail': result.detail}
        )
