"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

This module defines typed event names for structured logging.

Event Naming Convention:
    <subject>.<action>  or  error.<condition>

Example Log Query (Loki):
    {component="codec"} | json | event="error.empty_polygon"
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - polygon.*: Term conversions
    - config.*: Configuration loading
    - error.*: Rejected input
    """

    # ========== Conversion Events ==========
    POLYGON_DECODED = "polygon.decoded"
    """Host term decoded into a Polygon."""

    POLYGON_ENCODED = "polygon.encoded"
    """Polygon encoded into a host term."""

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """Codec configuration loaded from YAML."""

    # ========== Error Events ==========
    DECODE_REJECTED = "error.bad_arg"
    """Host term failed structural validation."""

    EMPTY_POLYGON = "error.empty_polygon"
    """Host term held no rings."""

    DESERIALIZATION_ERROR = "error.deserialization"
    """Payload was not valid JSON."""
