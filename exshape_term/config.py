"""
Configuration schema for the polygon codec.

This module defines the settings that control how PolygonCodec logs and
formats its output. Loaded from YAML and validated at construction.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import yaml


VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class CodecConfig:
    """
    PolygonCodec configuration.

    Immutable after construction (frozen dataclass).
    """

    component: str = "codec"
    log_level: str = "INFO"
    log_conversions: bool = False  # DEBUG event per decode/encode
    json_indent: Optional[int] = None

    def __post_init__(self):
        """Validate codec configuration."""
        if not self.component:
            raise ValueError("component cannot be empty")

        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {VALID_LOG_LEVELS}"
            )

        if self.json_indent is not None and self.json_indent < 0:
            raise ValueError(
                f"json_indent must be >= 0, got {self.json_indent}"
            )

    @property
    def level(self) -> int:
        """log_level as a logging module constant."""
        return getattr(logging, self.log_level)

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "CodecConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            component: "codec"
            log_level: "DEBUG"
            log_conversions: true
            json_indent: 2

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the YAML is invalid or a value fails validation
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Config root must be a mapping, got {type(data).__name__}")

        return cls(
            component=str(data.get("component", "codec")),
            log_level=str(data.get("log_level", "INFO")).upper(),
            log_conversions=bool(data.get("log_conversions", False)),
            json_indent=data.get("json_indent"),
        )
