"""Configuration switches for the capabilities builders."""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from .errors import ConfigurationError


class BBoxSource(str, Enum):
    """Where the emitted layer and tile set extents come from."""

    FIXED = "fixed"
    INPUT = "input"


class BuilderConfig(BaseModel):
    """Behaviour switches whose defaults reproduce the historical documents."""

    model_config = ConfigDict(frozen=True)

    bbox_source: BBoxSource = Field(
        default=BBoxSource.FIXED,
        description="Emit the fixed world extent or the caller's bbox",
    )
    strip_trailing_slash: bool = Field(
        default=False,
        description="Remove one trailing slash from the service URL",
    )

    @property
    def uses_input_bbox(self) -> bool:
        return self.bbox_source is BBoxSource.INPUT

    @classmethod
    def coerce(cls, config: Optional[Union["BuilderConfig", Mapping[str, Any]]]) -> "BuilderConfig":
        """Build a config from a mapping, an existing instance or ``None``."""

        if config is None:
            return DEFAULT_CONFIG
        if isinstance(config, cls):
            return config
        if not isinstance(config, Mapping):
            raise ConfigurationError(f"config must be a mapping or BuilderConfig, got {type(config).__name__}")
        try:
            return cls.model_validate(dict(config))
        except PydanticValidationError as exc:
            raise ConfigurationError(f"Invalid builder configuration: {exc}", cause=exc) from exc


DEFAULT_CONFIG = BuilderConfig()
