from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from ..constants import (
    DEFAULT_TEMPLATE_FORMAT,
    ENV_DEFAULT_FILE,
    ENV_FORMAT,
    ENV_PARTIAL_FILE,
)
from ..loader import normalize_format


class StoreConfig(BaseModel):
    """Describes which template store to build.

    Attributes:
        format: Serialization format of the template files (json, toml, yaml).
        default_path: File holding the complete default templates.
        partial_path: Optional file holding sparse overrides.
    """

    format: str = Field(default=DEFAULT_TEMPLATE_FORMAT, validate_default=True)
    default_path: Path | None = None
    partial_path: Path | None = None

    @field_validator("format", mode="before")
    @classmethod
    def validate_format(cls, v: Any) -> str:
        """Normalize the format name and check a loader exists for it."""
        if not isinstance(v, str):
            raise ValueError("format must be a string")
        return normalize_format(v)

    @field_validator("default_path", "partial_path", mode="before")
    @classmethod
    def empty_path_is_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def validate_tiers(self) -> StoreConfig:
        """A partial tier only makes sense on top of a default tier."""
        if self.partial_path is not None and self.default_path is None:
            raise ValueError("partial_path requires default_path")
        return self

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> StoreConfig:
        """Build a config from ``TEMPLATES_*`` environment variables."""
        data: dict[str, Any] = {}
        if environ.get(ENV_FORMAT):
            data["format"] = environ[ENV_FORMAT]
        if environ.get(ENV_DEFAULT_FILE):
            data["default_path"] = environ[ENV_DEFAULT_FILE]
        if environ.get(ENV_PARTIAL_FILE):
            data["partial_path"] = environ[ENV_PARTIAL_FILE]
        return cls(**data)
