"""Template error hierarchy and error logging helpers."""

from .internal import (
    ConfigurationError,
    DeserializeError,
    SerializeError,
    TemplateError,
    TemplateIOError,
)

__all__ = [
    "TemplateError",
    "TemplateIOError",
    "DeserializeError",
    "SerializeError",
    "ConfigurationError",
]
