"""Centralized template error hierarchy.

Stores raise these instead of surfacing raw OSError / parser errors so the
cache and resolver can decide what to absorb and what to propagate. The
original exception is always chained as ``__cause__``.

Classes:
  TemplateError        – Base for all template errors.
  TemplateIOError      – Source unreachable or unreadable.
  DeserializeError     – Malformed content for the selected format.
  SerializeError       – Reserved; not raised by the read path.
  ConfigurationError   – Invalid store configuration.
"""

from __future__ import annotations

from collections.abc import Mapping


class TemplateError(Exception):
    """Base class for all template errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class TemplateIOError(TemplateError):
    """Raised when a template source cannot be reached or read."""


class DeserializeError(TemplateError):
    """Raised when template content is malformed for the selected format."""


class SerializeError(TemplateError):
    """Raised when a template map cannot be serialized."""


class ConfigurationError(TemplateError):
    """Raised when the store configuration is invalid."""


__all__ = [
    "TemplateError",
    "TemplateIOError",
    "DeserializeError",
    "SerializeError",
    "ConfigurationError",
]
