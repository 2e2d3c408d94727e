from __future__ import annotations

import logging

from ..logging_config import log_structured_error
from .internal import (
    ConfigurationError,
    DeserializeError,
    SerializeError,
    TemplateError,
    TemplateIOError,
)


def classify_error(error: BaseException) -> str:
    """Return the structured-log category for an error.

    Args:
        error: The exception to classify.

    Returns:
        One of ``io``, ``deserialize``, ``serialize``, ``config`` or ``unknown``.
    """
    if isinstance(error, TemplateIOError | OSError):
        return "io"
    if isinstance(error, DeserializeError):
        return "deserialize"
    if isinstance(error, SerializeError):
        return "serialize"
    if isinstance(error, ConfigurationError):
        return "config"
    return "unknown"


def log_error(
    message: str,
    error: Exception,
    context: dict[str, object] | None = None,
    level: int = logging.ERROR,
) -> None:
    """Logs an error message with the associated exception details.

    Args:
        message: A descriptive message about the error context.
        error: The exception instance to be logged.
        context: Optional additional context data for debugging.
        level: Logging level (default: ERROR).
    """
    merged: dict[str, object] = {}
    if isinstance(error, TemplateError):
        merged.update(error.data)
    if context:
        merged.update(context)
    log_structured_error(
        error_type=classify_error(error),
        message=f"{message}: {str(error)}",
        exception=error,
        context=merged or None,
        level=level,
    )


def io_error(
    message: str, error: OSError | UnicodeDecodeError, **data: object
) -> TemplateIOError:
    """Build a TemplateIOError for a failed read; raise it ``from`` the original."""
    return TemplateIOError(f"{message}: {error}", data=data)


def deserialize_error(
    message: str, error: Exception | None = None, **data: object
) -> DeserializeError:
    """Build a DeserializeError describing a parser or shape failure."""
    text = f"{message}: {error}" if error is not None else message
    return DeserializeError(text, data=data)
