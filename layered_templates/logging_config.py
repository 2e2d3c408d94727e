r"""
Logging configuration module for layered templates.

Provides a configurable console logging setup using the colorlog library plus
structured error logging that counts failures per category.
"""

import logging
import os
import sys
from collections import Counter
from typing import Any

import colorlog


class ErrorAggregator:
    """Counts logged errors per category (io, deserialize, config...).

    ``layered-templates watch`` resets it on start and reports it on stop, so
    a long poll shows which template sources kept failing.
    """

    def __init__(self) -> None:
        self.counts: Counter[str] = Counter()
        self.last_message: dict[str, str] = {}

    def record_error(self, error_type: str, message: str) -> None:
        self.counts[error_type] += 1
        self.last_message[error_type] = message

    def get_error_summary(self) -> dict[str, dict[str, Any]]:
        return {
            error_type: {"count": count, "last": self.last_message[error_type]}
            for error_type, count in sorted(self.counts.items())
        }

    def reset(self) -> None:
        self.counts.clear()
        self.last_message.clear()

    def log_summary_report(self) -> None:
        summary = self.get_error_summary()
        if not summary:
            logging.info("No template errors recorded")
            return
        for error_type, stats in summary.items():
            logging.warning(
                f"{error_type}: {stats['count']} error(s), last: {stats['last']}"
            )


error_aggregator = ErrorAggregator()


def log_structured_error(
    error_type: str,
    message: str,
    exception: BaseException | None = None,
    context: dict[str, Any] | None = None,
    level: int = logging.ERROR,
) -> None:
    """Log ``[TYPE] message | Exception: ... | Context: k=v`` and count it.

    Args:
        error_type: Category of the error (e.g., 'io', 'deserialize', 'config')
        message: Descriptive error message
        exception: The exception that occurred (optional)
        context: Additional context data for debugging
        level: Logging level (default: ERROR)
    """
    structured_message = f"[{error_type.upper()}] {message}"
    if exception:
        structured_message += f" | Exception: {type(exception).__name__}"
    if context:
        context_str = " | ".join(f"{k}={v}" for k, v in context.items())
        structured_message += f" | Context: {context_str}"

    logging.log(level, structured_message)
    error_aggregator.record_error(error_type, message)


class LoggerConfigurator:
    """Handles logging configuration cleanly using colorlog.

    Supports environment variable configuration for log levels.
    """

    def configure(self):
        """Configure logging with colored output using colorlog.

        Uses environment variables:
        - DEBUG: Set to 'true', '1', or 'yes' for DEBUG level, otherwise INFO
        """
        debug_env = os.environ.get("DEBUG", "").lower()
        log_level = logging.DEBUG if debug_env in ("true", "1", "yes") else logging.INFO

        formatter = colorlog.ColoredFormatter(
            "%(asctime)s %(log_color)s%(levelname)-8s%(reset)s %(message_log_color)s%(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "magenta",
            },
            secondary_log_colors={
                "message": {
                    "ERROR": "red",
                    "CRITICAL": "magenta",
                }
            },
            reset=True,
        )

        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)

        logging.basicConfig(
            level=log_level,
            handlers=[handler],
            format="%(message)s",
        )

        root_logger = logging.getLogger()
        root_logger.setLevel(log_level)

        # Apply formatter to all existing handlers (in case any were added)
        for h in root_logger.handlers:
            h.setFormatter(formatter)

        return log_level
