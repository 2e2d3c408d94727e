"""
Configuration constants for layered templates.

Each constant can be overridden by setting an environment variable with the
same name.
"""

import os


def _get_env_float(name: str, default: float) -> float:
    """Retrieve a float value from an environment variable.

    Attempts to parse the environment variable as a float. If the variable
    is not set or cannot be parsed, prints a warning and returns the default.

    Args:
        name: The name of the environment variable to read.
        default: The default float value to return if parsing fails.

    Returns:
        The parsed float value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return float(value)
        except ValueError:
            print(
                f"Warning: Invalid float value for {name}='{value}', using default {default}"
            )
    return default


# Environment variable names read by config.core.load_store_config
ENV_FORMAT = "TEMPLATES_FORMAT"
ENV_DEFAULT_FILE = "TEMPLATES_DEFAULT_FILE"
ENV_PARTIAL_FILE = "TEMPLATES_PARTIAL_FILE"

DEFAULT_TEMPLATE_FORMAT = "json"

# Seconds between refresh() calls in `layered-templates watch`
TEMPLATES_POLL_INTERVAL = _get_env_float("TEMPLATES_POLL_INTERVAL", 2.0)
