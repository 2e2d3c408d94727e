"""Placeholder substitution for ``${name}`` style template strings."""

from __future__ import annotations

from collections.abc import Mapping
from string import Template


def apply_template(template: str, args: Mapping[str, object]) -> str | None:
    """Substitute named arguments into a template string.

    Uses ``string.Template`` syntax (``${name}`` or ``$name``, ``$$`` for a
    literal dollar). Arguments that the template does not mention are ignored
    and a placeholder may appear more than once.

    Returns:
        The rendered text, or None when a placeholder has no argument or the
        template contains a malformed marker.
    """
    try:
        return Template(template).substitute({k: str(v) for k, v in args.items()})
    except (KeyError, ValueError):
        return None


__all__ = ["apply_template"]
