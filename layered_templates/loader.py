"""Load functions turning serialized text into a ``TemplateMap``.

Every loader accepts the same two-level document shape, a table keyed by
namespace whose values are tables of template name -> template string::

    [response]
    hello       = "hello ${name}!"
    count_items = "count is: ${count}"

Exactly one loader is chosen per deployment; stores are parametric over it.
"""

from __future__ import annotations

import json
import tomllib
from collections.abc import Callable
from typing import Any

import yaml

from .errors.handling import deserialize_error
from .mapping import Mapping, TemplateMap

LoadFunction = Callable[[str], TemplateMap]


def _build_map(raw: Any, fmt: str) -> TemplateMap:
    if not isinstance(raw, dict):
        raise deserialize_error(
            f"{fmt} templates must be a table of namespaces, got {type(raw).__name__}",
            format=fmt,
        )
    templates: TemplateMap = {}
    for namespace, entries in raw.items():
        if not isinstance(namespace, str) or not isinstance(entries, dict):
            raise deserialize_error(
                f"{fmt} namespace {namespace!r} must map to a table of templates",
                format=fmt,
                namespace=str(namespace),
            )
        for name, template in entries.items():
            if not isinstance(name, str) or not isinstance(template, str):
                raise deserialize_error(
                    f"{fmt} template {namespace}.{name} must be a string",
                    format=fmt,
                    namespace=namespace,
                    name=str(name),
                )
        templates[namespace] = Mapping(entries)
    return templates


def load_json(text: str) -> TemplateMap:
    """Attempts to deserialize a ``TemplateMap`` from this JSON string.

    Raises:
        DeserializeError: The text is not JSON or not the expected shape.
    """
    try:
        raw = json.loads(text)
    except ValueError as e:
        raise deserialize_error("invalid JSON templates", e, format="json") from e
    return _build_map(raw, "json")


def load_toml(text: str) -> TemplateMap:
    """Attempts to deserialize a ``TemplateMap`` from this TOML string.

    Raises:
        DeserializeError: The text is not TOML or not the expected shape.
    """
    try:
        raw = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise deserialize_error("invalid TOML templates", e, format="toml") from e
    return _build_map(raw, "toml")


def load_yaml(text: str) -> TemplateMap:
    """Attempts to deserialize a ``TemplateMap`` from this YAML string.

    An empty document loads as an empty map.

    Raises:
        DeserializeError: The text is not YAML or not the expected shape.
    """
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise deserialize_error("invalid YAML templates", e, format="yaml") from e
    if raw is None:
        return {}
    return _build_map(raw, "yaml")


LOADERS: dict[str, LoadFunction] = {
    "json": load_json,
    "toml": load_toml,
    "yaml": load_yaml,
}

_ALIASES = {"yml": "yaml"}


def normalize_format(fmt: str) -> str:
    """Return the canonical format name for ``fmt`` (case-insensitive)."""
    key = fmt.strip().lower()
    key = _ALIASES.get(key, key)
    if key not in LOADERS:
        raise ValueError(
            f"unsupported template format {fmt!r} (expected one of {sorted(LOADERS)})"
        )
    return key


def get_loader(fmt: str) -> LoadFunction:
    """Return the load function registered for ``fmt``.

    Raises:
        ValueError: Unknown format.
    """
    return LOADERS[normalize_format(fmt)]


__all__ = [
    "LoadFunction",
    "LOADERS",
    "get_loader",
    "load_json",
    "load_toml",
    "load_yaml",
    "normalize_format",
]
