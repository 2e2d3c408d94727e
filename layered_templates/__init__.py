"""Namespaced template strings from layered, lazily refreshed stores.

Typical use::

    from layered_templates import Resolver, load_toml, partial_file_store

    resolver = Resolver(partial_file_store("defaults.toml", "overrides.toml", load_toml))
    resolver.resolve("response", "hello")   # "hello ${name}!" or None
"""

from .errors import (
    ConfigurationError,
    DeserializeError,
    SerializeError,
    TemplateError,
    TemplateIOError,
)
from .loader import LOADERS, LoadFunction, get_loader, load_json, load_toml, load_yaml
from .mapping import Mapping, TemplateMap
from .render import apply_template
from .resolver import Resolver
from .store import (
    FileStore,
    MemoryStore,
    NullStore,
    OptionalStore,
    PartialStore,
    StoreRef,
    TemplateStore,
    partial_file_store,
    partial_memory_store,
)
from .template import Template, namespace, snake_case
from .templates import Templates

__all__ = [
    "ConfigurationError",
    "DeserializeError",
    "SerializeError",
    "TemplateError",
    "TemplateIOError",
    "LOADERS",
    "LoadFunction",
    "get_loader",
    "load_json",
    "load_toml",
    "load_yaml",
    "Mapping",
    "TemplateMap",
    "apply_template",
    "Resolver",
    "FileStore",
    "MemoryStore",
    "NullStore",
    "OptionalStore",
    "PartialStore",
    "StoreRef",
    "TemplateStore",
    "partial_file_store",
    "partial_memory_store",
    "Template",
    "namespace",
    "snake_case",
    "Templates",
]
