"""Two-tier store: required defaults plus sparse overrides."""

from __future__ import annotations

import logging
import os
from typing import Generic, TypeVar

from ..errors import TemplateError
from ..loader import LoadFunction
from ..logs.logger import logger
from ..mapping import TemplateMap
from .base import TemplateStore
from .file import FileStore
from .memory import MemoryStore

D = TypeVar("D", bound=TemplateStore)
P = TypeVar("P", bound=TemplateStore)


class PartialStore(TemplateStore, Generic[D, P]):
    """Combines a default store and a partial (override) store.

    Merging is per entry: for a namespace+name present in both tiers the
    partial value wins, and names the partial does not mention keep their
    default value. The partial tier is optional in practice: if it cannot be
    read or parsed it counts as empty. The default tier is required and its
    failures propagate.

    Only the partial tier is polled for changes. The default tier is assumed
    immutable for the lifetime of the process; a deployment with a mutable
    default must poll both tiers.
    """

    def __init__(self, default: D, partial: P) -> None:
        self._default = default
        self._partial = partial

    def __repr__(self) -> str:
        return f"PartialStore(default={self._default!r}, partial={self._partial!r})"

    @property
    def default(self) -> D:
        return self._default

    @property
    def partial(self) -> P:
        return self._partial

    def into_inner(self) -> tuple[D, P]:
        """Return the (default, partial) stores."""
        return self._default, self._partial

    def changed(self) -> bool:
        return self._partial.changed()

    def data(self) -> TemplateMap:
        try:
            overrides = self._partial.data()
        except TemplateError as e:
            logger.log_event(
                "store", "partial_fallback", level=logging.DEBUG, error=str(e)
            )
            overrides = {}
        merged = dict(self._default.data())
        default_count = len(merged)
        for namespace, entries in overrides.items():
            base = merged.get(namespace)
            merged[namespace] = base.merged(entries) if base is not None else entries
        logger.log_event(
            "store",
            "partial_merged",
            level=logging.DEBUG,
            partial_count=len(overrides),
            default_count=default_count,
            total=len(merged),
        )
        return merged


def partial_memory_store(
    default: str, partial: str, loader: LoadFunction
) -> PartialStore[MemoryStore, MemoryStore]:
    """Build a ``PartialStore`` from two in-memory buffers."""
    return PartialStore(MemoryStore(default, loader), MemoryStore(partial, loader))


def partial_file_store(
    default: str | os.PathLike[str],
    partial: str | os.PathLike[str],
    loader: LoadFunction,
) -> PartialStore[FileStore, FileStore]:
    """Build a ``PartialStore`` from two template files."""
    return PartialStore(FileStore(default, loader), FileStore(partial, loader))
