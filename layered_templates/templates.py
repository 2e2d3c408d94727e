from __future__ import annotations

import logging
from typing import Generic, TypeVar

from .errors import TemplateError
from .logs.logger import logger
from .mapping import Mapping, TemplateMap
from .store.base import TemplateStore

S = TypeVar("S", bound=TemplateStore)


class Templates(Generic[S]):
    """A collection of templates backed by a ``TemplateStore``.

    The cache owns its store and the last successfully parsed map. A failed
    refresh leaves the previous map in place: stale-but-valid data is
    preferred over no data.
    """

    def __init__(self, store: S) -> None:
        """Create the collection and perform the initial load.

        Raises:
            TemplateIOError: The initial data could not be read.
            DeserializeError: The initial data is malformed.
        """
        self._store = store
        self._templates: TemplateMap = {}
        self.refresh()

    def __repr__(self) -> str:
        return f"Templates(store={self._store!r}, namespaces={len(self._templates)})"

    def __len__(self) -> int:
        return len(self._templates)

    @property
    def store(self) -> S:
        return self._store

    def namespaces(self) -> list[str]:
        return sorted(self._templates)

    def as_dict(self) -> dict[str, dict[str, str]]:
        """Plain-dict copy of the cached map."""
        return {ns: dict(mapping) for ns, mapping in self._templates.items()}

    def get(self, namespace: str) -> Mapping | None:
        """Return the mapping for ``namespace`` from the cache (no refresh)."""
        return self._templates.get(namespace)

    def refresh(self) -> bool:
        """Reload from the store if it changed.

        Returns:
            True if a new map was loaded, False if the store was unchanged.

        Raises:
            TemplateError: The store changed but could not be fetched; the
                cached map is left untouched.
        """
        if not self._store.changed():
            return False
        try:
            templates = self._store.data()
        except TemplateError as e:
            logger.log_event(
                "templates",
                "refresh_failed",
                level=logging.DEBUG,
                namespaces=len(self._templates),
                error=str(e),
            )
            raise
        self._templates = templates
        logger.log_event(
            "templates", "refreshed", level=logging.DEBUG, namespaces=len(templates)
        )
        return True
