"""Template store abstraction.

A store is the backing source for a set of templates. The contract is kept
to two operations so file, memory, null and layered stores (and wrappers
around any of them) can be used interchangeably:

    changed() -> bool        has the source changed since the last fetch?
    data() -> TemplateMap    read and deserialize the source

``changed()`` may update internal "last seen" bookkeeping, so it must be
called at most once per refresh cycle. ``Templates`` owns that discipline:
it calls ``changed()`` then ``data()`` as one logical step.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..mapping import TemplateMap


class TemplateStore(ABC):
    """Abstract backing store for a set of templates."""

    @abstractmethod
    def changed(self) -> bool:  # pragma: no cover - interface
        """Return whether the templates changed since they were last fetched.

        Returns True on the first call for any store that has never been
        fetched, so the initial refresh always loads.
        """
        raise NotImplementedError

    @abstractmethod
    def data(self) -> TemplateMap:  # pragma: no cover - interface
        """Read and parse the template map.

        Raises:
            TemplateIOError: The source could not be read.
            DeserializeError: The source content is malformed.
        """
        raise NotImplementedError

    def parse_map(self) -> TemplateMap:
        """Alias of ``data()``."""
        return self.data()
