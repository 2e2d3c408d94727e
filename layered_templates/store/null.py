from __future__ import annotations

from ..errors import TemplateIOError
from ..mapping import TemplateMap
from .base import TemplateStore


class NullStore(TemplateStore):
    """A store that never changes and always fails to fetch.

    Stands in when no template source is configured, so callers can treat
    "no store" like any other store.
    """

    def __repr__(self) -> str:
        return "NullStore()"

    def changed(self) -> bool:
        return False

    def data(self) -> TemplateMap:
        raise TemplateIOError("NullStore will always be empty")
