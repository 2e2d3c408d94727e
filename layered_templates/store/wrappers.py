"""Pass-through stores that forward to an inner store."""

from __future__ import annotations

from typing import Generic, TypeVar

from ..errors import TemplateIOError
from ..mapping import TemplateMap
from .base import TemplateStore

S = TypeVar("S", bound=TemplateStore)


class StoreRef(TemplateStore, Generic[S]):
    """Forwards both operations unchanged to ``inner``.

    Lets a caller hand out one indirection over any store while keeping its
    own reference to the concrete one (e.g. to call ``MemoryStore.update``).
    """

    def __init__(self, inner: S) -> None:
        self.inner = inner

    def __repr__(self) -> str:
        return f"StoreRef({self.inner!r})"

    def changed(self) -> bool:
        return self.inner.changed()

    def data(self) -> TemplateMap:
        return self.inner.data()


class OptionalStore(TemplateStore, Generic[S]):
    """A store that may be absent.

    With an inner store every call is forwarded. Without one it behaves like
    ``NullStore``: never changed, and fetching fails.
    """

    def __init__(self, inner: S | None = None) -> None:
        self.inner = inner

    def __repr__(self) -> str:
        return f"OptionalStore({self.inner!r})"

    def changed(self) -> bool:
        if self.inner is None:
            return False
        return self.inner.changed()

    def data(self) -> TemplateMap:
        if self.inner is None:
            raise TemplateIOError("None store always returns an error")
        return self.inner.data()
