from __future__ import annotations

import logging

from ..loader import LoadFunction
from ..logs.logger import logger
from ..mapping import TemplateMap
from .base import TemplateStore


class MemoryStore(TemplateStore):
    """A memory-backed store for templates.

    Starts dirty so the first refresh loads. ``data()`` clears the flag
    before parsing; a failed parse is only retried after the next
    ``update()``.
    """

    def __init__(self, text: str, loader: LoadFunction) -> None:
        self.text = text
        self.loader = loader
        self._changed = True

    def __repr__(self) -> str:
        return f"MemoryStore(text={self.text!r}, changed={self._changed!r})"

    def update(self, text: str) -> None:
        """Replace the templates with ``text``."""
        self.text = text
        self._changed = True
        logger.log_event("store", "memory_updated", level=logging.DEBUG, size=len(text))

    def changed(self) -> bool:
        return self._changed

    def data(self) -> TemplateMap:
        self._changed = False
        return self.loader(self.text)
