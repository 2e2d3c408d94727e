from __future__ import annotations

import logging
import os
import time

from ..errors.handling import io_error
from ..loader import LoadFunction
from ..logs.logger import logger
from ..mapping import TemplateMap
from .base import TemplateStore


class FileStore(TemplateStore):
    """A file-based backing for templates.

    Change detection compares the file's modification time with the last one
    seen. The first ``changed()`` records the current time and reports a
    change so the initial load always happens; afterwards only a strictly
    newer mtime counts. Stat failures are reported as "unchanged" so a
    transient filesystem hiccup never breaks the polling path.
    """

    def __init__(self, path: str | os.PathLike[str], loader: LoadFunction) -> None:
        if not isinstance(path, str | os.PathLike):
            raise TypeError("path must be str or os.PathLike")
        self.path = os.fspath(path)
        self.loader = loader
        self._last: float | None = None

    def __repr__(self) -> str:
        return f"FileStore(path={self.path!r}, last={self._last!r})"

    @property
    def last_modified(self) -> float | None:
        """Last modification time seen, or None if never fetched."""
        return self._last

    def changed(self) -> bool:
        if self._last is None:
            logger.log_event(
                "store", "file_initial", level=logging.DEBUG, path=self.path
            )
            self._last = time.time()
            return True

        try:
            mtime = os.stat(self.path).st_mtime
        except OSError as e:
            logger.log_event(
                "store",
                "file_stat_failed",
                level=logging.DEBUG,
                path=self.path,
                error=str(e),
            )
            return False
        if mtime <= self._last:
            return False
        logger.log_event("store", "file_changed", level=logging.DEBUG, path=self.path)
        self._last = mtime
        return True

    def data(self) -> TemplateMap:
        try:
            with open(self.path, encoding="utf-8") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise io_error("cannot read template file", e, path=self.path) from e
        return self.loader(text)
