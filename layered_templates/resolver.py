from __future__ import annotations

import logging
from typing import Generic, TypeVar

from .errors import TemplateError
from .logs.logger import logger
from .store.base import TemplateStore
from .template import Template
from .templates import Templates

S = TypeVar("S", bound=TemplateStore)


class Resolver(Generic[S]):
    """Always returns the latest template string for ``namespace.name``.

    Every lookup refreshes first. Refresh failures are logged and swallowed:
    resolution falls back to whatever was last loaded successfully, so a
    broken template file degrades to stale or absent text instead of an
    exception in the feature using it.
    """

    def __init__(self, store: S) -> None:
        """Create a resolver using this store.

        Raises:
            TemplateError: The initial templates could not be loaded.
        """
        self._templates: Templates[S] = Templates(store)

    def __repr__(self) -> str:
        return f"Resolver({self._templates!r})"

    @property
    def templates(self) -> Templates[S]:
        return self._templates

    @property
    def store(self) -> S:
        return self._templates.store

    def resolve(self, namespace: str, name: str) -> str | None:
        """Tries to get the template string for ``namespace.name``.

        Returns None when nothing was ever loaded, the namespace is unknown,
        or the name is unknown within it.
        """
        try:
            self._templates.refresh()
        except TemplateError as e:
            logger.log_event(
                "resolver",
                "refresh_failed",
                level=logging.WARNING,
                namespace=namespace,
                name=name,
                error=str(e),
            )
        mapping = self._templates.get(namespace)
        if mapping is None:
            return None
        return mapping.get(name)

    def render(self, value: Template) -> str | None:
        """Resolve the template for ``value`` and apply its arguments."""
        template = self.resolve(value.namespace(), value.variant())
        if template is None:
            logger.log_event(
                "resolver",
                "miss",
                level=logging.DEBUG,
                namespace=value.namespace(),
                name=value.variant(),
            )
            return None
        return value.apply(template)
