"""Template families: map typed values onto ``namespace.variant`` templates.

A family is a base class decorated with ``@namespace``; each variant is a
subclass, usually a dataclass whose fields are the template arguments::

    @namespace("response")
    class MyResponse(Template):
        pass

    @dataclass
    class Hello(MyResponse):
        name: str

    class Okay(MyResponse):
        pass

    MyResponse.namespace()                    # "response"
    MyResponse.name()                         # "my_response"
    Hello(name="world").variant()             # "hello"
    Hello(name="world").apply("hi ${name}!")  # "hi world!"

The matching template document::

    [response]
    hello = "hi ${name}!"
    okay  = "okay response"
"""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Callable
from typing import ClassVar, TypeVar

from .render import apply_template

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")

T = TypeVar("T", bound="type[Template]")


def snake_case(identifier: str) -> str:
    """Convert ``CountItems`` / ``HTTPError`` / ``some-name`` to snake_case."""
    text = _CAMEL_BOUNDARY.sub("_", identifier.strip())
    text = re.sub(r"[\s\-]+", "_", text)
    return re.sub(r"_+", "_", text).lower()


class Template:
    """Base class for template families and their variants."""

    _template_namespace: ClassVar[str | None] = None
    _template_name: ClassVar[str | None] = None

    @classmethod
    def namespace(cls) -> str:
        """Namespace of the template family."""
        if cls._template_namespace is None:
            raise TypeError(f"{cls.__name__} is not decorated with @namespace")
        return cls._template_namespace

    @classmethod
    def name(cls) -> str:
        """Name of the template family (the family class, in snake_case)."""
        if cls._template_name is None:
            raise TypeError(f"{cls.__name__} is not decorated with @namespace")
        return cls._template_name

    def variant(self) -> str:
        """Name of this variant (its class, in snake_case)."""
        return snake_case(type(self).__name__)

    def arguments(self) -> dict[str, object]:
        """Named template arguments; dataclass fields, or none."""
        if dataclasses.is_dataclass(self):
            return {f.name: getattr(self, f.name) for f in dataclasses.fields(self)}
        return {}

    def apply(self, template: str) -> str | None:
        """Apply this variant's arguments to ``template``."""
        return apply_template(template, self.arguments())


def namespace(value: str) -> Callable[[T], T]:
    """Class decorator marking a ``Template`` subclass as a template family."""

    def decorate(cls: T) -> T:
        if not (isinstance(cls, type) and issubclass(cls, Template)):
            raise TypeError("@namespace can only decorate Template subclasses")
        if not value or not value.strip():
            raise ValueError("a template namespace must not be empty")
        cls._template_namespace = snake_case(value)
        cls._template_name = snake_case(cls.__name__)
        return cls

    return decorate


__all__ = ["Template", "namespace", "snake_case"]
