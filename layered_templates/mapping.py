"""Read-only name -> template string mapping for a single namespace."""

from __future__ import annotations

from collections import abc
from collections.abc import Iterable, Iterator
from types import MappingProxyType


class Mapping(abc.Mapping[str, str]):
    """A mapping of template names to template strings.

    Built once and never mutated. ``merged`` returns a new instance, so a
    cached ``TemplateMap`` can be handed out without defensive copies.
    """

    __slots__ = ("_entries",)

    def __init__(
        self, entries: abc.Mapping[str, str] | Iterable[tuple[str, str]] = ()
    ) -> None:
        self._entries = MappingProxyType(dict(entries))

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Mapping({dict(self._entries)!r})"

    def merged(self, overrides: abc.Mapping[str, str]) -> Mapping:
        """Return a new mapping where ``overrides`` win per key."""
        combined = dict(self._entries)
        combined.update(overrides)
        return Mapping(combined)


# A template mapping of namespace -> Mapping
TemplateMap = dict[str, Mapping]


__all__ = ["Mapping", "TemplateMap"]
