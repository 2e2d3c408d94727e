"""Audit partial overrides against the default templates.

An override is suspicious when it targets a key the default tier does not
define (usually a typo, since nothing will ever ask for it) or when it uses a
different set of placeholders than the default it replaces (callers pass the
default's arguments, so a new placeholder can never be filled).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from string import Template

from .mapping import TemplateMap


def placeholders(template: str) -> set[str]:
    """Return the placeholder names used by ``template``.

    Malformed markers are ignored.
    """
    names: set[str] = set()
    for match in Template.pattern.finditer(template):
        name = match.group("named") or match.group("braced")
        if name:
            names.add(name)
    return names


@dataclass(slots=True)
class Mismatch:
    namespace: str
    name: str
    default: set[str]
    override: set[str]


@dataclass(slots=True)
class AuditResult:
    unknown: set[tuple[str, str]] = field(default_factory=set)
    mismatched: list[Mismatch] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.unknown and not self.mismatched

    def to_dict(self) -> dict[str, object]:
        return {
            "unknown": sorted(self.unknown),
            "mismatched": [
                {
                    "namespace": m.namespace,
                    "name": m.name,
                    "default": sorted(m.default),
                    "override": sorted(m.override),
                }
                for m in self.mismatched
            ],
        }


def audit_overrides(default: TemplateMap, partial: TemplateMap) -> AuditResult:
    """Compare every override in ``partial`` with ``default``."""
    result = AuditResult()
    for namespace in sorted(partial):
        base = default.get(namespace)
        for name, override in sorted(partial[namespace].items()):
            original = base.get(name) if base is not None else None
            if original is None:
                result.unknown.add((namespace, name))
                continue
            expected = placeholders(original)
            actual = placeholders(override)
            if expected != actual:
                result.mismatched.append(Mismatch(namespace, name, expected, actual))
    return result


__all__ = ["AuditResult", "Mismatch", "audit_overrides", "placeholders"]
