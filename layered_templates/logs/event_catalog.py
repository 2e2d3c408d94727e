"""Event template catalog loader (single authoritative JSON)."""

from __future__ import annotations

from pathlib import Path

from ..errors import TemplateError
from ..loader import load_json

EVENT_TEMPLATES: dict[tuple[str, str], str] = {}
_JSON_FILENAME = "event_templates.json"  # co-located inside logs/ directory


def _load_event_templates(path: Path | None = None) -> dict[tuple[str, str], str]:
    """Load event templates from the co-located JSON file.

    The catalog uses the same namespace -> name -> template document as the
    template stores, so it is parsed with ``load_json``. A missing or
    malformed catalog degrades to a single ``app.load_error`` entry.
    """
    path = path or Path(__file__).with_name(_JSON_FILENAME)
    templates: dict[tuple[str, str], str] = {}
    try:
        parsed = load_json(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        templates[("app", "load_error")] = "Event templates file missing"
        return templates
    except (OSError, TemplateError) as e:
        templates[("app", "load_error")] = f"Failed to load event templates: {e}"[:200]
        return templates
    for domain, actions in parsed.items():
        for action, template in actions.items():
            templates[(domain, action)] = template
    return templates


def reload_event_templates(path: Path | None = None) -> None:
    global EVENT_TEMPLATES  # noqa: PLW0603
    EVENT_TEMPLATES = _load_event_templates(path)


reload_event_templates()

__all__ = ["EVENT_TEMPLATES", "reload_event_templates"]
