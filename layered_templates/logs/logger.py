"""Event logger for template stores, caches and the resolver."""

from __future__ import annotations

import logging
import os

from ..render import apply_template


class TemplateLogger:
    def __init__(self, name: str = "layered_templates") -> None:
        # Fixed width for event name column when in debug (alignment)
        self._event_name_width = 32
        self.logger = logging.getLogger(name)
        debug_enabled = self._is_debug_enabled()
        self.logger.setLevel(logging.DEBUG if debug_enabled else logging.INFO)

    def log_event(
        self,
        domain: str,
        action: str,
        level: int = logging.INFO,
        human: str | None = None,
        *,
        exc_info: bool = False,
        **kwargs: object,
    ) -> None:
        event_name = f"{domain}_{action}".lower()
        human_text = human
        derived = False
        if human_text is None:
            # Local import so reload_event_templates() rebinding is picked up.
            from . import event_catalog

            template = event_catalog.EVENT_TEMPLATES.get((domain, action))
            if template:
                human_text = apply_template(template, kwargs) or template
            else:
                human_text = f"{domain.replace('_', ' ')}: {action.replace('_', ' ')}"
                derived = True
        kwargs.setdefault("_human_text", human_text)
        if derived:
            kwargs.setdefault("derived", True)
        self._log(level, event_name, exc_info=exc_info, **kwargs)

    def _log(
        self, level: int, event_name: str, exc_info: bool = False, **kwargs: object
    ) -> None:
        if not self.logger.isEnabledFor(level):
            return
        kw: dict[str, object] = dict(kwargs)  # copy for mutation in extract
        namespace, name, human_text = self._extract_reserved(kw)
        prefix = self._build_prefix(namespace, name)
        msg = (
            self._build_debug_message(event_name, prefix, human_text, kw)
            if self._is_debug_enabled()
            else self._build_concise_message(event_name, prefix, human_text)
        )
        self.logger.log(level, msg, exc_info=exc_info)

    @staticmethod
    def _is_debug_enabled() -> bool:
        return os.environ.get("DEBUG", "false").lower() in ("true", "1", "yes")

    @staticmethod
    def _extract_reserved(
        kwargs: dict[str, object],
    ) -> tuple[str | None, str | None, str | None]:
        namespace_o = kwargs.pop("namespace", None)
        name_o = kwargs.pop("name", None)
        human_text_o = kwargs.pop("_human_text", None)
        namespace = namespace_o if isinstance(namespace_o, str) else None
        name = name_o if isinstance(name_o, str) else None
        human_text = human_text_o if isinstance(human_text_o, str) else None
        return namespace, name, human_text

    @staticmethod
    def _build_prefix(namespace: str | None, name: str | None) -> str:
        if namespace is None:
            return "[templates]"
        core = f"{namespace}.{name}" if name else namespace
        return f"[{core}]"

    def _build_debug_message(
        self,
        event_name: str,
        prefix: str,
        human_text: str | None,
        kwargs: dict[str, object],
    ) -> str:
        context = ", ".join(f"{k}={v}" for k, v in kwargs.items())
        width = self._event_name_width
        if len(event_name) <= width:
            ev = event_name.ljust(width)
        else:  # truncate but keep rightmost indicator
            ev = event_name[: width - 1] + "~"
        base = f"{ev} {prefix}"
        if human_text:
            base = f"{base} {human_text}"
        if context:
            base = f"{base} ({context})"
        return base

    @staticmethod
    def _build_concise_message(
        event_name: str, prefix: str, human_text: str | None
    ) -> str:
        core = human_text or event_name
        return f"{prefix} {core}"


logger = TemplateLogger()
