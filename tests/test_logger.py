from __future__ import annotations

import logging
from pathlib import Path

from layered_templates.logs import event_catalog
from layered_templates.logs.logger import TemplateLogger


def test_logger_template_and_fallback(caplog) -> None:  # type: ignore[no-untyped-def]
    log = TemplateLogger("test_logger")
    caplog.set_level(logging.INFO)

    log.log_event("templates", "refreshed", namespaces=3)
    log.log_event("custom_domain", "custom_action", extra_field=123)

    msgs = [r.message for r in caplog.records]
    assert any("Refreshed templates (3 namespaces)" in m for m in msgs)
    assert any("custom domain: custom action" in m for m in msgs)


def test_logger_prefix_from_namespace_and_name(caplog) -> None:  # type: ignore[no-untyped-def]
    log = TemplateLogger("test_logger_prefix")
    caplog.set_level(logging.INFO)
    log.log_event("resolver", "miss", level=logging.INFO, namespace="greet", name="hello")
    log.log_event("templates", "refreshed", namespaces=1)
    msgs = [r.message for r in caplog.records]
    assert msgs[0] == "[greet.hello] No template for greet.hello"
    assert msgs[1].startswith("[templates] ")


def test_logger_template_with_missing_field_uses_raw_text(caplog) -> None:  # type: ignore[no-untyped-def]
    log = TemplateLogger("test_logger_raw")
    caplog.set_level(logging.INFO)
    log.log_event("templates", "refreshed")
    assert caplog.records[0].message.endswith("Refreshed templates (${namespaces} namespaces)")


def test_logger_explicit_human_text(caplog) -> None:  # type: ignore[no-untyped-def]
    log = TemplateLogger("test_logger_human")
    caplog.set_level(logging.INFO)
    log.log_event("cli", "watch_start", human="custom text")
    assert caplog.records[0].message == "[templates] custom text"


def test_logger_debug_alignment(caplog, monkeypatch) -> None:  # type: ignore[no-untyped-def]
    monkeypatch.setenv("DEBUG", "1")
    log = TemplateLogger("test_logger_debug")
    caplog.set_level(logging.DEBUG, logger="test_logger_debug")
    log.log_event("store", "file_changed", level=logging.DEBUG, path="/tmp/t.json")
    first = caplog.records[0].message
    assert "store_file_changed" in first
    segment = first.split("[")[0]
    assert len(segment) >= 32
    assert "(path=/tmp/t.json)" in first


def test_logger_respects_level(caplog) -> None:  # type: ignore[no-untyped-def]
    log = TemplateLogger("test_logger_level")
    log.logger.setLevel(logging.WARNING)
    caplog.set_level(logging.DEBUG)
    log.log_event("templates", "refreshed", namespaces=1)
    assert not caplog.records


def test_event_catalog_loaded() -> None:
    assert event_catalog.EVENT_TEMPLATES[("resolver", "refresh_failed")].startswith(
        "Cannot refresh templates"
    )


def test_event_catalog_missing_file(tmp_path: Path) -> None:
    event_catalog.reload_event_templates(tmp_path / "missing.json")
    assert event_catalog.EVENT_TEMPLATES == {
        ("app", "load_error"): "Event templates file missing"
    }


def test_event_catalog_malformed_file(tmp_path: Path) -> None:
    bad = tmp_path / "event_templates.json"
    bad.write_text('{"store": {"x": 1}}', encoding="utf-8")
    event_catalog.reload_event_templates(bad)
    message = event_catalog.EVENT_TEMPLATES[("app", "load_error")]
    assert message.startswith("Failed to load event templates")


def test_event_catalog_keys_lowercase() -> None:
    for domain, action in event_catalog.EVENT_TEMPLATES:
        assert domain == domain.lower()
        assert action == action.lower()
