from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from layered_templates.config import (
    StoreConfig,
    build_resolver,
    build_store,
    load_store_config,
)
from layered_templates.errors import ConfigurationError
from layered_templates.store import FileStore, NullStore, PartialStore
from tests.fixtures.sample_templates import DEFAULT_JSON, DEFAULT_TOML, PARTIAL_JSON


def test_defaults() -> None:
    config = StoreConfig()
    assert config.format == "json"
    assert config.default_path is None
    assert config.partial_path is None


def test_format_normalized() -> None:
    assert StoreConfig(format=" YML ").format == "yaml"
    with pytest.raises(ValidationError):
        StoreConfig(format="ini")


def test_partial_requires_default() -> None:
    with pytest.raises(ValidationError):
        StoreConfig(partial_path="overrides.json")


def test_from_env() -> None:
    config = StoreConfig.from_env(
        {
            "TEMPLATES_FORMAT": "toml",
            "TEMPLATES_DEFAULT_FILE": "/etc/app/templates.toml",
            "TEMPLATES_PARTIAL_FILE": "",
        }
    )
    assert config.format == "toml"
    assert config.default_path == Path("/etc/app/templates.toml")
    assert config.partial_path is None


def test_load_store_config_wraps_validation_error() -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        load_store_config({"TEMPLATES_FORMAT": "xml"})
    assert isinstance(excinfo.value.__cause__, ValidationError)
    assert excinfo.value.data["errors"]


def test_load_store_config_reads_os_environ(monkeypatch) -> None:  # type: ignore[no-untyped-def]
    monkeypatch.setenv("TEMPLATES_FORMAT", "yaml")
    monkeypatch.delenv("TEMPLATES_DEFAULT_FILE", raising=False)
    monkeypatch.delenv("TEMPLATES_PARTIAL_FILE", raising=False)
    assert load_store_config().format == "yaml"


def test_build_store_variants(tmp_path: Path) -> None:
    default = tmp_path / "default.json"
    partial = tmp_path / "partial.json"
    assert isinstance(build_store(StoreConfig()), NullStore)
    assert isinstance(build_store(StoreConfig(default_path=default)), FileStore)
    layered = build_store(StoreConfig(default_path=default, partial_path=partial))
    assert isinstance(layered, PartialStore)
    assert isinstance(layered.partial, FileStore)


def test_build_resolver_end_to_end(tmp_path: Path) -> None:
    default = tmp_path / "default.json"
    partial = tmp_path / "partial.json"
    default.write_text(DEFAULT_JSON, encoding="utf-8")
    partial.write_text(PARTIAL_JSON, encoding="utf-8")
    resolver = build_resolver(StoreConfig(default_path=default, partial_path=partial))
    assert resolver.resolve("a", "x") == "9"
    assert resolver.resolve("a", "y") == "2"


def test_build_resolver_toml(tmp_path: Path) -> None:
    default = tmp_path / "default.toml"
    default.write_text(DEFAULT_TOML, encoding="utf-8")
    resolver = build_resolver(StoreConfig(format="toml", default_path=default))
    assert resolver.resolve("response", "okay") == "okay response"
