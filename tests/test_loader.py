from __future__ import annotations

import json

import pytest

from layered_templates.errors import DeserializeError
from layered_templates.loader import (
    get_loader,
    load_json,
    load_toml,
    load_yaml,
    normalize_format,
)
from layered_templates.mapping import Mapping
from tests.fixtures.sample_templates import (
    DEFAULT_JSON,
    DEFAULT_TOML,
    DEFAULT_YAML,
    MALFORMED_JSON,
)

EXPECTED_RESPONSE = {
    "hello": "hello ${name}!",
    "count_items": "count is: ${count}",
    "okay": "okay response",
}


def test_load_json_two_level_map() -> None:
    templates = load_json(DEFAULT_JSON)
    assert set(templates) == {"a", "greet"}
    assert isinstance(templates["greet"], Mapping)
    assert templates["greet"].get("hello") == "hi ${name}"


def test_all_formats_agree() -> None:
    toml_map = load_toml(DEFAULT_TOML)
    yaml_map = load_yaml(DEFAULT_YAML)
    json_map = load_json(json.dumps({"response": EXPECTED_RESPONSE}))
    for templates in (toml_map, yaml_map, json_map):
        assert templates["response"] == EXPECTED_RESPONSE


def test_malformed_json_wraps_parser_error() -> None:
    with pytest.raises(DeserializeError) as excinfo:
        load_json(MALFORMED_JSON)
    assert isinstance(excinfo.value.__cause__, ValueError)
    assert excinfo.value.data["format"] == "json"


def test_malformed_toml_and_yaml() -> None:
    with pytest.raises(DeserializeError):
        load_toml("[response\nhello = ")
    with pytest.raises(DeserializeError):
        load_yaml("response: [unclosed")


@pytest.mark.parametrize(
    "text",
    [
        '["not", "a", "table"]',
        '{"ns": "not a table"}',
        '{"ns": {"name": 42}}',
        '{"ns": {"name": {"nested": "too deep"}}}',
    ],
)
def test_wrong_shape_rejected(text: str) -> None:
    with pytest.raises(DeserializeError):
        load_json(text)


def test_empty_yaml_is_empty_map() -> None:
    assert load_yaml("") == {}


def test_empty_namespace_allowed() -> None:
    templates = load_json('{"empty": {}}')
    assert templates["empty"] == {}


def test_get_loader_and_aliases() -> None:
    assert get_loader("JSON") is load_json
    assert get_loader(" yml ") is load_yaml
    assert normalize_format("Toml") == "toml"
    with pytest.raises(ValueError):
        get_loader("ini")
