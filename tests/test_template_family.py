from __future__ import annotations

from dataclasses import dataclass

import pytest

from layered_templates.template import Template, namespace, snake_case


@namespace("response")
class MyResponse(Template):
    pass


@dataclass
class Hello(MyResponse):
    name: str


@dataclass
class CountItems(MyResponse):
    count: int


class Okay(MyResponse):
    pass


def test_family_names() -> None:
    assert MyResponse.namespace() == "response"
    assert MyResponse.name() == "my_response"
    # variants inherit the family identity
    assert Hello.namespace() == "response"
    assert Hello.name() == "my_response"


def test_variant_names() -> None:
    assert Hello(name="world").variant() == "hello"
    assert CountItems(count=42).variant() == "count_items"
    assert Okay().variant() == "okay"


def test_apply() -> None:
    assert Hello(name="world").apply("hello ${name}!") == "hello world!"
    assert CountItems(count=42).apply("count is: ${count}") == "count is: 42"
    assert Okay().apply("okay response") == "okay response"


def test_apply_missing_argument_returns_none() -> None:
    assert Okay().apply("needs ${name}") is None


def test_arguments() -> None:
    assert Hello(name="x").arguments() == {"name": "x"}
    assert Okay().arguments() == {}


def test_undecorated_family_raises() -> None:
    class Loose(Template):
        pass

    with pytest.raises(TypeError):
        Loose.namespace()
    with pytest.raises(TypeError):
        Loose.name()


def test_decorator_validation() -> None:
    with pytest.raises(TypeError):
        namespace("x")(object)  # type: ignore[type-var]
    with pytest.raises(ValueError):

        @namespace("  ")
        class Empty(Template):
            pass


@pytest.mark.parametrize(
    ("identifier", "expected"),
    [
        ("CountItems", "count_items"),
        ("MyResponse", "my_response"),
        ("HTTPError", "http_error"),
        ("okay", "okay"),
        ("some-name", "some_name"),
        ("Item2Count", "item2_count"),
    ],
)
def test_snake_case(identifier: str, expected: str) -> None:
    assert snake_case(identifier) == expected
