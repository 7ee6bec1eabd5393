"""Schema identifier parsing tests."""

from __future__ import annotations

import pytest
from json_schema_lite.schema_identifiers import (
    FragmentId,
    InvalidSchemaIdError,
    JsonPointerId,
    PathId,
    UrlId,
    is_absolute_url,
    parse_schema_id,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("#foo", FragmentId("foo")),
        ("#", FragmentId("")),
        ("http://example.com/root.json", UrlId("http://example.com/root.json")),
        (
            "urn:uuid:ee564b8a-7a87-4125-8c96-e9f123d6766f",
            UrlId("urn:uuid:ee564b8a-7a87-4125-8c96-e9f123d6766f"),
        ),
        ("/definitions/a~1b", JsonPointerId("/definitions/a~1b")),
        ("t/inner.json", PathId("t/inner.json")),
        ("other.json", PathId("other.json")),
    ],
)
def test_parses_each_identifier_shape(text: str, expected: object) -> None:
    assert parse_schema_id(text) == expected


def test_fragment_wins_over_other_shapes() -> None:
    parsed = parse_schema_id("#/definitions/A")

    assert isinstance(parsed, FragmentId)
    assert parsed.value == "/definitions/A"


def test_pointer_with_invalid_escape_falls_back_to_path() -> None:
    assert parse_schema_id("/a~2b") == PathId("/a~2b")


@pytest.mark.parametrize("text", ["not a uri", "http://example.com/a b", "/a b", "tab\there"])
def test_whitespace_fails_every_shape(text: str) -> None:
    with pytest.raises(InvalidSchemaIdError, match="Invalid schema identifier"):
        parse_schema_id(text)


def test_non_string_identifier_is_rejected() -> None:
    with pytest.raises(InvalidSchemaIdError):
        parse_schema_id(42)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "text",
    [
        "#foo",
        "http://example.com/root.json",
        "urn:uuid:ee564b8a-7a87-4125-8c96-e9f123d6766f",
        "/properties/street",
        "t/inner.json",
    ],
)
def test_identifiers_round_trip_to_their_text(text: str) -> None:
    assert str(parse_schema_id(text)) == text


def test_pointer_tokens_are_unescaped() -> None:
    pointer = parse_schema_id("/definitions/a~1b/c~0d")

    assert isinstance(pointer, JsonPointerId)
    assert pointer.tokens == ("definitions", "a/b", "c~d")


def test_absolute_url_requires_a_scheme() -> None:
    assert is_absolute_url("http://json-schema.org/draft-07/schema#")
    assert not is_absolute_url("json-schema.org/draft-07/schema#")
    assert not is_absolute_url("not a uri")
