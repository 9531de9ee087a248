"""Tests for scalar classification and inline array splitting."""

from __future__ import annotations

import pytest

from folio_content.errors import StructuralError
from folio_content.parser import ParseOptions
from folio_content.parser.scalars import (
    coerce_scalar,
    find_mapping_colon,
    split_inline_array,
)
from folio_content.values import (
    BooleanValue,
    FloatValue,
    IntegerValue,
    SequenceValue,
    StringValue,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ('"hello"', StringValue("hello")),
        ("'hello'", StringValue("hello")),
        ('""', StringValue("")),
        ('"42"', StringValue("42")),
        ("true", BooleanValue(True)),
        ("false", BooleanValue(False)),
        ("TRUE", StringValue("TRUE")),
        ("0", IntegerValue(0)),
        ("-17", IntegerValue(-17)),
        ("3.14", FloatValue(3.14)),
        ("-0.5", FloatValue(-0.5)),
        (".5", StringValue(".5")),
        ("1e3", StringValue("1e3")),
        ("null", StringValue("null")),
        ("Hello World", StringValue("Hello World")),
        ('"unbalanced', StringValue('"unbalanced')),
        ("[Draft] My post", StringValue("[Draft] My post")),
        ("[a, b", StringValue("[a, b")),
    ],
)
def test_coerce_scalar(text: str, expected: object) -> None:
    """Each token type is recognized in priority order."""
    assert coerce_scalar(text) == expected


def test_coerce_inline_array_recurses() -> None:
    """Array elements go through the same classifier."""
    assert coerce_scalar("[1, 'two', [false]]") == SequenceValue(
        (
            IntegerValue(1),
            StringValue("two"),
            SequenceValue((BooleanValue(False),)),
        )
    )


def test_split_inline_array_respects_quotes_and_brackets() -> None:
    """Only top-level commas separate elements."""
    assert split_inline_array("[ 'a, b' , [c, d], e ]") == ["'a, b'", "[c, d]", "e"]


@pytest.mark.parametrize("text", ["[a, b", "[a]]", "[[a]", "[a, , b]", "[a,]"])
def test_split_inline_array_rejects_malformed_arrays(text: str) -> None:
    """Unbalanced brackets and empty elements are structural errors."""
    with pytest.raises(StructuralError):
        split_inline_array(text, line_number=7)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("key: value", 3),
        ("key:", 3),
        ("https://example.com", None),
        ('"a: b": c', 6),
        ("[a: b]", None),
        ("plain text", None),
    ],
)
def test_find_mapping_colon(text: str, expected: int | None) -> None:
    """The separator is a colon outside quotes/brackets followed by a space."""
    assert find_mapping_colon(text) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("title:Hello", 5),
        ("url:https://example.com", 3),
        ("note: see:below", 4),
        ("[a:b]", None),
        ("plain text", None),
    ],
)
def test_find_mapping_colon_without_required_space(
    text: str, expected: int | None
) -> None:
    """The first bare colon is the fallback separator for mapping lines."""
    assert find_mapping_colon(text, require_space=False) == expected


def test_nested_inline_arrays_respect_max_depth() -> None:
    """Inline arrays deeper than the nesting limit are rejected."""
    options = ParseOptions(max_depth=2)
    assert coerce_scalar("[[1]]", options=options) == SequenceValue(
        (SequenceValue((IntegerValue(1),)),)
    )
    with pytest.raises(StructuralError, match="maximum depth of 2"):
        coerce_scalar("[[[1]]]", options=options, line_number=4)
