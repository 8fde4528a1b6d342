from __future__ import annotations

import math

import pytest

from postmatter.content.coercion import coerce_metadata, coerce_value, parse_number


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("true", True),
        ("false", False),
        ("42", 42),
        ("-7", -7),
        ("3.5", 3.5),
        ("1e3", 1000.0),
        ("0x1F", 31),
        ("[a, b, c]", ["a", "b", "c"]),
        ("[ python ,bonsai ]", ["python", "bonsai"]),
        ("", ""),
        ("hello world", "hello world"),
        ("2024-01-05", "2024-01-05"),
        ("True", "True"),
        ("12 34", "12 34"),
    ],
)
def test_coerce_value_rules(raw: str, expected: object) -> None:
    result = coerce_value(raw)

    assert result == expected
    assert type(result) is type(expected)


def test_empty_string_is_not_a_number() -> None:
    assert parse_number("") is None
    assert coerce_value("   ") == ""


def test_python_only_numeric_spellings_stay_strings() -> None:
    assert coerce_value("1_000") == "1_000"
    assert coerce_value("nan") == "nan"
    assert coerce_value("inf") == "inf"


def test_infinity_literal_is_numeric() -> None:
    assert coerce_value("Infinity") == math.inf
    assert coerce_value("-Infinity") == -math.inf


def test_list_split_is_naive_about_nested_brackets_and_commas() -> None:
    assert coerce_value("[a, [b], c]") == ["a", "[b]", "c"]
    assert coerce_value('["x, y", z]') == ['"x', 'y"', "z"]
    assert coerce_value("[]") == [""]


def test_coerce_metadata_handles_each_value_independently() -> None:
    coerced = coerce_metadata({"featured": "true", "weight": "3", "tags": "[a, b]", "title": "Hi"})

    assert coerced == {"featured": True, "weight": 3, "tags": ["a", "b"], "title": "Hi"}
