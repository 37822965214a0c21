"""Tests for value classification and format results."""

import json

import pytest

from fmtkit.results import FormatResult, ParseError, XmlError
from fmtkit.values import (
    KIND_ARRAY, KIND_BOOL, KIND_NULL, KIND_NUMBER, KIND_OBJECT, KIND_STRING,
    SAMPLE_JSON, is_expandable, kind_of,
)


@pytest.mark.parametrize("value, kind", [
    (None, KIND_NULL),
    (True, KIND_BOOL),
    (0, KIND_NUMBER),
    (1.5, KIND_NUMBER),
    ("", KIND_STRING),
    ([], KIND_ARRAY),
    ({}, KIND_OBJECT),
])
def test_kind_of(value, kind):
    assert kind_of(value) == kind

def test_bool_is_not_a_number():
    assert kind_of(False) == KIND_BOOL

def test_kind_of_rejects_non_json():
    with pytest.raises(TypeError):
        kind_of((1, 2))

def test_is_expandable():
    assert is_expandable([0])
    assert not is_expandable([])
    assert not is_expandable("abc")

def test_sample_json_is_valid():
    assert kind_of(json.loads(SAMPLE_JSON)) == KIND_OBJECT


# ---------------------------------------------------------------------------
# results
# ---------------------------------------------------------------------------

def test_error_str_with_position():
    assert str(ParseError("Expecting value", 2, 5)) == "Expecting value: line 2 column 5"

def test_error_str_line_only():
    assert str(XmlError("bad", 3)) == "bad: line 3"

def test_error_str_plain():
    assert str(ParseError("Nesting too deep")) == "Nesting too deep"

def test_error_kinds():
    assert ParseError("x").kind == "json"
    assert XmlError("x").kind == "xml"

def test_result_ok_and_unwrap():
    assert FormatResult(text="abc").unwrap() == "abc"
    failed = FormatResult.failure(XmlError("bad"))
    assert not failed.ok
    assert failed.text == ""
