"""Tests for the JSON table projection."""

import json

from fmtkit.json_table import (
    NESTED_ARRAY, NESTED_OBJECT, TABLE_EMPTY, TABLE_PAIRS, TABLE_RECORDS,
    TABLE_SCALAR, TABLE_VALUES, cell_text, project, render_table_text,
)


def _project(text):
    return project(json.loads(text))


# ---------------------------------------------------------------------------
# records
# ---------------------------------------------------------------------------

def test_columns_in_first_seen_order():
    t = _project('[{"a":1},{"b":2}]')
    assert t.kind == TABLE_RECORDS
    assert t.columns == ["a", "b"]
    assert t.cell(0, "a") == "1" and t.cell(0, "b") == ""
    assert t.cell(1, "a") == "" and t.cell(1, "b") == "2"

def test_columns_not_alphabetical():
    t = _project('[{"z":1,"m":2},{"a":3,"z":4}]')
    assert t.columns == ["z", "m", "a"]

def test_nested_values_use_placeholders():
    t = _project('[{"o":{"x":1},"l":[1,2],"n":null,"b":false}]')
    assert t.cell(0, "o") == NESTED_OBJECT == "{...}"
    assert t.cell(0, "l") == NESTED_ARRAY == "[...]"
    assert t.cell(0, "n") == ""
    assert t.cell(0, "b") == "false"

def test_non_object_rows_in_record_table_are_blank():
    t = _project('[{"a":1}, 5]')
    assert t.columns == ["a"]
    assert t.cell(1, "a") == ""

def test_numbered():
    assert _project('[{"a":1}]').numbered
    assert _project('[1]').numbered
    assert not _project('{"a":1}').numbered


# ---------------------------------------------------------------------------
# other shapes
# ---------------------------------------------------------------------------

def test_empty_array():
    t = _project("[]")
    assert t.kind == TABLE_EMPTY
    assert t.rows == []

def test_primitive_array_single_column():
    t = _project('[1, "x", true, null]')
    assert t.kind == TABLE_VALUES
    assert t.columns == ["value"]
    assert [r["value"] for r in t.rows] == ["1", "x", "true", ""]

def test_object_becomes_key_value_pairs():
    t = _project('{"name":"Ana","age":30,"tags":["a"],"meta":{}}')
    assert t.kind == TABLE_PAIRS
    assert t.columns == ["key", "value"]
    assert t.rows == [
        {"key": "name", "value": "Ana"},
        {"key": "age", "value": "30"},
        {"key": "tags", "value": "[...]"},
        {"key": "meta", "value": "{...}"},
    ]

def test_scalar_fallback():
    t = _project("42")
    assert t.kind == TABLE_SCALAR
    assert t.scalar == "42"

def test_scalar_null_shows_literal():
    t = _project("null")
    assert t.kind == TABLE_SCALAR
    assert t.scalar == "null"
    assert render_table_text(t) == "null"

def test_cell_text_float():
    assert cell_text(1.5) == "1.5"

def test_projection_is_deterministic():
    text = '[{"b":1,"a":2},{"c":3}]'
    assert _project(text) == _project(text)


# ---------------------------------------------------------------------------
# render_table_text
# ---------------------------------------------------------------------------

def test_render_records():
    out = render_table_text(_project('[{"a":1},{"b":2}]'))
    assert out == "#\ta\tb\n1\t1\t\n2\t\t2"

def test_render_pairs_has_no_row_numbers():
    out = render_table_text(_project('{"k":"v"}'))
    assert out == "key\tvalue\nk\tv"

def test_render_empty_and_scalar():
    assert render_table_text(_project("[]")) == "(空数组)"
    assert render_table_text(_project('"hi"')) == "hi"
