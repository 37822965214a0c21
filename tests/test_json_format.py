"""Tests for the JSON reformatter."""

import json

import pytest

from fmtkit.json_format import (
    STYLES, FormatOptions, escape_non_ascii, minify_json, reformat,
    serialize, sort_keys_deep, validate_json,
)
from fmtkit.results import FormatFailed, ParseError

DOC = '{"b": 1, "a": {"d": [3, {"z": 0, "y": null}], "c": "x"}}'


def _keys_sorted_everywhere(value):
    if isinstance(value, dict):
        keys = list(value)
        return keys == sorted(keys) and all(
            _keys_sorted_everywhere(v) for v in value.values())
    if isinstance(value, list):
        return all(_keys_sorted_everywhere(v) for v in value)
    return True


# ---------------------------------------------------------------------------
# styles
# ---------------------------------------------------------------------------

def test_pretty_uses_indent_width():
    out = reformat('{"a":[1,2]}', FormatOptions(indent_width=4)).text
    assert out == '{\n    "a": [\n        1,\n        2\n    ]\n}'

def test_pretty_default_is_two_spaces():
    assert reformat('{"a":1}').text == '{\n  "a": 1\n}'

def test_compact_ignores_indent_width():
    out = reformat('{"a":{"b":1}}', FormatOptions(style="compact", indent_width=8)).text
    assert out == '{\n "a": {\n  "b": 1\n }\n}'

def test_minified_has_no_whitespace():
    out = reformat('{ "a" : [ 1 , 2 ] , "b" : "x y" }', FormatOptions(style="minified")).text
    assert out == '{"a":[1,2],"b":"x y"}'

def test_minify_json_shorthand():
    assert minify_json('[1, 2,\n 3]').text == '[1,2,3]'

@pytest.mark.parametrize("style", ["table", "tree"])
def test_projection_styles_fall_back_to_pretty_text(style):
    out = reformat('{"a":1}', FormatOptions(style=style, indent_width=4)).text
    assert out == '{\n    "a": 1\n}'

def test_empty_containers_stay_inline():
    assert reformat('{"a":[],"b":{}}').text == '{\n  "a": [],\n  "b": {}\n}'

def test_key_order_preserved_without_sorting():
    out = reformat('{"z":1,"a":2}', FormatOptions(style="minified")).text
    assert out == '{"z":1,"a":2}'

def test_no_trailing_newline():
    assert not reformat(DOC).text.endswith("\n")


# ---------------------------------------------------------------------------
# sorting
# ---------------------------------------------------------------------------

def test_sorted_style_sorts_nested_objects():
    result = reformat(DOC, FormatOptions(style="sorted"))
    assert _keys_sorted_everywhere(json.loads(result.text))
    assert result.text.index('"a"') < result.text.index('"b"')

def test_sort_keys_flag_applies_to_any_style():
    out = reformat(DOC, FormatOptions(style="minified", sort_keys=True)).text
    assert out == '{"a":{"c":"x","d":[3,{"y":null,"z":0}]},"b":1}'

def test_sort_keys_deep_keeps_array_order():
    assert sort_keys_deep([3, 1, {"b": 1, "a": 2}]) == [3, 1, {"a": 2, "b": 1}]
    assert list(sort_keys_deep([{"b": 1, "a": 2}])[0]) == ["a", "b"]

def test_sort_keys_deep_leaves_input_untouched():
    value = {"b": {"d": 1, "c": 2}, "a": 0}
    sort_keys_deep(value)
    assert list(value) == ["b", "a"]
    assert list(value["b"]) == ["d", "c"]

def test_sort_keys_deep_primitives_pass_through():
    for v in (None, True, 1, 1.5, "s"):
        assert sort_keys_deep(v) is v


# ---------------------------------------------------------------------------
# unicode escaping
# ---------------------------------------------------------------------------

def test_escape_non_ascii_lowercase_hex():
    out = reformat('{"name":"João"}', FormatOptions(style="minified", escape_non_ascii=True)).text
    assert out == '{"name":"Jo\\u00e3o"}'

def test_escape_includes_del_character():
    assert escape_non_ascii("a\u007fb") == "a\\u007fb"

def test_escape_leaves_ascii_alone():
    assert escape_non_ascii('{"a": "plain"}') == '{"a": "plain"}'

def test_escape_astral_uses_surrogate_pair():
    assert escape_non_ascii("\U0001f600") == "\\ud83d\\ude00"

@pytest.mark.parametrize("text", ["João Silva", "日本語", "emoji \U0001f600", "ÿ\u007f"])
def test_escape_round_trips_through_json(text):
    src = json.dumps({"k": text}, ensure_ascii=False)
    out = reformat(src, FormatOptions(escape_non_ascii=True)).text
    assert out.isascii()
    assert json.loads(out) == {"k": text}

def test_escape_applies_to_keys():
    out = reformat('{"ключ":1}', FormatOptions(style="minified", escape_non_ascii=True)).text
    assert out == '{"\\u043a\\u043b\\u044e\\u0447":1}'


# ---------------------------------------------------------------------------
# properties
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("style", STYLES)
def test_round_trip_preserves_values(style):
    result = reformat(DOC, FormatOptions(style=style))
    assert json.loads(result.text) == json.loads(DOC)

def test_pretty_is_idempotent():
    once = reformat(DOC).text
    assert reformat(once).text == once

def test_repeated_calls_identical():
    opts = FormatOptions(style="sorted", indent_width=8, escape_non_ascii=True)
    assert reformat(DOC, opts).text == reformat(DOC, opts).text

def test_result_carries_parsed_value():
    result = reformat(DOC, FormatOptions(style="sorted"))
    assert result.value == json.loads(DOC)
    assert list(result.value) == ["a", "b"]

def test_deep_nesting_formats():
    src = "[" * 150 + "]" * 150
    result = reformat(src, FormatOptions(style="minified"))
    assert result.ok
    assert result.text == src

def test_deep_nesting_with_sorting_never_raises():
    src = "[" * 900 + "]" * 900
    result = reformat(src, FormatOptions(style="sorted"))
    # 足够深时返回 ParseError，否则正常输出；两种情况都不抛异常
    if result.ok:
        assert json.loads(result.text) == json.loads(src)
    else:
        assert isinstance(result.error, ParseError)


# ---------------------------------------------------------------------------
# errors and boundaries
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("text", ["", "   ", "\n\t  \n"])
def test_blank_input_is_empty_success(text):
    result = reformat(text)
    assert result.ok
    assert result.text == ""

def test_trailing_comma_is_parse_error():
    result = reformat('{"a":1,}')
    assert not result.ok
    assert result.text == ""
    assert isinstance(result.error, ParseError)
    assert result.error.line == 1
    assert result.error.column is not None

def test_parse_error_message_passthrough():
    result = reformat('{"a" 1}')
    assert "Expecting ':' delimiter" in result.error.message
    assert str(result.error).endswith("line 1 column 6")

@pytest.mark.parametrize("text", ["NaN", "[Infinity]", '{"a": -Infinity}'])
def test_non_standard_constants_rejected(text):
    result = reformat(text)
    assert isinstance(result.error, ParseError)

@pytest.mark.parametrize("text", ["[1e400]", "{\"a\": -1e999}"])
def test_out_of_range_number_rejected(text):
    result = reformat(text)
    assert not result.ok
    assert isinstance(result.error, ParseError)
    assert "out of range" in result.error.message

def test_out_of_range_number_fails_validation():
    ok, _msg = validate_json("[1e400]")
    assert not ok

def test_serialize_refuses_non_finite_floats():
    with pytest.raises(ValueError):
        serialize([float("inf")], FormatOptions())

def test_unwrap_raises_format_failed():
    with pytest.raises(FormatFailed) as info:
        reformat("[1,").unwrap()
    assert isinstance(info.value.error, ParseError)

def test_failed_call_does_not_affect_next_call():
    assert not reformat("{").ok
    assert reformat("{}").text == "{}"

@pytest.mark.parametrize("kwargs", [{"style": "fancy"}, {"indent_width": 3}])
def test_bad_options_raise(kwargs):
    with pytest.raises(ValueError):
        FormatOptions(**kwargs)

def test_options_are_immutable():
    opts = FormatOptions()
    with pytest.raises(Exception):
        opts.style = "minified"


# ---------------------------------------------------------------------------
# validate_json
# ---------------------------------------------------------------------------

def test_validate_object():
    assert validate_json('{"a":1,"b":2}') == (True, "有效的 JSON 对象，包含 2 个键")

def test_validate_array():
    assert validate_json('[1,2,3]') == (True, "有效的 JSON 数组，包含 3 个元素")

def test_validate_scalar():
    ok, msg = validate_json('"x"')
    assert ok
    assert "string" in msg

def test_validate_error_has_position():
    ok, msg = validate_json('{"a":1,}')
    assert not ok
    assert "行 1, 列 " in msg
