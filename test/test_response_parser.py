import pytest

from llm.errors import ResponseParseError
from llm.response_parser import extract_json


def test_object_surrounded_by_noise():
    assert extract_json('noise {"a":1} noise') == {"a": 1}


def test_nested_object_and_trailing_braces():
    text = 'Result: {"a": {"b": [1, 2]}, "c": "}"} and {"ignored": true}'
    assert extract_json(text, kind="object") == {"a": {"b": [1, 2]}, "c": "}"}


def test_array_in_code_fence():
    text = '```json\n["Plan sprint", "Write docs"]\n```'
    assert extract_json(text, kind="array") == ["Plan sprint", "Write docs"]


def test_first_bracket_wins_without_kind():
    assert extract_json('[1, 2] {"a": 1}') == [1, 2]


def test_no_braces_raises():
    with pytest.raises(ResponseParseError):
        extract_json("no json here at all")


def test_invalid_json_raises():
    with pytest.raises(ResponseParseError):
        extract_json("{not: valid}")


def test_unbalanced_raises():
    with pytest.raises(ResponseParseError):
        extract_json('{"a": 1')


def test_requested_kind_must_be_present():
    with pytest.raises(ResponseParseError):
        extract_json('{"a": 1}', kind="array")


def test_array_nested_in_object_is_found_by_kind():
    assert extract_json('{"tags": ["x"]}', kind="array") == ["x"]
