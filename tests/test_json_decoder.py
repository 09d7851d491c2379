"""Tests for recovering JSON objects from raw model output."""

import json

import pytest

from resume_extractor_ai.schemas.extraction import DecodeFailure
from resume_extractor_ai.services.json_decoder import decode_json_object, is_decode_failure

pytestmark = pytest.mark.unit

OBJECTS = [
    '{"a": 1}',
    '{"a": 1, "b": [2, 3]}',
    '{"name": "Zoë", "nested": {"x": {"y": null}}, "flag": true}',
    '{"text": "braces {inside} strings", "n": -1.5e3}',
    "{}",
]


@pytest.mark.parametrize("text", OBJECTS)
def test_unwrapped_object_matches_direct_parse(text):
    assert decode_json_object(text) == json.loads(text)


@pytest.mark.parametrize("text", OBJECTS)
@pytest.mark.parametrize("opening", ["```json\n", "```\n", "```JSON\n", "```javascript "])
def test_fenced_object_matches_unwrapped(text, opening):
    assert decode_json_object(f"{opening}{text}\n```") == json.loads(text)


def test_scenario_fenced_with_language_tag():
    assert decode_json_object('```json\n{"a": 1, "b": [2,3]}\n```') == {"a": 1, "b": [2, 3]}


def test_scenario_object_embedded_in_prose():
    assert decode_json_object('Sure! Here you go: {"a": 1} Thanks!') == {"a": 1}


def test_scenario_plain_prose_fails_with_original_text():
    result = decode_json_object("not json at all")

    assert isinstance(result, DecodeFailure)
    assert result.raw_text == "not json at all"
    assert result.error.startswith("Invalid JSON content:")


def test_failure_keeps_untrimmed_input():
    text = "  \n I could not find a resume here.\t\n"
    result = decode_json_object(text)

    assert is_decode_failure(result)
    assert result.raw_text == text


def test_failure_keeps_input_not_the_stripped_candidate():
    text = '```json\n{"a": 1,}\n```'
    result = decode_json_object(text)

    assert is_decode_failure(result)
    assert result.raw_text == text


def test_decoding_failure_raw_text_again_is_stable():
    first = decode_json_object("```\nnope\n```")
    second = decode_json_object(first.raw_text)

    assert second == first


def test_only_first_fenced_block_is_used():
    text = '```json\n{"first": 1}\n```\nand also\n```json\n{"second": 2}\n```'
    assert decode_json_object(text) == {"first": 1}


def test_unterminated_fence_still_decodes():
    assert decode_json_object('```json\n{"a": 1}') == {"a": 1}


def test_leading_whitespace_before_fence_is_trimmed():
    assert decode_json_object('\n\n  ```json\n{"a": 1}\n```  ') == {"a": 1}


def test_truncated_object_is_not_repaired():
    result = decode_json_object('```json\n{"summary": "Eight years of exp')
    assert is_decode_failure(result)


def test_trailing_comma_is_not_repaired():
    assert is_decode_failure(decode_json_object('{"a": 1,}'))


def test_closing_brace_inside_trailing_prose_breaks_slice():
    # Brace slicing is a pre-filter, not a tokenizer
    assert is_decode_failure(decode_json_object('{"a": 1} then } more'))


@pytest.mark.parametrize("text", ["[1, 2, 3]", "42", '"just a string"', "null"])
def test_non_object_json_is_a_failure(text):
    result = decode_json_object(text)

    assert is_decode_failure(result)
    assert "expected a JSON object" in result.error


@pytest.mark.parametrize("text", ['{"a": NaN}', '{"a": Infinity}', '{"a": -Infinity}'])
def test_non_finite_constants_are_rejected(text):
    assert is_decode_failure(decode_json_object(text))


@pytest.mark.parametrize("text", ["", None])
def test_empty_output_is_a_failure(text):
    result = decode_json_object(text)

    assert is_decode_failure(result)
    assert result.raw_text == ""


def test_error_key_in_model_output_is_data():
    assert decode_json_object('{"error": "none found"}') == {"error": "none found"}
    assert not is_decode_failure({"error": "none found"})
