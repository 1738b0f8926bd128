"""Tests for strict decoding of definition replies."""

import json

import pytest
from pydantic import ValidationError

from app.models import DefinitionResult
from app.utils.json_extractor import DefinitionDecodeError, parse_definition, strip_code_fence


def test_parse_definition(definition_json):
    result = parse_definition(definition_json)
    assert isinstance(result, DefinitionResult)
    assert result.definition == "To move quickly on foot."
    assert [e.target for e in result.examples] == ["Corro cada mañana.", "Ella corre muy rápido."]
    assert result.examples[0].native == "I run every morning."
    assert result.usageNote.startswith("Super common")


def test_parse_definition_inside_code_block(definition_json):
    result = parse_definition(f"```json\n{definition_json}\n```")
    assert len(result.examples) == 2


def test_strip_code_fence_leaves_plain_text():
    assert strip_code_fence('  {"a": 1} ') == '{"a": 1}'


def test_invalid_json_raises_decode_error():
    with pytest.raises(DefinitionDecodeError) as exc_info:
        parse_definition("Here is your definition: run means to go fast")
    assert exc_info.value.raw_text.startswith("Here is")
    assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)


def test_non_object_raises_decode_error():
    with pytest.raises(DefinitionDecodeError):
        parse_definition('["definition"]')


def test_missing_field_raises_decode_error():
    with pytest.raises(DefinitionDecodeError) as exc_info:
        parse_definition(json.dumps({"definition": "x", "examples": [{"target": "a", "native": "b"}]}))
    assert isinstance(exc_info.value.__cause__, ValidationError)


def test_empty_examples_rejected():
    with pytest.raises(DefinitionDecodeError):
        parse_definition(json.dumps({"definition": "x", "examples": [], "usageNote": "y"}))


def test_empty_target_rejected():
    payload = {"definition": "x", "examples": [{"target": "", "native": "b"}], "usageNote": "y"}
    with pytest.raises(DefinitionDecodeError):
        parse_definition(json.dumps(payload))


def test_result_is_immutable(definition_json):
    result = parse_definition(definition_json)
    with pytest.raises(ValidationError):
        result.definition = "changed"
