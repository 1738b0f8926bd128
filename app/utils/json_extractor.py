"""JSON decoding of structured Gemini replies"""
import json
import re
from typing import Any

from pydantic import ValidationError

from app.models import DefinitionResult


class DefinitionDecodeError(ValueError):
    """Definition reply is not valid JSON or does not match the schema"""

    def __init__(self, message: str, raw_text: str):
        super().__init__(message)
        self.raw_text = raw_text


_CODE_FENCE = re.compile(r'^```(?:json)?\s*(.*?)\s*```$', re.DOTALL)


def strip_code_fence(text: str) -> str:
    """Remove a surrounding markdown code block, if any"""
    text = text.strip()
    fence_match = _CODE_FENCE.match(text)
    if fence_match:
        return fence_match.group(1)
    return text


def load_json_object(text: str) -> Any:
    """Parse a reply as JSON, tolerating only a surrounding code block"""
    try:
        return json.loads(strip_code_fence(text))
    except json.JSONDecodeError as e:
        raise DefinitionDecodeError(f"Reply is not valid JSON: {e}", text) from e


def parse_definition(text: str) -> DefinitionResult:
    """Decode and validate a definition reply"""
    data = load_json_object(text)
    if not isinstance(data, dict):
        raise DefinitionDecodeError(
            f"Expected a JSON object, got {type(data).__name__}", text
        )
    try:
        return DefinitionResult.model_validate(data)
    except ValidationError as e:
        raise DefinitionDecodeError(f"Reply does not match the definition schema: {e}", text) from e
