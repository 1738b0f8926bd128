from .prompts import (
    build_definition_prompt,
    build_definition_schema,
    build_image_prompt,
    build_story_prompt,
    build_quick_answer_prompt,
)
from .json_extractor import DefinitionDecodeError, parse_definition
from .seed import term_seed

__all__ = [
    "build_definition_prompt",
    "build_definition_schema",
    "build_image_prompt",
    "build_story_prompt",
    "build_quick_answer_prompt",
    "DefinitionDecodeError",
    "parse_definition",
    "term_seed",
]
