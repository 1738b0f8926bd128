from .gemini_service import (
    GeminiService,
    GenerationFailure,
    GeminiUnavailableError,
    STORY_FALLBACK,
    QUICK_ANSWER_FALLBACK,
)
from app.utils.json_extractor import DefinitionDecodeError

__all__ = [
    "GeminiService",
    "GenerationFailure",
    "GeminiUnavailableError",
    "DefinitionDecodeError",
    "STORY_FALLBACK",
    "QUICK_ANSWER_FALLBACK",
]
