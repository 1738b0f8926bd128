from .schemas import (
    AnswerKind,
    ExampleSentence,
    DefinitionResult,
    DefinitionRequest,
    ImageRequest,
    ImageResponse,
    SpeechRequest,
    SpeechResponse,
    StoryRequest,
    StoryResponse,
    QuickAnswerRequest,
    QuickAnswerResponse,
)

__all__ = [
    "AnswerKind",
    "ExampleSentence",
    "DefinitionResult",
    "DefinitionRequest",
    "ImageRequest",
    "ImageResponse",
    "SpeechRequest",
    "SpeechResponse",
    "StoryRequest",
    "StoryResponse",
    "QuickAnswerRequest",
    "QuickAnswerResponse",
]
