from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List


class AnswerKind(str, Enum):
    """Kinds of quick tutor answers"""
    NATURAL = "natural"
    MISTAKE = "mistake"
    FUNFACT = "funfact"


class ExampleSentence(BaseModel):
    """Example sentence with its translation"""
    model_config = ConfigDict(frozen=True)

    target: str = Field(min_length=1)  # Sentence in the target language
    native: str  # Translation in the native language


class DefinitionResult(BaseModel):
    """Structured definition returned by Gemini"""
    model_config = ConfigDict(frozen=True)

    definition: str
    examples: List[ExampleSentence] = Field(min_length=1)
    usageNote: str


class DefinitionRequest(BaseModel):
    """Request model for term definition"""
    term: str = Field(min_length=1)
    nativeLang: Optional[str] = "English"
    targetLang: str


class ImageRequest(BaseModel):
    """Request model for term illustration"""
    term: str = Field(min_length=1)
    targetLang: str


class ImageResponse(BaseModel):
    """Response model for term illustration"""
    image: Optional[str] = None  # data:image/png;base64,... or null when unavailable


class SpeechRequest(BaseModel):
    """Request model for text-to-speech"""
    text: str = Field(min_length=1)


class SpeechResponse(BaseModel):
    """Response model for text-to-speech"""
    audio: Optional[str] = None  # Base64 audio or null when unavailable


class StoryRequest(BaseModel):
    """Request model for dialogue generation"""
    words: List[str] = []
    nativeLang: Optional[str] = "English"
    targetLang: str


class StoryResponse(BaseModel):
    """Response model for dialogue generation"""
    story: str


class QuickAnswerRequest(BaseModel):
    """Request model for quick tutor answers"""
    term: str = Field(min_length=1)
    kind: AnswerKind
    nativeLang: Optional[str] = "English"
    targetLang: str


class QuickAnswerResponse(BaseModel):
    """Response model for quick tutor answers"""
    answer: str
