"""API v1 routes for the vocabulary tutor (Gemini)"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from app.models import (
    DefinitionRequest,
    DefinitionResult,
    ImageRequest,
    ImageResponse,
    SpeechRequest,
    SpeechResponse,
    StoryRequest,
    StoryResponse,
    QuickAnswerRequest,
    QuickAnswerResponse,
)
from app.services import (
    GeminiService,
    GenerationFailure,
    GeminiUnavailableError,
    DefinitionDecodeError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["v1"])


def get_gemini_service(request: Request) -> GeminiService:
    """Gemini service created once at startup"""
    return request.app.state.gemini_service


def _to_http_error(e: Exception) -> HTTPException:
    if isinstance(e, GeminiUnavailableError):
        return HTTPException(status_code=503, detail=str(e))
    if isinstance(e, (GenerationFailure, DefinitionDecodeError)):
        return HTTPException(status_code=502, detail=str(e))
    return HTTPException(status_code=503, detail=f"Error calling Gemini API: {str(e)}")


@router.post("/definition", response_model=DefinitionResult)
async def definition(request: DefinitionRequest, service: GeminiService = Depends(get_gemini_service)):
    """
    Define a term for a learner

    Returns the definition, two example sentences with translations and a
    casual usage note.
    """
    try:
        return await service.get_definition(
            request.term,
            request.nativeLang or "English",
            request.targetLang
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Definition request for '{request.term}' failed: {e}")
        raise _to_http_error(e)


@router.post("/image", response_model=ImageResponse)
async def image(request: ImageRequest, service: GeminiService = Depends(get_gemini_service)):
    """Illustrate a term; image is null when no illustration is available"""
    return ImageResponse(image=await service.generate_image(request.term, request.targetLang))


@router.post("/speech", response_model=SpeechResponse)
async def speech(request: SpeechRequest, service: GeminiService = Depends(get_gemini_service)):
    """Read text aloud; audio is null when speech is unavailable"""
    return SpeechResponse(audio=await service.generate_speech(request.text))


@router.post("/story", response_model=StoryResponse)
async def story(request: StoryRequest, service: GeminiService = Depends(get_gemini_service)):
    """Write a short practice dialogue with the given words"""
    try:
        text = await service.generate_story(
            request.words,
            request.nativeLang or "English",
            request.targetLang
        )
        return StoryResponse(story=text)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Story request failed: {e}")
        raise _to_http_error(e)


@router.post("/quick-answer", response_model=QuickAnswerResponse)
async def quick_answer(request: QuickAnswerRequest, service: GeminiService = Depends(get_gemini_service)):
    """Answer a quick question about a word (natural usage, common mistakes, fun fact)"""
    try:
        answer = await service.get_quick_ai_answer(
            request.term,
            request.kind,
            request.nativeLang or "English",
            request.targetLang
        )
        return QuickAnswerResponse(answer=answer)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Quick answer request for '{request.term}' failed: {e}")
        raise _to_http_error(e)
