"""Gemini service for vocabulary lookups, illustrations, speech and tutoring"""
import base64
import logging
import os
from typing import Optional, List, Any

from google import genai
from google.genai import types

from app.models import AnswerKind, DefinitionResult
from app.utils import (
    build_definition_prompt,
    build_definition_schema,
    build_image_prompt,
    build_story_prompt,
    build_quick_answer_prompt,
    parse_definition,
    term_seed,
)

logger = logging.getLogger(__name__)

DEFAULT_TEXT_MODEL = "gemini-2.5-flash"
DEFAULT_IMAGE_MODEL = "gemini-2.5-flash-image"
DEFAULT_TTS_MODEL = "gemini-2.5-flash-preview-tts"
DEFAULT_TTS_VOICE = "Kore"

STORY_FALLBACK = "Could not generate dialogue."
QUICK_ANSWER_FALLBACK = "Could not generate an answer right now."
QUICK_ANSWER_MAX_CHARS = 600


class GenerationFailure(RuntimeError):
    """Gemini reported success but produced no usable text"""


class GeminiUnavailableError(RuntimeError):
    """No Gemini client is configured"""


def _model_name(value: str) -> str:
    # Strip "models/" prefix if present (some configs include it)
    if value.startswith("models/"):
        return value.replace("models/", "", 1)
    return value


def _first_inline_data(response: Any) -> Optional[Any]:
    """Return the inline_data of the first part that carries some"""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return None
    content = getattr(candidates[0], "content", None)
    for part in getattr(content, "parts", None) or []:
        inline_data = getattr(part, "inline_data", None)
        if inline_data is not None and inline_data.data:
            return inline_data
    return None


def _to_base64(data: Any) -> str:
    # The SDK decodes inline data to bytes; re-encode for transport
    if isinstance(data, (bytes, bytearray)):
        return base64.b64encode(data).decode("ascii")
    return str(data)


def shorten_answer(text: str, limit: int = QUICK_ANSWER_MAX_CHARS) -> str:
    """Trim an answer to at most ``limit`` characters on a word boundary"""
    text = text.strip()
    if len(text) <= limit:
        return text
    cut = text[:limit - 1]
    # Drop a trailing partial word only
    if not text[limit - 1].isspace() and " " in cut:
        cut = cut.rsplit(" ", 1)[0]
    return cut.rstrip() + "…"


class GeminiService:
    """Service for interacting with Gemini on behalf of the learning app"""

    def __init__(
        self,
        client: Optional[genai.Client] = None,
        api_key: Optional[str] = None,
        text_model: Optional[str] = None,
        image_model: Optional[str] = None,
        tts_model: Optional[str] = None,
        tts_voice: Optional[str] = None,
    ):
        self.text_model = _model_name(text_model or os.getenv("GEMINI_TEXT_MODEL", DEFAULT_TEXT_MODEL))
        self.image_model = _model_name(image_model or os.getenv("GEMINI_IMAGE_MODEL", DEFAULT_IMAGE_MODEL))
        self.tts_model = _model_name(tts_model or os.getenv("GEMINI_TTS_MODEL", DEFAULT_TTS_MODEL))
        self.tts_voice = tts_voice or os.getenv("GEMINI_TTS_VOICE", DEFAULT_TTS_VOICE)
        self.client = client
        self.error = None

        if client is None:
            api_key = api_key or os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY")
            if not api_key:
                self.error = "GEMINI_API_KEY environment variable is not set"
            else:
                try:
                    self.client = genai.Client(api_key=api_key)
                except Exception as e:
                    self.error = str(e)

        self.available = self.client is not None
        if not self.available:
            logger.warning(f"Gemini service is not available: {self.error}")

    def _require_client(self) -> genai.Client:
        if self.client is None:
            error_msg = "Gemini service is not available."
            if self.error:
                error_msg += f" Error: {self.error}"
            raise GeminiUnavailableError(error_msg)
        return self.client

    async def get_definition(self, term: str, native_lang: str, target_lang: str) -> DefinitionResult:
        """
        Define a term with two translated examples and a usage note

        Args:
            term: Word or phrase in the target language
            native_lang: Language of the learner (e.g. "English")
            target_lang: Language being learned (e.g. "Spanish")

        Returns:
            DefinitionResult: Validated structured definition

        Raises:
            GenerationFailure: Gemini returned no text
            DefinitionDecodeError: The text is not a valid definition object
        """
        client = self._require_client()
        logger.info(f"Requesting definition for '{term}' ({target_lang} -> {native_lang})")

        response = await client.aio.models.generate_content(
            model=self.text_model,
            contents=build_definition_prompt(term, native_lang, target_lang),
            config=types.GenerateContentConfig(
                temperature=0,
                response_mime_type="application/json",
                response_schema=build_definition_schema(native_lang, target_lang),
            ),
        )

        if not response.text:
            raise GenerationFailure(f"No definition generated for '{term}'")
        return parse_definition(response.text)

    async def generate_image(self, term: str, target_lang: str) -> Optional[str]:
        """
        Illustrate a term. Returns a PNG data URI, or None when no image could
        be produced for any reason.
        """
        try:
            client = self._require_client()
            seed = term_seed(term)
            logger.info(f"Requesting illustration for '{term}' with seed {seed}")

            response = await client.aio.models.generate_content(
                model=self.image_model,
                contents=[types.Part.from_text(text=build_image_prompt(term, target_lang))],
                config=types.GenerateContentConfig(seed=seed),
            )

            inline_data = _first_inline_data(response)
            if inline_data is None:
                logger.warning(f"Image reply for '{term}' carried no inline data")
                return None
            return f"data:image/png;base64,{_to_base64(inline_data.data)}"
        except Exception:
            logger.exception(f"Image generation failed for '{term}'")
            return None

    async def generate_speech(self, text: str) -> Optional[str]:
        """Read text aloud. Returns base64 audio, or None on any failure."""
        try:
            client = self._require_client()
            response = await client.aio.models.generate_content(
                model=self.tts_model,
                contents=[types.Content(parts=[types.Part.from_text(text=text)])],
                config=types.GenerateContentConfig(
                    response_modalities=["AUDIO"],
                    speech_config=types.SpeechConfig(
                        voice_config=types.VoiceConfig(
                            prebuilt_voice_config=types.PrebuiltVoiceConfig(voice_name=self.tts_voice),
                        ),
                    ),
                ),
            )

            inline_data = _first_inline_data(response)
            if inline_data is None:
                logger.warning("Speech reply carried no audio data")
                return None
            return _to_base64(inline_data.data)
        except Exception:
            logger.exception("Speech generation failed")
            return None

    async def generate_story(self, words: List[str], native_lang: str, target_lang: str) -> str:
        """Write a short beginner dialogue using the given words"""
        client = self._require_client()
        logger.info(f"Requesting dialogue with {len(words)} words in {target_lang}")

        response = await client.aio.models.generate_content(
            model=self.text_model,
            contents=build_story_prompt(words, native_lang, target_lang),
        )
        return response.text or STORY_FALLBACK

    async def get_quick_ai_answer(
        self,
        term: str,
        kind: AnswerKind,
        native_lang: str,
        target_lang: str
    ) -> str:
        """Answer a short tutoring question (natural usage, mistakes, fun fact) about a word"""
        client = self._require_client()
        prompt = build_quick_answer_prompt(term, kind, native_lang, target_lang)

        response = await client.aio.models.generate_content(
            model=self.text_model,
            contents=prompt,
            config=types.GenerateContentConfig(temperature=0),
        )

        answer = shorten_answer(response.text or "")
        return answer or QUICK_ANSWER_FALLBACK
