"""Prompt building utilities for vocabulary lookups, illustrations and tutoring"""
from typing import List

from google.genai import types

from app.models import AnswerKind


def build_definition_prompt(term: str, native_lang: str, target_lang: str) -> str:
    """Build prompt for a term definition with examples and a usage note"""
    return f"""Define the term "{term}" (which is in {target_lang}) for a speaker of {native_lang}.
Provide:
1. A natural language definition in {native_lang}.
2. Two example sentences. CRITICAL:
   - The 'target' field MUST be the sentence in {target_lang}.
   - The 'native' field MUST be the translation in {native_lang}.
3. A "usageNote" in {native_lang} that explains cultural nuance, tone, or related words.
   CRITICAL: The usage note must be fun, lively, and casual. Like a friend talking. No textbook style. Be concise."""


def build_definition_schema(native_lang: str, target_lang: str) -> types.Schema:
    """Response schema the definition reply must follow"""
    example = types.Schema(
        type=types.Type.OBJECT,
        properties={
            "target": types.Schema(
                type=types.Type.STRING,
                description=f"The example sentence in {target_lang}.",
            ),
            "native": types.Schema(
                type=types.Type.STRING,
                description=f"The translation of the example in {native_lang}.",
            ),
        },
        required=["target", "native"],
    )
    return types.Schema(
        type=types.Type.OBJECT,
        properties={
            "definition": types.Schema(type=types.Type.STRING),
            "examples": types.Schema(type=types.Type.ARRAY, items=example),
            "usageNote": types.Schema(type=types.Type.STRING),
        },
        required=["definition", "examples", "usageNote"],
        property_ordering=["definition", "examples", "usageNote"],
    )


def build_image_prompt(term: str, target_lang: str) -> str:
    """Build prompt for a term illustration"""
    return (
        f'A simple, bright, pop-art style illustration representing the concept of "{term}" '
        f"(in {target_lang}). Minimalist, colorful, vector art style. White background. "
        "High contrast, thick lines."
    )


def build_story_prompt(words: List[str], native_lang: str, target_lang: str) -> str:
    """Build prompt for a short practice dialogue"""
    return f"""Create a short, practical real-life dialogue in {target_lang} using as many of these words as possible naturally: {', '.join(words)}.

Requirements:
1. Format as a simple conversation script (e.g., Person A: ... / Person B: ...).
2. Sentences must be simple, short, and beginner-friendly.
3. IMMEDIATELY after each {target_lang} sentence, include the {native_lang} translation in parentheses on the same line.
4. Keep it concise (max 6-8 lines of dialogue)."""


_QUICK_ANSWER_REQUESTS = {
    AnswerKind.NATURAL: (
        'Explain the most natural, authentic ways to use the word "{term}" in casual conversation. '
        "Give a couple of quick examples."
    ),
    AnswerKind.MISTAKE: (
        'What are the most common mistakes learners make when using or pronouncing "{term}"? '
        "How can they avoid them?"
    ),
    AnswerKind.FUNFACT: (
        'Tell me a fun fact, etymology, or a "tricky" mnemonic way to memorize "{term}".'
    ),
}


def build_quick_answer_prompt(term: str, kind: AnswerKind, native_lang: str, target_lang: str) -> str:
    """Build prompt for a quick tutor answer about a word"""
    try:
        request = _QUICK_ANSWER_REQUESTS[AnswerKind(kind)].format(term=term)
    except (KeyError, ValueError):
        raise ValueError(f"No quick answer prompt for kind: {kind}")

    return f"""You are a fun, energetic language tutor.
The user is asking about the word "{term}" (which is in {target_lang}).
Answer this request for a {native_lang} speaker: "{request}"

CRITICAL INSTRUCTIONS:
1. Keep the answer VERY SHORT (1-4 sentences maximum).
2. Be simple and beginner-friendly.
3. Use casual language and emojis."""
