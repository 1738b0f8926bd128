"""Shared fixtures: a Gemini client double and canned replies."""

import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from app.services import GeminiService


def make_response(text=None, inline_data=None):
    """Build an object shaped like a google-genai GenerateContentResponse."""
    parts = []
    if text is not None:
        parts.append(SimpleNamespace(text=text, inline_data=None))
    if inline_data is not None:
        parts.append(SimpleNamespace(
            text=None,
            inline_data=SimpleNamespace(data=inline_data, mime_type="application/octet-stream"),
        ))
    candidate = SimpleNamespace(content=SimpleNamespace(parts=parts))
    return SimpleNamespace(text=text, candidates=[candidate])


@pytest.fixture
def mock_client():
    """Gemini client whose async generate_content is an AsyncMock."""
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock()
    return client


@pytest.fixture
def service(mock_client):
    """GeminiService wired to the mock client."""
    return GeminiService(client=mock_client)


@pytest.fixture
def definition_json():
    return json.dumps({
        "definition": "To move quickly on foot.",
        "examples": [
            {"target": "Corro cada mañana.", "native": "I run every morning."},
            {"target": "Ella corre muy rápido.", "native": "She runs very fast."},
        ],
        "usageNote": "Super common! Use it for jogging and for rushing around.",
    })
