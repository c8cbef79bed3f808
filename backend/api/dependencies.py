"""Shared dependencies for API routes."""

from google import genai

from config import settings
from services.gemini_client import create_client

_client: genai.Client | None = None


def get_gemini_client() -> genai.Client | None:
    """Gemini client for the configured API key, built on first use."""
    global _client
    if _client is None and settings.gemini_api_key:
        _client = create_client(settings.gemini_api_key)
    return _client
