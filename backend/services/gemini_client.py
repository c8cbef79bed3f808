"""Google Gemini API wrapper with error handling.

The client is always passed in by the caller; nothing here holds a shared
handle, so extraction stays testable with a stub client.
"""

import json
import logging

from google import genai
from google.genai import types

logger = logging.getLogger(__name__)


def is_ai_available(api_key: str | None) -> bool:
    """True when Gemini credentials are configured."""
    return bool(api_key and api_key.strip())


def create_client(api_key: str | None) -> genai.Client | None:
    if not is_ai_available(api_key):
        logger.warning("No GEMINI_API_KEY set - Gemini features disabled")
        return None
    return genai.Client(api_key=api_key)


async def generate_text(
    client: genai.Client | None,
    prompt: str,
    model: str,
    json_output: bool = True,
) -> str | None:
    """Send a prompt to Gemini and return the raw reply text.

    Returns None when the client is missing, the reply is empty, or the
    call fails for any reason.
    """
    if client is None:
        return None

    config = types.GenerateContentConfig(
        temperature=0.2,
        max_output_tokens=2048,
        response_mime_type="application/json" if json_output else None,
    )
    try:
        response = await client.aio.models.generate_content(
            model=model,
            contents=prompt,
            config=config,
        )
        text = response.text
    except Exception as e:
        logger.error("Gemini API error: %s", e)
        return None

    if not text or not text.strip():
        logger.warning("Gemini returned an empty response")
        return None
    return text.strip()


def extract_json_object(text: str) -> dict | None:
    """Parse the first balanced JSON object embedded in text.

    Handles replies wrapped in markdown fences or surrounded by prose.
    Braces inside string literals are ignored while scanning.
    """
    start = text.find("{")
    while start != -1:
        depth = 0
        in_string = False
        escaped = False
        for i in range(start, len(text)):
            ch = text[i]
            if in_string:
                if escaped:
                    escaped = False
                elif ch == "\\":
                    escaped = True
                elif ch == '"':
                    in_string = False
                continue
            if ch == '"':
                in_string = True
            elif ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    try:
                        parsed = json.loads(text[start:i + 1])
                    except json.JSONDecodeError as e:
                        logger.warning("Discarding malformed JSON object: %s", e)
                        break
                    return parsed if isinstance(parsed, dict) else None
        # Unbalanced or malformed: try the next opening brace
        start = text.find("{", start + 1)
    return None


async def generate_json(client: genai.Client | None, prompt: str, model: str) -> dict | None:
    """Send a prompt to Gemini and parse the JSON object in the reply."""
    text = await generate_text(client, prompt, model)
    if text is None:
        return None

    parsed = extract_json_object(text)
    if parsed is None:
        logger.error("No JSON object found in Gemini response")
    return parsed
