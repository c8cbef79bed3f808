"""Optional AI enhancement of resume skill extraction.

One Gemini request per resume. The reply is treated as untrusted input:
every field is coerced to its expected type and anything malformed is
dropped. Failures of any kind yield an empty PartialSkillProfile; this
module never raises to its caller.
"""

import logging
from typing import Any

from google import genai

from models.schemas.skill_profile import EXPERIENCE_LEVELS, PartialSkillProfile
from services import gemini_client, prompt_builder
from services.vocabulary import INTERESTS, is_known_language, is_known_technology, resolve_token

logger = logging.getLogger(__name__)

DEFAULT_MAX_CHARS = 8000
DEFAULT_AI_CONFIDENCE = 85


def _coerce_tokens(value: Any, limit: int = prompt_builder.MAX_ITEMS_PER_FIELD) -> set[str]:
    """Turn a reply field into a set of canonical tokens, dropping junk."""
    if not isinstance(value, list):
        return set()
    tokens: set[str] = set()
    for item in value[:limit]:
        if not isinstance(item, str) or not item.strip():
            continue
        tokens.add(resolve_token(item))
    return tokens


def _coerce_interests(value: Any) -> set[str]:
    if not isinstance(value, list):
        return set()
    normalized = {
        item.strip().lower().replace(" ", "-")
        for item in value
        if isinstance(item, str)
    }
    return normalized & INTERESTS


def _coerce_experience_level(value: Any) -> str | None:
    if isinstance(value, str) and value.strip().lower() in EXPERIENCE_LEVELS:
        return value.strip().lower()
    return None


def parse_extraction_reply(data: dict, confidence: int = DEFAULT_AI_CONFIDENCE) -> PartialSkillProfile:
    """Coerce a decoded reply into a partial profile.

    Only recognized programming languages are kept from "skills"; known
    frameworks and tools listed there move to technologies, anything else
    is dropped.
    """
    skills = _coerce_tokens(data.get("skills"))
    partial = PartialSkillProfile(
        languages={token for token in skills if is_known_language(token)},
        technologies=_coerce_tokens(data.get("technologies"))
        | {token for token in skills if is_known_technology(token)},
        interests=_coerce_interests(data.get("interests")),
        experience_level=_coerce_experience_level(data.get("experienceLevel")),
    )
    if partial.is_empty():
        return partial
    partial.confidence = confidence
    return partial


async def analyze_resume_with_ai(
    resume_text: str,
    client: genai.Client | None,
    *,
    model: str,
    max_chars: int = DEFAULT_MAX_CHARS,
    confidence: int = DEFAULT_AI_CONFIDENCE,
) -> PartialSkillProfile:
    """Extract a partial skill profile with Gemini.

    Returns an empty PartialSkillProfile when the client is missing, the
    service fails, or the reply cannot be understood.
    """
    if client is None:
        logger.warning("Gemini client not configured, skipping AI analysis")
        return PartialSkillProfile()

    try:
        prompt = prompt_builder.build_extraction_prompt(resume_text[:max_chars])
        data = await gemini_client.generate_json(client, prompt, model)
        if data is None:
            return PartialSkillProfile()
        partial = parse_extraction_reply(data, confidence=confidence)
    except Exception as e:
        logger.error("AI resume analysis failed: %s", e)
        return PartialSkillProfile()

    logger.info(
        "AI extraction: %d languages, %d technologies, %d interests, level=%s",
        len(partial.languages), len(partial.technologies),
        len(partial.interests), partial.experience_level,
    )
    return partial
