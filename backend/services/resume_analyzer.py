"""Orchestrator: hybrid resume analysis pipeline.

Pipeline:
1. Fast rule-based extraction (always runs, never fails)
2. Gemini extraction (optional, bounded by a timeout)
3. Merge fast + AI results into the final skill profile

The AI stage is an overlay: if it is disabled, slow, or broken the fast
profile is returned unchanged.
"""

import asyncio
import logging

from google import genai

from config import settings
from models.schemas.skill_profile import SkillProfile
from services.ai_extractor import analyze_resume_with_ai
from services.result_merger import merge_analysis_results
from services.skill_extractor import extract_skills_fast

logger = logging.getLogger(__name__)


async def analyze_resume(
    resume_text: str,
    client: genai.Client | None = None,
    enhance: bool = False,
) -> SkillProfile:
    """Run the hybrid extraction pipeline on plain resume text."""
    fast_result = extract_skills_fast(resume_text)

    if not enhance:
        return fast_result
    if client is None:
        logger.info("AI enhancement requested but Gemini is not configured")
        return fast_result

    try:
        ai_result = await asyncio.wait_for(
            analyze_resume_with_ai(
                resume_text,
                client,
                model=settings.gemini_model,
                max_chars=settings.ai_max_input_chars,
                confidence=settings.ai_confidence,
            ),
            timeout=settings.ai_timeout_seconds,
        )
    except asyncio.TimeoutError:
        logger.warning(
            "AI enhancement timed out after %.1fs, using fast result",
            settings.ai_timeout_seconds,
        )
        return fast_result

    if ai_result.is_empty():
        logger.warning("AI enhancement unavailable, using fast result")
        return fast_result

    return merge_analysis_results(fast_result, ai_result)
