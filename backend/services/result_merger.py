"""Combine rule-based and AI extraction results."""

from models.schemas.skill_profile import PartialSkillProfile, SkillProfile


def merge_analysis_results(
    fast_result: SkillProfile,
    ai_result: PartialSkillProfile | None,
) -> SkillProfile:
    """Union the fast profile with an AI partial.

    The fast profile is the deterministic baseline, so AI confidence only
    counts for half. An empty or missing partial returns fast_result as is.
    """
    if ai_result is None or ai_result.is_empty():
        return fast_result

    ai_confidence = ai_result.confidence or 0
    return SkillProfile(
        languages=fast_result.languages | ai_result.languages,
        technologies=fast_result.technologies | ai_result.technologies,
        interests=fast_result.interests | ai_result.interests,
        experience_level=ai_result.experience_level or fast_result.experience_level,
        confidence=min(100, fast_result.confidence + ai_confidence // 2),
        provenance="hybrid",
    )
