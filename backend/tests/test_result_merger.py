"""Tests for merging fast and AI extraction results."""

from models.schemas.skill_profile import PartialSkillProfile, SkillProfile
from services.result_merger import merge_analysis_results


def _fast(**overrides) -> SkillProfile:
    data = dict(
        languages={"Python", "Go"},
        technologies={"Docker"},
        interests={"web"},
        experience_level="intermediate",
        confidence=40,
        provenance="fast",
    )
    data.update(overrides)
    return SkillProfile(**data)


class TestIdentity:
    def test_none_partial_returns_fast(self):
        fast = _fast()
        assert merge_analysis_results(fast, None) == fast

    def test_empty_partial_returns_fast(self):
        fast = _fast()
        merged = merge_analysis_results(fast, PartialSkillProfile())
        assert merged == fast
        assert merged.provenance == "fast"

    def test_empty_partial_with_confidence_is_still_empty(self):
        fast = _fast()
        merged = merge_analysis_results(fast, PartialSkillProfile(confidence=85))
        assert merged.confidence == 40


class TestUnion:
    def test_sets_are_unioned(self):
        fast = _fast()
        ai = PartialSkillProfile(
            languages={"Python", "Rust"},
            technologies={"React"},
            interests={"devops"},
            confidence=85,
        )
        merged = merge_analysis_results(fast, ai)

        assert merged.languages == {"Python", "Go", "Rust"}
        assert merged.technologies == {"Docker", "React"}
        assert merged.interests == {"web", "devops"}
        assert merged.provenance == "hybrid"

    def test_union_cardinality(self):
        fast = _fast()
        ai = PartialSkillProfile(languages={"Python", "Go", "Java"}, confidence=85)
        merged = merge_analysis_results(fast, ai)
        assert len(merged.languages) == len(fast.languages | ai.languages) == 3


class TestConfidence:
    def test_half_of_ai_confidence_added(self):
        merged = merge_analysis_results(
            _fast(confidence=40),
            PartialSkillProfile(languages={"Rust"}, confidence=85),
        )
        assert merged.confidence == 82

    def test_capped_at_100(self):
        merged = merge_analysis_results(
            _fast(confidence=90),
            PartialSkillProfile(languages={"Rust"}, confidence=85),
        )
        assert merged.confidence == 100

    def test_missing_ai_confidence_counts_as_zero(self):
        merged = merge_analysis_results(
            _fast(confidence=40),
            PartialSkillProfile(languages={"Rust"}),
        )
        assert merged.confidence == 40


class TestExperienceLevel:
    def test_ai_level_wins(self):
        merged = merge_analysis_results(
            _fast(experience_level="beginner"),
            PartialSkillProfile(experience_level="advanced", confidence=85),
        )
        assert merged.experience_level == "advanced"
        assert merged.provenance == "hybrid"

    def test_fast_level_kept_when_ai_silent(self):
        merged = merge_analysis_results(
            _fast(experience_level="intermediate"),
            PartialSkillProfile(technologies={"Kubernetes"}, confidence=85),
        )
        assert merged.experience_level == "intermediate"

    def test_level_only_partial_keeps_fast_sets(self):
        fast = _fast()
        merged = merge_analysis_results(
            fast, PartialSkillProfile(experience_level="beginner", confidence=85)
        )
        assert merged.languages == fast.languages
        assert merged.technologies == fast.technologies
        assert merged.interests == fast.interests
