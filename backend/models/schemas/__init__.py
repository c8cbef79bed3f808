"""Pydantic contracts shared by the extraction and scoring services."""

from models.schemas.candidate import (
    CandidateItem,
    RepositoryCandidate,
    ScoredIssue,
    ScoredRepository,
)
from models.schemas.issue_suggestion import IssueSuggestion
from models.schemas.match_result import MatchResult
from models.schemas.skill_profile import PartialSkillProfile, SkillProfile

__all__ = [
    "CandidateItem",
    "RepositoryCandidate",
    "ScoredIssue",
    "ScoredRepository",
    "IssueSuggestion",
    "MatchResult",
    "PartialSkillProfile",
    "SkillProfile",
]
