"""Batch scoring and ranking of candidates for a skill profile.

Each candidate is scored independently; ranking is a stable sort by score,
so equal scores keep the order the caller supplied.
"""

import logging
from datetime import datetime, timezone

from models.schemas.candidate import (
    CandidateItem,
    RepositoryCandidate,
    ScoredIssue,
    ScoredRepository,
)
from models.schemas.skill_profile import SkillProfile
from services.match_scorer import score_issue, score_repository

logger = logging.getLogger(__name__)


def _dedupe(items: list) -> list:
    """Drop repeated candidates (same id) keeping the first occurrence."""
    seen: set = set()
    unique = []
    for item in items:
        if item.id is not None:
            if item.id in seen:
                continue
            seen.add(item.id)
        unique.append(item)
    return unique


def rank_issues(
    profile: SkillProfile,
    items: list[CandidateItem],
    limit: int | None = None,
) -> list[ScoredIssue]:
    """Score issues and return them best first."""
    scored = []
    for item in _dedupe(items):
        result = score_issue(profile, item)
        scored.append(ScoredIssue(
            **item.model_dump(),
            match_score=result.score,
            match_reasons=result.reasons,
        ))

    scored.sort(key=lambda s: s.match_score, reverse=True)
    logger.debug("Ranked %d issues", len(scored))
    return scored[:limit] if limit is not None else scored


def rank_repositories(
    profile: SkillProfile,
    repos: list[RepositoryCandidate],
    limit: int | None = None,
    now: datetime | None = None,
) -> list[ScoredRepository]:
    """Score repositories and return them best first."""
    now = now or datetime.now(timezone.utc)
    scored = []
    for repo in _dedupe(repos):
        result = score_repository(profile, repo, now=now)
        scored.append(ScoredRepository(
            **repo.model_dump(),
            match_score=result.score,
            match_reasons=result.reasons,
        ))

    scored.sort(key=lambda s: s.match_score, reverse=True)
    logger.debug("Ranked %d repositories", len(scored))
    return scored[:limit] if limit is not None else scored
