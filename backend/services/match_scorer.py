"""Deterministic match scoring of issues and repositories.

All scoring functions are pure: the same (profile, candidate) pair always
produces the same score and reasons. No AI is used in this module.

Issue rules, applied in order (points are tunable constants below):
1. Primary language      LANGUAGE_WEIGHT
2. Experience alignment  EXPERIENCE_WEIGHT / EXPERIENCE_ADJACENT_WEIGHT / ADVANCED_BASELINE_WEIGHT
3. Technology mentions   TECHNOLOGY_POINTS_PER_MATCH each, up to TECHNOLOGY_WEIGHT_CAP
4. Interest keywords     INTEREST_WEIGHT
"""

from datetime import datetime

from models.schemas.candidate import CandidateItem, RepositoryCandidate
from models.schemas.match_result import MatchResult
from models.schemas.skill_profile import EXPERIENCE_LEVELS, SkillProfile
from services.vocabulary import INTEREST_KEYWORDS, compile_token

MAX_SCORE = 100
MAX_REASONS = 3

# Issue scoring weights (sum of rule maxima == MAX_SCORE)
LANGUAGE_WEIGHT = 35
EXPERIENCE_WEIGHT = 25
EXPERIENCE_ADJACENT_WEIGHT = 15
ADVANCED_BASELINE_WEIGHT = 15
TECHNOLOGY_POINTS_PER_MATCH = 12
TECHNOLOGY_WEIGHT_CAP = 25
INTEREST_WEIGHT = 15

# Repository scoring weights
REPO_LANGUAGE_WEIGHT = 30
REPO_TOPIC_POINTS_PER_MATCH = 10
REPO_TOPIC_WEIGHT_CAP = 40
REPO_OPEN_ISSUES_WEIGHT = 10
# (max days since last update, points), checked in order
REPO_ACTIVITY_STEPS: tuple[tuple[int, int], ...] = ((7, 20), (30, 15), (90, 10), (180, 5))

# Label keywords per difficulty bucket, matched as substrings of lower-cased labels
EXPERIENCE_LABELS: dict[str, tuple[str, ...]] = {
    "beginner": (
        "good first issue", "good-first-issue", "beginner", "easy",
        "first-timers-only", "starter",
    ),
    "intermediate": ("help wanted", "help-wanted", "medium", "intermediate"),
    "advanced": ("advanced", "complex", "expert"),
}

EXPERIENCE_REASONS: dict[str, str] = {
    "beginner": "Perfect for beginners",
    "intermediate": "Matches your experience level",
    "advanced": "Challenging issue for senior devs",
}
ADJACENT_REASON = "Close to your experience level"


def classify_labels(labels: list[str]) -> set[str]:
    """Difficulty buckets signalled by an issue's labels."""
    lowered = [label.lower() for label in labels]
    buckets: set[str] = set()
    for bucket, keywords in EXPERIENCE_LABELS.items():
        if any(keyword in label for label in lowered for keyword in keywords):
            buckets.add(bucket)
    return buckets


def _language_points(profile: SkillProfile, language: str | None) -> tuple[int, str | None]:
    if not language:
        return 0, None
    target = language.strip().lower()
    if any(lang.lower() == target for lang in profile.languages):
        return LANGUAGE_WEIGHT, f"Matches your {language.strip()} skills"
    return 0, None


def _experience_points(profile: SkillProfile, labels: list[str]) -> tuple[int, str | None]:
    buckets = classify_labels(labels)
    level = profile.experience_level

    if level in buckets:
        return EXPERIENCE_WEIGHT, EXPERIENCE_REASONS[level]

    if level == "advanced":
        # Advanced contributors can take on anything; no reason for the baseline
        return ADVANCED_BASELINE_WEIGHT, None

    rank = EXPERIENCE_LEVELS.index(level)
    if any(abs(EXPERIENCE_LEVELS.index(b) - rank) == 1 for b in buckets):
        return EXPERIENCE_ADJACENT_WEIGHT, ADJACENT_REASON
    return 0, None


def _technology_points(profile: SkillProfile, text: str) -> tuple[int, str | None]:
    matches = [
        tech for tech in sorted(profile.technologies)
        if tech.strip() and compile_token(tech.strip()).search(text)
    ]
    if not matches:
        return 0, None
    points = min(len(matches) * TECHNOLOGY_POINTS_PER_MATCH, TECHNOLOGY_WEIGHT_CAP)
    return points, f"Uses {matches[0]}"


def _interest_points(profile: SkillProfile, text: str) -> tuple[int, str | None]:
    for interest in sorted(profile.interests):
        keywords = INTEREST_KEYWORDS.get(interest, (interest,))
        if any(keyword in text for keyword in keywords):
            return INTEREST_WEIGHT, f"Related to your interest in {interest}"
    return 0, None


def score_issue(profile: SkillProfile, item: CandidateItem) -> MatchResult:
    """Score an issue against a skill profile.

    Missing candidate fields simply zero out the rules that need them.
    """
    text = item.search_text

    score = 0
    reasons: list[str] = []
    for points, reason in (
        _language_points(profile, item.language),
        _experience_points(profile, item.labels),
        _technology_points(profile, text),
        _interest_points(profile, text),
    ):
        score += points
        if points > 0 and reason:
            reasons.append(reason)

    return MatchResult(
        score=max(0, min(MAX_SCORE, score)),
        reasons=reasons[:MAX_REASONS],
    )


def _activity_points(updated_at: datetime | None, now: datetime) -> int:
    if updated_at is None:
        return 0
    # Compare naive and aware timestamps on the same footing
    if (updated_at.tzinfo is None) != (now.tzinfo is None):
        updated_at = updated_at.replace(tzinfo=now.tzinfo)
    days = (now - updated_at).days
    for max_days, points in REPO_ACTIVITY_STEPS:
        if days < max_days:
            return points
    return 0


def score_repository(
    profile: SkillProfile,
    repo: RepositoryCandidate,
    *,
    now: datetime,
) -> MatchResult:
    """Score a repository as a place to contribute.

    Language match, topic overlap with the profile's interests and
    technologies, recent activity relative to `now`, and open issues.
    """
    score = 0
    reasons: list[str] = []

    if repo.language and any(
        lang.lower() == repo.language.lower() for lang in profile.languages
    ):
        score += REPO_LANGUAGE_WEIGHT
        reasons.append(f"Matches your {repo.language} skills")

    wanted = {term.lower() for term in profile.interests | profile.technologies if term}
    topic_matches = [
        topic for topic in repo.topics
        if topic and any(topic.lower() in term or term in topic.lower() for term in wanted)
    ]
    if topic_matches:
        score += min(len(topic_matches) * REPO_TOPIC_POINTS_PER_MATCH, REPO_TOPIC_WEIGHT_CAP)
        reasons.append(f"Topics: {', '.join(topic_matches[:2])}")

    activity = _activity_points(repo.updated_at, now)
    if activity:
        score += activity
        reasons.append("Recently active")

    if repo.open_issues_count > 0:
        score += REPO_OPEN_ISSUES_WEIGHT

    return MatchResult(
        score=max(0, min(MAX_SCORE, score)),
        reasons=reasons[:MAX_REASONS],
    )
