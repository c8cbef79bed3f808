"""Tests for batch ranking of issues and repositories."""

from datetime import datetime, timedelta, timezone

from models.schemas.candidate import CandidateItem, RepositoryCandidate
from models.schemas.skill_profile import SkillProfile
from services.recommender import rank_issues, rank_repositories

PROFILE = SkillProfile(
    languages={"Python"},
    technologies={"Django"},
    experience_level="beginner",
)


def _issues() -> list[CandidateItem]:
    return [
        CandidateItem(id=1, title="Fix Rust macro", language="Rust"),
        CandidateItem(id=2, title="Django admin crash", labels=["good first issue"], language="Python"),
        CandidateItem(id=3, title="Update docs", language="Python"),
        CandidateItem(id=4, title="Another Rust thing", language="Rust"),
    ]


class TestRankIssues:
    def test_sorted_by_score(self):
        ranked = rank_issues(PROFILE, _issues())
        scores = [item.match_score for item in ranked]

        assert scores == sorted(scores, reverse=True)
        assert ranked[0].id == 2
        assert ranked[0].match_score == 72
        assert ranked[0].match_reasons == [
            "Matches your Python skills",
            "Perfect for beginners",
            "Uses Django",
        ]

    def test_ties_keep_input_order(self):
        ranked = rank_issues(PROFILE, _issues())
        zero_ids = [item.id for item in ranked if item.match_score == 0]
        assert zero_ids == [1, 4]

    def test_duplicates_dropped(self):
        items = _issues() + [CandidateItem(id=2, title="duplicate", language="Go")]
        ranked = rank_issues(PROFILE, items)

        assert len(ranked) == 4
        assert [item.title for item in ranked if item.id == 2] == ["Django admin crash"]

    def test_items_without_id_are_kept(self):
        items = [CandidateItem(title="a"), CandidateItem(title="b")]
        assert len(rank_issues(PROFILE, items)) == 2

    def test_limit(self):
        ranked = rank_issues(PROFILE, _issues(), limit=2)
        assert [item.id for item in ranked] == [2, 3]

    def test_candidate_fields_preserved(self):
        item = CandidateItem(
            id=9, url="https://github.com/acme/app/issues/9",
            repository="acme/app", title="Python bug", language="Python",
        )
        ranked = rank_issues(PROFILE, [item])
        assert ranked[0].url == item.url
        assert ranked[0].repository == "acme/app"

    def test_empty(self):
        assert rank_issues(PROFILE, []) == []


class TestRankRepositories:
    def test_sorted_with_explicit_now(self):
        now = datetime(2025, 6, 1, tzinfo=timezone.utc)
        repos = [
            RepositoryCandidate(id="a", full_name="acme/old", language="Java",
                                updated_at=now - timedelta(days=500)),
            RepositoryCandidate(id="b", full_name="acme/web", language="Python",
                                topics=["django"], open_issues_count=3,
                                updated_at=now - timedelta(days=1)),
        ]
        ranked = rank_repositories(PROFILE, repos, now=now)

        assert [repo.full_name for repo in ranked] == ["acme/web", "acme/old"]
        assert ranked[0].match_score == 70
        assert ranked[1].match_score == 0

    def test_default_now(self):
        repo = RepositoryCandidate(
            id=1, full_name="acme/fresh", updated_at=datetime.now(timezone.utc),
        )
        ranked = rank_repositories(PROFILE, [repo])
        assert ranked[0].match_reasons == ["Recently active"]
