"""Candidate issues and repositories scored against a skill profile.

Shapes follow the GitHub search API loosely; unknown keys are ignored so
raw API items can be passed straight through.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class CandidateItem(BaseModel):
    """An open issue being evaluated for a contributor."""
    model_config = ConfigDict(extra="ignore")

    id: int | str | None = None
    url: str = ""
    repository: str = ""
    title: str = ""
    labels: list[str] = []
    language: str | None = None
    body: str | None = None
    comments: int = 0
    reactions: int = 0

    @field_validator("labels", mode="before")
    @classmethod
    def _label_names(cls, value: Any) -> list[str]:
        # GitHub returns label objects; plain strings are accepted too
        if not value:
            return []
        names = []
        for label in value:
            if isinstance(label, dict):
                label = label.get("name")
            if isinstance(label, str) and label.strip():
                names.append(label.strip())
        return names

    @field_validator("title", mode="before")
    @classmethod
    def _none_title(cls, value: Any) -> Any:
        return value if value is not None else ""

    @property
    def search_text(self) -> str:
        """Lower-cased title plus labels, the text the scorer inspects."""
        return (self.title + " " + " ".join(self.labels)).lower()


class RepositoryCandidate(BaseModel):
    """A repository being evaluated as a place to contribute."""
    model_config = ConfigDict(extra="ignore")

    id: int | str | None = None
    full_name: str = ""
    description: str | None = None
    html_url: str = ""
    language: str | None = None
    topics: list[str] = []
    stargazers_count: int = 0
    open_issues_count: int = 0
    updated_at: datetime | None = None


class ScoredIssue(CandidateItem):
    match_score: int = 0
    match_reasons: list[str] = []


class ScoredRepository(RepositoryCandidate):
    match_score: int = 0
    match_reasons: list[str] = []
