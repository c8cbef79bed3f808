from pydantic import BaseModel, Field

from config import settings
from models.schemas.candidate import CandidateItem, RepositoryCandidate
from models.schemas.skill_profile import SkillProfile


class ResumeAnalyzeRequest(BaseModel):
    resume_text: str = Field(
        ..., max_length=settings.max_resume_chars, description="Plain text resume content"
    )
    enhance: bool = Field(False, description="Run the optional Gemini enhancement stage")


class IssueRecommendationRequest(BaseModel):
    profile: SkillProfile
    candidates: list[CandidateItem] = Field(default=[], max_length=500)
    limit: int = Field(settings.recommendation_limit, ge=1, le=100)


class RepositoryRecommendationRequest(BaseModel):
    profile: SkillProfile
    candidates: list[RepositoryCandidate] = Field(default=[], max_length=500)
    limit: int = Field(settings.recommendation_limit, ge=1, le=100)


class IssueSuggestionRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=500)
    body: str | None = Field(None, max_length=20000)
    labels: list[str] = []
    repo: str = ""
