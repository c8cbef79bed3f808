from pydantic import BaseModel

from models.schemas.skill_profile import SkillProfile
from models.schemas.candidate import ScoredIssue, ScoredRepository


class ResumeAnalysisResponse(BaseModel):
    success: bool = True
    analysis: SkillProfile
    ai_available: bool = False
    text_length: int = 0


class IssueRecommendationResponse(BaseModel):
    items: list[ScoredIssue] = []
    total_count: int = 0
    message: str = ""


class RepositoryRecommendationResponse(BaseModel):
    items: list[ScoredRepository] = []
    total_count: int = 0
    message: str = ""
