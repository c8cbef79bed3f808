"""Skill profile extracted from resume text."""

from typing import Literal

from pydantic import BaseModel, Field

ExperienceLevel = Literal["beginner", "intermediate", "advanced"]
Provenance = Literal["fast", "ai", "hybrid"]

EXPERIENCE_LEVELS: tuple[str, ...] = ("beginner", "intermediate", "advanced")


class SkillProfile(BaseModel):
    """Structured output of resume analysis.

    The three containers are sets of canonical display strings
    ("JavaScript", "PostgreSQL"); they serialize as JSON arrays.
    """
    languages: set[str] = set()
    technologies: set[str] = set()
    interests: set[str] = set()
    experience_level: ExperienceLevel = "beginner"
    confidence: int = Field(default=0, ge=0, le=100)
    provenance: Provenance = "fast"


class PartialSkillProfile(BaseModel):
    """AI extraction output. Every field may be missing."""
    languages: set[str] = set()
    technologies: set[str] = set()
    interests: set[str] = set()
    experience_level: ExperienceLevel | None = None
    confidence: int | None = Field(default=None, ge=0, le=100)

    def is_empty(self) -> bool:
        return not (
            self.languages
            or self.technologies
            or self.interests
            or self.experience_level
        )
