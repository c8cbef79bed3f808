"""Match scorer output."""

from pydantic import BaseModel, Field


class MatchResult(BaseModel):
    """Relevance of one candidate to one skill profile.

    reasons are ordered by the rule that produced them
    (language, experience, technology, interest) and hold at most 3 entries.
    """
    score: int = Field(default=0, ge=0, le=100)
    reasons: list[str] = Field(default=[], max_length=3)
