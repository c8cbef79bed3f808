"""AI suggestion on how to approach an issue."""

from typing import Literal

from pydantic import BaseModel

Difficulty = Literal["easy", "medium", "hard"]


class IssueSuggestion(BaseModel):
    summary: str = ""
    steps: list[str] = []
    skills: list[str] = []
    difficulty: Difficulty = "medium"
    time_estimate: str = ""
    generated: bool = False  # False when the fallback template was used
