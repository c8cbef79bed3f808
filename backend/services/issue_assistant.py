"""AI suggestions on how to tackle a GitHub issue.

Falls back to a generic contribution checklist when Gemini is not
configured or its reply is unusable.
"""

import logging

from google import genai

from models.schemas.issue_suggestion import IssueSuggestion
from services import gemini_client, prompt_builder

logger = logging.getLogger(__name__)

MAX_STEPS = 5
MAX_SKILLS = 5
DIFFICULTIES = ("easy", "medium", "hard")


def fallback_suggestion(labels: list[str] | None = None) -> IssueSuggestion:
    """Generic checklist used when no model output is available."""
    return IssueSuggestion(
        summary=(
            "This issue needs further investigation. Check the description "
            "and repository documentation for context."
        ),
        steps=[
            "Fork the repository and clone it locally",
            "Read the contributing guidelines",
            "Identify the relevant files and code sections",
            "Implement the fix or feature",
            "Write tests and submit a well-documented pull request",
        ],
        skills=(labels or [])[:3] or ["Open Source", "Git"],
        difficulty="medium",
        time_estimate="2-4 hours",
        generated=False,
    )


def _string_list(value, limit: int) -> list[str]:
    if not isinstance(value, list):
        return []
    return [v.strip() for v in value if isinstance(v, str) and v.strip()][:limit]


def parse_suggestion_reply(data: dict, labels: list[str] | None = None) -> IssueSuggestion:
    """Validate a decoded reply, filling gaps from the fallback."""
    fallback = fallback_suggestion(labels)
    summary = data.get("summary")
    difficulty = data.get("difficulty")
    time_estimate = data.get("timeEstimate")

    return IssueSuggestion(
        summary=summary.strip() if isinstance(summary, str) and summary.strip() else fallback.summary,
        steps=_string_list(data.get("steps"), MAX_STEPS) or fallback.steps,
        skills=_string_list(data.get("skills"), MAX_SKILLS) or fallback.skills,
        difficulty=difficulty if difficulty in DIFFICULTIES else "medium",
        time_estimate=time_estimate if isinstance(time_estimate, str) and time_estimate else "Varies",
        generated=True,
    )


async def suggest_fix(
    title: str,
    client: genai.Client | None,
    *,
    model: str,
    body: str | None = None,
    labels: list[str] | None = None,
    repo: str = "",
) -> IssueSuggestion:
    """Ask Gemini for a short plan to resolve an issue."""
    if client is None:
        return fallback_suggestion(labels)

    try:
        prompt = prompt_builder.build_issue_suggestion_prompt(title, body, labels or [], repo)
        data = await gemini_client.generate_json(client, prompt, model)
    except Exception as e:
        logger.error("Issue suggestion failed: %s", e)
        return fallback_suggestion(labels)

    if data is None:
        return fallback_suggestion(labels)
    return parse_suggestion_reply(data, labels)
