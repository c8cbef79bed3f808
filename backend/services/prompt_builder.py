"""All prompt templates for Gemini API calls."""

from services.vocabulary import INTEREST_KEYWORDS

# Max entries requested per array in the extraction reply
MAX_ITEMS_PER_FIELD = 15


def build_extraction_prompt(resume_text: str) -> str:
    """Resume -> structured skill profile.

    The caller truncates resume_text before building the prompt.
    """
    interests = ", ".join(INTEREST_KEYWORDS)

    return f"""You are an expert technical recruiter reading a developer's resume.

Extract the candidate's skills so they can be matched with open-source issues.

RULES:
- Only include skills and technologies explicitly mentioned in the resume
- "skills" holds programming languages only (e.g. Python, TypeScript, Go)
- "technologies" holds frameworks, libraries, tools, cloud platforms and databases
- "interests" must only use values from: {interests}
- experienceLevel: beginner = 0-1 years or student, intermediate = 2-5 years,
  advanced = 5+ years or senior titles
- Keep every array to at most {MAX_ITEMS_PER_FIELD} items
- Be strict: only extract what is clearly stated

RESUME:
---
{resume_text}
---

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "skills": [<programming languages>],
  "technologies": [<frameworks, tools, platforms, databases>],
  "interests": [<values from the allowed list>],
  "experienceLevel": "<beginner | intermediate | advanced>",
  "summary": "<one sentence about the candidate's focus area>"
}}"""


def build_issue_suggestion_prompt(
    title: str,
    body: str | None,
    labels: list[str],
    repo: str,
) -> str:
    """GitHub issue -> short plan for fixing it."""
    description = (body or "").strip()[:2000] or "No description provided"
    labels_text = ", ".join(labels) if labels else "None"

    return f"""You are an expert open source contributor assistant.

Given a GitHub issue, provide a structured suggestion on how to fix it.
Keep steps concise and actionable (max 5 steps). Skills should be technologies
or concepts needed. Base difficulty on issue complexity. Be practical.

GITHUB ISSUE:
Repository: {repo or "unknown"}
Title: {title}
Labels: {labels_text}
Description: {description}

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "summary": "<1-2 sentence summary of what needs to be done>",
  "steps": [<step descriptions>],
  "skills": [<technologies or concepts>],
  "difficulty": "<easy | medium | hard>",
  "timeEstimate": "<e.g. 1-2 hours, 1 day>"
}}"""
