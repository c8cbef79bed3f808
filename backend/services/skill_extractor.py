"""Rule-based skill extraction from resume text.

Combines:
1. Vocabulary scan for languages and technologies (word-boundary regex)
2. Substring keyword scan for coarse interest categories
3. Regex indicators for experience level (highest severity wins)

Runs in a few milliseconds and never raises: garbage in, empty profile out.
"""

import logging
import re

from models.schemas.skill_profile import EXPERIENCE_LEVELS, SkillProfile
from services.vocabulary import (
    INTEREST_KEYWORDS,
    LANGUAGE_PATTERNS,
    TECHNOLOGY_PATTERNS,
    canonicalize,
)

logger = logging.getLogger(__name__)

# Number of distinct findings that counts as a complete extraction
CONFIDENCE_SATURATION = 15

# ---------------------------------------------------------------------------
# Experience indicators, grouped by severity (1=beginner .. 3=advanced)
# ---------------------------------------------------------------------------
EXPERIENCE_INDICATORS: dict[str, list[re.Pattern]] = {
    "beginner": [
        re.compile(r"\b(?:0-1|1)\s*years?\s*(?:of)?\s*experience", re.IGNORECASE),
        re.compile(r"\bjunior\b", re.IGNORECASE),
        re.compile(r"\bentry\s*level\b", re.IGNORECASE),
        re.compile(r"\bfreshers?\b", re.IGNORECASE),
        re.compile(r"\bintern\b", re.IGNORECASE),
        re.compile(r"\bstudent\b", re.IGNORECASE),
        re.compile(r"\blearning\b", re.IGNORECASE),
        re.compile(r"\bnew\s*grad(?:uate)?\b", re.IGNORECASE),
    ],
    "intermediate": [
        re.compile(r"\b(?:2|3|4|5)\s*\+?\s*years?\s*(?:of)?\s*experience", re.IGNORECASE),
        re.compile(r"\bmid[\s-]?level\b", re.IGNORECASE),
        re.compile(r"\bsoftware\s*engineer\b", re.IGNORECASE),
        re.compile(r"\bdeveloper\b", re.IGNORECASE),
    ],
    "advanced": [
        re.compile(r"\b(?:5|6|7|8|9|10|\d{2})\s*\+?\s*years?\s*(?:of)?\s*experience", re.IGNORECASE),
        re.compile(r"\bsenior\b", re.IGNORECASE),
        re.compile(r"\bstaff\b", re.IGNORECASE),
        re.compile(r"\bprincipal\b", re.IGNORECASE),
        re.compile(r"\blead\b", re.IGNORECASE),
        re.compile(r"\barchitect\b", re.IGNORECASE),
        re.compile(r"\bmanager\b", re.IGNORECASE),
        re.compile(r"\bdirector\b", re.IGNORECASE),
        re.compile(r"\bhead\s*of\b", re.IGNORECASE),
    ],
}

_SEVERITY: dict[str, int] = {level: i + 1 for i, level in enumerate(EXPERIENCE_LEVELS)}

# Control characters left behind by PDF/DOCX text extraction
_CONTROL_CHARS_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")


def _clean_text(text: str) -> str:
    return _CONTROL_CHARS_RE.sub(" ", text)


def extract_languages(text: str) -> set[str]:
    """Programming languages mentioned in text, in display form."""
    found: set[str] = set()
    for _, pattern in LANGUAGE_PATTERNS:
        match = pattern.search(text)
        if match:
            found.add(canonicalize(match.group(0)))
    return found


def extract_technologies(text: str) -> set[str]:
    """Frameworks, infra tools and datastores mentioned in text."""
    found: set[str] = set()
    for _, pattern in TECHNOLOGY_PATTERNS:
        match = pattern.search(text)
        if match:
            found.add(canonicalize(match.group(0)))
    return found


def extract_interests(text: str) -> set[str]:
    """Interest categories whose keywords appear anywhere in text."""
    text_lower = text.lower()
    found: set[str] = set()
    for interest, keywords in INTEREST_KEYWORDS.items():
        for keyword in keywords:
            if keyword in text_lower:
                found.add(interest)
                break
    return found


def detect_experience_level(text: str) -> str:
    """Classify experience from title, seniority and year-count cues.

    Every group is evaluated; the most senior group that matches wins, so
    "Senior Engineer, previously an intern" is advanced.
    """
    severity = 0
    for level, patterns in EXPERIENCE_INDICATORS.items():
        if any(p.search(text) for p in patterns):
            severity = max(severity, _SEVERITY[level])

    if severity >= _SEVERITY["advanced"]:
        return "advanced"
    if severity >= _SEVERITY["intermediate"]:
        return "intermediate"
    return "beginner"


def compute_confidence(languages: set[str], technologies: set[str], interests: set[str]) -> int:
    """Extraction completeness, 0-100, from the number of distinct findings."""
    total = len(languages) + len(technologies) + len(interests)
    return min(100, round(100 * total / CONFIDENCE_SATURATION))


def extract_skills_fast(text: str) -> SkillProfile:
    """Build a skill profile from resume text using vocabulary matching.

    Minimum-length validation is the caller's job; short or empty text
    simply produces an empty profile with confidence 0.
    """
    if not isinstance(text, str) or not text.strip():
        return SkillProfile(provenance="fast")

    cleaned = _clean_text(text)

    languages = extract_languages(cleaned)
    technologies = extract_technologies(cleaned)
    interests = extract_interests(cleaned)
    experience_level = detect_experience_level(cleaned)
    confidence = compute_confidence(languages, technologies, interests)

    logger.debug(
        "Fast extraction: %d languages, %d technologies, %d interests, level=%s",
        len(languages), len(technologies), len(interests), experience_level,
    )
    return SkillProfile(
        languages=languages,
        technologies=technologies,
        interests=interests,
        experience_level=experience_level,
        confidence=confidence,
        provenance="fast",
    )
