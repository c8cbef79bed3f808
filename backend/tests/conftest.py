"""Shared test configuration, fixtures and sample resumes."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

SAMPLE_RESUME = """
Jane Doe
jane.doe@email.com | github.com/janedoe

Summary
Senior Software Engineer with 6 years of experience building web applications
and REST APIs. Interested in developer tooling and documentation.

Experience

Senior Software Engineer, Acme Corp
Jan 2021 - Present
- Built React and TypeScript frontends backed by PostgreSQL and Redis
- Deployed services on AWS with Docker and Kubernetes

Software Engineer, Initech
Jun 2018 - Dec 2020
- Developed Python microservices with Django and FastAPI

Skills

Python, TypeScript, JavaScript, Go, React, Node.js, Docker, Kubernetes, AWS
"""


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: calls the real Gemini API (needs GEMINI_API_KEY)"
    )


def make_gemini_client(reply_text: str | None = None, error: Exception | None = None) -> MagicMock:
    """Stub google-genai client whose async generate_content returns reply_text."""
    client = MagicMock()
    if error is not None:
        client.aio.models.generate_content = AsyncMock(side_effect=error)
    else:
        client.aio.models.generate_content = AsyncMock(
            return_value=SimpleNamespace(text=reply_text)
        )
    return client


@pytest.fixture
def sample_resume() -> str:
    return SAMPLE_RESUME


@pytest.fixture
def gemini_client_factory():
    return make_gemini_client
