import os
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    debug: bool = False
    rate_limit_enabled: bool = True

    # AI enhancement stage
    ai_max_input_chars: int = 8000  # resume prefix sent to the model
    ai_confidence: int = 85  # confidence assigned to a successful AI extraction
    ai_timeout_seconds: float = 20.0

    # Request validation (HTTP layer only)
    min_resume_chars: int = 50
    max_resume_chars: int = 50000
    recommendation_limit: int = 25

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
