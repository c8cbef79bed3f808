from fastapi import APIRouter, Depends, HTTPException, Request
from google import genai
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_gemini_client
from config import settings
from models.requests import (
    IssueRecommendationRequest,
    IssueSuggestionRequest,
    RepositoryRecommendationRequest,
    ResumeAnalyzeRequest,
)
from models.responses import (
    IssueRecommendationResponse,
    RepositoryRecommendationResponse,
    ResumeAnalysisResponse,
)
from models.schemas.issue_suggestion import IssueSuggestion
from services import issue_assistant, recommender, resume_analyzer
from services.gemini_client import is_ai_available

router = APIRouter()
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "ai_available": is_ai_available(settings.gemini_api_key),
    }


@router.post("/resume/analyze", response_model=ResumeAnalysisResponse)
@limiter.limit("10/minute")
async def analyze_resume(
    request: Request,
    body: ResumeAnalyzeRequest,
    client: genai.Client | None = Depends(get_gemini_client),
):
    # Text extraction from PDF/DOCX happens upstream; reject what it failed on
    if len(body.resume_text.strip()) < settings.min_resume_chars:
        raise HTTPException(
            status_code=400,
            detail="Could not extract enough text from resume. The file may be empty or image-based.",
        )

    analysis = await resume_analyzer.analyze_resume(
        body.resume_text, client=client, enhance=body.enhance
    )
    return ResumeAnalysisResponse(
        analysis=analysis,
        ai_available=is_ai_available(settings.gemini_api_key),
        text_length=len(body.resume_text),
    )


@router.post("/issues/recommended", response_model=IssueRecommendationResponse)
async def recommend_issues(body: IssueRecommendationRequest):
    if not body.profile.languages:
        raise HTTPException(status_code=400, detail="Please provide at least one skill")

    if not body.candidates:
        return IssueRecommendationResponse(
            message="No matching issues found. Try adjusting your skills."
        )

    ranked = recommender.rank_issues(body.profile, body.candidates)
    return IssueRecommendationResponse(
        items=ranked[:body.limit],
        total_count=len(ranked),
    )


@router.post("/repositories/recommended", response_model=RepositoryRecommendationResponse)
async def recommend_repositories(body: RepositoryRecommendationRequest):
    if not body.profile.languages:
        raise HTTPException(status_code=400, detail="Please provide at least one skill")

    if not body.candidates:
        return RepositoryRecommendationResponse(
            message="No matching repositories found. Try adjusting your skills."
        )

    ranked = recommender.rank_repositories(body.profile, body.candidates)
    return RepositoryRecommendationResponse(
        items=ranked[:body.limit],
        total_count=len(ranked),
    )


@router.post("/issues/suggestion", response_model=IssueSuggestion)
@limiter.limit("10/minute")
async def suggest_issue_fix(
    request: Request,
    body: IssueSuggestionRequest,
    client: genai.Client | None = Depends(get_gemini_client),
):
    return await issue_assistant.suggest_fix(
        body.title,
        client,
        model=settings.gemini_model,
        body=body.body,
        labels=body.labels,
        repo=body.repo,
    )
