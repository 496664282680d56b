from fastapi import APIRouter, Depends, HTTPException, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_match_service
from config import settings
from models.requests import ResumeScoreRequest
from models.responses import (
    FallbackMatch,
    HealthResponse,
    JobRecommendations,
    RankedCompatibility,
    RankedMatches,
    ScoredMatch,
)
from services.errors import RecordNotFound
from services.match_service import MatchService

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(
        status="ok",
        gemini_configured=bool(settings.gemini_api_key),
        fallback_only=settings.fallback_only,
    )


@router.get("/jobs/{job_id}/applicants/scores", response_model=RankedMatches)
@limiter.limit(settings.rate_limit)
async def score_applicants(
    request: Request,
    job_id: str,
    min_percent: int | None = Query(None, ge=0, le=100),
    service: MatchService = Depends(get_match_service),
):
    try:
        return await service.score_applicants_for_job(job_id, min_percent=min_percent)
    except RecordNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/jobs/{job_id}/resume-score", response_model=ScoredMatch | FallbackMatch)
@limiter.limit(settings.rate_limit)
async def score_resume(
    request: Request,
    job_id: str,
    body: ResumeScoreRequest,
    service: MatchService = Depends(get_match_service),
):
    try:
        return await service.score_resume_for_job(body.resume_text, job_id)
    except RecordNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/users/{user_id}/people-matches", response_model=RankedCompatibility)
async def people_matches(
    user_id: str,
    q: str | None = Query(None, max_length=200),
    min_score: int | None = Query(None, ge=0, le=100),
    service: MatchService = Depends(get_match_service),
):
    try:
        return service.score_people_matches(user_id, query=q, min_score=min_score)
    except RecordNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/candidates/{candidate_id}/job-recommendations", response_model=JobRecommendations)
@limiter.limit(settings.rate_limit)
async def job_recommendations(
    request: Request,
    candidate_id: str,
    limit: int = Query(5, ge=1, le=20),
    service: MatchService = Depends(get_match_service),
):
    try:
        return await service.recommend_jobs_for_candidate(candidate_id, limit=limit)
    except RecordNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
