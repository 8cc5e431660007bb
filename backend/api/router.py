import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_recommendation_engine
from config import settings
from models.requests import RecommendRequest
from models.responses import OptionsResponse, RecommendResponse, ScoreBreakdown
from services.form_options import get_form_options
from services.recommender.constants import NO_MATCH_MESSAGE
from services.recommender.engine import RecommendationEngine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


def _validate_profile(body: RecommendRequest) -> None:
    """Reject incomplete forms with a message naming the missing field."""
    if not body.education_level:
        raise HTTPException(status_code=400, detail="Please select your education level.")
    if not body.interests:
        raise HTTPException(status_code=400, detail="Please select at least one interest.")
    if not body.skills:
        raise HTTPException(status_code=400, detail="Please select at least one skill.")
    if not body.preferred_industry:
        raise HTTPException(status_code=400, detail="Please select a preferred industry.")


@router.get("/health")
async def health(engine: RecommendationEngine = Depends(get_recommendation_engine)):
    return {
        "status": "ok",
        "careers_loaded": len(engine.catalog),
    }


@router.get("/options", response_model=OptionsResponse)
async def options():
    return get_form_options()


@router.post(
    "/recommend",
    response_model=RecommendResponse,
    response_model_exclude_none=True,
)
@limiter.limit(settings.rate_limit)
async def recommend(
    request: Request,
    body: RecommendRequest,
    engine: RecommendationEngine = Depends(get_recommendation_engine),
):
    _validate_profile(body)

    careers = engine.recommend(body.to_profile())
    if not careers:
        logger.info("No matches for education=%s industry=%s",
                    body.education_level, body.preferred_industry)
        return RecommendResponse(careers=[], message=NO_MATCH_MESSAGE)

    return RecommendResponse(careers=careers)


@router.post("/careers/{career_id}/score", response_model=ScoreBreakdown)
@limiter.limit(settings.rate_limit)
async def score_career(
    request: Request,
    career_id: str,
    body: RecommendRequest,
    engine: RecommendationEngine = Depends(get_recommendation_engine),
):
    _validate_profile(body)

    try:
        return engine.score_career(body.to_profile(), career_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown career: {career_id}")
