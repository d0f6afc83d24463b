import logging
import math

from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_match_finder
from config import settings
from models.requests import FindMatchesRequest, SimilarityRequest
from models.responses import MatchesResponse, Pagination, SimilarityResponse
from models.schemas.helper_features import HelperFeatures
from models.schemas.helper_record import HelperRecord
from models.schemas.job_features import JobFeatures
from models.schemas.job_record import JobRecord
from services.exceptions import JobLookupError, JobNotFoundError
from services.feature_extractor import extract_helper_features, extract_job_features
from services.match_finder import MatchFinder
from services.match_reasons import generate_match_reasons
from services.similarity import score_breakdown
from services.skill_extractor import get_skill_gap

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "strict_job_lookup": settings.strict_job_lookup,
    }


@router.post("/features/job", response_model=JobFeatures)
async def job_features(job: JobRecord):
    return extract_job_features(job)


@router.post("/features/helper", response_model=HelperFeatures)
async def helper_features(helper: HelperRecord):
    return extract_helper_features(helper)


@router.post("/similarity", response_model=SimilarityResponse)
async def similarity(body: SimilarityRequest):
    job = extract_job_features(body.job)
    helper = extract_helper_features(body.helper)
    matched, missing = get_skill_gap(job.required_skills, helper.skills)
    return SimilarityResponse(
        breakdown=score_breakdown(job, helper),
        match_reasons=generate_match_reasons(job, helper),
        matched_skills=matched,
        missing_skills=missing,
    )


@router.post("/jobs/{job_id}/matches", response_model=MatchesResponse)
@limiter.limit(settings.rate_limit)
async def find_matches(
    request: Request,
    job_id: str,
    body: FindMatchesRequest,
    finder: MatchFinder = Depends(get_match_finder),
):
    if len(body.helpers) > settings.max_helpers_per_request:
        raise HTTPException(
            status_code=400,
            detail=f"Too many helpers. Max per request: {settings.max_helpers_per_request}",
        )

    limit = min(body.limit or settings.default_page_limit, settings.max_page_limit)
    offset = (body.page - 1) * limit

    try:
        page = await finder.find_matches(job_id, body.helpers, limit=limit, offset=offset)
    except JobNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except JobLookupError as e:
        logger.error("Job lookup unavailable: %s", e)
        raise HTTPException(status_code=503, detail="Job lookup unavailable")

    return MatchesResponse(
        job_id=job_id,
        matches=page.matches,
        pagination=Pagination(
            current_page=body.page,
            total_matches=page.total_matches,
            has_more=page.has_more,
            total_pages=math.ceil(page.total_matches / limit),
            limit=limit,
        ),
    )
