import logging

from fastapi import APIRouter, Request

from app.core.config import settings
from app.core.rate_limit import rate_limit
from app.normalize.sanitizer import NO_CONTENT_PLACEHOLDER, sanitize_content, validate_content_quality
from app.schemas.ats import ATSScoreResult, StructuredResume
from app.schemas.ats.requests import ContentRequest, IndustriesResponse, SanitizeResponse, ScoreRequest
from app.scoring import list_industries, resolve_industry
from app.services.resume_service import score_resume
from app.structure import parse_resume_to_structured

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/ats/industries", response_model=IndustriesResponse)
async def ats_industries():
    return IndustriesResponse(
        industries=list_industries(),
        default=resolve_industry(settings.default_industry),
    )


@router.post("/ats/score", response_model=ATSScoreResult)
@rate_limit()
async def ats_score(request: Request, payload: ScoreRequest):
    _ = request
    return score_resume(payload.resume, payload.industry)


@router.post("/ats/structure", response_model=StructuredResume)
@rate_limit()
async def ats_structure(request: Request, payload: ContentRequest):
    _ = request
    return parse_resume_to_structured(payload.content)


@router.post("/ats/sanitize", response_model=SanitizeResponse)
@rate_limit()
async def ats_sanitize(request: Request, payload: ContentRequest):
    _ = request
    cleaned = sanitize_content(payload.content)
    usable = "" if cleaned == NO_CONTENT_PLACEHOLDER else cleaned
    meets_minimum = len(usable) >= settings.min_extracted_chars
    if not meets_minimum:
        logger.info("sanitize_below_minimum chars=%s", len(usable))
    return SanitizeResponse(
        content=cleaned,
        meets_minimum_length=meets_minimum,
        quality=validate_content_quality(payload.content),
    )
