from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from app.core.config import settings
from app.normalize.sanitizer import (
    NO_CONTENT_PLACEHOLDER,
    ContentQuality,
    sanitize_content,
    validate_content_quality,
)
from app.normalize.utils import ascii_bullets
from app.parsing.parse import parse_document
from app.schemas.ats import ATSScoreResult, ResumeData, StructuredResume
from app.scoring import calculate_ats_score
from app.structure import parse_resume_to_structured

logger = logging.getLogger(__name__)


class InsufficientTextError(ValueError):
    def __init__(self, message: str, *, extracted_chars: int = 0):
        super().__init__(message)
        self.extracted_chars = extracted_chars


class ExtractedResume(BaseModel):
    doc_id: str
    source_type: str
    text: str
    warnings: list[str] = Field(default_factory=list)


class ResumeAnalysis(BaseModel):
    content: str
    quality: ContentQuality
    structured: StructuredResume


def ensure_meaningful_text(text: str, *, min_chars: int | None = None) -> str:
    """Sanitize ``text`` and reject it when too little survives."""
    threshold = settings.min_extracted_chars if min_chars is None else min_chars
    cleaned = sanitize_content(text)
    usable = "" if cleaned == NO_CONTENT_PLACEHOLDER else cleaned
    if len(usable) < threshold:
        raise InsufficientTextError(
            "We could not read enough text from this document. "
            "Please paste your resume text manually.",
            extracted_chars=len(usable),
        )
    return usable


def extract_resume_text(file_path: str | Path) -> ExtractedResume:
    parsed = parse_document(file_path)
    text = ensure_meaningful_text(parsed.text)
    return ExtractedResume(
        doc_id=parsed.doc_id,
        source_type=parsed.source_type,
        text=text,
        warnings=parsed.parsing_warnings,
    )


def analyze_resume_text(text: str) -> ResumeAnalysis:
    quality = validate_content_quality(text)
    structured = parse_resume_to_structured(text)
    if quality.issues:
        logger.info("resume_quality_issues count=%s issues=%s", len(quality.issues), quality.issues)
    return ResumeAnalysis(
        content=sanitize_content(ascii_bullets(text)),
        quality=quality,
        structured=structured,
    )


def score_resume(data: ResumeData | dict[str, Any], industry: str | None = None) -> ATSScoreResult:
    result = calculate_ats_score(data, industry or settings.default_industry)
    logger.info(
        "ats_score_computed industry=%s overall=%s suggestions=%s",
        industry or settings.default_industry,
        result.overall_score,
        len(result.suggestions),
    )
    return result
