from __future__ import annotations

from pydantic import BaseModel, Field

from app.core.config import settings
from app.normalize.sanitizer import ContentQuality

from .base import CamelModel
from .resume_data import ResumeData


class ScoreRequest(CamelModel):
    resume: ResumeData = Field(default_factory=ResumeData)
    industry: str | None = Field(default=None, max_length=80)


class ContentRequest(BaseModel):
    content: str = Field(default="", max_length=settings.max_content_chars)


class SanitizeResponse(BaseModel):
    content: str
    meets_minimum_length: bool
    quality: ContentQuality


class IndustriesResponse(BaseModel):
    industries: list[str]
    default: str
