from __future__ import annotations

from typing import Literal

from pydantic import Field

from .base import CamelModel

CheckStatus = Literal["excellent", "good", "needs-improvement", "complete", "partial", "incomplete"]


class ATSCheck(CamelModel):
    score: float = Field(ge=0.0, le=100.0)
    status: CheckStatus
    message: str


class ATSChecks(CamelModel):
    contact_info: ATSCheck
    experience: ATSCheck
    skills: ATSCheck
    education: ATSCheck
    keywords: ATSCheck
    metrics: ATSCheck


class ATSScoreResult(CamelModel):
    overall_score: int = Field(ge=0, le=100)
    checks: ATSChecks
    suggestions: list[str] = Field(default_factory=list)
