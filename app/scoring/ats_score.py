"""
Rule-based ATS score for structured resume data.

Six category checks are scored 0-100 and combined with the weights from
``app/core/config/scoring.yaml``. Missing data lowers scores; nothing
here raises for an empty resume.
"""
from __future__ import annotations

import math
from typing import Any, Mapping

from app.core.config.scoring import get_ats_threshold, get_ats_weights, get_scoring_value
from app.schemas.ats import (
    ATSCheck,
    ATSChecks,
    ATSScoreResult,
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ResumeData,
    Skills,
)

from .keywords import (
    ACTION_VERBS,
    BULLET_MARKERS,
    DEFAULT_INDUSTRY,
    INDUSTRY_KEYWORDS,
    count_metrics,
    has_metric,
    resolve_industry,
)

_DEFAULT_SKILL_STEPS: tuple[tuple[int, int], ...] = ((8, 100), (5, 80), (3, 60), (1, 40))


def _filled(value: str | None) -> bool:
    return bool((value or "").strip())


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def calculate_contact_info_score(personal_info: PersonalInfo) -> ATSCheck:
    score = 0
    missing: list[str] = []

    if _filled(personal_info.full_name):
        score += 25
    else:
        missing.append("full name")

    if _filled(personal_info.email) and "@" in personal_info.email:
        score += 25
    else:
        missing.append("professional email")

    if _filled(personal_info.phone):
        score += 20
    else:
        missing.append("phone number")

    if _filled(personal_info.location):
        score += 15
    else:
        missing.append("location")

    if _filled(personal_info.linkedin):
        score += 10
    if _filled(personal_info.website):
        score += 5

    score = min(100, score)
    if score >= get_ats_threshold("contact_info", "complete", 85):
        return ATSCheck(score=score, status="complete", message="Contact information is complete")
    if score >= get_ats_threshold("contact_info", "partial", 50):
        return ATSCheck(score=score, status="partial", message=f"Missing: {', '.join(missing)}")
    return ATSCheck(
        score=score,
        status="incomplete",
        message=f"Incomplete contact info: {', '.join(missing)}",
    )


def _experience_entry_score(entry: ExperienceEntry) -> int:
    score = 0
    if all(_filled(value) for value in (entry.company, entry.position, entry.start_date, entry.description)):
        score += 40

    description = (entry.description or "").lower()
    if any(verb in description for verb in ACTION_VERBS):
        score += 20
    if any(marker in description for marker in BULLET_MARKERS):
        score += 20
    if has_metric(description):
        score += 20
    return score


def calculate_experience_score(experience: list[ExperienceEntry]) -> ATSCheck:
    if not experience:
        return ATSCheck(score=0, status="needs-improvement", message="No work experience added")

    total = sum(_experience_entry_score(entry) for entry in experience)
    score = min(100.0, total / len(experience))

    if score >= get_ats_threshold("experience", "excellent", 80):
        return ATSCheck(score=score, status="excellent", message="Experience section is well-optimized")
    if score >= get_ats_threshold("experience", "good", 60):
        return ATSCheck(score=score, status="good", message="Good experience details, room for improvement")
    return ATSCheck(score=score, status="needs-improvement", message="Experience needs more detail and metrics")


def _skill_steps() -> tuple[tuple[int, int], ...]:
    raw = get_scoring_value("ats.skills_count")
    if not isinstance(raw, list) or not raw:
        return _DEFAULT_SKILL_STEPS
    steps = [(int(minimum), int(score)) for minimum, score in raw]
    return tuple(sorted(steps, reverse=True))


def calculate_skills_score(skills: Skills) -> ATSCheck:
    total = len(skills.technical) + len(skills.soft)
    score = 0
    for minimum, step_score in _skill_steps():
        if total >= minimum:
            score = step_score
            break

    if score >= get_ats_threshold("skills", "excellent", 80):
        return ATSCheck(score=score, status="excellent", message="Strong skills section")
    if score >= get_ats_threshold("skills", "good", 60):
        return ATSCheck(score=score, status="good", message="Good skills, consider adding more")
    return ATSCheck(score=score, status="needs-improvement", message="Add more relevant skills")


def calculate_education_score(education: list[EducationEntry]) -> ATSCheck:
    if not education:
        return ATSCheck(
            score=float(get_scoring_value("ats.education.empty", 40)),
            status="incomplete",
            message="Education section empty",
        )

    complete = any(
        all(_filled(value) for value in (entry.school, entry.degree, entry.field, entry.start_date, entry.end_date))
        for entry in education
    )
    if complete:
        return ATSCheck(
            score=float(get_scoring_value("ats.education.complete", 100)),
            status="complete",
            message="Education information complete",
        )
    return ATSCheck(
        score=float(get_scoring_value("ats.education.incomplete", 60)),
        status="incomplete",
        message="Education missing some details",
    )


def calculate_keyword_score(
    data: ResumeData,
    industry: str,
    keyword_table: Mapping[str, tuple[str, ...]] | None = None,
) -> ATSCheck:
    table = keyword_table or INDUSTRY_KEYWORDS
    label = resolve_industry(industry, table)
    keywords = table[label]

    chunks = [entry.description or "" for entry in data.experience]
    chunks.extend(data.skills.technical)
    chunks.extend(data.skills.soft)
    haystack = " ".join(chunks).lower()

    found = [keyword for keyword in keywords if keyword.lower() in haystack]
    boost = get_ats_threshold("keywords", "boost", 1.2)
    score = min(100.0, len(found) * 100 * boost / len(keywords)) if keywords else 0.0

    name = label.lower()
    if score >= get_ats_threshold("keywords", "excellent", 60):
        return ATSCheck(score=score, status="excellent", message=f"Strong {name} keyword presence")
    if score >= get_ats_threshold("keywords", "good", 30):
        return ATSCheck(score=score, status="good", message=f"Good keyword usage, add more {name} terms")
    return ATSCheck(score=score, status="needs-improvement", message=f"Add more {name} industry keywords")


def calculate_metrics_score(experience: list[ExperienceEntry]) -> ATSCheck:
    if not experience:
        return ATSCheck(score=0, status="needs-improvement", message="No experience to analyze")

    total = sum(count_metrics(entry.description or "") for entry in experience)
    average = total / len(experience)
    score = min(100.0, average * get_ats_threshold("metrics", "scale", 30))

    if average >= get_ats_threshold("metrics", "excellent", 2):
        return ATSCheck(score=score, status="excellent", message="Strong use of quantifiable achievements")
    if average >= get_ats_threshold("metrics", "good", 1):
        return ATSCheck(score=score, status="good", message="Some metrics present, add more numbers")
    return ATSCheck(score=score, status="needs-improvement", message="Add quantifiable achievements and metrics")


def generate_suggestions(checks: ATSChecks, data: ResumeData) -> list[str]:
    suggestions: list[str] = []

    if checks.contact_info.score < get_ats_threshold("contact_info", "complete", 85):
        suggestions.append("Complete all contact information fields")
    if checks.experience.score < get_ats_threshold("experience", "excellent", 80):
        suggestions.append("Use more action verbs and bullet points in experience descriptions")
    if checks.metrics.score < get_ats_threshold("metrics", "suggest_below", 70):
        suggestions.append("Add quantifiable achievements with specific numbers and percentages")
    if checks.skills.score < get_ats_threshold("skills", "excellent", 80):
        suggestions.append("Include more relevant technical and soft skills")
    if checks.keywords.score < get_ats_threshold("keywords", "excellent", 60):
        suggestions.append("Incorporate more industry-specific keywords throughout your resume")
    if checks.education.status != "complete":
        suggestions.append("Add complete education details: school, degree, field of study and dates")
    if not data.experience:
        suggestions.append("Add work experience with detailed descriptions")

    return list(dict.fromkeys(suggestions))


def calculate_ats_score(
    data: ResumeData | dict[str, Any],
    industry: str | None = DEFAULT_INDUSTRY,
    *,
    keyword_table: Mapping[str, tuple[str, ...]] | None = None,
) -> ATSScoreResult:
    """Score ``data`` for ``industry``.

    ``data`` may be a ``ResumeData`` or a plain mapping in either snake_case
    or camelCase. Same input always gives the same result.
    """
    resume = data if isinstance(data, ResumeData) else ResumeData.model_validate(data)

    checks = ATSChecks(
        contact_info=calculate_contact_info_score(resume.personal_info),
        experience=calculate_experience_score(resume.experience),
        skills=calculate_skills_score(resume.skills),
        education=calculate_education_score(resume.education),
        keywords=calculate_keyword_score(resume, industry or DEFAULT_INDUSTRY, keyword_table),
        metrics=calculate_metrics_score(resume.experience),
    )

    weights = get_ats_weights()
    weighted = (
        checks.contact_info.score * weights["contact_info"]
        + checks.experience.score * weights["experience"]
        + checks.skills.score * weights["skills"]
        + checks.education.score * weights["education"]
        + checks.keywords.score * weights["keywords"]
        + checks.metrics.score * weights["metrics"]
    )
    overall = max(0, min(100, _round_half_up(weighted)))

    return ATSScoreResult(
        overall_score=overall,
        checks=checks,
        suggestions=generate_suggestions(checks, resume),
    )
