"""
Line-grouping heuristics for the experience, education and skills sections.

Resume text has no grammar, so entries are found by matching each line
against a short list of entry-start patterns, checked in order.
"""
from __future__ import annotations

import re

from app.normalize.utils import is_bullet_like, normalize_line, strip_bullet_prefix
from app.schemas.ats import EducationBlock, ExperienceBlock

JOB_TITLE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\w+\s+(?:at|@)\s+\w+", re.IGNORECASE),
    re.compile(r"\w+\s+\|\s+\w+"),
    re.compile(r"^\w+.*\d{4}"),
    re.compile(
        r"(?:manager|director|engineer|analyst|developer|designer|specialist|coordinator|associate)",
        re.IGNORECASE,
    ),
)

DEGREE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"(?:bachelor|master|phd|doctorate|associate|b\.a\.|b\.s\.|m\.a\.|m\.s\.|mba)", re.IGNORECASE),
    re.compile(r"degree", re.IGNORECASE),
    re.compile(r"university|college|institute", re.IGNORECASE),
)

_JOB_SEPARATOR_RE = re.compile(r"\s+(?:at|@|\|)\s+", re.IGNORECASE)
_DEGREE_SEPARATOR_RE = re.compile(r"\s+(?:at|from|\|)\s+", re.IGNORECASE)
_MONTH = (
    r"(?:jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?|aug(?:ust)?"
    r"|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)\.?"
)
_DATE_RANGE_RE = re.compile(
    rf"(?:\b{_MONTH}\s+)?\d{{4}}\s*[-–—]\s*(?:(?:{_MONTH}\s+)?\d{{4}}|present|current|now)",
    re.IGNORECASE,
)
_YEAR_RE = re.compile(r"\b\d{4}\b")
_TRAILING_DATES_RE = re.compile(rf"[\s,(]*(?:\b{_MONTH}\s+)?\d{{4}}.*$", re.IGNORECASE)
_SKILL_SPLIT_RE = re.compile(r"[,;|]")


def is_job_title(line: str) -> bool:
    return any(pattern.search(line) for pattern in JOB_TITLE_PATTERNS)


def is_degree(line: str) -> bool:
    return any(pattern.search(line) for pattern in DEGREE_PATTERNS)


def _extract_dates(line: str) -> str:
    match = _DATE_RANGE_RE.search(line)
    if match:
        return normalize_line(match.group(0))
    match = _YEAR_RE.search(line)
    return match.group(0) if match else ""


def _strip_dates(text: str) -> str:
    return _TRAILING_DATES_RE.sub("", text).strip(" ,|-–—")


def parse_job_title_line(line: str) -> ExperienceBlock:
    parts = [part.strip() for part in _JOB_SEPARATOR_RE.split(line) if part.strip()]
    dates = _extract_dates(line)

    if len(parts) >= 2:
        location = _strip_dates(parts[2]) if len(parts) >= 3 else ""
        return ExperienceBlock(
            title=_strip_dates(parts[0]) or parts[0],
            company=_strip_dates(parts[1]),
            location=location or None,
            dates=dates,
        )

    return ExperienceBlock(title=_strip_dates(line) or line, dates=dates)


def parse_degree_line(line: str) -> EducationBlock:
    parts = [part.strip() for part in _DEGREE_SEPARATOR_RE.split(line) if part.strip()]
    dates = _extract_dates(line)

    if len(parts) >= 2:
        return EducationBlock(
            degree=_strip_dates(parts[0]) or parts[0],
            institution=_strip_dates(parts[1]),
            dates=dates,
        )

    return EducationBlock(degree=_strip_dates(line) or line, dates=dates)


def _body_line(line: str) -> str:
    return strip_bullet_prefix(line) if is_bullet_like(line) else line


def parse_experience_blocks(lines: list[str]) -> list[ExperienceBlock]:
    """Group experience lines into jobs.

    Lines seen before the first job title are kept and prepended to the first
    job's responsibilities.
    """
    blocks: list[ExperienceBlock] = []
    orphans: list[str] = []

    for line in lines:
        if not is_bullet_like(line) and is_job_title(line):
            block = parse_job_title_line(line)
            if not blocks and orphans:
                block.responsibilities.extend(orphans)
            blocks.append(block)
            continue

        body = _body_line(line)
        if not body:
            continue
        if blocks:
            blocks[-1].responsibilities.append(body)
        else:
            orphans.append(body)

    return blocks


def parse_education_blocks(lines: list[str]) -> list[EducationBlock]:
    blocks: list[EducationBlock] = []
    orphans: list[str] = []

    for line in lines:
        if not is_bullet_like(line) and is_degree(line):
            block = parse_degree_line(line)
            if not blocks and orphans:
                block.details.extend(orphans)
            blocks.append(block)
            continue

        body = _body_line(line)
        if not body:
            continue
        if blocks:
            blocks[-1].details.append(body)
        else:
            orphans.append(body)

    return blocks


def parse_skills_list(lines: list[str]) -> list[str]:
    skills: list[str] = []
    for line in lines:
        for item in _SKILL_SPLIT_RE.split(_body_line(line)):
            skill = item.strip()
            if skill:
                skills.append(skill)
    return skills
