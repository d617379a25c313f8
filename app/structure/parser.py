from __future__ import annotations

import logging

from app.normalize.sanitizer import NO_CONTENT_PLACEHOLDER, sanitize_content
from app.normalize.utils import ascii_bullets, is_bullet_like, split_lines, strip_bullet_prefix
from app.schemas.ats import (
    EducationContent,
    ExperienceContent,
    HeaderContent,
    ListContent,
    ParagraphContent,
    ResumeSection,
    StructuredResume,
)

from .blocks import parse_education_blocks, parse_experience_blocks, parse_skills_list
from .classifier import (
    MAX_HEADER_LINES,
    has_header_signal,
    identify_section_type,
    parse_header_data,
    section_title,
)

logger = logging.getLogger(__name__)

_REQUIRED_SECTIONS = ("summary", "experience", "education", "skills")


def _section_content(section_type: str, lines: list[str]):
    if section_type == "experience":
        blocks = parse_experience_blocks(lines)
        if blocks:
            return ExperienceContent(data=blocks)
    elif section_type == "education":
        blocks = parse_education_blocks(lines)
        if blocks:
            return EducationContent(data=blocks)
    elif section_type == "skills":
        return ListContent(data=parse_skills_list(lines))
    elif section_type == "summary":
        return ParagraphContent(data=" ".join(lines))

    # no recognizable entries: keep the raw lines rather than dropping them
    return ListContent(data=[strip_bullet_prefix(line) if is_bullet_like(line) else line for line in lines])


def _ensure_minimum_sections(sections: list[ResumeSection]) -> list[ResumeSection]:
    present = {section.type for section in sections}
    for section_type in _REQUIRED_SECTIONS:
        if section_type in present:
            continue
        content = ListContent() if section_type == "skills" else ParagraphContent()
        sections.append(
            ResumeSection(
                id=f"{section_type}-{len(sections)}",
                type=section_type,
                title=section_type.capitalize(),
                content=content,
            )
        )
    return sections


def parse_resume_to_structured(content: str) -> StructuredResume:
    """Split resume text into a header block and typed sections."""
    cleaned = sanitize_content(ascii_bullets(content))
    if cleaned == NO_CONTENT_PLACEHOLDER:
        return StructuredResume(sections=[])

    lines = split_lines(cleaned)
    if not lines:
        return StructuredResume(sections=[])

    sections: list[ResumeSection] = []
    header_lines: list[str] = []
    current: tuple[str, str] | None = None
    current_lines: list[str] = []

    def flush() -> None:
        if current is None or not current_lines:
            return
        section_type, title = current
        sections.append(
            ResumeSection(
                id=f"{section_type}-{len(sections)}",
                type=section_type,
                title=title,
                content=_section_content(section_type, current_lines),
            )
        )

    def flush_header() -> None:
        nonlocal current, current_lines
        if not header_lines:
            return
        header = parse_header_data(header_lines)
        if has_header_signal(header):
            sections.append(
                ResumeSection(
                    id=f"header-{len(sections)}",
                    type="header",
                    title="Header",
                    content=HeaderContent(data=header),
                )
            )
        else:
            current = ("summary", "Professional Summary")
            current_lines = list(header_lines)
        header_lines.clear()

    header_open = True
    for line in lines:
        section_type = identify_section_type(line)

        if section_type is not None:
            if header_open:
                flush_header()
                header_open = False
            flush()
            current = (section_type, section_title(line) or section_type.capitalize())
            current_lines = []
            continue

        if header_open:
            if len(header_lines) < MAX_HEADER_LINES:
                header_lines.append(line)
                continue
            flush_header()
            header_open = False
            if current is None:
                current = ("summary", "Professional Summary")
                current_lines = []

        current_lines.append(line)

    if header_open:
        flush_header()
    flush()

    logger.debug(
        "resume_structured sections=%s lines=%s",
        [section.type for section in sections],
        len(lines),
    )
    return StructuredResume(sections=_ensure_minimum_sections(sections))
