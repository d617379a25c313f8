from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

from app.normalize.utils import (
    find_email,
    find_linkedin,
    find_phone,
    find_website,
    is_bullet_like,
    is_contact_or_url,
    normalize_line,
    word_count,
)
from app.schemas.ats import ContactInfo, HeaderData

# Checked in insertion order; the first category with a hit wins.
SECTION_KEYWORDS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "summary": ("PROFESSIONAL SUMMARY", "SUMMARY", "OBJECTIVE", "PROFILE"),
        "experience": ("EXPERIENCE", "EMPLOYMENT", "WORK HISTORY"),
        "education": ("EDUCATION", "ACADEMIC"),
        "skills": ("SKILLS", "TECHNICAL SKILLS", "COMPETENCIES"),
        "other": ("CERTIFICATIONS", "AWARDS", "PROJECTS", "LANGUAGES", "VOLUNTEER", "PUBLICATIONS", "INTERESTS"),
    }
)

MAX_HEADER_LINES = 10
_MAX_HEADING_WORDS = 6
_MAX_HEADING_CHARS = 60

_LOCATION_RE = re.compile(r"^[A-Za-z\s]+,\s*[A-Za-z\s]{2,}")
_TITLE_STOP_WORDS = ("experience", "education")
_HEADING_PUNCTUATION_RE = re.compile(r"[:\-–—]")


def _looks_like_heading(line: str) -> bool:
    stripped = normalize_line(line)
    if not stripped or is_bullet_like(stripped) or is_contact_or_url(stripped):
        return False
    # a trailing period marks a sentence
    if stripped.endswith("."):
        return False
    return word_count(stripped) <= _MAX_HEADING_WORDS and len(stripped) <= _MAX_HEADING_CHARS


def identify_section_type(line: str) -> str | None:
    """Section type a heading line opens, or None for body content."""
    if not _looks_like_heading(line):
        return None
    upper = line.upper()
    for section_type, keywords in SECTION_KEYWORDS.items():
        if any(keyword in upper for keyword in keywords):
            return section_type
    return None


def section_title(line: str) -> str:
    return normalize_line(_HEADING_PUNCTUATION_RE.sub("", line))


def _looks_like_title(line: str) -> bool:
    lowered = line.lower()
    return (
        3 < len(line) < 100
        and "," not in line
        and not any(word in lowered for word in _TITLE_STOP_WORDS)
    )


def parse_header_data(lines: list[str]) -> HeaderData:
    """Pull name, headline and contact details out of the resume's top block."""
    contact = ContactInfo()
    non_contact: list[str] = []

    for line in lines:
        email = find_email(line)
        phone = find_phone(line)
        linkedin = find_linkedin(line)
        website = "" if linkedin else find_website(line)

        if email and not contact.email:
            contact.email = email
        if phone and not contact.phone:
            contact.phone = phone
        if linkedin and not contact.linkedin:
            contact.linkedin = linkedin
        if website and not contact.website:
            contact.website = website

        if email or phone or linkedin or website:
            continue
        non_contact.append(line)

        if (
            not contact.location
            and "@" not in line
            and len(line) < 50
            and _LOCATION_RE.match(line)
        ):
            contact.location = line

    name = non_contact[0] if non_contact else ""
    title = ""
    if len(non_contact) > 1 and _looks_like_title(non_contact[1]):
        title = non_contact[1]

    return HeaderData(name=name, title=title, contact=contact)


def has_header_signal(header: HeaderData) -> bool:
    return bool(header.name or header.contact.email or header.contact.phone)
