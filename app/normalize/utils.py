from __future__ import annotations

import re

_BULLET_CHARS = "•-*"
_BULLET_PATTERN = re.compile(rf"^\s*[{re.escape(_BULLET_CHARS)}]\s*")
_BULLET_GLYPH_RE = re.compile(r"^[ \t]*[•◦▪▫●○■□‣⁃·➢–—][ \t]*", re.MULTILINE)
_WHITESPACE_RE = re.compile(r"\s+")
_EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
_PHONE_RE = re.compile(r"\+?\(?\d[\d\s().-]{7,}\d")
_LINKEDIN_RE = re.compile(r"linkedin\.com/(?:in|pub)/\S+", re.IGNORECASE)
_WEBSITE_RE = re.compile(r"(?:https?://\S+|www\.\S+)", re.IGNORECASE)


def split_lines(text: str) -> list[str]:
    """Non-empty, trimmed lines of ``text``."""
    return [line.strip() for line in (text or "").split("\n") if line.strip()]


def normalize_line(line: str) -> str:
    return _WHITESPACE_RE.sub(" ", line).strip()


def word_count(line: str) -> int:
    return len(normalize_line(line).split())


def is_bullet_like(line: str) -> bool:
    return bool(_BULLET_PATTERN.match(line))


def strip_bullet_prefix(line: str) -> str:
    return _BULLET_PATTERN.sub("", line, count=1).strip()


def ascii_bullets(text: str) -> str:
    """Rewrite leading bullet glyphs such as • or ▪ as "- " so ASCII-only clean-up keeps them."""
    if not isinstance(text, str):
        return text
    return _BULLET_GLYPH_RE.sub("- ", text)


def find_email(line: str) -> str:
    match = _EMAIL_RE.search(line)
    return match.group(0) if match else ""


def find_phone(line: str) -> str:
    # year ranges like "2016 - 2020" look phone-shaped; real numbers carry 9+ digits
    for match in _PHONE_RE.finditer(line):
        candidate = match.group(0).strip()
        if sum(ch.isdigit() for ch in candidate) >= 9:
            return candidate
    return ""


def find_linkedin(line: str) -> str:
    match = _LINKEDIN_RE.search(line)
    return match.group(0) if match else ""


def find_website(line: str) -> str:
    match = _WEBSITE_RE.search(line)
    return match.group(0) if match else ""


def is_contact_or_url(line: str) -> bool:
    return bool(find_email(line) or find_phone(line) or find_linkedin(line) or find_website(line))
