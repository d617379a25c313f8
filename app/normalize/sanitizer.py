"""
Text clean-up for resume content coming out of document extraction or paste.

``sanitize_content`` is the entry point used before any structural parsing.
The remaining helpers deal with Word/OLE2 leftovers that show up when a
legacy document was only partially decoded.
"""
from __future__ import annotations

import re

from pydantic import BaseModel, Field

NO_CONTENT_PLACEHOLDER = "No content available"

_HTML_TAG_RE = re.compile(r"<[^>]*>")
_HTML_ENTITIES: tuple[tuple[str, str], ...] = (
    ("&nbsp;", " "),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
)
_NON_PRINTABLE_RE = re.compile(r"[^\x20-\x7E\n]")
_FIELD_BLOCK_RE = re.compile(r"\{[^}]*\}")
_RTF_CONTROL_RE = re.compile(r"\\[a-zA-Z]+\d*")
_EMBED_RE = re.compile(r"EMBED\s+\w+", re.IGNORECASE)
_HYPERLINK_RE = re.compile(r'HYPERLINK\s+"[^"]*"', re.IGNORECASE)
_HORIZONTAL_WS_RE = re.compile(r" {2,}")
_BLANK_RUN_RE = re.compile(r"\n{3,}")

# Word/OLE2 leftovers
_WORD_FIELD_CODE_RE = re.compile(r"\bw[NWTF]\b", re.IGNORECASE)
_WORD_NUMBERED_CODE_RE = re.compile(r"\bw\d+\b", re.IGNORECASE)
_WORD_ANY_FIELD_CODE_RE = re.compile(r"\bw[nwtf]\d*\b", re.IGNORECASE)
_FONT_CODE_RE = re.compile(r'\\f"', re.IGNORECASE)
_STYLE_MARKER_RE = re.compile(r"\\s\d+", re.IGNORECASE)
_MERGEFORMAT_RE = re.compile(r"\*MERGEFORMAT", re.IGNORECASE)
_FIELD_FUNCTION_RE = re.compile(r"\b(?:HYPERLINK|REF|TOC|PAGEREF)\b", re.IGNORECASE)
_FIELD_CODE_BLOCK_RE = re.compile(r"\{\s*\\[^}]*\}")
_BJBJ_RE = re.compile(r"bjbj\S*", re.IGNORECASE)
_FORMATTING_CODES_RE = re.compile(r'\\f"|\\s\d+|\*MERGEFORMAT', re.IGNORECASE)
_METADATA_RUN_RE = re.compile(r"^[A-Z]{20,}")
_NON_PRINTABLE_KEEP_WS_RE = re.compile(r"[^\x20-\x7E\n\t]")
_SPACES_TABS_RE = re.compile(r"[ \t]+")


class ContentQuality(BaseModel):
    is_valid: bool
    issues: list[str] = Field(default_factory=list)
    cleaned_content: str
    confidence: int = Field(ge=0, le=100)


def _clean_pass(text: str) -> str:
    text = _HTML_TAG_RE.sub("", text)
    for entity, replacement in _HTML_ENTITIES:
        text = text.replace(entity, replacement)
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = _NON_PRINTABLE_RE.sub(" ", text)
    text = _FIELD_BLOCK_RE.sub("", text)
    text = _RTF_CONTROL_RE.sub("", text)
    text = _EMBED_RE.sub("", text)
    text = _HYPERLINK_RE.sub("", text)
    text = _HORIZONTAL_WS_RE.sub(" ", text)
    text = "\n".join(line.strip() for line in text.split("\n"))
    text = _BLANK_RUN_RE.sub("\n\n", text)
    return text.strip()


def sanitize_content(raw: str) -> str:
    """Strip markup and binary noise from resume text.

    Each pass can expose new markup (``&lt;b&gt;`` decodes to a tag), so the
    clean-up runs until the text stops changing. Every pass after the first
    only removes characters, which bounds the loop.
    """
    if not isinstance(raw, str) or not raw:
        return NO_CONTENT_PLACEHOLDER

    text = raw
    while True:
        cleaned = _clean_pass(text)
        if cleaned == text:
            break
        text = cleaned
    return text or NO_CONTENT_PLACEHOLDER


def sanitize_resume_content(content: str) -> str:
    """Remove Word field codes and binary artifacts, keeping line structure."""
    if not isinstance(content, str) or not content:
        return ""

    text = _WORD_FIELD_CODE_RE.sub("", content)
    text = _WORD_NUMBERED_CODE_RE.sub("", text)
    text = _FONT_CODE_RE.sub("", text)
    text = _STYLE_MARKER_RE.sub("", text)
    text = _MERGEFORMAT_RE.sub("", text)
    text = _FIELD_FUNCTION_RE.sub("", text)
    text = _FIELD_CODE_BLOCK_RE.sub("", text)
    text = _BJBJ_RE.sub("", text)
    text = text.replace("\x00", " ")
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = _NON_PRINTABLE_KEEP_WS_RE.sub(" ", text)
    text = _SPACES_TABS_RE.sub(" ", text)
    text = "\n".join(line.strip() for line in text.split("\n"))
    text = _BLANK_RUN_RE.sub("\n\n", text)
    return text.strip()


def contains_binary_artifacts(text: str) -> bool:
    if not text:
        return False
    lowered = text.lower()
    return (
        "bjbj" in lowered
        or bool(_WORD_FIELD_CODE_RE.search(text))
        or bool(_WORD_NUMBERED_CODE_RE.search(text))
        or "\x00" in text
        or "ole2" in lowered
        or "compound" in lowered
        or bool(_FONT_CODE_RE.search(text))
        or bool(_MERGEFORMAT_RE.search(text))
        or bool(_METADATA_RUN_RE.match(text))
    )


def validate_content_quality(content: str) -> ContentQuality:
    content = content if isinstance(content, str) else ""
    issues: list[str] = []
    cleaned = sanitize_resume_content(content)

    if "bjbj" in content:
        issues.append("Contains Word binary artifacts (bjbj)")
    if _WORD_ANY_FIELD_CODE_RE.search(content):
        issues.append("Contains Word field codes (wN, wW, etc.)")
    if "\x00" in content:
        issues.append("Contains null bytes")
    if _FORMATTING_CODES_RE.search(content):
        issues.append("Contains Word formatting codes")
    if len(cleaned) < 100:
        issues.append("Content too short after cleaning")
    if len(cleaned) < len(content) * 0.3:
        issues.append("Significant content lost during cleaning (possible heavy corruption)")

    corruption_ratio = (len(content) - len(cleaned)) / len(content) if content else 1.0
    confidence = max(0.0, 100 - corruption_ratio * 100 - len(issues) * 10)

    return ContentQuality(
        is_valid=not issues and len(cleaned) >= 100,
        issues=issues,
        cleaned_content=cleaned,
        confidence=min(100, int(confidence + 0.5)),
    )


def is_valid_content_line(line: str) -> bool:
    trimmed = line.strip()
    if not trimmed:
        return True
    if contains_binary_artifacts(trimmed):
        return False
    if _WORD_ANY_FIELD_CODE_RE.search(trimmed):
        return False
    readable = sum(1 for ch in trimmed if "\x20" <= ch <= "\x7e")
    return readable / len(trimmed) > 0.7


def sanitize_for_editor(content: str) -> str:
    """Stricter clean-up for text shown in an editor: drops corrupted lines."""
    sanitized = sanitize_resume_content(content)
    kept = [line for line in sanitized.split("\n") if is_valid_content_line(line)]
    return _BLANK_RUN_RE.sub("\n\n", "\n".join(kept)).strip()
