"""
Best-effort text recovery for legacy Word ``.doc`` (OLE2) files.

There is no real format decoding here: the file is scanned for runs of
printable ASCII and the runs that look like words are kept. Formatting,
tables and non-ASCII text are lost.
"""
from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

MIN_DOC_TEXT_CHARS = 50

_MIN_RUN_LENGTH = 3
_WHITESPACE_RE = re.compile(r"\s+")
_SPECIAL_CHARS_RE = re.compile(r"[^\w\s@.-]")
_DIGITS_ONLY_RE = re.compile(r"^\d+$")
_HAS_LETTER_RE = re.compile(r"[A-Za-z]")
_METADATA_MARKERS = ("microsoft", "windows", "ole2", "compound")


class DocExtractionError(ValueError):
    pass


def _printable_runs(data: bytes) -> list[str]:
    runs: list[str] = []
    current = bytearray()
    for byte in data:
        if 32 <= byte <= 126:
            current.append(byte)
            continue
        if len(current) >= _MIN_RUN_LENGTH:
            runs.append(current.decode("ascii"))
        current.clear()
    if len(current) >= _MIN_RUN_LENGTH:
        runs.append(current.decode("ascii"))
    return runs


def _keep_word(word: str) -> bool:
    lowered = word.lower()
    if any(marker in lowered for marker in _METADATA_MARKERS):
        return False
    if len(word) <= 1:
        return False
    if _DIGITS_ONLY_RE.match(word):
        return False
    return bool(_HAS_LETTER_RE.search(word))


def extract_doc_text(data: bytes) -> str:
    """Recover readable words from a binary ``.doc`` payload.

    Raises ``DocExtractionError`` when fewer than 50 characters survive.
    """
    text = " ".join(_printable_runs(data))
    text = _WHITESPACE_RE.sub(" ", text)
    text = _SPECIAL_CHARS_RE.sub(" ", text).strip()
    words = [word for word in text.split(" ") if word and _keep_word(word)]
    extracted = " ".join(words)

    if len(extracted) < MIN_DOC_TEXT_CHARS:
        raise DocExtractionError(
            "Unable to extract meaningful text from this .doc file. The file may be corrupted, "
            "password-protected, or use an unsupported format."
        )

    logger.info("doc_binary_extracted chars=%s words=%s", len(extracted), len(words))
    return extracted
