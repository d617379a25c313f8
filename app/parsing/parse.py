from __future__ import annotations

import hashlib
import logging
from pathlib import Path
from zipfile import BadZipFile

from docx import Document
from docx.opc.exceptions import PackageNotFoundError
from pypdf import PdfReader
from pypdf.errors import PdfReadError

from .doc_binary import DocExtractionError, extract_doc_text
from .models import ParsedBlock, ParsedDoc

logger = logging.getLogger(__name__)


def _compute_doc_id(text: str, file_path: Path) -> str:
    seed = text if text.strip() else file_path.name
    digest = hashlib.sha256(seed.encode("utf-8", errors="ignore")).hexdigest()
    return digest[:16]


def _parse_txt(file_path: Path) -> tuple[str, list[ParsedBlock], list[str]]:
    text = file_path.read_text(encoding="utf-8", errors="replace")
    return text, [], []


def _parse_pdf(file_path: Path) -> tuple[str, list[ParsedBlock], list[str]]:
    warnings: list[str] = []
    blocks: list[ParsedBlock] = []

    try:
        reader = PdfReader(str(file_path))
        text_parts: list[str] = []
        for index, page in enumerate(reader.pages, start=1):
            page_text = (page.extract_text() or "").strip()
            if page_text:
                text_parts.append(page_text)
                blocks.append(ParsedBlock(page=index, text=page_text))
    except (PdfReadError, OSError, ValueError) as exc:
        logger.warning("pdf_parse_failed file=%s: %s", file_path.name, exc)
        warnings.append(f"PDF parsing failed: {exc}")
        return "", blocks, warnings

    if not text_parts:
        warnings.append("No extractable text found in PDF.")
    return "\n".join(text_parts), blocks, warnings


def _parse_docx(file_path: Path) -> tuple[str, list[ParsedBlock], list[str]]:
    warnings: list[str] = []
    blocks: list[ParsedBlock] = []

    try:
        document = Document(str(file_path))
    except (PackageNotFoundError, BadZipFile, OSError, KeyError) as exc:
        logger.warning("docx_parse_failed file=%s: %s", file_path.name, exc)
        warnings.append(f"DOCX parsing failed: {exc}")
        return "", blocks, warnings

    paragraphs = [p.text.strip() for p in document.paragraphs if p.text and p.text.strip()]
    for paragraph_text in paragraphs:
        blocks.append(ParsedBlock(page=None, text=paragraph_text))
    if not paragraphs:
        warnings.append("No extractable text found in DOCX.")
    return "\n".join(paragraphs), blocks, warnings


def _parse_doc(file_path: Path) -> tuple[str, list[ParsedBlock], list[str]]:
    warnings = ["Text extracted using binary parsing method. Some formatting may be lost."]
    try:
        text = extract_doc_text(file_path.read_bytes())
    except DocExtractionError as exc:
        warnings.append(str(exc))
        return "", [], warnings
    return text, [ParsedBlock(page=None, text=text)], warnings


_PARSERS = {
    ".txt": ("txt", _parse_txt),
    ".pdf": ("pdf", _parse_pdf),
    ".docx": ("docx", _parse_docx),
    ".doc": ("doc", _parse_doc),
}


def parse_document(file_path: str | Path) -> ParsedDoc:
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Input document not found: '{path}'")

    extension = path.suffix.lower()
    if extension not in _PARSERS:
        raise NotImplementedError(
            f"Unsupported file type '{extension}'. Supported types: {', '.join(_PARSERS)}"
        )

    source_type, parser = _PARSERS[extension]
    text, blocks, warnings = parser(path)
    logger.info(
        "document_parsed file=%s type=%s chars=%s warnings=%s",
        path.name,
        source_type,
        len(text),
        len(warnings),
    )
    return ParsedDoc(
        doc_id=_compute_doc_id(text=text, file_path=path),
        source_type=source_type,
        text=text,
        blocks=blocks,
        parsing_warnings=warnings,
    )
