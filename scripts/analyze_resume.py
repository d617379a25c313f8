from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.core.config import settings  # noqa: E402
from app.services.resume_service import (  # noqa: E402
    InsufficientTextError,
    analyze_resume_text,
    extract_resume_text,
)


def _print_summary(analysis, warnings: list[str]) -> None:
    print(f"Quality confidence: {analysis.quality.confidence}")
    for issue in analysis.quality.issues:
        print(f"  issue: {issue}")
    for warning in warnings:
        print(f"  warning: {warning}")
    for section in analysis.structured.sections:
        content = section.content
        if content.type == "header":
            print(f"[header] {content.data.name} <{content.data.contact.email}>")
        elif content.type in {"experience_block", "education_block", "list"}:
            print(f"[{section.type}] {section.title}: {len(content.data)} item(s)")
        else:
            print(f"[{section.type}] {section.title}: {len(content.data)} chars")


def main() -> int:
    parser = argparse.ArgumentParser(description="Extract and structure a resume document.")
    parser.add_argument("path", help="Resume file (.txt, .pdf, .docx or .doc)")
    parser.add_argument("--json", action="store_true", help="Print the structured resume as JSON.")
    args = parser.parse_args()

    logging.basicConfig(level=settings.log_level, format="%(message)s")

    try:
        extracted = extract_resume_text(args.path)
    except InsufficientTextError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    except (FileNotFoundError, NotImplementedError) as exc:
        print(str(exc), file=sys.stderr)
        return 1

    analysis = analyze_resume_text(extracted.text)
    if args.json:
        print(json.dumps(analysis.structured.model_dump(), indent=2))
    else:
        _print_summary(analysis, extracted.warnings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
