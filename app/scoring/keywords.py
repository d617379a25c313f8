from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

DEFAULT_INDUSTRY = "Business"

INDUSTRY_KEYWORDS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "Technology": (
            "software",
            "development",
            "programming",
            "api",
            "database",
            "sql",
            "cloud",
            "react",
            "node.js",
            "javascript",
            "agile",
        ),
        "Healthcare": (
            "patient",
            "medical",
            "clinical",
            "healthcare",
            "treatment",
            "diagnosis",
            "therapy",
            "care",
            "health",
            "medical records",
            "compliance",
            "safety",
            "protocol",
        ),
        "Finance": (
            "financial",
            "analysis",
            "investment",
            "portfolio",
            "risk",
            "compliance",
            "audit",
            "accounting",
            "budget",
            "revenue",
            "profit",
            "cost",
            "roi",
            "market",
        ),
        "Creative": (
            "design",
            "creative",
            "visual",
            "brand",
            "marketing",
            "campaign",
            "content",
            "creative direction",
            "art",
            "graphic",
            "user experience",
            "interface",
        ),
        "Business": (
            "management",
            "leadership",
            "strategy",
            "operations",
            "business development",
            "sales",
            "client",
            "team",
            "project",
            "growth",
            "efficiency",
            "process",
        ),
        "Research": (
            "research",
            "analysis",
            "data",
            "study",
            "methodology",
            "publication",
            "peer review",
            "grant",
            "experiment",
            "hypothesis",
            "findings",
            "academic",
        ),
    }
)

ACTION_VERBS: tuple[str, ...] = (
    "led",
    "managed",
    "developed",
    "created",
    "implemented",
    "improved",
    "increased",
    "decreased",
    "optimized",
    "achieved",
    "delivered",
    "designed",
    "built",
    "launched",
    "coordinated",
    "supervised",
    "analyzed",
    "established",
    "streamlined",
)

BULLET_MARKERS: tuple[str, ...] = ("•", "-", "*")

# percentage, dollar amount, bare number (optional k/m suffix), multiplier, ratio
METRIC_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\d+%"),
    re.compile(r"\$[\d,]+"),
    re.compile(r"\d+[km]?\+?"),
    re.compile(r"\d+x"),
    re.compile(r"\d+:\d+"),
)


def list_industries(keyword_table: Mapping[str, tuple[str, ...]] | None = None) -> list[str]:
    return list((keyword_table or INDUSTRY_KEYWORDS).keys())


def resolve_industry(
    industry: str | None,
    keyword_table: Mapping[str, tuple[str, ...]] | None = None,
) -> str:
    """Canonical industry label; unknown labels fall back to Business."""
    table = keyword_table or INDUSTRY_KEYWORDS
    wanted = (industry or "").strip().lower()
    for label in table:
        if label.lower() == wanted:
            return label
    if DEFAULT_INDUSTRY in table:
        return DEFAULT_INDUSTRY
    return next(iter(table))


def count_metrics(text: str) -> int:
    return sum(len(pattern.findall(text)) for pattern in METRIC_PATTERNS)


def has_metric(text: str) -> bool:
    return any(pattern.search(text) for pattern in METRIC_PATTERNS)
