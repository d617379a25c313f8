from .ats_score import calculate_ats_score
from .keywords import INDUSTRY_KEYWORDS, list_industries, resolve_industry

__all__ = [
    "calculate_ats_score",
    "INDUSTRY_KEYWORDS",
    "list_industries",
    "resolve_industry",
]
