from .blocks import parse_education_blocks, parse_experience_blocks, parse_skills_list
from .classifier import identify_section_type, parse_header_data
from .parser import parse_resume_to_structured

__all__ = [
    "identify_section_type",
    "parse_header_data",
    "parse_experience_blocks",
    "parse_education_blocks",
    "parse_skills_list",
    "parse_resume_to_structured",
]
