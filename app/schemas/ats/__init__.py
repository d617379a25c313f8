from .resume_data import (
    AdditionalInfo,
    Award,
    Certificate,
    EducationEntry,
    ExperienceEntry,
    Interests,
    LanguageEntry,
    PersonalInfo,
    Project,
    Publication,
    ResumeData,
    Skills,
    Summary,
    VolunteeringEntry,
)
from .score import ATSCheck, ATSChecks, ATSScoreResult
from .structured import (
    ContactInfo,
    EducationBlock,
    EducationContent,
    ExperienceBlock,
    ExperienceContent,
    HeaderContent,
    HeaderData,
    ListContent,
    ParagraphContent,
    ResumeSection,
    SectionContent,
    StructuredResume,
)

__all__ = [
    "PersonalInfo",
    "Summary",
    "ExperienceEntry",
    "EducationEntry",
    "Skills",
    "Certificate",
    "Project",
    "LanguageEntry",
    "VolunteeringEntry",
    "Award",
    "Publication",
    "Interests",
    "AdditionalInfo",
    "ResumeData",
    "ATSCheck",
    "ATSChecks",
    "ATSScoreResult",
    "ContactInfo",
    "HeaderData",
    "ExperienceBlock",
    "EducationBlock",
    "HeaderContent",
    "ParagraphContent",
    "ListContent",
    "ExperienceContent",
    "EducationContent",
    "SectionContent",
    "ResumeSection",
    "StructuredResume",
]
