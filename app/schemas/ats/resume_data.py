from __future__ import annotations

from typing import Literal

from pydantic import Field, model_validator

from .base import CamelModel

LanguageProficiency = Literal["Beginner", "Intermediate", "Advanced", "Native"]


class PersonalInfo(CamelModel):
    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    website: str | None = None
    linkedin: str | None = None
    profile_picture: str | None = None


class Summary(CamelModel):
    content: str = ""


class ExperienceEntry(CamelModel):
    id: str = ""
    company: str = ""
    position: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    description: str = ""

    @model_validator(mode="after")
    def _clear_end_date_when_current(self) -> "ExperienceEntry":
        if self.current:
            self.end_date = ""
        return self


class EducationEntry(CamelModel):
    id: str = ""
    school: str = ""
    degree: str = ""
    field: str = ""
    start_date: str = ""
    end_date: str = ""
    gpa: str | None = None


class Skills(CamelModel):
    technical: list[str] = Field(default_factory=list)
    soft: list[str] = Field(default_factory=list)


class Certificate(CamelModel):
    id: str = ""
    name: str = ""
    issuer: str = ""
    issue_date: str = ""
    expiry_date: str | None = None
    credential_id: str | None = None
    credential_url: str | None = None


class Project(CamelModel):
    id: str = ""
    name: str = ""
    description: str = ""
    technologies: list[str] = Field(default_factory=list)
    start_date: str = ""
    end_date: str | None = None
    current: bool = False
    project_url: str | None = None
    github_url: str | None = None

    @model_validator(mode="after")
    def _clear_end_date_when_current(self) -> "Project":
        if self.current:
            self.end_date = None
        return self


class LanguageEntry(CamelModel):
    id: str = ""
    language: str = ""
    proficiency: LanguageProficiency = "Intermediate"


class VolunteeringEntry(CamelModel):
    id: str = ""
    organization: str = ""
    role: str = ""
    start_date: str = ""
    end_date: str | None = None
    current: bool = False
    description: str = ""

    @model_validator(mode="after")
    def _clear_end_date_when_current(self) -> "VolunteeringEntry":
        if self.current:
            self.end_date = None
        return self


class Award(CamelModel):
    id: str = ""
    title: str = ""
    issuer: str = ""
    date: str = ""
    description: str | None = None


class Publication(CamelModel):
    id: str = ""
    title: str = ""
    publisher: str = ""
    date: str = ""
    url: str | None = None
    description: str | None = None


class Interests(CamelModel):
    interests: list[str] = Field(default_factory=list)


class AdditionalInfo(CamelModel):
    content: str = ""


class ResumeData(CamelModel):
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    summary: Summary = Field(default_factory=Summary)
    experience: list[ExperienceEntry] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)
    skills: Skills = Field(default_factory=Skills)
    certificates: list[Certificate] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    languages: list[LanguageEntry] = Field(default_factory=list)
    volunteering: list[VolunteeringEntry] = Field(default_factory=list)
    awards: list[Award] = Field(default_factory=list)
    publications: list[Publication] = Field(default_factory=list)
    interests: Interests = Field(default_factory=Interests)
    additional_info: AdditionalInfo = Field(default_factory=AdditionalInfo)
