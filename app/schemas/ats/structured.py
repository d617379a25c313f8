from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

SectionType = Literal["header", "summary", "experience", "education", "skills", "other"]


class ContactInfo(BaseModel):
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""
    website: str = ""


class HeaderData(BaseModel):
    name: str = ""
    title: str = ""
    contact: ContactInfo = Field(default_factory=ContactInfo)


class ExperienceBlock(BaseModel):
    title: str
    company: str = ""
    location: str | None = None
    dates: str = ""
    responsibilities: list[str] = Field(default_factory=list)


class EducationBlock(BaseModel):
    degree: str
    institution: str = ""
    location: str | None = None
    dates: str = ""
    details: list[str] = Field(default_factory=list)


class HeaderContent(BaseModel):
    type: Literal["header"] = "header"
    data: HeaderData


class ParagraphContent(BaseModel):
    type: Literal["paragraph"] = "paragraph"
    data: str = ""


class ListContent(BaseModel):
    type: Literal["list"] = "list"
    data: list[str] = Field(default_factory=list)


class ExperienceContent(BaseModel):
    type: Literal["experience_block"] = "experience_block"
    data: list[ExperienceBlock] = Field(default_factory=list)


class EducationContent(BaseModel):
    type: Literal["education_block"] = "education_block"
    data: list[EducationBlock] = Field(default_factory=list)


SectionContent = Annotated[
    Union[HeaderContent, ParagraphContent, ListContent, ExperienceContent, EducationContent],
    Field(discriminator="type"),
]


class ResumeSection(BaseModel):
    id: str
    type: SectionType
    title: str
    content: SectionContent


class StructuredResume(BaseModel):
    sections: list[ResumeSection] = Field(default_factory=list)

    def section(self, section_type: str) -> ResumeSection | None:
        """First section of the given type, if any."""
        for item in self.sections:
            if item.type == section_type:
                return item
        return None
