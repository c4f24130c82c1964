"""Pydantic models for generated resumes and their stored form."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class _ResumeModel(BaseModel):
    # Wire format (LLM JSON, stored items) is camelCase
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


class PersonalInfo(_ResumeModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""
    website: str = ""
    title: str = ""


class ExperienceItem(_ResumeModel):
    id: str = ""
    company: str = ""
    position: str = ""
    start_date: str = ""
    end_date: str = ""
    location: str = ""
    description: str = ""
    achievements: list[str] = Field(default_factory=list)


class EducationItem(_ResumeModel):
    id: str = ""
    institution: str = ""
    degree: str = ""
    field: str = ""
    start_date: str = ""
    end_date: str = ""
    gpa: str | None = None
    honors: str | None = None


class SkillGroup(_ResumeModel):
    id: str = ""
    category: str = ""
    items: list[str] = Field(default_factory=list)
    proficiency: str = "Intermediate"  # Beginner | Intermediate | Advanced | Expert


class ProjectItem(_ResumeModel):
    id: str = ""
    name: str = ""
    description: str = ""
    technologies: list[str] = Field(default_factory=list)
    link: str | None = None
    duration: str = ""


class CertificationItem(_ResumeModel):
    id: str = ""
    name: str = ""
    issuer: str = ""
    date: str = ""
    expiry_date: str | None = None


class GeneratedResume(_ResumeModel):
    """Resume document drafted for a single job posting."""

    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    professional_summary: str = ""
    experience: list[ExperienceItem] = Field(default_factory=list)
    education: list[EducationItem] = Field(default_factory=list)
    skills: list[SkillGroup] = Field(default_factory=list)
    projects: list[ProjectItem] = Field(default_factory=list)
    certifications: list[CertificationItem] = Field(default_factory=list)
    achievements: list[str] = Field(default_factory=list)

    @field_validator(
        "experience",
        "education",
        "skills",
        "projects",
        "certifications",
        "achievements",
        mode="before",
    )
    @classmethod
    def _null_section_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    def to_record(self) -> ResumeRecord:
        """Rename fields into the resume store's document shape."""
        return ResumeRecord(
            personal_info=self.personal_info.model_dump(by_alias=True),
            summary=self.professional_summary,
            experience=SectionItems(items=_dump_items(self.experience)),
            education=SectionItems(items=_dump_items(self.education)),
            skills=SectionItems(items=_dump_items(self.skills)),
            projects=SectionItems(items=_dump_items(self.projects)),
            custom_sections={
                "certifications": _dump_items(self.certifications),
                "achievements": list(self.achievements),
            },
        )


class SectionItems(BaseModel):
    items: list[dict[str, Any]] = Field(default_factory=list)


class ResumeRecord(BaseModel):
    """Resume document in the shape the resume store persists."""

    personal_info: dict[str, Any] = Field(default_factory=dict)
    summary: str = ""
    experience: SectionItems = Field(default_factory=SectionItems)
    education: SectionItems = Field(default_factory=SectionItems)
    skills: SectionItems = Field(default_factory=SectionItems)
    projects: SectionItems = Field(default_factory=SectionItems)
    custom_sections: dict[str, Any] = Field(default_factory=dict)

    def to_resume(self) -> GeneratedResume:
        """Inverse of GeneratedResume.to_record()."""
        return GeneratedResume(
            personal_info=PersonalInfo.model_validate(self.personal_info),
            professional_summary=self.summary,
            experience=self.experience.items,
            education=self.education.items,
            skills=self.skills.items,
            projects=self.projects.items,
            certifications=self.custom_sections.get("certifications", []),
            achievements=self.custom_sections.get("achievements", []),
        )


def _dump_items(items: list[BaseModel]) -> list[dict[str, Any]]:
    return [item.model_dump(by_alias=True) for item in items]
