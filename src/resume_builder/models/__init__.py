"""Data models for the resume builder."""

from resume_builder.models.job import DEFAULT_COMPANY_TYPE, ExperienceLevel, JobAnalysis
from resume_builder.models.resume import (
    CertificationItem,
    EducationItem,
    ExperienceItem,
    GeneratedResume,
    PersonalInfo,
    ProjectItem,
    ResumeRecord,
    SectionItems,
    SkillGroup,
)

__all__ = [
    "DEFAULT_COMPANY_TYPE",
    "CertificationItem",
    "EducationItem",
    "ExperienceItem",
    "ExperienceLevel",
    "GeneratedResume",
    "JobAnalysis",
    "PersonalInfo",
    "ProjectItem",
    "ResumeRecord",
    "SectionItems",
    "SkillGroup",
]
