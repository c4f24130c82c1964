"""Parse LLM resume drafts into ``GeneratedResume`` documents.

Parsing yields a tagged result: ``Parsed`` when the response holds a JSON
object that validates against the resume schema, ``Unparseable`` otherwise.
The unparseable arm is turned into a placeholder document by
``build_fallback_resume``.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import ValidationError

from resume_builder.models.job import JobAnalysis
from resume_builder.models.resume import (
    EducationItem,
    ExperienceItem,
    GeneratedResume,
    PersonalInfo,
    SkillGroup,
)
from resume_builder.utils.json_parser import extract_first_object

FALLBACK_SUMMARY_CHARS = 300
FALLBACK_SKILL_COUNT = 8

# Prefix used for positional identifiers of each collection
ID_PREFIXES: dict[str, str] = {
    "experience": "exp",
    "education": "edu",
    "skills": "skill",
    "projects": "project",
    "certifications": "cert",
}


@dataclass(frozen=True)
class Parsed:
    resume: GeneratedResume


@dataclass(frozen=True)
class Unparseable:
    raw_text: str
    reason: str


ParseResult = Parsed | Unparseable


def parse_resume_response(text: str) -> ParseResult:
    """Extract and validate the first JSON object in an LLM response."""
    try:
        data = extract_first_object(text)
    except ValueError as e:
        return Unparseable(raw_text=text, reason=str(e))

    try:
        resume = GeneratedResume.model_validate(data)
    except ValidationError as e:
        return Unparseable(raw_text=text, reason=f"Schema mismatch: {e.error_count()} errors")
    return Parsed(resume=resume)


def build_fallback_resume(
    raw_text: str,
    analysis: JobAnalysis,
    job_title: str = "",
    company_name: str = "",
) -> GeneratedResume:
    """Build a placeholder resume around an unparseable LLM response."""
    return GeneratedResume(
        personal_info=PersonalInfo(
            name="Your Name",
            email="your.email@example.com",
            phone="+1-XXX-XXX-XXXX",
            location="City, State",
            linkedin="linkedin.com/in/yourname",
            website="yourwebsite.com",
            title=job_title,
        ),
        professional_summary=raw_text[:FALLBACK_SUMMARY_CHARS] + "...",
        experience=[
            ExperienceItem(
                company=company_name or "Previous Company",
                position="Relevant Position",
                start_date="01/2020",
                end_date="Present",
                location="City, State",
                description="Relevant experience description",
                achievements=["Achievement 1", "Achievement 2"],
            )
        ],
        education=[
            EducationItem(
                institution="University Name",
                degree="Bachelor of Science",
                field="Relevant Field",
                start_date="09/2016",
                end_date="05/2020",
                gpa="3.5/4.0",
            )
        ],
        skills=[
            SkillGroup(
                category="Technical Skills",
                items=list(analysis.required_skills[:FALLBACK_SKILL_COUNT]),
                proficiency="Advanced",
            )
        ],
        projects=[],
        certifications=[],
        achievements=[],
    )


def assign_identifiers(resume: GeneratedResume) -> GeneratedResume:
    """Return a copy whose collection items carry ``<kind>-<n>`` ids.

    Ids are positional: regenerating a collection reassigns them.
    """
    updates: dict[str, list] = {}
    for field_name, prefix in ID_PREFIXES.items():
        updates[field_name] = [
            item.model_copy(update={"id": f"{prefix}-{index}"})
            for index, item in enumerate(getattr(resume, field_name), start=1)
        ]
    return resume.model_copy(update=updates)
