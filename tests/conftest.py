"""Shared test fixtures."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from resume_builder.clients.llm_client import LLMClient, LLMResponse
from resume_builder.models.job import JobAnalysis
from resume_builder.models.resume import (
    EducationItem,
    ExperienceItem,
    GeneratedResume,
    PersonalInfo,
    ProjectItem,
    SkillGroup,
)


@pytest.fixture
def sample_jd_text() -> str:
    return """Senior Backend Engineer

About us:
We build the services behind a payments platform.

Responsibilities:
- Design and implement RESTful APIs in Python
- Maintain PostgreSQL schemas and query performance
- Collaborate with product managers on roadmap planning
- Mentor engineers through code review

Requirements:
- 5+ years of backend development with Python
- Strong SQL and PostgreSQL experience
- Experience with Docker and AWS
- Excellent communication skills

Preferred:
- Kubernetes in production
- Experience with Jira and Confluence

Benefits:
- Remote friendly
"""


@pytest.fixture
def sample_background() -> str:
    return """Jane Doe, backend developer with 6 years of experience.
Acme Corp (2019 - present): built Python microservices on AWS, cut p95 latency by 40%.
Startup Inc (2017 - 2019): Django and PostgreSQL development.
B.Sc. Computer Science, State University, 2017."""


@pytest.fixture
def sample_job_analysis() -> JobAnalysis:
    return JobAnalysis(
        required_skills=("python", "sql", "postgresql", "docker", "aws", "communication"),
        preferred_skills=("kubernetes", "jira", "confluence"),
        key_responsibilities=(
            "Design and implement RESTful APIs in Python",
            "Maintain PostgreSQL schemas and query performance",
        ),
        qualifications=("5+ years of backend development with Python",),
        industry_keywords=("python", "postgresql", "experience", "design"),
        experience_level="Senior",
        company_type="Fintech",
    )


@pytest.fixture
def sample_generated_resume() -> GeneratedResume:
    return GeneratedResume(
        personal_info=PersonalInfo(
            name="Jane Doe",
            email="jane@example.com",
            phone="+1-555-0100",
            location="Austin, TX",
            linkedin="linkedin.com/in/janedoe",
            website="janedoe.dev",
            title="Senior Backend Engineer",
        ),
        professional_summary="Backend engineer with six years of Python experience.",
        experience=[
            ExperienceItem(
                id="exp-1",
                company="Acme Corp",
                position="Backend Developer",
                start_date="03/2019",
                end_date="Present",
                location="Austin, TX",
                description="Payments services team",
                achievements=["Cut p95 latency by 40%"],
            ),
        ],
        education=[
            EducationItem(
                id="edu-1",
                institution="State University",
                degree="B.Sc.",
                field="Computer Science",
                start_date="09/2013",
                end_date="05/2017",
            ),
        ],
        skills=[
            SkillGroup(id="skill-1", category="Backend", items=["Python", "PostgreSQL"], proficiency="Expert"),
        ],
        projects=[
            ProjectItem(
                id="project-1",
                name="Ledger",
                description="Double-entry ledger service",
                technologies=["Python", "PostgreSQL"],
                duration="01/2022 - 06/2022",
            ),
        ],
        certifications=[],
        achievements=["Speaker at PyCon"],
    )


@pytest.fixture
def resume_json() -> str:
    return """{
  "personalInfo": {"name": "Jane Doe", "email": "jane@example.com", "phone": "+1-555-0100",
                   "location": "Austin, TX", "linkedin": "linkedin.com/in/janedoe",
                   "website": "janedoe.dev", "title": "Senior Backend Engineer"},
  "professionalSummary": "Backend engineer with six years of Python experience.",
  "experience": [
    {"company": "Acme Corp", "position": "Backend Developer", "startDate": "03/2019",
     "endDate": "Present", "location": "Austin, TX", "description": "Payments",
     "achievements": ["Cut p95 latency by 40%"]},
    {"company": "Startup Inc", "position": "Developer", "startDate": "01/2017",
     "endDate": "02/2019", "location": "Remote", "description": "Django apps",
     "achievements": []}
  ],
  "education": [
    {"institution": "State University", "degree": "B.Sc.", "field": "Computer Science",
     "startDate": "09/2013", "endDate": "05/2017", "gpa": "3.7/4.0"}
  ],
  "skills": [
    {"category": "Languages", "items": ["Python", "SQL"], "proficiency": "Expert"},
    {"category": "Cloud", "items": ["AWS", "Docker"], "proficiency": "Advanced"}
  ],
  "projects": [],
  "certifications": [
    {"name": "AWS Solutions Architect", "issuer": "Amazon", "date": "05/2021"}
  ],
  "achievements": ["Speaker at PyCon"]
}"""


@pytest.fixture
def mock_llm_client() -> LLMClient:
    """Create a mock LLM client."""
    client = AsyncMock(spec=LLMClient)
    client.generate = AsyncMock(
        return_value=LLMResponse(text="{}", input_tokens=100, output_tokens=50)
    )
    client.generate_content = AsyncMock(return_value="{}")
    return client


@pytest.fixture
def llm_reply(mock_llm_client):
    """Make every call on the mock client return ``text`` with fixed usage."""

    def _reply(text: str, input_tokens: int = 100, output_tokens: int = 50) -> LLMClient:
        mock_llm_client.generate = AsyncMock(
            return_value=LLMResponse(
                text=text,
                input_tokens=input_tokens,
                output_tokens=output_tokens,
                model="claude-sonnet-4-5-20250929",
            )
        )
        return mock_llm_client

    return _reply
