"""Resume Generator - drafts a complete resume from a job analysis."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass

from resume_builder.clients.llm_client import LLMClient, LLMResponse, section_system_prompt
from resume_builder.models.job import JobAnalysis
from resume_builder.models.resume import GeneratedResume, ResumeRecord
from resume_builder.pipeline.response_parser import (
    Parsed,
    assign_identifiers,
    build_fallback_resume,
    parse_resume_response,
)

logger = logging.getLogger(__name__)

RESUME_SECTION = "resume"

RESUME_JSON_SHAPE = """\
{
  "personalInfo": {
    "name": "Professional Name",
    "email": "email@example.com",
    "phone": "+1-XXX-XXX-XXXX",
    "location": "City, State",
    "linkedin": "linkedin.com/in/username",
    "website": "portfolio-website.com",
    "title": "Professional Title matching the job"
  },
  "professionalSummary": "3-4 sentence compelling summary tailored to the job",
  "experience": [
    {
      "company": "Company Name",
      "position": "Job Title",
      "startDate": "MM/YYYY",
      "endDate": "MM/YYYY or Present",
      "location": "City, State",
      "description": "Brief role description",
      "achievements": ["Quantified achievement 1", "Quantified achievement 2"]
    }
  ],
  "education": [
    {
      "institution": "University Name",
      "degree": "Degree Type",
      "field": "Field of Study",
      "startDate": "MM/YYYY",
      "endDate": "MM/YYYY",
      "gpa": "3.X/4.0",
      "honors": "Cum Laude, Dean's List, etc."
    }
  ],
  "skills": [
    {
      "category": "Technical Skills",
      "items": ["skill1", "skill2"],
      "proficiency": "Advanced"
    }
  ],
  "projects": [
    {
      "name": "Project Name",
      "description": "Project description with impact",
      "technologies": ["tech1", "tech2"],
      "link": "github.com/project",
      "duration": "MM/YYYY - MM/YYYY"
    }
  ],
  "certifications": [
    {
      "name": "Certification Name",
      "issuer": "Issuing Organization",
      "date": "MM/YYYY",
      "expiryDate": "MM/YYYY"
    }
  ],
  "achievements": ["Professional achievement 1", "Professional achievement 2"]
}"""


def build_prompt(
    job_title: str,
    company_name: str,
    company_industry: str,
    experience_level: str,
    analysis: JobAnalysis,
    user_background: str,
    existing_resume: ResumeRecord | None = None,
) -> str:
    """Render the resume generation prompt. Pure and deterministic."""
    existing_block = ""
    if existing_resume is not None:
        existing_block = f"""
EXISTING RESUME DATA TO ENHANCE:
- Current Summary: {existing_resume.summary}
- Current Experience: {json.dumps(existing_resume.experience.items, ensure_ascii=False)}
- Current Skills: {json.dumps(existing_resume.skills.items, ensure_ascii=False)}
"""

    return f"""Generate a complete professional resume based on the following job analysis and user information:

JOB INFORMATION:
- Position: {job_title}
- Company: {company_name}
- Industry: {company_industry}
- Experience Level: {experience_level}

JOB ANALYSIS:
- Required Skills: {', '.join(analysis.required_skills)}
- Preferred Skills: {', '.join(analysis.preferred_skills)}
- Key Responsibilities: {'; '.join(analysis.key_responsibilities)}
- Qualifications: {'; '.join(analysis.qualifications)}
- Industry Keywords: {', '.join(analysis.industry_keywords)}
- Detected Experience Level: {analysis.experience_level}
- Company Type: {analysis.company_type}

USER BACKGROUND:
{user_background}
{existing_block}
Please generate a complete resume in JSON format with the following structure:
{RESUME_JSON_SHAPE}

IMPORTANT REQUIREMENTS:
1. Tailor all content specifically to the {job_title} position
2. Include relevant keywords from the job analysis naturally
3. Quantify achievements with metrics where possible
4. Match the experience level ({experience_level})
5. Ensure ATS compatibility
6. Make it compelling and professional
7. If enhancing an existing resume, revise and expand its content rather than inventing new history
8. Generate realistic content that aligns with the user background
9. Ensure all dates are realistic and consistent
10. Include industry-specific terminology and skills

Return ONLY the JSON object, no additional text or formatting."""


@dataclass
class GenerationOutcome:
    """A generated resume plus how it was obtained."""

    resume: GeneratedResume
    used_fallback: bool
    raw_text: str
    model: str = ""
    input_tokens: int = 0
    output_tokens: int = 0


@dataclass
class SectionDraft:
    """Drafted text for one section plus the usage of its LLM call."""

    content: str
    model: str = ""
    input_tokens: int = 0
    output_tokens: int = 0


class ResumeGenerator:
    def __init__(
        self,
        llm: LLMClient,
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int = 8192,
    ):
        self.llm = llm
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    async def draft(
        self,
        prompt: str,
        analysis: JobAnalysis,
        *,
        job_title: str = "",
        company_name: str = "",
    ) -> GenerationOutcome:
        """Generate a resume and report whether the fallback document was used.

        Errors from the LLM call propagate; unparseable responses never do.
        """
        response = await self._complete(RESUME_SECTION, prompt)
        raw_text = response.text

        result = parse_resume_response(raw_text)
        if isinstance(result, Parsed):
            resume = result.resume
            used_fallback = False
        else:
            logger.warning("Unparseable resume response, using fallback: %s", result.reason)
            resume = build_fallback_resume(
                result.raw_text,
                analysis,
                job_title=job_title,
                company_name=company_name,
            )
            used_fallback = True

        return GenerationOutcome(
            resume=assign_identifiers(resume),
            used_fallback=used_fallback,
            raw_text=raw_text,
            model=response.model,
            input_tokens=response.input_tokens,
            output_tokens=response.output_tokens,
        )

    async def generate(
        self,
        prompt: str,
        analysis: JobAnalysis,
        *,
        job_title: str = "",
        company_name: str = "",
    ) -> GeneratedResume:
        """Generate a resume document from a prepared prompt."""
        outcome = await self.draft(
            prompt,
            analysis,
            job_title=job_title,
            company_name=company_name,
        )
        return outcome.resume

    async def draft_section(self, section: str, context: str) -> SectionDraft:
        """Draft free text for a single resume section (e.g. ``summary``)."""
        response = await self._complete(section, context)
        return SectionDraft(
            content=response.text.strip(),
            model=response.model,
            input_tokens=response.input_tokens,
            output_tokens=response.output_tokens,
        )

    async def _complete(self, section: str, prompt: str) -> LLMResponse:
        # Token usage is reported per response
        return await self.llm.generate(
            prompt,
            system=section_system_prompt(section),
            model=self.model,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )


def apply_section(resume: GeneratedResume, section: str, content: str) -> GeneratedResume:
    """Return a copy of ``resume`` with drafted section content written in."""
    if section == "summary":
        return resume.model_copy(update={"professional_summary": content})
    if section == "achievements":
        lines = [line.strip().lstrip("-•* ").strip() for line in content.splitlines()]
        return resume.model_copy(update={"achievements": [line for line in lines if line]})
    raise ValueError(f"Unsupported section: {section}")
