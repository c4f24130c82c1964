"""Rule-based job description analysis."""

from resume_builder.analysis.extractor import (
    JobInputError,
    SkillSplit,
    analyze_job,
    determine_experience_level,
    extract_keywords,
    extract_qualifications,
    extract_responsibilities,
    extract_skills,
)

__all__ = [
    "JobInputError",
    "SkillSplit",
    "analyze_job",
    "determine_experience_level",
    "extract_keywords",
    "extract_qualifications",
    "extract_responsibilities",
    "extract_skills",
]
