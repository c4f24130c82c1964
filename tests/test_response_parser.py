"""Tests for resume response parsing and the fallback document."""

from resume_builder.models.resume import GeneratedResume
from resume_builder.pipeline.response_parser import (
    Parsed,
    Unparseable,
    assign_identifiers,
    build_fallback_resume,
    parse_resume_response,
)


class TestParseResumeResponse:
    def test_valid_response(self, resume_json):
        result = parse_resume_response(resume_json)
        assert isinstance(result, Parsed)
        assert result.resume.personal_info.name == "Jane Doe"
        assert result.resume.experience[1].company == "Startup Inc"
        assert result.resume.education[0].gpa == "3.7/4.0"
        assert result.resume.certifications[0].issuer == "Amazon"

    def test_leading_prose_is_ignored(self, resume_json):
        result = parse_resume_response("Here is the tailored resume:\n```json\n" + resume_json + "\n```")
        assert isinstance(result, Parsed)
        assert result.resume.professional_summary.startswith("Backend engineer")

    def test_missing_sections_default_to_empty(self):
        result = parse_resume_response('{"professionalSummary": "Short"}')
        assert isinstance(result, Parsed)
        assert result.resume.experience == []
        assert result.resume.personal_info.name == ""

    def test_null_section_is_empty(self):
        result = parse_resume_response(
            '{"professionalSummary": "Good", "projects": null, "experience": [{"company": "Acme"}]}'
        )
        assert isinstance(result, Parsed)
        assert result.resume.projects == []
        assert result.resume.experience[0].company == "Acme"

    def test_every_null_section_is_empty(self):
        result = parse_resume_response(
            '{"experience": null, "education": null, "skills": null,'
            ' "projects": null, "certifications": null, "achievements": null}'
        )
        assert isinstance(result, Parsed)
        assert result.resume.skills == []
        assert result.resume.achievements == []

    def test_numeric_scalars_become_strings(self):
        result = parse_resume_response(
            '{"education": [{"institution": "MIT", "gpa": 3.8, "endDate": 2020}]}'
        )
        assert isinstance(result, Parsed)
        assert result.resume.education[0].gpa == "3.8"
        assert result.resume.education[0].end_date == "2020"

    def test_no_object_is_unparseable(self):
        result = parse_resume_response("I cannot help with that.")
        assert isinstance(result, Unparseable)
        assert result.raw_text == "I cannot help with that."
        assert "No JSON object" in result.reason

    def test_malformed_object_is_unparseable(self):
        result = parse_resume_response('{"personalInfo": {"name": "Jane"')
        assert isinstance(result, Unparseable)

    def test_schema_mismatch_is_unparseable(self):
        result = parse_resume_response('{"experience": "ten years", "skills": 3}')
        assert isinstance(result, Unparseable)
        assert result.reason == "Schema mismatch: 2 errors"

    def test_null_required_string_is_unparseable(self):
        result = parse_resume_response('{"professionalSummary": null}')
        assert isinstance(result, Unparseable)


class TestBuildFallbackResume:
    def test_summary_is_truncated_raw_text(self, sample_job_analysis):
        raw = "x" * 500
        resume = build_fallback_resume(raw, sample_job_analysis)
        assert resume.professional_summary == "x" * 300 + "..."

    def test_short_text_still_gets_ellipsis(self, sample_job_analysis):
        resume = build_fallback_resume("oops", sample_job_analysis)
        assert resume.professional_summary == "oops..."

    def test_one_item_per_required_section(self, sample_job_analysis):
        resume = build_fallback_resume("oops", sample_job_analysis)
        assert len(resume.experience) == 1
        assert len(resume.education) == 1
        assert len(resume.skills) == 1
        assert resume.projects == []
        assert resume.certifications == []
        assert resume.achievements == []

    def test_placeholders(self, sample_job_analysis):
        resume = build_fallback_resume(
            "oops", sample_job_analysis, job_title="Backend Engineer", company_name="Acme"
        )
        assert resume.personal_info.name == "Your Name"
        assert resume.personal_info.title == "Backend Engineer"
        assert resume.experience[0].company == "Acme"
        assert resume.experience[0].end_date == "Present"
        assert resume.education[0].gpa == "3.5/4.0"

    def test_company_placeholder_without_name(self, sample_job_analysis):
        resume = build_fallback_resume("oops", sample_job_analysis)
        assert resume.experience[0].company == "Previous Company"

    def test_skills_come_from_required_skills(self, sample_job_analysis):
        resume = build_fallback_resume("oops", sample_job_analysis)
        assert resume.skills[0].category == "Technical Skills"
        assert resume.skills[0].items == list(sample_job_analysis.required_skills)
        assert resume.skills[0].proficiency == "Advanced"

    def test_skills_capped_at_eight(self, sample_job_analysis):
        analysis = sample_job_analysis.model_copy(
            update={"required_skills": tuple(f"skill{i}" for i in range(12))}
        )
        resume = build_fallback_resume("oops", analysis)
        assert resume.skills[0].items == [f"skill{i}" for i in range(8)]


class TestAssignIdentifiers:
    def test_positional_ids(self, resume_json):
        parsed = parse_resume_response(resume_json)
        resume = assign_identifiers(parsed.resume)
        assert [e.id for e in resume.experience] == ["exp-1", "exp-2"]
        assert [e.id for e in resume.education] == ["edu-1"]
        assert [s.id for s in resume.skills] == ["skill-1", "skill-2"]
        assert [c.id for c in resume.certifications] == ["cert-1"]

    def test_ids_unique_across_document(self, sample_generated_resume):
        resume = assign_identifiers(sample_generated_resume)
        ids = [
            item.id
            for items in (
                resume.experience,
                resume.education,
                resume.skills,
                resume.projects,
                resume.certifications,
            )
            for item in items
        ]
        assert len(ids) == len(set(ids))
        assert all(ids)

    def test_overwrites_model_supplied_ids(self):
        resume = GeneratedResume.model_validate(
            {"experience": [{"id": "abc", "company": "A"}, {"id": "abc", "company": "B"}]}
        )
        assert [e.id for e in assign_identifiers(resume).experience] == ["exp-1", "exp-2"]

    def test_original_not_modified(self, resume_json):
        original = parse_resume_response(resume_json).resume
        assign_identifiers(original)
        assert original.experience[0].id == ""
