"""Tests for job description and background parsers."""

import pytest

from resume_builder.parsers.background_parser import clean_text, parse_background
from resume_builder.parsers.jd_parser import load_jd_file, parse_jd


class TestJDParser:
    def test_parse_jd_cleans_whitespace(self):
        text = "  Hello   World  \n\n\n\nLine 2  "
        result = parse_jd(text)
        assert result == "Hello World\n\nLine 2"

    def test_parse_jd_keeps_single_blank_line(self):
        result = parse_jd("Responsibilities:\r\n- Build APIs\r\n\r\nRequirements:\r\n- Python")
        assert result == "Responsibilities:\n- Build APIs\n\nRequirements:\n- Python"

    def test_parse_jd_strips_lines(self):
        result = parse_jd("  line 1  \n\tline 2  ")
        for line in result.splitlines():
            assert line == line.strip()

    def test_load_jd_file(self, tmp_path):
        jd_file = tmp_path / "job.txt"
        jd_file.write_text("Data Engineer\n\nRequirements: Python", encoding="utf-8")
        result = load_jd_file(str(jd_file))
        assert "Data Engineer" in result
        assert "Python" in result


class TestBackgroundParser:
    def test_parse_txt_file(self, tmp_path):
        txt_file = tmp_path / "background.txt"
        txt_file.write_text("Jane Doe\nBackend developer", encoding="utf-8")
        assert parse_background(txt_file) == "Jane Doe\nBackend developer"

    def test_parse_md_file(self, tmp_path):
        md_file = tmp_path / "resume.md"
        md_file.write_text("# Jane Doe\n## Experience", encoding="utf-8")
        assert "# Jane Doe" in parse_background(str(md_file))

    def test_parse_docx_file(self, tmp_path):
        from docx import Document

        doc = Document()
        doc.add_paragraph("Jane Doe")
        doc.add_paragraph("")
        doc.add_paragraph("Python developer")
        path = tmp_path / "resume.docx"
        doc.save(str(path))

        assert parse_background(path) == "Jane Doe\nPython developer"

    def test_parse_pdf_file(self, tmp_path):
        import fitz

        path = tmp_path / "resume.pdf"
        with fitz.open() as doc:
            page = doc.new_page()
            page.insert_text((72, 72), "Jane Doe Python developer")
            doc.save(str(path))

        assert "Jane Doe Python developer" in parse_background(path)

    def test_unsupported_format(self, tmp_path):
        bad_file = tmp_path / "resume.xyz"
        bad_file.write_text("test")
        with pytest.raises(ValueError, match="Unsupported file format"):
            parse_background(str(bad_file))


class TestCleanText:
    def test_removes_zero_width_and_bom(self):
        assert clean_text("\ufeffJane\u200b Doe\u00ad") == "Jane Doe"

    def test_removes_contact_icons(self):
        assert clean_text("\U0001f4e7 jane@example.com") == "jane@example.com"

    def test_normalizes_bullets(self):
        assert clean_text("● Built APIs\n▪ Wrote tests") == "- Built APIs\n- Wrote tests"

    def test_collapses_spaces_and_blank_lines(self):
        assert clean_text("a   b\n\n\n\nc") == "a b\n\nc"
