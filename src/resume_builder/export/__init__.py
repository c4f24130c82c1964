"""PDF export module for resume-builder."""
from resume_builder.export.layout import default_pdf_filename, resume_to_markdown, safe_filename
from resume_builder.export.pdf_renderer import (
    AVAILABLE_THEMES,
    render_html_preview,
    render_pdf,
    render_resume_pdf,
)

__all__ = [
    "AVAILABLE_THEMES",
    "default_pdf_filename",
    "render_html_preview",
    "render_pdf",
    "render_resume_pdf",
    "resume_to_markdown",
    "safe_filename",
]
