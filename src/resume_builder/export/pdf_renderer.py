"""Themed HTML and PDF rendering of resumes.

Markdown is converted to HTML, wrapped in ``base.html`` with one of the CSS
themes, then printed with WeasyPrint. Without WeasyPrint (or its system
libraries) the fpdf2 renderer in ``pdf_fallback`` is used instead.
"""
from __future__ import annotations

import logging
from pathlib import Path

import markdown
from jinja2 import Environment, FileSystemLoader
from markupsafe import Markup

from resume_builder.export.layout import resume_to_markdown
from resume_builder.models.resume import GeneratedResume

logger = logging.getLogger(__name__)

EXPORT_DIR = Path(__file__).parent
CSS_THEMES_DIR = EXPORT_DIR / "css_themes"

AVAILABLE_THEMES = ("professional", "modern", "minimal")
DEFAULT_THEME = AVAILABLE_THEMES[0]

_env = Environment(loader=FileSystemLoader(str(EXPORT_DIR)), autoescape=True)


def render_html_preview(
    resume_markdown: str,
    theme: str = DEFAULT_THEME,
    title: str = "Resume",
) -> str:
    """Render resume Markdown as a standalone themed HTML page.

    Unknown theme names render with the default theme.
    """
    body = markdown.markdown(resume_markdown, extensions=["tables", "sane_lists"])
    return _env.get_template("base.html").render(
        title=title,
        css=Markup(_theme_css(theme)),
        body=Markup(body),
    )


def render_pdf(
    resume_markdown: str,
    theme: str = DEFAULT_THEME,
    title: str = "Resume",
) -> bytes:
    """Render resume Markdown to PDF bytes."""
    return _html_to_pdf(render_html_preview(resume_markdown, theme, title))


def render_resume_pdf(resume: GeneratedResume, theme: str = DEFAULT_THEME) -> bytes:
    """Lay out a generated resume and render it to PDF bytes."""
    title = resume.personal_info.name or "Resume"
    return render_pdf(resume_to_markdown(resume), theme=theme, title=title)


def _theme_css(theme: str) -> str:
    if theme not in AVAILABLE_THEMES:
        logger.debug("Unknown theme %r, using %s", theme, DEFAULT_THEME)
        theme = DEFAULT_THEME
    return (CSS_THEMES_DIR / f"{theme}.css").read_text(encoding="utf-8")


def _html_to_pdf(html: str) -> bytes:
    try:
        from weasyprint import HTML
        return HTML(string=html).write_pdf()
    except (ImportError, OSError):
        logger.warning("WeasyPrint not available, using fpdf2 fallback")
        from resume_builder.export.pdf_fallback import html_to_pdf_fpdf2
        return html_to_pdf_fpdf2(html)
