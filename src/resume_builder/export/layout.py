"""Render a GeneratedResume as Markdown for HTML/PDF export."""

from __future__ import annotations

import re

from resume_builder.models.resume import GeneratedResume


def resume_to_markdown(resume: GeneratedResume) -> str:
    """Lay out a resume as Markdown, one ``##`` heading per section.

    Empty projects and certifications sections are omitted.
    """
    info = resume.personal_info
    parts: list[str] = [f"# {info.name}"]
    if info.title:
        parts.append(f"**{info.title}**")
    contact = _join(info.email, info.phone, info.location)
    if contact:
        parts.append(contact)
    links = _join(info.linkedin, info.website)
    if links:
        parts.append(links)

    parts.append("## Professional Summary")
    parts.append(resume.professional_summary)

    parts.append("## Professional Experience")
    for exp in resume.experience:
        parts.append(f"### {exp.position} | {exp.company}")
        parts.append(f"*{_join(f'{exp.start_date} - {exp.end_date}', exp.location)}*")
        if exp.description:
            parts.append(exp.description)
        if exp.achievements:
            parts.append("\n".join(f"- {a}" for a in exp.achievements))

    parts.append("## Education")
    for edu in resume.education:
        degree = f"{edu.degree} in {edu.field}" if edu.field else edu.degree
        parts.append(f"### {degree}")
        details = [edu.institution, f"{edu.start_date} - {edu.end_date}"]
        if edu.gpa:
            details.append(f"GPA: {edu.gpa}")
        if edu.honors:
            details.append(edu.honors)
        parts.append(_join(*details))

    parts.append("## Skills")
    for group in resume.skills:
        parts.append(f"**{group.category}**: {', '.join(group.items)}")

    if resume.projects:
        parts.append("## Projects")
        for project in resume.projects:
            parts.append(f"### {project.name}")
            parts.append(project.description)
            if project.technologies:
                parts.append(f"*Technologies: {', '.join(project.technologies)}*")

    if resume.certifications:
        parts.append("## Certifications")
        parts.append("\n".join(
            f"- **{cert.name}**: {_join(cert.issuer, cert.date)}"
            for cert in resume.certifications
        ))

    if resume.achievements:
        parts.append("## Achievements")
        parts.append("\n".join(f"- {a}" for a in resume.achievements))

    return "\n\n".join(p for p in parts if p) + "\n"


def default_pdf_filename(job_title: str, company_name: str) -> str:
    """File name for a downloaded resume: ``<title>_Resume_<company>.pdf``."""
    name = f"{job_title}_Resume_{company_name}" if company_name else f"{job_title}_Resume"
    return safe_filename(name)


def safe_filename(name: str, suffix: str = ".pdf") -> str:
    """Turn free text into a single path component ending in ``suffix``."""
    name = re.sub(r"\s+", "_", name.strip())
    name = re.sub(r"[^\w.-]", "", name).strip(".") or "Resume"
    return name + suffix


def _join(*values: str) -> str:
    return " | ".join(v for v in values if v)
