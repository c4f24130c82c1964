"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import anthropic
import typer
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from resume_builder.analysis.extractor import JobInputError, analyze_job
from resume_builder.clients.llm_client import LLMClient
from resume_builder.config import load_config
from resume_builder.export.layout import default_pdf_filename, safe_filename
from resume_builder.export.pdf_renderer import AVAILABLE_THEMES, render_resume_pdf
from resume_builder.logging.usage_store import UsageStore
from resume_builder.models.job import JobAnalysis
from resume_builder.models.resume import GeneratedResume
from resume_builder.parsers.background_parser import parse_background
from resume_builder.parsers.jd_parser import load_jd_file
from resume_builder.pipeline.orchestrator import PipelineOrchestrator
from resume_builder.pipeline.resume_generator import apply_section
from resume_builder.store.resume_store import ResumeStore, default_title

app = typer.Typer(
    name="resume-builder",
    help="Job description analysis and AI resume generation",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _read_file(path: Path, label: str) -> Path:
    if not path.exists():
        console.print(f"[red]{label} not found: {path}[/red]")
        raise typer.Exit(1)
    return path


def _print_analysis(job_title: str, analysis: JobAnalysis) -> None:
    def _tags(values: tuple[str, ...]) -> str:
        return ", ".join(values) if values else "[dim]none[/dim]"

    def _lines(values: tuple[str, ...]) -> str:
        return "\n".join(f"  - {v}" for v in values) if values else "  [dim]none[/dim]"

    console.print(Panel(
        f"Experience level: [bold]{analysis.experience_level}[/bold]\n"
        f"Company type: {analysis.company_type}\n\n"
        f"Required skills: {_tags(analysis.required_skills)}\n"
        f"Preferred skills: {_tags(analysis.preferred_skills)}\n\n"
        f"Responsibilities:\n{_lines(analysis.key_responsibilities)}\n\n"
        f"Qualifications:\n{_lines(analysis.qualifications)}\n\n"
        f"Keywords: {_tags(analysis.industry_keywords)}",
        title=f"Job analysis: {job_title}",
    ))


@app.command()
def analyze(
    title: str = typer.Argument(help="Job title"),
    jd: Path = typer.Option(..., "--jd", help="Job description text file"),
    industry: str = typer.Option("", "--industry", "-i", help="Company industry"),
    as_json: bool = typer.Option(False, "--json", help="Print the analysis as JSON"),
) -> None:
    """Extract skills, responsibilities and keywords from a job description."""
    jd_text = load_jd_file(_read_file(jd, "Job description file"))
    try:
        analysis = analyze_job(title, jd_text, industry)
    except JobInputError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    if as_json:
        console.print_json(analysis.model_dump_json(by_alias=True))
    else:
        _print_analysis(title, analysis)


@app.command()
def generate(
    title: str = typer.Argument(help="Job title"),
    jd: Path = typer.Option(..., "--jd", help="Job description text file"),
    background: Path = typer.Option(..., "--background", "-b", help="Your background (PDF/DOCX/TXT/MD)"),
    company: str = typer.Option("", "--company", "-c", help="Company name"),
    industry: str = typer.Option("", "--industry", "-i", help="Company industry"),
    level: str = typer.Option(None, "--level", help="Experience level to write for (default: detected)"),
    existing: str = typer.Option(None, "--existing", help="Id of a saved resume to enhance"),
    user: str = typer.Option("local", "--user", "-u", help="User id for saved resumes"),
    save: bool = typer.Option(False, "--save", help="Save the generated resume"),
    pdf: bool = typer.Option(False, "--pdf", help="Also export a PDF"),
    output: Path = typer.Option(None, "--output", "-o", help="Output JSON path"),
) -> None:
    """Analyze a job description and generate a tailored resume."""
    config = load_config()
    jd_text = load_jd_file(_read_file(jd, "Job description file"))
    background_text = parse_background(_read_file(background, "Background file"))

    store = ResumeStore(db_path=config.store.resolved_db_path)
    existing_record = None
    if existing:
        stored = store.get(existing)
        if stored is None:
            console.print(f"[red]Saved resume not found: {existing}[/red]")
            raise typer.Exit(1)
        existing_record = stored.record

    llm = LLMClient(timeout=config.llm.timeout, model=config.llm.model)
    orchestrator = PipelineOrchestrator(
        llm,
        temperature=config.llm.temperature,
        max_tokens=config.llm.max_tokens,
        usage_store=UsageStore(db_path=config.store.resolved_usage_db_path),
    )

    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
        ) as progress:
            task = progress.add_task("Generating resume...", total=None)

            def on_phase(phase: str, detail: str) -> None:
                progress.update(task, description=detail)

            result = asyncio.run(
                orchestrator.run(
                    job_title=title,
                    job_description=jd_text,
                    user_background=background_text,
                    company_name=company,
                    company_industry=industry,
                    experience_level=level,
                    existing_resume=existing_record,
                    user_id=user,
                    on_phase=on_phase,
                )
            )
    except JobInputError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    except anthropic.APIError as e:
        console.print(f"[red]Resume generation failed: {e}[/red]")
        raise typer.Exit(1)

    _print_analysis(title, result.analysis)
    if result.used_fallback:
        console.print("[yellow]The AI response could not be parsed; a placeholder resume was written.[/yellow]")

    if output is None:
        output = config.export.resolved_output_dir / default_pdf_filename(title, company)
        output = output.with_suffix(".json")
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(result.resume.model_dump_json(by_alias=True, indent=2), encoding="utf-8")
    console.print(f"\n[green]Resume saved: {output}[/green]")
    console.print(f"[dim]Elapsed: {result.elapsed_seconds:.1f}s[/dim]")

    if save:
        resume_id = store.create(user, default_title(title, company), result.resume.to_record())
        console.print(f"[green]Stored as {resume_id}[/green]")

    if pdf:
        pdf_path = output.with_name(default_pdf_filename(title, company))
        pdf_path.write_bytes(render_resume_pdf(result.resume, theme=config.export.theme))
        console.print(f"[green]PDF saved: {pdf_path}[/green]")


@app.command()
def draft(
    section: str = typer.Argument(help="Section to draft (e.g. summary, achievements)"),
    context: str = typer.Option(..., "--context", help="What the section should cover"),
    resume_id: str = typer.Option(None, "--resume", help="Saved resume to write the draft into"),
    user: str = typer.Option("local", "--user", "-u", help="User id recorded in the usage log"),
) -> None:
    """Draft a single resume section with AI."""
    config = load_config()
    llm = LLMClient(timeout=config.llm.timeout, model=config.llm.draft_model)
    orchestrator = PipelineOrchestrator(
        llm,
        temperature=config.llm.temperature,
        max_tokens=config.llm.max_tokens,
        usage_store=UsageStore(db_path=config.store.resolved_usage_db_path),
    )

    try:
        with console.status(f"Drafting {section}..."):
            content = asyncio.run(orchestrator.draft_section(section, context, user_id=user))
    except anthropic.APIError as e:
        console.print(f"[red]Drafting failed: {e}[/red]")
        raise typer.Exit(1)

    console.print(Panel(content, title=section))

    if resume_id:
        store = ResumeStore(db_path=config.store.resolved_db_path)
        stored = store.get(resume_id)
        if stored is None:
            console.print(f"[red]Saved resume not found: {resume_id}[/red]")
            raise typer.Exit(1)
        try:
            updated = apply_section(stored.record.to_resume(), section, content)
        except ValueError as e:
            console.print(f"[yellow]{e}; draft not written back[/yellow]")
            return
        store.update(resume_id, updated.to_record())
        console.print(f"[green]Updated {section} of {resume_id}[/green]")


@app.command()
def resumes(
    user: str = typer.Option("local", "--user", "-u", help="User id"),
) -> None:
    """List saved resumes."""
    config = load_config()
    store = ResumeStore(db_path=config.store.resolved_db_path)
    items = store.list_for_user(user)
    if not items:
        console.print("[yellow]No saved resumes.[/yellow]")
        return

    table = Table(title=f"Resumes for {user}")
    table.add_column("Id")
    table.add_column("Title")
    table.add_column("Updated")
    for item in items:
        table.add_row(item.id, item.title, item.updated_at.strftime("%Y-%m-%d %H:%M"))
    console.print(table)


@app.command()
def export(
    resume_id: str = typer.Argument(help="Saved resume id"),
    theme: str = typer.Option(None, "--theme", "-t", help=f"One of {', '.join(AVAILABLE_THEMES)}"),
    output: Path = typer.Option(None, "--output", "-o", help="Output PDF path"),
) -> None:
    """Export a saved resume to PDF."""
    config = load_config()
    store = ResumeStore(db_path=config.store.resolved_db_path)
    stored = store.get(resume_id)
    if stored is None:
        console.print(f"[red]Saved resume not found: {resume_id}[/red]")
        raise typer.Exit(1)

    resume: GeneratedResume = stored.record.to_resume()
    if output is None:
        output = config.export.resolved_output_dir / safe_filename(stored.title)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(render_resume_pdf(resume, theme=theme or config.export.theme))
    console.print(f"[green]PDF saved: {output}[/green]")


@app.command()
def usage() -> None:
    """Show this month's generation usage and cost."""
    config = load_config()
    stats = UsageStore(db_path=config.store.resolved_usage_db_path).get_monthly_stats()
    console.print(Panel(
        f"Runs: {stats['total_runs']} (success {stats['success_rate']:.0f}%, "
        f"fallback {stats['fallback_count']})\n"
        f"Tokens: {stats['total_input_tokens']} in / {stats['total_output_tokens']} out\n"
        f"Estimated cost: ${stats['total_cost_usd']:.4f}",
        title=f"Usage {stats['month']}",
    ))


if __name__ == "__main__":
    app()
