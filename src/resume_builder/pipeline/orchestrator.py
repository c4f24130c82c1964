"""Main pipeline orchestrator - job analysis followed by resume generation."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from resume_builder.analysis.extractor import analyze_job
from resume_builder.clients.llm_client import LLMClient
from resume_builder.logging.cost_calculator import calculate_cost
from resume_builder.logging.models import UsageLog
from resume_builder.logging.usage_store import UsageStore
from resume_builder.models.job import JobAnalysis
from resume_builder.models.resume import GeneratedResume, ResumeRecord
from resume_builder.pipeline.resume_generator import ResumeGenerator, build_prompt

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Complete result from the generation pipeline."""

    analysis: JobAnalysis
    resume: GeneratedResume
    used_fallback: bool = False
    elapsed_seconds: float = 0.0
    metadata: dict = field(default_factory=dict)


class PipelineOrchestrator:
    """Runs keyword analysis, then drafts a resume through the LLM."""

    def __init__(
        self,
        llm: LLMClient,
        *,
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int = 8192,
        usage_store: UsageStore | None = None,
    ):
        self.llm = llm
        self.generator = ResumeGenerator(
            llm, model=model, temperature=temperature, max_tokens=max_tokens
        )
        self.usage_store = usage_store

    async def run(
        self,
        job_title: str,
        job_description: str,
        user_background: str,
        *,
        company_name: str = "",
        company_industry: str = "",
        experience_level: str | None = None,
        existing_resume: ResumeRecord | None = None,
        user_id: str = "anonymous",
        on_phase: Callable[[str, str], None] | None = None,
    ) -> PipelineResult:
        """Run the full analysis + generation pipeline.

        Args:
            job_title: Target position title.
            job_description: Raw job posting text.
            user_background: Free-text background supplied by the user.
            company_name: Target company name.
            company_industry: Industry label; "Technology" when blank.
            experience_level: Level to write for. Defaults to the level
                detected in the posting.
            existing_resume: Stored resume to revise instead of starting fresh.
            user_id: Owner recorded in the usage log.
            on_phase: Optional callback(phase_name, detail) for progress.

        Raises:
            JobInputError: If the title or description is blank.
        """
        start = time.monotonic()

        def _notify(phase: str, detail: str = ""):
            if on_phase:
                on_phase(phase, detail)

        _notify("analysis", "Analyzing job description")
        analysis = analyze_job(job_title, job_description, company_industry)
        level = experience_level or analysis.experience_level
        _notify(
            "analysis_done",
            f"{len(analysis.required_skills)} required skills, level: {analysis.experience_level}",
        )

        prompt = build_prompt(
            job_title=job_title,
            company_name=company_name,
            company_industry=analysis.company_type,
            experience_level=level,
            analysis=analysis,
            user_background=user_background,
            existing_resume=existing_resume,
        )

        _notify("generation", "Generating resume")
        try:
            outcome = await self.generator.draft(
                prompt,
                analysis,
                job_title=job_title,
                company_name=company_name,
            )
        except Exception as e:
            self._log_usage(
                start,
                [],
                user_id=user_id,
                job_title=job_title,
                company_name=company_name,
                experience_level=level,
                success=False,
                error_message=str(e),
            )
            raise

        tokens = self._log_usage(
            start,
            [(outcome.model, outcome.input_tokens, outcome.output_tokens)],
            user_id=user_id,
            job_title=job_title,
            company_name=company_name,
            experience_level=level,
            used_fallback=outcome.used_fallback,
        )

        elapsed = time.monotonic() - start
        _notify("done", f"Done in {elapsed:.1f}s")

        return PipelineResult(
            analysis=analysis,
            resume=outcome.resume,
            used_fallback=outcome.used_fallback,
            elapsed_seconds=elapsed,
            metadata={"experience_level": level, "tokens": tokens},
        )

    async def draft_section(
        self,
        section: str,
        context: str,
        *,
        user_id: str = "anonymous",
    ) -> str:
        """Draft a single resume section and record its usage."""
        start = time.monotonic()
        try:
            draft = await self.generator.draft_section(section, context)
        except Exception as e:
            self._log_usage(
                start,
                [],
                mode="draft_section",
                user_id=user_id,
                success=False,
                error_message=str(e),
            )
            raise
        self._log_usage(
            start,
            [(draft.model, draft.input_tokens, draft.output_tokens)],
            mode="draft_section",
            user_id=user_id,
        )
        return draft.content

    def _log_usage(
        self,
        start: float,
        calls: list[tuple[str, int, int]],
        mode: str = "generate",
        **fields,
    ) -> dict:
        """Record the token usage of this run's own calls; returns the summary.

        Each run passes the usage of the calls it made, so overlapping runs
        on one client never see each other's tokens.
        """
        tokens = {
            "input": sum(c[1] for c in calls),
            "output": sum(c[2] for c in calls),
            "calls": calls,
        }
        if self.usage_store is None:
            return tokens
        log = UsageLog(
            mode=mode,
            elapsed_seconds=time.monotonic() - start,
            total_input_tokens=tokens["input"],
            total_output_tokens=tokens["output"],
            estimated_cost_usd=calculate_cost(tokens["calls"]),
            **fields,
        )
        try:
            self.usage_store.save_log(log)
        except Exception:
            logger.exception("Failed to save usage log")
        return tokens
