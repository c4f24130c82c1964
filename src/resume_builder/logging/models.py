"""Usage logging data models."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class UsageLog(BaseModel):
    """Single usage log entry for a generation run."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    user_id: str = "anonymous"
    timestamp: datetime = Field(default_factory=datetime.now)
    mode: str  # "generate" | "draft_section"
    job_title: str | None = None
    company_name: str | None = None
    experience_level: str | None = None
    used_fallback: bool = False
    elapsed_seconds: float = 0.0
    total_input_tokens: int = 0
    total_output_tokens: int = 0
    estimated_cost_usd: float = 0.0
    success: bool = True
    error_message: str | None = None
