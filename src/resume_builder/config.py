"""Application configuration loaded from config.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml


@dataclass(frozen=True)
class LLMConfig:
    model: str = "claude-sonnet-4-5-20250929"
    draft_model: str = "claude-haiku-4-5-20251001"
    timeout: int = 120
    max_tokens: int = 8192
    temperature: float = 0.7

    def __post_init__(self) -> None:
        if not 1 <= self.timeout <= 600:
            raise ValueError(f"llm.timeout must be between 1 and 600, got {self.timeout}")
        if self.max_tokens < 1:
            raise ValueError(f"llm.max_tokens must be positive, got {self.max_tokens}")
        if not 0.0 <= self.temperature <= 1.0:
            raise ValueError(
                f"llm.temperature must be between 0.0 and 1.0, got {self.temperature}"
            )


@dataclass(frozen=True)
class ExportConfig:
    theme: str = "professional"
    output_dir: str = "./output"

    @property
    def resolved_output_dir(self) -> Path:
        return Path(self.output_dir).expanduser()


@dataclass(frozen=True)
class StoreConfig:
    db_path: str = "~/.resume-builder/resumes.db"
    usage_db_path: str = "~/.resume-builder/usage.db"

    @property
    def resolved_db_path(self) -> Path:
        return Path(self.db_path).expanduser()

    @property
    def resolved_usage_db_path(self) -> Path:
        return Path(self.usage_db_path).expanduser()


@dataclass(frozen=True)
class AppConfig:
    llm: LLMConfig = field(default_factory=LLMConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    store: StoreConfig = field(default_factory=StoreConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        # Look for config.yaml relative to the project root
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    return AppConfig(
        llm=LLMConfig(**raw.get("llm", {})),
        export=ExportConfig(**raw.get("export", {})),
        store=StoreConfig(**raw.get("store", {})),
    )
