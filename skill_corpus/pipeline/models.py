"""Pipeline agent configuration models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class PipelineAgentConfig:
    name: str
    agent: str
    source_path: Path
    skills: list[str] = field(default_factory=list)
