"""Agent data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class AgentMetadata:
    name: str = ""
    description: str = ""
    model: str = ""
    skills: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Agent:
    name: str
    source_path: Path
    metadata: AgentMetadata
    content: str

    @property
    def skills(self) -> list[str]:
        return self.metadata.skills
