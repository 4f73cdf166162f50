"""Skill data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from skill_corpus.utils import count_lines


@dataclass(frozen=True)
class SkillMetadata:
    name: str = ""
    description: str = ""
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Skill:
    name: str
    source_path: Path
    metadata: SkillMetadata
    content: str
    text: str = ""
    has_frontmatter: bool = False
    frontmatter_error: Optional[str] = None
    frontmatter: dict[str, Any] = field(default_factory=dict)

    @property
    def line_count(self) -> int:
        return count_lines(self.text)

    @property
    def body_offset(self) -> int:
        """1-based line number of the first body line."""
        return count_lines(self.text[: len(self.text) - len(self.content)]) + 1
