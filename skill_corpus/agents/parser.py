"""Parse agent definitions with YAML frontmatter."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from skill_corpus.agents.models import Agent, AgentMetadata
from skill_corpus.skills.parser import split_frontmatter
from skill_corpus.utils import read_text


def parse_agent(path: Path) -> Agent:
    text = read_text(path)
    name = path.stem

    raw, content, _ = split_frontmatter(text)
    raw = raw or {}

    metadata = AgentMetadata(
        name=str(raw.get("name") or name),
        description=str(raw.get("description", "") or ""),
        model=str(raw.get("model", "") or ""),
        skills=parse_skill_list(raw.get("skills")),
    )
    return Agent(name=name, source_path=path, metadata=metadata, content=content)


def parse_skill_list(value: Any) -> list[str]:
    """Accept ``a, b, c`` strings as well as YAML lists."""
    if value is None:
        return []
    if isinstance(value, str):
        items = value.split(",")
    elif isinstance(value, list):
        items = [str(item) for item in value if item is not None]
    else:
        return []

    skills: list[str] = []
    for item in items:
        cleaned = item.strip()
        if cleaned:
            skills.append(cleaned)
    return skills
