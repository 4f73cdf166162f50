"""Agent definitions under ``agents/*.md`` and the skills they load."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from skill_corpus.agents.models import Agent
from skill_corpus.agents.parser import parse_agent
from skill_corpus.constants import AGENTS_DIRNAME
from skill_corpus.errors import MissingAgentError
from skill_corpus.skills.repository import SkillRepository

logger = logging.getLogger(__name__)


class AgentRepository:
    def __init__(self, root: Path) -> None:
        self._agents_dir = root / AGENTS_DIRNAME

    @property
    def agents_dir(self) -> Path:
        return self._agents_dir

    def has_agents(self) -> bool:
        return self._agents_dir.is_dir()

    def list_agents(self) -> list[Agent]:
        if not self._agents_dir.exists():
            return []
        agents: list[Agent] = []
        for child in sorted(self._agents_dir.iterdir()):
            if child.suffix == ".md" and child.is_file() and not child.name.startswith("."):
                agents.append(parse_agent(child))
        return agents

    def get_agent(self, name: str) -> Agent:
        path = self._agents_dir / f"{name}.md"
        if not path.is_file():
            raise MissingAgentError(path)
        return parse_agent(path)

    def referencing_agents(
        self, skill: str, agents: Optional[list[Agent]] = None
    ) -> list[str]:
        """Agents whose skill list names ``skill`` exactly."""
        if agents is None:
            agents = self.list_agents()
        return [agent.name for agent in agents if skill in agent.skills]

    def resolve_skills(
        self, agent_names: Iterable[str], always: Iterable[str] = ()
    ) -> list[str]:
        """Deduplicated, sorted skill set needed by the given agents."""
        resolved: set[str] = {name for name in always if name}
        for name in agent_names:
            agent = self.get_agent(name)
            logger.debug("agent %s loads %d skills", name, len(agent.skills))
            resolved.update(agent.skills)
        return sorted(resolved)

    def skill_lines(self, agent: Agent, skills: SkillRepository) -> int:
        total = 0
        for skill in agent.skills:
            path = skills.skill_path(skill)
            if path.is_file():
                total += skills.get_skill(skill).line_count
        return total
