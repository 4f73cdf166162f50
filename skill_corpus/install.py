"""Copy selected agents with their pipeline configs and skills into a target."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from skill_corpus.constants import (
    AGENTS_DIRNAME,
    PIPELINE_AGENTS_DIRNAME,
    PIPELINE_DIRNAME,
    SKILLS_DIRNAME,
)
from skill_corpus.corpus import SkillCorpus
from skill_corpus.errors import InstallTargetError

logger = logging.getLogger(__name__)


@dataclass
class InstallResult:
    target: Path
    agents: list[str] = field(default_factory=list)
    pipeline_configs: list[str] = field(default_factory=list)
    skills: list[str] = field(default_factory=list)
    missing_skills: list[str] = field(default_factory=list)


def copy_path(source: Path, target: Path) -> None:
    if source.is_dir():
        shutil.copytree(source, target)
        return
    target.parent.mkdir(parents=True, exist_ok=True)
    shutil.copy2(source, target)


def remove_path(path: Path) -> None:
    if path.is_symlink() or path.is_file():
        path.unlink()
        return
    if path.is_dir():
        shutil.rmtree(path)


class InstallService:
    def __init__(self, corpus: SkillCorpus) -> None:
        self.corpus = corpus

    def install(
        self, agent_names: Iterable[str], target: Path, always: Iterable[str] = ()
    ) -> InstallResult:
        """Install agents, their pipeline configs and the resolved skills.

        ``target/skills`` is replaced so skills from earlier installs do not
        linger. Unknown agents raise before anything is written.
        """
        target = target.expanduser().resolve()
        if target == self.corpus.root:
            raise InstallTargetError(target)

        names = list(dict.fromkeys(agent_names))
        agents = [self.corpus.agents.get_agent(name) for name in names]
        skills = self.corpus.agents.resolve_skills(names, always=always)
        result = InstallResult(target=target)

        agents_dir = target / AGENTS_DIRNAME
        agents_dir.mkdir(parents=True, exist_ok=True)
        for agent in agents:
            copy_path(agent.source_path, agents_dir / agent.source_path.name)
            result.agents.append(agent.name)

        pipeline_dir = target / PIPELINE_DIRNAME / PIPELINE_AGENTS_DIRNAME
        for name in names:
            source = self.corpus.pipeline.agents_dir / f"{name}.json"
            if source.is_file():
                copy_path(source, pipeline_dir / source.name)
                result.pipeline_configs.append(name)

        skills_dir = target / SKILLS_DIRNAME
        remove_path(skills_dir)
        skills_dir.mkdir(parents=True)
        for skill in skills:
            source = self.corpus.skills.skills_dir / skill
            if not source.is_dir():
                logger.info("skill %s has no directory, not installed", skill)
                result.missing_skills.append(skill)
                continue
            copy_path(source, skills_dir / skill)
            result.skills.append(skill)

        logger.debug(
            "installed %d agents, %d skills into %s",
            len(result.agents),
            len(result.skills),
            target,
        )
        return result
