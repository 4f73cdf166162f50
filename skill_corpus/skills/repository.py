"""Read access to ``skills/<name>/SKILL.md`` documents."""

from __future__ import annotations

import logging
from pathlib import Path

from skill_corpus.constants import SKILL_FILENAME, SKILLS_DIRNAME
from skill_corpus.errors import MissingSkillError
from skill_corpus.skills.models import Skill
from skill_corpus.skills.parser import parse_skill

logger = logging.getLogger(__name__)


class SkillRepository:
    def __init__(self, root: Path) -> None:
        self._root = root
        self._skills_dir = root / SKILLS_DIRNAME

    @property
    def root(self) -> Path:
        return self._root

    @property
    def skills_dir(self) -> Path:
        return self._skills_dir

    def skill_path(self, name: str) -> Path:
        return self._skills_dir / name / SKILL_FILENAME

    def exists(self, name: str) -> bool:
        return (self._skills_dir / name).is_dir()

    def list_names(self) -> list[str]:
        """Names of skill directories, including ones missing SKILL.md."""
        if not self._skills_dir.exists():
            return []
        return sorted(
            child.name
            for child in self._skills_dir.iterdir()
            if child.is_dir() and not child.name.startswith(".")
        )

    def list_skills(self) -> list[Skill]:
        skills: list[Skill] = []
        for name in self.list_names():
            path = self.skill_path(name)
            if not path.is_file():
                logger.debug("skipping %s: no %s", name, SKILL_FILENAME)
                continue
            skills.append(parse_skill(path))
        return skills

    def get_skill(self, name: str) -> Skill:
        path = self.skill_path(name)
        if not path.is_file():
            raise MissingSkillError(path)
        logger.debug("parsing %s", path)
        return parse_skill(path)
