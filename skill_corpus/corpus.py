from pathlib import Path

from skill_corpus.agents.repository import AgentRepository
from skill_corpus.config import LintConfig, load_config
from skill_corpus.pipeline.repository import PipelineRepository
from skill_corpus.skills.repository import SkillRepository


class SkillCorpus:
    """A corpus root with its skills, agents and pipeline configs."""

    def __init__(self, root: Path) -> None:
        self.root = root.expanduser().resolve()
        self.skills = SkillRepository(self.root)
        self.agents = AgentRepository(self.root)
        self.pipeline = PipelineRepository(self.root)

    def load_config(self) -> LintConfig:
        return load_config(self.root)
