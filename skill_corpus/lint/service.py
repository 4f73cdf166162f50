"""Run structural checks over a skill corpus."""

from __future__ import annotations

import logging
from typing import Optional

from skill_corpus.agents.models import Agent
from skill_corpus.categories import CategoryRule
from skill_corpus.config import LintConfig
from skill_corpus.corpus import SkillCorpus
from skill_corpus.errors import CorpusFileError
from skill_corpus.lint.checks import (
    GLOBAL_CHECKS,
    SKILL_CHECKS,
    CorpusContext,
    SkillContext,
)
from skill_corpus.lint.models import (
    CheckId,
    CheckResult,
    CheckStatus,
    LintReport,
    SkillReport,
)
from skill_corpus.skills.markdown import parse_markdown

logger = logging.getLogger(__name__)


class LintService:
    def __init__(self, corpus: SkillCorpus, config: Optional[LintConfig] = None) -> None:
        self.corpus = corpus
        self.config = config if config is not None else corpus.load_config()

    def lint(
        self, skill: Optional[str] = None, category: Optional[str] = None
    ) -> LintReport:
        agents = self.corpus.agents.list_agents()
        has_agents = self.corpus.agents.has_agents()

        corpus_ctx = CorpusContext(
            skills=self.corpus.skills,
            pipeline=self.corpus.pipeline,
            agents=agents,
            has_agents=has_agents,
        )
        global_results = [
            run(corpus_ctx)
            for check_id, run in GLOBAL_CHECKS
            if self.config.is_enabled(check_id.value)
        ]

        if skill is not None:
            names = [skill]
            filter_label = f"Single skill: {skill}"
        else:
            names = self.corpus.skills.list_names()
            filter_label = "All skills"
            if category is not None:
                names = [
                    name
                    for name in names
                    if self.config.catalog.categorize(name) == category
                ]
                filter_label = f"Category: {category}"

        reports = [self.lint_skill(name, agents, has_agents) for name in names]
        return LintReport(
            skills=reports, global_results=global_results, filter_label=filter_label
        )

    def lint_skill(
        self, name: str, agents: list[Agent], has_agents: bool
    ) -> SkillReport:
        rule = self.config.catalog.rule_for(name)
        path = self.corpus.skills.skill_path(name)
        if not path.is_file():
            logger.info("skill %s has no SKILL.md", name)
            return _exists_failure(name, rule, "SKILL.md exists", "SKILL.md not found")

        try:
            skill = self.corpus.skills.get_skill(name)
        except CorpusFileError as exc:
            logger.info("skill %s is unreadable: %s", name, exc)
            return _exists_failure(name, rule, "SKILL.md readable", exc.message)

        ctx = SkillContext(
            skill=skill,
            document=parse_markdown(skill.content, first_line=skill.body_offset),
            rule=rule,
            config=self.config,
            agent_repository=self.corpus.agents,
            agents=agents,
            has_agents=has_agents,
        )

        results: list[CheckResult] = []
        for check in SKILL_CHECKS:
            if not self.config.is_enabled(check.check_id.value):
                continue
            if rule.utility and not check.applies_to_utility:
                continue
            result = check.run(ctx)
            logger.debug("%s %s: %s", name, check.check_id.value, result.status.value)
            results.append(result)

        return SkillReport(
            name=name, category=rule.name, results=results, utility=rule.utility
        )


def _exists_failure(name: str, rule: CategoryRule, title: str, detail: str) -> SkillReport:
    return SkillReport(
        name=name,
        category=rule.name,
        results=[
            CheckResult(
                check_id=CheckId.EXISTS,
                title=title,
                status=CheckStatus.FAIL,
                detail=detail,
            )
        ],
        utility=rule.utility,
    )
