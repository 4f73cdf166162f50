"""Structural checks for skill documents and corpus-wide references."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from skill_corpus.agents.models import Agent
from skill_corpus.agents.repository import AgentRepository
from skill_corpus.categories import CategoryRule
from skill_corpus.config import LintConfig
from skill_corpus.errors import CorpusFileError
from skill_corpus.lint.models import CheckId, CheckResult, CheckStatus
from skill_corpus.pipeline.repository import PipelineRepository
from skill_corpus.skills.markdown import MarkdownDocument, find_urls
from skill_corpus.skills.models import Skill
from skill_corpus.skills.repository import SkillRepository


@dataclass(frozen=True)
class SkillContext:
    skill: Skill
    document: MarkdownDocument
    rule: CategoryRule
    config: LintConfig
    agent_repository: AgentRepository
    agents: list[Agent]
    has_agents: bool


@dataclass(frozen=True)
class CorpusContext:
    skills: SkillRepository
    pipeline: PipelineRepository
    agents: list[Agent]
    has_agents: bool


class ISkillCheck(ABC):
    check_id: CheckId
    # Utility skills only run checks that hold for every document.
    applies_to_utility: bool = False

    def title(self, ctx: SkillContext) -> str:
        return self.check_id.value

    @abstractmethod
    def run(self, ctx: SkillContext) -> CheckResult:
        """Evaluate the check against one skill."""

    def result(
        self,
        ctx: SkillContext,
        status: CheckStatus,
        detail: str = "",
        messages: Optional[list[str]] = None,
    ) -> CheckResult:
        return CheckResult(
            check_id=self.check_id,
            title=self.title(ctx),
            status=status,
            detail=detail,
            messages=messages or [],
        )


class FrontmatterCheck(ISkillCheck):
    check_id = CheckId.FRONTMATTER
    applies_to_utility = True

    def title(self, ctx: SkillContext) -> str:
        return "YAML frontmatter"

    def run(self, ctx: SkillContext) -> CheckResult:
        skill = ctx.skill
        if not skill.has_frontmatter:
            return self.result(ctx, CheckStatus.FAIL, "missing frontmatter block")
        if skill.frontmatter_error is not None:
            return self.result(ctx, CheckStatus.FAIL, skill.frontmatter_error)

        problems: list[str] = []
        for field in ("name", "description"):
            value = skill.frontmatter.get(field)
            if value is not None and not isinstance(value, str):
                problems.append(f"{field} is not a string")
            elif not (value or "").strip():
                problems.append(f"missing {field}")
        if problems:
            return self.result(ctx, CheckStatus.FAIL, ", ".join(problems))
        return self.result(ctx, CheckStatus.PASS)


class LineCountCheck(ISkillCheck):
    check_id = CheckId.LINE_COUNT

    def title(self, ctx: SkillContext) -> str:
        return f"Line count (>= {ctx.rule.min_lines})"

    def run(self, ctx: SkillContext) -> CheckResult:
        count = ctx.skill.line_count
        if count >= ctx.rule.min_lines:
            return self.result(ctx, CheckStatus.PASS, f"{count} lines")
        return self.result(
            ctx, CheckStatus.FAIL, f"{count} lines, need >= {ctx.rule.min_lines}"
        )


class SourcesSectionCheck(ISkillCheck):
    check_id = CheckId.SOURCES_SECTION

    def title(self, ctx: SkillContext) -> str:
        return "Sources & References section"

    def run(self, ctx: SkillContext) -> CheckResult:
        if ctx.document.has_section("sources") or ctx.document.has_section("references"):
            return self.result(ctx, CheckStatus.PASS)
        return self.result(ctx, CheckStatus.FAIL, "no sources or references heading")


class SourceUrlsCheck(ISkillCheck):
    check_id = CheckId.SOURCE_URLS

    def title(self, ctx: SkillContext) -> str:
        return f"Source URLs (>= {ctx.rule.min_sources})"

    def run(self, ctx: SkillContext) -> CheckResult:
        count = len(find_urls(ctx.skill.text))
        if count >= ctx.rule.min_sources:
            return self.result(ctx, CheckStatus.PASS, f"{count} URLs")
        return self.result(
            ctx, CheckStatus.FAIL, f"{count} URLs, need >= {ctx.rule.min_sources}"
        )


class CodeBlocksCheck(ISkillCheck):
    check_id = CheckId.CODE_BLOCKS

    def title(self, ctx: SkillContext) -> str:
        return f"Code examples (>= {ctx.rule.min_code_blocks} blocks)"

    def run(self, ctx: SkillContext) -> CheckResult:
        if ctx.document.unclosed_fence_line is not None:
            return self.result(
                ctx,
                CheckStatus.FAIL,
                f"unclosed code fence opened at line {ctx.document.unclosed_fence_line}",
            )
        count = len(ctx.document.code_blocks)
        if count >= ctx.rule.min_code_blocks:
            return self.result(ctx, CheckStatus.PASS, f"{count} code blocks")
        return self.result(
            ctx,
            CheckStatus.FAIL,
            f"{count} code blocks, need >= {ctx.rule.min_code_blocks}",
        )


class AgentReferenceCheck(ISkillCheck):
    check_id = CheckId.AGENT_REFERENCE

    def title(self, ctx: SkillContext) -> str:
        return "Referenced by agent"

    def run(self, ctx: SkillContext) -> CheckResult:
        if not ctx.has_agents:
            return self.result(ctx, CheckStatus.SKIP, "no agents directory")
        referencing = ctx.agent_repository.referencing_agents(ctx.skill.name, ctx.agents)
        if referencing:
            return self.result(ctx, CheckStatus.PASS, ", ".join(referencing))
        return self.result(ctx, CheckStatus.FAIL, "not referenced by any agent")


class RequiredSectionsCheck(ISkillCheck):
    check_id = CheckId.REQUIRED_SECTIONS

    def title(self, ctx: SkillContext) -> str:
        return "Required sections"

    def run(self, ctx: SkillContext) -> CheckResult:
        required = ctx.rule.required_sections
        if not required:
            return self.result(ctx, CheckStatus.SKIP, "none required")
        missing = [
            f"Missing section: {section}"
            for section in required
            if not ctx.document.has_section(section)
        ]
        if missing:
            return self.result(ctx, CheckStatus.FAIL, f"{len(missing)} missing", missing)
        return self.result(ctx, CheckStatus.PASS)


class LanguageTagsCheck(ISkillCheck):
    check_id = CheckId.LANGUAGE_TAGS
    applies_to_utility = True

    def title(self, ctx: SkillContext) -> str:
        return "Code block language tags"

    def run(self, ctx: SkillContext) -> CheckResult:
        if not ctx.config.require_language_tags:
            return self.result(ctx, CheckStatus.SKIP, "disabled by config")

        messages: list[str] = []
        for block in ctx.document.code_blocks:
            if not block.language:
                messages.append(f"line {block.start_line}: missing language tag")
            elif block.language not in ctx.config.languages:
                messages.append(
                    f"line {block.start_line}: unrecognized language '{block.language}'"
                )
        if messages:
            return self.result(
                ctx, CheckStatus.FAIL, f"{len(messages)} untagged or unknown", messages
            )
        return self.result(ctx, CheckStatus.PASS, f"{len(ctx.document.code_blocks)} tagged")


class TocAnchorsCheck(ISkillCheck):
    check_id = CheckId.TOC_ANCHORS
    applies_to_utility = True

    def title(self, ctx: SkillContext) -> str:
        return "Internal anchors resolve"

    def run(self, ctx: SkillContext) -> CheckResult:
        if not ctx.config.check_toc_anchors:
            return self.result(ctx, CheckStatus.SKIP, "disabled by config")

        links = ctx.document.internal_links
        if not links:
            return self.result(ctx, CheckStatus.SKIP, "no internal links")

        anchors = ctx.document.anchors
        broken = [
            f"line {link.line}: {link.target}" for link in links if link.anchor not in anchors
        ]
        if broken:
            return self.result(ctx, CheckStatus.FAIL, f"{len(broken)} unresolved", broken)
        return self.result(ctx, CheckStatus.PASS, f"{len(links)} links")


class NameMatchesDirectoryCheck(ISkillCheck):
    check_id = CheckId.NAME_MATCHES_DIRECTORY

    def title(self, ctx: SkillContext) -> str:
        return "Name matches directory"

    def run(self, ctx: SkillContext) -> CheckResult:
        declared = ctx.skill.metadata.name
        if not declared:
            return self.result(ctx, CheckStatus.SKIP, "no name declared")
        if declared == ctx.skill.name:
            return self.result(ctx, CheckStatus.PASS)
        return self.result(
            ctx,
            CheckStatus.FAIL,
            f"frontmatter name '{declared}' != directory '{ctx.skill.name}'",
        )


SKILL_CHECKS: tuple[ISkillCheck, ...] = (
    FrontmatterCheck(),
    LineCountCheck(),
    SourcesSectionCheck(),
    SourceUrlsCheck(),
    CodeBlocksCheck(),
    AgentReferenceCheck(),
    RequiredSectionsCheck(),
    LanguageTagsCheck(),
    TocAnchorsCheck(),
    NameMatchesDirectoryCheck(),
)


def check_agent_refs(ctx: CorpusContext) -> CheckResult:
    title = "Agent skill references valid"
    if not ctx.has_agents:
        return CheckResult(CheckId.AGENT_REFS, title, CheckStatus.SKIP, "no agents directory")

    messages = [
        f"Agent {agent.name} references non-existent skill: {skill}"
        for agent in ctx.agents
        for skill in agent.skills
        if not ctx.skills.exists(skill)
    ]
    if messages:
        return CheckResult(
            CheckId.AGENT_REFS, title, CheckStatus.FAIL, f"{len(messages)} broken", messages
        )
    return CheckResult(CheckId.AGENT_REFS, title, CheckStatus.PASS)


def check_pipeline_config(ctx: CorpusContext) -> CheckResult:
    title = "Pipeline config matches agents"
    if not ctx.pipeline.has_pipeline():
        return CheckResult(
            CheckId.PIPELINE_CONFIG, title, CheckStatus.SKIP, "no pipeline/agents directory"
        )

    agents = {agent.name: agent for agent in ctx.agents}
    messages: list[str] = []
    for path in ctx.pipeline.list_config_paths():
        try:
            config = ctx.pipeline.load_config(path)
        except CorpusFileError as exc:
            messages.append(str(exc))
            continue
        if not config.agent:
            continue

        agent = agents.get(config.agent)
        if agent is None:
            messages.append(
                f"Pipeline {config.name} references non-existent agent: {config.agent}"
            )
            continue

        pipeline_skills = sorted(config.skills)
        agent_skills = sorted(agent.skills)
        if pipeline_skills != agent_skills:
            messages.append(
                f"Pipeline {config.name} skills mismatch with agent {agent.name}: "
                f"pipeline [{' '.join(pipeline_skills)}] != agent [{' '.join(agent_skills)}]"
            )

    if messages:
        return CheckResult(
            CheckId.PIPELINE_CONFIG, title, CheckStatus.FAIL, f"{len(messages)} problems", messages
        )
    return CheckResult(CheckId.PIPELINE_CONFIG, title, CheckStatus.PASS)


GLOBAL_CHECKS = (
    (CheckId.AGENT_REFS, check_agent_refs),
    (CheckId.PIPELINE_CONFIG, check_pipeline_config),
)
