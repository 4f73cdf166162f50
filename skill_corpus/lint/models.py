"""Lint result models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class CheckStatus(str, Enum):
    PASS = "pass"
    FAIL = "fail"
    SKIP = "skip"


class CheckId(str, Enum):
    EXISTS = "exists"
    FRONTMATTER = "frontmatter"
    LINE_COUNT = "line-count"
    SOURCES_SECTION = "sources-section"
    SOURCE_URLS = "source-urls"
    CODE_BLOCKS = "code-blocks"
    AGENT_REFERENCE = "agent-reference"
    AGENT_REFS = "agent-refs"
    PIPELINE_CONFIG = "pipeline-config"
    REQUIRED_SECTIONS = "required-sections"
    LANGUAGE_TAGS = "language-tags"
    TOC_ANCHORS = "toc-anchors"
    NAME_MATCHES_DIRECTORY = "name-matches-directory"


@dataclass
class CheckResult:
    check_id: CheckId
    title: str
    status: CheckStatus
    detail: str = ""
    messages: list[str] = field(default_factory=list)

    @property
    def failed(self) -> bool:
        return self.status == CheckStatus.FAIL

    def as_dict(self) -> dict:
        return {
            "check": self.check_id.value,
            "title": self.title,
            "status": self.status.value,
            "detail": self.detail,
            "messages": list(self.messages),
        }


@dataclass
class SkillReport:
    name: str
    category: str
    results: list[CheckResult]
    utility: bool = False

    @property
    def passed(self) -> bool:
        return not any(result.failed for result in self.results)

    def failures(self) -> list[CheckResult]:
        return [result for result in self.results if result.failed]

    def as_dict(self) -> dict:
        return {
            "name": self.name,
            "category": self.category,
            "utility": self.utility,
            "passed": self.passed,
            "results": [result.as_dict() for result in self.results],
        }


@dataclass
class LintReport:
    skills: list[SkillReport]
    global_results: list[CheckResult]
    filter_label: str = "All skills"

    @property
    def total(self) -> int:
        return len(self.skills)

    @property
    def passed(self) -> int:
        return sum(1 for report in self.skills if report.passed)

    @property
    def failed(self) -> int:
        return sum(1 for report in self.skills if not report.passed)

    @property
    def skipped(self) -> int:
        return sum(1 for report in self.skills if report.utility)

    @property
    def ok(self) -> bool:
        return self.failed == 0 and not any(
            result.failed for result in self.global_results
        )

    def failed_skills(self) -> list[SkillReport]:
        return [report for report in self.skills if not report.passed]

    def summary(self) -> dict[str, int]:
        return {
            "total": self.total,
            "passed": self.passed,
            "failed": self.failed,
            "skipped": self.skipped,
        }
