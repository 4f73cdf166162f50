"""Skill categories and their structural thresholds."""

from __future__ import annotations

from dataclasses import dataclass
from fnmatch import fnmatchcase
from typing import Iterable, Optional

SOURCES_SECTION = "Sources & References"
UNKNOWN_CATEGORY = "unknown"


@dataclass(frozen=True)
class CategoryRule:
    name: str
    patterns: tuple[str, ...] = ()
    min_lines: int = 200
    min_sources: int = 3
    min_code_blocks: int = 1
    required_sections: tuple[str, ...] = (SOURCES_SECTION,)
    utility: bool = False

    def matches(self, skill: str) -> bool:
        return any(fnmatchcase(skill, pattern) for pattern in self.patterns)


FALLBACK_CATEGORY = CategoryRule(name=UNKNOWN_CATEGORY)

DEFAULT_CATEGORIES: tuple[CategoryRule, ...] = (
    CategoryRule(
        name="dev",
        patterns=(
            "rails-*",
            "react-*",
            "flutter-*",
            "node-*",
            "odoo-*",
            "salesforce-*",
            "git-workflow",
            "code-review-practices",
        ),
        min_lines=300,
        min_sources=5,
        min_code_blocks=3,
        required_sections=("Best Practices", "Anti-Patterns", SOURCES_SECTION),
    ),
    CategoryRule(
        name="devops",
        patterns=(
            "aws-*",
            "azure-*",
            "gcloud-*",
            "firebase-*",
            "flyio-*",
            "devops-*",
            "terraform-patterns",
            "kubernetes-patterns",
            "observability-practices",
            "incident-management",
        ),
        min_lines=300,
        min_sources=5,
        min_code_blocks=3,
        required_sections=("Best Practices", SOURCES_SECTION),
    ),
    CategoryRule(
        name="qa",
        patterns=(
            "testing-*",
            "playwright-testing",
            "performance-testing",
            "accessibility-testing",
            "chaos-engineering",
        ),
        min_lines=300,
        min_sources=5,
        min_code_blocks=3,
        required_sections=("Best Practices", SOURCES_SECTION),
    ),
    CategoryRule(
        name="planning",
        patterns=(
            "task-*",
            "domain-*",
            "design-*",
            "agile-frameworks",
            "stakeholder-communication",
            "requirements-elicitation",
            "process-modeling",
            "architecture-documentation",
            "security-architecture",
            "api-design",
            "api-security",
        ),
        min_lines=200,
        min_sources=3,
        min_code_blocks=1,
        required_sections=(SOURCES_SECTION,),
    ),
    CategoryRule(
        name="utility",
        patterns=("pipeline", "pipeline-status", "review"),
        min_lines=0,
        min_sources=0,
        min_code_blocks=0,
        required_sections=(),
        utility=True,
    ),
)


class CategoryCatalog:
    """Ordered category rules; the first matching pattern wins."""

    def __init__(self, rules: Iterable[CategoryRule] = DEFAULT_CATEGORIES) -> None:
        self._rules: list[CategoryRule] = []
        self._fallback = FALLBACK_CATEGORY
        for rule in rules:
            if rule.name == UNKNOWN_CATEGORY:
                self._fallback = rule
            else:
                self._rules.append(rule)

    @property
    def rules(self) -> list[CategoryRule]:
        return [*self._rules, self._fallback]

    def names(self) -> list[str]:
        return [rule.name for rule in self.rules]

    def get(self, name: str) -> Optional[CategoryRule]:
        for rule in self.rules:
            if rule.name == name:
                return rule
        return None

    def rule_for(self, skill: str) -> CategoryRule:
        for rule in self._rules:
            if rule.matches(skill):
                return rule
        return self._fallback

    def categorize(self, skill: str) -> str:
        return self.rule_for(skill).name
