import json
from pathlib import Path
from typing import Any

from rich.console import Console

from skill_corpus.categories import CategoryRule
from skill_corpus.index import SearchHit, SkillIndexEntry
from skill_corpus.install import InstallResult
from skill_corpus.lint.models import LintReport
from skill_corpus.skills.markdown import Link
from skill_corpus.tui.enums import UIStyle
from skill_corpus.tui.sections import UISection
from skill_corpus.tui.tables import (
    AgentTable,
    CategoryTable,
    InstallTable,
    LintTable,
    SearchTable,
    SkillTable,
)
from skill_corpus.utils import compact_home_path


class CorpusConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_lint(self, report: LintReport, base_dir: Path) -> None:
        self.console.print(
            UISection.wrap(
                "skill structural checks",
                LintTable.summary_block(report),
                style=UIStyle.BLUE.value,
                subtitle=compact_home_path(base_dir),
            )
        )

        if report.global_results:
            self.console.print(
                UISection.wrap(
                    "global checks",
                    LintTable.checks_table(report.global_results),
                    style=UIStyle.CYAN.value,
                )
            )
            for result in report.global_results:
                if result.failed and result.messages:
                    self.console.print(
                        UISection.bullets(result.title, result.messages, style=UIStyle.RED.value)
                    )

        for skill in report.skills:
            style = UIStyle.GREEN.value if skill.passed else UIStyle.RED.value
            self.console.print(
                UISection.wrap(
                    LintTable.skill_title(skill),
                    LintTable.checks_table(skill.results),
                    style=style,
                    subtitle="utility: frontmatter and document checks only" if skill.utility else None,
                )
            )
            for result in skill.failures():
                if result.messages:
                    self.console.print(
                        UISection.bullets(
                            f"{skill.name}: {result.title}",
                            result.messages,
                            style=UIStyle.RED.value,
                        )
                    )

        failed = report.failed_skills()
        if failed:
            self.console.print(
                UISection.bullets(
                    "failed skills",
                    [f"{item.name} ({item.category})" for item in failed],
                    style=UIStyle.RED.value,
                )
            )

    def render_lint_json(self, payload: dict[str, Any]) -> None:
        self.console.out(json.dumps(payload, indent=2), highlight=False)

    def render_summary_written(self, path: Path) -> None:
        self.console.print(
            UISection.wrap(
                "summary",
                f"Results written to: {compact_home_path(path)}",
                style=UIStyle.DIM.value,
            )
        )

    def render_skill_list(self, entries: list[SkillIndexEntry]) -> None:
        if not entries:
            self.console.print(
                UISection.wrap("skills", "No skills found.", style=UIStyle.YELLOW.value)
            )
            return
        self.console.print(
            UISection.wrap(
                f"skills ({len(entries)})",
                SkillTable.list_table(entries),
                style=UIStyle.BLUE.value,
            )
        )

    def render_skill(
        self,
        entry: SkillIndexEntry,
        agents: list[str],
        toc: list[Link],
    ) -> None:
        self.console.print(
            UISection.wrap(
                "skill", SkillTable.detail_block(entry, agents), style=UIStyle.BLUE.value
            )
        )
        if toc:
            self.console.print(
                UISection.bullets(
                    "table of contents",
                    [f"{link.text} ({link.target})" for link in toc],
                    style=UIStyle.CYAN.value,
                )
            )
        if entry.headings:
            self.console.print(
                UISection.wrap(
                    "sections", SkillTable.headings_table(entry), style=UIStyle.CYAN.value
                )
            )

    def render_index_written(self, path: Path, count: int) -> None:
        self.console.print(
            UISection.wrap(
                "index",
                f"Indexed {count} skills into {compact_home_path(path)}",
                style=UIStyle.GREEN.value,
            )
        )

    def render_search(self, query: str, hits: list[SearchHit]) -> None:
        if not hits:
            self.console.print(
                UISection.wrap(
                    "search", f"No skills match: {query}", style=UIStyle.YELLOW.value
                )
            )
            return
        self.console.print(
            UISection.wrap(
                f"search: {query}", SearchTable.hits_table(hits), style=UIStyle.BLUE.value
            )
        )

    def render_categories(self, rules: list[CategoryRule]) -> None:
        self.console.print(
            UISection.wrap(
                "categories", CategoryTable.rules_table(rules), style=UIStyle.BLUE.value
            )
        )

    def render_agents(self, items: list[dict]) -> None:
        if not items:
            self.console.print(
                UISection.wrap("agents", "No agents found.", style=UIStyle.YELLOW.value)
            )
            return
        self.console.print(
            UISection.wrap("agents", AgentTable.agents_table(items), style=UIStyle.BLUE.value)
        )

    def render_resolved_skills(self, agents: list[str], skills: list[str]) -> None:
        body = "\n".join(skills) if skills else "(no skills)"
        self.console.print(
            UISection.wrap(
                f"skills for {', '.join(agents)} ({len(skills)})",
                body,
                style=UIStyle.GREEN.value,
            )
        )

    def render_install(self, result: InstallResult) -> None:
        self.console.print(
            UISection.wrap(
                f"installed to {compact_home_path(result.target)}",
                InstallTable.summary_block(result),
                style=UIStyle.GREEN.value,
            )
        )
        if result.missing_skills:
            self.console.print(
                UISection.bullets(
                    "skills without a directory",
                    result.missing_skills,
                    style=UIStyle.YELLOW.value,
                )
            )
