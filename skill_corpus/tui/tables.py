from rich.markup import escape
from rich.table import Column, Table

from skill_corpus.categories import CategoryRule
from skill_corpus.index import SearchHit, SkillIndexEntry
from skill_corpus.install import InstallResult
from skill_corpus.lint.models import CheckResult, LintReport, SkillReport
from skill_corpus.tui.enums import CHECK_STATUS_STYLE, UIStyle


def _status_text(result: CheckResult) -> str:
    style = CHECK_STATUS_STYLE.get(result.status, UIStyle.WHITE.value)
    label = result.status.value.upper()
    return f"[{style}]{label}[/{style}]"


class LintTable:
    @staticmethod
    def summary_block(report: LintReport):
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Filter", escape(report.filter_label))
        table.add_row("Tested", str(report.total))
        table.add_row("Passed", f"[{UIStyle.GREEN.value}]{report.passed}[/{UIStyle.GREEN.value}]")
        table.add_row("Failed", f"[{UIStyle.RED.value}]{report.failed}[/{UIStyle.RED.value}]")
        if report.skipped:
            table.add_row(
                "Skipped (utility)",
                f"[{UIStyle.YELLOW.value}]{report.skipped}[/{UIStyle.YELLOW.value}]",
            )
        return table

    @staticmethod
    def checks_table(results: list[CheckResult]) -> Table:
        table = Table(
            Column(header="Check", width=34),
            Column(header="Status", width=6),
            Column(header="Detail", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for result in results:
            table.add_row(escape(result.title), _status_text(result), escape(result.detail))
        return table

    @staticmethod
    def skill_title(report: SkillReport) -> str:
        style = UIStyle.GREEN.value if report.passed else UIStyle.RED.value
        return f"[{style}]{escape(report.name)}[/{style}] (category: {report.category})"


class SkillTable:
    @staticmethod
    def list_table(entries: list[SkillIndexEntry]) -> Table:
        table = Table(
            Column(header="Skill", width=28),
            Column(header="Category", width=10),
            Column(header="Lines", width=6, justify="right"),
            Column(header="Description", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for entry in entries:
            table.add_row(
                escape(entry.name),
                entry.category,
                str(entry.line_count),
                escape(entry.description),
            )
        return table

    @staticmethod
    def detail_block(entry: SkillIndexEntry, agents: list[str]):
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column(overflow="fold")
        table.add_row("Name", escape(entry.name))
        table.add_row("Category", entry.category)
        table.add_row("Path", escape(entry.path))
        table.add_row("Description", escape(entry.description) or "(none)")
        table.add_row("Lines", str(entry.line_count))
        table.add_row("URLs", str(entry.url_count))
        table.add_row("Languages", ", ".join(entry.languages) or "(none)")
        table.add_row("Agents", escape(", ".join(agents)) or "(none)")
        return table

    @staticmethod
    def headings_table(entry: SkillIndexEntry) -> Table:
        table = Table(
            Column(header="#", width=4, justify="right"),
            Column(header="Heading", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for position, heading in enumerate(entry.headings, start=1):
            table.add_row(str(position), escape(heading))
        return table


class SearchTable:
    @staticmethod
    def hits_table(hits: list[SearchHit]) -> Table:
        table = Table(
            Column(header="Score", width=6, justify="right"),
            Column(header="Skill", width=28),
            Column(header="Category", width=10),
            Column(header="Description", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for hit in hits:
            table.add_row(
                str(hit.score),
                escape(hit.entry.name),
                hit.entry.category,
                escape(hit.entry.description),
            )
        return table


class CategoryTable:
    @staticmethod
    def rules_table(rules: list[CategoryRule]) -> Table:
        table = Table(
            Column(header="Category", width=10),
            Column(header="Patterns", overflow="fold"),
            Column(header="Lines", width=6, justify="right"),
            Column(header="URLs", width=5, justify="right"),
            Column(header="Blocks", width=6, justify="right"),
            Column(header="Required sections", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for rule in rules:
            name = f"{rule.name} (utility)" if rule.utility else rule.name
            table.add_row(
                name,
                escape(", ".join(rule.patterns)) or "(fallback)",
                str(rule.min_lines),
                str(rule.min_sources),
                str(rule.min_code_blocks),
                escape(", ".join(rule.required_sections)) or "-",
            )
        return table


class AgentTable:
    @staticmethod
    def agents_table(items: list[dict]) -> Table:
        table = Table(
            Column(header="Agent", width=24),
            Column(header="Skills", overflow="fold"),
            Column(header="Lines", width=7, justify="right"),
            Column(header="Description", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for item in items:
            skills = item.get("skills", [])
            table.add_row(
                escape(item["name"]),
                escape(", ".join(skills)) if skills else "(none)",
                str(item.get("lines", 0)),
                escape(item.get("description", "")),
            )
        return table


class InstallTable:
    @staticmethod
    def summary_block(result: InstallResult):
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column(overflow="fold")
        for label, names in (
            ("Agents", result.agents),
            ("Pipeline configs", result.pipeline_configs),
            ("Skills", result.skills),
        ):
            listed = escape(", ".join(names)) if names else "(none)"
            table.add_row(label, f"{len(names)}: {listed}")
        return table
