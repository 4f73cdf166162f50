"""Markdown and JSON renderings of a lint report."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from skill_corpus.constants import SUMMARY_FILENAME
from skill_corpus.lint.models import LintReport
from skill_corpus.utils import now_stamp

CHECKS_PERFORMED = (
    "Valid YAML frontmatter (has `---` block with non-empty `name` and `description` fields)",
    "Minimum line count (per category, e.g. >=300 for dev/devops/qa, >=200 for planning)",
    "Sources & References section exists",
    "Minimum source URLs (per category, e.g. >=5 for dev/devops/qa, >=3 for planning)",
    "Code examples present (per category, e.g. >=3 code blocks for dev/devops/qa, >=1 for planning)",
    "No orphaned skills (referenced by at least 1 agent)",
    "Agent references valid (all agent skill refs point to existing skill dirs)",
    "Pipeline config matches (pipeline .json skills arrays match agent skills)",
    "Required sections exist per category",
    "Every fenced code block has a recognized language tag",
    "Every internal anchor link resolves to a heading in the same file",
    "Frontmatter `name` matches the skill directory",
)


def render_summary_markdown(
    report: LintReport, base_dir: Path, now: Optional[str] = None
) -> str:
    lines: list[str] = [
        "# Skill Structural Test Results",
        "",
        f"**Date:** {now or now_stamp()}",
        f"**Base directory:** {base_dir}",
        f"**Filter:** {report.filter_label}",
        "",
        "## Summary",
        "",
        "| Metric | Count |",
        "|--------|-------|",
        f"| Total tested | {report.total} |",
        f"| Passed | {report.passed} |",
        f"| Failed | {report.failed} |",
        f"| Skipped (utility) | {report.skipped} |",
        "",
        "## Global Checks",
        "",
        "| Check | Result |",
        "|-------|--------|",
    ]
    for result in report.global_results:
        lines.append(f"| {result.title} | {result.status.value.upper()} |")
    lines.append("")

    failed = report.failed_skills()
    if failed:
        lines.extend(["## Failed Skills", ""])
        for skill in failed:
            checks = ", ".join(result.check_id.value for result in skill.failures())
            lines.append(f"- {skill.name} ({skill.category}): {checks}")
        lines.append("")

    lines.extend(["## Checks Performed", ""])
    for index, text in enumerate(CHECKS_PERFORMED, start=1):
        lines.append(f"{index}. {text}")
    lines.append("")
    return "\n".join(lines)


def write_summary(report: LintReport, base_dir: Path, results_dir: Path) -> Path:
    results_dir.mkdir(parents=True, exist_ok=True)
    path = results_dir / SUMMARY_FILENAME
    path.write_text(render_summary_markdown(report, base_dir), encoding="utf-8")
    return path


def report_to_dict(report: LintReport) -> dict[str, Any]:
    return {
        "filter": report.filter_label,
        "ok": report.ok,
        "summary": report.summary(),
        "global": [result.as_dict() for result in report.global_results],
        "skills": [skill.as_dict() for skill in report.skills],
    }
