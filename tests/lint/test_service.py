"""Tests for the lint service and its checks."""

from pathlib import Path

from skill_corpus.config import LintConfig
from skill_corpus.corpus import SkillCorpus
from skill_corpus.lint.models import CheckId, CheckResult, CheckStatus, SkillReport
from skill_corpus.lint.service import LintService


def _lint(root: Path, config: LintConfig | None = None, **kwargs):
    return LintService(SkillCorpus(root), config).lint(**kwargs)


def _result(report: SkillReport, check_id: CheckId) -> CheckResult:
    return next(result for result in report.results if result.check_id == check_id)


def _global(report, check_id: CheckId) -> CheckResult:
    return next(result for result in report.global_results if result.check_id == check_id)


def test_clean_skill_passes(corpus_root: Path, write_skill, write_agent) -> None:
    write_skill("rails-models")
    write_agent("backend", "rails-models")

    report = _lint(corpus_root)

    assert report.ok
    assert report.summary() == {"total": 1, "passed": 1, "failed": 0, "skipped": 0}
    skill = report.skills[0]
    assert skill.category == "dev"
    assert all(result.status == CheckStatus.PASS for result in skill.results)
    assert _result(skill, CheckId.AGENT_REFERENCE).detail == "backend"
    assert _global(report, CheckId.AGENT_REFS).status == CheckStatus.PASS
    assert _global(report, CheckId.PIPELINE_CONFIG).status == CheckStatus.SKIP


def test_agent_checks_skip_without_agents_dir(corpus_root: Path, write_skill) -> None:
    write_skill("rails-models")

    report = _lint(corpus_root)

    assert report.ok
    assert _result(report.skills[0], CheckId.AGENT_REFERENCE).status == CheckStatus.SKIP
    assert _global(report, CheckId.AGENT_REFS).status == CheckStatus.SKIP


def test_orphaned_skill_fails(corpus_root: Path, write_skill, write_agent) -> None:
    write_skill("rails-models")
    write_skill("rails-views")
    write_agent("backend", "rails-models")

    report = _lint(corpus_root)

    assert not report.ok
    assert [skill.name for skill in report.failed_skills()] == ["rails-views"]
    orphan = _result(report.skills[1], CheckId.AGENT_REFERENCE)
    assert orphan.detail == "not referenced by any agent"


def test_agent_reference_is_exact_match(corpus_root: Path, write_skill, write_agent) -> None:
    write_skill("rails-models")
    write_skill("rails")
    write_agent("backend", "rails-models")

    report = _lint(corpus_root, skill="rails")

    assert _result(report.skills[0], CheckId.AGENT_REFERENCE).failed


def test_missing_frontmatter(corpus_root: Path, write_skill) -> None:
    write_skill("api-design", text="# API design\n\nNo metadata.\n")

    skill = _lint(corpus_root).skills[0]

    frontmatter = _result(skill, CheckId.FRONTMATTER)
    assert frontmatter.failed
    assert frontmatter.detail == "missing frontmatter block"
    assert _result(skill, CheckId.NAME_MATCHES_DIRECTORY).status == CheckStatus.SKIP


def test_missing_description(corpus_root: Path, write_skill) -> None:
    write_skill("api-design", text="---\nname: api-design\n---\n\nBody.\n")

    skill = _lint(corpus_root).skills[0]

    assert _result(skill, CheckId.FRONTMATTER).detail == "missing description"


def test_thresholds_follow_category(corpus_root: Path, write_skill) -> None:
    write_skill(
        "rails-models",
        min_lines=100,
        urls=2,
        languages=("ruby",),
    )

    skill = _lint(corpus_root).skills[0]

    line_count = _result(skill, CheckId.LINE_COUNT)
    assert line_count.failed
    assert line_count.detail.endswith("need >= 300")
    assert line_count.title == "Line count (>= 300)"
    assert _result(skill, CheckId.SOURCE_URLS).detail == "2 URLs, need >= 5"
    assert _result(skill, CheckId.CODE_BLOCKS).detail == "1 code blocks, need >= 3"


def test_planning_thresholds(corpus_root: Path, write_skill) -> None:
    write_skill(
        "api-design",
        sections=("Overview", "Sources & References"),
        languages=("yaml",),
        urls=3,
        min_lines=200,
    )

    report = _lint(corpus_root)

    assert report.ok
    assert report.skills[0].category == "planning"


def test_missing_required_sections(corpus_root: Path, write_skill) -> None:
    write_skill("rails-models", sections=("Overview", "Sources & References"))

    skill = _lint(corpus_root).skills[0]

    required = _result(skill, CheckId.REQUIRED_SECTIONS)
    assert required.failed
    assert required.messages == [
        "Missing section: Best Practices",
        "Missing section: Anti-Patterns",
    ]
    assert _result(skill, CheckId.SOURCES_SECTION).status == CheckStatus.PASS


def test_missing_sources_section(corpus_root: Path, write_skill) -> None:
    write_skill("api-design", sections=("Overview", "Notes"), urls=0)

    skill = _lint(corpus_root).skills[0]

    assert _result(skill, CheckId.SOURCES_SECTION).failed
    assert _result(skill, CheckId.REQUIRED_SECTIONS).messages == [
        "Missing section: Sources & References"
    ]


def test_language_tags(corpus_root: Path, write_skill) -> None:
    text = (
        "---\nname: task-breakdown\ndescription: Split work\n---\n"
        "\n"
        "```\nplain\n```\n"
        "\n"
        "```brainfuck\n+++\n```\n"
        "\n"
        "```yaml\nkey: value\n```\n"
    )
    write_skill("task-breakdown", text=text)

    skill = _lint(corpus_root).skills[0]

    tags = _result(skill, CheckId.LANGUAGE_TAGS)
    assert tags.failed
    assert tags.messages == [
        "line 6: missing language tag",
        "line 10: unrecognized language 'brainfuck'",
    ]


def test_language_tags_from_config(corpus_root: Path, write_skill) -> None:
    write_skill("rails-models", languages=("ruby", "ruby", "prisma"))
    (corpus_root / "skill-corpus.yaml").write_text("languages: [prisma]\n", encoding="utf-8")

    skill = _lint(corpus_root).skills[0]

    assert _result(skill, CheckId.LANGUAGE_TAGS).status == CheckStatus.PASS


def test_unclosed_fence(corpus_root: Path, write_skill) -> None:
    text = "---\nname: task-breakdown\ndescription: Split work\n---\n\n```bash\necho hi\n"
    write_skill("task-breakdown", text=text)

    skill = _lint(corpus_root).skills[0]

    assert _result(skill, CheckId.CODE_BLOCKS).detail == "unclosed code fence opened at line 6"


def test_broken_anchor(corpus_root: Path, write_skill) -> None:
    text = (
        "---\nname: task-breakdown\ndescription: Split work\n---\n"
        "\n"
        "## Contents\n"
        "\n"
        "- [Steps](#steps)\n"
        "- [Missing](#nowhere)\n"
        "\n"
        "## Steps\n"
    )
    write_skill("task-breakdown", text=text)

    skill = _lint(corpus_root).skills[0]

    anchors = _result(skill, CheckId.TOC_ANCHORS)
    assert anchors.failed
    assert anchors.messages == ["line 9: #nowhere"]


def test_name_mismatch(corpus_root: Path, write_skill) -> None:
    path = write_skill("rails-models")
    text = path.read_text(encoding="utf-8")
    path.write_text(text.replace("name: rails-models", "name: rails-model", 1), encoding="utf-8")

    skill = _lint(corpus_root).skills[0]

    mismatch = _result(skill, CheckId.NAME_MATCHES_DIRECTORY)
    assert mismatch.failed
    assert "rails-model'" in mismatch.detail


def test_utility_skill_runs_document_checks_only(corpus_root: Path, write_skill) -> None:
    write_skill("pipeline-status", text="---\nname: pipeline-status\ndescription: Status\n---\n\nShort.\n")

    report = _lint(corpus_root)

    skill = report.skills[0]
    assert skill.utility
    assert [result.check_id for result in skill.results] == [
        CheckId.FRONTMATTER,
        CheckId.LANGUAGE_TAGS,
        CheckId.TOC_ANCHORS,
    ]
    assert report.summary() == {"total": 1, "passed": 1, "failed": 0, "skipped": 1}


def test_missing_single_skill(corpus_root: Path) -> None:
    report = _lint(corpus_root, skill="ghost")

    assert report.filter_label == "Single skill: ghost"
    skill = report.skills[0]
    assert [result.check_id for result in skill.results] == [CheckId.EXISTS]
    assert skill.results[0].detail == "SKILL.md not found"
    assert not report.ok


def test_category_filter(corpus_root: Path, write_skill) -> None:
    write_skill("rails-models")
    write_skill("aws-lambda", sections=("Best Practices", "Sources & References"))

    report = _lint(corpus_root, category="devops")

    assert report.filter_label == "Category: devops"
    assert [skill.name for skill in report.skills] == ["aws-lambda"]


def test_disabled_checks_are_not_run(corpus_root: Path, write_skill, write_agent) -> None:
    write_skill("rails-models")
    write_skill("rails-views")
    write_agent("backend", "rails-models")
    (corpus_root / "skill-corpus.yaml").write_text(
        "disabled_checks: [agent-reference, pipeline-config]\n", encoding="utf-8"
    )

    report = _lint(corpus_root)

    assert report.ok
    assert [result.check_id for result in report.global_results] == [CheckId.AGENT_REFS]
    ids = {result.check_id for skill in report.skills for result in skill.results}
    assert CheckId.AGENT_REFERENCE not in ids


def test_agent_refs_to_missing_skill(corpus_root: Path, write_skill, write_agent) -> None:
    write_skill("rails-models")
    write_agent("backend", "rails-models, ghost")

    report = _lint(corpus_root)

    refs = _global(report, CheckId.AGENT_REFS)
    assert refs.failed
    assert refs.messages == ["Agent backend references non-existent skill: ghost"]
    assert report.passed == 1
    assert not report.ok


def test_pipeline_config(corpus_root: Path, write_skill, write_agent, write_pipeline) -> None:
    write_skill("rails-models")
    write_skill("rails-views")
    write_agent("backend", "rails-views, rails-models")
    write_pipeline("backend", {"agent": "backend", "skills": ["rails-models", "rails-views"]})
    write_pipeline("frontend", {"agent": "frontend", "skills": []})
    write_pipeline("qa", {"agent": "backend", "skills": ["rails-models"]})
    write_pipeline("standalone", {"skills": ["rails-models"]})

    pipeline = _global(_lint(corpus_root), CheckId.PIPELINE_CONFIG)

    assert pipeline.failed
    assert pipeline.messages == [
        "Pipeline frontend references non-existent agent: frontend",
        "Pipeline qa skills mismatch with agent backend: "
        "pipeline [rails-models] != agent [rails-models rails-views]",
    ]


def test_pipeline_config_invalid_json(corpus_root: Path, write_skill, write_pipeline) -> None:
    write_skill("rails-models")
    write_pipeline("broken", "{oops")

    pipeline = _global(_lint(corpus_root), CheckId.PIPELINE_CONFIG)

    assert pipeline.failed
    assert pipeline.messages[0].startswith("Invalid JSON format")


def test_non_string_frontmatter_fields_fail(corpus_root: Path, write_skill) -> None:
    write_skill("api-design", text="---\nname: [a, b]\ndescription: {x: 1}\n---\n\nBody.\n")

    skill = _lint(corpus_root).skills[0]

    frontmatter = _result(skill, CheckId.FRONTMATTER)
    assert frontmatter.failed
    assert frontmatter.detail == "name is not a string, description is not a string"


def test_unreadable_skill_is_reported(corpus_root: Path, write_skill) -> None:
    write_skill("rails-models")
    path = write_skill("rails-views")
    path.write_bytes(path.read_bytes() + b"\xff\xfe")

    report = _lint(corpus_root)

    assert [skill.name for skill in report.failed_skills()] == ["rails-views"]
    broken = report.skills[1].results
    assert [result.check_id for result in broken] == [CheckId.EXISTS]
    assert broken[0].detail.startswith("File is not valid UTF-8")


def test_anchor_link_in_heading_is_checked(corpus_root: Path, write_skill) -> None:
    text = (
        "---\nname: task-breakdown\ndescription: Split work\n---\n"
        "\n"
        "## Steps [back](#nowhere)\n"
    )
    write_skill("task-breakdown", text=text)

    skill = _lint(corpus_root).skills[0]

    assert _result(skill, CheckId.TOC_ANCHORS).messages == ["line 6: #nowhere"]
