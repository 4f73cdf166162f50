"""Tests for agent definition parsing."""

from pathlib import Path

from skill_corpus.agents.parser import parse_agent, parse_skill_list


def test_parse_comma_separated_skills(tmp_path: Path) -> None:
    path = tmp_path / "rails-dev.md"
    path.write_text(
        "---\n"
        "name: rails-dev\n"
        "description: Rails developer\n"
        "model: sonnet\n"
        "skills: rails-models, rails-controllers ,  code-review-practices\n"
        "---\n"
        "\n"
        "You build Rails apps.\n",
        encoding="utf-8",
    )
    agent = parse_agent(path)
    assert agent.name == "rails-dev"
    assert agent.metadata.model == "sonnet"
    assert agent.skills == ["rails-models", "rails-controllers", "code-review-practices"]
    assert "You build Rails apps." in agent.content


def test_parse_list_skills_and_defaults(tmp_path: Path) -> None:
    path = tmp_path / "qa.md"
    path.write_text("---\nskills:\n  - testing-unit\n  - ''\n---\nBody\n", encoding="utf-8")
    agent = parse_agent(path)
    assert agent.metadata.name == "qa"
    assert agent.metadata.description == ""
    assert agent.skills == ["testing-unit"]


def test_parse_without_frontmatter(tmp_path: Path) -> None:
    path = tmp_path / "bare.md"
    path.write_text("# Bare agent\n", encoding="utf-8")
    agent = parse_agent(path)
    assert agent.skills == []
    assert agent.content == "# Bare agent\n"


def test_parse_skill_list_ignores_other_types() -> None:
    assert parse_skill_list(None) == []
    assert parse_skill_list(42) == []
    assert parse_skill_list("a,,b") == ["a", "b"]


def test_null_name_falls_back_to_file_stem(tmp_path: Path) -> None:
    path = tmp_path / "reviewer.md"
    path.write_text("---\nname:\nskills: review\n---\n", encoding="utf-8")
    agent = parse_agent(path)
    assert agent.metadata.name == "reviewer"
