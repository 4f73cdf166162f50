import sys
import json
from pathlib import Path
from typing import Any, Iterable

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()

DEV_SECTIONS = ("Overview", "Best Practices", "Anti-Patterns", "Sources & References")


def build_skill_text(
    name: str,
    description: str = "Reference guide",
    sections: Iterable[str] = DEV_SECTIONS,
    languages: Iterable[str] = ("ruby", "ruby", "yaml"),
    urls: int = 5,
    min_lines: int = 320,
    toc: bool = True,
) -> str:
    from skill_corpus.skills.markdown import slugify

    sections = list(sections)
    lines = ["---", f"name: {name}", f"description: {description}", "---", ""]
    lines += [f"# {name}", ""]
    if toc:
        lines += ["## Table of Contents", ""]
        lines += [f"- [{title}](#{slugify(title)})" for title in sections]
        lines.append("")

    for title in sections:
        lines += [f"## {title}", ""]
        if title == sections[0]:
            for language in languages:
                lines += [f"```{language}", "example = 1", "```", ""]
        if "Sources" in title:
            lines += [f"- https://example.com/docs/{index}" for index in range(urls)]
            lines.append("")

    filler = max(0, min_lines - len(lines))
    lines[-1:-1] = [f"Prose line {index}." for index in range(filler)]
    return "\n".join(lines) + "\n"


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("SKILL_CORPUS_ROOT", raising=False)
    monkeypatch.setattr(Path, "home", lambda: tmp_path)


@pytest.fixture
def corpus_root(tmp_path: Path) -> Path:
    root = tmp_path / "corpus"
    (root / "skills").mkdir(parents=True)
    return root


@pytest.fixture
def write_skill(corpus_root: Path):
    def _write(name: str, text: str | None = None, **kwargs: Any) -> Path:
        path = corpus_root / "skills" / name / "SKILL.md"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            text if text is not None else build_skill_text(name, **kwargs),
            encoding="utf-8",
        )
        return path

    return _write


@pytest.fixture
def write_agent(corpus_root: Path):
    def _write(name: str, skills: str | list[str], description: str = "") -> Path:
        path = corpus_root / "agents" / f"{name}.md"
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(skills, list):
            skills_line = "skills:\n" + "".join(f"  - {item}\n" for item in skills)
        else:
            skills_line = f"skills: {skills}\n"
        path.write_text(
            f"---\nname: {name}\ndescription: {description or name}\n{skills_line}---\n\nAgent body.\n",
            encoding="utf-8",
        )
        return path

    return _write


@pytest.fixture
def write_pipeline(corpus_root: Path):
    def _write(name: str, payload: Any) -> Path:
        path = corpus_root / "pipeline" / "agents" / f"{name}.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        text = payload if isinstance(payload, str) else json.dumps(payload)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()
