import logging
from pathlib import Path
from typing import Any, Dict, Optional

import click
from rich.console import Console

from skill_corpus.config import LintConfig
from skill_corpus.constants import INDEX_FILENAME, RESULTS_DIRNAME, ROOT_ENV_VAR
from skill_corpus.corpus import SkillCorpus
from skill_corpus.errors import CorpusError
from skill_corpus.index import build_index, index_entry, load_index, search, write_index
from skill_corpus.install import InstallService
from skill_corpus.lint.report import report_to_dict, write_summary
from skill_corpus.lint.service import LintService
from skill_corpus.logging_setup import setup_logging
from skill_corpus.skills.markdown import parse_markdown
from skill_corpus.tui import CorpusConsoleUI

logger = logging.getLogger(__name__)


def _corpus_from_obj(obj: Dict[str, Any]) -> SkillCorpus:
    return SkillCorpus(obj["root"])


def _load_config(corpus: SkillCorpus) -> LintConfig:
    try:
        return corpus.load_config()
    except CorpusError as exc:
        raise click.ClickException(str(exc))


def _utility_skills(corpus: SkillCorpus, config: LintConfig) -> list[str]:
    return [
        name
        for name in corpus.skills.list_names()
        if config.catalog.rule_for(name).utility
    ]


def _validate_category(config: LintConfig, category: Optional[str]) -> None:
    if category is None:
        return
    if config.catalog.get(category) is None:
        known = ", ".join(config.catalog.names())
        raise click.ClickException(f"Unknown category: {category} (known: {known})")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--root",
    type=click.Path(path_type=Path, file_okay=False),
    envvar=ROOT_ENV_VAR,
    default=".",
    show_default=True,
    help="Corpus root containing skills/ (and optionally agents/, pipeline/).",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, root: Path, verbose: bool) -> None:
    """Lint, index and search a skills/<name>/SKILL.md corpus."""
    setup_logging("DEBUG" if verbose else "WARNING")
    ctx.obj = {"root": root, "verbose": verbose}


@cli.command(help="Run structural quality checks on skills.")
@click.argument("skill", required=False)
@click.option("--category", help="Only check skills in this category.")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"], case_sensitive=False),
    default="table",
    show_default=True,
)
@click.option(
    "--summary/--no-summary",
    default=True,
    show_default=True,
    help="Write SUMMARY.md into the results directory.",
)
@click.option(
    "--results-dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help=f"Where SUMMARY.md goes (default: <root>/{RESULTS_DIRNAME}).",
)
@click.pass_obj
def lint(
    obj: Dict[str, Any],
    skill: Optional[str],
    category: Optional[str],
    output_format: str,
    summary: bool,
    results_dir: Optional[Path],
) -> None:
    ui = CorpusConsoleUI(Console())
    corpus = _corpus_from_obj(obj)
    config = _load_config(corpus)
    _validate_category(config, category)

    try:
        report = LintService(corpus, config).lint(skill=skill, category=category)
    except CorpusError as exc:
        raise click.ClickException(str(exc))

    if output_format.lower() == "json":
        ui.render_lint_json(report_to_dict(report))
    else:
        ui.render_lint(report, base_dir=corpus.root)

    if summary:
        target = results_dir if results_dir is not None else corpus.root / RESULTS_DIRNAME
        path = write_summary(report, base_dir=corpus.root, results_dir=target)
        logger.info("summary written to %s", path)
        if output_format.lower() != "json":
            ui.render_summary_written(path)

    if not report.ok:
        raise click.exceptions.Exit(1)


@cli.command("list", help="List skills with category and size.")
@click.option("--category", help="Only list skills in this category.")
@click.pass_obj
def list_skills(obj: Dict[str, Any], category: Optional[str]) -> None:
    ui = CorpusConsoleUI(Console())
    corpus = _corpus_from_obj(obj)
    config = _load_config(corpus)
    _validate_category(config, category)

    try:
        entries = build_index(corpus, config.catalog)
    except CorpusError as exc:
        raise click.ClickException(str(exc))
    if category is not None:
        entries = [entry for entry in entries if entry.category == category]
    ui.render_skill_list(entries)


@cli.command(help="Show metadata, sections and referencing agents of one skill.")
@click.argument("name")
@click.pass_obj
def show(obj: Dict[str, Any], name: str) -> None:
    ui = CorpusConsoleUI(Console())
    corpus = _corpus_from_obj(obj)
    config = _load_config(corpus)
    try:
        skill = corpus.skills.get_skill(name)
        agents = corpus.agents.referencing_agents(name)
    except CorpusError as exc:
        raise click.ClickException(str(exc))

    document = parse_markdown(skill.content, first_line=skill.body_offset)
    ui.render_skill(
        index_entry(skill, corpus.root, config.catalog),
        agents=agents,
        toc=document.table_of_contents(),
    )


@cli.command(help="Write a JSON index of all skills.")
@click.option(
    "--output",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help=f"Index file (default: <root>/{INDEX_FILENAME}).",
)
@click.pass_obj
def index(obj: Dict[str, Any], output: Optional[Path]) -> None:
    ui = CorpusConsoleUI(Console())
    corpus = _corpus_from_obj(obj)
    config = _load_config(corpus)

    try:
        entries = build_index(corpus, config.catalog)
    except CorpusError as exc:
        raise click.ClickException(str(exc))
    target = output if output is not None else corpus.root / INDEX_FILENAME
    write_index(entries, target)
    ui.render_index_written(target, len(entries))


@cli.command("search", help="Search skills by name, description and headings.")
@click.argument("query", nargs=-1, required=True)
@click.option("--limit", type=click.IntRange(min=1), default=10, show_default=True)
@click.option(
    "--index",
    "index_path",
    type=click.Path(path_type=Path, dir_okay=False, exists=True),
    default=None,
    help="Search a previously written index instead of scanning the corpus.",
)
@click.pass_obj
def search_skills(
    obj: Dict[str, Any], query: tuple[str, ...], limit: int, index_path: Optional[Path]
) -> None:
    ui = CorpusConsoleUI(Console())
    corpus = _corpus_from_obj(obj)

    try:
        if index_path is not None:
            entries = load_index(index_path)
        else:
            entries = build_index(corpus, _load_config(corpus).catalog)
    except CorpusError as exc:
        raise click.ClickException(str(exc))

    text = " ".join(query)
    ui.render_search(text, search(entries, text, limit=limit))


@cli.command(help="Show category rules and thresholds.")
@click.pass_obj
def categories(obj: Dict[str, Any]) -> None:
    ui = CorpusConsoleUI(Console())
    config = _load_config(_corpus_from_obj(obj))
    ui.render_categories(config.catalog.rules)


def _install(
    ui: CorpusConsoleUI,
    corpus: SkillCorpus,
    config: LintConfig,
    names: list[str],
    target: Path,
    utility: bool,
) -> None:
    try:
        result = InstallService(corpus).install(
            names, target, always=_utility_skills(corpus, config) if utility else ()
        )
    except CorpusError as exc:
        raise click.ClickException(str(exc))
    ui.render_install(result)


_utility_option = click.option(
    "--utility/--no-utility",
    default=True,
    show_default=True,
    help="Include utility skills, which every agent set gets.",
)


@cli.command(help="Install agents, their pipeline configs and skills into TARGET.")
@click.argument("target", type=click.Path(path_type=Path, file_okay=False))
@click.argument("names", nargs=-1, required=True)
@_utility_option
@click.pass_obj
def install(obj: Dict[str, Any], target: Path, names: tuple[str, ...], utility: bool) -> None:
    ui = CorpusConsoleUI(Console())
    corpus = _corpus_from_obj(obj)
    config = _load_config(corpus)
    _install(ui, corpus, config, list(names), target, utility)


@cli.group(help="Inspect agent definitions and the skills they load.")
def agents() -> None:
    pass


@agents.command("list", help="List agents with their skills.")
@click.pass_obj
def agents_list(obj: Dict[str, Any]) -> None:
    ui = CorpusConsoleUI(Console())
    corpus = _corpus_from_obj(obj)
    try:
        rows = [
            {
                "name": agent.name,
                "description": agent.metadata.description,
                "skills": agent.skills,
                "lines": corpus.agents.skill_lines(agent, corpus.skills),
            }
            for agent in corpus.agents.list_agents()
        ]
    except CorpusError as exc:
        raise click.ClickException(str(exc))
    ui.render_agents(rows)


@agents.command("resolve", help="Resolve the deduplicated skill set for agents.")
@click.argument("names", nargs=-1, required=True)
@_utility_option
@click.pass_obj
def agents_resolve(obj: Dict[str, Any], names: tuple[str, ...], utility: bool) -> None:
    ui = CorpusConsoleUI(Console())
    corpus = _corpus_from_obj(obj)
    config = _load_config(corpus)

    try:
        skills = corpus.agents.resolve_skills(
            names, always=_utility_skills(corpus, config) if utility else ()
        )
    except CorpusError as exc:
        raise click.ClickException(str(exc))
    ui.render_resolved_skills(list(names), skills)


@agents.command("pick", help="Interactively pick agents and resolve their skills.")
@_utility_option
@click.option(
    "--install",
    "install_target",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Install the picked agents into this directory.",
)
@click.pass_obj
def agents_pick(obj: Dict[str, Any], utility: bool, install_target: Optional[Path]) -> None:
    from skill_corpus.tui.agent_selector import AgentSelectorApp

    ui = CorpusConsoleUI(Console())
    corpus = _corpus_from_obj(obj)
    config = _load_config(corpus)

    try:
        available = corpus.agents.list_agents()
    except CorpusError as exc:
        raise click.ClickException(str(exc))
    if not available:
        ui.render_agents([])
        return

    selected = AgentSelectorApp(available).run() or []
    if not selected:
        raise click.ClickException("No agents selected.")

    if install_target is not None:
        _install(ui, corpus, config, selected, install_target, utility)
        return

    skills = corpus.agents.resolve_skills(
        selected, always=_utility_skills(corpus, config) if utility else ()
    )
    ui.render_resolved_skills(selected, skills)


def main() -> int:
    try:
        code = cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return 2
    return code if isinstance(code, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
