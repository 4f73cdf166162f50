"""Optional per-corpus lint configuration (``skill-corpus.yaml``)."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml
from jsonschema import Draft202012Validator

from skill_corpus.categories import CategoryCatalog, CategoryRule
from skill_corpus.constants import CONFIG_FILENAMES, KNOWN_LANGUAGES
from skill_corpus.errors import InvalidConfigError
from skill_corpus.schemas import load_schema
from skill_corpus.utils import format_schema_error, read_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LintConfig:
    catalog: CategoryCatalog = field(default_factory=CategoryCatalog)
    languages: frozenset[str] = KNOWN_LANGUAGES
    require_language_tags: bool = True
    check_toc_anchors: bool = True
    disabled_checks: frozenset[str] = frozenset()
    source_path: Optional[Path] = None

    def is_enabled(self, check_id: str) -> bool:
        return check_id not in self.disabled_checks


def find_config(root: Path) -> Optional[Path]:
    for filename in CONFIG_FILENAMES:
        candidate = root / filename
        if candidate.is_file():
            return candidate
    return None


def load_config(root: Path) -> LintConfig:
    path = find_config(root)
    if path is None:
        return LintConfig()

    logger.debug("loading lint config from %s", path)
    try:
        raw = yaml.safe_load(read_text(path))
    except yaml.YAMLError as exc:
        raise InvalidConfigError(path, f"invalid YAML: {exc}") from exc

    if raw is None:
        return LintConfig(source_path=path)

    validator = Draft202012Validator(load_schema("lint_config"))
    error = next(iter(validator.iter_errors(raw)), None)
    if error is not None:
        raise InvalidConfigError(path, format_schema_error(error))

    return config_from_dict(raw, source_path=path)


def config_from_dict(raw: dict[str, Any], source_path: Optional[Path] = None) -> LintConfig:
    catalog = CategoryCatalog()
    if "categories" in raw:
        catalog = CategoryCatalog(_category_rule(item) for item in raw["categories"])

    extra_languages = {str(item).lower() for item in raw.get("languages", [])}
    return LintConfig(
        catalog=catalog,
        languages=KNOWN_LANGUAGES | frozenset(extra_languages),
        require_language_tags=bool(raw.get("require_language_tags", True)),
        check_toc_anchors=bool(raw.get("check_toc_anchors", True)),
        disabled_checks=frozenset(str(item) for item in raw.get("disabled_checks", [])),
        source_path=source_path,
    )


def _category_rule(item: dict[str, Any]) -> CategoryRule:
    defaults = CategoryRule(name=item["name"])
    return CategoryRule(
        name=item["name"],
        patterns=tuple(item.get("patterns", ())),
        min_lines=item.get("min_lines", defaults.min_lines),
        min_sources=item.get("min_sources", defaults.min_sources),
        min_code_blocks=item.get("min_code_blocks", defaults.min_code_blocks),
        required_sections=tuple(
            item.get("required_sections", defaults.required_sections)
        ),
        utility=bool(item.get("utility", False)),
    )
